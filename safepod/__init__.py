#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

"""
Fixed-size binary codecs for plain-old-data values.

Every type built from sized scalars, fixed-length arrays, products and tagged unions has a byte size known from the type
alone, and encodes to and decodes from exactly that many bytes in little-endian or big-endian order:

>>> from safepod import ByteOrder, make_pod_type, f32, i8
>>> pod_type = make_pod_type(tuple[i8, f32])
>>> pod_type.SIZE
5
>>> buf = bytearray(pod_type.SIZE)
>>> pod_type.encode((1, 1.5), buf, ByteOrder.LITTLE)
Ok(5)
>>> pod_type.decode(buf, ByteOrder.LITTLE)
Ok((1, 1.5))
>>> pod_type.decode(buf[:4], ByteOrder.LITTLE)
Err(OutOfSpaceError('not enough space: 5 bytes required, 4 available'))
"""

from safepod.pod_types import EnumConfig, PodType, make_pod_type, pod_enum, resolve_enum_config, zeroed
from safepod.serialization import (
    Buffer,
    ByteOrder,
    MutableBuffer,
    OutOfRangeError,
    OutOfSpaceError,
    PodConfigError,
    PodError,
    SerializationError,
)
from safepod.types import Array, f32, f64, i8, i16, i32, i64, i128, u8, u16, u32, u64, u128
from safepod.utils.result import Err, Ok, Result
from safepod.version import __version__

__all__ = [
    'Array',
    'Buffer',
    'ByteOrder',
    'EnumConfig',
    'Err',
    'MutableBuffer',
    'Ok',
    'OutOfRangeError',
    'OutOfSpaceError',
    'PodConfigError',
    'PodError',
    'PodType',
    'Result',
    'SerializationError',
    'f32',
    'f64',
    'i8',
    'i16',
    'i32',
    'i64',
    'i128',
    'make_pod_type',
    'pod_enum',
    'resolve_enum_config',
    'u8',
    'u16',
    'u32',
    'u64',
    'u128',
    'zeroed',
    '__version__',
]
