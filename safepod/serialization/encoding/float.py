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
This module implements IEEE 754 binary32 and binary64 encoding with a parametrized byte order.

>>> buf = bytearray(4)
>>> encode_float(buf, 1.5, length=4, byteorder=ByteOrder.LITTLE)
Ok(4)
>>> list(buf)
[0, 0, 192, 63]
>>> decode_float(bytes([63, 192, 0, 0]), length=4, byteorder=ByteOrder.BIG)
Ok(1.5)
>>> decode_float(bytes(7), length=8, byteorder=ByteOrder.BIG)
Err(OutOfSpaceError('not enough space: 8 bytes required, 7 available'))
"""

import struct

from safepod.serialization.buffer import read_window, write_window
from safepod.serialization.exceptions import PodError
from safepod.serialization.types import Buffer, ByteOrder, MutableBuffer
from safepod.utils.result import Ok, Result, propagate_result

_FORMAT_BY_LENGTH = {
    4: 'f',
    8: 'd',
}


def _struct_format(length: int, byteorder: ByteOrder) -> str:
    try:
        code = _FORMAT_BY_LENGTH[length]
    except KeyError:
        raise ValueError(f'unsupported float length: {length}')
    return byteorder.struct_prefix + code


@propagate_result
def encode_float(buffer: MutableBuffer, value: float, *, length: int, byteorder: ByteOrder) -> Result[int, PodError]:
    """ Encode a float using 4 or 8 bytes.

    A finite value too large for binary32 raises `ValueError`, codecs check ranges before getting here.
    """
    fmt = _struct_format(length, byteorder)
    view = write_window(buffer, length).unwrap_or_propagate()
    try:
        struct.pack_into(fmt, view, 0, value)
    except (struct.error, OverflowError) as e:
        raise ValueError('too big to encode') from e
    return Ok(length)


@propagate_result
def decode_float(buffer: Buffer, *, length: int, byteorder: ByteOrder) -> Result[float, PodError]:
    """ Decode a float from 4 or 8 bytes, every bit pattern is a valid float (including NaNs and infinities).
    """
    fmt = _struct_format(length, byteorder)
    view = read_window(buffer, length).unwrap_or_propagate()
    value, = struct.unpack_from(fmt, view)
    return Ok(value)
