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

from __future__ import annotations

import math
import struct
from typing import ClassVar

from typing_extensions import Self, override

from safepod.pod_types.pod_type import PodType
from safepod.serialization import Buffer, ByteOrder, MutableBuffer, PodConfigError, PodError
from safepod.serialization.encoding.float import decode_float, encode_float
from safepod.utils.result import Result
from safepod.utils.typing import is_subclass

# largest finite binary32 value
_F32_MAX: float = struct.unpack('<f', b'\xff\xff\x7f\x7f')[0]


class _FloatPodType(PodType[float]):
    """ Base class for IEEE 754 floats, every bit pattern (including NaNs and infinities) decodes successfully.

    Decoded binary32 values are widened to Python's `float`, so only values that are exactly representable in binary32
    round-trip unchanged.
    """

    # XXX: subclass must define this value:
    _size: ClassVar[int]

    @override
    @classmethod
    def _from_type(cls, type_: type[float], /, *, type_map: PodType.TypeMap) -> Self:
        if not is_subclass(type_, float):
            raise PodConfigError('expected float type')
        return cls()

    @override
    def _check_value(self, value: float, /, *, deep: bool) -> None:
        # ints are accepted as floats, like they are in annotations
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError('expected float')

    @override
    def _zeroed(self) -> float:
        return 0.0

    @override
    def _encode(self, value: float, buffer: MutableBuffer, byteorder: ByteOrder, /) -> Result[int, PodError]:
        return encode_float(buffer, value, length=self._size, byteorder=byteorder)

    @override
    def _decode(self, buffer: Buffer, byteorder: ByteOrder, /) -> Result[float, PodError]:
        return decode_float(buffer, length=self._size, byteorder=byteorder)


class Float32PodType(_FloatPodType):
    _size = 4

    @override
    def _check_value(self, value: float, /, *, deep: bool) -> None:
        super()._check_value(value, deep=deep)
        if isinstance(value, float) and not math.isfinite(value):
            return
        if abs(value) > _F32_MAX:
            raise ValueError('too big for binary32')


class Float64PodType(_FloatPodType):
    _size = 8

    @override
    def _check_value(self, value: float, /, *, deep: bool) -> None:
        super()._check_value(value, deep=deep)
        if isinstance(value, int):
            # ints beyond the float range can't be converted
            try:
                float(value)
            except OverflowError as e:
                raise ValueError('too big for binary64') from e
