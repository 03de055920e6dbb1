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

from typing import ClassVar

from typing_extensions import Self, override

from safepod.pod_types.pod_type import PodType
from safepod.serialization import Buffer, ByteOrder, MutableBuffer, PodConfigError, PodError
from safepod.serialization.encoding.int import decode_int, encode_int
from safepod.utils.result import Result
from safepod.utils.typing import is_subclass


class _SizedIntPodType(PodType[int]):
    """ Base class for classes that represent builtin `int` values with a fixed size and signedness.

    Every bit pattern decodes to a valid integer, so decoding can only fail for lack of space.
    """

    # XXX: subclass must define these values:
    _signed: ClassVar[bool]
    _size: ClassVar[int]

    @classmethod
    def _upper_bound_value(cls) -> int:
        if cls._signed:
            return 2**(cls._size * 8 - 1) - 1
        else:
            return 2**(cls._size * 8) - 1

    @classmethod
    def _lower_bound_value(cls) -> int:
        if cls._signed:
            return -(2**(cls._size * 8 - 1))
        else:
            return 0

    @override
    @classmethod
    def _from_type(cls, type_: type[int], /, *, type_map: PodType.TypeMap) -> Self:
        if not is_subclass(type_, int) or is_subclass(type_, bool):
            raise PodConfigError('expected int type')
        return cls()

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError('expected integer')
        self._check_range(value)

    def _check_range(self, value: int) -> None:
        if value > self._upper_bound_value():
            raise ValueError('above upper bound')
        if value < self._lower_bound_value():
            raise ValueError('below lower bound')

    @override
    def _zeroed(self) -> int:
        return 0

    @override
    def _encode(self, value: int, buffer: MutableBuffer, byteorder: ByteOrder, /) -> Result[int, PodError]:
        return encode_int(buffer, value, length=self._size, signed=self._signed, byteorder=byteorder)

    @override
    def _decode(self, buffer: Buffer, byteorder: ByteOrder, /) -> Result[int, PodError]:
        return decode_int(buffer, length=self._size, signed=self._signed, byteorder=byteorder)


class Int8PodType(_SizedIntPodType):
    _signed = True
    _size = 1


class Int16PodType(_SizedIntPodType):
    _signed = True
    _size = 2


class Int32PodType(_SizedIntPodType):
    _signed = True
    _size = 4  # 4-bytes -> 32-bits


class Int64PodType(_SizedIntPodType):
    _signed = True
    _size = 8


class Int128PodType(_SizedIntPodType):
    _signed = True
    _size = 16


class Uint8PodType(_SizedIntPodType):
    _signed = False
    _size = 1


class Uint16PodType(_SizedIntPodType):
    _signed = False
    _size = 2


class Uint32PodType(_SizedIntPodType):
    _signed = False
    _size = 4  # 4-bytes -> 32-bits


class Uint64PodType(_SizedIntPodType):
    _signed = False
    _size = 8


class Uint128PodType(_SizedIntPodType):
    _signed = False
    _size = 16
