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

from collections.abc import Sequence
from typing import Annotated, Any, TypeVar, get_args, get_origin

from typing_extensions import Self, override

from safepod.pod_types.pod_type import PodType
from safepod.serialization import Buffer, ByteOrder, MutableBuffer, PodConfigError, PodError
from safepod.serialization.compound_encoding.array import decode_array, encode_array
from safepod.types import ArrayLength
from safepod.utils.result import Result

T = TypeVar('T')


class ArrayPodType(PodType[tuple[T, ...]]):
    """ Represents fixed-length homogeneous arrays, annotated with `Array[T, N]`.

    Values can be given as tuples or lists of exactly N elements, decoded values are always tuples.
    """

    __slots__ = ('_element', '_length', '_size')

    _element: PodType[T]
    _length: int

    def __init__(self, element: PodType[T], length: int) -> None:
        if length < 0:
            raise ValueError('array length must not be negative')
        self._element = element
        self._length = length
        self._size = element.SIZE * length

    @override
    @classmethod
    def _from_type(cls, type_: type[tuple[T, ...]], /, *, type_map: PodType.TypeMap) -> Self:
        if get_origin(type_) is not Annotated:
            raise PodConfigError('expected Array[<type>, <length>]')
        base_type, *metadata = get_args(type_)
        lengths = [i for i in metadata if isinstance(i, ArrayLength)]
        if len(lengths) != 1:
            raise PodConfigError('expected exactly one array length')
        array_length, = lengths
        if get_origin(base_type) is not tuple:
            raise PodConfigError('expected tuple[<type>, ...] as the array base')
        args = get_args(base_type)
        if len(args) != 2 or args[1] is not Ellipsis:
            raise PodConfigError('expected tuple[<type>, ...] as the array base')
        element_type, _ellipsis = args
        return cls(PodType.from_type(element_type, type_map=type_map), array_length.length)

    @override
    def _check_value(self, value: Sequence[T], /, *, deep: bool) -> None:
        if not isinstance(value, (tuple, list)):
            raise TypeError('expected tuple or list')
        if len(value) != self._length:
            raise TypeError(f'wrong array length: expected {self._length}, got {len(value)}')
        if deep:
            for i in value:
                self._element._check_value(i, deep=True)

    @override
    def _zeroed(self) -> tuple[T, ...]:
        # each element gets its own zero value
        return tuple(self._element.zeroed() for _ in range(self._length))

    @override
    def _encode(self, value: Sequence[T], buffer: MutableBuffer, byteorder: ByteOrder, /) -> Result[int, PodError]:
        return encode_array(buffer, value, self._element._encode, element_size=self._element.SIZE, byteorder=byteorder)

    @override
    def _decode(self, buffer: Buffer, byteorder: ByteOrder, /) -> Result[tuple[T, ...], PodError]:
        zero: Any = self._element.zeroed() if self._length else None
        return decode_array(
            buffer,
            self._element.decode,
            length=self._length,
            element_size=self._element.SIZE,
            zero=zero,
            byteorder=byteorder,
        )

    def __repr__(self) -> str:
        return f'ArrayPodType({self._element!r}, {self._length})'
