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
Products are records of ordered fields, laid out back to back with no padding and no length prefixes.

All product flavors share the same layout and only differ in how a Python value is split into field values and built
back from them: plain tuples (`tuple[A, B]`), NamedTuples, dataclasses and the field-less unit product.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable
from typing import Any, TypeVar

from typing_extensions import override

from safepod.pod_types.pod_type import PodType
from safepod.serialization import Buffer, ByteOrder, MutableBuffer, PodError
from safepod.serialization.compound_encoding.tuple import decode_tuple, encode_tuple
from safepod.utils.result import Result

P = TypeVar('P')


class ProductPodType(PodType[P]):
    """ Base class of every product, subclasses only need to split and build values.

    The size of a product is the sum of its field sizes, the first field starts at offset 0 and each next field starts
    where the previous one ended. A product with no fields has size 0 and its operations succeed on any buffer.
    """

    __slots__ = ('_fields', '_sizes', '_size')

    # we can't parametrize PodType, each field has its own type
    _fields: tuple[PodType, ...]
    _sizes: tuple[int, ...]

    def __init__(self, fields_: Iterable[PodType]) -> None:
        self._fields = tuple(fields_)
        for field in self._fields:
            assert isinstance(field, PodType)
        self._sizes = tuple(field.SIZE for field in self._fields)
        self._size = sum(self._sizes)

    @property
    def fields(self) -> tuple[PodType, ...]:
        """ The PodTypes of the fields, in layout order."""
        return self._fields

    @abstractmethod
    def _field_values(self, value: P, /) -> tuple[Any, ...]:
        """ Split a value into its field values, in layout order."""
        raise NotImplementedError

    @abstractmethod
    def _build(self, values: tuple[Any, ...], /) -> P:
        """ Build a value from its field values, in layout order."""
        raise NotImplementedError

    def _check_fields(self, value: P, /, *, deep: bool) -> None:
        if deep:
            for i, field in zip(self._field_values(value), self._fields):
                field._check_value(i, deep=True)

    @override
    def _zeroed(self) -> P:
        return self._build(tuple(field.zeroed() for field in self._fields))

    @override
    def _encode(self, value: P, buffer: MutableBuffer, byteorder: ByteOrder, /) -> Result[int, PodError]:
        encoders = tuple(field._encode for field in self._fields)
        return encode_tuple(buffer, self._field_values(value), encoders, self._sizes, byteorder=byteorder)

    @override
    def _decode(self, buffer: Buffer, byteorder: ByteOrder, /) -> Result[P, PodError]:
        decoders = tuple(field.decode for field in self._fields)
        return decode_tuple(buffer, decoders, self._sizes, byteorder=byteorder).map(self._build)
