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

from dataclasses import fields, is_dataclass
from typing import TYPE_CHECKING, Any, TypeVar, get_type_hints

from typing_extensions import Self, override

from safepod.pod_types.pod_type import PodType
from safepod.pod_types.product_pod_type import ProductPodType
from safepod.serialization import PodConfigError

if TYPE_CHECKING:
    from _typeshed import DataclassInstance

D = TypeVar('D', bound='DataclassInstance')


class DataclassPodType(ProductPodType[D]):
    """ Represents named products declared as dataclasses, fields are laid out in declaration order.

    A dataclass with no fields is a unit product.
    """

    __slots__ = ('_names', '_class')

    _names: tuple[str, ...]
    _class: type[D]

    def __init__(self, fields_: dict[str, PodType], class_: type[D]) -> None:
        super().__init__(fields_.values())
        self._names = tuple(fields_.keys())
        self._class = class_

    @override
    @classmethod
    def _from_type(cls, type_: type[D], /, *, type_map: PodType.TypeMap) -> Self:
        if not isinstance(type_, type) or not is_dataclass(type_):
            raise PodConfigError('expected a dataclass')
        hints = get_type_hints(type_, include_extras=True)
        # XXX: the order is important, but `dict` and `fields` should have a stable order
        values: dict[str, PodType] = {}
        for field in fields(type_):
            if not field.init:
                raise PodConfigError(f'field {field.name} is not an __init__ argument')
            values[field.name] = PodType.from_type(hints[field.name], type_map=type_map)
        return cls(values, type_)

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    @override
    def _check_value(self, value: D, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise TypeError(f'expected {self._class.__name__} instance')
        self._check_fields(value, deep=deep)

    @override
    def _field_values(self, value: D, /) -> tuple[Any, ...]:
        return tuple(getattr(value, name) for name in self._names)

    @override
    def _build(self, values: tuple[Any, ...], /) -> D:
        return self._class(**dict(zip(self._names, values)))

    def __repr__(self) -> str:
        return f'DataclassPodType({self._class.__name__}, SIZE={self._size})'
