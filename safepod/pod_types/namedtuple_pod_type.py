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

from collections.abc import Iterable
from typing import Any, NamedTuple, TypeVar, get_type_hints

from typing_extensions import Self, override

from safepod.pod_types.pod_type import PodType
from safepod.pod_types.product_pod_type import ProductPodType
from safepod.serialization import PodConfigError

N = TypeVar('N', bound=tuple)


class NamedTuplePodType(ProductPodType[N]):
    __slots__ = ('_actual_type',)

    _actual_type: type[N]

    def __init__(self, namedtuple: type[N], args: Iterable[PodType]) -> None:
        super().__init__(args)
        self._actual_type = namedtuple

    @override
    @classmethod
    def _from_type(cls, type_: type[N], /, *, type_map: PodType.TypeMap) -> Self:
        if not isinstance(type_, type) or NamedTuple not in getattr(type_, '__orig_bases__', tuple()):
            raise PodConfigError('expected NamedTuple type')
        hints = get_type_hints(type_, include_extras=True)
        args = [hints[field_name] for field_name in type_._fields]  # type: ignore[attr-defined]
        return cls(type_, (PodType.from_type(arg, type_map=type_map) for arg in args))

    @override
    def _check_value(self, value: N, /, *, deep: bool) -> None:
        if not isinstance(value, (tuple, self._actual_type)):
            raise TypeError('expected tuple or namedtuple')
        if len(value) != len(self._fields):
            raise TypeError('wrong number of arguments')
        self._check_fields(value, deep=deep)

    @override
    def _field_values(self, value: N, /) -> tuple[Any, ...]:
        return tuple(value)

    @override
    def _build(self, values: tuple[Any, ...], /) -> N:
        return self._actual_type(*values)

    def __repr__(self) -> str:
        return f'NamedTuplePodType({self._actual_type.__name__}, SIZE={self._size})'
