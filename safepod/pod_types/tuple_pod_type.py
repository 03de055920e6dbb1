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

from typing import Any, get_args, get_origin

from typing_extensions import Self, override

from safepod.pod_types.pod_type import PodType
from safepod.pod_types.product_pod_type import ProductPodType
from safepod.serialization import PodConfigError


class TuplePodType(ProductPodType[tuple]):
    """ Represents positional products annotated as `tuple[A, B, ...]`, `tuple[()]` is the unit product.

    Variable-length tuples (`tuple[T, ...]`) have no fixed size and are rejected, `Array[T, N]` covers that need.
    """

    @override
    @classmethod
    def _from_type(cls, type_: type[tuple], /, *, type_map: PodType.TypeMap) -> Self:
        if type_ is tuple:
            raise PodConfigError('expected tuple[<args...>]')
        if get_origin(type_) is not tuple:
            raise PodConfigError('expected tuple type')
        args = get_args(type_)
        if Ellipsis in args:
            raise PodConfigError('variable-length tuple[T, ...] has no fixed size, use Array[T, N] instead')
        return cls(PodType.from_type(arg, type_map=type_map) for arg in args)

    @override
    def _check_value(self, value: tuple, /, *, deep: bool) -> None:
        if not isinstance(value, (tuple, list)):
            raise TypeError('expected tuple-like')
        if len(value) != len(self._fields):
            raise TypeError('wrong tuple size')
        self._check_fields(value, deep=deep)

    @override
    def _field_values(self, value: tuple, /) -> tuple[Any, ...]:
        return tuple(value)

    @override
    def _build(self, values: tuple[Any, ...], /) -> tuple:
        return values

    def __repr__(self) -> str:
        return f'TuplePodType({list(self._fields)!r})'
