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

from types import NoneType
from typing import Any

from typing_extensions import Self, override

from safepod.pod_types.pod_type import PodType
from safepod.pod_types.product_pod_type import ProductPodType
from safepod.serialization import PodConfigError


class UnitPodType(ProductPodType[None]):
    """ Represents `None`, the product with no fields: it has size 0 and never touches the buffer.
    """

    def __init__(self) -> None:
        super().__init__(())

    @override
    @classmethod
    def _from_type(cls, type_: type[None], /, *, type_map: PodType.TypeMap) -> Self:
        if type_ is not None and type_ is not NoneType:
            raise PodConfigError('expected None')
        return cls()

    @override
    def _check_value(self, value: None, /, *, deep: bool) -> None:
        if value is not None:
            raise TypeError('expected None')

    @override
    def _field_values(self, value: None, /) -> tuple[Any, ...]:
        return ()

    @override
    def _build(self, values: tuple[Any, ...], /) -> None:
        return None
