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

from collections.abc import Mapping
from dataclasses import dataclass, is_dataclass
from enum import Enum
from types import NoneType
from typing import TYPE_CHECKING, Any, NamedTuple, TypeAlias, get_origin

from safepod.serialization import PodConfigError
from safepod.utils.typing import is_subclass, pretty_type

if TYPE_CHECKING:
    from safepod.pod_types.pod_type import PodType

# keys are origin types (`tuple`, `Annotated`, `u8`, ...) or one of the markers below for families of user classes
TypeToPodTypeMap: TypeAlias = Mapping[Any, type['PodType']]

# marker keys for user-defined classes that are recognized by shape instead of by origin
DATACLASS_KEY: Any = dataclass
NAMEDTUPLE_KEY: Any = NamedTuple
ENUM_KEY: Any = Enum


def get_usable_origin_type(type_: Any, /, *, type_map: 'PodType.TypeMap') -> Any:
    """ The purpose of this function is to map a given type into a key that is usable in a PodType.TypeMap

    If the given type cannot be used in the given type_map, a PodConfigError exception will be raised. The returned
    key is guaranteed to exist in `type_map.pod_types_map`.

    >>> from safepod.pod_types import DEFAULT_TYPE_MAP as type_map
    >>> from safepod.types import Array, u8
    >>> get_usable_origin_type(u8, type_map=type_map)
    safepod.types.u8
    >>> get_usable_origin_type(Array[u8, 4], type_map=type_map)
    typing.Annotated
    >>> get_usable_origin_type(int, type_map=type_map)
    Traceback (most recent call last):
    ...
    safepod.serialization.exceptions.PodConfigError: type int has no fixed size, use a sized type like u32 or i64
    """
    if isinstance(type_, str):
        raise PodConfigError('string annotations must be resolved before building a PodType')

    if type_ is None:
        type_ = NoneType

    pod_types_map = type_map.pod_types_map
    origin_type = get_origin(type_) or type_

    if origin_type in pod_types_map:
        return origin_type

    if NAMEDTUPLE_KEY in pod_types_map and NamedTuple in getattr(type_, '__orig_bases__', tuple()):
        return NAMEDTUPLE_KEY

    if DATACLASS_KEY in pod_types_map and isinstance(type_, type) and is_dataclass(type_):
        return DATACLASS_KEY

    if ENUM_KEY in pod_types_map and is_subclass(type_, Enum):
        return ENUM_KEY

    if type_ is int or type_ is float:
        raise PodConfigError(f'type {pretty_type(type_)} has no fixed size, use a sized type like u32 or i64')

    raise PodConfigError(f'type {pretty_type(type_)} is not supported by any PodType class')
