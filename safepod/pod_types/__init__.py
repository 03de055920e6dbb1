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

from types import MappingProxyType as mappingproxy, NoneType
from typing import Annotated, Any, Optional, TypeVar

from structlog import get_logger

from safepod.conf.settings import PodSettings
from safepod.pod_types.array_pod_type import ArrayPodType
from safepod.pod_types.bool_pod_type import BoolPodType
from safepod.pod_types.dataclass_pod_type import DataclassPodType
from safepod.pod_types.enum_config import EnumConfig, VariantConfig, pod_enum, resolve_enum_config
from safepod.pod_types.enum_pod_type import EnumPodType
from safepod.pod_types.float_pod_type import Float32PodType, Float64PodType
from safepod.pod_types.namedtuple_pod_type import NamedTuplePodType
from safepod.pod_types.pod_type import PodType
from safepod.pod_types.product_pod_type import ProductPodType
from safepod.pod_types.sized_int_pod_type import (
    Int8PodType,
    Int16PodType,
    Int32PodType,
    Int64PodType,
    Int128PodType,
    Uint8PodType,
    Uint16PodType,
    Uint32PodType,
    Uint64PodType,
    Uint128PodType,
)
from safepod.pod_types.tuple_pod_type import TuplePodType
from safepod.pod_types.unit_pod_type import UnitPodType
from safepod.pod_types.utils import DATACLASS_KEY, ENUM_KEY, NAMEDTUPLE_KEY, TypeToPodTypeMap
from safepod.types import f32, f64, i8, i16, i32, i64, i128, u8, u16, u32, u64, u128
from safepod.utils.typing import pretty_type

__all__ = [
    'DEFAULT_POD_TYPES_MAP',
    'DEFAULT_TYPE_MAP',
    'ArrayPodType',
    'BoolPodType',
    'DataclassPodType',
    'EnumConfig',
    'EnumPodType',
    'Float32PodType',
    'Float64PodType',
    'Int8PodType',
    'Int16PodType',
    'Int32PodType',
    'Int64PodType',
    'Int128PodType',
    'NamedTuplePodType',
    'PodType',
    'ProductPodType',
    'TuplePodType',
    'TypeToPodTypeMap',
    'Uint8PodType',
    'Uint16PodType',
    'Uint32PodType',
    'Uint64PodType',
    'Uint128PodType',
    'UnitPodType',
    'VariantConfig',
    'make_pod_type',
    'pod_enum',
    'resolve_enum_config',
    'zeroed',
]

logger = get_logger()

T = TypeVar('T')

DEFAULT_POD_TYPES_MAP: TypeToPodTypeMap = mappingproxy({
    # primitive scalars
    bool: BoolPodType,
    u8: Uint8PodType,
    u16: Uint16PodType,
    u32: Uint32PodType,
    u64: Uint64PodType,
    u128: Uint128PodType,
    i8: Int8PodType,
    i16: Int16PodType,
    i32: Int32PodType,
    i64: Int64PodType,
    i128: Int128PodType,
    f32: Float32PodType,
    f64: Float64PodType,
    # Array[T, N] is an Annotated alias
    Annotated: ArrayPodType,
    # products
    tuple: TuplePodType,
    NAMEDTUPLE_KEY: NamedTuplePodType,
    DATACLASS_KEY: DataclassPodType,
    NoneType: UnitPodType,
    # tagged unions
    ENUM_KEY: EnumPodType,
})

# type map built with the bundled default settings, mostly useful for introspection
DEFAULT_TYPE_MAP = PodType.TypeMap(DEFAULT_POD_TYPES_MAP, PodSettings())


def make_pod_type(
    type_: Any,
    /,
    *,
    settings: Optional[PodSettings] = None,
    extra_pod_types_map: Optional[TypeToPodTypeMap] = None,
) -> PodType:
    """ Build the PodType of a type annotation, this is where codecs are normally derived.

    When `settings` is not given the global settings are used. Unsupported types and invalid configurations raise a
    `PodConfigError`, nothing is deferred to encode/decode time.

    >>> from safepod.types import Array
    >>> make_pod_type(tuple[i8, f32])
    TuplePodType([Int8PodType(SIZE=1), Float32PodType(SIZE=4)])
    >>> make_pod_type(Array[u16, 3]).SIZE
    6
    """
    if settings is None:
        from safepod.conf.get_settings import get_global_settings
        settings = get_global_settings()
    pod_types_map: TypeToPodTypeMap = DEFAULT_POD_TYPES_MAP
    if extra_pod_types_map:
        pod_types_map = {**DEFAULT_POD_TYPES_MAP, **extra_pod_types_map}
    type_map = PodType.TypeMap(pod_types_map, settings)
    pod_type = PodType.from_type(type_, type_map=type_map)
    logger.debug('pod type built', type=pretty_type(type_), pod_type=repr(pod_type), size=pod_type.SIZE)
    return pod_type


def zeroed(type_: type[T], /, *, settings: Optional[PodSettings] = None) -> T:
    """ Shortcut for the zero value of a type annotation.

    >>> zeroed(tuple[bool, u32])
    (False, 0)
    """
    return make_pod_type(type_, settings=settings).zeroed()
