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
Declarative configuration of tagged unions (enums encoded as a scalar tag).

An enum becomes encodable by declaring which primitive scalar represents its tag, for example:

>>> from enum import Enum
>>> from safepod.types import u8
>>> @pod_enum(repr=u8, tags={'C': lambda: 1 << 3})
... class Color(Enum):
...     A = 5
...     B = 0
...     C = 7
>>> [(v.name, v.tag) for v in Color.__pod_config__.variants]
[('A', 5), ('B', 0), ('C', 8)]

Each variant's tag defaults to the member's value and can be overridden with a literal or with a zero-argument callable
that is evaluated once, when the configuration is resolved. Every problem with the declaration is raised as a
`PodConfigError` right away.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, Optional, TypeVar

from pydantic import ConfigDict, ValidationError, field_validator, model_validator
from structlog import get_logger

from safepod.conf.settings import ZeroVariantPolicy
from safepod.pod_types.bool_pod_type import BoolPodType
from safepod.pod_types.float_pod_type import _FloatPodType
from safepod.pod_types.pod_type import PodType
from safepod.pod_types.sized_int_pod_type import _SizedIntPodType
from safepod.serialization import ByteOrder, PodConfigError
from safepod.utils.pydantic import BaseModel
from safepod.utils.typing import is_subclass

logger = get_logger()

E = TypeVar('E', bound=Enum)

POD_CONFIG_ATTR = '__pod_config__'


class VariantConfig(BaseModel):
    name: str
    tag: Any

    # only tags given as literals are candidates when scanning for the zero variant
    literal: bool = True


class EnumConfig(BaseModel):
    """ The resolved configuration of a tagged union: its representation, ordered variants and zero designation."""

    model_config = ConfigDict(extra='forbid', frozen=True, arbitrary_types_allowed=True)

    name: str
    repr_type: PodType
    variants: tuple[VariantConfig, ...]
    zero: Optional[str] = None

    @field_validator('repr_type')
    @classmethod
    def validate_repr_type(cls, repr_type: PodType) -> PodType:
        if not isinstance(repr_type, (BoolPodType, _SizedIntPodType, _FloatPodType)):
            raise ValueError(f'representation must be a primitive scalar, got {repr_type!r}')
        return repr_type

    @model_validator(mode='after')
    def validate_variants(self) -> EnumConfig:
        if not self.variants:
            raise ValueError('at least one variant is required')

        names = [variant.name for variant in self.variants]
        if len(set(names)) != len(names):
            raise ValueError('variant names must be unique')

        seen: dict[bytes, str] = {}
        for variant in self.variants:
            if isinstance(variant.tag, float) and math.isnan(variant.tag):
                raise ValueError(f'tag of variant {variant.name} is NaN')
            try:
                self.repr_type.check_value(variant.tag)
            except (TypeError, ValueError) as e:
                raise ValueError(f'tag {variant.tag!r} of variant {variant.name} is not valid: {e}') from e
            key = self.wire_key(variant.tag)
            if key in seen:
                raise ValueError(f'variants {seen[key]} and {variant.name} have the same tag {variant.tag!r}')
            seen[key] = variant.name

        if self.zero is not None and self.zero not in names:
            raise ValueError(f'zero variant {self.zero} is not a variant')
        return self

    def wire_key(self, tag: Any) -> bytes:
        """ The little-endian encoding of a tag, tags are told apart by their encoding and not by `==`."""
        return self.repr_type.to_bytes(tag, byteorder=ByteOrder.LITTLE)

    def zero_variant(self, policy: ZeroVariantPolicy) -> str:
        """ Name of the variant that is the zero value of the union under the given policy.

        An explicit designation always wins. Otherwise the `explicit` policy is an error, and the `scan` policy picks
        the first variant whose literal tag encodes as all zero bytes, falling back to the first declared variant.
        """
        if self.zero is not None:
            name, reason = self.zero, 'designated'
        elif policy is ZeroVariantPolicy.EXPLICIT:
            raise PodConfigError(f'{self.name} has no designated zero variant')
        else:
            zero_key = bytes(self.repr_type.SIZE)
            candidates = [v.name for v in self.variants if v.literal and self.wire_key(v.tag) == zero_key]
            if candidates:
                name, reason = candidates[0], 'zero tag'
            else:
                name, reason = self.variants[0].name, 'first variant'
        logger.debug('zero variant resolved', union=self.name, variant=name, reason=reason)
        return name


def resolve_enum_config(
    enum_class: type[Enum],
    *,
    repr: Any,
    tags: Mapping[str, Any] | None = None,
    zero: str | None = None,
) -> EnumConfig:
    """ Validate the declaration of a tagged union and turn it into an `EnumConfig`.

    `repr` can be a type annotation, like `u8`, or a `PodType` instance.
    """
    from safepod.pod_types import make_pod_type

    if not is_subclass(enum_class, Enum):
        raise PodConfigError('expected an Enum subclass')
    if repr is None:
        raise PodConfigError(f'{enum_class.__name__} has no representation')
    repr_type = repr if isinstance(repr, PodType) else make_pod_type(repr)

    tags = dict(tags or {})
    unknown = set(tags) - set(enum_class.__members__)
    if unknown:
        raise PodConfigError(f'tags given for unknown variants of {enum_class.__name__}: {sorted(unknown)}')
    aliases = sorted(name for name in tags if enum_class.__members__[name].name != name)
    if aliases:
        raise PodConfigError(f'tags given for aliases of {enum_class.__name__}: {aliases}, tag the canonical variant')

    variants: list[VariantConfig] = []
    for member in enum_class:
        if member.name not in tags:
            variants.append(VariantConfig(name=member.name, tag=member.value))
            continue
        tag_expr = tags[member.name]
        if callable(tag_expr):
            variants.append(VariantConfig(name=member.name, tag=_evaluate_tag(member.name, tag_expr), literal=False))
        else:
            variants.append(VariantConfig(name=member.name, tag=tag_expr))

    try:
        return EnumConfig(name=enum_class.__name__, repr_type=repr_type, variants=tuple(variants), zero=zero)
    except ValidationError as e:
        details = '; '.join(error['msg'] for error in e.errors())
        raise PodConfigError(f'invalid configuration for {enum_class.__name__}: {details}') from e


def _evaluate_tag(name: str, tag_expr: Callable[[], Any]) -> Any:
    try:
        return tag_expr()
    except Exception as e:
        raise PodConfigError(f'tag expression of variant {name} failed: {e!r}') from e


def pod_enum(
    *,
    repr: Any,
    tags: Mapping[str, Any] | None = None,
    zero: str | None = None,
) -> Callable[[type[E]], type[E]]:
    """ Class decorator that declares how an Enum is encoded, the configuration is resolved immediately.
    """
    def decorator(enum_class: type[E]) -> type[E]:
        config = resolve_enum_config(enum_class, repr=repr, tags=tags, zero=zero)
        setattr(enum_class, POD_CONFIG_ATTR, config)
        return enum_class
    return decorator


def get_enum_config(enum_class: type[Enum]) -> EnumConfig:
    """ Get the configuration attached by `pod_enum`, raises `PodConfigError` if the enum wasn't declared with it."""
    config = enum_class.__dict__.get(POD_CONFIG_ATTR)
    if not isinstance(config, EnumConfig):
        raise PodConfigError(f'{enum_class.__name__} has no representation, declare it with @pod_enum(repr=...)')
    return config
