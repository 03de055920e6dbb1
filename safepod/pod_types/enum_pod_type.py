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

from enum import Enum
from typing import Any, TypeVar

from typing_extensions import Self, override

from safepod.pod_types.enum_config import EnumConfig, get_enum_config
from safepod.pod_types.pod_type import PodType
from safepod.serialization import Buffer, ByteOrder, MutableBuffer, OutOfRangeError, PodConfigError, PodError
from safepod.serialization.buffer import read_window
from safepod.utils.result import Err, Ok, Result, propagate_result
from safepod.utils.typing import is_subclass

E = TypeVar('E', bound=Enum)


class EnumPodType(PodType[E]):
    """ Represents Enum classes declared with `pod_enum` as a tagged union without payloads.

    The encoding of a member is the encoding of its tag with the union's representation, so the size of the union is
    the size of the representation. Decoding only accepts the tags of declared variants, any other value decodes to an
    `OutOfRangeError` that names the union and the unmatched value.
    """

    __slots__ = ('_enum_class', '_config', '_zero', '_tag_by_member', '_member_by_key', '_size')

    _enum_class: type[E]
    _config: EnumConfig
    _zero: E
    _tag_by_member: dict[E, Any]
    _member_by_key: dict[bytes, E]

    def __init__(self, enum_class: type[E], config: EnumConfig, zero_name: str) -> None:
        self._enum_class = enum_class
        self._config = config
        self._zero = enum_class[zero_name]
        self._tag_by_member = {}
        self._member_by_key = {}
        for variant in config.variants:
            member = enum_class[variant.name]
            self._tag_by_member[member] = variant.tag
            self._member_by_key[config.wire_key(variant.tag)] = member
        self._size = config.repr_type.SIZE

    @override
    @classmethod
    def _from_type(cls, type_: type[E], /, *, type_map: PodType.TypeMap) -> Self:
        if not is_subclass(type_, Enum):
            raise PodConfigError('expected Enum subclass')
        config = get_enum_config(type_)
        return cls(type_, config, config.zero_variant(type_map.settings.ZERO_VARIANT_POLICY))

    @property
    def config(self) -> EnumConfig:
        return self._config

    def tag_of(self, member: E) -> Any:
        """ The tag that encodes the given member."""
        self._check_value(member, deep=False)
        return self._tag_by_member[member]

    @override
    def _check_value(self, value: E, /, *, deep: bool) -> None:
        if not isinstance(value, self._enum_class):
            raise TypeError(f'expected {self._enum_class.__name__}')

    @override
    def _zeroed(self) -> E:
        return self._zero

    @override
    def _encode(self, value: E, buffer: MutableBuffer, byteorder: ByteOrder, /) -> Result[int, PodError]:
        return self._config.repr_type.encode(self._tag_by_member[value], buffer, byteorder)

    @override
    @propagate_result
    def _decode(self, buffer: Buffer, byteorder: ByteOrder, /) -> Result[E, PodError]:
        raw = self._config.repr_type.decode(buffer, byteorder).unwrap_or_propagate()
        window = bytes(read_window(buffer, self._size).unwrap_or_propagate())
        key = window if byteorder is ByteOrder.LITTLE else window[::-1]
        member = self._member_by_key.get(key)
        if member is None:
            return Err(OutOfRangeError(f'{raw!r} does not match any variant of {self._enum_class.__name__}'))
        return Ok(member)

    def __repr__(self) -> str:
        return f'EnumPodType({self._enum_class.__name__}, repr={self._config.repr_type!r})'
