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

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, NamedTuple, TypeVar, final

from typing_extensions import Self

from safepod.serialization import Buffer, ByteOrder, MutableBuffer, PodConfigError, PodError
from safepod.utils.result import Result

if TYPE_CHECKING:
    from safepod.conf.settings import PodSettings
    from safepod.pod_types.utils import TypeToPodTypeMap

T = TypeVar('T')


class PodType(ABC, Generic[T]):
    """ This class models a type with a statically known byte size and how it is converted to and from bytes.

    An instance is the codec of one type: it knows the type's `SIZE`, its zero value, and how to decode/encode it in
    little-endian or big-endian order. Instances are built once from a static description (a type annotation or
    explicit arguments) and hold no state that changes between calls, so they can be shared freely.

    Runtime failures are returned, never raised: decode returns `Ok(value)` or `Err(PodError)`, and encode returns
    `Ok(SIZE)` or `Err(PodError)`. Passing a Python value that isn't a valid instance of the type (wrong class, integer
    out of the width's range, ...) is a programming error and raises `TypeError` or `ValueError` instead.
    """

    class TypeMap(NamedTuple):
        pod_types_map: TypeToPodTypeMap
        settings: PodSettings

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    # XXX: subclasses must initialize this property, either as a class var or in __init__
    _size: int

    @final
    @staticmethod
    def from_type(type_: type[T], /, *, type_map: TypeMap) -> PodType[T]:
        """ Instantiate a PodType instance from a type annotation using the given map.

        This is also how compound PodTypes build the codecs of their fields.
        """
        from safepod.pod_types.utils import get_usable_origin_type
        usable_origin = get_usable_origin_type(type_, type_map=type_map)
        pod_type = type_map.pod_types_map[usable_origin]
        return pod_type._from_type(type_, type_map=type_map)

    @classmethod
    def _from_type(cls, type_: type[T], /, *, type_map: TypeMap) -> Self:
        """ Instantiate a PodType instance from a type annotation.

        The implementation is expected to inspect the given type's origin and args to check for compatibility and to
        use `PodType.from_type`, forwarding the given `type_map`, to build the PodTypes of its parts.
        """
        # XXX: a PodType that is only meant for local use does not need to implement _from_type
        raise PodConfigError(f'{cls} is not compatible with use in a PodType.TypeMap')

    @final
    @property
    def SIZE(self) -> int:
        """ Size in bytes of the encoded value, constant for the type and independent of the value."""
        return self._size

    @final
    def zeroed(self) -> T:
        """ Build the zero value of the type, no buffer is involved."""
        return self._zeroed()

    @final
    def check_value(self, value: T, /) -> None:
        """ Raise a TypeError or ValueError if the value is not a valid instance of the type.

        Compound types check their fields and elements recursively.
        """
        # XXX: subclasses must implement PodType._check_value, not PodType.check_value
        self._check_value(value, deep=True)

    @final
    def decode(self, buffer: Buffer, byteorder: ByteOrder, /) -> Result[T, PodError]:
        """ Decode a value from the first `SIZE` bytes of the buffer, trailing bytes are ignored.
        """
        # XXX: subclasses must implement PodType._decode, not PodType.decode
        return self._decode(buffer, byteorder)

    @final
    def decode_le(self, buffer: Buffer, /) -> Result[T, PodError]:
        return self._decode(buffer, ByteOrder.LITTLE)

    @final
    def decode_be(self, buffer: Buffer, /) -> Result[T, PodError]:
        return self._decode(buffer, ByteOrder.BIG)

    @final
    def encode(self, value: T, buffer: MutableBuffer, byteorder: ByteOrder, /) -> Result[int, PodError]:
        """ Encode a value into the first `SIZE` bytes of the buffer and return how many bytes were written.

        The whole value is checked before anything is written, an invalid field never leaves the buffer half-updated.
        """
        # XXX: subclasses must implement PodType._encode, not PodType.encode
        self._check_value(value, deep=True)
        return self._encode(value, buffer, byteorder)

    @final
    def encode_le(self, value: T, buffer: MutableBuffer, /) -> Result[int, PodError]:
        return self.encode(value, buffer, ByteOrder.LITTLE)

    @final
    def encode_be(self, value: T, buffer: MutableBuffer, /) -> Result[int, PodError]:
        return self.encode(value, buffer, ByteOrder.BIG)

    @final
    def to_bytes(self, value: T, /, *, byteorder: ByteOrder | None = None) -> bytes:
        """ Shortcut to encode a value into a new `bytes` object of exactly `SIZE` bytes.
        """
        buffer = bytearray(self._size)
        self.encode(value, buffer, byteorder or _default_byteorder()).unwrap_or_raise()
        return bytes(buffer)

    @final
    def from_bytes(self, data: Buffer, /, *, byteorder: ByteOrder | None = None) -> T:
        """ Shortcut to decode a value and raise the error instead of returning it.
        """
        return self.decode(data, byteorder or _default_byteorder()).unwrap_or_raise()

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `PodType.check_value`.

        Compound values should use `PodType._check_value` on the inner types when `deep=True`.
        """
        raise NotImplementedError

    @abstractmethod
    def _zeroed(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def _encode(self, value: T, buffer: MutableBuffer, byteorder: ByteOrder, /) -> Result[int, PodError]:
        """ Inner implementation of `encode`, you can assume that the given value has been "deep checked".

        Compound types should pass `PodType._encode` of their parts as an `Encoder`, the parts were already checked.
        """
        raise NotImplementedError

    @abstractmethod
    def _decode(self, buffer: Buffer, byteorder: ByteOrder, /) -> Result[T, PodError]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f'{type(self).__name__}(SIZE={self._size})'


def _default_byteorder() -> ByteOrder:
    from safepod.conf.get_settings import get_global_settings
    return get_global_settings().DEFAULT_BYTE_ORDER
