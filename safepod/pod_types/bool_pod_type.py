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

from typing_extensions import Self, override

from safepod.pod_types.pod_type import PodType
from safepod.serialization import Buffer, ByteOrder, MutableBuffer, PodConfigError, PodError
from safepod.serialization.encoding.bool import BOOL_SIZE, decode_bool, encode_bool
from safepod.utils.result import Result
from safepod.utils.typing import is_subclass


class BoolPodType(PodType[bool]):
    """ Represents builtin `bool` values as a single byte, only 0x00 and 0x01 decode successfully.
    """

    _size = BOOL_SIZE

    @override
    @classmethod
    def _from_type(cls, type_: type[bool], /, *, type_map: PodType.TypeMap) -> Self:
        if not is_subclass(type_, bool):
            raise PodConfigError('expected bool type')
        return cls()

    @override
    def _check_value(self, value: bool, /, *, deep: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError('expected boolean')

    @override
    def _zeroed(self) -> bool:
        return False

    @override
    def _encode(self, value: bool, buffer: MutableBuffer, byteorder: ByteOrder, /) -> Result[int, PodError]:
        # a single byte has no byte order
        return encode_bool(buffer, value)

    @override
    def _decode(self, buffer: Buffer, byteorder: ByteOrder, /) -> Result[bool, PodError]:
        return decode_bool(buffer)
