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

from enum import Enum
from typing import TypeAlias

# read-only views accepted by decoders
Buffer: TypeAlias = bytes | bytearray | memoryview

# writable views accepted by encoders
MutableBuffer: TypeAlias = bytearray | memoryview


class ByteOrder(str, Enum):
    """ Byte ordering used by every fixed-size codec.

    The values are the ones accepted by `int.to_bytes`/`int.from_bytes`, so a member can be passed directly as the
    `byteorder` argument.
    """

    LITTLE = 'little'
    BIG = 'big'

    @property
    def struct_prefix(self) -> str:
        """ Prefix character for the `struct` module that selects this ordering with no padding."""
        return '<' if self is ByteOrder.LITTLE else '>'
