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

r"""
This module implements encoding a boolean value using 1 byte.

The format is trivial and the same for both byte orders:

- `False` maps to `b'\x00'`
- `True` maps to `b'\x01'`
- any other byte value is out of range

>>> buf = bytearray(1)
>>> encode_bool(buf, True)
Ok(1)
>>> bytes(buf)
b'\x01'

>>> decode_bool(b'\x00')
Ok(False)
>>> decode_bool(b'\x01test')
Ok(True)
>>> decode_bool(b'\x02')
Err(OutOfRangeError("b'\\x02' is not a valid boolean"))
>>> decode_bool(b'')
Err(OutOfSpaceError('not enough space: 1 bytes required, 0 available'))
"""

from safepod.serialization.buffer import read_window, write_window
from safepod.serialization.exceptions import OutOfRangeError, PodError
from safepod.serialization.types import Buffer, MutableBuffer
from safepod.utils.result import Err, Ok, Result, propagate_result

BOOL_SIZE = 1


@propagate_result
def encode_bool(buffer: MutableBuffer, value: bool) -> Result[int, PodError]:
    """ Encodes a boolean value using 1 byte.
    """
    assert isinstance(value, bool)
    view = write_window(buffer, BOOL_SIZE).unwrap_or_propagate()
    view[0] = 0x01 if value else 0x00
    return Ok(BOOL_SIZE)


@propagate_result
def decode_bool(buffer: Buffer) -> Result[bool, PodError]:
    """ Decodes a boolean value from 1 byte.
    """
    view = read_window(buffer, BOOL_SIZE).unwrap_or_propagate()
    i = view[0]
    if i == 0:
        return Ok(False)
    elif i == 1:
        return Ok(True)
    else:
        raw = bytes([i])
        return Err(OutOfRangeError(f'{raw!r} is not a valid boolean'))
