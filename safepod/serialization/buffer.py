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
Helpers shared by every codec to borrow the `size`-byte prefix of a caller's buffer.

Both helpers perform the space check of the codec contract and return a byte-formatted `memoryview` of exactly `size`
bytes, so codecs never read or write past their own window and trailing bytes are left untouched.

>>> read_window(b'\\x01\\x02\\x03', 2).map(bytes)
Ok(b'\\x01\\x02')
>>> read_window(b'\\x01', 2)
Err(OutOfSpaceError('not enough space: 2 bytes required, 1 available'))
"""

from safepod.serialization.exceptions import OutOfSpaceError, PodError
from safepod.serialization.types import Buffer, MutableBuffer
from safepod.utils.result import Err, Ok, Result


def _byte_view(buffer: Buffer) -> memoryview:
    view = memoryview(buffer)
    if view.format != 'B' or view.ndim != 1:
        view = view.cast('B')
    return view


def read_window(buffer: Buffer, size: int) -> Result[memoryview, PodError]:
    """ Borrow the first `size` bytes of `buffer` for reading."""
    view = _byte_view(buffer)
    if len(view) < size:
        return Err(OutOfSpaceError(size, len(view)))
    return Ok(view[:size])


def write_window(buffer: MutableBuffer, size: int) -> Result[memoryview, PodError]:
    """ Borrow the first `size` bytes of `buffer` for writing.

    A read-only buffer is a programming error and raises `TypeError` instead of returning an error.
    """
    view = _byte_view(buffer)
    if view.readonly:
        raise TypeError('cannot encode into a read-only buffer')
    if len(view) < size:
        return Err(OutOfSpaceError(size, len(view)))
    return Ok(view[:size])
