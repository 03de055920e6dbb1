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
A fixed-length array is N elements of the same fixed-size type laid out back to back.

Layout: [value_0][value_1]...[value_N-1], each element occupying exactly `element_size` bytes.

>>> from safepod.serialization.encoding.int import decode_int, encode_int
>>> def enc_u16(value, buffer, byteorder):
...     return encode_int(buffer, value, length=2, signed=False, byteorder=byteorder)
>>> def dec_u16(buffer, byteorder):
...     return decode_int(buffer, length=2, signed=False, byteorder=byteorder)
>>> buf = bytearray(6)
>>> encode_array(buf, (1, 2, 3), enc_u16, element_size=2, byteorder=ByteOrder.BIG)
Ok(6)
>>> buf.hex()
'000100020003'
>>> decode_array(buf, dec_u16, length=3, element_size=2, zero=0, byteorder=ByteOrder.LITTLE)
Ok((256, 512, 768))
>>> decode_array(buf[:5], dec_u16, length=3, element_size=2, zero=0, byteorder=ByteOrder.BIG)
Err(OutOfSpaceError('not enough space: 6 bytes required, 5 available'))
"""

from collections.abc import Sequence
from typing import TypeVar

from safepod.serialization.buffer import read_window, write_window
from safepod.serialization.exceptions import PodError
from safepod.serialization.types import Buffer, ByteOrder, MutableBuffer
from safepod.utils.result import Ok, Result, propagate_result

from . import Decoder, Encoder

T = TypeVar('T')


@propagate_result
def encode_array(
    buffer: MutableBuffer,
    values: Sequence[T],
    encoder: Encoder[T],
    *,
    element_size: int,
    byteorder: ByteOrder,
) -> Result[int, PodError]:
    """ Encode the elements in index order into consecutive `element_size`-byte windows.

    The whole array's space is checked first, so nothing is written when the buffer is too short.
    """
    size = len(values) * element_size
    view = write_window(buffer, size).unwrap_or_propagate()
    offset = 0
    for value in values:
        encoder(value, view[offset:offset + element_size], byteorder).unwrap_or_propagate()
        offset += element_size
    return Ok(size)


@propagate_result
def decode_array(
    buffer: Buffer,
    decoder: Decoder[T],
    *,
    length: int,
    element_size: int,
    zero: T,
    byteorder: ByteOrder,
) -> Result[tuple[T, ...], PodError]:
    """ Decode `length` elements from consecutive `element_size`-byte windows.

    Elements are filled into a zero-initialized array, the first element error aborts the decode and is returned as is.
    """
    view = read_window(buffer, length * element_size).unwrap_or_propagate()
    values: list[T] = [zero] * length
    offset = 0
    for i in range(length):
        values[i] = decoder(view[offset:offset + element_size], byteorder).unwrap_or_propagate()
        offset += element_size
    return Ok(tuple(values))
