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
This module implements the ordered-field product layout used by every struct-like codec.

There isn't a "format" per-se, the encoding of a product `(A, B, C)` is just the encoding of A concatenated with B
concatenated with C. Each field occupies exactly its own size, starting where the previous field ended, so the total
size is the sum of the field sizes and field ranges never overlap.

>>> from safepod.serialization.encoding.int import decode_int, encode_int
>>> from safepod.serialization.encoding.float import decode_float, encode_float
>>> def enc_i8(value, buffer, byteorder):
...     return encode_int(buffer, value, length=1, signed=True, byteorder=byteorder)
>>> def enc_f32(value, buffer, byteorder):
...     return encode_float(buffer, value, length=4, byteorder=byteorder)
>>> buf = bytearray(5)
>>> encode_tuple(buf, (1, 1.5), (enc_i8, enc_f32), (1, 4), byteorder=ByteOrder.LITTLE)
Ok(5)
>>> list(buf)
[1, 0, 0, 192, 63]

Breakdown of the result:

    01: 1 as i8
    0000c03f: 1.5 as f32, little-endian

>>> def dec_i8(buffer, byteorder):
...     return decode_int(buffer, length=1, signed=True, byteorder=byteorder)
>>> def dec_f32(buffer, byteorder):
...     return decode_float(buffer, length=4, byteorder=byteorder)
>>> decode_tuple(buf, (dec_i8, dec_f32), (1, 4), byteorder=ByteOrder.LITTLE)
Ok((1, 1.5))
>>> decode_tuple(buf[:4], (dec_i8, dec_f32), (1, 4), byteorder=ByteOrder.LITTLE)
Err(OutOfSpaceError('not enough space: 5 bytes required, 4 available'))
"""

from typing import Any

from safepod.serialization.buffer import read_window, write_window
from safepod.serialization.exceptions import PodError
from safepod.serialization.types import Buffer, ByteOrder, MutableBuffer
from safepod.utils.result import Ok, Result, propagate_result

from . import Decoder, Encoder


@propagate_result
def encode_tuple(
    buffer: MutableBuffer,
    values: tuple[Any, ...],
    encoders: tuple[Encoder[Any], ...],
    sizes: tuple[int, ...],
    *,
    byteorder: ByteOrder,
) -> Result[int, PodError]:
    """ Write each value with its encoder into successive sub-ranges, returns the total size.

    Total space is checked up front, so no field write can run out of space.
    """
    assert len(values) == len(encoders) == len(sizes)
    if not encoders:
        return Ok(0)
    size = sum(sizes)
    view = write_window(buffer, size).unwrap_or_propagate()
    offset = 0
    for value, encoder, field_size in zip(values, encoders, sizes):
        encoder(value, view[offset:offset + field_size], byteorder).unwrap_or_propagate()
        offset += field_size
    return Ok(size)


@propagate_result
def decode_tuple(
    buffer: Buffer,
    decoders: tuple[Decoder[Any], ...],
    sizes: tuple[int, ...],
    *,
    byteorder: ByteOrder,
) -> Result[tuple[Any, ...], PodError]:
    """ Read each field with its decoder from successive sub-ranges.

    Total space is checked up front, after that only a field-level `OutOfRangeError` can happen, and the first one
    aborts the decode.
    """
    assert len(decoders) == len(sizes)
    if not decoders:
        return Ok(())
    size = sum(sizes)
    view = read_window(buffer, size).unwrap_or_propagate()
    values: list[Any] = []
    offset = 0
    for decoder, field_size in zip(decoders, sizes):
        values.append(decoder(view[offset:offset + field_size], byteorder).unwrap_or_propagate())
        offset += field_size
    return Ok(tuple(values))
