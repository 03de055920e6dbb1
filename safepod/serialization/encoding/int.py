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
This module implements encoding of integers with a fixed size, the size, signedness and byte order are parametrized.

Any width is accepted, which covers the 8/16/32/64/128-bit codecs with the same two functions.

>>> buf = bytearray(2)
>>> encode_int(buf, -1234, length=2, signed=True, byteorder=ByteOrder.BIG)
Ok(2)
>>> buf.hex()
'fb2e'
>>> encode_int(buf, -1234, length=2, signed=True, byteorder=ByteOrder.LITTLE)
Ok(2)
>>> buf.hex()
'2efb'
>>> decode_int(bytes.fromhex('2efb'), length=2, signed=True, byteorder=ByteOrder.LITTLE)
Ok(-1234)
>>> decode_int(bytes.fromhex('2efb'), length=2, signed=False, byteorder=ByteOrder.BIG)
Ok(12027)
>>> decode_int(bytes.fromhex('00ff'), length=1, signed=False, byteorder=ByteOrder.BIG)  # trailing byte is ignored
Ok(0)
"""

from safepod.serialization.buffer import read_window, write_window
from safepod.serialization.exceptions import PodError
from safepod.serialization.types import Buffer, ByteOrder, MutableBuffer
from safepod.utils.result import Ok, Result, propagate_result


@propagate_result
def encode_int(
    buffer: MutableBuffer,
    number: int,
    *,
    length: int,
    signed: bool,
    byteorder: ByteOrder,
) -> Result[int, PodError]:
    """ Encode an int using the given byte-length, signedness and byte order.

    A number that does not fit is a programming error and raises `ValueError`, codecs check ranges before getting here.
    """
    view = write_window(buffer, length).unwrap_or_propagate()
    try:
        data = int.to_bytes(number, length, byteorder=byteorder.value, signed=signed)
    except OverflowError:
        raise ValueError('too big to encode')
    view[:] = data
    return Ok(length)


@propagate_result
def decode_int(buffer: Buffer, *, length: int, signed: bool, byteorder: ByteOrder) -> Result[int, PodError]:
    """ Decode an int using the given byte-length, signedness and byte order.

    Every bit pattern is a valid integer, so the only possible error is running out of space.
    """
    view = read_window(buffer, length).unwrap_or_propagate()
    return Ok(int.from_bytes(view, byteorder=byteorder.value, signed=signed))
