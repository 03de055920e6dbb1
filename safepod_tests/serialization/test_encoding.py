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

import math
import struct

import pytest

from safepod.serialization import ByteOrder, OutOfRangeError, OutOfSpaceError
from safepod.serialization.buffer import read_window, write_window
from safepod.serialization.encoding.bool import decode_bool, encode_bool
from safepod.serialization.encoding.float import decode_float, encode_float


@pytest.mark.parametrize('raw', [2, 3, 0x7f, 0x80, 0xff])
def test_bool_out_of_range(raw: int) -> None:
    result = decode_bool(bytes([raw]))
    assert result.is_err()
    assert isinstance(result.unwrap_err(), OutOfRangeError)


def test_bool_space() -> None:
    assert isinstance(decode_bool(b'').unwrap_err(), OutOfSpaceError)
    assert isinstance(encode_bool(bytearray(), True).unwrap_err(), OutOfSpaceError)


def test_out_of_space_error_details() -> None:
    error = read_window(b'\x00' * 3, 8).unwrap_err()
    assert isinstance(error, OutOfSpaceError)
    assert error.required == 8
    assert error.available == 3


def test_write_into_read_only_buffer() -> None:
    with pytest.raises(TypeError):
        write_window(b'\x00\x00', 1)
    with pytest.raises(TypeError):
        write_window(memoryview(bytearray(2)).toreadonly(), 1)


def test_windows_accept_non_byte_views() -> None:
    words = memoryview(bytearray(8)).cast('I')
    view = write_window(words, 8).unwrap()
    view[:] = bytes(range(8))
    assert bytes(read_window(words, 8).unwrap()) == bytes(range(8))


@pytest.mark.parametrize('length,fmt', [(4, 'f'), (8, 'd')])
@pytest.mark.parametrize('value', [0.0, -0.0, 1.5, -2.25, math.inf, -math.inf])
def test_float_matches_struct(length: int, fmt: str, value: float) -> None:
    for byteorder in ByteOrder:
        buffer = bytearray(length)
        assert encode_float(buffer, value, length=length, byteorder=byteorder).unwrap() == length
        assert bytes(buffer) == struct.pack(byteorder.struct_prefix + fmt, value)
        decoded = decode_float(buffer, length=length, byteorder=byteorder).unwrap()
        assert decoded == value
        assert math.copysign(1.0, decoded) == math.copysign(1.0, value)


def test_float_nan_decodes() -> None:
    # every bit pattern is a valid float
    value = decode_float(b'\x00\x00\xc0\x7f', length=4, byteorder=ByteOrder.LITTLE).unwrap()
    assert math.isnan(value)


def test_float_too_big_for_f32() -> None:
    with pytest.raises(ValueError):
        encode_float(bytearray(4), 1e39, length=4, byteorder=ByteOrder.LITTLE)


def test_unsupported_float_length() -> None:
    with pytest.raises(ValueError):
        decode_float(bytes(2), length=2, byteorder=ByteOrder.LITTLE)
