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

from dataclasses import dataclass, field
from typing import NamedTuple

from safepod.pod_types import (
    DataclassPodType,
    NamedTuplePodType,
    PodType,
    TuplePodType,
    Uint8PodType,
    UnitPodType,
    make_pod_type,
    zeroed,
)
from safepod.serialization import Buffer, ByteOrder, MutableBuffer, OutOfRangeError, PodConfigError, PodError
from safepod.types import Array, f32, f64, i8, u8, u16, u32
from safepod.utils.result import Err, Result
from safepod_tests import unittest


@dataclass
class Sample:
    a: i8
    b: f32


class SamplePair(NamedTuple):
    first: u16
    second: bool


@dataclass
class Nested:
    flag: bool
    sample: Sample
    pair: SamplePair
    values: Array[u8, 3]


@dataclass
class Empty:
    pass


@dataclass
class WithEmpty:
    before: u8
    nothing: Empty
    none: None
    after: u8


class _FailingPodType(PodType[int]):
    """ Always fails to decode with the same error instance."""

    _size = 1

    def __init__(self, error: PodError) -> None:
        self.error = error

    def _check_value(self, value: int, /, *, deep: bool) -> None:
        pass

    def _zeroed(self) -> int:
        return 0

    def _encode(self, value: int, buffer: MutableBuffer, byteorder: ByteOrder, /) -> Result[int, PodError]:
        return Err(self.error)

    def _decode(self, buffer: Buffer, byteorder: ByteOrder, /) -> Result[int, PodError]:
        return Err(self.error)


class ProductPodTypeTestCase(unittest.TestCase):
    def test_two_field_record(self) -> None:
        pod_type = make_pod_type(Sample)
        self.assertIsInstance(pod_type, DataclassPodType)
        self.assertEqual(pod_type.SIZE, 5)

        buffer = bytearray(5)
        self.assertOk(pod_type.encode(Sample(a=1, b=1.5), buffer, ByteOrder.LITTLE), 5)
        self.assertEqual(list(buffer), [1, 0, 0, 192, 63])
        self.assertOk(pod_type.decode(buffer, ByteOrder.LITTLE), Sample(a=1, b=1.5))

        self.assertOk(pod_type.encode(Sample(a=1, b=1.5), buffer, ByteOrder.BIG), 5)
        self.assertEqual(list(buffer), [1, 63, 192, 0, 0])
        self.assertOk(pod_type.decode(buffer, ByteOrder.BIG), Sample(a=1, b=1.5))

        self.assertOutOfSpace(pod_type, Sample(a=1, b=1.5))

    def test_same_record_as_tuple(self) -> None:
        pod_type = make_pod_type(tuple[i8, f32])
        self.assertIsInstance(pod_type, TuplePodType)
        self.assertEqual(pod_type.to_bytes((1, 1.5), byteorder=ByteOrder.LITTLE), bytes([1, 0, 0, 192, 63]))
        self.assertRoundTrip(pod_type, (-128, -0.5))

    def test_size_is_sum_of_fields(self) -> None:
        cases = [
            (tuple[u8, u16, u32], 7),
            (tuple[f64, bool], 9),
            (SamplePair, 3),
            (Nested, 1 + 5 + 3 + 3),
            (WithEmpty, 2),
        ]
        for type_, size in cases:
            self.assertEqual(make_pod_type(type_).SIZE, size)

    def test_fields_occupy_consecutive_ranges(self) -> None:
        pod_type = make_pod_type(Nested)
        value = Nested(flag=True, sample=Sample(a=-1, b=2.0), pair=SamplePair(0x0102, True), values=(7, 8, 9))
        data = pod_type.to_bytes(value, byteorder=ByteOrder.BIG)
        self.assertEqual(data[0:1], b'\x01')
        self.assertEqual(data[1:6], make_pod_type(Sample).to_bytes(value.sample, byteorder=ByteOrder.BIG))
        self.assertEqual(data[6:9], b'\x01\x02\x01')
        self.assertEqual(data[9:12], b'\x07\x08\x09')
        self.assertRoundTrip(pod_type, value)
        self.assertOutOfSpace(pod_type, value)

    def test_namedtuple(self) -> None:
        pod_type = make_pod_type(SamplePair)
        self.assertIsInstance(pod_type, NamedTuplePodType)
        self.assertRoundTrip(pod_type, SamplePair(first=513, second=False))
        decoded = pod_type.from_bytes(b'\x01\x02\x01', byteorder=ByteOrder.LITTLE)
        self.assertIsInstance(decoded, SamplePair)
        self.assertEqual(decoded, SamplePair(first=0x0201, second=True))

    def test_zeroed(self) -> None:
        self.assertEqual(
            zeroed(Nested),
            Nested(flag=False, sample=Sample(a=0, b=0.0), pair=SamplePair(0, False), values=(0, 0, 0)),
        )
        self.assertEqual(zeroed(tuple[bool, u32]), (False, 0))
        pod_type = make_pod_type(Nested)
        for byteorder in ByteOrder:
            self.assertEqual(pod_type.to_bytes(pod_type.zeroed(), byteorder=byteorder), bytes(pod_type.SIZE))

    def test_zeroed_values_are_independent(self) -> None:
        pod_type = make_pod_type(tuple[Sample, Sample])
        first, second = pod_type.zeroed()
        self.assertIsNot(first, second)

    def test_products_without_fields(self) -> None:
        for type_, value in [(tuple[()], ()), (None, None), (Empty, Empty())]:
            pod_type = make_pod_type(type_)
            self.assertEqual(pod_type.SIZE, 0)
            self.assertEqual(pod_type.zeroed(), value)
            for byteorder in ByteOrder:
                self.assertOk(pod_type.encode(value, bytearray(), byteorder), 0)
                self.assertOk(pod_type.decode(b'', byteorder), value)
        self.assertIsInstance(make_pod_type(None), UnitPodType)

    def test_products_containing_empty_fields(self) -> None:
        pod_type = make_pod_type(WithEmpty)
        value = WithEmpty(before=1, nothing=Empty(), none=None, after=2)
        self.assertEqual(pod_type.to_bytes(value), b'\x01\x02')
        self.assertRoundTrip(pod_type, value)

    def test_field_error_is_propagated_unchanged(self) -> None:
        error = OutOfRangeError('custom')
        inner = TuplePodType([Uint8PodType(), _FailingPodType(error)])
        outer = TuplePodType([Uint8PodType(), inner])
        self.assertEqual(outer.SIZE, 3)
        for byteorder in ByteOrder:
            result = outer.decode(bytes(3), byteorder)
            self.assertTrue(result.is_err())
            self.assertIs(result.unwrap_err(), error)
            result = outer.encode((1, (2, 3)), bytearray(3), byteorder)
            self.assertIs(result.unwrap_err(), error)

    def test_inner_decode_error(self) -> None:
        pod_type = make_pod_type(Nested)
        data = bytearray(pod_type.to_bytes(zeroed(Nested)))
        # the bool of the pair
        data[8] = 2
        self.assertErr(pod_type.decode(data, ByteOrder.LITTLE), OutOfRangeError)
        # the outer bool
        data[8] = 0
        data[0] = 9
        self.assertErr(pod_type.decode(data, ByteOrder.LITTLE), OutOfRangeError)

    def test_invalid_values(self) -> None:
        pod_type = make_pod_type(Nested)
        with self.assertRaises(TypeError):
            pod_type.check_value(Sample(a=0, b=0.0))
        with self.assertRaises(ValueError):
            pod_type.check_value(Nested(flag=True, sample=Sample(a=300, b=0.0), pair=SamplePair(0, False),
                                        values=(0, 0, 0)))
        with self.assertRaises(TypeError):
            make_pod_type(tuple[u8, u8]).check_value((1, 2, 3))

    def test_unsupported_products(self) -> None:
        @dataclass
        class WithInt:
            x: int

        @dataclass
        class NotInit:
            x: u8
            y: u8 = field(init=False, default=0)

        for type_ in (tuple, tuple[u8, ...], list[u8], WithInt, NotInit, dict[u8, u8]):
            with self.assertRaises(PodConfigError):
                make_pod_type(type_)

    def test_invalid_field_leaves_buffer_untouched(self) -> None:
        @dataclass
        class Pair:
            a: u8
            b: u8

        pod_type = make_pod_type(Pair)
        for byteorder in ByteOrder:
            buffer = bytearray(b'\xee\xee')
            with self.assertRaises(ValueError):
                pod_type.encode(Pair(7, 300), buffer, byteorder)
            self.assertEqual(buffer, bytearray(b'\xee\xee'))

        nested = make_pod_type(tuple[u8, tuple[u8, Array[u8, 2]]])
        buffer = bytearray(b'\xee' * nested.SIZE)
        with self.assertRaises(ValueError):
            nested.encode((1, (2, (3, -1))), buffer, ByteOrder.BIG)
        self.assertEqual(buffer, bytearray(b'\xee' * nested.SIZE))

    def test_unit_rejects_values(self) -> None:
        pod_type = make_pod_type(None)
        with self.assertRaises(TypeError) as cm:
            pod_type.encode(5, bytearray(), ByteOrder.LITTLE)
        self.assertNotIsInstance(cm.exception, PodConfigError)
        self.assertEqual(pod_type.encode(None, bytearray(), ByteOrder.LITTLE).unwrap(), 0)
