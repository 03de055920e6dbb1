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

from dataclasses import dataclass
from enum import Enum, IntEnum

from safepod.conf.settings import PodSettings, ZeroVariantPolicy
from safepod.pod_types import EnumPodType, make_pod_type, pod_enum, resolve_enum_config, zeroed
from safepod.serialization import ByteOrder, OutOfRangeError, OutOfSpaceError, PodConfigError
from safepod.types import Array, f32, i16, u8, u16
from safepod_tests import unittest

EXPLICIT_SETTINGS = PodSettings(ZERO_VARIANT_POLICY=ZeroVariantPolicy.EXPLICIT)


@pod_enum(repr=u8)
class Letter(Enum):
    A = 5
    B = 0
    C = 7


@pod_enum(repr=u16, zero='OFF')
class Mode(IntEnum):
    ON = 1
    OFF = 2
    AUTO = 0x0100


@dataclass
class Reading:
    mode: Mode
    letters: Array[Letter, 2]


class EnumPodTypeTestCase(unittest.TestCase):
    def test_tags(self) -> None:
        pod_type = make_pod_type(Letter)
        self.assertIsInstance(pod_type, EnumPodType)
        self.assertEqual(pod_type.SIZE, 1)
        self.assertEqual(pod_type.to_bytes(Letter.A), b'\x05')
        self.assertEqual(pod_type.to_bytes(Letter.B), b'\x00')
        self.assertEqual(pod_type.to_bytes(Letter.C), b'\x07')
        for member in Letter:
            self.assertRoundTrip(pod_type, member)

    def test_tags_use_byte_order(self) -> None:
        pod_type = make_pod_type(Mode)
        self.assertEqual(pod_type.SIZE, 2)
        self.assertEqual(pod_type.to_bytes(Mode.AUTO, byteorder=ByteOrder.LITTLE), b'\x00\x01')
        self.assertEqual(pod_type.to_bytes(Mode.AUTO, byteorder=ByteOrder.BIG), b'\x01\x00')
        self.assertOk(pod_type.decode_le(b'\x01\x00'), Mode.ON)
        self.assertOk(pod_type.decode_be(b'\x01\x00'), Mode.AUTO)

    def test_unknown_tag(self) -> None:
        pod_type = make_pod_type(Letter)
        for byteorder in ByteOrder:
            error = self.assertErr(pod_type.decode(b'\x09', byteorder), OutOfRangeError)
            self.assertIn('Letter', str(error))
            self.assertIn('9', str(error))
        self.assertErr(pod_type.decode(b'', ByteOrder.LITTLE), OutOfSpaceError)

    def test_zero_variant_scan(self) -> None:
        self.assertIs(zeroed(Letter), Letter.B)

        @pod_enum(repr=u8)
        class NoZeroTag(Enum):
            X = 3
            Y = 4

        self.assertIs(zeroed(NoZeroTag), NoZeroTag.X)

    def test_zero_variant_designated(self) -> None:
        self.assertIs(zeroed(Mode), Mode.OFF)
        self.assertIs(zeroed(Mode, settings=EXPLICIT_SETTINGS), Mode.OFF)
        self.assertEqual(zeroed(Reading), Reading(mode=Mode.OFF, letters=(Letter.B, Letter.B)))

    def test_zero_variant_explicit_policy(self) -> None:
        with self.assertRaises(PodConfigError):
            make_pod_type(Letter, settings=EXPLICIT_SETTINGS)
        with self.assertRaises(PodConfigError):
            make_pod_type(Reading, settings=EXPLICIT_SETTINGS)

    def test_expression_tags_are_not_scanned(self) -> None:
        @pod_enum(repr=u8, tags={'Y': lambda: 0})
        class Computed(Enum):
            X = 1
            Y = 2

        pod_type = make_pod_type(Computed)
        self.assertEqual(pod_type.to_bytes(Computed.Y), b'\x00')
        self.assertIs(pod_type.zeroed(), Computed.X)

        @pod_enum(repr=u8, tags={'Y': 0})
        class LiteralTag(Enum):
            X = 1
            Y = 2

        self.assertIs(zeroed(LiteralTag), LiteralTag.Y)

    def test_tag_expressions(self) -> None:
        @pod_enum(repr=i16, tags={'LOW': lambda: -(1 << 8), 'HIGH': lambda: 1 << 8})
        class Level(Enum):
            LOW = 'low'
            HIGH = 'high'

        pod_type = make_pod_type(Level)
        self.assertEqual(pod_type.tag_of(Level.LOW), -256)
        self.assertEqual(pod_type.to_bytes(Level.HIGH, byteorder=ByteOrder.BIG), b'\x01\x00')
        self.assertRoundTrip(pod_type, Level.LOW)

    def test_failing_tag_expression(self) -> None:
        class Broken(Enum):
            X = 1

        with self.assertRaises(PodConfigError) as cm:
            resolve_enum_config(Broken, repr=u8, tags={'X': lambda: 1 // 0})
        self.assertIsInstance(cm.exception.__cause__, ZeroDivisionError)

    def test_invalid_configurations(self) -> None:
        class Plain(Enum):
            X = 1
            Y = 2

        # missing representation
        with self.assertRaises(PodConfigError):
            make_pod_type(Plain)
        with self.assertRaises(PodConfigError):
            resolve_enum_config(Plain, repr=None)
        # representation is not a primitive scalar
        with self.assertRaises(PodConfigError):
            resolve_enum_config(Plain, repr=tuple[u8, u8])
        with self.assertRaises(PodConfigError):
            resolve_enum_config(Plain, repr=Array[u8, 1])
        with self.assertRaises(PodConfigError):
            resolve_enum_config(Plain, repr=int)
        # duplicate tags
        with self.assertRaises(PodConfigError):
            resolve_enum_config(Plain, repr=u8, tags={'Y': 1})
        # tags that don't fit the representation
        with self.assertRaises(PodConfigError):
            resolve_enum_config(Plain, repr=u8, tags={'Y': 256})
        with self.assertRaises(PodConfigError):
            resolve_enum_config(Plain, repr=u8, tags={'Y': 'two'})
        with self.assertRaises(PodConfigError):
            resolve_enum_config(Plain, repr=bool, tags={'X': 0, 'Y': 1})
        # unknown variants
        with self.assertRaises(PodConfigError):
            resolve_enum_config(Plain, repr=u8, tags={'Z': 3})
        with self.assertRaises(PodConfigError):
            resolve_enum_config(Plain, repr=u8, zero='Z')
        # NaN tags
        with self.assertRaises(PodConfigError):
            resolve_enum_config(Plain, repr=f32, tags={'X': float('nan')})

    def test_tags_on_aliases(self) -> None:
        class Aliased(Enum):
            A = 1
            B = 1

        with self.assertRaises(PodConfigError):
            resolve_enum_config(Aliased, repr=u8, tags={'B': 2})
        config = resolve_enum_config(Aliased, repr=u8, tags={'A': 2})
        self.assertEqual([(variant.name, variant.tag) for variant in config.variants], [('A', 2)])

    def test_errors_are_raised_at_declaration(self) -> None:
        with self.assertRaises(PodConfigError):
            @pod_enum(repr=u8)
            class TooBig(Enum):
                X = 1000

    def test_bool_representation(self) -> None:
        @pod_enum(repr=bool)
        class Switch(Enum):
            ON = True
            OFF = False

        pod_type = make_pod_type(Switch)
        self.assertIs(pod_type.zeroed(), Switch.OFF)
        self.assertEqual(pod_type.to_bytes(Switch.ON), b'\x01')
        # the representation decodes first, and its error is returned as is
        error = self.assertErr(pod_type.decode(b'\x02', ByteOrder.LITTLE), OutOfRangeError)
        self.assertIn('boolean', str(error))

    def test_float_representation(self) -> None:
        @pod_enum(repr=f32, tags={'POS': 0.0, 'NEG': -0.0})
        class Signed(Enum):
            POS = 'positive zero'
            NEG = 'negative zero'
            ONE = 1.0

        pod_type = make_pod_type(Signed)
        # tags are told apart by their encoding
        self.assertIs(pod_type.zeroed(), Signed.POS)
        self.assertOk(pod_type.decode_le(b'\x00\x00\x00\x80'), Signed.NEG)
        self.assertOk(pod_type.decode_be(b'\x3f\x80\x00\x00'), Signed.ONE)
        self.assertErr(pod_type.decode_be(b'\x3f\xc0\x00\x00'), OutOfRangeError)
        for member in Signed:
            self.assertRoundTrip(pod_type, member)

    def test_enum_inside_products(self) -> None:
        pod_type = make_pod_type(Reading)
        self.assertEqual(pod_type.SIZE, 4)
        value = Reading(mode=Mode.AUTO, letters=(Letter.C, Letter.A))
        self.assertEqual(pod_type.to_bytes(value, byteorder=ByteOrder.BIG), b'\x01\x00\x07\x05')
        self.assertRoundTrip(pod_type, value)
        self.assertOutOfSpace(pod_type, value)
        self.assertErr(pod_type.decode(b'\x01\x00\x07\x06', ByteOrder.BIG), OutOfRangeError)

    def test_wrong_member(self) -> None:
        pod_type = make_pod_type(Letter)
        with self.assertRaises(TypeError):
            pod_type.to_bytes(Mode.ON)
        with self.assertRaises(TypeError):
            pod_type.to_bytes(5)
