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

import unittest
from typing import Any, TypeVar
from unittest import main as ut_main

from structlog import get_logger

from safepod.pod_types import PodType
from safepod.serialization import ByteOrder, PodError
from safepod.utils.result import Result

logger = get_logger()
main = ut_main

T = TypeVar('T')


class TestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.log = logger.new(test=self.id())

    def assertOk(self, result: Result[Any, Any], value: Any) -> None:
        self.assertTrue(result.is_ok(), f'expected Ok({value!r}), got {result!r}')
        self.assertEqual(result.unwrap(), value)

    def assertErr(self, result: Result[Any, Any], error_class: type[PodError]) -> PodError:
        self.assertTrue(result.is_err(), f'expected an error, got {result!r}')
        error = result.unwrap_err()
        self.assertIsInstance(error, error_class)
        return error

    def assertRoundTrip(self, pod_type: PodType[T], value: T) -> None:
        """ Encode and decode the value in both byte orders and check the size of each encoding.
        """
        for byteorder in ByteOrder:
            buffer = bytearray(pod_type.SIZE)
            self.assertOk(pod_type.encode(value, buffer, byteorder), pod_type.SIZE)
            self.assertOk(pod_type.decode(buffer, byteorder), value)

    def assertOutOfSpace(self, pod_type: PodType[T], value: T) -> None:
        """ Every buffer shorter than SIZE must fail with an OutOfSpaceError, for encoding and for decoding.
        """
        from safepod.serialization import OutOfSpaceError
        encoded = pod_type.to_bytes(value, byteorder=ByteOrder.LITTLE)
        for length in range(pod_type.SIZE):
            for byteorder in ByteOrder:
                self.assertErr(pod_type.decode(encoded[:length], byteorder), OutOfSpaceError)
                buffer = bytearray(length)
                self.assertErr(pod_type.encode(value, buffer, byteorder), OutOfSpaceError)
                self.assertEqual(buffer, bytearray(length))
