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
There are two separate failure channels:

- `PodError` and its two leaves, `OutOfSpaceError` and `OutOfRangeError`, are *returned* (inside an `Err`) by
  encode/decode operations on codecs that are already valid;
- `PodConfigError` is *raised* when a codec is being assembled from a type and the type (or its configuration) is not
  acceptable.
"""


class SerializationError(Exception):
    pass


class PodError(SerializationError):
    """ Base class for errors returned by fixed-size codec operations."""


class OutOfSpaceError(PodError):
    """ The supplied buffer is shorter than the size required by the operation."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(f'not enough space: {required} bytes required, {available} available')
        self.required = required
        self.available = available


class OutOfRangeError(PodError):
    """ The buffer has enough bytes, but they do not decode to a valid value of the target type."""


class PodConfigError(TypeError):
    """ A type or its configuration cannot be turned into a codec, raised at construction time."""
