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
This module holds compound fixed-size encoding implementations.

Compound encoders delegate the encoding of each part to another encoder, for example an array encoder is prepared to
lay out N elements and delegates each element to an encoder that knows how to encode `T`. Since every part has a
statically known size, compound encoders only need each part's size to compute the offsets; there are no length
prefixes and no padding.

Each submodule `x` looks like this:

    def encode_x(buffer: MutableBuffer, value: ValueType, ...parts..., byteorder: ByteOrder) -> Result[int, PodError]:
        ...

    def decode_x(buffer: Buffer, ...parts..., byteorder: ByteOrder) -> Result[ValueType, PodError]:
        ...
"""

from typing import Protocol, TypeVar

from safepod.serialization.exceptions import PodError
from safepod.serialization.types import Buffer, ByteOrder, MutableBuffer
from safepod.utils.result import Result

T_co = TypeVar('T_co', covariant=True)
T_contra = TypeVar('T_contra', contravariant=True)


class Decoder(Protocol[T_co]):
    def __call__(self, buffer: Buffer, byteorder: ByteOrder, /) -> Result[T_co, PodError]:
        ...


class Encoder(Protocol[T_contra]):
    def __call__(self, value: T_contra, buffer: MutableBuffer, byteorder: ByteOrder, /) -> Result[int, PodError]:
        ...
