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
This module holds the fixed-size encoding of primitive scalars.

Simple in this context means "not compound". For example a fixed-size int encoding can have length/signed/byteorder
parameters, but not a generic function or type as a parameter. Encoders that delegate to other encoders (arrays,
products) live in the `compound_encoding` module.

Each submodule `x` deals with a single type and looks like this:

    def encode_x(buffer: MutableBuffer, value: ValueType, ...config params...) -> Result[int, PodError]:
        ...

    def decode_x(buffer: Buffer, ...config params...) -> Result[ValueType, PodError]:
        ...

Encoders write a prefix of the buffer and return how many bytes were written, decoders read a prefix of the buffer
and ignore whatever comes after it. Both return `Err(OutOfSpaceError(...))` when the buffer is too short.
"""
