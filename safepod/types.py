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
Width-tagged annotations understood by `safepod.pod_types.make_pod_type`.

Plain `int` and `float` don't say how many bytes they take, so annotations use these instead. At runtime they are
ordinary `int`/`float` values:

>>> from dataclasses import dataclass
>>> @dataclass
... class Header:
...     version: u8
...     flags: Array[bool, 4]
...     scale: f32
"""

from typing import Annotated, Any, NamedTuple, NewType

from safepod.serialization.exceptions import PodConfigError

u8 = NewType('u8', int)
u16 = NewType('u16', int)
u32 = NewType('u32', int)
u64 = NewType('u64', int)
u128 = NewType('u128', int)

i8 = NewType('i8', int)
i16 = NewType('i16', int)
i32 = NewType('i32', int)
i64 = NewType('i64', int)
i128 = NewType('i128', int)

f32 = NewType('f32', float)
f64 = NewType('f64', float)


class ArrayLength(NamedTuple):
    """ Metadata carried by `Array[T, N]` annotations."""
    length: int


class Array:
    """ `Array[T, N]` annotates a fixed-length homogeneous array, decoded values are tuples of N elements.

    >>> Array[u8, 3]
    typing.Annotated[tuple[safepod.types.u8, ...], ArrayLength(length=3)]
    """

    def __class_getitem__(cls, params: Any) -> Any:
        if not isinstance(params, tuple) or len(params) != 2:
            raise PodConfigError('expected Array[<type>, <length>]')
        element_type, length = params
        if isinstance(length, bool) or not isinstance(length, int) or length < 0:
            raise PodConfigError(f'array length must be a non-negative int, got {length!r}')
        return Annotated[tuple[element_type, ...], ArrayLength(length)]
