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

from types import UnionType
from typing import Any


def is_subclass(cls: Any, class_or_tuple: type | tuple[type, ...] | UnionType, /) -> bool:
    """ Like issubclass() but resolves NewType chains and returns False for things that aren't classes.

    >>> is_subclass(bool, int)
    True
    >>> from typing import NewType
    >>> N = NewType('N', int)
    >>> is_subclass(N, int)
    True
    >>> M = NewType('M', N)
    >>> is_subclass(M, int | str)
    True
    >>> is_subclass(tuple[int, int], tuple)
    False
    """
    while (super_type := getattr(cls, '__supertype__', None)) is not None:
        cls = super_type
    if not isinstance(cls, type):
        return False
    return issubclass(cls, class_or_tuple)


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(int)
    'int'
    >>> pretty_type(tuple[int, str])
    'tuple[int, str]'
    >>> pretty_type(None)
    'None'
    """
    if type_ is type(None) or type_ is None:
        return 'None'
    elif hasattr(type_, '__args__'):
        return str(type_)
    else:
        return getattr(type_, '__name__', repr(type_))
