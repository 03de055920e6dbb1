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
Return values of codec operations: `Ok(value)` on success, `Err(error)` when the buffer is too short or holds bytes
that don't decode.

Codecs that delegate to other codecs stop at the first error and hand it back as is. Writing that check after every
call gets repetitive, so a function decorated with `@propagate_result` can call `.unwrap_or_propagate()` instead:

>>> @propagate_result
... def add_one(r: Result[int, str]) -> Result[int, str]:
...     value = r.unwrap_or_propagate()
...     return Ok(value + 1)
>>> add_one(Ok(1))
Ok(2)
>>> add_one(Err('nope'))
Err('nope')
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Generic, Literal, NoReturn, ParamSpec, TypeAlias, TypeVar

from typing_extensions import TypeIs

T = TypeVar('T', covariant=True)
E = TypeVar('E', covariant=True)
U = TypeVar('U')
P = ParamSpec('P')


class Ok(Generic[T]):
    """ Successful outcome, wraps the decoded value or the number of bytes written."""

    __slots__ = ('_value',)
    __match_args__ = ('_value',)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f'Ok({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Ok) and self._value == other._value

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(self, f'expected an error, got {self!r}')

    def unwrap_or_raise(self) -> T:
        return self._value

    def unwrap_or_propagate(self) -> T:
        return self._value

    def map(self, op: Callable[[T], U]) -> Ok[U]:
        return Ok(op(self._value))


class Err(Generic[E]):
    """ Failed outcome, wraps the error.

    Exceptions compare by identity, so `Err(e1) == Err(e2)` only holds when the same error instance was propagated.
    """

    __slots__ = ('_value',)
    __match_args__ = ('_value',)

    def __init__(self, value: E) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f'Err({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Err) and self._value == other._value

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        error = UnwrapError(self, f'expected a value, got {self!r}')
        if isinstance(self._value, BaseException):
            raise error from self._value
        raise error

    def unwrap_err(self) -> E:
        return self._value

    def unwrap_or_raise(self) -> NoReturn:
        """ Raise the wrapped error, it must be an exception."""
        if not isinstance(self._value, BaseException):
            raise UnwrapError(self, f'cannot raise a non-exception error: {self._value!r}')
        raise self._value

    def unwrap_or_propagate(self) -> NoReturn:
        """ Leave the enclosing `@propagate_result` function, which then returns this same `Err`."""
        raise _Propagate(self)

    def map(self, _op: Callable[[T], U]) -> Err[E]:
        return self


Result: TypeAlias = Ok[T] | Err[E]


class UnwrapError(Exception):
    """ Raised when unwrapping the wrong kind of result, the offending result is kept in `.result`."""

    def __init__(self, result: Result[Any, Any], message: str) -> None:
        super().__init__(message)
        self.result = result


class _Propagate(Exception):
    """ Carries an `Err` out of a function, only `propagate_result` is meant to catch it."""

    def __init__(self, err: Err[Any]) -> None:
        super().__init__('unwrap_or_propagate() used outside of a @propagate_result function')
        self.err = err


def propagate_result(f: Callable[P, Result[T, E]]) -> Callable[P, Result[T, E]]:
    """ Let `f` use `unwrap_or_propagate()`, the first propagated `Err` becomes the return value of `f`."""
    @functools.wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
        try:
            return f(*args, **kwargs)
        except _Propagate as e:
            return e.err

    return wrapper


def is_ok(result: Result[T, E]) -> TypeIs[Ok[T]]:
    return result.is_ok()


def is_err(result: Result[T, E]) -> TypeIs[Err[E]]:
    return result.is_err()
