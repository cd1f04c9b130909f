r"""
Two small algebraic data types: Either (Left | Right) and Identity.

Contains:
    class Either            (abstract; Left | Right)
        map                 (self, f: Callable[[A], C]) -> Either
        chain               (self, f: Callable[[A], Either]) -> Either
        fold                (self, on_left: Callable[[B], C], on_right: Callable[[A], C]) -> C
        get_or_else         (self, default: C) -> A | C
        is_left, is_right   (self) -> bool
    class Left(Either)
    class Right(Either)
    class Identity
        map                 (self, f: Callable[[A], C]) -> Identity
        fold                (self, f: Callable[[A], C]) -> C
    Id                      (value: A) -> Identity

    from_nullable           (value: A | None, error: B = None) -> Either
    try_catch               (fn: Callable[..., A], *args, **kwargs) -> Either

Both variants of Either are frozen dataclasses, so they compare by value and can be pattern matched:
    match result:
        case Right(value): ...
        case Left(error): ...
"""
from __future__ import annotations

from fntools.basetypes import *

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic

logger = logging.getLogger(__name__)

A = TypeVar('A')  # success type
B = TypeVar('B')  # error type
C = TypeVar('C')


class Either(ABC, Generic[B, A]):
    """
    A value that is either a failure (Left) or a success (Right).
    map and chain only ever touch a Right; a Left passes through untouched, so the branching is deferred
    until the value is taken out with fold.
    """
    value: Any

    @abstractmethod
    def is_right(self) -> bool:
        raise NotImplementedError

    def is_left(self) -> bool:
        return not self.is_right()

    @abstractmethod
    def map(self, f: Callable[[A], C]) -> Either[B, C]:
        raise NotImplementedError

    @abstractmethod
    def chain(self, f: Callable[[A], Either[B, C]]) -> Either[B, C]:
        raise NotImplementedError

    @abstractmethod
    def fold(self, on_left: Callable[[B], C], on_right: Callable[[A], C]) -> C:
        raise NotImplementedError

    @abstractmethod
    def get_or_else(self, default: C) -> A | C:
        raise NotImplementedError


@dataclass(frozen=True, repr=False)
class Left(Either[B, A]):
    value: B

    def is_right(self) -> bool:
        return False

    def map(self, f: Callable[[A], C]) -> Either[B, C]:
        return self  # No transformation on Left

    def chain(self, f: Callable[[A], Either[B, C]]) -> Either[B, C]:
        return self  # No transformation on Left

    def fold(self, on_left: Callable[[B], C], on_right: Callable[[A], C]) -> C:
        return on_left(self.value)

    def get_or_else(self, default: C) -> C:
        return default

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


@dataclass(frozen=True, repr=False)
class Right(Either[B, A]):
    value: A

    def is_right(self) -> bool:
        return True

    def map(self, f: Callable[[A], C]) -> Either[B, C]:
        return Right(f(self.value))

    def chain(self, f: Callable[[A], Either[B, C]]) -> Either[B, C]:
        return f(self.value)

    def fold(self, on_left: Callable[[B], C], on_right: Callable[[A], C]) -> C:
        return on_right(self.value)

    def get_or_else(self, default: C) -> A:
        return self.value

    def __repr__(self) -> str:
        return f"Right({self.value!r})"


@dataclass(frozen=True, repr=False)
class Identity(Generic[A]):
    """
    The trivial container: map transforms and rewraps, fold takes the value out.
    """
    value: A

    def map(self, f: Callable[[A], C]) -> Identity[C]:
        return Identity(f(self.value))

    def fold(self, f: Callable[[A], C]) -> C:
        return f(self.value)

    def __repr__(self) -> str:
        return f"Id({self.value!r})"


Id = Identity


def from_nullable(value: A | None, error: B = None) -> Either[B, A]:
    """
    Lifts a possibly-missing value into an Either. Only None counts as missing; 0, "" and [] are Right.
    :param value: The value to wrap.
    :param error: What the Left should hold when 'value' is None.
    :returns: Right(value), or Left(error) if value is None.
    """
    return Left(error) if value is None else Right(value)


def try_catch(fn: Callable[..., A], *args, **kwargs) -> Either[Exception, A]:
    """
    Calls fn(*args, **kwargs), turning a raised exception into a Left and a normal return into a Right.
    :param fn: The function to call.
    :param args: Positional arguments for 'fn'.
    :param kwargs: Keyword arguments for 'fn'.
    :returns: Right(result) or Left(exception).
    """
    try:
        return Right(fn(*args, **kwargs))
    except Exception as e:
        logger.debug("try_catch captured %r from %s", e, getattr(fn, "__name__", fn))
        return Left(e)
