r"""
Miscellaneous helpers: one-shot functions, call logging, pipeline taps.

Contains:
    class Once
        called, result
        __call__            (self, *args, **kwargs) -> T
    once                    (fn: Callable[..., T]) -> Once[T]
    show_call               (fn: Callable, view: Callable = logger.debug) -> Callable
    tap                     (fn: Callable[[T], Any]) -> Callable[[T], T]
    trace                   (label: str, view: Callable = logger.debug) -> Callable[[T], T]
    random_color            () -> str
"""
from __future__ import annotations

from fntools.basetypes import *

import functools
import logging
import random
from typing import Generic

logger = logging.getLogger(__name__)


class Once(Generic[T]):
    """
    A single-use cached computation. The first call runs the wrapped function and stores its result; every later
    call returns that stored result without running the function again, whatever arguments it is given.
    """
    def __init__(self, fn: Callable[..., T]) -> None:
        self.fn = fn
        self.called = False
        self.result: T | None = None
        functools.update_wrapper(self, fn, updated=())

    def __call__(self, *args, **kwargs) -> T:
        if not self.called:
            # a raising first call leaves it un-called, so it can be retried
            self.result = self.fn(*args, **kwargs)
            self.called = True
        return self.result

    def __repr__(self) -> str:
        state = f"result={self.result!r}" if self.called else "pending"
        return f"<once {getattr(self, '__name__', self.fn)!s} {state}>"


def once(fn: Callable[..., T]) -> Once[T]:
    """
    Wraps 'fn' so it runs at most once (see Once).
    :param fn: The function to wrap.
    :returns: A Once instance; call it like 'fn'.
    """
    return Once(fn)


# decorator factory
def show_call(fn: Func, view: Callable[[str], Any] = logger.debug) -> Func:
    """
    A decorator to log function calls and return values for debugging.

    The decorated function, when called, reports its arguments and the resulting return value using the
    provided 'view' function (this module's logger at debug level by default).

    :param fn: The function to decorate.
    :param view: The function used for reporting.
    :return: A function wrapper that reports arguments and return results.
    """
    @functools.wraps(fn)
    def wrapper(*args, **kwargs) -> Any:
        args_str = ", ".join(repr(a) for a in args)
        kwargs_str = ", ".join(f"{k}={v!r}" for k, v in kwargs.items())
        nonempty_str = [s for s in (args_str, kwargs_str) if s.strip()]
        name = getattr(fn, "__name__", repr(fn))
        view(f'{name}({", ".join(nonempty_str)})')
        out = fn(*args, **kwargs)
        view(f'\t = {out!r}')
        return out
    return wrapper


def tap(fn: Callable[[T], Any]) -> Callable[[T], T]:
    """
    Makes a pipeline step out of a side effect: runs fn(value) and passes 'value' on unchanged.
    """
    @functools.wraps(fn)
    def tapped(value: T) -> T:
        fn(value)
        return value
    return tapped


def trace(label: str, view: Callable[[str], Any] = logger.debug) -> Callable[[T], T]:
    """
    A pass-through pipeline step that reports the value flowing through it:
        pipe(parse, trace("parsed"), validate)
    :param label: Prefix for the report.
    :param view: The function used for reporting.
    :returns: The pass-through step.
    """
    return tap(lambda value: view(f"{label}: {value!r}"))


def random_color() -> str:
    """
    A random hex color, e.g. '#3fa2c8'.
    """
    return f"#{random.randrange(0x1000000):06x}"
