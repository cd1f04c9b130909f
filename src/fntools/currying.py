r"""
Currying and arity adapters.

Contains:
    class Curried
        fn, arity, args, kwargs, options
        __call__            (self, *args, **kwargs) -> Curried | Any
    curry                   (fn: Callable, arity: int | None = None, options: Options = None) -> Curried
    curry_strict            (fn: Callable, arity: int | None = None) -> Callable
    unary                   (fn: Callable) -> Callable[[X], Y]
    binary                  (fn: Callable) -> Curried
    flip                    (fn: Callable) -> Curried

Options understood by curry:
    excess                  "pass" | "drop" | "raise"
        What to do when more positional arguments than the arity have been supplied in total.
        "pass" (default) hands all of them to the function, "drop" truncates to the arity,
        "raise" raises a ValueError.
"""
from __future__ import annotations

from fntools.basetypes import *

import functools
import inspect
import logging

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS: Object = {"excess": "pass"}
EXCESS_MODES = ("pass", "drop", "raise")


class Curried:
    """
    A partially applied function. Holds the wrapped function, its declared arity and the arguments bound so far.
    Calling it with more arguments returns a new Curried until the arity is reached, at which point the wrapped
    function is called with every bound argument in the order supplied. Instances never change after creation,
    so any partial application can be reused as often as needed:
        add3 = curry(lambda a, b, c: a + b + c)
        add3(1)(2)(3) == add3(1, 2)(3) == add3(1)(2, 3) == add3(1, 2, 3) == 6
    """
    def __init__(self,
                 fn: Func,
                 arity: int,
                 args: tuple[Any, ...] = (),
                 kwargs: Arguments | None = None,
                 options: Options = None
        ) -> None:
        """
        :param fn: The function to wrap.
        :param arity: The number of positional arguments 'fn' needs.
        :param args: Positional arguments bound so far.
        :param kwargs: Keyword arguments bound so far; these don't count toward the arity.
        :param options: Resolved curry options (see the module docstring).
        """
        self.fn = fn
        self.arity = arity
        self.args = tuple(args)
        self.kwargs = dict(kwargs or {})
        self.options = merge_options(DEFAULT_OPTIONS, options)
        functools.update_wrapper(self, fn, updated=())

    @property
    def name(self) -> str:
        return getattr(self, "__name__", None) or repr(self.fn)

    @property
    def remaining(self) -> int:
        return max(self.arity - len(self.args), 0)

    @property
    def __signature__(self) -> inspect.Signature:
        # only the positional slots still open; keywords are always accepted
        slots = [inspect.Parameter(f"arg{i}", inspect.Parameter.POSITIONAL_ONLY) for i in range(self.remaining)]
        return inspect.Signature([*slots, inspect.Parameter("kwargs", inspect.Parameter.VAR_KEYWORD)])

    def __call__(self, *args, **kwargs) -> Any:
        bound = self.args + args
        bound_kwargs = self.kwargs | kwargs
        if len(bound) < self.arity:
            return Curried(self.fn, self.arity, bound, bound_kwargs, self.options)
        if len(bound) > self.arity:
            excess = self.options["excess"]
            if excess == "raise":
                msg = f"Too many arguments for {self.name}: expected {self.arity}, got {len(bound)}"
                raise ValueError(msg)
            if excess == "drop":
                bound = bound[:self.arity]
        logger.debug("invoking %s with %d argument(s)", self.name, len(bound))
        return self.fn(*bound, **bound_kwargs)

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        # bind like a plain function when used as a method
        if obj is None:
            return self
        return Curried(self.fn, self.arity, (obj, *self.args), self.kwargs, self.options)

    def __repr__(self) -> str:
        bound = [repr(a) for a in self.args] + [f"{k}={v!r}" for k, v in self.kwargs.items()]
        return f"<curried {self.name}({', '.join(bound)}) awaiting {self.remaining}>"


def curry(fn: Func, arity: int | None = None, options: Options = None) -> Curried:
    """
    Wraps 'fn' so it can be called with its positional arguments in any grouping.
    Works as a decorator too (@curry).
    :param fn: The function to curry.
    :param arity: How many positional arguments to collect before calling 'fn'. Defaults to the number of
                  required positional parameters in its signature.
    :param options: Curry options, e.g. {"excess": "drop"}.
    :returns: A Curried wrapper. Functions of arity 0 are called on the first invocation.
    :raises TypeError: If 'fn' isn't callable or its arity can't be determined.
    :raises ValueError: If 'arity' is negative or an option is invalid.
    """
    if not callable(fn):
        msg = f"Cannot curry a non-callable: {fn!r}"
        raise TypeError(msg)
    bound_args, bound_kwargs, inherited = (), {}, None
    if isinstance(fn, Curried):
        # re-currying keeps what was already bound
        if arity is None:
            arity = fn.arity
        fn, bound_args, bound_kwargs, inherited = fn.fn, fn.args, fn.kwargs, fn.options
    if arity is None:
        arity = arity_of(fn)
    if arity < 0:
        msg = f"Arity must be non-negative, got {arity}"
        raise ValueError(msg)
    resolved = merge_options(DEFAULT_OPTIONS, inherited, options)
    if resolved["excess"] not in EXCESS_MODES:
        msg = f"Invalid 'excess' option {resolved['excess']!r}; expected one of {', '.join(EXCESS_MODES)}"
        raise ValueError(msg)
    return Curried(fn, arity, bound_args, bound_kwargs, resolved)


def curry_strict(fn: Func, arity: int | None = None) -> Callable:
    """
    Like curry, but every call takes exactly one argument:
        curry_strict(f)(a)(b)(c) == f(a, b, c)
    :param fn: The function to curry.
    :param arity: The number of arguments to collect; defaults to the required positional parameter count.
    :returns: A unary function, or the result of 'fn' once 'arity' arguments were collected.
    """
    n = arity_of(fn) if arity is None else arity

    def next_curried(prev_args: tuple[Any, ...]) -> Callable[[Any], Any]:
        @functools.wraps(fn)
        def curried(next_arg: Any) -> Any:
            args = (*prev_args, next_arg)
            if len(args) >= n:
                return fn(*args)
            return next_curried(args)
        return curried
    return next_curried(())


def unary(fn: Func) -> Callable[[X], Y]:
    """
    Restricts 'fn' to its first argument, ignoring the rest (handy for map callbacks).
    :param fn: The function to restrict.
    :returns: A function of one argument.
    """
    @functools.wraps(fn)
    def _(arg: X, *_ignored: Any) -> Y:
        return fn(arg)
    return _


def binary(fn: Func) -> Curried:
    """
    Restricts 'fn' to two arguments and curries it.
    :param fn: The function to restrict.
    :returns: A curried function of two arguments.
    """
    @functools.wraps(fn)
    def _(first: Any, second: Any) -> Any:
        return fn(first, second)
    return curry(_, 2)


def flip(fn: Func) -> Curried:
    """
    flip(f)(a, b) == f(b, a), curried
    """
    @functools.wraps(fn)
    def _(first: Any, second: Any) -> Any:
        return fn(second, first)
    return curry(_, 2)
