"""
Shared type variables, aliases and runtime shape checks for the rest of the package

Defines types:
    Type variables
        T, T1, X, Y  # these are generic type variables
        KT, VT       # for dictionaries
    Type aliases
        Func                Callable[..., Any]
        End[T]              Callable[[T], T]
        Hom[X, Y]           Callable[[X], Y]
        Decorator           Callable[[F], F]
        Object              dict[str, Any]
        Options             Object | None

Contains:
    is_type                 (obj: Any, t: Any) -> bool
    arity_of                (fn: Callable) -> int
    merge_options           (defaults: Object, *options: Options) -> Object
    id                      (x: T) -> T
    const                   (c: T) -> Callable[..., T]
"""
from __future__ import annotations

import inspect
import types
import typing

from typing import TypeVar, TypeAlias, Any
from typing import get_args, get_origin

from collections.abc import Hashable, Callable, Mapping

T, T1, X, Y = TypeVar('T'), TypeVar('T1'), TypeVar('X'), TypeVar('Y')
KT, VT = TypeVar('KT', bound=Hashable), TypeVar('VT')
End = Callable[[T], T]
Hom = Callable[[X], Y]
Func = Callable[..., Any]
Decorator = End[Func]

Object = dict[str, Any]
Arguments: TypeAlias = dict[str, Any]

Options = Object | None


def is_type(obj: Any, t: Any) -> bool:
    """
    Checks 'obj' against the argument shapes used across the package: plain classes, unions (X | Y), None,
    homogeneous lists (list[X]) and tuples, both fixed (tuple[X, Y]) and variadic (tuple[X, ...]).
    :param obj: The object to test.
    :param t: The type to test against.
    :return: True if 'obj' fits 't', False otherwise.
    """
    origin, args = get_origin(t), get_args(t)
    if origin is typing.Union or origin is types.UnionType:
        return any(is_type(obj, arg) for arg in args)
    if t is None or t is type(None):
        return obj is None
    if origin is list:
        return isinstance(obj, list) and all(is_type(item, args[0]) for item in obj)
    if origin is tuple:
        if not isinstance(obj, tuple):
            return False
        if len(args) == 2 and args[1] is ...:
            return all(is_type(item, args[0]) for item in obj)
        return len(args) == len(obj) and all(is_type(item, t_) for item, t_ in zip(obj, args))
    return isinstance(obj, origin or t)


def arity_of(fn: Callable) -> int:
    """
    Counts the required positional parameters of a function, i.e. those without a default that come before
    any *args. Keyword-only parameters and parameters with defaults don't count.
    The function's own signature is read, not that of whatever it wraps: unary(f) has arity 1 whatever f takes.
    Objects exposing '__signature__' (e.g. partially applied curried functions) report their remaining slots.
    :param fn: The function to inspect.
    :return: The number of positional arguments the function needs before it can be called.
    :raises TypeError: If the signature of 'fn' can't be read (e.g. some builtins).
    """
    try:
        sig = inspect.signature(fn, follow_wrapped=False)
    except (TypeError, ValueError) as e:
        msg = f"Cannot determine the arity of {fn!r}; pass it explicitly"
        raise TypeError(msg) from e
    count = 0
    for param in sig.parameters.values():
        if param.kind not in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            break
        if param.default is not inspect.Parameter.empty:
            break
        count += 1
    return count


def merge_options(defaults: Object, *options: Options) -> Object:
    """
    Layers option mappings over a set of defaults, later mappings winning. Keys not present in the defaults are rejected.
    :param defaults: The known option keys and their default values.
    :param options: Any number of option mappings (None entries are skipped).
    :return: The merged options.
    :raises ValueError: If an option key is unknown.
    """
    merged = dict(defaults)
    for opts in options:
        merged |= (opts or {})
    if unknown := set(merged) - set(defaults):
        msg = f"Unknown options: {', '.join(sorted(unknown))}"
        raise ValueError(msg)
    return merged


def id(x: T) -> T:
    """
    The identity function.
    :param x: The input value.
    :returns: The input value.
    """
    return x

def const(c: T) -> Callable[..., T]:
    """
    const(c) is a constant function that returns c regardless of its input.
    :param c: The value to return.
    :returns: The constant function.
    """
    def _(*args, **kwargs) -> T:
        return c
    return _
