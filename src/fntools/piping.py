r"""
Function pipelines, plain and awaitable-aware.

Contains:
    pipe                    (*fns: Callable) -> Callable[[Any], Any]
    compose                 (*fns: Callable) -> Callable[[Any], Any]
    pipe_promises           (*fns: Callable) -> Callable[[Any], Coroutine]
    compose_promises        (*fns: Callable) -> Callable[[Any], Coroutine]
    compose_variadic        (*fns: Callable) -> Callable[..., Any]
    with_catch              (awaitable: Awaitable[T]) -> Coroutine[(Exception | None, T | None)]

pipe(f, g, h)(x) == h(g(f(x))) and compose(f, g, h)(x) == f(g(h(x))). Neither catches anything: an exception in
one step propagates immediately and the steps after it never run.

The *_promises variants let ordinary functions and coroutine functions be mixed freely. Each intermediate value
(including the initial one) is awaited if it is awaitable before it's handed to the next step, so none of the steps
has to know whether its input came from an async call:
    fetch_user = pipe_promises(parse_id, load_user, lambda user: user.name)
    name = await fetch_user("42")
"""
from __future__ import annotations

from fntools.basetypes import *

import functools
import inspect
import logging
from collections.abc import Awaitable, Coroutine

logger = logging.getLogger(__name__)


def _step_name(fn: Func) -> str:
    return getattr(fn, "__name__", None) or repr(fn)


def pipe(*fns: Func) -> Callable[[Any], Any]:
    """
    Sequences functions left to right.
    :param fns: The functions to apply, first to last. With none, the pipeline is the identity.
    :returns: A function of one value.
    """
    def piped(value: Any) -> Any:
        return functools.reduce(lambda acc, fn: fn(acc), fns, value)
    return piped


def compose(*fns: Func) -> Callable[[Any], Any]:
    """
    Sequences functions right to left.
    :param fns: The functions to apply, last to first. With none, the composition is the identity.
    :returns: A function of one value.
    """
    return pipe(*reversed(fns))


async def _resolve(value: Any) -> Any:
    # awaitables may resolve to further awaitables (e.g. a coroutine returning a task)
    while inspect.isawaitable(value):
        value = await value
    return value


def pipe_promises(*fns: Func) -> Callable[[Any], Coroutine[Any, Any, Any]]:
    """
    Sequences functions left to right, awaiting every awaitable intermediate value.
    If a step raises (or its awaitable does), the returned coroutine raises that exception and no later step runs.
    :param fns: The functions to apply, first to last. Any of them may be a coroutine function.
    :returns: A coroutine function of one value.
    """
    async def piped(value: Any) -> Any:
        acc = await _resolve(value)
        for fn in fns:
            logger.debug("pipeline step %s", _step_name(fn))
            acc = await _resolve(fn(acc))
        return acc
    return piped


def compose_promises(*fns: Func) -> Callable[[Any], Coroutine[Any, Any, Any]]:
    """
    Sequences functions right to left, awaiting every awaitable intermediate value (see pipe_promises).
    """
    return pipe_promises(*reversed(fns))


def compose_variadic(*fns: Func) -> Callable[..., Any]:
    """
    Right-to-left composition where the rightmost function takes any arguments:
        compose_variadic(f, g, h)(a, b) == f(g(h(a, b)))
    :param fns: The functions to compose; all but the last must be unary.
    :returns: A function taking whatever the last function takes.
    """
    if not fns:
        return id
    *outer, inner = fns

    def composed(*args, **kwargs) -> Any:
        return compose(*outer)(inner(*args, **kwargs))
    return composed


async def with_catch(awaitable: Awaitable[T]) -> tuple[Exception | None, T | None]:
    """
    Awaits 'awaitable' and reports the outcome as an (error, data) pair instead of raising:
        err, user = await with_catch(load_user(42))
    :param awaitable: The awaitable to settle.
    :returns: (None, data) on success, (error, None) if it raised an Exception.
    """
    try:
        data = await awaitable
    except Exception as e:
        logger.debug("with_catch captured %r", e)
        return e, None
    return None, data
