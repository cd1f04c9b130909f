r"""
Curried helpers over ordered sequences, and a list wrapper exposing them as methods.

Contains:
    prop, pluck             (field: Any, obj: Any) -> Any
    map                     (fn: Callable[[X], Y], items: Iterable[X]) -> list[Y]
    filter                  (predicate: Callable[[T], bool], items: Iterable[T]) -> list[T]
    reduce, foldl           (reducer: Callable[[Y, X], Y], initial: Y | None, items: Iterable[X]) -> Y
    foldr                   (reducer: Callable[[Y, X], Y], initial: Y | None, items: Iterable[X]) -> Y
    map_recursive           (fn: Callable[[X], Y], items: Iterable[X]) -> list[Y]
    filter_recursive        (predicate: Callable[[T], bool], items: Iterable[T]) -> list[T]

    class List(list)
        check               (obj: Any) -> bool
        head, tail          (self) -> T, List
        map                 (self, *fn) -> List
        filter              (self, *fn) -> List
        reduce, foldr       (self, reducer: Callable, initial: Any = None) -> Any

Every module-level helper is curried with the data argument last, so the behavior can be bound first and the data
supplied later:
    evens = filter(lambda x: x % 2 == 0)
    evens([1, 2, 3, 4]) == [2, 4]
"""
from __future__ import annotations

from fntools.basetypes import *
from fntools.currying import curry

import logging
from collections.abc import Iterable, Sequence
from typing import Generic
from pydantic_core import core_schema

logger = logging.getLogger(__name__)


@curry
def prop(field: Any, obj: Any) -> Any:
    """
    Looks up 'field' on 'obj': a key for mappings, an index for sequences, an attribute otherwise.
    Missing fields give None. The object is never modified.
    :param field: The key, index or attribute name.
    :param obj: The object to read from.
    :returns: The field's value, or None.
    """
    if isinstance(obj, Mapping):
        return obj.get(field)
    if isinstance(field, int) and isinstance(obj, Sequence) and not isinstance(obj, str):
        return obj[field] if -len(obj) <= field < len(obj) else None
    return getattr(obj, field, None) if isinstance(field, str) else None

pluck = prop


@curry
def map(fn: Callable[[X], Y], items: Iterable[X]) -> list[Y]:
    """
    Applies a function 'fn' to each element in 'items', returning a new list of results.
    :param fn: A callable taking X and returning Y.
    :param items: The X items to process.
    :return: A new list of type Y with the function applied to each element.
    """
    return [fn(i) for i in items]


@curry
def filter(predicate: Callable[[T], bool], items: Iterable[T]) -> list[T]:
    """
    Filters elements in 'items' using the boolean predicate.
    :param predicate: A callable returning True for items to keep, False otherwise.
    :param items: The items to filter.
    :return: A new list of the items for which the predicate held.
    """
    return [i for i in items if predicate(i)]


@curry
def reduce(reducer: Callable[[Y, X], Y], initial: Y | None, items: Iterable[X]) -> Y | None:
    """
    Left fold: reducer(...reducer(reducer(initial, x0), x1)..., xn).
    With 'initial' None, the first item seeds the accumulator; an empty input then gives None.
    :param reducer: Binary function of the accumulator and the next item.
    :param initial: The starting accumulator, or None to start from the first item.
    :param items: The items to fold.
    :returns: The final accumulator.
    """
    it = iter(items)
    acc = next(it, None) if initial is None else initial
    for item in it:
        acc = reducer(acc, item)
    return acc

foldl = reduce


@curry
def foldr(reducer: Callable[[Y, X], Y], initial: Y | None, items: Iterable[X]) -> Y | None:
    """
    Right fold: like reduce, but visits the items last to first. 'items' is not modified.
    """
    return reduce(reducer, initial, list(items)[::-1])


@curry
def map_recursive(fn: Callable[[X], Y], items: Iterable[X]) -> list[Y]:
    """
    map, written as head/tail recursion. Bounded by the interpreter's recursion limit.
    """
    items = list(items)
    if not items:
        return []
    head, *tail = items
    return [fn(head), *map_recursive(fn, tail)]


@curry
def filter_recursive(predicate: Callable[[T], bool], items: Iterable[T]) -> list[T]:
    """
    filter, written as head/tail recursion. Bounded by the interpreter's recursion limit.
    """
    items = list(items)
    if not items:
        return []
    head, *tail = items
    rest = filter_recursive(predicate, tail)
    return [head, *rest] if predicate(head) else rest


class List(list[T], Generic[T]):
    """
    Wrapper for lists whose transformations return new Lists, so they can be chained:
        List([1, 2, 3, 4]).filter(lambda x: x > 1).map(lambda x: x * 10).reduce(operator.add) == 90
    Usable as a pydantic field type; validated values come back as List.
    """
    def __init__(self, iterable: Iterable[T] | None = None) -> None:
        super(List, self).__init__([] if iterable is None else iterable)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Callable[[Any], core_schema.CoreSchema]) -> core_schema.CoreSchema:
        if args := get_args(source_type):
            items_schema = core_schema.list_schema(items_schema=handler(args[0]))
        else:
            items_schema = core_schema.list_schema()
        return core_schema.no_info_after_validator_function(cls, items_schema)

    @staticmethod
    def check(obj: Any) -> bool:
        """
        Checks if the given object is a list or subclass of List.
        :param obj: The object to check.
        :returns: True if the object is a list, False otherwise.
        """
        return isinstance(obj, (List, list))

    @property
    def head(self) -> T:
        if len(self) == 0:
            raise ValueError('head of empty list')
        return self[0]

    @property
    def tail(self) -> List[T]:
        return List(self[1:])

    def map(self, *fn: Callable) -> List:
        """
        Applies a function to each element of the list.
        :param fn: The function to apply. If multiple functions are provided, they are applied in sequence.
        :returns: A new list with the function applied to each element.
        """
        mapped: list = self
        for f in fn:
            mapped = [f(x) for x in mapped]
        return List(mapped)

    def filter(self, *fn: Callable[[T], bool]) -> List[T]:
        """
        Filters the elements of the list. Returns a new List object containing the elements every predicate accepts.
        :param fn: The predicate functions, applied in sequence.
        :returns: A new List object containing the filtered elements.
        """
        filtered: list = self
        for f in fn:
            filtered = [x for x in filtered if f(x)]
        return List(filtered)

    def reduce(self, reducer: Callable[[Y, T], Y], initial: Y | None = None) -> Y | None:
        return reduce(reducer, initial, self)

    def foldr(self, reducer: Callable[[Y, T], Y], initial: Y | None = None) -> Y | None:
        return foldr(reducer, initial, self)
