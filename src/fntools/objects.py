r"""
Curried helpers over key-value mappings, and a dict wrapper exposing them as methods.

Contains:
    filter_obj              (predicate: Callable[[KT, VT], bool], obj: Mapping[KT, VT]) -> dict[KT, VT]
    reduce_obj              (reducer: Callable[[Y, tuple[KT, VT]], Y], initial: Y | None, obj: Mapping[KT, VT]) -> Y
    without                 (props: str | list[str] | tuple[str, ...], obj: Mapping[str, VT]) -> dict[str, VT]
    object_from_entries     (entries: Iterable[tuple[KT, VT]]) -> dict[KT, VT]
    validate_fields         (fields: list[Field], obj: Mapping | BaseModel) -> bool

    class Dict(dict)
        check               (obj: Any) -> bool
        filter              (self, predicate: Callable[..., bool]) -> Dict
        valuefilter         (self, predicate: Callable[[VT], bool]) -> Dict
        without             (self, props: str | list[str]) -> Dict
        map, map_keys       (self, *fn) -> Dict
        reduce              (self, reducer: Callable, initial: Any = None) -> Any

None of these modify their input; each returns a new mapping that keeps the insertion order of the retained keys.
"""
from __future__ import annotations

from fntools.basetypes import *
from fntools.currying import curry
from fntools import sequences

import logging
from collections.abc import Iterable, Sequence
from typing import Generic
from pydantic import BaseModel
from pydantic_core import core_schema
from toolz import get_in, itemfilter, keyfilter, keymap, valmap

logger = logging.getLogger(__name__)

# a field to validate: "token", "user.role" or ["user", "role"]
Field = str | list[str | int] | tuple[str | int, ...]
Props = str | list[str] | tuple[str, ...]

_missing = object()


def _require_mapping(obj: Any, fn_name: str) -> None:
    if not isinstance(obj, Mapping):
        msg = f"{fn_name} expects a mapping, got {type(obj).__name__}"
        raise TypeError(msg)


@curry
def filter_obj(predicate: Callable[[KT, VT], bool], obj: Mapping[KT, VT]) -> dict[KT, VT]:
    """
    Keeps the entries of 'obj' for which predicate(key, value) holds.
    :param predicate: Binary predicate of key and value.
    :param obj: The mapping to filter.
    :returns: A new dict with the retained entries.
    """
    _require_mapping(obj, "filter_obj")
    return itemfilter(lambda item: predicate(*item), obj)


@curry
def reduce_obj(reducer: Callable[[Y, tuple[KT, VT]], Y], initial: Y | None, obj: Mapping[KT, VT]) -> Y | None:
    """
    Folds the (key, value) entries of 'obj' in insertion order (see sequences.reduce for the None seed rule).
    """
    _require_mapping(obj, "reduce_obj")
    return sequences.reduce(reducer, initial, obj.items())


@curry
def without(props: Props, obj: Mapping[str, VT]) -> dict[str, VT]:
    """
    Drops one key or several keys from a mapping.
        without("a", {"a": 1, "b": 2, "c": 3}) == {"b": 2, "c": 3}
        without(["a", "b"], {"a": 1, "b": 2, "c": 3}) == {"c": 3}
    :param props: A key, or a list/tuple of keys.
    :param obj: The mapping to drop keys from.
    :returns: A new dict without those keys.
    :raises TypeError: If 'props' is neither a string nor a list/tuple of strings.
    """
    if not is_type(props, Props):
        msg = f"without expects a string or a list of strings, got {props!r}"
        raise TypeError(msg)
    _require_mapping(obj, "without")
    dropped = {props} if isinstance(props, str) else set(props)
    return keyfilter(lambda key: key not in dropped, obj)


def object_from_entries(entries: Iterable[tuple[KT, VT]]) -> dict[KT, VT]:
    """
    Builds a dict from (key, value) pairs; later pairs overwrite earlier ones.
    """
    return {k: v for k, v in entries}


def _field_path(field: Field) -> tuple[str | int, ...]:
    if isinstance(field, str):
        if not field or any(part == "" for part in field.split(".")):
            msg = f"Malformed field path: {field!r}"
            raise TypeError(msg)
        return tuple(field.split("."))
    if is_type(field, list[str | int] | tuple[str | int, ...]) and len(field) > 0:
        return tuple(field)
    msg = f"A field must be a dotted string or a non-empty list of keys, got {field!r}"
    raise TypeError(msg)


def _lookup(path: tuple[str | int, ...], obj: Any) -> Any:
    # digit segments of a dotted path index into sequences
    node = obj
    for key in path:
        if isinstance(key, str) and key.isdecimal() and isinstance(node, Sequence) and not isinstance(node, str):
            key = int(key)
        node = get_in([key], node, default=_missing)
        if node is _missing:
            break
    return node


@curry
def validate_fields(fields: list[Field] | tuple[Field, ...], obj: Mapping | BaseModel) -> bool:
    """
    Checks that every required field is present on 'obj'. A field is either a top-level key, a dotted path
    ("user.role", "tags.0.name"), or an explicit path as a list of keys (["user", "role"]). Integer keys, and
    numeric segments of a dotted path, index into lists.
    A key that is present with the value None counts as present.

        request = {"token": "abc", "user": {"name": "moses", "role": "admin"}}
        validate_fields(["token", ["user", "role"]], request) == True
        validate_fields(["user.email"], request) == False

    :param fields: The fields that must be present.
    :param obj: A mapping, or a pydantic model (checked against its model_dump()).
    :returns: True if every field resolves, False otherwise.
    :raises TypeError: If 'fields' or one of its entries is malformed, or 'obj' isn't a mapping or model.
    """
    if isinstance(fields, str) or not isinstance(fields, (list, tuple)):
        msg = f"validate_fields expects a list of fields, got {fields!r}"
        raise TypeError(msg)
    if isinstance(obj, BaseModel):
        obj = obj.model_dump()
    _require_mapping(obj, "validate_fields")
    paths = [_field_path(field) for field in fields]
    for path in paths:
        if _lookup(path, obj) is _missing:
            logger.debug("validate_fields: missing %s", ".".join(str(key) for key in path))
            return False
    return True


class Dict(dict[KT, VT], Generic[KT, VT]):
    """
    Dictionary wrapper whose transformations return new Dicts, so they can be chained.
    Operations:
        D - k = D.without(k)  (k a key or a list of keys)
        D | E = Dict(dict(D) | E)
    Usable as a pydantic field type; validated values come back as Dict.
    """
    def __init__(self, items: Mapping[KT, VT] | Iterable[tuple[KT, VT]] = (), **kwargs: VT) -> None:
        super(Dict, self).__init__(items, **kwargs)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Callable[[Any], core_schema.CoreSchema]) -> core_schema.CoreSchema:
        if len(args := get_args(source_type)) == 2:
            key_type, value_type = args
            dict_schema = core_schema.dict_schema(keys_schema=handler(key_type), values_schema=handler(value_type))
        else:
            dict_schema = core_schema.dict_schema()
        return core_schema.no_info_after_validator_function(cls, dict_schema)

    @staticmethod
    def check(obj: Any) -> bool:
        """
        Checks if the given object is a Dict or subclass of Dict.
        :param obj: The object to check.
        :returns: True if the object is a Dict, False otherwise.
        """
        return isinstance(obj, (Dict, dict))

    def filter(self, predicate: Callable[..., bool] = lambda x: bool(x)) -> Dict[KT, VT]:  # noqa: PLW0108
        """
        Filters the dictionary based on a predicate function. If the predicate is unary (or a builtin whose signature can't be read, like bool), it filters based on keys. If binary, it filters based on both keys and values.
        :param predicate: The predicate function to filter the dictionary.
        :returns: A new dictionary containing the filtered items.
        """
        try:
            on_keys = arity_of(predicate) <= 1
        except TypeError:
            # builtins without a readable signature (bool, callable) take a single argument
            on_keys = True
        if on_keys:
            return Dict(keyfilter(predicate, self))
        return Dict(filter_obj(predicate, self))

    def valuefilter(self, predicate: Callable[[VT], bool] = lambda x: bool(x)) -> Dict[KT, VT]:  # noqa: PLW0108
        # only keeps k such that P(self[k])
        return self.filter(lambda k, v: predicate(v))

    def without(self, props: Props) -> Dict[KT, VT]:
        return Dict(without(props, self))

    def map(self, *fn: Callable) -> Dict:
        """
        Applies a function to each value in the dictionary.
        :param fn: The function to apply to the values. If multiple functions are provided, they are applied in sequence.
        :returns: A new dictionary with the values transformed.
        """
        mapped: dict = self
        for f in fn:
            mapped = valmap(f, mapped)
        return Dict(mapped)

    def map_keys(self, *fn: Callable) -> Dict:
        """
        Applies a function to each key in the dictionary.
        :param fn: The function to apply to the keys. If multiple functions are provided, they are applied in sequence.
        :returns: A new dictionary with the keys transformed.
        """
        mapped: dict = self
        for f in fn:
            mapped = keymap(f, mapped)
        return Dict(mapped)

    def reduce(self, reducer: Callable[[Y, tuple[KT, VT]], Y], initial: Y | None = None) -> Y | None:
        return reduce_obj(reducer, initial, self)

    def __sub__(self, props: Props) -> Dict[KT, VT]:
        return self.without(props)

    def __or__(self, other: Mapping[KT, VT]) -> Dict[KT, VT]:
        return Dict(dict(self) | dict(other))
