"""
Test the objects module
"""
import pytest
from pydantic import BaseModel
from fntools.currying import curry
from fntools.objects import filter_obj, reduce_obj, without, object_from_entries, validate_fields, Dict


class TestWithout:
    def test_returns_a_dict(self) -> None:
        assert isinstance(without("foo", {"foo": "bar"}), dict)

    def test_is_curryable(self) -> None:
        assert callable(without("foo"))
        drop_a = without("a")
        assert drop_a({"a": 1, "b": 2}) == {"b": 2}

    def test_filters_out_the_property(self, dict_abc) -> None:
        assert "a" not in without("a", dict_abc)
        assert without("a", dict_abc) == {"b": 2, "c": 3}

    def test_accepts_a_list_of_keys(self, dict_abc) -> None:
        assert without(["a", "b"], dict_abc) == {"c": 3}
        assert without(("a", "c"), dict_abc) == {"b": 2}
        assert without([], dict_abc) == dict_abc

    def test_does_not_mutate(self, dict_abc) -> None:
        without("a", dict_abc)
        without(["a", "b"], dict_abc)
        assert dict_abc == {"a": 1, "b": 2, "c": 3}

    def test_missing_keys_are_ignored(self, dict_abc) -> None:
        assert without("z", dict_abc) == dict_abc

    def test_keeps_order(self) -> None:
        assert list(without("b", {"c": 3, "b": 2, "a": 1})) == ["c", "a"]

    @pytest.mark.parametrize("props", [1, None, ["a", 1], {"a": 1}])
    def test_rejects_other_shapes(self, props, dict_abc) -> None:
        with pytest.raises(TypeError, match="string or a list of strings"):
            without(props, dict_abc)

    def test_bad_props_fail_on_the_completing_call(self) -> None:
        drop = without(42)
        with pytest.raises(TypeError):
            drop({"a": 1})

    def test_rejects_non_mappings(self) -> None:
        with pytest.raises(TypeError, match="expects a mapping"):
            without("a", [("a", 1)])


class TestFilterObj:
    def test_predicate_sees_key_and_value(self, dict_abc) -> None:
        assert filter_obj(lambda k, v: v > 1, dict_abc) == {"b": 2, "c": 3}
        assert filter_obj(lambda k, v: k != "b", dict_abc) == {"a": 1, "c": 3}

    def test_curried_and_non_mutating(self, dict_abc) -> None:
        odd_values = filter_obj(lambda k, v: v % 2 == 1)
        assert odd_values(dict_abc) == {"a": 1, "c": 3}
        assert dict_abc == {"a": 1, "b": 2, "c": 3}

    def test_keeps_insertion_order(self) -> None:
        result = filter_obj(lambda k, v: v, {"z": 1, "y": 0, "x": 2})
        assert list(result) == ["z", "x"]


class TestReduceObj:
    def test_folds_entries(self, dict_abc) -> None:
        assert reduce_obj(lambda acc, entry: acc + entry[1], 0, dict_abc) == 6
        assert reduce_obj(lambda acc, entry: acc + entry[0], "", dict_abc) == "abc"

    def test_curried(self, dict_abc) -> None:
        keys = reduce_obj(lambda acc, entry: [*acc, entry[0]])([])
        assert keys(dict_abc) == ["a", "b", "c"]


def test_object_from_entries() -> None:
    assert object_from_entries([("a", 1), ("b", 2)]) == {"a": 1, "b": 2}
    assert object_from_entries([("a", 1), ("a", 2)]) == {"a": 2}
    assert object_from_entries([]) == {}
    assert object_from_entries({"k": "v"}.items()) == {"k": "v"}


class TestValidateFields:
    def test_shallow(self, request_body) -> None:
        assert validate_fields(["token"], request_body) is True
        assert validate_fields(["token", "session"], request_body) is False

    def test_nested_lists(self, request_body) -> None:
        assert validate_fields(["token", ["user", "role"]], request_body) is True
        assert validate_fields([["user", "age"]], request_body) is False

    def test_dotted_paths(self, request_body) -> None:
        assert validate_fields(["user.username", "user.password"], request_body) is True
        assert validate_fields(["user.role.name"], request_body) is False

    def test_sequence_indexes(self, request_body) -> None:
        assert validate_fields([["tags", 1, "name"]], request_body) is True
        assert validate_fields([["tags", 2, "name"]], request_body) is False

    def test_dotted_sequence_indexes(self, request_body) -> None:
        assert validate_fields(["tags.1.name"], request_body) is True
        assert validate_fields(["tags.0"], request_body) is True
        assert validate_fields(["tags.2.name"], request_body) is False
        # numeric segments stay keys on mappings
        assert validate_fields(["codes.404"], {"codes": {"404": "not found"}}) is True
        assert validate_fields(["codes.404"], {"codes": {404: "not found"}}) is False

    def test_none_values_count_as_present(self, request_body) -> None:
        assert validate_fields(["user.email"], request_body) is True

    def test_empty_field_list(self, request_body) -> None:
        assert validate_fields([], request_body) is True

    def test_curried(self, request_body) -> None:
        has_credentials = validate_fields(["user.username", "user.password"])
        assert has_credentials(request_body) is True
        assert has_credentials({"user": {}}) is False

    def test_no_code_evaluation(self) -> None:
        assert validate_fields(["__class__"], {}) is False
        assert validate_fields(["a or True"], {"a": 1}) is False

    def test_pydantic_models(self) -> None:
        class User(BaseModel):
            username: str
            role: str | None = None

        class Body(BaseModel):
            token: str
            user: User

        body = Body(token="t", user=User(username="moses"))
        assert validate_fields(["token", "user.username", ["user", "role"]], body) is True
        assert validate_fields(["user.email"], body) is False

    @pytest.mark.parametrize("fields", ["token", None, [""], ["user..role"], [[]], [3], [{"a": 1}]])
    def test_rejects_malformed_fields(self, fields, request_body) -> None:
        with pytest.raises(TypeError):
            validate_fields(fields, request_body)

    def test_rejects_non_mappings(self) -> None:
        with pytest.raises(TypeError, match="expects a mapping"):
            validate_fields(["a"], ["a"])


@pytest.fixture
def sample_dict() -> Dict:
    return Dict({'a': 1, 'b': 2, 'c': 3})


class TestDict:
    def test_init(self, sample_dict) -> None:
        assert sample_dict == {'a': 1, 'b': 2, 'c': 3}
        assert Dict([("x", 1)], y=2) == {"x": 1, "y": 2}
        assert Dict() == {}

    def test_map(self, sample_dict) -> None:
        result = sample_dict.map(lambda x: x * 2)
        assert result == {'a': 2, 'b': 4, 'c': 6}
        assert isinstance(result, Dict)
        # Test chained mapping
        result = sample_dict.map(lambda x: x * 2, lambda x: x + 1)
        assert result == {'a': 3, 'b': 5, 'c': 7}

    def test_map_keys(self, sample_dict) -> None:
        assert sample_dict.map_keys(str.upper) == {'A': 1, 'B': 2, 'C': 3}

    def test_filter(self, sample_dict) -> None:
        result = sample_dict.filter(lambda k, v: v % 2 == 0)
        assert result == {'b': 2}
        assert isinstance(result, Dict)
        # unary predicates see keys
        assert sample_dict.filter(lambda k: k != 'a') == {'b': 2, 'c': 3}
        # partially applied curried predicates count their open slots
        starts_with = curry(lambda prefix, key: key.startswith(prefix))
        assert Dict({"ab": 1, "c": 2}).filter(starts_with("a")) == {"ab": 1}
        # builtins see keys
        assert Dict({"a": 1, "": 2}).filter(bool) == {"a": 1}
        assert Dict({"a": 1, len: 2}).filter(callable) == {len: 2}
        # Test value-only filter
        result = sample_dict.valuefilter(lambda v: v > 2)
        assert result == {'c': 3}

    def test_without(self, sample_dict) -> None:
        assert sample_dict.without('a') == {'b': 2, 'c': 3}
        assert sample_dict - ['a', 'b'] == {'c': 3}
        assert isinstance(sample_dict - 'a', Dict)
        assert sample_dict == {'a': 1, 'b': 2, 'c': 3}

    def test_union(self, sample_dict) -> None:
        merged = sample_dict | {'c': 30, 'd': 4}
        assert merged == {'a': 1, 'b': 2, 'c': 30, 'd': 4}
        assert isinstance(merged, Dict)

    def test_reduce(self, sample_dict) -> None:
        assert sample_dict.reduce(lambda acc, entry: acc + entry[1], 0) == 6

    def test_check(self) -> None:
        assert Dict.check(Dict()) is True
        assert Dict.check({}) is True
        assert Dict.check([]) is False

    def test_pydantic_field(self) -> None:
        class Settings(BaseModel):
            flags: Dict

        settings = Settings(flags={"debug": True, "verbose": False})
        assert isinstance(settings.flags, Dict)
        assert settings.flags.filter(lambda k, v: v) == {"debug": True}
