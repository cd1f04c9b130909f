"""
Test configuration and fixtures.
"""

# tests/conftest.py
import copy
import pytest
from typing import TypeVar, Callable, Any

T = TypeVar('T')

# fixture helpers
def fixture(obj: T) -> Callable[[], T]:
    @pytest.fixture
    def _fixture() -> T:
        # hand out a fresh copy so no test can leak mutations into another
        return copy.deepcopy(obj)
    return _fixture

# Common test objects that will be available to all tests
test_objects = {
    "dict_abc": {"a": 1, "b": 2, "c": 3},
    "list_12345": [1, 2, 3, 4, 5],
    "empty_list": [],
    "request_body": {
        "token": "fjdlkfjaklhfewiofiweohi.fdsiohfoiwe.jfdsafjoew",
        "user": {"username": "moses", "password": "password", "role": "admin", "email": None},
        "tags": [{"name": "first"}, {"name": "second"}],
    },
}

# Register fixtures globally
globals().update({
    name: fixture(obj)
    for name, obj in test_objects.items()
})
