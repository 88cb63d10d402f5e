from collections import OrderedDict, namedtuple

import pytest
from hypothesis import given
from hypothesis.strategies import integers, lists
from toolz import concat

from .grouping import group_by
from .hypothesis_entities import partial_users, users

User = namedtuple("User", ["name", "age", "state"])


@pytest.fixture
def staff():
    return [
        {"name": "Greg", "age": 12, "state": "NJ"},
        {"name": "Julie", "age": 18, "state": "NY"},
        {"name": "Bobby", "age": 24, "state": "NJ"},
        {"name": "Mark", "age": 56, "state": "TX"},
        {"name": "Nicole", "age": 21, "state": "NV"},
        {"name": "Joe", "age": 13, "state": "NY"},
        {"name": "Emily", "age": 56, "state": "MA"},
        {"name": "Katherine", "age": 21, "state": "NJ"},
        {"name": "John", "age": 6, "state": "TX"},
    ]


def names(group):
    return [user["name"] for user in group]


def test_returns_dict(staff):
    assert isinstance(group_by(staff, lambda user: user["age"] > 13), dict)


def test_group_by_function(staff):
    result = group_by(
        staff, lambda user: "over13" if user["age"] > 13 else "underOrExactly13"
    )
    assert len(result["underOrExactly13"]) == 3
    assert len(result["over13"]) == len(staff) - 3
    assert names(result["underOrExactly13"]) == ["Greg", "Joe", "John"]


def test_group_by_field_name(staff):
    result = group_by(staff, "state")
    assert list(result) == ["NJ", "NY", "TX", "NV", "MA"]
    assert names(result["NJ"]) == ["Greg", "Bobby", "Katherine"]


def test_group_by_first_letter():
    result = group_by(["Liz", "Ceren", "Shanna", "Charlotte"], lambda s: s[0])
    assert result == {"L": ["Liz"], "C": ["Ceren", "Charlotte"], "S": ["Shanna"]}


def test_buckets_hold_original_elements():
    e0, e1, e2 = {"state": "NJ"}, {"state": "NY"}, {"state": "NJ"}
    result = group_by([e0, e1, e2], "state")
    assert result == {"NJ": [e0, e2], "NY": [e1]}
    assert result["NJ"][0] is e0
    assert result["NJ"][1] is e2


def test_empty_collection():
    assert group_by([], "state") == {}
    assert group_by([], len) == {}


def test_none_result_gets_bucket():
    result = group_by([1, 2, 3, 4], lambda n: None if n % 2 else "even")
    assert result == {None: [1, 3], "even": [2, 4]}


def test_missing_field_is_none():
    result = group_by([{"state": "NJ"}, {"name": "Pat"}, 3, "text"], "state")
    assert result == {"NJ": [{"state": "NJ"}], None: [{"name": "Pat"}, 3, "text"]}


def test_attribute_field():
    people = [User("Ann", 30, "NJ"), User("Bo", 40, "NY"), User("Cy", 50, "NJ")]
    result = group_by(people, "state")
    assert result == {"NJ": [people[0], people[2]], "NY": [people[1]]}


def test_index_field():
    rows = [[1, "a"], [2, "b"], [1, "c"]]
    assert group_by(rows, 0) == {1: [[1, "a"], [1, "c"]], 2: [[2, "b"]]}
    assert group_by(rows, "0") == group_by(rows, 0)
    assert group_by(rows, 5) == {None: rows}


def test_deep_path_field():
    items = [{"owner": {"state": "NJ"}}, {"owner": {"state": "NY"}}, {"owner": None}]
    result = group_by(items, "owner.state")
    assert list(result) == ["NJ", "NY", None]


def test_selector_receives_index_and_collection():
    seen = []

    def selector(element, index, collection):
        seen.append((element, index, collection))
        return index % 2

    data = ["a", "b", "c"]
    assert group_by(data, selector) == {0: ["a", "c"], 1: ["b"]}
    assert seen == [("a", 0, data), ("b", 1, data), ("c", 2, data)]


def test_generator_collection_is_seen_whole():
    seen = []

    def selector(element, index, collection):
        seen.append(list(collection))
        return element % 2

    result = group_by((n for n in range(3)), selector)
    assert result == {0: [0, 2], 1: [1]}
    assert seen == [[0, 1, 2]] * 3


def test_equal_keys_share_bucket():
    assert group_by([1, True, 1.0], lambda x: x) == {1: [1, True, 1.0]}


def test_builtin_selector():
    assert group_by(["one", "two", "three"], len) == {3: ["one", "two"], 5: ["three"]}


def test_mapping_collection_groups_values():
    scores = OrderedDict([("ann", 3), ("bo", 4), ("cy", 5)])
    assert group_by(scores, lambda n: n % 2 == 0) == {False: [3, 5], True: [4]}
    assert group_by(scores, lambda n, key: key[0]) == {"a": [3], "b": [4], "c": [5]}


def test_does_not_mutate_input(staff):
    before = [dict(user) for user in staff]
    group_by(staff, "state")
    assert staff == before


def test_unhashable_key_raises():
    with pytest.raises(TypeError):
        group_by([{"tags": ["a"]}], "tags")


def test_selector_errors_propagate():
    def broken(element):
        raise KeyError(element)

    with pytest.raises(KeyError):
        group_by([1], broken)


@given(lists(integers()))
def test_buckets_are_ordered_partition(xs):
    result = group_by(xs, lambda n: n % 3)
    assert sorted(concat(result.values())) == sorted(xs)
    for key, bucket in result.items():
        assert bucket == [x for x in xs if x % 3 == key]
    first_seen = list(dict.fromkeys(x % 3 for x in xs))
    assert list(result) == first_seen


@given(lists(users))
def test_field_name_matches_function(xs):
    assert group_by(xs, "state") == group_by(xs, lambda user: user["state"])


@given(lists(partial_users))
def test_heterogeneous_elements_never_raise(xs):
    result = group_by(xs, "state")
    assert sum(len(bucket) for bucket in result.values()) == len(xs)
    assert result.get(None, []) == [x for x in xs if "state" not in x]
