"""End-to-end copy scenarios over realistic object graphs."""

import datetime
import queue
from dataclasses import dataclass, field
from typing import Any

from hypothesis import given
from hypothesis import strategies as st

from deepclone import UnsupportedTypeError, copy, copy_skip_unsupported, must_copy


@dataclass
class Task:
    title: str
    parent: "Task | None" = None
    subtasks: list["Task"] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)


@dataclass
class Worker:
    name: str
    inbox: Any = None
    history: list[str] = field(default_factory=list)


@dataclass
class Ledger:
    total: int
    _owner: str = ""


def _mutable_ids(value, seen=None):
    """Collect ids of every list and dict reachable from value."""
    seen = set() if seen is None else seen
    if isinstance(value, (list, dict)) and id(value) not in seen:
        seen.add(id(value))
        children = value.values() if isinstance(value, dict) else value
        for child in children:
            _mutable_ids(child, seen)
    return seen


json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.text(max_size=5),
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=3), children, max_size=4),
    max_leaves=20,
)


# Scenario 1: mapping of text to numbers


def test_mapping_of_numbers_is_independent():
    original = {"a": 1, "b": 2}

    copied = must_copy(original)
    copied["a"] = 100
    copied["c"] = 3

    assert original == {"a": 1, "b": 2}
    assert copied is not original


# Scenario 2: record pointing to itself


def test_self_referencing_record():
    task = Task("root")
    task.parent = task

    copied = must_copy(task)

    assert copied is not task
    assert copied.parent is copied


# Scenario 3: siblings sharing one target


def test_shared_target_stays_shared():
    shared = Task("shared")
    holder = {"left": shared, "right": shared}

    copied = must_copy(holder)

    assert copied["left"] is copied["right"]
    assert copied["left"] is not shared


# Scenario 4 and 5: channel handle behind a dynamic value


def test_channel_strict_fails():
    worker = Worker("w1", inbox=queue.Queue(), history=["start"])

    result = copy(worker)

    assert not result.ok
    assert result.value is None
    assert isinstance(result.error, UnsupportedTypeError)
    assert result.error.value_type is queue.Queue


def test_channel_lenient_zeroed():
    worker = Worker("w1", inbox=queue.Queue(), history=["start"])

    result = copy_skip_unsupported(worker)

    assert result.ok
    assert result.value.inbox is None
    assert result.value.name == "w1"
    assert result.value.history == ["start"]
    assert worker.inbox is not None


# Scenario 6: private member not copied


def test_private_member_zeroed():
    ledger = Ledger(total=42, _owner="alice")

    copied = must_copy(ledger)

    assert copied.total == 42
    assert copied._owner == ""


def test_mode_divergence_matches_strict_copy_elsewhere():
    graph = {"tasks": [Task("a", meta={"due": datetime.date(2024, 1, 2)})], "q": queue.Queue()}
    without_channel = {"tasks": graph["tasks"], "q": None}

    lenient = copy_skip_unsupported(graph).unwrap()
    strict = must_copy(without_channel)

    assert lenient == strict


def test_mutual_cycle_through_lists():
    parent = Task("parent")
    child = Task("child", parent=parent)
    parent.subtasks.append(child)

    copied = must_copy(parent)

    copied_child = copied.subtasks[0]
    assert copied_child.parent is copied
    assert copied_child is not child
    copied_child.title = "renamed"
    assert child.title == "child"


def test_absent_values_stay_absent():
    task = Task("t", parent=None)

    copied = must_copy({"task": task, "missing": None})

    assert copied["missing"] is None
    assert copied["task"].parent is None


@given(json_values)
def test_copy_equals_original(value):
    """PROPERTY: copying never changes the value."""
    assert must_copy(value) == value


@given(json_values)
def test_copy_shares_no_mutable_container(value):
    """PROPERTY: no list or dict is shared between original and copy."""
    copied = must_copy(value)

    assert _mutable_ids(value).isdisjoint(_mutable_ids(copied))


@given(st.lists(st.integers(), max_size=5), st.integers(min_value=1, max_value=4))
def test_sharing_pattern_preserved(shared, repeats):
    """PROPERTY: n references to one list become n references to one new list."""
    original = [shared] * repeats

    copied = must_copy(original)

    assert all(item is copied[0] for item in copied)
    assert copied[0] is not shared
    assert copied[0] == shared
