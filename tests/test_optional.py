"""Tests for the runtime optional container."""

import copy
import pickle

from buildergen.optional import ABSENT, Absent, Present


def test_absent_is_a_singleton():
    assert Absent() is ABSENT
    assert copy.deepcopy(ABSENT) is ABSENT
    assert pickle.loads(pickle.dumps(ABSENT)) is ABSENT


def test_absent_state():
    assert ABSENT.is_present is False
    assert ABSENT.unwrap_or("fallback") == "fallback"
    assert repr(ABSENT) == "ABSENT"


def test_present_keeps_falsy_values_distinct_from_absent():
    for value in (None, 0, "", False, []):
        present = Present(value)
        assert present.is_present
        assert present.unwrap_or("fallback") == value
        assert present != ABSENT


def test_present_equality_is_by_value():
    assert Present(30) == Present(30)
    assert Present(30) != Present(31)
