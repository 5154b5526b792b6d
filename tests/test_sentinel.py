"""Tests for the Undefined / Unset markers."""

import copy
import pickle

from lionbind.types import (
    Undefined,
    UndefinedType,
    Unset,
    UnsetType,
    is_sentinel,
    is_undefined,
    is_unset,
    not_sentinel,
)


class TestSingletons:
    def test_identity_is_preserved(self):
        """Constructing the type again returns the same object."""
        assert UndefinedType() is Undefined
        assert UnsetType() is Unset

    def test_copy_and_deepcopy_keep_identity(self):
        assert copy.copy(Undefined) is Undefined
        assert copy.deepcopy({"k": Unset})["k"] is Unset

    def test_pickle_keeps_identity(self):
        assert pickle.loads(pickle.dumps(Undefined)) is Undefined
        assert pickle.loads(pickle.dumps(Unset)) is Unset

    def test_falsy(self):
        assert not Undefined
        assert not Unset

    def test_repr(self):
        assert repr(Undefined) == "Undefined"
        assert repr(Unset) == "Unset"

    def test_distinct(self):
        assert Undefined is not Unset
        assert Undefined is not None


class TestIsSentinel:
    def test_builtin_sentinels(self):
        assert is_sentinel(Undefined)
        assert is_sentinel(Unset)

    def test_none_only_with_addition(self):
        """None is a value unless the caller opts in."""
        assert not is_sentinel(None)
        assert is_sentinel(None, {"none"})

    def test_empty_only_with_addition(self):
        assert not is_sentinel([])
        assert is_sentinel([], {"empty"})
        assert is_sentinel("", {"empty"})

    def test_falsy_values_are_not_sentinels(self):
        for value in (0, False, 0.0):
            assert not is_sentinel(value, {"none"})

    def test_not_sentinel(self):
        assert not_sentinel("Ada")
        assert not not_sentinel(Unset)
        assert not not_sentinel(None, {"none"})

    def test_specific_checks(self):
        assert is_undefined(Undefined) and not is_undefined(Unset)
        assert is_unset(Unset) and not is_unset(Undefined)
