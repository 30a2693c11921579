"""
Tests for descriptor merging — conjunctive ("all") and disjunctive ("any").
"""

import pytest

from targetcaps.core.models.capability import TriState
from targetcaps.core.targets.merge import merge_target_properties

T = TriState.TRUE
F = TriState.FALSE
U = TriState.UNKNOWN


class TestMergeAll:
    """Conjunctive merge: FALSE wins, otherwise TRUE."""

    def test_all_true(self):
        assert merge_target_properties([{"a": T}, {"a": T}]) == {"a": T}

    def test_false_wins(self):
        assert merge_target_properties([{"a": T}, {"a": F}]) == {"a": F}
        assert merge_target_properties([{"a": F}, {"a": T}]) == {"a": F}

    def test_absent_does_not_force_false(self):
        assert merge_target_properties([{"a": T}, {}]) == {"a": T}

    def test_unknown_does_not_block_true(self):
        """Only an explicit FALSE downgrades a flag under "all".

        An UNKNOWN or missing value is not a contradiction, so the merged
        flag stays TRUE. A stricter three-valued AND would yield UNKNOWN
        here; this behaviour is kept on purpose.
        """
        assert merge_target_properties([{"a": T}, {"a": U}]) == {"a": T}
        assert merge_target_properties([{"a": U}, {}]) == {"a": T}
        assert merge_target_properties([{"a": U}]) == {"a": T}

    def test_key_universe_is_union(self):
        merged = merge_target_properties([{"a": T}, {"b": F}, {"c": U}])
        assert merged == {"a": T, "b": F, "c": T}

    def test_empty_inputs(self):
        assert merge_target_properties([]) == {}
        assert merge_target_properties([{}, {}]) == {}


class TestMergeAny:
    """Disjunctive merge: TRUE wins, otherwise FALSE."""

    def test_true_wins(self):
        assert merge_target_properties([{"a": F}, {"a": T}], mode="any") == {"a": T}

    def test_absent_defaults_to_false(self):
        assert merge_target_properties([{"a": F}, {}], mode="any") == {"a": F}

    def test_unknown_is_false(self):
        assert merge_target_properties([{"a": U}], mode="any") == {"a": F}
        assert merge_target_properties([{"a": U}, {"a": T}], mode="any") == {"a": T}

    def test_key_universe_is_union(self):
        merged = merge_target_properties([{"a": T}, {"b": F}], mode="any")
        assert merged == {"a": T, "b": F}


class TestMergeGeneral:
    """Behaviour shared by both modes."""

    @pytest.mark.parametrize("mode", ["all", "any"])
    def test_inputs_not_mutated(self, mode):
        first = {"a": T}
        second = {"b": F}
        merge_target_properties([first, second], mode=mode)
        assert first == {"a": T}
        assert second == {"b": F}

    def test_key_order_follows_inputs(self):
        merged = merge_target_properties([{"b": T, "a": T}, {"c": F, "a": F}])
        assert list(merged) == ["b", "a", "c"]

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="merge mode"):
            merge_target_properties([{"a": T}], mode="some")  # type: ignore[arg-type]
