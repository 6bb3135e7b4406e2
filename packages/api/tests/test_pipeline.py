# This project was developed with assistance from AI tools.
"""Tests for kanban column ordering and grouping."""

import itertools
from types import SimpleNamespace

import pytest

from src.core.config import settings
from src.services.pipeline import (
    build_columns,
    column_labels,
    group_into_columns,
    normalize_label,
)


def _bid(id, status):
    return SimpleNamespace(id=id, status=status)


# ---------------------------------------------------------------------------
# build_columns
# ---------------------------------------------------------------------------


def test_canonical_then_overflow():
    """Case variants fold into canonical labels; new labels follow."""
    assert build_columns({"b", "D", "a"}, ["A", "B", "C"]) == ["A", "B", "C", "D"]


def test_empty_canonical_labels_are_kept():
    assert build_columns([], ["Ganha", "Perdida"]) == ["Ganha", "Perdida"]


@pytest.mark.parametrize("perm", list(itertools.permutations(["Zeta", "alpha", "Beta", "ganha"])))
def test_order_is_independent_of_observation_order(perm):
    expected = ["Ganha", "Perdida", "alpha", "Beta", "Zeta"]
    assert build_columns(perm, ["Ganha", "Perdida"]) == expected


def test_overflow_case_variants_resolve_to_smallest_spelling():
    columns = build_columns(["suspensa", "Suspensa", "SUSPENSA"], ["A"])
    assert columns == ["A", "SUSPENSA"]


def test_each_label_appears_once():
    columns = build_columns(["a", "A ", " a", "b"], ["A", "a"])
    assert columns == ["A", "b"]
    keys = [normalize_label(c) for c in columns]
    assert len(keys) == len(set(keys))


def test_blank_and_missing_labels_are_ignored():
    assert build_columns([None, "", "   "], ["A"]) == ["A"]


# ---------------------------------------------------------------------------
# group_into_columns
# ---------------------------------------------------------------------------


def test_every_item_lands_in_exactly_one_column():
    bids = [
        _bid("1", "Ganha"),
        _bid("2", "ganha"),
        _bid("3", "Suspensa"),
        _bid("4", None),
        _bid("5", "  "),
        _bid("6", "Perdida"),
    ]
    grouped = group_into_columns(bids, ["Ganha", "Perdida"])

    placed = [b.id for members in grouped.values() for b in members]
    assert sorted(placed) == ["1", "2", "3", "4", "5", "6"]
    assert [b.id for b in grouped["Ganha"]] == ["1", "2"]
    assert [b.id for b in grouped[settings.UNLABELLED_COLUMN]] == ["4", "5"]
    assert list(grouped) == ["Ganha", "Perdida", settings.UNLABELLED_COLUMN, "Suspensa"]


def test_grouping_includes_empty_canonical_columns():
    grouped = group_into_columns([_bid("1", "Outro")], settings.PIPELINE_STAGES)
    assert list(grouped)[: len(settings.PIPELINE_STAGES)] == settings.PIPELINE_STAGES
    assert grouped["Ganha"] == []
    assert [b.id for b in grouped["Outro"]] == ["1"]


def test_custom_key_and_unlabelled_name():
    items = [{"s": "x"}, {"s": None}]
    grouped = group_into_columns(items, ["X"], key=lambda i: i["s"], unlabelled="Sem status")
    assert grouped == {"X": [{"s": "x"}], "Sem status": [{"s": None}]}


# ---------------------------------------------------------------------------
# column_labels
# ---------------------------------------------------------------------------


def test_column_labels_adds_unlabelled_column_for_blank_statuses():
    columns = column_labels([None, "Suspensa", " "], ["Ganha"])
    assert columns == ["Ganha", settings.UNLABELLED_COLUMN, "Suspensa"]


def test_column_labels_without_blank_statuses():
    assert column_labels(["suspensa", "ganha"], ["Ganha"]) == ["Ganha", "suspensa"]


def test_column_labels_match_grouped_columns():
    bids = [_bid("1", None), _bid("2", "Suspensa"), _bid("3", "perdida")]
    grouped = group_into_columns(bids, settings.PIPELINE_STAGES)
    statuses = {b.status for b in bids}
    assert column_labels(statuses, settings.PIPELINE_STAGES) == list(grouped)
