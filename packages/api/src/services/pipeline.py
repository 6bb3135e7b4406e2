# This project was developed with assistance from AI tools.
"""Kanban column ordering for free-text bid status labels.

Ordering rules:
  1. Every canonical label, in canonical order, even with no members.
  2. Observed labels that match a canonical one case-insensitively are
     folded into it and shown with the canonical spelling.
  3. Remaining labels follow, sorted case-insensitively; ties between
     spellings of the same label resolve to the lexicographically smallest.
The result never depends on the iteration order of the observed labels.
"""

from collections.abc import Callable, Iterable, Sequence
from operator import attrgetter
from typing import TypeVar

from ..core.config import settings

T = TypeVar("T")


def normalize_label(label: str) -> str:
    """Identity key for a status label."""
    return label.strip().casefold()


def build_columns(
    observed_labels: Iterable[str | None],
    canonical_order: Sequence[str],
) -> list[str]:
    """Deterministic total order of every canonical and observed label."""
    canonical: list[str] = []
    known: set[str] = set()
    for label in canonical_order:
        key = normalize_label(label)
        if not key or key in known:
            continue
        known.add(key)
        canonical.append(label.strip())

    overflow: dict[str, str] = {}
    for label in observed_labels:
        if label is None:
            continue
        key = normalize_label(label)
        if not key or key in known:
            continue
        spelling = label.strip()
        if key not in overflow or spelling < overflow[key]:
            overflow[key] = spelling

    extra = [spelling for _, spelling in sorted(overflow.items())]
    return canonical + extra


def column_labels(
    labels: Iterable[str | None],
    canonical_order: Sequence[str],
    unlabelled: str | None = None,
) -> list[str]:
    """Board column order for raw status labels, blank ones included.

    Blank or missing labels become the ``unlabelled`` column, so the column
    list always matches what ``group_into_columns`` produces.
    """
    unlabelled = unlabelled or settings.UNLABELLED_COLUMN
    return build_columns({_column_label(label, unlabelled) for label in labels}, canonical_order)


def _column_label(label: str | None, unlabelled: str) -> str:
    return label.strip() if label and label.strip() else unlabelled


def group_into_columns(
    items: Iterable[T],
    canonical_order: Sequence[str],
    key: Callable[[T], str | None] = attrgetter("status"),
    unlabelled: str | None = None,
) -> dict[str, list[T]]:
    """Partition items into ordered columns by case-insensitive label.

    Items with a blank label go to the ``unlabelled`` column. Every item
    lands in exactly one column and keeps its relative input order.
    """
    unlabelled = unlabelled or settings.UNLABELLED_COLUMN
    items = list(items)

    labels = [_column_label(key(item), unlabelled) for item in items]
    columns = column_labels(labels, canonical_order, unlabelled)
    by_key = {normalize_label(c): c for c in columns}

    grouped: dict[str, list[T]] = {c: [] for c in columns}
    for item, label in zip(items, labels, strict=True):
        grouped[by_key[normalize_label(label)]].append(item)
    return grouped
