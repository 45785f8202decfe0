"""Attribute-level diffing of before/after resource states."""

from __future__ import annotations

from typing import Any

from tfplan_commenter.analysis.types import AttributeChange
from tfplan_commenter.analysis.values import values_equal

# Provider-managed attributes that a reviewer cannot act on.
SKIPPED_ATTRIBUTES: frozenset[str] = frozenset({"id", "arn", "tags_all", "timeouts"})


def diff_attributes(before: Any, after: Any) -> list[AttributeChange]:
    """Return the attribute changes between two attribute mappings.

    Whole-resource creation or deletion (either side not a mapping) yields an
    empty list. Values are compared with ``values_equal``. Results are sorted by
    attribute name.
    """
    if not isinstance(before, dict) or not isinstance(after, dict):
        return []

    changes: list[AttributeChange] = []
    for key in sorted(before.keys() | after.keys()):
        if key in SKIPPED_ATTRIBUTES:
            continue

        in_before = key in before
        in_after = key in after
        if in_after and not in_before:
            changes.append(AttributeChange(attribute=key, after=after[key], is_new=True))
        elif in_before and not in_after:
            changes.append(AttributeChange(attribute=key, before=before[key], is_removed=True))
        elif not values_equal(before[key], after[key]):
            changes.append(AttributeChange(attribute=key, before=before[key], after=after[key]))
    return changes
