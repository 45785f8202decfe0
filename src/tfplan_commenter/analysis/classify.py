"""Bucket resource changes by action and explain deletions and replacements."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tfplan_commenter.analysis.diff import diff_attributes
from tfplan_commenter.analysis.types import ResourceDetail, ResourceSummary
from tfplan_commenter.analysis.values import stringify
from tfplan_commenter.plan.types import Action

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tfplan_commenter.plan.types import Change, ResourceChange

logger = logging.getLogger(__name__)

# Attributes that usually force a replacement, in the order they are reported.
REPLACEMENT_ATTRIBUTES: tuple[str, ...] = ("name", "family", "engine", "vpc_id", "availability_zone")

# Attributes that identify a deleted resource.
DELETION_ATTRIBUTES: tuple[str, ...] = ("name", "id", "family", "engine")

_DEFAULT_REPLACE_REASON = "Resource configuration requires replacement"
_MULTIPLE_REPLACE_REASON = "Multiple attribute changes require replacement"
_DEFAULT_DELETE_REASON = "Resource marked for deletion"


def replacement_reason(change: Change) -> str:
    """Explain why a resource must be destroyed and recreated."""
    diff = {c.attribute: c for c in diff_attributes(change.before, change.after)}
    for attr in REPLACEMENT_ATTRIBUTES:
        if attr in diff:
            c = diff[attr]
            return (
                f"Attribute '{attr}' changed from '{stringify(c.before)}' "
                f"to '{stringify(c.after)}' (forces replacement)"
            )
    if diff:
        return _MULTIPLE_REPLACE_REASON
    return _DEFAULT_REPLACE_REASON


def deletion_reason(change: Change) -> str:
    """Describe a deleted resource by its identifying attributes."""
    before = change.before
    if not isinstance(before, dict):
        return _DEFAULT_DELETE_REASON

    identifiers = [
        f"{attr}: {stringify(before[attr])}"
        for attr in DELETION_ATTRIBUTES
        if before.get(attr) is not None
    ]
    if identifiers:
        return f"Resource with {', '.join(identifiers)}"
    return _DEFAULT_DELETE_REASON


def classify(resource_changes: Iterable[ResourceChange]) -> ResourceSummary:
    """Bucket resource changes into create/update/delete/replace.

    ``create`` together with ``delete`` is a replacement. Changes with only
    ``no-op`` or ``read`` actions are dropped.
    """
    summary = ResourceSummary()
    for rc in resource_changes:
        change = rc.change
        changes = diff_attributes(change.before, change.after)

        if change.is_replace:
            bucket = summary.replace
            reason: str | None = replacement_reason(change)
        elif change.has_action(Action.CREATE):
            bucket, reason = summary.create, None
        elif change.has_action(Action.UPDATE):
            bucket, reason = summary.update, None
        elif change.has_action(Action.DELETE):
            bucket, reason = summary.delete, deletion_reason(change)
        else:
            logger.debug("Ignoring %s with actions %s", rc.address, change.actions)
            continue

        bucket.append(ResourceDetail(address=rc.address, changes=changes, force_reason=reason))

    for bucket in (summary.create, summary.update, summary.delete, summary.replace):
        bucket.sort(key=lambda d: d.address)

    logger.debug("Classified resource changes: %s", summary.counts())
    return summary
