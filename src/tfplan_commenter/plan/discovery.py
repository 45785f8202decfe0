"""Recursive discovery of plan files below a directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from tfplan_commenter.plan.decoder import read_plan
from tfplan_commenter.plan.errors import DecodeError, TraversalError
from tfplan_commenter.plan.types import Plan, PlanInfo

logger = logging.getLogger(__name__)

PLAN_FILENAME = "tfplan.json"
ROOT_LABEL = "root"


def has_no_changes(plan: Plan) -> bool:
    """Return True if the plan lists no resource changes at all."""
    return not plan.resource_changes


def _relative_label(root: Path, directory: Path) -> str:
    label = directory.relative_to(root).as_posix()
    return ROOT_LABEL if label == "." else label


def _raise_walk_error(exc: OSError) -> None:
    raise exc


def find_plans(root: Path | str, *, filename: str = PLAN_FILENAME) -> list[PlanInfo]:
    """Collect every plan file named *filename* below *root* that has changes.

    Files that cannot be decoded are logged and skipped, as are plans with no
    resource changes. The result is sorted by relative path.

    Raises:
        TraversalError: If *root* is not a readable directory.
    """
    root = Path(root)
    if not root.is_dir():
        raise TraversalError(root, "not a directory or does not exist")

    plans: list[PlanInfo] = []
    try:
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
            dirnames.sort()
            if filename not in filenames:
                continue

            path = Path(dirpath) / filename
            try:
                plan = read_plan(path)
            except DecodeError as exc:
                logger.warning("Failed to read plan file %s: %s", path, exc)
                continue

            if has_no_changes(plan):
                logger.info("Skipping %s (no changes)", path)
                continue

            plans.append(PlanInfo(plan=plan, relative_path=_relative_label(root, Path(dirpath))))
            logger.info("Found plan with changes: %s", path)
    except OSError as exc:
        raise TraversalError(root, str(exc)) from exc

    plans.sort(key=lambda p: p.relative_path)
    logger.debug("Discovered %d plan(s) under %s", len(plans), root)
    return plans
