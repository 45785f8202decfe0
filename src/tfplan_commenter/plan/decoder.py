"""Decode Terraform plan JSON into ``Plan`` objects."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from tfplan_commenter.plan.errors import MalformedPlanError, UnreadablePlanError
from tfplan_commenter.plan.types import Plan

logger = logging.getLogger(__name__)


def decode_plan(data: bytes | str, *, source: str = "<input>") -> Plan:
    """Decode raw plan JSON.

    Only structure is checked: unknown fields are ignored and missing fields
    fall back to empty values.

    Raises:
        MalformedPlanError: If *data* is not JSON or not shaped like a plan.
    """
    try:
        plan = Plan.model_validate_json(data)
    except ValidationError as exc:
        raise MalformedPlanError(source, f"failed to parse JSON: {exc}") from exc

    logger.debug("Decoded %s: %d resource change(s)", source, len(plan.resource_changes))
    return plan


def read_plan(path: Path | str) -> Plan:
    """Read and decode a plan file.

    Raises:
        UnreadablePlanError: If the file cannot be read.
        MalformedPlanError: If its contents cannot be decoded.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise UnreadablePlanError(str(path), f"failed to read file: {exc}") from exc
    return decode_plan(data, source=str(path))
