"""Shared fixtures for unit tests."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from tfplan_commenter.plan.types import Plan

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

_TFPLAN_ENV_VARS = (
    "TFPLAN_OUTPUT",
    "TFPLAN_PLAN_FILENAME",
    "TFPLAN_MAX_LISTED",
    "TFPLAN_LOG",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def _clean_tfplan_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove TFPLAN_* env vars so unit tests don't leak host settings."""
    for var in _TFPLAN_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def _resource_change(
    address: str,
    actions: list[str],
    *,
    before: Any = None,
    after: Any = None,
) -> dict[str, Any]:
    resource_type, _, name = address.rpartition(".")
    return {
        "address": address,
        "mode": "managed",
        "type": resource_type,
        "name": name,
        "provider_name": "registry.terraform.io/hashicorp/aws",
        "change": {
            "actions": actions,
            "before": before,
            "after": after,
            "after_unknown": {},
        },
    }


@pytest.fixture
def rc() -> Callable[..., dict[str, Any]]:
    """Factory fixture: build one raw ``resource_changes`` entry."""
    return _resource_change


def _plan_document(*changes: dict[str, Any], terraform_version: str = "1.6.0") -> dict[str, Any]:
    return {
        "format_version": "1.2",
        "terraform_version": terraform_version,
        "resource_changes": list(changes),
    }


@pytest.fixture
def make_plan() -> Callable[..., Plan]:
    """Factory fixture: build a decoded ``Plan`` from raw resource changes."""

    def _make(*changes: dict[str, Any], terraform_version: str = "1.6.0") -> Plan:
        return Plan.model_validate(_plan_document(*changes, terraform_version=terraform_version))

    return _make


@pytest.fixture
def write_plan() -> Callable[..., Path]:
    """Factory fixture: write plan JSON into *directory*, return the file path."""

    def _write(
        directory: Path,
        *changes: dict[str, Any],
        terraform_version: str = "1.6.0",
        filename: str = "tfplan.json",
    ) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        doc = _plan_document(*changes, terraform_version=terraform_version)
        path.write_text(json.dumps(doc), encoding="utf-8")
        return path

    return _write
