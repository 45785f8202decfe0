"""Classification result types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AttributeChange:
    """A single attribute difference between the before and after states."""

    attribute: str
    before: Any = None
    after: Any = None
    is_new: bool = False
    is_removed: bool = False


@dataclass(frozen=True)
class ResourceDetail:
    """A classified resource with its attribute diff and optional reason."""

    address: str
    changes: list[AttributeChange] = field(default_factory=list)
    force_reason: str | None = None


@dataclass(frozen=True)
class ResourceSummary:
    """Classified resources bucketed by action, each bucket sorted by address."""

    create: list[ResourceDetail] = field(default_factory=list)
    update: list[ResourceDetail] = field(default_factory=list)
    delete: list[ResourceDetail] = field(default_factory=list)
    replace: list[ResourceDetail] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.create) + len(self.update) + len(self.delete) + len(self.replace)

    def counts(self) -> dict[str, int]:
        return {
            "create": len(self.create),
            "update": len(self.update),
            "replace": len(self.replace),
            "delete": len(self.delete),
        }
