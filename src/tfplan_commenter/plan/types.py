"""Plan types decoded from ``terraform show -json`` output."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


class Action(str, Enum):
    NOOP = "no-op"
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


def _none_to_list(v: Any) -> Any:
    return v if v is not None else []


def _none_to_str(v: Any) -> Any:
    return v if v is not None else ""


def _none_to_dict(v: Any) -> Any:
    return v if v is not None else {}


_Str = Annotated[str, BeforeValidator(_none_to_str)]


class _PlanModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Change(_PlanModel):
    actions: Annotated[list[str], BeforeValidator(_none_to_list)] = []
    before: Any = None
    after: Any = None
    after_unknown: Any = None

    def has_action(self, action: Action | str) -> bool:
        name = action.value if isinstance(action, Action) else action
        return name in self.actions

    @property
    def is_replace(self) -> bool:
        return self.has_action(Action.CREATE) and self.has_action(Action.DELETE)


class ResourceChange(_PlanModel):
    address: _Str = ""
    module_address: _Str = ""
    mode: _Str = ""
    type: _Str = ""
    name: _Str = ""
    provider_name: _Str = ""
    change: Annotated[Change, BeforeValidator(_none_to_dict)] = Change()


class Plan(_PlanModel):
    format_version: _Str = ""
    terraform_version: _Str = ""
    resource_changes: Annotated[list[ResourceChange], BeforeValidator(_none_to_list)] = []


@dataclass(frozen=True)
class PlanInfo:
    """A decoded plan labelled with its directory relative to the search root."""

    plan: Plan
    relative_path: str
