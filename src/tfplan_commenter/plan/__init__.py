"""Terraform plan decoding and discovery."""

from tfplan_commenter.plan.decoder import decode_plan, read_plan
from tfplan_commenter.plan.discovery import find_plans, has_no_changes
from tfplan_commenter.plan.errors import (
    CommenterError,
    DecodeError,
    MalformedPlanError,
    NoPlansFoundError,
    TraversalError,
    UnreadablePlanError,
)
from tfplan_commenter.plan.types import Action, Change, Plan, PlanInfo, ResourceChange

__all__ = [
    "Action",
    "Change",
    "CommenterError",
    "DecodeError",
    "MalformedPlanError",
    "NoPlansFoundError",
    "Plan",
    "PlanInfo",
    "ResourceChange",
    "TraversalError",
    "UnreadablePlanError",
    "decode_plan",
    "find_plans",
    "has_no_changes",
    "read_plan",
]
