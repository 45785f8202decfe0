"""Plan analysis: attribute diffing and change classification."""

from tfplan_commenter.analysis.classify import classify, deletion_reason, replacement_reason
from tfplan_commenter.analysis.diff import SKIPPED_ATTRIBUTES, diff_attributes
from tfplan_commenter.analysis.types import AttributeChange, ResourceDetail, ResourceSummary
from tfplan_commenter.analysis.values import stringify, values_equal

__all__ = [
    "SKIPPED_ATTRIBUTES",
    "AttributeChange",
    "ResourceDetail",
    "ResourceSummary",
    "classify",
    "deletion_reason",
    "diff_attributes",
    "replacement_reason",
    "stringify",
    "values_equal",
]
