"""Markdown rendering of classified plans (pull-request comment style)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple

from tfplan_commenter.analysis.classify import classify
from tfplan_commenter.analysis.values import stringify

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tfplan_commenter.analysis.types import AttributeChange, ResourceDetail, ResourceSummary
    from tfplan_commenter.plan.types import Plan, PlanInfo

DEFAULT_MAX_LISTED = 3


class _BucketStyle(NamedTuple):
    emoji: str
    label: str
    past_tense: str


# Render order for tables and detail sections.
_BUCKET_STYLES: dict[str, _BucketStyle] = {
    "create": _BucketStyle("🟢", "Create", "Created"),
    "update": _BucketStyle("🟡", "Update", "Updated"),
    "replace": _BucketStyle("🔄", "Replace", "Replaced"),
    "delete": _BucketStyle("🔴", "Delete", "Deleted"),
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def format_attribute_value(value: Any) -> str:
    """Format an attribute value compactly; composite values show only their size."""
    if value is None:
        return "(null)"
    if isinstance(value, str):
        return f'"{value}"' if value else "(empty)"
    if isinstance(value, list):
        return f"[{len(value)} items]" if value else "[]"
    if isinstance(value, dict):
        return f"{{{len(value)} keys}}" if value else "{}"
    return stringify(value)


def format_resource_list(
    resources: Sequence[ResourceDetail], max_display: int = DEFAULT_MAX_LISTED
) -> str:
    """Join resource addresses, truncating after *max_display* entries."""
    names = [r.address for r in resources]
    if len(names) <= max_display:
        return ", ".join(names)
    remaining = len(names) - max_display
    return f"{', '.join(names[:max_display])}, ... (+{remaining} more)"


def _buckets(summary: ResourceSummary) -> list[tuple[str, _BucketStyle, list[ResourceDetail]]]:
    """Return the non-empty buckets of *summary* in render order."""
    return [
        (key, style, details)
        for key, style in _BUCKET_STYLES.items()
        if (details := getattr(summary, key))
    ]


def _attribute_line(change: AttributeChange) -> str:
    if change.is_new:
        return f"- **{change.attribute}**: {format_attribute_value(change.after)} *(new)*\n"
    if change.is_removed:
        return f"- **{change.attribute}**: {format_attribute_value(change.before)} *(removed)*\n"
    before = format_attribute_value(change.before)
    after = format_attribute_value(change.after)
    return f"- **{change.attribute}**: {before} → {after}\n"


def _change_descriptor(change: AttributeChange) -> str:
    if change.is_new:
        return f"{change.attribute} *(new)*"
    if change.is_removed:
        return f"{change.attribute} *(removed)*"
    return change.attribute


def _resource_table(summary: ResourceSummary, max_listed: int) -> list[str]:
    lines = [
        "| Action | Count | Resources |\n",
        "|--------|-------|----------|\n",
    ]
    for _key, style, details in _buckets(summary):
        resources = format_resource_list(details, max_listed)
        lines.append(f"| {style.emoji} **{style.label}** | {len(details)} | {resources} |\n")
    return lines


# ---------------------------------------------------------------------------
# Single plan
# ---------------------------------------------------------------------------


def _detail_sections(summary: ResourceSummary) -> list[str]:
    md: list[str] = []

    if summary.create:
        md.append("### 🟢 Resources to be Created\n\n")
        md.extend(f"- `{d.address}`\n" for d in summary.create)
        md.append("\n")

    if summary.update:
        md.append("### 🟡 Resources to be Updated\n\n")
        for d in summary.update:
            md.append(f"#### `{d.address}`\n\n")
            if d.changes:
                md.append("**Attributes being modified:**\n\n")
                md.extend(_attribute_line(c) for c in d.changes)
            else:
                md.append("*No specific attribute changes detected*\n")
            md.append("\n")

    if summary.replace:
        md.append("### 🔄 Resources to be Replaced\n\n")
        for d in summary.replace:
            md.append(f"#### `{d.address}`\n\n")
            if d.force_reason:
                md.append(f"**Reason for replacement:** {d.force_reason}\n\n")
            if d.changes:
                md.append("**Attribute changes:**\n\n")
                md.extend(_attribute_line(c) for c in d.changes)
            md.append("\n")

    if summary.delete:
        md.append("### 🔴 Resources to be Deleted\n\n")
        for d in summary.delete:
            md.append(f"#### `{d.address}`\n\n")
            if d.force_reason:
                md.append(f"**Resource details:** {d.force_reason}\n\n")

    return md


def render_summary(
    summary: ResourceSummary,
    terraform_version: str,
    *,
    max_listed: int = DEFAULT_MAX_LISTED,
) -> str:
    """Render one classified plan as a Markdown comment."""
    md = ["## 📋 Terraform Plan Summary\n\n"]

    if summary.total == 0:
        md.append("✅ **No changes detected** - Infrastructure is up to date!\n\n")
        return "".join(md)

    md.append(f"**Total resources affected:** {summary.total}\n\n")
    md.extend(_resource_table(summary, max_listed))
    md.append("\n")
    md.extend(_detail_sections(summary))

    md.append("---\n")
    md.append(f"*Generated from Terraform {terraform_version} plan*\n")
    return "".join(md)


def render_plan(plan: Plan, *, max_listed: int = DEFAULT_MAX_LISTED) -> str:
    """Classify and render a single decoded plan."""
    summary = classify(plan.resource_changes)
    return render_summary(summary, plan.terraform_version, max_listed=max_listed)


# ---------------------------------------------------------------------------
# Multiple plans
# ---------------------------------------------------------------------------


def _environment_lists(summary: ResourceSummary) -> list[str]:
    md: list[str] = []
    for key, style, details in _buckets(summary):
        md.append(f"**{style.emoji} Resources to be {style.past_tense}:**\n")
        for d in details:
            line = f"- `{d.address}`"
            if key == "update":
                if d.changes:
                    line += " - " + ", ".join(_change_descriptor(c) for c in d.changes)
            elif d.force_reason:
                line += f" - {d.force_reason}"
            md.append(line + "\n")
        md.append("\n")
    return md


def _versions_footer(versions: list[str]) -> str:
    if len(versions) == 1:
        return f"*Generated from Terraform {versions[0]} plans*\n"
    return f"*Generated from Terraform plans (versions: {', '.join(versions)})*\n"


def render_plans(plans: Sequence[PlanInfo], *, max_listed: int = DEFAULT_MAX_LISTED) -> str:
    """Render several labelled plans as one multi-environment comment.

    Plans are rendered in the order given; callers sort them.
    """
    md = ["## 📋 Multi-Environment Terraform Plan Summary\n\n"]

    classified = [(info, classify(info.plan.resource_changes)) for info in plans]
    totals = dict.fromkeys(_BUCKET_STYLES, 0)
    versions: list[str] = []
    for info, summary in classified:
        for key, count in summary.counts().items():
            totals[key] += count
        if info.plan.terraform_version not in versions:
            versions.append(info.plan.terraform_version)

    total = sum(totals.values())
    if total == 0:
        md.append(
            "✅ **No changes detected across all environments** - Infrastructure is up to date!\n\n"
        )
        return "".join(md)

    md.append(f"**Environments processed:** {len(plans)}\n")
    md.append(f"**Total resources affected:** {total}\n\n")

    md.append("### 📊 Overall Summary\n\n")
    md.append("| Action | Total Count |\n")
    md.append("|--------|-------------|\n")
    for key, style in _BUCKET_STYLES.items():
        if totals[key]:
            md.append(f"| {style.emoji} **{style.label}** | {totals[key]} |\n")
    md.append("\n")

    md.append("### 🏗️ Environment Details\n\n")
    for info, summary in classified:
        md.append(f"#### 📁 `{info.relative_path}`\n\n")

        if summary.total == 0:
            md.append("✅ No changes in this environment\n\n")
            continue

        md.extend(_resource_table(summary, max_listed))
        md.append("\n")
        md.extend(_environment_lists(summary))
        md.append("---\n\n")

    md.append(_versions_footer(versions))
    return "".join(md)
