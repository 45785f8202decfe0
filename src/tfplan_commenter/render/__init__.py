"""Markdown report rendering."""

from tfplan_commenter.render.markdown import (
    format_attribute_value,
    format_resource_list,
    render_plan,
    render_plans,
    render_summary,
)

__all__ = [
    "format_attribute_value",
    "format_resource_list",
    "render_plan",
    "render_plans",
    "render_summary",
]
