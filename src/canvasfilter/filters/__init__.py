"""Filter strategies and the two-phase tag choice protocol."""

from .strategies import (
    VisibilityPlan,
    accumulated_plan,
    additive_tag_ids,
    connected_plan,
    hide_selected_targets,
    same_color_plan,
    selected_colors,
    selected_node_ids,
    show_all_plan,
    tag_plan,
)
from .tag_choice import PendingTagChoice, request_tag_choice

__all__ = [
    "PendingTagChoice",
    "VisibilityPlan",
    "accumulated_plan",
    "additive_tag_ids",
    "connected_plan",
    "hide_selected_targets",
    "request_tag_choice",
    "same_color_plan",
    "selected_colors",
    "selected_node_ids",
    "show_all_plan",
    "tag_plan",
]
