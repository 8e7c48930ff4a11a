"""
Command Dispatcher.

Registers the named filter commands a host exposes, checks that each runs
only on a canvas, validates preconditions before anything is mutated, and
applies the resulting plans to the presentation surface and session.
"""

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, List, Optional

from .analysis.tags import TagMatchMode
from .core.exceptions import (
    CanvasFilterError,
    CommandUnavailableError,
    EmptySelectionError,
    UnknownCommandError,
    UnknownTagChoiceError,
)
from .core.result import Err, Ok, Result
from .core.session import FilterSession
from .core.types import DisplayMode, GraphSnapshot
from .filters.strategies import (
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
from .filters.tag_choice import PendingTagChoice, request_tag_choice
from .host import CanvasHost, MetadataSource, Notifier, TagPicker
from .presentation import apply_edge_visibility, apply_node_visibility, dim_element

logger = logging.getLogger(__name__)

EMPTY_SELECTION_MESSAGE = "Please select at least one node"
COLORLESS_WARNING = "One of selected nodes has no color, so colorless nodes will be visible"


@dataclass(frozen=True)
class CommandOutcome:
    """What a command did. ``pending`` is set when a tag pick was requested."""
    command_id: str
    plan: Optional[VisibilityPlan] = None
    pending: Optional[PendingTagChoice] = None


CommandResult = Result[CommandOutcome, CanvasFilterError]


def tag_command_id(mode: TagMatchMode, additive: bool) -> str:
    """Command id of the tag filter with the given match mode and additivity."""
    prefix = "show-tags" if mode == TagMatchMode.INCLUSIVE else "hide-tags"
    return f"{prefix}-additive" if additive else prefix


@dataclass(frozen=True)
class Command:
    id: str
    name: str
    handler: Callable[[GraphSnapshot], CommandResult]


class CanvasFilterCommands:
    """
    The command surface exposed to a host application.

    Owns the ``FilterSession``. Non-additive commands replace its
    shown-set, additive tag picks union into it, and show-all clears it.
    The hide-selected commands leave it alone.
    """

    def __init__(
        self,
        host: CanvasHost,
        metadata: MetadataSource,
        notifier: Notifier,
        picker: TagPicker,
        session: Optional[FilterSession] = None,
    ):
        self.host = host
        self.metadata = metadata
        self.notifier = notifier
        self.picker = picker
        self.session = session or FilterSession()
        self._pending: Dict[str, PendingTagChoice] = {}
        self._commands: Dict[str, Command] = {}
        self._register_defaults()

    # =========================================================================
    # Registry
    # =========================================================================

    def _register(self, command_id: str, name: str, handler: Callable[[GraphSnapshot], CommandResult]) -> None:
        self._commands[command_id] = Command(command_id, name, handler)

    def _register_defaults(self) -> None:
        self._register("toggle-display-mode", "Toggle display mode (hide/fade)", self._toggle_display_mode)
        self._register("show-all", "Show all", self._show_all)
        self._register("show-only-same-color", "Show matching color", self._show_same_color)
        self._register("show-hide", "Hide selected", partial(self._hide_selected, with_connections=False))
        self._register(
            "show-hide-connected", "Hide selected with connections",
            partial(self._hide_selected, with_connections=True),
        )
        self._register(
            "show-connected-nodes-from-to", "Show with arrows to/from",
            partial(self._show_connected, "show-connected-nodes-from-to", upstream=True, downstream=True),
        )
        self._register(
            "show-connected-nodes-from", "Show with arrows from",
            partial(self._show_connected, "show-connected-nodes-from", upstream=False, downstream=True),
        )
        self._register(
            "show-connected-nodes-to", "Show with arrows to",
            partial(self._show_connected, "show-connected-nodes-to", upstream=True, downstream=False),
        )
        self._register(
            "show-tags", "Filter by tag",
            partial(self._request_tag, mode=TagMatchMode.INCLUSIVE, additive=False),
        )
        self._register(
            "hide-tags", "Filter excluding tag",
            partial(self._request_tag, mode=TagMatchMode.EXCLUSIVE, additive=False),
        )
        self._register(
            "show-tags-additive", "Filter by tag (additive)",
            partial(self._request_tag, mode=TagMatchMode.INCLUSIVE, additive=True),
        )
        self._register(
            "hide-tags-additive", "Filter excluding tag (additive)",
            partial(self._request_tag, mode=TagMatchMode.EXCLUSIVE, additive=True),
        )

    def commands(self) -> List[Command]:
        return list(self._commands.values())

    def is_available(self, command_id: str) -> bool:
        """Check callback for the host: commands are enabled only on a canvas."""
        return command_id in self._commands and self.host.is_canvas_active()

    def execute(self, command_id: str) -> CommandResult:
        command = self._commands.get(command_id)
        if command is None:
            return Err(UnknownCommandError(command_id))
        if not self.host.is_canvas_active():
            logger.debug("Command %s invoked outside a canvas", command_id)
            return Err(CommandUnavailableError(command_id))

        snapshot = self.host.snapshot()
        if snapshot is None:
            return Err(CommandUnavailableError(command_id))

        logger.debug(
            "Executing %s (%d nodes, %d edges, %d selected)",
            command_id, len(snapshot.nodes), len(snapshot.edges), len(snapshot.selection),
        )
        return command.handler(snapshot)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _empty_selection(self) -> CommandResult:
        self.notifier.notify(EMPTY_SELECTION_MESSAGE)
        return Err(EmptySelectionError(EMPTY_SELECTION_MESSAGE))

    def _apply_plan(self, plan: VisibilityPlan) -> None:
        surface = self.host.presentation
        apply_node_visibility(surface.nodes, plan.node_ids, self.session.mode)
        apply_edge_visibility(surface.edges, plan.edge_ids, self.session.mode)

    # =========================================================================
    # Handlers
    # =========================================================================

    def _toggle_display_mode(self, snapshot: GraphSnapshot) -> CommandResult:
        mode = self.session.toggle_mode()
        self.notifier.notify(f"Display mode switched to: {mode}")
        return Ok(CommandOutcome("toggle-display-mode"))

    def _show_all(self, snapshot: GraphSnapshot) -> CommandResult:
        plan = show_all_plan()
        self._apply_plan(plan)
        self.session.reset()
        return Ok(CommandOutcome("show-all", plan=plan))

    def _show_same_color(self, snapshot: GraphSnapshot) -> CommandResult:
        colors, has_colorless = selected_colors(snapshot)
        if not colors:
            return self._empty_selection()
        if has_colorless:
            self.notifier.notify(COLORLESS_WARNING)

        plan = same_color_plan(snapshot, colors)
        self._apply_plan(plan)
        self.session.replace(plan.node_ids)
        return Ok(CommandOutcome("show-only-same-color", plan=plan))

    def _show_connected(
        self, command_id: str, snapshot: GraphSnapshot, upstream: bool, downstream: bool,
    ) -> CommandResult:
        seeds = selected_node_ids(snapshot)
        if not seeds:
            return self._empty_selection()

        plan = connected_plan(snapshot, seeds, upstream, downstream)
        self._apply_plan(plan)
        self.session.replace(plan.node_ids)
        return Ok(CommandOutcome(command_id, plan=plan))

    def _hide_selected(self, snapshot: GraphSnapshot, with_connections: bool) -> CommandResult:
        if not snapshot.selection:
            return self._empty_selection()

        node_ids, edge_ids = hide_selected_targets(snapshot, with_connections)
        surface = self.host.presentation
        mode = self.session.mode
        for node_id in node_ids:
            view = surface.nodes.get(node_id)
            if view is None:
                logger.debug("Skipping node %s: no live view", node_id)
                continue
            dim_element(view, mode)
        for edge_id in edge_ids:
            view = surface.edges.get(edge_id)
            if view is None:
                logger.debug("Skipping edge %s: no live view", edge_id)
                continue
            dim_element(view, mode)

        self.host.deselect_all()
        command_id = "show-hide-connected" if with_connections else "show-hide"
        return Ok(CommandOutcome(command_id))

    # =========================================================================
    # Tag picking
    # =========================================================================

    def _request_tag(self, snapshot: GraphSnapshot, mode: TagMatchMode, additive: bool) -> CommandResult:
        # Only one picker is open at a time; a new request supersedes older ones
        if self._pending:
            logger.debug("Dropping %d superseded tag choice(s)", len(self._pending))
            self._pending.clear()

        pending = request_tag_choice(snapshot, self.metadata.all_tags(), mode, additive)
        self._pending[pending.token] = pending
        logger.debug(
            "Tag choice %s requested (%s, additive=%s, %d candidates)",
            pending.token, mode, additive, len(pending.candidates),
        )
        self.picker.open(list(pending.candidates), partial(self._on_tag_chosen, pending.token))
        return Ok(CommandOutcome(tag_command_id(mode, additive), pending=pending))

    def _on_tag_chosen(self, token: str, tag: str) -> None:
        result = self.apply_tag_choice(token, tag)
        if result.is_err():
            self.notifier.notify(str(result.error))

    def apply_tag_choice(self, token: str, tag: str) -> CommandResult:
        """
        Apply a tag picked for a pending choice.

        The choice stays open, so a picker may call this repeatedly, until
        it is closed or superseded by the next tag request.
        """
        pending = self._pending.get(token)
        if pending is None:
            return Err(UnknownTagChoiceError(token))

        if pending.additive:
            contributed = additive_tag_ids(pending.snapshot, tag, pending.mode, self.metadata)
            shown = self.session.accumulate(contributed)
            plan = accumulated_plan(pending.snapshot, shown)
        else:
            plan = tag_plan(pending.snapshot, tag, pending.mode, self.metadata)
            self.session.replace(plan.node_ids)

        self._apply_plan(plan)
        return Ok(CommandOutcome(tag_command_id(pending.mode, pending.additive), plan=plan))

    def close_tag_choice(self, token: str) -> None:
        """Forget a pending choice once its picker is dismissed."""
        self._pending.pop(token, None)

    @property
    def pending_choices(self) -> List[PendingTagChoice]:
        return list(self._pending.values())

    @property
    def display_mode(self) -> DisplayMode:
        return self.session.mode
