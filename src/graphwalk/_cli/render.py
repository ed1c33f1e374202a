"""Rich rendering utilities for traversal commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from graphwalk._status import EdgeType, NodeStatus

from .events import EdgeEvent, StatusEvent

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from .events import TraversalLog


def render_traversal(log: TraversalLog, console: Console) -> None:
    """Render the events of a traversal as a Rich table.

    Args:
        log: Recorded traversal.
        console: Rich Console to output to.

    """
    if not log.events:
        console.print("[dim]Nothing to traverse[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan", title=f"{log.mode.capitalize()}-first search")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Event")
    table.add_column("Node / Edge")
    table.add_column("Status / Type")

    for event in log.events:
        match event:
            case StatusEvent(index=index, node=node, status=status):
                style = _get_status_style(status)
                table.add_row(str(index), "status", escape(node), f"[{style}]{status.upper()}[/{style}]")
            case EdgeEvent(index=index, source=source, target=target, edge_type=edge_type):
                style = _get_edge_style(edge_type)
                table.add_row(
                    str(index),
                    "edge",
                    f"{escape(source)} -> {escape(target)}",
                    f"[{style}]{edge_type.upper()}[/{style}]",
                )

    console.print(table)
    summary = f"{len(log.status_events)} status changes, {len(log.edge_events)} edges"
    if not log.completed:
        summary += ", stopped early"
    console.print(f"\n[dim]{summary}[/dim]")


def render_order(nodes: Sequence[object], console: Console) -> None:
    """Render an ordered node list, one node per line.

    Args:
        nodes: Nodes in order.
        console: Rich Console to output to.

    """
    if not nodes:
        console.print("[dim]No nodes reachable[/dim]")
        return
    for position, node in enumerate(nodes, start=1):
        console.print(f"[dim]{position:>3}[/dim]  {escape(str(node))}")


def _get_status_style(status: NodeStatus) -> str:
    match status:
        case NodeStatus.NEW:
            return "white"
        case NodeStatus.DISCOVERED:
            return "yellow"
        case NodeStatus.PROCESSED:
            return "green"


def _get_edge_style(edge_type: EdgeType) -> str:
    match edge_type:
        case EdgeType.TREE:
            return "blue"
        case EdgeType.BACK:
            return "red"
        case EdgeType.CROSS_OR_FORWARD:
            return "magenta"
