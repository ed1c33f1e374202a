import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from graphwalk._adjacency import AdjacencyGraph
from graphwalk._algorithms import is_acyclic, topological_sort

from .config import ConfigError, get_config
from .events import SearchMode, record_traversal
from .graph_file import GraphFileError, load_graph_file
from .render import render_order, render_traversal

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

GraphArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to a graph TOML file (defaults to the graph configured in pyproject.toml)"),
]
StrictOption = Annotated[
    bool,
    typer.Option("--strict", help="Fail on any status assignment that does not move a node forward"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
) -> None:
    """Graphwalk CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _load_graph(graph_path: Path | None) -> tuple[AdjacencyGraph[str], bool]:
    """Load the graph named on the command line or in the configuration.

    Returns:
        The graph and the configured strict flag.

    """
    try:
        config = get_config()
        if graph_path is None:
            graph_path = config.graph
        if graph_path is None:
            err_console.print("[red]No graph given and no \\[tool.graphwalk].graph configured[/red]")
            raise typer.Exit(code=2)

        err_console.print(f"[cyan]Loading graph from:[/cyan] {escape(str(graph_path))}")
        graph = load_graph_file(graph_path)
    except (ConfigError, GraphFileError) as e:
        err_console.print(str(e), style="red", markup=False)
        raise typer.Exit(code=2) from e

    err_console.print(f"[cyan]Nodes:[/cyan] {len(graph)}  [cyan]Roots:[/cyan] {len(graph.root_keys())}")
    return graph, config.strict


def _traverse(graph_path: Path | None, mode: SearchMode, stop_after: int | None, *, strict: bool) -> None:
    graph, config_strict = _load_graph(graph_path)
    log = record_traversal(graph, mode, stop_after=stop_after, strict=strict or config_strict)
    render_traversal(log, out_console)


@app.command()
def bfs(
    graph: GraphArgument = None,
    *,
    stop_after: Annotated[
        int | None,
        typer.Option("--stop-after", min=1, help="Stop after this many status changes"),
    ] = None,
    strict: StrictOption = False,
) -> None:
    """Traverse a graph breadth first and list the callback events."""
    _traverse(graph, SearchMode.BREADTH, stop_after, strict=strict)


@app.command()
def dfs(
    graph: GraphArgument = None,
    *,
    stop_after: Annotated[
        int | None,
        typer.Option("--stop-after", min=1, help="Stop after this many status changes"),
    ] = None,
    strict: StrictOption = False,
) -> None:
    """Traverse a graph depth first and list the callback events."""
    _traverse(graph, SearchMode.DEPTH, stop_after, strict=strict)


@app.command()
def check(graph: GraphArgument = None) -> None:
    """Check whether the nodes reachable from the roots form an acyclic graph."""
    loaded, _ = _load_graph(graph)

    if is_acyclic(loaded):
        out_console.print("[green]✓ Graph is acyclic[/green]")
        return

    out_console.print("[red]✗ Graph contains a cycle[/red]")
    raise typer.Exit(code=1)


@app.command()
def toposort(
    graph: GraphArgument = None,
    *,
    reverse: Annotated[
        bool,
        typer.Option("--reverse", help="List every edge source before its target"),
    ] = False,
) -> None:
    """Print the reachable nodes in topological order (children first by default)."""
    loaded, _ = _load_graph(graph)

    order = topological_sort(loaded, reverse=reverse)
    if order is None:
        out_console.print("[red]✗ No topological order exists, the graph contains a cycle[/red]")
        raise typer.Exit(code=1)

    logger.debug(f"Sorted {len(order)} nodes")
    render_order(order, out_console)


def main() -> None:
    app()
