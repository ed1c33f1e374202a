"""Loading adjacency graphs from TOML files.

A graph file lists the children of every node and, optionally, the roots::

    roots = ["build"]

    [nodes]
    build = ["compile", "link"]
    compile = ["parse"]
"""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from graphwalk._adjacency import AdjacencyGraph

logger = logging.getLogger(__name__)


class GraphFileError(Exception):
    """Error reading or validating a graph file."""


class GraphFile(BaseModel):
    """Schema of a graph file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    nodes: dict[str, list[str]]
    roots: list[str] | None = None

    def to_graph(self) -> AdjacencyGraph[str]:
        """Build the adjacency graph described by the file.

        Raises:
            GraphFileError: If a root is not a node of the graph.

        """
        try:
            return AdjacencyGraph.from_mapping(self.nodes, roots=self.roots)
        except ValueError as e:
            raise GraphFileError(str(e)) from e


def load_graph_file(path: Path) -> AdjacencyGraph[str]:
    """Load a graph from a TOML file.

    Args:
        path: Path to the graph file.

    Returns:
        The adjacency graph described by the file.

    Raises:
        GraphFileError: If the file is missing, is not valid TOML or does not match the schema.

    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        msg = f"Graph file not found: {path}"
        raise GraphFileError(msg) from e
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise GraphFileError(msg) from e

    try:
        graph_file = GraphFile.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid graph file {path}:\n{e}"
        raise GraphFileError(msg) from e

    graph = graph_file.to_graph()
    logger.debug(f"Loaded graph with {len(graph)} nodes from {path}")
    return graph
