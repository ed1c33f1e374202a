"""Traversing a caller-owned structure without building an adjacency graph."""

from dataclasses import dataclass, field

from graphwalk import Edge, EdgeType, depth_search, topological_sort


@dataclass(eq=False)
class Module:
    name: str
    imports: list["Module"] = field(default_factory=list)

    def children(self) -> list["Module"]:
        return self.imports

    def __hash__(self) -> int:
        return hash(self.name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Module) and other.name == self.name

    def __str__(self) -> str:
        return self.name


@dataclass
class Package:
    entry_points: list[Module]

    def roots(self) -> list[Module]:
        return self.entry_points


utils = Module("utils")
models = Module("models", [utils])
views = Module("views", [models, utils])
cli = Module("cli", [views, models])

package = Package([cli])


def report_back_edges(edge: Edge) -> bool:
    if edge.type() is EdgeType.BACK:
        print(f"import cycle: {edge.source} -> {edge.target}")
    return True


depth_search(package, on_edge=report_back_edges)
print("load order:", [str(m) for m in topological_sort(package) or []])

# Introduce a cycle
utils.imports.append(cli)
depth_search(package, on_edge=report_back_edges)
print("load order:", topological_sort(package))
