"""NetworkX relationship graph for a user's contacts."""

import json
import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import networkx as nx

from .types import ConnectionEdge

log = logging.getLogger(__name__)

_UNTYPED = "unspecified"


@dataclass
class GraphStats:
    """Statistics about the relationship graph."""

    nodes: int
    edges: int
    relationship_types: dict[str, int]

    def __str__(self) -> str:
        types_str = ", ".join(
            f"{k}: {v}"
            for k, v in sorted(self.relationship_types.items(), key=lambda x: -x[1])
        )
        return (
            f"Graph Stats:\n"
            f"  People: {self.nodes}\n"
            f"  Relationships: {self.edges} ({types_str})"
        )


class RelationshipGraph:
    """Undirected adjacency view over relationship edges."""

    def __init__(self):
        self.graph = nx.Graph()

    @classmethod
    def from_edges(cls, edges: Iterable[ConnectionEdge]) -> "RelationshipGraph":
        """Build a graph from an edge list."""
        relationship_graph = cls()
        for edge in edges:
            relationship_graph.add_edge(edge)
        graph = relationship_graph.graph
        log.debug(
            f"Built relationship graph: {graph.number_of_nodes()} people, "
            f"{graph.number_of_edges()} relationships"
        )
        return relationship_graph

    def add_edge(self, edge: ConnectionEdge) -> None:
        """Add an undirected relationship between two people."""
        a, b = edge.contact_id_a, edge.contact_id_b
        # Self-loops never shorten a path
        if a == b:
            self.graph.add_node(a)
            return
        self.graph.add_edge(a, b, type=edge.relationship_type or _UNTYPED)

    def __contains__(self, node_id: str) -> bool:
        return node_id in self.graph

    def neighbors(self, node_id: str) -> list[str]:
        """Sorted neighbor ids; empty for unknown people."""
        if node_id not in self.graph:
            return []
        return sorted(self.graph.neighbors(node_id))

    def relationship_type(self, a: str, b: str) -> str | None:
        """Relationship label between two people, if they are linked."""
        if not self.graph.has_edge(a, b):
            return None
        return self.graph.edges[a, b].get("type")

    def get_stats(self) -> GraphStats:
        """Get statistics about the graph."""
        relationship_types = Counter(
            data.get("type", _UNTYPED) for _, _, data in self.graph.edges(data=True)
        )
        return GraphStats(
            nodes=self.graph.number_of_nodes(),
            edges=self.graph.number_of_edges(),
            relationship_types=dict(relationship_types),
        )

    def save(self, path: Path) -> None:
        """Save graph to JSON file."""
        data = nx.node_link_data(self.graph, edges="links")
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, path: Path) -> "RelationshipGraph":
        """Load graph from JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        relationship_graph = cls()
        relationship_graph.graph = nx.node_link_graph(data, edges="links")
        return relationship_graph
