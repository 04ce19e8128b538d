"""Web-based contact network visualization using pyvis."""

from pathlib import Path
from typing import Iterable

from pyvis.network import Network

from .builder import RelationshipGraph
from .config import DEFAULT_NETWORK_CONFIG, NetworkConfig
from .pathfinder import People, bounded_bfs, build_directory
from .types import ConnectionEdge, ConnectionPath, Contact

# Color scheme by degree of connection
DEGREE_COLORS = {
    1: "#FF6B6B",  # Red
    2: "#FCE38A",  # Yellow
    3: "#95E1D3",  # Light green
}

DEGREE_SIZES = {
    1: 25,
    2: 18,
    3: 12,
}

_OUT_OF_RANGE_COLOR = "#888888"
_HIGHLIGHT_COLOR = "#45B7D1"


def create_web_visualization(
    user_contacts: Iterable[Contact],
    connections: Iterable[ConnectionEdge],
    output_path: Path = Path("output/network.html"),
    *,
    people: People = None,
    highlight: ConnectionPath | None = None,
    height: str = "900px",
    width: str = "100%",
    config: NetworkConfig = DEFAULT_NETWORK_CONFIG,
) -> Path:
    """Create an interactive web visualization of the contact network.

    Args:
        user_contacts: Direct contacts, drawn as 1st degree nodes
        connections: Relationship edges
        output_path: Where to save the HTML file
        people: Optional records naming 2nd/3rd degree people
        highlight: A resolved path to draw in a highlight color

    Returns:
        Path to the generated HTML file
    """
    contacts = list(user_contacts)
    graph = RelationshipGraph.from_edges(connections)
    hop_by_node, _ = bounded_bfs(contacts, graph, config.max_degree)
    directory = build_directory(contacts, people)

    highlighted_nodes = set(highlight.path) if highlight else set()
    highlighted_edges = set()
    if highlight:
        for a, b in zip(highlight.path, highlight.path[1:]):
            highlighted_edges.add(frozenset((a, b)))

    net = Network(
        height=height,
        width=width,
        bgcolor="#1a1a2e",
        font_color="white",
        directed=False,
        select_menu=True,
        filter_menu=True,
    )

    net.set_options("""
    {
        "physics": {
            "forceAtlas2Based": {
                "gravitationalConstant": -80,
                "centralGravity": 0.01,
                "springLength": 150,
                "springConstant": 0.05
            },
            "solver": "forceAtlas2Based",
            "stabilization": {
                "iterations": 100
            }
        },
        "interaction": {
            "hover": true,
            "navigationButtons": true,
            "keyboard": true
        }
    }
    """)

    node_ids = set(graph.graph.nodes) | {contact.id for contact in contacts}
    for node_id in sorted(node_ids):
        person = directory.get(node_id)
        name = person.name if person else node_id
        degree = hop_by_node.get(node_id)

        tooltip = f"<b>{name}</b>"
        if degree is not None:
            tooltip += f"<br>Degree: {degree}"
        if person and person.company:
            tooltip += f"<br>Company: {person.company}"
        if person and person.role:
            tooltip += f"<br>Role: {person.role}"

        if node_id in highlighted_nodes:
            color = _HIGHLIGHT_COLOR
        else:
            color = DEGREE_COLORS.get(degree, _OUT_OF_RANGE_COLOR)

        net.add_node(
            node_id,
            label=name[:30] + "..." if len(name) > 30 else name,
            title=tooltip,
            color=color,
            size=DEGREE_SIZES.get(degree, 10),
            group=f"degree {degree}" if degree else "out of range",
        )

    for source, target, data in graph.graph.edges(data=True):
        edge_type = data.get("type", "unspecified")
        on_path = frozenset((source, target)) in highlighted_edges
        net.add_edge(
            source,
            target,
            title=edge_type,
            color=_HIGHLIGHT_COLOR if on_path else _OUT_OF_RANGE_COLOR,
            width=3 if on_path else 1,
        )

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    net.save_graph(str(output_path))

    return output_path
