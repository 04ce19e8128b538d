"""Bounded breadth-first search for 2nd and 3rd degree connections."""

import logging
from collections import Counter
from typing import Iterable, Mapping

from .builder import RelationshipGraph
from .config import DEFAULT_NETWORK_CONFIG, NetworkConfig
from .types import UNKNOWN_NAME, ConnectionEdge, ConnectionPath, Contact

log = logging.getLogger(__name__)

DIRECT_DESCRIPTION = "Direct connection"

People = Mapping[str, Contact] | Iterable[Contact] | None


def build_directory(
    user_contacts: list[Contact], people: People
) -> dict[str, Contact]:
    directory: dict[str, Contact] = {}
    if isinstance(people, Mapping):
        directory.update(people)
    elif people is not None:
        for person in people:
            directory[person.id] = person
    # Direct contacts win over any other record with the same id
    for contact in user_contacts:
        directory[contact.id] = contact
    return directory


def _display_name(node_id: str, directory: dict[str, Contact]) -> str:
    person = directory.get(node_id)
    if person is None or not person.name or person.name == UNKNOWN_NAME:
        return node_id
    return person.name


def describe_path(path: tuple[str, ...], directory: dict[str, Contact]) -> str:
    """Human-readable summary naming the anchoring direct contact."""
    degree = len(path)
    if degree == 1:
        return DIRECT_DESCRIPTION
    if degree == 2:
        return f"2nd degree via {_display_name(path[0], directory)}"
    if degree == 3:
        return (
            f"3rd degree via {_display_name(path[0], directory)}"
            f" → {_display_name(path[1], directory)}"
        )
    return f"{degree}-degree connection"


def bounded_bfs(
    user_contacts: list[Contact],
    graph: RelationshipGraph,
    depth: int,
) -> tuple[dict[str, int], dict[str, str | None]]:
    """Multi-source BFS from every direct contact, capped at ``depth`` hops."""
    hop_by_node: dict[str, int] = {}
    parent_by_node: dict[str, str | None] = {}

    frontier: list[str] = []
    for contact in user_contacts:
        if contact.id in hop_by_node:
            continue
        hop_by_node[contact.id] = 1
        parent_by_node[contact.id] = None
        frontier.append(contact.id)

    current_hop = 1
    while frontier and current_hop < depth:
        next_frontier: list[str] = []
        for node_id in frontier:
            for neighbor_id in graph.neighbors(node_id):
                if neighbor_id in hop_by_node:
                    continue
                hop_by_node[neighbor_id] = current_hop + 1
                parent_by_node[neighbor_id] = node_id
                next_frontier.append(neighbor_id)
        frontier = next_frontier
        current_hop += 1

    return hop_by_node, parent_by_node


def _trace(node_id: str, parent_by_node: dict[str, str | None]) -> tuple[str, ...]:
    path = [node_id]
    parent = parent_by_node.get(node_id)
    while parent is not None:
        path.append(parent)
        parent = parent_by_node.get(parent)
    return tuple(reversed(path))


def _to_connection_path(
    target_id: str,
    parent_by_node: dict[str, str | None],
    directory: dict[str, Contact],
) -> ConnectionPath:
    path = _trace(target_id, parent_by_node)
    target = directory.get(target_id) or Contact(id=target_id, name=UNKNOWN_NAME)
    return ConnectionPath(
        target=target,
        path=path,
        degree=len(path),
        path_description=describe_path(path, directory),
    )


def find_connection_path(
    user_contacts: Iterable[Contact],
    target_contact_id: str,
    connections: Iterable[ConnectionEdge],
    *,
    people: People = None,
    max_degree: int | None = None,
    config: NetworkConfig = DEFAULT_NETWORK_CONFIG,
) -> ConnectionPath | None:
    """Find the shortest path from the user's contacts to a target person.

    Args:
        user_contacts: People the user has recorded directly (1st degree).
        target_contact_id: Id of the person to reach.
        connections: Undirected relationship edges, possibly between people
            who are not direct contacts.
        people: Optional records used to name 2nd/3rd degree people.
        max_degree: Search depth, clamped to ``config.max_degree``.

    Returns:
        The shortest ConnectionPath, or None when the target is not
        reachable within the allowed depth.
    """
    contacts = list(user_contacts)

    for contact in contacts:
        if contact.id == target_contact_id:
            return ConnectionPath(
                target=contact,
                path=(contact.id,),
                degree=1,
                path_description=DIRECT_DESCRIPTION,
            )

    depth = config.clamp_degree(
        config.max_degree if max_degree is None else max_degree
    )
    graph = RelationshipGraph.from_edges(connections)
    if target_contact_id not in graph:
        log.debug(f"Target {target_contact_id} has no recorded relationships")
        return None

    _, parent_by_node = bounded_bfs(contacts, graph, depth)
    if target_contact_id not in parent_by_node:
        log.debug(f"No path to {target_contact_id} within {depth} degrees")
        return None

    directory = build_directory(contacts, people)
    return _to_connection_path(target_contact_id, parent_by_node, directory)


def find_connection_paths(
    user_contacts: Iterable[Contact],
    target_contact_ids: Iterable[str],
    connections: Iterable[ConnectionEdge],
    *,
    people: People = None,
    max_degree: int | None = None,
    config: NetworkConfig = DEFAULT_NETWORK_CONFIG,
) -> dict[str, ConnectionPath | None]:
    """Resolve several targets against a single graph build."""
    contacts = list(user_contacts)
    depth = config.clamp_degree(
        config.max_degree if max_degree is None else max_degree
    )
    graph = RelationshipGraph.from_edges(connections)
    _, parent_by_node = bounded_bfs(contacts, graph, depth)
    directory = build_directory(contacts, people)

    results: dict[str, ConnectionPath | None] = {}
    for target_id in target_contact_ids:
        if target_id in parent_by_node:
            results[target_id] = _to_connection_path(
                target_id, parent_by_node, directory
            )
        else:
            results[target_id] = None
    return results


def degree_counts(
    user_contacts: Iterable[Contact],
    connections: Iterable[ConnectionEdge],
    *,
    config: NetworkConfig = DEFAULT_NETWORK_CONFIG,
) -> dict[int, int]:
    """Count distinct people reachable at each degree."""
    graph = RelationshipGraph.from_edges(connections)
    hop_by_node, _ = bounded_bfs(list(user_contacts), graph, config.max_degree)
    counts = Counter(hop_by_node.values())
    return {
        degree: counts.get(degree, 0) for degree in range(1, config.max_degree + 1)
    }
