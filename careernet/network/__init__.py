"""Contact graph: connection paths, alumni and influencer selection."""

from .filters import filter_alumni, filter_influencers
from .pathfinder import find_connection_path, find_connection_paths
from .types import Contact, ConnectionEdge, ConnectionPath

__all__ = [
    "Contact",
    "ConnectionEdge",
    "ConnectionPath",
    "filter_alumni",
    "filter_influencers",
    "find_connection_path",
    "find_connection_paths",
]
