"""Configuration for contact graph queries."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NetworkConfig:
    """Constants controlling path search and contact filters."""

    max_degree: int = 3
    min_influence_score: float = 50.0

    def clamp_degree(self, degree: int) -> int:
        """Clamp search depth to supported range."""
        if degree < 1:
            return 1
        if degree > self.max_degree:
            return self.max_degree
        return degree


DEFAULT_NETWORK_CONFIG = NetworkConfig()
