"""Observability for Registry infrastructure."""

from registry.infrastructure.observability.repository_probe import (
    DefaultRepositoryProbe,
    RepositoryProbe,
)

__all__ = [
    "DefaultRepositoryProbe",
    "RepositoryProbe",
]
