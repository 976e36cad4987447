"""Domain-Oriented Observability for the Registry application layer."""

from registry.application.observability.assignment_probe import (
    AssignmentProbe,
    DefaultAssignmentProbe,
)
from registry.application.observability.service_probe import (
    DefaultRegistryServiceProbe,
    RegistryServiceProbe,
)

__all__ = [
    "AssignmentProbe",
    "DefaultAssignmentProbe",
    "DefaultRegistryServiceProbe",
    "RegistryServiceProbe",
]
