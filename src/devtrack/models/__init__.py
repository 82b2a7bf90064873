"""Domain entities."""

from devtrack.models.common import HasIdentity
from devtrack.models.developer import Developer
from devtrack.models.project import Project

__all__ = [
    "HasIdentity",
    "Developer",
    "Project",
]
