"""SQLAlchemy ORM models - import all to register with Base.metadata."""

from devtrack.db.models.proyek import ProyekRow
from devtrack.db.models.developer import DeveloperRow

__all__ = [
    "ProyekRow",
    "DeveloperRow",
]
