"""SQLAlchemy ORM models: one file per table."""

from printerhub.models.brand import Brand
from printerhub.models.printer import Printer

__all__ = [
    "Brand",
    "Printer",
]
