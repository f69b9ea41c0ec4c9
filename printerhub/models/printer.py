"""printers table."""

import uuid

from sqlalchemy import Index, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from printerhub.core.database import Base, TimestampMixin


class Printer(TimestampMixin, Base):
    __tablename__ = "printers"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, server_default=func.gen_random_uuid()
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    model: Mapped[str] = mapped_column(Text, nullable=False)
    # Plain references: brands are not foreign-keyed, consumables live elsewhere
    brand: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    toner: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    drum: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)

    __table_args__ = (Index("idx_printers_brand", "brand"),)
