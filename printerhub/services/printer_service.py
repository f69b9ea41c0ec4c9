"""PrinterService: printer registration and removal."""

from __future__ import annotations

import uuid

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from printerhub.dao.printer_dao import PrinterDAO
from printerhub.models.printer import Printer
from printerhub.services import ValidationError

log = structlog.get_logger("printerhub.services.printer")


def parse_reference(field: str, value: str) -> uuid.UUID:
    """Parse a reference id string, raising :class:`ValidationError` if malformed."""
    try:
        return uuid.UUID(value)
    except (ValueError, AttributeError, TypeError) as exc:
        raise ValidationError(f"{field}: '{value}' is not a valid identifier") from exc


class PrinterService:
    """Stateless service for printer CRUD. No update, no reference checks."""

    def __init__(self, printer_dao: PrinterDAO) -> None:
        self._printer_dao = printer_dao

    async def count(self, session: AsyncSession) -> int:
        """Return total number of printers."""
        return await self._printer_dao.count(session)

    async def list(self, session: AsyncSession) -> list[Printer]:
        """Return all printers ordered by name."""
        return await self._printer_dao.list_ordered(session)

    async def create(
        self,
        session: AsyncSession,
        *,
        name: str,
        model: str,
        brand: str,
        toner: str,
        drum: str,
    ) -> Printer:
        """Register a printer.

        *brand*, *toner* and *drum* arrive as strings and are parsed into
        UUIDs; nothing checks that the referenced rows exist.
        """
        refs = {
            "brand": parse_reference("brand", brand),
            "toner": parse_reference("toner", toner),
            "drum": parse_reference("drum", drum),
        }
        printer = await self._printer_dao.create(session, name=name, model=model, **refs)
        log.info("printer.created", printer_id=str(printer.id), brand=str(refs["brand"]))
        return printer

    async def delete(self, session: AsyncSession, printer_id: uuid.UUID) -> None:
        """Delete a printer unconditionally. A missing id is not an error."""
        removed = await self._printer_dao.delete_by_id(session, printer_id)
        if removed:
            log.info("printer.deleted", printer_id=str(printer_id))
        else:
            log.info("printer.delete_missing", printer_id=str(printer_id))
