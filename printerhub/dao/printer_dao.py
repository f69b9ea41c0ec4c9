"""PrinterDAO: printers table operations."""

import uuid

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from printerhub.dao.base import BaseDAO
from printerhub.models.printer import Printer


class PrinterDAO(BaseDAO[Printer]):
    model = Printer

    async def list_ordered(self, session: AsyncSession) -> list[Printer]:
        """Return all printers ordered by name, then model."""
        return await self.list_all(session, Printer.name, Printer.model)

    async def delete_by_id(self, session: AsyncSession, pk: uuid.UUID) -> int:
        """Issue a single DELETE without loading the row. Returns rows removed."""
        self._require_pk(pk)
        stmt = delete(Printer).where(Printer.id == pk)
        result = await session.execute(stmt)
        return result.rowcount
