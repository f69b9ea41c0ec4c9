"""BrandDAO: brands table operations."""

import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from printerhub.dao.base import BaseDAO
from printerhub.models.brand import Brand

_NAME_CONSTRAINT = "uq_brands_name"


class BrandNameTakenError(ValueError):
    """Raised when a write collides with the unique constraint on brands.name."""


def _is_name_violation(exc: IntegrityError) -> bool:
    return _NAME_CONSTRAINT in str(exc.orig)


class BrandDAO(BaseDAO[Brand]):
    model = Brand

    # ── read ──────────────────────────────────────────────────────────────

    async def get_by_name(self, session: AsyncSession, name: str) -> Brand | None:
        """Exact, case-sensitive name lookup."""
        return await self.get_by_field(session, name=name)

    async def name_taken_by_other(
        self, session: AsyncSession, name: str, exclude_id: uuid.UUID
    ) -> bool:
        """True if a brand other than *exclude_id* already uses *name*."""
        self._require_pk(exclude_id)
        stmt = select(Brand.id).where(Brand.name == name, Brand.id != exclude_id).limit(1)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_ordered(self, session: AsyncSession) -> list[Brand]:
        """Return all brands ordered by name."""
        return await self.list_all(session, Brand.name)

    # ── write ─────────────────────────────────────────────────────────────

    async def insert_unique(self, session: AsyncSession, *, name: str) -> Brand:
        """Insert a brand inside a SAVEPOINT.

        A concurrent insert of the same name trips the unique constraint;
        the savepoint is rolled back and :class:`BrandNameTakenError` raised,
        leaving the outer transaction usable.
        """
        try:
            async with session.begin_nested():
                return await self.create(session, name=name)
        except IntegrityError as exc:
            if _is_name_violation(exc):
                raise BrandNameTakenError(f"brand '{name}' already exists") from exc
            raise

    async def rename(self, session: AsyncSession, pk: uuid.UUID, name: str) -> Brand | None:
        """Set a new name inside a SAVEPOINT. Returns None if *pk* is gone."""
        try:
            async with session.begin_nested():
                return await self.update(session, pk, name=name)
        except IntegrityError as exc:
            if _is_name_violation(exc):
                raise BrandNameTakenError(f"brand '{name}' already exists") from exc
            raise
