"""BrandService: brand CRUD with name validation and uniqueness."""

from __future__ import annotations

import uuid

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from printerhub.dao.brand_dao import BrandDAO, BrandNameTakenError
from printerhub.models.brand import Brand
from printerhub.services import ConflictError, NotFoundError, ValidationError

log = structlog.get_logger("printerhub.services.brand")

NAME_MIN_LENGTH = 4
NAME_MAX_LENGTH = 20


def validate_brand_name(name: str) -> None:
    """Raise :class:`ValidationError` unless *name* is 4-20 characters.

    Checks run empty, then too short, then too long, so an empty name is
    always reported as empty.
    """
    if not name:
        raise ValidationError("brand name cannot be empty")
    if len(name) < NAME_MIN_LENGTH:
        raise ValidationError(
            f"brand name is too short (minimum {NAME_MIN_LENGTH} characters)"
        )
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(
            f"brand name is too long (maximum {NAME_MAX_LENGTH} characters)"
        )


class BrandService:
    """Stateless service for brand CRUD."""

    def __init__(self, brand_dao: BrandDAO) -> None:
        self._brand_dao = brand_dao

    async def count(self, session: AsyncSession) -> int:
        """Return total number of brands."""
        total = await self._brand_dao.count(session)
        log.debug("brand.counted", total=total)
        return total

    async def get(self, session: AsyncSession, brand_id: uuid.UUID) -> Brand:
        """Return a brand by id.

        Raises :class:`NotFoundError` if the brand does not exist.
        """
        return await self._ensure_brand(session, brand_id)

    async def list(self, session: AsyncSession) -> list[Brand]:
        """Return all brands ordered by name."""
        return await self._brand_dao.list_ordered(session)

    async def create(self, session: AsyncSession, *, name: str) -> Brand:
        """Create a brand.

        The duplicate check runs before validation, so an existing name is
        reported as a conflict even when it would also fail the length rules.

        Raises :class:`ConflictError` on a duplicate name and
        :class:`ValidationError` on an invalid one.
        """
        existing = await self._brand_dao.get_by_name(session, name)
        if existing is not None:
            log.warning("brand.duplicate_name", name=name)
            raise ConflictError(f"brand '{name}' already exists")

        self._validate(name)

        try:
            brand = await self._brand_dao.insert_unique(session, name=name)
        except BrandNameTakenError as exc:
            log.warning("brand.duplicate_name", name=name, concurrent=True)
            raise ConflictError(str(exc)) from exc

        log.info("brand.created", brand_id=str(brand.id), name=name)
        return brand

    async def update(self, session: AsyncSession, brand_id: uuid.UUID, *, name: str) -> Brand:
        """Rename a brand.

        A name held by another brand is rejected with :class:`ValidationError`
        (HTTP 400), unlike create which reports :class:`ConflictError`.
        Renaming a brand to its own current name is allowed.
        """
        await self._ensure_brand(session, brand_id)
        self._validate(name)

        if await self._brand_dao.name_taken_by_other(session, name, brand_id):
            log.warning("brand.duplicate_name", name=name, brand_id=str(brand_id))
            raise ValidationError(f"brand name '{name}' already exists")

        try:
            brand = await self._brand_dao.rename(session, brand_id, name)
        except BrandNameTakenError as exc:
            log.warning("brand.duplicate_name", name=name, brand_id=str(brand_id), concurrent=True)
            raise ValidationError(f"brand name '{name}' already exists") from exc
        if brand is None:
            raise NotFoundError("brand not found")

        log.info("brand.updated", brand_id=str(brand_id), name=name)
        return brand

    async def delete(self, session: AsyncSession, brand_id: uuid.UUID) -> None:
        """Delete a brand. Raises :class:`NotFoundError` if absent."""
        await self._ensure_brand(session, brand_id)
        await self._brand_dao.delete(session, brand_id)
        log.info("brand.deleted", brand_id=str(brand_id))

    # ── private helpers ───────────────────────────────────────────────

    @staticmethod
    def _validate(name: str) -> None:
        try:
            validate_brand_name(name)
        except ValidationError as exc:
            log.warning("brand.invalid_name", name=name, reason=str(exc))
            raise

    async def _ensure_brand(self, session: AsyncSession, brand_id: uuid.UUID) -> Brand:
        brand = await self._brand_dao.get_by_id(session, brand_id)
        if brand is None:
            log.warning("brand.not_found", brand_id=str(brand_id))
            raise NotFoundError("brand not found")
        return brand
