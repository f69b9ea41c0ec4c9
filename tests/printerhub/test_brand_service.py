"""Tests for BrandService."""

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from printerhub.dao.brand_dao import BrandDAO, BrandNameTakenError
from printerhub.models.brand import Brand
from printerhub.services import ConflictError, NotFoundError, ValidationError
from printerhub.services.brand_service import BrandService, validate_brand_name

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_brand(**overrides) -> Brand:
    defaults = {
        "id": uuid.uuid4(),
        "name": "Acme",
        "created_at": datetime.now(timezone.utc),
        "updated_at": datetime.now(timezone.utc),
    }
    defaults.update(overrides)
    return Brand(**defaults)


def _make_service() -> tuple[BrandService, BrandDAO]:
    dao = BrandDAO()
    return BrandService(dao), dao


# ---------------------------------------------------------------------------
# validate_brand_name
# ---------------------------------------------------------------------------


class TestValidateBrandName:
    @pytest.mark.parametrize("name", ["Acme", "a" * 20, "HP 4u"])
    def test_accepts_valid(self, name):
        validate_brand_name(name)

    def test_empty_reported_as_empty(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            validate_brand_name("")

    @pytest.mark.parametrize("name", ["A", "Ab", "Abc"])
    def test_too_short(self, name):
        with pytest.raises(ValidationError, match="too short"):
            validate_brand_name(name)

    def test_too_long(self):
        with pytest.raises(ValidationError, match="too long"):
            validate_brand_name("a" * 21)

    def test_length_counts_characters(self):
        # four characters, eight bytes in UTF-8
        validate_brand_name("Ñañó")


# ---------------------------------------------------------------------------
# count / get / list
# ---------------------------------------------------------------------------


class TestReads:
    async def test_count(self):
        service, dao = _make_service()
        dao.count = AsyncMock(return_value=7)

        assert await service.count(AsyncMock()) == 7

    async def test_count_storage_failure_propagates(self):
        service, dao = _make_service()
        dao.count = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("down")))

        with pytest.raises(OperationalError):
            await service.count(AsyncMock())

    async def test_get_success(self):
        brand = _make_brand()
        service, dao = _make_service()
        dao.get_by_id = AsyncMock(return_value=brand)

        assert await service.get(AsyncMock(), brand.id) is brand

    async def test_get_not_found(self):
        service, dao = _make_service()
        dao.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(NotFoundError, match="brand not found"):
            await service.get(AsyncMock(), uuid.uuid4())

    async def test_list(self):
        brands = [_make_brand(name="Acme"), _make_brand(name="Brother")]
        service, dao = _make_service()
        dao.list_ordered = AsyncMock(return_value=brands)

        assert await service.list(AsyncMock()) == brands

    async def test_list_storage_failure_propagates(self):
        service, dao = _make_service()
        dao.list_ordered = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("down"))
        )

        with pytest.raises(OperationalError):
            await service.list(AsyncMock())


# ---------------------------------------------------------------------------
# create
# ---------------------------------------------------------------------------


class TestCreate:
    async def test_create_success(self):
        brand = _make_brand(name="Canon")
        service, dao = _make_service()
        dao.get_by_name = AsyncMock(return_value=None)
        dao.insert_unique = AsyncMock(return_value=brand)

        session = AsyncMock()
        result = await service.create(session, name="Canon")

        assert result is brand
        dao.insert_unique.assert_awaited_once_with(session, name="Canon")

    async def test_duplicate_raises_conflict(self):
        service, dao = _make_service()
        dao.get_by_name = AsyncMock(return_value=_make_brand(name="Acme"))
        dao.insert_unique = AsyncMock()

        with pytest.raises(ConflictError, match="already exists"):
            await service.create(AsyncMock(), name="Acme")
        dao.insert_unique.assert_not_awaited()

    async def test_duplicate_checked_before_length(self):
        """An existing short name still reports a conflict, not a bad name."""
        service, dao = _make_service()
        dao.get_by_name = AsyncMock(return_value=_make_brand(name="HP"))

        with pytest.raises(ConflictError):
            await service.create(AsyncMock(), name="HP")

    @pytest.mark.parametrize(
        "name, message",
        [("", "cannot be empty"), ("Ab", "too short"), ("x" * 21, "too long")],
    )
    async def test_invalid_name(self, name, message):
        service, dao = _make_service()
        dao.get_by_name = AsyncMock(return_value=None)
        dao.insert_unique = AsyncMock()

        with pytest.raises(ValidationError, match=message):
            await service.create(AsyncMock(), name=name)
        dao.insert_unique.assert_not_awaited()

    async def test_concurrent_duplicate_maps_to_conflict(self):
        service, dao = _make_service()
        dao.get_by_name = AsyncMock(return_value=None)
        dao.insert_unique = AsyncMock(side_effect=BrandNameTakenError("brand 'Acme' already exists"))

        with pytest.raises(ConflictError, match="already exists"):
            await service.create(AsyncMock(), name="Acme")


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------


class TestUpdate:
    async def test_update_success(self):
        brand = _make_brand(name="Acme")
        renamed = _make_brand(id=brand.id, name="Acme2")
        service, dao = _make_service()
        dao.get_by_id = AsyncMock(return_value=brand)
        dao.name_taken_by_other = AsyncMock(return_value=False)
        dao.rename = AsyncMock(return_value=renamed)

        session = AsyncMock()
        result = await service.update(session, brand.id, name="Acme2")

        assert result.name == "Acme2"
        dao.name_taken_by_other.assert_awaited_once_with(session, "Acme2", brand.id)
        dao.rename.assert_awaited_once_with(session, brand.id, "Acme2")

    async def test_update_to_own_name(self):
        brand = _make_brand(name="Acme")
        service, dao = _make_service()
        dao.get_by_id = AsyncMock(return_value=brand)
        dao.name_taken_by_other = AsyncMock(return_value=False)
        dao.rename = AsyncMock(return_value=brand)

        assert await service.update(AsyncMock(), brand.id, name="Acme") is brand

    async def test_not_found_before_validation(self):
        service, dao = _make_service()
        dao.get_by_id = AsyncMock(return_value=None)
        dao.name_taken_by_other = AsyncMock()

        with pytest.raises(NotFoundError):
            await service.update(AsyncMock(), uuid.uuid4(), name="")
        dao.name_taken_by_other.assert_not_awaited()

    @pytest.mark.parametrize("name", ["", "Abc", "y" * 21])
    async def test_invalid_name(self, name):
        service, dao = _make_service()
        dao.get_by_id = AsyncMock(return_value=_make_brand())
        dao.name_taken_by_other = AsyncMock()

        with pytest.raises(ValidationError):
            await service.update(AsyncMock(), uuid.uuid4(), name=name)
        dao.name_taken_by_other.assert_not_awaited()

    async def test_name_taken_is_validation_error(self):
        service, dao = _make_service()
        dao.get_by_id = AsyncMock(return_value=_make_brand())
        dao.name_taken_by_other = AsyncMock(return_value=True)
        dao.rename = AsyncMock()

        with pytest.raises(ValidationError, match="already exists"):
            await service.update(AsyncMock(), uuid.uuid4(), name="Brother")
        dao.rename.assert_not_awaited()

    async def test_concurrent_rename_collision(self):
        service, dao = _make_service()
        dao.get_by_id = AsyncMock(return_value=_make_brand())
        dao.name_taken_by_other = AsyncMock(return_value=False)
        dao.rename = AsyncMock(side_effect=BrandNameTakenError("taken"))

        with pytest.raises(ValidationError, match="already exists"):
            await service.update(AsyncMock(), uuid.uuid4(), name="Brother")

    async def test_row_vanished_during_rename(self):
        service, dao = _make_service()
        dao.get_by_id = AsyncMock(return_value=_make_brand())
        dao.name_taken_by_other = AsyncMock(return_value=False)
        dao.rename = AsyncMock(return_value=None)

        with pytest.raises(NotFoundError):
            await service.update(AsyncMock(), uuid.uuid4(), name="Brother")


# ---------------------------------------------------------------------------
# delete
# ---------------------------------------------------------------------------


class TestDelete:
    async def test_delete_success(self):
        brand = _make_brand()
        service, dao = _make_service()
        dao.get_by_id = AsyncMock(return_value=brand)
        dao.delete = AsyncMock(return_value=True)

        session = AsyncMock()
        await service.delete(session, brand.id)

        dao.delete.assert_awaited_once_with(session, brand.id)

    async def test_delete_not_found(self):
        service, dao = _make_service()
        dao.get_by_id = AsyncMock(return_value=None)
        dao.delete = AsyncMock()

        with pytest.raises(NotFoundError):
            await service.delete(AsyncMock(), uuid.uuid4())
        dao.delete.assert_not_awaited()
