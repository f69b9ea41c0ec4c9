"""Brands router."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from printerhub.api.deps import get_brand_service, get_session
from printerhub.api.schemas.brand import (
    BrandResponse,
    CreateBrandRequest,
    DeleteBrandRequest,
    UpdateBrandRequest,
)
from printerhub.services.brand_service import BrandService

router = APIRouter()


@router.get("/count", response_model=int)
async def count_brands(
    session: AsyncSession = Depends(get_session),
    svc: BrandService = Depends(get_brand_service),
) -> int:
    return await svc.count(session)


@router.get("/", response_model=list[BrandResponse])
async def list_brands(
    session: AsyncSession = Depends(get_session),
    svc: BrandService = Depends(get_brand_service),
) -> list[BrandResponse]:
    brands = await svc.list(session)
    return [BrandResponse.model_validate(b) for b in brands]


@router.get("/{brand_id}", response_model=BrandResponse)
async def get_brand(
    brand_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    svc: BrandService = Depends(get_brand_service),
) -> BrandResponse:
    brand = await svc.get(session, brand_id)
    return BrandResponse.model_validate(brand)


@router.post("/", response_model=BrandResponse, status_code=201)
async def create_brand(
    body: CreateBrandRequest,
    session: AsyncSession = Depends(get_session),
    svc: BrandService = Depends(get_brand_service),
) -> BrandResponse:
    brand = await svc.create(session, name=body.name)
    return BrandResponse.model_validate(brand)


@router.put("/", response_model=BrandResponse)
async def update_brand(
    body: UpdateBrandRequest,
    session: AsyncSession = Depends(get_session),
    svc: BrandService = Depends(get_brand_service),
) -> BrandResponse:
    brand = await svc.update(session, body.id, name=body.name)
    return BrandResponse.model_validate(brand)


@router.delete("/", status_code=200, response_class=Response)
async def delete_brand(
    body: DeleteBrandRequest,
    session: AsyncSession = Depends(get_session),
    svc: BrandService = Depends(get_brand_service),
) -> Response:
    await svc.delete(session, body.id)
    return Response(status_code=200)
