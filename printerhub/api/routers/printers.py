"""Printers router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from printerhub.api.deps import get_printer_service, get_session
from printerhub.api.schemas.printer import (
    CreatePrinterRequest,
    DeletePrinterRequest,
    PrinterResponse,
)
from printerhub.services.printer_service import PrinterService

router = APIRouter()


@router.get("/count", response_model=int)
async def count_printers(
    session: AsyncSession = Depends(get_session),
    svc: PrinterService = Depends(get_printer_service),
) -> int:
    return await svc.count(session)


@router.get("/", response_model=list[PrinterResponse])
async def list_printers(
    session: AsyncSession = Depends(get_session),
    svc: PrinterService = Depends(get_printer_service),
) -> list[PrinterResponse]:
    printers = await svc.list(session)
    return [PrinterResponse.model_validate(p) for p in printers]


@router.post("/", response_model=PrinterResponse, status_code=201)
async def create_printer(
    body: CreatePrinterRequest,
    session: AsyncSession = Depends(get_session),
    svc: PrinterService = Depends(get_printer_service),
) -> PrinterResponse:
    printer = await svc.create(
        session,
        name=body.name,
        model=body.model,
        brand=body.brand,
        toner=body.toner,
        drum=body.drum,
    )
    return PrinterResponse.model_validate(printer)


@router.delete("/", status_code=200, response_class=Response)
async def delete_printer(
    body: DeletePrinterRequest,
    session: AsyncSession = Depends(get_session),
    svc: PrinterService = Depends(get_printer_service),
) -> Response:
    await svc.delete(session, body.id)
    return Response(status_code=200)
