"""
Bioskop API: Venue Route Handlers
==================================

What:  POST/GET/PUT/DELETE handlers for venue records.
How:   Binds the path id and JSON body, delegates to BioskopService and
       returns its result. Errors raised by the service are formatted by the
       global handlers in main.py.

Mounting:
    The router has no prefix of its own. main.py includes it twice, at
    `/bioskop` (the path existing clients call) and at `/venues`.

    POST   {prefix}           create
    GET    {prefix}           list all
    GET    {prefix}/{id}      get one
    PUT    {prefix}/{id}      replace nama/lokasi/rating
    DELETE {prefix}/{id}      delete
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bioskop_api.database import get_db_session
from bioskop_api.schemas.bioskop import (
    BioskopInput,
    BioskopResponse,
    ErrorResponse,
    MessageResponse,
)
from bioskop_api.services.bioskop_service import bioskop_service

router = APIRouter(tags=["Bioskop"])

_INVALID = {400: {"description": "Invalid input or missing nama/lokasi", "model": ErrorResponse}}
_NOT_FOUND = {404: {"description": "Data tidak ditemukan", "model": ErrorResponse}}
_SERVER = {500: {"description": "Store error", "model": ErrorResponse}}


@router.post(
    "",
    response_model=BioskopResponse,
    responses={**_INVALID, **_SERVER},
    summary="Create a venue",
)
async def create_bioskop(
    payload: BioskopInput,
    db: AsyncSession = Depends(get_db_session),
) -> BioskopResponse:
    """Insert a venue; the response echoes it with the assigned id."""
    return await bioskop_service.create_bioskop(db=db, payload=payload)


@router.get(
    "",
    response_model=List[BioskopResponse],
    responses={**_SERVER},
    summary="List all venues",
    description="Returns every venue. Order is not guaranteed.",
)
async def list_bioskop(
    db: AsyncSession = Depends(get_db_session),
) -> List[BioskopResponse]:
    return await bioskop_service.list_bioskop(db=db)


@router.get(
    "/{bioskop_id}",
    response_model=BioskopResponse,
    responses={**_INVALID, **_NOT_FOUND, **_SERVER},
    summary="Get a venue by id",
)
async def get_bioskop(
    bioskop_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> BioskopResponse:
    return await bioskop_service.get_bioskop(db=db, bioskop_id=bioskop_id)


@router.put(
    "/{bioskop_id}",
    response_model=MessageResponse,
    responses={**_INVALID, **_NOT_FOUND, **_SERVER},
    summary="Replace a venue's fields",
)
async def update_bioskop(
    bioskop_id: int,
    payload: BioskopInput,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    """
    Overwrite nama, lokasi and rating together.

    Returns a confirmation message rather than the updated record.
    """
    return await bioskop_service.update_bioskop(
        db=db, bioskop_id=bioskop_id, payload=payload
    )


@router.delete(
    "/{bioskop_id}",
    response_model=MessageResponse,
    responses={**_INVALID, **_NOT_FOUND, **_SERVER},
    summary="Delete a venue",
)
async def delete_bioskop(
    bioskop_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await bioskop_service.delete_bioskop(db=db, bioskop_id=bioskop_id)
