"""
Bioskop API: Bioskop Service
=============================

What:  The five venue operations: create, list, get, update, delete.
How:   Each method issues one parameterized statement through the request's
       AsyncSession, checks the outcome at the call site and raises the
       matching application exception. Writes are committed here.
Who:   Called by the route handlers in routes/bioskop.py.

Error Translation:
    Empty nama/lokasi         → ValidationError (400), no statement issued
    No row / zero rows hit    → NotFoundError (404)
    Any store failure         → DatabaseError (500) with a per-operation message
    No retries are attempted.
"""

import logging
from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bioskop_api.exceptions import (
    REQUIRED_FIELDS_MISSING,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from bioskop_api.models.bioskop import Bioskop
from bioskop_api.schemas.bioskop import (
    BioskopInput,
    BioskopResponse,
    MessageResponse,
)

logger = logging.getLogger(__name__)

MSG_CREATE_FAILED = "Gagal menambahkan data"
MSG_FETCH_FAILED = "Gagal mengambil data"
MSG_DECODE_FAILED = "Gagal membaca data"
MSG_UPDATE_FAILED = "Gagal mengupdate data"
MSG_DELETE_FAILED = "Gagal menghapus data"
MSG_UPDATED = "Data berhasil diupdate"
MSG_DELETED = "Data berhasil dihapus"

# Upper bound of the SERIAL (int4) id column
MAX_BIOSKOP_ID = 2_147_483_647


class BioskopService:
    """
    Business logic for venue records.

    Stateless: the session comes in with every call, so one instance is
    shared by all requests.
    """

    @staticmethod
    def _require_fields(payload: BioskopInput) -> None:
        """Rejects a body whose nama or lokasi is missing, null or empty."""
        if not payload.nama or not payload.lokasi:
            raise ValidationError(
                message=REQUIRED_FIELDS_MISSING,
                field="nama" if not payload.nama else "lokasi",
            )

    @staticmethod
    def _require_id(bioskop_id: int) -> None:
        """An id the id column cannot hold names no row."""
        if not 1 <= bioskop_id <= MAX_BIOSKOP_ID:
            raise NotFoundError(resource_id=bioskop_id)

    @staticmethod
    def _rating(payload: BioskopInput) -> float:
        return payload.rating if payload.rating is not None else 0.0

    async def create_bioskop(
        self, db: AsyncSession, payload: BioskopInput
    ) -> BioskopResponse:
        """
        Insert a new venue and return it with its store-assigned id.

        Raises:
            ValidationError: nama or lokasi empty (nothing is inserted)
            DatabaseError: the insert or its commit failed
        """
        self._require_fields(payload)

        row = Bioskop(
            nama=payload.nama,
            lokasi=payload.lokasi,
            rating=self._rating(payload),
        )
        try:
            db.add(row)
            await db.flush()  # INSERT ... RETURNING id
            await db.commit()
        except Exception as e:
            logger.error("Insert into bioskop_db failed: %s", str(e))
            raise DatabaseError(
                message=MSG_CREATE_FAILED,
                context={"error_type": type(e).__name__},
            )

        logger.info("Bioskop %s created", row.id)
        return BioskopResponse.model_validate(row)

    async def list_bioskop(self, db: AsyncSession) -> List[BioskopResponse]:
        """
        Return every venue in whatever order the store yields them.

        The cursor is closed on every path; a failure while reading rows
        discards what was read so far.

        Raises:
            DatabaseError: query failed ("Gagal mengambil data") or a row
                could not be decoded ("Gagal membaca data")
        """
        try:
            result = await db.execute(select(Bioskop))
        except Exception as e:
            logger.error("Select from bioskop_db failed: %s", str(e))
            raise DatabaseError(
                message=MSG_FETCH_FAILED,
                context={"error_type": type(e).__name__},
            )

        try:
            return [
                BioskopResponse.model_validate(row)
                for row in result.scalars().all()
            ]
        except Exception as e:
            logger.error("Decoding bioskop_db rows failed: %s", str(e))
            raise DatabaseError(
                message=MSG_DECODE_FAILED,
                context={"error_type": type(e).__name__},
            )
        finally:
            result.close()

    async def get_bioskop(self, db: AsyncSession, bioskop_id: int) -> BioskopResponse:
        """
        Fetch one venue by primary key.

        Raises:
            NotFoundError: no row with this id
            DatabaseError: query failed
        """
        self._require_id(bioskop_id)

        try:
            result = await db.execute(select(Bioskop).where(Bioskop.id == bioskop_id))
            row = result.scalar_one_or_none()

            if row is None:
                raise NotFoundError(resource_id=bioskop_id)

            return BioskopResponse.model_validate(row)

        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Database error fetching bioskop %s: %s", bioskop_id, str(e))
            raise DatabaseError(
                message=MSG_FETCH_FAILED,
                context={"bioskop_id": bioskop_id, "error_type": type(e).__name__},
            )

    async def update_bioskop(
        self, db: AsyncSession, bioskop_id: int, payload: BioskopInput
    ) -> MessageResponse:
        """
        Overwrite nama, lokasi and rating of an existing venue.

        All three fields are replaced together; there is no partial patch.

        Raises:
            ValidationError: nama or lokasi empty (nothing is updated)
            NotFoundError: UPDATE affected zero rows
            DatabaseError: statement or commit failed
        """
        self._require_fields(payload)
        self._require_id(bioskop_id)

        stmt = (
            update(Bioskop)
            .where(Bioskop.id == bioskop_id)
            .values(
                nama=payload.nama,
                lokasi=payload.lokasi,
                rating=self._rating(payload),
            )
            .execution_options(synchronize_session=False)
        )
        try:
            result = await db.execute(stmt)
            if result.rowcount == 0:
                raise NotFoundError(resource_id=bioskop_id)
            await db.commit()

        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Database error updating bioskop %s: %s", bioskop_id, str(e))
            raise DatabaseError(
                message=MSG_UPDATE_FAILED,
                context={"bioskop_id": bioskop_id, "error_type": type(e).__name__},
            )

        logger.info("Bioskop %s updated", bioskop_id)
        return MessageResponse(message=MSG_UPDATED)

    async def delete_bioskop(self, db: AsyncSession, bioskop_id: int) -> MessageResponse:
        """
        Remove a venue.

        Raises:
            NotFoundError: DELETE affected zero rows
            DatabaseError: statement or commit failed
        """
        self._require_id(bioskop_id)

        stmt = (
            delete(Bioskop)
            .where(Bioskop.id == bioskop_id)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await db.execute(stmt)
            if result.rowcount == 0:
                raise NotFoundError(resource_id=bioskop_id)
            await db.commit()

        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Database error deleting bioskop %s: %s", bioskop_id, str(e))
            raise DatabaseError(
                message=MSG_DELETE_FAILED,
                context={"bioskop_id": bioskop_id, "error_type": type(e).__name__},
            )

        logger.info("Bioskop %s deleted", bioskop_id)
        return MessageResponse(message=MSG_DELETED)


# Shared instance; the service holds no per-request state
bioskop_service = BioskopService()
