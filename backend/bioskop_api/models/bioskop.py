"""
Bioskop API: Bioskop SQLAlchemy Model
======================================

What:  ORM model for the `bioskop_db` table.
Who:   Used by BioskopService for CRUD statements and by Alembic.

Table Design:
    - id: SERIAL integer primary key, assigned by the store on insert
    - nama / lokasi: required strings, never empty (enforced by the service)
    - rating: double precision, defaults to 0, no range constraint
"""

from sqlalchemy import Float, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from bioskop_api.database import Base


class Bioskop(Base):
    """
    One cinema venue.

    Lifecycle:
        1. Inserted by POST (store assigns id)
        2. Overwritten in place by PUT (nama, lokasi, rating together)
        3. Removed by DELETE (hard delete)
    """

    __tablename__ = "bioskop_db"

    # SQLite would otherwise hand a deleted max id out again; SERIAL never does
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    nama: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Cinema name",
    )

    lokasi: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Free-form location, e.g. mall or street address",
    )

    rating: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        default=0.0,
        server_default=text("0"),
        comment="Numeric rating; range not constrained",
    )

    def __repr__(self) -> str:
        return f"<Bioskop(id={self.id}, nama='{self.nama}', lokasi='{self.lokasi}')>"
