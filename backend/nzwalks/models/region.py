"""
NZWalks Backend — Region SQLAlchemy Model
===========================================

What:  ORM model representing the `regions` table.
Who:   Built by the mapper from Add/Update requests; persisted and returned by
       the region repository.

Table Design:
    - UUID primary key assigned by the repository on insert, never changed
    - No version column: updates are last-write-wins
    - code and name are TEXT with no length cap
"""

import uuid

from sqlalchemy import BigInteger, Float, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from nzwalks.database import Base


class Region(Base):
    """
    A named geographic area.

    Lifecycle:
        1. Created via POST /regions (repository assigns `id`)
        2. Overwritten field-by-field via PUT /regions/{id}
        3. Removed permanently via DELETE /regions/{id}; walks referencing it
           are removed by the foreign key cascade
    """

    __tablename__ = "regions"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier, assigned on creation",
    )

    # Short identifier such as "WGN" or "AKL"
    code: Mapped[str] = mapped_column(Text, nullable=False)

    name: Mapped[str] = mapped_column(Text, nullable=False)

    # Square kilometres; the validator guarantees > 0
    area: Mapped[float] = mapped_column(Float, nullable=False)

    lat: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    long: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    population: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<Region(id={self.id}, code='{self.code}', name='{self.name}')>"
