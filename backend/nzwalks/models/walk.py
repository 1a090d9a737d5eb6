"""
NZWalks Backend — Walk SQLAlchemy Model
=========================================

What:  ORM model representing the `walks` table.

Referential Integrity:
    The service validates region_id and walk_difficulty_id with live lookups
    before every insert/update. Those reads and the write are not one atomic
    unit, so the foreign keys below are the last line of defence: a walk
    written after its region was concurrently deleted fails with an
    IntegrityError instead of dangling.
"""

import uuid

from sqlalchemy import Float, ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from nzwalks.database import Base


class Walk(Base):
    """A named trail belonging to exactly one region with exactly one difficulty."""

    __tablename__ = "walks"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    name: Mapped[str] = mapped_column(Text, nullable=False)

    # Kilometres; the validator guarantees > 0
    length: Mapped[float] = mapped_column(Float, nullable=False)

    region_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("regions.id", ondelete="CASCADE"),
        nullable=False,
    )

    walk_difficulty_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("walk_difficulties.id", ondelete="CASCADE"),
        nullable=False,
    )

    __table_args__ = (
        Index("idx_walks_region_id", "region_id"),
        Index("idx_walks_walk_difficulty_id", "walk_difficulty_id"),
    )

    def __repr__(self) -> str:
        return f"<Walk(id={self.id}, name='{self.name}', region_id={self.region_id})>"
