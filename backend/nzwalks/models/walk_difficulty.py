"""
NZWalks Backend — WalkDifficulty SQLAlchemy Model
===================================================

Reference data. Rows are seeded by the initial migration (Easy, Medium, Hard)
and only ever read by the API.
"""

import uuid

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from nzwalks.database import Base


class WalkDifficulty(Base):
    """A difficulty level a walk can be graded with."""

    __tablename__ = "walk_difficulties"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<WalkDifficulty(id={self.id}, name='{self.name}')>"
