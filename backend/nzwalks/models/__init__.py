"""
NZWalks Backend — ORM Models
==============================

The SQLAlchemy models double as the domain entities handed to and returned by
the repositories. Importing this package registers every table with
`Base.metadata` (needed by Alembic and by the test suite's create_all).
"""

from nzwalks.models.region import Region
from nzwalks.models.walk import Walk
from nzwalks.models.walk_difficulty import WalkDifficulty

__all__ = ["Region", "Walk", "WalkDifficulty"]
