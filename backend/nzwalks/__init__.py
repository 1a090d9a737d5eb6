"""
NZWalks Backend — Application Package Initializer
==================================================

What: Marks the `nzwalks` directory as a Python package.
Who:  Used by Alembic, pytest, and uvicorn (`uvicorn nzwalks.main:app`).

Architecture Note:
    The backend is layered so each layer can be tested on its own:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status codes, Location header
    ├─────────────────────────────────────┤
    │   Services (Validation + Handlers)  │  ← field rules, referential checks
    ├─────────────────────────────────────┤
    │      Repositories (Persistence)     │  ← CRUD contract per entity type
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
