# Services package init
"""
NZWalks Backend — Services Layer
==================================

What:  Validation and orchestration between routes (HTTP) and repositories.

Service Inventory:
    - validators: Field rules and referential checks → field-error mapping
    - mappers: Wire schema ↔ ORM entity conversion
    - RegionService: list/get/add/update/delete regions
    - WalkService: list/get/add/update/delete walks (with reference checks)
    - WalkDifficultyService: list/get difficulty reference data
"""
