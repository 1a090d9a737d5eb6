# Routes package init
"""
NZWalks Backend — API Routes Package
======================================

Route Inventory:
    - regions.py:            /regions, /regions/{id}
    - walks.py:              /walks, /walks/{id}
    - walk_difficulties.py:  /walkdifficulties, /walkdifficulties/{id}
    - health.py:             /health

Routes are thin: extract path/body, call the service, set status code and
headers. Rules and orchestration live in nzwalks.services.
"""
