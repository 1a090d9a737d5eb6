# Middleware package init
"""
NZWalks Backend — Middleware Package
======================================

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

Request ID runs before Logging so every access-log line carries the
correlation id.
"""
