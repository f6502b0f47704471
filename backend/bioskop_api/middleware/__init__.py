# Middleware package init
"""
Bioskop API: Middleware Package
================================

Middleware Chain:
    Request → [Request ID] → [Logging] → Route Handler

    Request ID runs first so the access log line carries the ID; the ID is
    added to the response headers on the way out.
"""
