# Routes package init
"""
Bioskop API: Routes Package
============================

Route Inventory:
    - bioskop.py: POST/GET /bioskop, GET/PUT/DELETE /bioskop/{id}
                  (also mounted at /venues)
    - health.py:  GET /health

Routes stay thin: bind the request, call the service, return its result.
"""
