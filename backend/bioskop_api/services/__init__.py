# Services package init
"""
Bioskop API: Services Layer
============================

Service Inventory:
    - BioskopService: validation and store statements for venue records
"""
