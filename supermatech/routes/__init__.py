# Routes package init
"""
Supermatech Backend: API Routes Package
=========================================

Route Inventory:
    - order_lines.py: /api/order-lines CRUD, list and cart summary
    - health.py:      GET /health

Routes handle HTTP concerns only (path/query/body extraction, status codes,
headers) and delegate to services.
"""
