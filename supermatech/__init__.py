"""
Supermatech Backend: Application Package
==========================================

What: The OrderLine resource server behind the Supermatech shop front-end.
How:  Layered the usual way for this codebase:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status codes, headers
    ├─────────────────────────────────────┤
    │   Services (OrderLine resource)     │  ← id validation, delegation
    ├─────────────────────────────────────┤
    │   Storage (OrderLineStore)          │  ← SQL or in-memory
    ├─────────────────────────────────────┤
    │   Models & Schemas (Data)           │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
