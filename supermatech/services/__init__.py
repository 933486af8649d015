# Services package init
"""
Supermatech Backend: Services Layer
=====================================

What:  Business logic between routes (HTTP) and storage (persistence).

Service Inventory:
    - OrderLineService: identifier validation and delegation for the
      OrderLine resource, plus cart totals

Services take their store as an argument and hold no request state, so a
single module-level instance serves every request.
"""
