# Middleware package init
"""
Supermatech Backend: Middleware Package
=========================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: assigns the correlation id every later log line carries
    2. Logging: one access line per request, with status and duration
    3. GZip / CORS: FastAPI's built-in middleware
"""
