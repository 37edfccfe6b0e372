# Middleware package init
"""
QnA Backend — Middleware Package
==================================

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: generate the correlation ID first
    2. Logging: log the request with that ID once the response is ready
    3. CORS: applied by Starlette's CORSMiddleware (answers preflights)
"""
