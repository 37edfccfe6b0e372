"""
QnA Backend — Application Package Initializer
===============================================

Architecture Note:
    This backend follows a layered architecture, each layer depending on the
    next only through an interface:

    ┌─────────────────────────────────────┐
    │      Routes (Transport Layer)       │  ← HTTP status codes, JSON bodies
    ├─────────────────────────────────────┤
    │     Services (Business Logic)       │  ← delegation, error re-typing
    ├─────────────────────────────────────┤
    │    Persistence (DAO interfaces)     │  ← UUID parsing, SQL, error mapping
    ├─────────────────────────────────────┤
    │   Database (async SQLAlchemy pool)  │
    └─────────────────────────────────────┘

    Requests flow downward; errors flow back up and are re-typed at each
    boundary.
"""

__version__ = "1.0.0"
