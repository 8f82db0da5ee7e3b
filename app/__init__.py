"""
Error translation service.

Application package root. Every failure raised while handling a request
is converted into one client-safe JSON error payload.

Layers:
    - domain: Application errors raised by business logic.
    - interfaces: FastAPI routers, schemas and request preconditions.
    - shared: Cross-cutting concerns (error translation, logging).
"""
