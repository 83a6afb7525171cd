"""
Items API: starter template for a layered REST backend.

Application package root. Requests flow route -> use case -> repository,
with the repository backed by SQLAlchemy.

Layers:
    - domain: Entities and ports (ABCs). No framework imports.
    - application: Use cases and DTOs, one class per operation.
    - infrastructure: Database engine/session, ORM models, repository adapters.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
