"""
Book API: a RESTful catalog of books.

Application package root. This is a small service using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - books: CRUD, paginated listing and search over the Book resource.

Layers:
    - domain: Entities, validation rules, ports (ABCs), errors.
    - application: Use cases, DTOs, result values.
    - infrastructure: Adapters (SQL database) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (error translation, logging).
"""
