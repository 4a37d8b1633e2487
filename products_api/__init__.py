"""
Products Service: REST CRUD API for a products collection.

Application package root. Hexagonal architecture (ports & adapters):

Layers:
    - domain: Product entity, invariants, typed errors, storage port (ABC).
    - application: One use case per CRUD operation, DTOs.
    - infrastructure: MongoDB connection handle and repository adapter.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (error translation, security, logging).
"""
