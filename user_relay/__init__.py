"""
User Relay: a thin HTTP relay in front of a user directory service.

Application package root. Laid out as ports & adapters so the
upstream directory can be swapped without touching the HTTP layer.

Bounded contexts:
    - users: Lookup of a single user by numeric id.

Layers:
    - domain: User entity, directory port (ABC), errors.
    - application: Use cases and DTOs.
    - infrastructure: httpx adapter implementing the directory port.
    - interfaces: FastAPI routers, Pydantic schemas, dependency providers.
    - shared: Cross-cutting concerns (errors, headers, rate limiting, logging).
"""
