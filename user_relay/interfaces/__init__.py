"""
Interfaces layer package.

FastAPI routers, Pydantic response schemas and dependency providers.
No business logic belongs here.
"""
