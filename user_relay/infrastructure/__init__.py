"""
Infrastructure layer package.

Concrete implementations (adapters) of the ports defined in the
domain layer. The HTTP client for the upstream directory lives here.
"""
