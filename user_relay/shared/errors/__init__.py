"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that domain errors
are consistently translated into the error envelope.
"""
