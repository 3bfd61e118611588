"""
Shared module package.

Contains cross-cutting concerns:
- Error handling and mapping
- CORS and security headers
- Rate limiting
- Logging configuration
"""
