"""
Users bounded context: domain layer.

- User entity
- UserDirectoryPort, the contract for any user directory
- Error taxonomy (not found, upstream failure, disconnect)
"""
