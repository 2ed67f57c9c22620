"""
API layer for the Users API.

Exposes the health probe and the /api/users endpoints, and maps
application errors to HTTP responses.
"""
