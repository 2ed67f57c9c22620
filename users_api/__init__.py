"""
Users API — root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic and the relational storage adapter for the user resource.
"""
