"""
Middleware Module
Contains FastAPI middleware and exception handlers for cross-cutting concerns.
"""
