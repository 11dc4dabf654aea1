"""
API Layer - FastAPI application, routes, schemas and exception handlers.
"""
