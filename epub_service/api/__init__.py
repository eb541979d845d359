"""
API routes module.

FastAPI application and routers for the HTTP surface.
"""
