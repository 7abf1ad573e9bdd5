"""
HTTP layer: FastAPI application, routers and dependencies.
"""
