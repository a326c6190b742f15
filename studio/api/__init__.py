"""
API routes module.

FastAPI routers for all HTTP endpoints; the application factory lives in
studio.api.main.
"""
