"""HTTP surface: FastAPI app, routers, request models and middleware."""
