"""FastAPI layer: routes, dependencies and error handlers."""
