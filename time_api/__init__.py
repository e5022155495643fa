"""
Server Time API - reports the server's current time over HTTP.

A small FastAPI service following hexagonal architecture, publishing its
OpenAPI document and a Swagger UI browser alongside a liveness probe.
"""

__version__ = "1.0.0"
