"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- Controllers: FastAPI routers per entity plus login
- Dependencies: Resolution of services from the DI container
- Error handlers: Mapping of domain errors to status codes
"""
