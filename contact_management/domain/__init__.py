"""
Domain Layer
============

Core business concepts of the contact management service.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Models: Company, Contact and Country dataclasses
- Repository Interfaces: Abstract contracts for data access
- Exceptions: Typed error taxonomy shared by every layer
"""
