"""
Application Layer
=================

Application services, validators and DTOs.
This layer orchestrates domain models and repositories.

Contains:
- Services: One pass-through service per entity, plus authentication
- Validators: Field-level rules applied before any write
- DTO: Pydantic request/response models
"""
