"""
DTOs
====

Request/response models of the HTTP API.
"""
