"""
Infrastructure Layer
====================

Adapters to external systems. Currently only the relational store.
"""
