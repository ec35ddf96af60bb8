"""API support shared across router versions.

This module holds request-scoped middleware used by every API version.
"""
