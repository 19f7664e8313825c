"""
Top‑level package for the Contact Manager API.

This file makes ``contact_manager_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``contact_manager_api.app.main``.  The HTTP client for the API
lives in ``contact_manager_api.client``.
"""

__all__ = []
