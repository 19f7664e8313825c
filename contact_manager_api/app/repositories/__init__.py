"""Persistence adapters translating typed calls into parameterized SQL."""
