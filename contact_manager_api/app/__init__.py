"""FastAPI application package for the Contact Manager API."""
