"""
Service layer abstraction.

Each service encapsulates the business logic for a domain and talks to
persistence only through a repository.
"""
