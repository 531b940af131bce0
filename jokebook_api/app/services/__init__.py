"""
Service layer abstraction.

Each service encapsulates the business logic for a resource.  Services
receive their collaborators (document store, HTTP session) at
construction time so the API layer and tests can choose the concrete
implementation.
"""
