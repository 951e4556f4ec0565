"""
Infrastructure layer for the spent time service.

This layer contains the implementation details for external systems integration:
- Database (SQLAlchemy)
- Authentication (bearer JWT)
- Web (FastAPI routers and middleware)

The infrastructure layer implements interfaces defined in the domain layer,
following the Dependency Inversion Principle of Clean Architecture.
"""
