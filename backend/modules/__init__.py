"""
Feature modules for Profile Sync backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- repository.py / service.py: Store access or business logic
- routes.py: FastAPI route handlers (accounts only)
- exceptions.py: Module-specific exceptions

Modules communicate through interfaces, not concrete implementations.
"""
