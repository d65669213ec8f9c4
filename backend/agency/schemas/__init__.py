"""Pydantic Schemas — request/response validation for actions and API endpoints.

Invariants:
    - Schemas validate at system boundary (form input, API responses)
    - Enumerated fields use the closed Enums from core/domain_types

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
