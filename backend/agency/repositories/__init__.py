"""Repositories — narrow async query functions, one module per entity.

Invariants:
    - Each function takes an AsyncSession plus plain filter values
    - No side effects beyond the query itself (and commit for writes)
    - Storage errors propagate; the only translation is a unique-column
      IntegrityError on write, rolled back and raised as ConflictError
"""
