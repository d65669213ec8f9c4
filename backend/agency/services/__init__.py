"""Services Layer — server actions, revalidation, page payloads and side channels.

Invariants:
    - Every server action returns ActionResult and never raises
    - run_action (actions.py) is the single point that classifies errors
    - Cache revalidation runs only after the storage write returned

Design Decisions:
    - One module per entity family, plain async functions (no service classes)
"""
