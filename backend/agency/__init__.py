"""Agency Site Package — content backend for the marketing site.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
