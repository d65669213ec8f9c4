"""Infrastructure Layer — database, logging, render cache, auth tokens, email delivery.

Invariants:
    - Infrastructure never decides domain outcomes; it stores, caches and delivers
    - External calls (email provider) wrapped with timeout and error mapping
"""
