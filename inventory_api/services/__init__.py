"""
High-level use cases for the inventory API.

Routers call these services instead of reading or writing the JSON document
directly; the services own validation and business rules (stock checks,
revenue accounting).
"""
