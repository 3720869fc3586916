"""
Entity modules live under this package.

Each module owns its table, repository (SQL), service (business rules) and
routes (HTTP binding), and reuses the platform primitives (DB session,
NullTime, result types).
"""
