"""
Sheet Store

Typed, versioned CRUD over the tabs of a tabular backend:
- schema: column definitions and the SheetRow base model
- codec: cells <-> typed rows
- table: version-checked create/update/delete/list
- backend: the row-level boundary and an in-memory implementation
"""
