"""
SERVICES LAYER CONTRACT

This package contains the record service and the record repository.

RULES:
- The service exposes one operation per CRUD verb
- The service performs no validation beyond delegating to the repository
- Only the repository issues SQL

LAYER RESPONSIBILITY:
- SQL statement construction and row mapping (repository)
- Parameter shaping for the console layer (service)

CROSS-LAYER RESTRICTIONS:
- No command parsing
- No message rendering or locale handling

If you need to print something: use the console layer.
"""
