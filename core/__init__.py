"""
CORE LAYER CONTRACT

This package contains core application components and abstractions.

RULES:
- Contains fundamental building blocks for all layers
- Defines base classes, interfaces, and abstractions
- No business logic implementation
- No command parsing or message rendering

LAYER RESPONSIBILITY:
- ConsoleAppError hierarchy
- PostgreSQL connection management
- Repository and translator interfaces
- The Record entity

CROSS-LAYER RESTRICTIONS:
- No imports from services or console
- Only core abstractions and the database connection

If you need command handling: you are in the wrong layer.
"""
