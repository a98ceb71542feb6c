"""
CONSOLE LAYER CONTRACT

This package contains the interactive command interpreter.

RULES:
- Reads one line, executes exactly one command, writes localized lines
- Every user-visible line goes through the translator
- Errors of a single command never end the session

CROSS-LAYER RESTRICTIONS:
- No SQL (use services.record_service)
"""
from console.commands import Command, Verb, parse_id, parse_line
from console.interpreter import CommandInterpreter, SessionState

__all__ = [
    "Command",
    "Verb",
    "parse_id",
    "parse_line",
    "CommandInterpreter",
    "SessionState",
]
