"""Session resolution and profile access control."""

from .access import AccessGate
from .session import ContextSessionAccessor, Session, SessionAccessor, SessionUser

__all__ = [
    "AccessGate",
    "ContextSessionAccessor",
    "Session",
    "SessionAccessor",
    "SessionUser",
]
