"""Authenticated session model and accessors.

The hosting web framework owns authentication. This package only needs to
know who the current caller is, through an async zero-argument accessor.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class SessionUser:
    id: str | None = None


@dataclass(frozen=True)
class Session:
    user: SessionUser | None = None

    @property
    def user_id(self) -> str | None:
        return self.user.id if self.user else None


class SessionAccessor(Protocol):
    """Return the current session, or None when nobody is signed in."""

    async def __call__(self) -> Session | None: ...


class ContextSessionAccessor:
    """Session accessor backed by a context variable.

    Request middleware binds the session for the duration of a request;
    every coroutine spawned inside that request sees the same value.
    """

    def __init__(self, name: str = "creator_context_session") -> None:
        self._current: ContextVar[Session | None] = ContextVar(name, default=None)

    async def __call__(self) -> Session | None:
        return self._current.get()

    def bind(self, session: Session | None) -> Token:
        return self._current.set(session)

    def reset(self, token: Token) -> None:
        self._current.reset(token)

    @contextmanager
    def session_scope(self, session: Session | None) -> Iterator[None]:
        token = self.bind(session)
        try:
            yield
        finally:
            self.reset(token)
