"""
Current-auditor context.

The auditing listeners stamp ``created_by`` / ``last_modified_by`` with the
auditor of the current request. The request middleware binds it from the
``X-User-Id`` header; code running outside a request (scripts, tests) can bind
one with :func:`auditor_scope`.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Iterator, Optional

ANONYMOUS_AUDITOR = "anonymous"

_CURRENT_AUDITOR: ContextVar[Optional[str]] = ContextVar("current_auditor", default=None)


def set_current_auditor(auditor: Optional[str]) -> Token:
    """Bind the auditor for the current context and return the reset token."""
    return _CURRENT_AUDITOR.set(auditor)


def reset_current_auditor(token: Token) -> None:
    """Restore the auditor that was bound before ``token`` was issued."""
    _CURRENT_AUDITOR.reset(token)


def get_current_auditor() -> str:
    """Auditor for the current context, ``"anonymous"`` when none is bound."""
    return _CURRENT_AUDITOR.get() or ANONYMOUS_AUDITOR


@contextmanager
def auditor_scope(auditor: Optional[str]) -> Iterator[None]:
    """Run a block with ``auditor`` bound as the current auditor."""
    token = set_current_auditor(auditor)
    try:
        yield
    finally:
        reset_current_auditor(token)
