# backend/ledger/session.py
"""
Anonymous session handling.

A session is nothing more than a UUID carried in the ``sessionId`` cookie.
Read endpoints depend on `require_session`, which turns the cookie into an
explicit `SessionContext` argument (or rejects the request with 401 before
the handler runs). The create endpoint uses `resolve_session`, which mints a
fresh session when the caller has none.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from fastapi import Cookie, HTTPException, Response, status

logger = logging.getLogger(__name__)

SESSION_COOKIE = "sessionId"
SESSION_MAX_AGE = 60 * 60 * 24 * 7  # 7 days


@dataclass(frozen=True)
class SessionContext:
    session_id: uuid.UUID
    created: bool = False


def _parse(raw: Optional[str]) -> Optional[uuid.UUID]:
    if not raw:
        return None
    try:
        return uuid.UUID(raw)
    except ValueError:
        # Sessions are always minted as UUIDs; anything else owns no data.
        return None


def require_session(
    session_cookie: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE),
) -> SessionContext:
    session_id = _parse(session_cookie)
    if session_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized.")
    return SessionContext(session_id=session_id)


def resolve_session(
    response: Response,
    session_cookie: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE),
) -> SessionContext:
    session_id = _parse(session_cookie)
    if session_id is not None:
        return SessionContext(session_id=session_id)

    session_id = uuid.uuid4()
    response.set_cookie(
        SESSION_COOKIE,
        str(session_id),
        path="/",
        max_age=SESSION_MAX_AGE,
    )
    logger.info("new session id=%s", session_id)
    return SessionContext(session_id=session_id, created=True)
