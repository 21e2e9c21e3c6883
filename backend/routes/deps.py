"""
Per-request session access for route handlers.

get_session_context() resolves the session id from the session cookie. When
there is no cookie, or it points at a session that no longer exists, a fresh
id is minted; the cookie for it is only sent once the handler writes
something, so read-only visits never create a session.
"""

from typing import Optional

from fastapi import Depends, Request, Response

import config
import store
from store import SessionStore, new_session_id


def get_store() -> SessionStore:
    return store.sessions


class SessionContext:
    def __init__(self, session_store: SessionStore, session_id: str, response: Response, is_new: bool):
        self.store = session_store
        self.session_id = session_id
        self.is_new = is_new
        self._response = response
        self._cookie_sent = False

    def _issue_cookie(self) -> None:
        if not self.is_new or self._cookie_sent:
            return
        self._response.set_cookie(
            key=config.SESSION_COOKIE_NAME,
            value=self.session_id,
            path="/",
            httponly=True,
            samesite="lax",
        )
        self._cookie_sent = True

    def get(self, key: str) -> Optional[bytes]:
        return self.store.get(self.session_id, key)

    def set(self, key: str, value: bytes) -> None:
        self.store.set(self.session_id, key, value)
        self._issue_cookie()

    def get_string(self, key: str) -> Optional[str]:
        return self.store.get_string(self.session_id, key)

    def set_string(self, key: str, value: str) -> None:
        self.store.set_string(self.session_id, key, value)
        self._issue_cookie()


def get_session_context(
    request: Request,
    response: Response,
    session_store: SessionStore = Depends(get_store),
) -> SessionContext:
    session_id = request.cookies.get(config.SESSION_COOKIE_NAME)
    if session_id and session_id in session_store:
        return SessionContext(session_store, session_id, response, is_new=False)
    return SessionContext(session_store, new_session_id(), response, is_new=True)
