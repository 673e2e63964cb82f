"""
In-memory store of quoting sessions, keyed by the session id the frontend
generates. Nothing is persisted; a restart starts every user from scratch.
"""
import logging
from typing import Callable, Dict

from appraisal.core.logger import logs
from appraisal.services.quote_service import QuoteSession
from appraisal.services.route_service import RouteService


class SessionRepository:

    def __init__(self, route_service_factory: Callable[[], RouteService] = RouteService):
        self.route_service_factory = route_service_factory
        self._sessions: Dict[str, QuoteSession] = {}

    def get_session(self, session_id: str) -> QuoteSession:
        """Returns the session, creating a fresh one for unknown ids."""
        session = self._sessions.get(session_id)
        if session is None:
            session = QuoteSession(session_id, self.route_service_factory())
            self._sessions[session_id] = session
            logs.log(logging.INFO, f"New quote session: {session_id}")
        return session

    def clear_session(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None


session_repo = SessionRepository()
