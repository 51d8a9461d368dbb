"""Tests for SessionGate domain service."""

from __future__ import annotations

from fleetdesk.domain.services import SessionGate
from fleetdesk.domain.value_objects import GateDecision, Session, SessionState


class TestSessionGate:
    """Tests for the protected-view route guard."""

    def test_loading_shows_placeholder(self) -> None:
        """While the session is loading nothing is decided yet."""
        assert SessionGate.evaluate(SessionState(session=None, loading=True)) == GateDecision.PLACEHOLDER

    def test_loading_wins_over_session(self) -> None:
        state = SessionState(session=Session(user_id="u-1"), loading=True)
        assert SessionGate.evaluate(state) == GateDecision.PLACEHOLDER

    def test_missing_session_redirects(self) -> None:
        assert SessionGate.evaluate(SessionState(session=None)) == GateDecision.REDIRECT
        assert SessionGate.redirect_to == "/auth"

    def test_session_renders(self) -> None:
        state = SessionState(session=Session(user_id="u-1", email="ops@example.com"))
        assert SessionGate.evaluate(state) == GateDecision.RENDER
