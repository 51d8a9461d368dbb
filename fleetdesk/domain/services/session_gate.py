"""Domain service deciding how a protected view reacts to the auth session."""

from typing import ClassVar

from ..value_objects import GateDecision, SessionState


class SessionGate:
    """Route guard for protected views."""

    redirect_to: ClassVar[str] = "/auth"

    @staticmethod
    def evaluate(state: SessionState) -> GateDecision:
        if state.loading:
            return GateDecision.PLACEHOLDER
        if state.session is None:
            return GateDecision.REDIRECT
        return GateDecision.RENDER
