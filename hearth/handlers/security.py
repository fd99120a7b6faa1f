"""Security handler: arming, disarming and alarm status."""

from hearth.handlers.base import BaseHandler
from hearth.models.command import HandlerResult
from hearth.models.household import HouseholdState, Security, SecurityMode


def describe_security(security: Security) -> str:
    if security.armed:
        return f"Armed ({security.mode.value.upper()})"
    return "Disarmed"


class SecurityHandler(BaseHandler):
    """Controls the alarm system."""

    def __init__(self):
        super().__init__("security", "Security")

    def _interpret(self, state: HouseholdState, command: str) -> HandlerResult | None:
        security = state.security

        # "disarm" and "alarm" both contain "arm"; check them first.
        if "disarm" in command:
            security.armed = False
            return HandlerResult(
                reply="Disarming the security system.",
                actions=["Disarmed security system"],
            )

        if "security status" in command or "alarm status" in command:
            if security.armed:
                return HandlerResult(
                    reply=f"The security system is {describe_security(security)}."
                )
            return HandlerResult(reply="The security system is currently disarmed.")

        if "arm" in command:
            security.armed = True
            security.mode = SecurityMode.AWAY if "away" in command else SecurityMode.HOME
            return HandlerResult(
                reply=f"Arming the security system in {security.mode.value} mode.",
                actions=[f"Armed security system in {security.mode.value} mode"],
            )

        return None

    def summarize(self, state: HouseholdState) -> str:
        return f"Security: {describe_security(state.security)}."
