"""Root of the LandingKit exception hierarchy."""

from typing import Optional


class LandingKitError(Exception):
    """
    Base exception for all LandingKit errors.

    Attributes:
        user_message: Short message shown on the terminal
        technical_message: Longer message for the log (defaults to user_message)
        recoverable: True when the caller can carry on, e.g. with a fallback color
        recovery_hint: What the user can change to fix it
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
