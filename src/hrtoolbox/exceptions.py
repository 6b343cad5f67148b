"""Custom exception hierarchy for the hrtoolbox package."""

from __future__ import annotations


class ToolboxError(Exception):
    """Base error for all toolbox related exceptions."""


class ValidationError(ToolboxError):
    """Raised when participant data cannot be validated."""


class NoEligibleParticipantsError(ToolboxError):
    """Raised when a draw is requested but nobody is left to draw."""

    def __init__(self, message: str = "Everyone has already been drawn. Reset the draw or allow repeats.") -> None:
        super().__init__(message)


class NamingAdapterError(ToolboxError):
    """Raised by naming adapters when a response cannot be used."""
