"""Errors raised while deriving notification views."""

from __future__ import annotations


class NotihezeError(Exception):
    """Base class for every error raised by the notification views."""


class DataFormatError(NotihezeError, ValueError):
    """Raised when a stored message payload cannot be decoded."""


class ResolutionFailure(NotihezeError, LookupError):
    """Raised when a collaborator cannot resolve an identifier it was given."""


class AgentNotFoundError(ResolutionFailure):
    """Raised when the user directory has no profile for an agent id."""

    def __init__(self, agent_id: object) -> None:
        super().__init__(f"Agent {agent_id!r} could not be resolved")
        self.agent_id = agent_id


class CategoryNotFoundError(ResolutionFailure):
    """Raised when a notification type has no configured category."""

    def __init__(self, notification_type: str) -> None:
        super().__init__(f"No category configured for type '{notification_type}'")
        self.notification_type = notification_type


class MissingDependencyError(NotihezeError, TypeError):
    """Raised when a required collaborator was not supplied."""


class ConfigurationError(NotihezeError, KeyError):
    """Raised when a configuration key is unknown."""


__all__ = [
    "NotihezeError",
    "DataFormatError",
    "ResolutionFailure",
    "AgentNotFoundError",
    "CategoryNotFoundError",
    "MissingDependencyError",
    "ConfigurationError",
]
