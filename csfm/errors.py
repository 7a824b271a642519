"""Recoverable error kinds reported by the navigation core.

None of these are raised out of the core. They travel as the ``error``
field of result objects and end up as user notifications.
"""

from __future__ import annotations


class CsfmError(Exception):
    """Base class for csfm failures."""


class ConfigurationError(CsfmError):
    """Config file is missing or could not be parsed."""


class DirectoryReadError(CsfmError):
    """Directory enumeration failed."""


class DeleteError(CsfmError):
    """File or directory removal failed."""


class LaunchError(CsfmError):
    """Default-application launcher could not be started."""


class ConfirmationUtilityError(CsfmError):
    """The confirmation dialog utility itself failed to run."""


__all__ = [
    "CsfmError",
    "ConfigurationError",
    "DirectoryReadError",
    "DeleteError",
    "LaunchError",
    "ConfirmationUtilityError",
]
