"""Custom exception hierarchy for cast-profiles.

All exceptions that cross layer boundaries must inherit from
:class:`CastProfilesError`.  Third-party exceptions (e.g. pydantic
validation errors while reading a device file) must be caught at the
infrastructure boundary and re-raised as a typed subclass defined here.

Capability rejection (a device not supporting a configuration) is
**not** an error and has no exception type.

Hierarchy
---------
CastProfilesError
├── InvalidConfiguration
├── EmptyMediaProfile
├── UnknownCatalogEntry
├── DeviceProfileError
├── SelectionError
└── EnvironmentError
"""

from __future__ import annotations


class CastProfilesError(Exception):
    """Base exception for all cast-profiles errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Domain model ----------------------------------------------------------

class InvalidConfiguration(CastProfilesError):
    """Raised when a codec or media profile is built from values outside
    its catalog.

    This always indicates a defect in the caller; the enumerator only
    produces catalog members.
    """

    def __init__(
        self,
        message: str,
        *,
        constraint: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.constraint: str = constraint
        """Which constraint failed: ``profile``, ``level``, ``kind`` or ``container``."""


class EmptyMediaProfile(CastProfilesError):
    """Raised when a media profile has neither a video nor an audio codec."""


class UnknownCatalogEntry(CastProfilesError):
    """Raised when a family, profile or container name is not in the catalog."""


# --- Device descriptions ---------------------------------------------------

class DeviceProfileError(CastProfilesError):
    """Raised when a device description cannot be loaded or validated."""


# --- CLI -------------------------------------------------------------------

class SelectionError(CastProfilesError):
    """Raised when no configuration could be chosen interactively."""


class EnvironmentError(CastProfilesError):
    """Raised when an optional runtime dependency is not available."""
