"""Core layer — pure domain model, catalogs and enumeration.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from cast_profiles.core.models import (
    Codec,
    CodecFamily,
    CodecKind,
    MediaContainer,
    MediaProfile,
    Profile,
)
from cast_profiles.core.negotiator import (
    get_supported_configurations,
    get_supported_identifiers,
)
from cast_profiles.core.protocols import CapabilityProvider

__all__: list[str] = [
    "CapabilityProvider",
    "Codec",
    "CodecFamily",
    "CodecKind",
    "MediaContainer",
    "MediaProfile",
    "Profile",
    "get_supported_configurations",
    "get_supported_identifiers",
]
