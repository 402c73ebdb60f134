"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so the enumerator is testable with plain fakes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from cast_profiles.core.models import CodecFamily, MediaContainer, Profile


class CapabilityProvider(Protocol):
    """Contract for device capability sources.

    Any object implementing both methods satisfies this protocol
    structurally (no explicit inheritance required).  Implementations
    are queried read-only, must be side-effect free, and answer
    synchronously.
    """

    def supports_container(self, container: MediaContainer) -> bool:
        """Return ``True`` if the device can play *container* at all."""
        ...  # pragma: no cover

    def supports_codec(
        self,
        family: CodecFamily,
        profile: Profile,
        level: float | None = None,
    ) -> bool:
        """Return ``True`` if the device decodes *family* at *profile*/*level*.

        *level* is ``None`` for audio families.  Returning ``False`` is
        a normal answer, never an error.
        """
        ...  # pragma: no cover
