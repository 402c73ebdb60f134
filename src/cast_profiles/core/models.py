"""Domain models for cast-profiles.

All models are **frozen** dataclasses — immutable value objects that are
validated once at construction and never change afterwards.  They carry
zero I/O and zero dependencies on external packages.

Codec families are plain data-table entries (:class:`CodecFamily`)
tagged with a :class:`CodecKind`; each family registers the function
that turns a chosen ``(profile, level)`` into its identifier fragment.
A :class:`Codec` is one configured instance of a family.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cast_profiles.core.identifiers import build_identifier_string
from cast_profiles.exceptions import (
    EmptyMediaProfile,
    InvalidConfiguration,
    UnknownCatalogEntry,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cast_profiles.core.protocols import CapabilityProvider


FragmentRule = Callable[[str, "Profile", "float | None"], str]
"""Signature of a family's identifier-fragment rule: ``(tag, profile, level)``."""


# ---------------------------------------------------------------------------
# Codec kind
# ---------------------------------------------------------------------------

class CodecKind(enum.Enum):
    """The media type a codec family encodes."""

    VIDEO = "video"
    AUDIO = "audio"


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Profile:
    """A named set of encoding parameters for one codec family variant.

    Identity is structural: two profiles are the same profile when every
    field matches.  ``name`` takes part in equality so catalog entries
    with identical encoding fields (e.g. two ``ec-3`` audio variants)
    remain distinct.
    """

    name: str
    """Catalog key, e.g. ``main10`` or ``lc_aac``."""

    flag: str
    """Profile flag used in the identifier (``L``, ``64``, ``mp4a.40.2``)."""

    constraint_flag: int | None = None
    """Numeric constraint flag for video profiles that encode one."""

    bit_depth: int | None = None
    """Sample bit depth, or ``None`` when the family does not encode it."""

    bit_depth_flag: str | None = None
    """Bit-depth token as written in the identifier (e.g. ``"10"``)."""

    supports_surround: bool = False
    passthrough_supported: bool = False


# ---------------------------------------------------------------------------
# Codec family (catalog entry)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CodecFamily:
    """A codec standard with its closed catalog of profiles and levels.

    Families are read-only configuration tables; see
    :mod:`cast_profiles.core.catalog` for the registered ones.
    """

    name: str
    kind: CodecKind
    tag: str
    """Identifier prefix, e.g. ``hev1`` or ``mp4a``."""

    profiles: tuple[Profile, ...]
    fragment: FragmentRule = field(compare=False, repr=False)
    default_profile: str
    levels: tuple[float, ...] = ()
    """Valid levels in catalog units (``5.1`` is level 5.1).  Empty for audio."""

    default_level: float | None = None

    def has_profile(self, candidate: Profile) -> bool:
        """Return ``True`` iff *candidate* is one of this family's profiles."""
        return candidate in self.profiles

    def has_level(self, level: float | None) -> bool:
        """Return ``True`` iff *level* is one of this family's levels."""
        return level is not None and level in self.levels

    def profile(self, name: str) -> Profile:
        """Look up a catalog profile by name.

        Raises
        ------
        UnknownCatalogEntry
            If the family has no profile called *name*.
        """
        for candidate in self.profiles:
            if candidate.name == name:
                return candidate
        known = ", ".join(p.name for p in self.profiles)
        raise UnknownCatalogEntry(
            f"Unknown {self.name} profile: {name}",
            hint=f"Known profiles: {known}",
        )

    def configure(self, profile: Profile, level: float | None = None) -> Codec:
        """Build a validated :class:`Codec` of this family."""
        return Codec(family=self, profile=profile, level=level)

    def default_configuration(self) -> Codec:
        """Return the family's default ``(profile, level)`` configuration."""
        return self.configure(self.profile(self.default_profile), self.default_level)


# ---------------------------------------------------------------------------
# Configured codec
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Codec:
    """One configured codec: a family plus a chosen profile (and level).

    Construction validates the profile (and, for video, the level)
    against the family's catalog; there is no partially configured
    codec.
    """

    family: CodecFamily
    profile: Profile
    level: float | None = None

    def __post_init__(self) -> None:
        if not self.family.has_profile(self.profile):
            raise InvalidConfiguration(
                f"Profile {self.profile.name!r} is not in the "
                f"{self.family.name} catalog",
                constraint="profile",
            )
        if self.family.kind is CodecKind.VIDEO:
            if not self.family.has_level(self.level):
                raise InvalidConfiguration(
                    f"Level {self.level} is not valid for {self.family.name}",
                    constraint="level",
                )
        elif self.level is not None:
            raise InvalidConfiguration(
                f"Audio codec {self.family.name} does not take a level",
                constraint="level",
            )

    @property
    def kind(self) -> CodecKind:
        return self.family.kind

    @property
    def identifier_fragment(self) -> str:
        """The codec-specific identifier substring, e.g. ``hev1.1.0.L150.B0``."""
        return self.family.fragment(self.family.tag, self.profile, self.level)


# ---------------------------------------------------------------------------
# Container
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MediaContainer:
    """A wrapper format with its MIME type and the codec families it carries.

    The order of each codec tuple is the enumeration preference order.
    A container with no audio families is video-only and never yields
    combined configurations.
    """

    name: str
    mime_type: str
    supported_video_codecs: tuple[CodecFamily, ...]
    supported_audio_codecs: tuple[CodecFamily, ...] = ()

    def codecs_for(self, kind: CodecKind) -> tuple[CodecFamily, ...]:
        if kind is CodecKind.VIDEO:
            return self.supported_video_codecs
        return self.supported_audio_codecs

    def carries(self, family: CodecFamily) -> bool:
        return family in self.codecs_for(family.kind)


# ---------------------------------------------------------------------------
# Media profile (enumeration result)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MediaProfile:
    """A playable configuration: container plus video and/or audio codec."""

    container: MediaContainer
    video_codec: Codec | None = None
    audio_codec: Codec | None = None

    def __post_init__(self) -> None:
        if self.video_codec is None and self.audio_codec is None:
            raise EmptyMediaProfile(
                "A media profile needs at least one of video_codec or audio_codec",
            )
        for codec, kind in (
            (self.video_codec, CodecKind.VIDEO),
            (self.audio_codec, CodecKind.AUDIO),
        ):
            if codec is None:
                continue
            if codec.kind is not kind:
                raise InvalidConfiguration(
                    f"{codec.family.name} is not a {kind.value} codec",
                    constraint="kind",
                )
            if not self.container.carries(codec.family):
                raise InvalidConfiguration(
                    f"{self.container.name} does not carry {codec.family.name}",
                    constraint="container",
                )

    @property
    def identifier_string(self) -> str:
        """Full negotiation string, e.g. ``video/mp4; codecs="avc1.640029"``."""
        return build_identifier_string(
            self.container.mime_type,
            self.video_codec.identifier_fragment if self.video_codec else None,
            self.audio_codec.identifier_fragment if self.audio_codec else None,
        )

    @classmethod
    def get_supported_configurations(
        cls,
        capabilities: CapabilityProvider,
        *,
        require_video: bool,
        require_audio: bool,
        containers: Sequence[MediaContainer] | None = None,
    ) -> list[MediaProfile]:
        """Enumerate every configuration *capabilities* approves.

        See :func:`cast_profiles.core.negotiator.get_supported_configurations`.
        """
        from cast_profiles.core.negotiator import get_supported_configurations

        return get_supported_configurations(
            capabilities,
            require_video=require_video,
            require_audio=require_audio,
            containers=containers,
        )
