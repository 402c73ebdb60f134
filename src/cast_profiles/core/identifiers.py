"""Pure identifier-string formatting.

Every function in this module is a **pure** transformation with no I/O
and no side effects.

Two layers:

1. **Fragment rules**: one per codec family, registered on the
   family's catalog entry.  Each takes ``(tag, profile, level)`` and
   returns the codec substring (``hev1.1.0.L150.B0``, ``mp4a.40.2``).
2. **Assembler**: :func:`build_identifier_string` joins a container
   MIME type with the fragments into the exact negotiation string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cast_profiles.exceptions import EmptyMediaProfile

if TYPE_CHECKING:
    from cast_profiles.core.models import Profile


# ---------------------------------------------------------------------------
# Level helpers
# ---------------------------------------------------------------------------

def scale_level(level: float | None, factor: int) -> int:
    """Convert a catalog level to the identifier's integer scale.

    ``round`` absorbs float artefacts (``2.1 * 30 == 63.00000000000001``).
    """
    if level is None:
        raise ValueError("video fragment rules require a level")
    return round(level * factor)


def _split_level(level: float | None) -> tuple[int, int]:
    """Split ``5.1`` into ``(5, 1)``."""
    tenths = scale_level(level, 10)
    return divmod(tenths, 10)


# ---------------------------------------------------------------------------
# Fragment rules
# ---------------------------------------------------------------------------

def hevc_fragment(tag: str, profile: Profile, level: float | None) -> str:
    """``hev1.1.<constraint>.<flag><level*30>.B0``, e.g. ``hev1.1.0.L150.B0``."""
    return (
        f"{tag}.1.{profile.constraint_flag}."
        f"{profile.flag}{scale_level(level, 30)}.B0"
    )


def avc_fragment(tag: str, profile: Profile, level: float | None) -> str:
    """``avc1.PPCCLL`` in upper-case hex, e.g. ``avc1.640029`` for high@4.1."""
    constraint = profile.constraint_flag or 0
    return f"{tag}.{profile.flag}{constraint:02X}{scale_level(level, 10):02X}"


def av1_fragment(tag: str, profile: Profile, level: float | None) -> str:
    """``av01.<profile>.<seq_level_idx>M.<depth>``, e.g. ``av01.0.12M.08``."""
    major, minor = _split_level(level)
    seq_level_idx = (major - 2) * 4 + minor
    return f"{tag}.{profile.flag}.{seq_level_idx:02d}M.{profile.bit_depth_flag}"


def vp9_fragment(tag: str, profile: Profile, level: float | None) -> str:
    """``vp09.<profile>.<level*10>.<depth>``, e.g. ``vp09.00.41.08``."""
    return (
        f"{tag}.{profile.flag}.{scale_level(level, 10):02d}."
        f"{profile.bit_depth_flag}"
    )


def audio_fragment(tag: str, profile: Profile, level: float | None) -> str:
    """Audio identifiers are pre-baked in the profile flag."""
    return profile.flag


# ---------------------------------------------------------------------------
# Assembler
# ---------------------------------------------------------------------------

def build_identifier_string(
    mime_type: str,
    video_fragment: str | None,
    audio_fragment: str | None,
) -> str:
    """Join a MIME type and codec fragments into a negotiation string.

    Video precedes audio; the ``", "`` separator appears only when both
    are present::

        >>> build_identifier_string("video/mp4", "hev1.1.0.L150.B0", "mp4a.40.2")
        'video/mp4; codecs="hev1.1.0.L150.B0, mp4a.40.2"'
    """
    fragments = [f for f in (video_fragment, audio_fragment) if f is not None]
    if not fragments:
        raise EmptyMediaProfile("An identifier needs at least one codec fragment")
    return f'{mime_type}; codecs="{", ".join(fragments)}"'
