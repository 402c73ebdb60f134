"""Closed, read-only catalog of codec families and containers.

The tables are built once at import time and never mutated.  Adding a
codec family means registering a new :class:`CodecFamily` entry with its
profiles, levels and fragment rule, without subclassing.

Order matters: :data:`CONTAINERS` and each container's codec tuples are
the enumeration preference order (newer codecs first).
"""

from __future__ import annotations

from cast_profiles.core.identifiers import (
    audio_fragment,
    av1_fragment,
    avc_fragment,
    hevc_fragment,
    vp9_fragment,
)
from cast_profiles.core.models import CodecFamily, CodecKind, MediaContainer, Profile
from cast_profiles.exceptions import UnknownCatalogEntry


# ---------------------------------------------------------------------------
# Video families
# ---------------------------------------------------------------------------

HEVC = CodecFamily(
    name="hevc",
    kind=CodecKind.VIDEO,
    tag="hev1",
    profiles=(
        Profile("main", "L", constraint_flag=0),
        Profile("main10", "L", constraint_flag=4, bit_depth=10),
        Profile("high", "H", constraint_flag=4),
        Profile("high10", "H", constraint_flag=4, bit_depth=10),
    ),
    fragment=hevc_fragment,
    default_profile="main",
    levels=(1.0, 2.0, 2.1, 3.0, 3.1, 4.0, 4.1, 5.0, 5.1, 5.2, 6.0, 6.1, 6.2),
    default_level=5.0,
)

H264 = CodecFamily(
    name="h264",
    kind=CodecKind.VIDEO,
    tag="avc1",
    profiles=(
        Profile("baseline", "42", constraint_flag=0xE0, bit_depth=8),
        Profile("main", "4D", constraint_flag=0x40, bit_depth=8),
        Profile("high", "64", constraint_flag=0x00, bit_depth=8),
        Profile("high10", "6E", constraint_flag=0x00, bit_depth=10),
    ),
    fragment=avc_fragment,
    default_profile="high",
    levels=(
        1.0, 1.1, 1.2, 1.3,
        2.0, 2.1, 2.2,
        3.0, 3.1, 3.2,
        4.0, 4.1, 4.2,
        5.0, 5.1, 5.2,
    ),
    default_level=4.1,
)

AV1 = CodecFamily(
    name="av1",
    kind=CodecKind.VIDEO,
    tag="av01",
    profiles=(
        Profile("main8", "0", bit_depth=8, bit_depth_flag="08"),
        Profile("main10", "0", bit_depth=10, bit_depth_flag="10"),
        Profile("high8", "1", bit_depth=8, bit_depth_flag="08"),
        Profile("high10", "1", bit_depth=10, bit_depth_flag="10"),
    ),
    fragment=av1_fragment,
    default_profile="main8",
    levels=(
        2.0, 2.1, 2.2, 2.3,
        3.0, 3.1, 3.2, 3.3,
        4.0, 4.1, 4.2, 4.3,
        5.0, 5.1, 5.2, 5.3,
        6.0, 6.1, 6.2, 6.3,
    ),
    default_level=5.0,
)

VP9 = CodecFamily(
    name="vp9",
    kind=CodecKind.VIDEO,
    tag="vp09",
    profiles=(
        Profile("profile0", "00", bit_depth=8, bit_depth_flag="08"),
        Profile("profile2", "02", bit_depth=10, bit_depth_flag="10"),
    ),
    fragment=vp9_fragment,
    default_profile="profile0",
    levels=(
        1.0, 1.1, 2.0, 2.1, 3.0, 3.1, 4.0, 4.1,
        5.0, 5.1, 5.2, 6.0, 6.1, 6.2,
    ),
    default_level=4.1,
)


# ---------------------------------------------------------------------------
# Audio families
# ---------------------------------------------------------------------------

MP4A = CodecFamily(
    name="mp4a",
    kind=CodecKind.AUDIO,
    tag="mp4a",
    profiles=(
        Profile("lc_aac", "mp4a.40.2", supports_surround=True),
        Profile("he_aac", "mp4a.40.5", supports_surround=True),
        Profile("he_aac_v2", "mp4a.40.29", supports_surround=True),
        Profile("eac3", "ec-3", supports_surround=True, passthrough_supported=True),
        Profile("mpeg_h", "mhm1.0x0D", supports_surround=True),
        # Same wire flag as eac3; devices approve it separately.
        Profile("atmos", "ec-3", supports_surround=True, passthrough_supported=True),
    ),
    fragment=audio_fragment,
    default_profile="lc_aac",
)

OPUS = CodecFamily(
    name="opus",
    kind=CodecKind.AUDIO,
    tag="opus",
    profiles=(Profile("opus", "opus", supports_surround=True),),
    fragment=audio_fragment,
    default_profile="opus",
)

VORBIS = CodecFamily(
    name="vorbis",
    kind=CodecKind.AUDIO,
    tag="vorbis",
    profiles=(Profile("vorbis", "vorbis"),),
    fragment=audio_fragment,
    default_profile="vorbis",
)

FLAC = CodecFamily(
    name="flac",
    kind=CodecKind.AUDIO,
    tag="flac",
    profiles=(Profile("flac", "flac", supports_surround=True),),
    fragment=audio_fragment,
    default_profile="flac",
)


FAMILIES: tuple[CodecFamily, ...] = (HEVC, H264, AV1, VP9, MP4A, OPUS, VORBIS, FLAC)


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

MP4 = MediaContainer(
    name="mp4",
    mime_type="video/mp4",
    supported_video_codecs=(AV1, HEVC, H264),
    supported_audio_codecs=(MP4A, OPUS, FLAC),
)

WEBM = MediaContainer(
    name="webm",
    mime_type="video/webm",
    supported_video_codecs=(AV1, VP9),
    supported_audio_codecs=(OPUS, VORBIS),
)

MKV = MediaContainer(
    name="mkv",
    mime_type="video/x-matroska",
    supported_video_codecs=(AV1, HEVC, VP9, H264),
    supported_audio_codecs=(MP4A, OPUS, VORBIS, FLAC),
)

CONTAINERS: tuple[MediaContainer, ...] = (MP4, WEBM, MKV)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def get_family(name: str) -> CodecFamily:
    """Return the registered family called *name* (case-insensitive)."""
    wanted = name.strip().lower()
    for family in FAMILIES:
        if family.name == wanted:
            return family
    raise UnknownCatalogEntry(
        f"Unknown codec family: {name}",
        hint="Known families: " + ", ".join(f.name for f in FAMILIES),
    )


def get_container(name: str) -> MediaContainer:
    """Return the container called *name*, also accepting its MIME type."""
    wanted = name.strip().lower()
    for container in CONTAINERS:
        if wanted in (container.name, container.mime_type):
            return container
    raise UnknownCatalogEntry(
        f"Unknown container: {name}",
        hint="Known containers: " + ", ".join(c.name for c in CONTAINERS),
    )
