"""Enumeration of device-supported media configurations.

Pipeline order (enforced by :func:`get_supported_configurations`):

1. **Gather**: for every container the device accepts, ask the
   capability provider about each catalog ``(profile, level)`` of each
   codec family the container carries.  All answers are collected
   before anything is expanded, so the result never interleaves with
   provider calls.
2. **Expand**: build audio-only, video-only or combined
   :class:`MediaProfile` results from the approved codecs.

Result order is container catalog order, then the container's codec
order, then profile catalog order, then ascending level.  An empty list
means the device supports nothing that was requested.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from cast_profiles.core.catalog import CONTAINERS
from cast_profiles.core.models import (
    Codec,
    CodecFamily,
    CodecKind,
    MediaContainer,
    MediaProfile,
    Profile,
)
from cast_profiles.core.protocols import CapabilityProvider

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# 1. Gather
# ---------------------------------------------------------------------------

class _CapabilityAnswers:
    """Memoises provider answers shared between containers."""

    def __init__(self, provider: CapabilityProvider) -> None:
        self._provider: CapabilityProvider = provider
        self._codecs: dict[tuple[CodecFamily, Profile, float | None], bool] = {}

    def container(self, container: MediaContainer) -> bool:
        return bool(self._provider.supports_container(container))

    def codec(self, family: CodecFamily, profile: Profile, level: float | None) -> bool:
        key = (family, profile, level)
        if key not in self._codecs:
            self._codecs[key] = bool(
                self._provider.supports_codec(family, profile, level),
            )
        return self._codecs[key]


def catalog_pairs(family: CodecFamily) -> Iterator[tuple[Profile, float | None]]:
    """Yield every ``(profile, level)`` a family's catalog allows.

    Audio families have no levels and yield ``(profile, None)``.
    """
    for profile in family.profiles:
        if family.kind is CodecKind.AUDIO:
            yield profile, None
            continue
        for level in family.levels:
            yield profile, level


def _approved_codecs(
    container: MediaContainer,
    kind: CodecKind,
    answers: _CapabilityAnswers,
) -> list[Codec]:
    approved: list[Codec] = []
    for family in container.codecs_for(kind):
        for profile, level in catalog_pairs(family):
            if answers.codec(family, profile, level):
                approved.append(family.configure(profile, level))
    return approved


# ---------------------------------------------------------------------------
# 2. Expand
# ---------------------------------------------------------------------------

def _expand(
    container: MediaContainer,
    video: Sequence[Codec],
    audio: Sequence[Codec],
    *,
    require_video: bool,
    require_audio: bool,
) -> list[MediaProfile]:
    if require_video and require_audio:
        return [
            MediaProfile(container, video_codec=v, audio_codec=a)
            for v in video
            for a in audio
        ]
    if require_video:
        return [MediaProfile(container, video_codec=v) for v in video]
    return [MediaProfile(container, audio_codec=a) for a in audio]


# ---------------------------------------------------------------------------
# Composite pipeline
# ---------------------------------------------------------------------------

def get_supported_configurations(
    capabilities: CapabilityProvider,
    *,
    require_video: bool,
    require_audio: bool,
    containers: Sequence[MediaContainer] | None = None,
) -> list[MediaProfile]:
    """Return every configuration *capabilities* approves, in preference order.

    Parameters
    ----------
    capabilities:
        Any object satisfying :class:`CapabilityProvider`.
    require_video, require_audio:
        Which media types each configuration must carry.  When both
        are ``False`` nothing can be built and the result is empty.
    containers:
        Containers to consider; defaults to the catalog.
    """
    if containers is None:
        containers = CONTAINERS
    if not (require_video or require_audio):
        return []

    answers = _CapabilityAnswers(capabilities)

    gathered: list[tuple[MediaContainer, list[Codec], list[Codec]]] = []
    for container in containers:
        if not answers.container(container):
            logger.debug("Container %s not supported by device", container.name)
            continue
        video = (
            _approved_codecs(container, CodecKind.VIDEO, answers)
            if require_video else []
        )
        audio = (
            _approved_codecs(container, CodecKind.AUDIO, answers)
            if require_audio else []
        )
        gathered.append((container, video, audio))

    results: list[MediaProfile] = []
    for container, video, audio in gathered:
        expanded = _expand(
            container,
            video,
            audio,
            require_video=require_video,
            require_audio=require_audio,
        )
        logger.debug(
            "Container %s: %d video, %d audio, %d configuration(s)",
            container.name, len(video), len(audio), len(expanded),
        )
        results.extend(expanded)
    return results


def get_supported_identifiers(
    capabilities: CapabilityProvider,
    *,
    require_video: bool,
    require_audio: bool,
    containers: Sequence[MediaContainer] | None = None,
) -> list[str]:
    """Like :func:`get_supported_configurations`, as identifier strings."""
    return [
        profile.identifier_string
        for profile in get_supported_configurations(
            capabilities,
            require_video=require_video,
            require_audio=require_audio,
            containers=containers,
        )
    ]
