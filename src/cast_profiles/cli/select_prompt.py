"""Interactive configuration selection for the CLI layer.

Renders the supported configurations as a Rich table, then lets the
user pick one with questionary arrow-key selection and returns the
chosen :class:`MediaProfile`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from cast_profiles.cli.render import format_codec, render_configurations
from cast_profiles.core.models import MediaProfile
from cast_profiles.exceptions import EnvironmentError, SelectionError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _build_choice_label(index: int, profile: MediaProfile) -> str:
    """Build the single-line label shown in the questionary selector.

    Format: ``"  1.  mp4    hevc main @ 5.0 + mp4a lc_aac"``
    """
    codecs = " + ".join(
        format_codec(codec)
        for codec in (profile.video_codec, profile.audio_codec)
        if codec is not None
    )
    return f"  {index + 1}.  {profile.container.name:<6} {codecs}"


def prompt_configuration_selection(
    device_name: str,
    profiles: Sequence[MediaProfile],
) -> MediaProfile:
    """Display *profiles* and prompt the user to pick one.

    Raises
    ------
    SelectionError
        If there is nothing to choose from, or the user cancels the
        prompt (Esc / Ctrl+C make questionary return ``None``).
    """
    if not profiles:
        raise SelectionError(
            f"No supported configurations for {device_name}.",
            hint="Try '--media video' or '--media audio', or another device.",
        )

    questionary = _import_questionary()

    render_configurations(device_name, profiles)

    choices = [
        questionary.Choice(title=_build_choice_label(i, profile), value=i)
        for i, profile in enumerate(profiles)
    ]

    selected: int | None = questionary.select(
        "Select a playback configuration:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()

    if selected is None:
        raise SelectionError(
            "No configuration selected.",
            hint="Use arrow keys to pick a configuration, then press Enter.",
        )

    return profiles[selected]
