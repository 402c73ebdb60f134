"""Rich table rendering for configurations, the catalog and presets.

All display-related logic lives here — no enumeration, no capability
lookups.  Rich is imported lazily so that plain output paths keep
working without it.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from cast_profiles.cli.console import console
from cast_profiles.core.catalog import CONTAINERS, FAMILIES
from cast_profiles.core.models import Codec, CodecFamily, MediaProfile
from cast_profiles.exceptions import EnvironmentError
from cast_profiles.infra.presets import load_preset, preset_names


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
            hint="Use 'list --plain' for output without Rich.",
        ) from exc
    return Table


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms)
# ---------------------------------------------------------------------------

def _format_level(level: float | None) -> str:
    """Render a level as ``"5.1"`` or ``"—"`` for audio."""
    if level is None:
        return "—"
    return f"{level:.1f}"


def format_codec(codec: Codec | None) -> str:
    """Render ``"hevc main10 @ 5.1"``, ``"mp4a lc_aac"`` or ``"—"``."""
    if codec is None:
        return "—"
    label = f"{codec.family.name} {codec.profile.name}"
    if codec.level is not None:
        label += f" @ {_format_level(codec.level)}"
    return label


def _format_levels(family: CodecFamily) -> str:
    """Render a family's level range, e.g. ``"1.0–6.2"``."""
    if not family.levels:
        return "—"
    return f"{_format_level(family.levels[0])}–{_format_level(family.levels[-1])}"


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def render_configurations(device_name: str, profiles: Sequence[MediaProfile]) -> None:
    """Print one row per configuration with its identifier string."""
    table_class = _import_rich_table()

    table = table_class(
        title=f"Supported configurations — {device_name}",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Container", min_width=6)
    table.add_column("Video", min_width=12)
    table.add_column("Audio", min_width=10)
    table.add_column("Identifier", overflow="fold")

    for i, profile in enumerate(profiles, start=1):
        table.add_row(
            str(i),
            profile.container.name,
            format_codec(profile.video_codec),
            format_codec(profile.audio_codec),
            profile.identifier_string,
        )

    console.print()
    console.print(table)
    console.print(f"[dim]{len(profiles)} configuration(s)[/dim]")


def render_catalog() -> None:
    """Print the codec family and container catalogs."""
    table_class = _import_rich_table()

    families = table_class(
        title="Codec families",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    families.add_column("Family", style="bold", no_wrap=True)
    families.add_column("Kind")
    families.add_column("Profiles")
    families.add_column("Levels", justify="center")
    families.add_column("Default")
    for family in FAMILIES:
        families.add_row(
            family.name,
            family.kind.value,
            ", ".join(p.name for p in family.profiles),
            _format_levels(family),
            format_codec(family.default_configuration()),
        )

    containers = table_class(
        title="Containers",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    containers.add_column("Container", style="bold", no_wrap=True)
    containers.add_column("MIME type", no_wrap=True)
    containers.add_column("Video")
    containers.add_column("Audio")
    for container in CONTAINERS:
        containers.add_row(
            container.name,
            container.mime_type,
            ", ".join(f.name for f in container.supported_video_codecs),
            ", ".join(f.name for f in container.supported_audio_codecs) or "—",
        )

    console.print()
    console.print(families)
    console.print()
    console.print(containers)
    console.print()


def render_devices() -> None:
    """Print the built-in device presets."""
    table_class = _import_rich_table()

    table = table_class(
        title="Device presets",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Preset", style="bold", no_wrap=True)
    table.add_column("Device")
    table.add_column("Containers")
    table.add_column("Codecs")
    for name in preset_names():
        description = load_preset(name)
        table.add_row(
            name,
            description.name,
            ", ".join(description.containers),
            ", ".join(description.codecs),
        )

    console.print()
    console.print(table)
    console.print()
