"""Device descriptions — pydantic models for device capability data.

A device description is JSON of the form::

    {
      "name": "Living room TV",
      "containers": ["mp4", "webm"],
      "codecs": {
        "hevc": {"profiles": ["main", "main10"], "max_level": 5.1},
        "mp4a": {"profiles": ["lc_aac"]},
        "opus": {}
      }
    }

An empty ``profiles`` list approves every profile of the family.  Names
are validated against the catalog when converted to capabilities; every
failure surfaces as :class:`~cast_profiles.exceptions.DeviceProfileError`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cast_profiles.core.catalog import get_container, get_family
from cast_profiles.core.models import CodecKind
from cast_profiles.exceptions import DeviceProfileError, UnknownCatalogEntry
from cast_profiles.infra.capabilities import StaticCapabilities


class CodecSupport(BaseModel):
    """Support entry for one codec family."""

    model_config = ConfigDict(extra="forbid")

    profiles: list[str] = Field(
        default_factory=list,
        description="Approved profile names; empty approves every profile",
    )
    max_level: Optional[float] = Field(
        default=None,
        description="Highest decodable level (video families only)",
    )


class DeviceDescription(BaseModel):
    """Capabilities of one playback device."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(description="Human-readable device name")
    containers: list[str] = Field(description="Playable container names or MIME types")
    codecs: dict[str, CodecSupport] = Field(
        default_factory=dict,
        description="Supported codec families keyed by family name",
    )

    def to_capabilities(self) -> StaticCapabilities:
        """Resolve names against the catalog into approval tables.

        Raises
        ------
        DeviceProfileError
            When a container, family or profile name is unknown, or a
            level limit is given for an audio family.
        """
        try:
            containers = frozenset(get_container(name).name for name in self.containers)
            pairs: set[tuple[str, str]] = set()
            max_levels: dict[str, float] = {}
            for family_name, support in self.codecs.items():
                family = get_family(family_name)
                names = support.profiles or [p.name for p in family.profiles]
                pairs.update((family.name, family.profile(n).name) for n in names)
                if support.max_level is None:
                    continue
                if family.kind is CodecKind.AUDIO:
                    raise DeviceProfileError(
                        f"{self.name}: max_level is not valid for audio family "
                        f"{family.name}",
                    )
                max_levels[family.name] = support.max_level
        except UnknownCatalogEntry as exc:
            raise DeviceProfileError(f"{self.name}: {exc}", hint=exc.hint) from exc

        return StaticCapabilities(
            containers=containers,
            profiles=frozenset(pairs),
            max_levels=max_levels,
        )


def load_device_file(path: Path) -> DeviceDescription:
    """Read and validate a device description from *path*.

    Raises
    ------
    DeviceProfileError
        If the file cannot be read or does not match the schema.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DeviceProfileError(f"Cannot read device file {path}: {exc}") from exc

    try:
        return DeviceDescription.model_validate_json(text)
    except ValidationError as exc:
        raise DeviceProfileError(
            f"Invalid device file {path}",
            hint=str(exc),
        ) from exc
