"""Built-in device descriptions.

Approximate public capability sheets of common cast receivers, kept as
plain data and validated through :class:`DeviceDescription` on load.
"""

from __future__ import annotations

from typing import Any

from cast_profiles.exceptions import DeviceProfileError
from cast_profiles.infra.device_file import DeviceDescription

_COMMON_AUDIO: dict[str, Any] = {
    "opus": {},
    "vorbis": {},
    "flac": {},
}

PRESETS: dict[str, dict[str, Any]] = {
    "chromecast-gen3": {
        "name": "Chromecast (3rd gen)",
        "containers": ["mp4", "webm"],
        "codecs": {
            "h264": {"profiles": ["baseline", "main", "high"], "max_level": 4.2},
            "mp4a": {"profiles": ["lc_aac", "he_aac"]},
            **_COMMON_AUDIO,
        },
    },
    "chromecast-ultra": {
        "name": "Chromecast Ultra",
        "containers": ["mp4", "webm"],
        "codecs": {
            "h264": {"profiles": ["baseline", "main", "high"], "max_level": 4.2},
            "hevc": {"profiles": ["main", "main10"], "max_level": 5.1},
            "vp9": {"profiles": ["profile0", "profile2"], "max_level": 5.1},
            "mp4a": {"profiles": ["lc_aac", "he_aac", "eac3"]},
            **_COMMON_AUDIO,
        },
    },
    "google-tv-4k": {
        "name": "Chromecast with Google TV (4K)",
        "containers": ["mp4", "webm", "mkv"],
        "codecs": {
            "h264": {"profiles": ["baseline", "main", "high"], "max_level": 5.1},
            "hevc": {"profiles": ["main", "main10"], "max_level": 5.1},
            "vp9": {"profiles": ["profile0", "profile2"], "max_level": 5.1},
            "mp4a": {
                "profiles": ["lc_aac", "he_aac", "he_aac_v2", "eac3", "atmos"],
            },
            **_COMMON_AUDIO,
        },
    },
}


def preset_names() -> list[str]:
    """Return built-in preset names in declaration order."""
    return list(PRESETS)


def load_preset(name: str) -> DeviceDescription:
    """Return the built-in description called *name*.

    Raises
    ------
    DeviceProfileError
        If no preset has that name.
    """
    data = PRESETS.get(name.strip().lower())
    if data is None:
        raise DeviceProfileError(
            f"Unknown device preset: {name}",
            hint="Available presets: " + ", ".join(preset_names()),
        )
    return DeviceDescription.model_validate(data)
