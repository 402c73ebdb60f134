"""Infrastructure layer — capability sources.

Adapters here satisfy :class:`~cast_profiles.core.protocols.CapabilityProvider`
and translate external data (device description files, presets) into
core types.  Every third-party exception is caught here and re-raised
as a :class:`~cast_profiles.exceptions.CastProfilesError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from cast_profiles.infra.capabilities import AllCapabilities, StaticCapabilities
from cast_profiles.infra.device_file import (
    CodecSupport,
    DeviceDescription,
    load_device_file,
)
from cast_profiles.infra.presets import load_preset, preset_names

__all__: list[str] = [
    "AllCapabilities",
    "CodecSupport",
    "DeviceDescription",
    "StaticCapabilities",
    "load_device_file",
    "load_preset",
    "preset_names",
]
