"""cast-profiles — cast-device media capability enumeration.

Models codec profiles, containers and the negotiation identifier strings
a receiver's capability API expects (e.g.
``video/mp4; codecs="hev1.1.0.L150.B0, mp4a.40.2"``).
"""

from cast_profiles.version import __version__

__all__: list[str] = ["__version__"]
