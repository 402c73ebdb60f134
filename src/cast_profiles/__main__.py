"""Allow ``python -m cast_profiles`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m cast_profiles`` behaves identically to the ``cast-profiles``
console script.
"""

from __future__ import annotations

from cast_profiles.cli.app import cli

if __name__ == "__main__":
    cli()
