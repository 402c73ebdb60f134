"""CLI application entry point and command routing for cast-profiles.

This module is the **sole error boundary** for the entire application.
It catches :class:`~cast_profiles.exceptions.CastProfilesError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; enumeration is delegated to the core
  layer and capability loading to the infrastructure layer.
* ``list --plain`` and ``choose`` write identifier strings to stdout;
  tables, notices and errors go to stderr via the console proxy.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from cast_profiles.cli import exit_codes
from cast_profiles.cli.console import console
from cast_profiles.exceptions import CastProfilesError
from cast_profiles.version import __version__

if TYPE_CHECKING:
    from cast_profiles.core.models import MediaProfile
    from cast_profiles.core.protocols import CapabilityProvider

_MEDIA_REQUIREMENTS: dict[str, tuple[bool, bool]] = {
    "both": (True, True),
    "video": (True, False),
    "audio": (False, True),
}
"""``--media`` choice → ``(require_video, require_audio)``."""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_device_options(parser: argparse.ArgumentParser) -> None:
    """Options shared by the enumerating sub-commands."""
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-d",
        "--device",
        default=None,
        help="Built-in device preset (see 'devices').",
    )
    source.add_argument(
        "-f",
        "--device-file",
        type=Path,
        default=None,
        help="JSON device description file.",
    )
    source.add_argument(
        "--all",
        action="store_true",
        help="Approve the whole catalog instead of a device.",
    )
    parser.add_argument(
        "-m",
        "--media",
        choices=sorted(_MEDIA_REQUIREMENTS),
        default="both",
        help="Media types each configuration must carry (default: both).",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``cast-profiles list``     — print supported identifier strings
    * ``cast-profiles choose``   — pick one configuration interactively
    * ``cast-profiles catalog``  — show codec families and containers
    * ``cast-profiles devices``  — show built-in device presets
    """
    parser = argparse.ArgumentParser(
        prog="cast-profiles",
        description="Enumerate cast-device media configurations.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log enumeration details to stderr.",
    )
    commands = parser.add_subparsers(dest="command")

    list_parser = commands.add_parser(
        "list",
        help="Print supported configurations.",
    )
    _add_device_options(list_parser)
    list_parser.add_argument(
        "--plain",
        action="store_true",
        help="Print one identifier string per line, without a table.",
    )

    choose_parser = commands.add_parser(
        "choose",
        help="Pick one supported configuration interactively.",
    )
    _add_device_options(choose_parser)

    commands.add_parser("catalog", help="Show codec families and containers.")
    commands.add_parser("devices", help="Show built-in device presets.")
    return parser


# ---------------------------------------------------------------------------
# Capability resolution
# ---------------------------------------------------------------------------

def _resolve_capabilities(args: argparse.Namespace) -> tuple[str, CapabilityProvider]:
    """Return ``(device name, capability provider)`` for the parsed options.

    Precedence: ``--all``, ``--device-file``, ``--device``, then the
    ``CAST_PROFILES_DEVICE_FILE`` / ``CAST_PROFILES_DEVICE`` settings.
    """
    from cast_profiles.config import get_settings
    from cast_profiles.infra.capabilities import AllCapabilities
    from cast_profiles.infra.device_file import load_device_file
    from cast_profiles.infra.presets import load_preset

    if args.all:
        return "full catalog", AllCapabilities()

    settings = get_settings()
    if args.device_file is not None:
        description = load_device_file(args.device_file)
    elif args.device is not None:
        description = load_preset(args.device)
    elif settings.device_file is not None:
        description = load_device_file(settings.device_file)
    else:
        description = load_preset(settings.device)
    return description.name, description.to_capabilities()


def _enumerate(args: argparse.Namespace) -> tuple[str, list[MediaProfile]]:
    """Run the enumerator for the parsed options."""
    from cast_profiles.core.negotiator import get_supported_configurations

    device_name, capabilities = _resolve_capabilities(args)
    require_video, require_audio = _MEDIA_REQUIREMENTS[args.media]
    profiles = get_supported_configurations(
        capabilities,
        require_video=require_video,
        require_audio=require_audio,
    )
    return device_name, profiles


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_list(args: argparse.Namespace) -> int:
    """Print every supported configuration for the selected device."""
    device_name, profiles = _enumerate(args)

    if not profiles:
        console.print(
            f"[yellow]No supported configurations for {device_name}.[/yellow]",
        )
        return exit_codes.SUCCESS

    if args.plain:
        for profile in profiles:
            print(profile.identifier_string)
        return exit_codes.SUCCESS

    from cast_profiles.cli.render import render_configurations

    render_configurations(device_name, profiles)
    return exit_codes.SUCCESS


def _handle_choose(args: argparse.Namespace) -> int:
    """Prompt for one configuration and print its identifier string."""
    from cast_profiles.cli.select_prompt import prompt_configuration_selection

    device_name, profiles = _enumerate(args)
    chosen = prompt_configuration_selection(device_name, profiles)
    print(chosen.identifier_string)
    return exit_codes.SUCCESS


def _handle_catalog() -> int:
    from cast_profiles.cli.render import render_catalog

    render_catalog()
    return exit_codes.SUCCESS


def _handle_devices() -> int:
    from cast_profiles.cli.render import render_devices

    render_devices()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the cast-profiles CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    from cast_profiles.cli.logging_setup import configure_logging
    from cast_profiles.config import get_settings

    configure_logging(args.verbose or get_settings().debug)

    if args.command == "list":
        return _handle_list(args)
    if args.command == "choose":
        return _handle_choose(args)
    if args.command == "catalog":
        return _handle_catalog()
    return _handle_devices()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a
    raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CastProfilesError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
