"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from cast_profiles import __version__
from cast_profiles.cli import exit_codes
from cast_profiles.cli.app import main
from cast_profiles.exceptions import (
    CastProfilesError,
    DeviceProfileError,
    EmptyMediaProfile,
    EnvironmentError,
    InvalidConfiguration,
    SelectionError,
    UnknownCatalogEntry,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            EmptyMediaProfile,
            UnknownCatalogEntry,
            DeviceProfileError,
            SelectionError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[CastProfilesError]
    ) -> None:
        assert issubclass(exc_class, CastProfilesError)

    def test_invalid_configuration_inherits_from_base(self) -> None:
        assert issubclass(InvalidConfiguration, CastProfilesError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(CastProfilesError, Exception)

    def test_hint_is_stored(self) -> None:
        err = CastProfilesError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = CastProfilesError("boom")
        assert err.hint is None

    def test_invalid_configuration_records_constraint(self) -> None:
        err = InvalidConfiguration("bad level", constraint="level")
        assert err.constraint == "level"
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "cast-profiles" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    @patch("cast_profiles.cli.render.render_catalog")
    def test_catalog_dispatches(self, mock_render: object) -> None:
        assert main(["catalog"]) == exit_codes.SUCCESS

    @patch("cast_profiles.cli.render.render_devices")
    def test_devices_dispatches(self, mock_render: object) -> None:
        assert main(["devices"]) == exit_codes.SUCCESS

    def test_unknown_command_exits_with_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["frobnicate"])
        assert exc_info.value.code == 2
