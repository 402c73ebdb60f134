"""Tests for identifier formatting (core/identifiers.py).

Every test is a pure function call.  Expected strings are the exact
bytes a receiver's capability API is queried with.
"""

from __future__ import annotations

import pytest

from cast_profiles.core.catalog import AV1, FLAC, H264, HEVC, MP4A, VP9
from cast_profiles.core.identifiers import build_identifier_string, scale_level
from cast_profiles.exceptions import EmptyMediaProfile


class TestScaleLevel:
    def test_absorbs_float_artefacts(self) -> None:
        assert scale_level(2.1, 30) == 63

    def test_integer_level(self) -> None:
        assert scale_level(5.0, 30) == 150

    def test_none_level_rejected(self) -> None:
        with pytest.raises(ValueError):
            scale_level(None, 30)


class TestVideoFragments:
    @pytest.mark.parametrize(
        ("profile", "level", "expected"),
        [
            ("main", 5.0, "hev1.1.0.L150.B0"),
            ("main", 2.1, "hev1.1.0.L63.B0"),
            ("main10", 5.1, "hev1.1.4.L153.B0"),
            ("high", 6.2, "hev1.1.4.H186.B0"),
        ],
    )
    def test_hevc(self, profile: str, level: float, expected: str) -> None:
        codec = HEVC.configure(HEVC.profile(profile), level)
        assert codec.identifier_fragment == expected

    @pytest.mark.parametrize(
        ("profile", "level", "expected"),
        [
            ("baseline", 3.0, "avc1.42E01E"),
            ("main", 3.1, "avc1.4D401F"),
            ("high", 4.1, "avc1.640029"),
            ("high", 4.2, "avc1.64002A"),
            ("high10", 5.1, "avc1.6E0033"),
        ],
    )
    def test_h264(self, profile: str, level: float, expected: str) -> None:
        codec = H264.configure(H264.profile(profile), level)
        assert codec.identifier_fragment == expected

    @pytest.mark.parametrize(
        ("profile", "level", "expected"),
        [
            ("main8", 2.0, "av01.0.00M.08"),
            ("main8", 5.0, "av01.0.12M.08"),
            ("main10", 5.1, "av01.0.13M.10"),
            ("high10", 4.1, "av01.1.09M.10"),
            ("high8", 6.3, "av01.1.19M.08"),
        ],
    )
    def test_av1(self, profile: str, level: float, expected: str) -> None:
        codec = AV1.configure(AV1.profile(profile), level)
        assert codec.identifier_fragment == expected

    @pytest.mark.parametrize(
        ("profile", "level", "expected"),
        [
            ("profile0", 1.0, "vp09.00.10.08"),
            ("profile0", 4.1, "vp09.00.41.08"),
            ("profile2", 5.1, "vp09.02.51.10"),
        ],
    )
    def test_vp9(self, profile: str, level: float, expected: str) -> None:
        codec = VP9.configure(VP9.profile(profile), level)
        assert codec.identifier_fragment == expected


class TestAudioFragments:
    @pytest.mark.parametrize(
        ("profile", "expected"),
        [
            ("lc_aac", "mp4a.40.2"),
            ("he_aac", "mp4a.40.5"),
            ("he_aac_v2", "mp4a.40.29"),
            ("eac3", "ec-3"),
            ("atmos", "ec-3"),
            ("mpeg_h", "mhm1.0x0D"),
        ],
    )
    def test_mp4a_profile_flag_is_fragment(self, profile: str, expected: str) -> None:
        codec = MP4A.configure(MP4A.profile(profile))
        assert codec.identifier_fragment == expected

    def test_flac(self) -> None:
        assert FLAC.default_configuration().identifier_fragment == "flac"


class TestBuildIdentifierString:
    def test_video_only_has_no_separator(self) -> None:
        assert (
            build_identifier_string("video/mp4", "hev1.1.0.L150.B0", None)
            == 'video/mp4; codecs="hev1.1.0.L150.B0"'
        )

    def test_audio_only_has_no_separator(self) -> None:
        assert (
            build_identifier_string("video/mp4", None, "mp4a.40.2")
            == 'video/mp4; codecs="mp4a.40.2"'
        )

    def test_video_precedes_audio(self) -> None:
        assert (
            build_identifier_string("video/webm", "vp09.00.41.08", "opus")
            == 'video/webm; codecs="vp09.00.41.08, opus"'
        )

    def test_no_fragments_rejected(self) -> None:
        with pytest.raises(EmptyMediaProfile):
            build_identifier_string("video/mp4", None, None)
