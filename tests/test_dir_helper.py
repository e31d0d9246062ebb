"""Unit tests for uploadable.utilities.dir_helper — path canonicalization."""

import pytest

from uploadable.utilities.dir_helper import canonicalize, is_absolute, join


class TestCanonicalize:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("a/b/../c", "a/c"),
            ("a/./b/", "a/b"),
            ("/var//www/./upload/", "/var/www/upload"),
            ("../x/../../y", "../../y"),
            ("/../etc", "/etc"),
            ("a/..", "."),
            ("/", "/"),
            ("C:\\upload\\..\\img\\", "C:/img"),
            ("C:/", "C:/"),
            ("C:img/./x", "C:img/x"),
            ("C:a/..", "C:"),
        ],
    )
    def test_normalizes(self, raw, expected):
        assert canonicalize(raw) == expected

    def test_unc_prefix_kept(self):
        assert canonicalize("\\\\server\\share\\up") == "//server/share/up"
        assert canonicalize("//server/share/../other/") == "//server/other"
        assert is_absolute("\\\\server\\share")

    def test_empty_stays_empty(self):
        assert canonicalize("") == ""

    def test_idempotent(self):
        once = canonicalize("/srv//app/./public/../public/upload/")
        assert canonicalize(once) == once

    def test_does_not_touch_filesystem(self, tmp_path):
        missing = tmp_path / "nope" / ".." / "still-nope"
        assert canonicalize(str(missing)) == f"{tmp_path.as_posix()}/still-nope"
        assert not (tmp_path / "still-nope").exists()


class TestIsAbsolute:
    def test_posix(self):
        assert is_absolute("/srv/app")
        assert not is_absolute("srv/app")

    def test_drive(self):
        assert is_absolute("C:\\app")
        assert is_absolute("d:/app")
        assert not is_absolute("C:app")


class TestJoin:
    def test_joins_and_canonicalizes(self):
        assert join("/srv/app", "public", "upload/") == "/srv/app/public/upload"

    def test_skips_empty_parts(self):
        assert join("/srv/app", "", "public") == "/srv/app/public"

    def test_parent_segments(self):
        assert join("/srv/app/public", "../private") == "/srv/app/private"
