"""
Tests for home-directory display and tilde expansion.
"""

import os

import pytest

from pmsh.path_utils import collapse_tilde, expand_home, home_dir


class TestExpandHome:
    def test_path_under_home(self, home):
        assert expand_home(os.path.join(home, "foo")) == "~/foo"

    def test_home_itself(self, home):
        assert expand_home(home) == "~"

    def test_sibling_with_common_prefix_is_untouched(self, home):
        """'/x/home2' must not become '~2' when home is '/x/home'."""
        assert expand_home(home + "2") == home + "2"

    def test_outside_home(self, home):
        assert expand_home("/usr/bin") == "/usr/bin"

    def test_trailing_slash_on_home(self, home, monkeypatch):
        monkeypatch.setenv("HOME", home + "/")
        assert expand_home(os.path.join(home, "src")) == "~/src"

    def test_no_home(self, monkeypatch):
        monkeypatch.delenv("HOME", raising=False)
        assert expand_home("/home/someone/foo") == "/home/someone/foo"


class TestCollapseTilde:
    def test_tilde_slash(self, home):
        assert collapse_tilde("~/foo") == os.path.join(home, "foo")

    def test_bare_tilde(self, home):
        assert collapse_tilde("~") == home

    @pytest.mark.parametrize("path", ["foo/bar", "/etc", "~user/x", "a~/b", ""])
    def test_other_paths_unchanged(self, home, path):
        assert collapse_tilde(path) == path

    def test_no_home_keeps_literal(self, monkeypatch):
        monkeypatch.delenv("HOME", raising=False)
        assert collapse_tilde("~/foo") == "~/foo"

    def test_root_home(self, monkeypatch):
        monkeypatch.setenv("HOME", "/")
        assert collapse_tilde("~/foo") == "/foo"


class TestRoundTrip:
    def test_expand_then_collapse(self, home):
        path = os.path.join(home, "projects", "pmsh")
        assert collapse_tilde(expand_home(path)) == path

    def test_collapse_then_expand(self, home):
        assert expand_home(collapse_tilde("~/projects/pmsh")) == "~/projects/pmsh"


def test_empty_home_means_no_home(monkeypatch):
    monkeypatch.setenv("HOME", "")
    assert home_dir() is None
