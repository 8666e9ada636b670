import io

from pmsh import colors


def test_red():
    assert colors.red("test") == "\x1b[31mtest\x1b[0m"


def test_green():
    assert colors.green("test") == "\x1b[32mtest\x1b[0m"


def test_blue():
    assert colors.blue("test") == "\x1b[34mtest\x1b[0m"


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


def test_enabled_on_tty(monkeypatch):
    monkeypatch.delenv("NO_COLOR")
    assert colors.enabled(FakeTTY())


def test_disabled_when_not_a_tty(monkeypatch):
    monkeypatch.delenv("NO_COLOR")
    assert not colors.enabled(io.StringIO())


def test_no_color_wins():
    assert not colors.enabled(FakeTTY())
