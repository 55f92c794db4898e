import pytest

from pychip8.utils import debug_enabled, debug_log, reset_debug_categories


@pytest.fixture(autouse=True)
def _fresh_categories():
    reset_debug_categories()
    yield
    reset_debug_categories()


def test_disabled_without_environment(monkeypatch, capsys) -> None:
    monkeypatch.delenv("CHIP8_DEBUG", raising=False)

    assert not debug_enabled("cpu")
    debug_log("cpu", "pc=%04x", 0x200)
    assert capsys.readouterr().out == ""


def test_selected_categories(monkeypatch, capsys) -> None:
    monkeypatch.setenv("CHIP8_DEBUG", "CPU, input")

    assert debug_enabled("cpu")
    assert debug_enabled("input")
    assert not debug_enabled("audio")

    debug_log("cpu", "pc=%04x", 0x200)
    assert capsys.readouterr().out == "[CHIP8][cpu] pc=0200\n"


def test_all_enables_everything(monkeypatch) -> None:
    monkeypatch.setenv("CHIP8_DEBUG", "all")

    assert debug_enabled("frame")
    assert debug_enabled()


def test_bad_format_arguments_are_appended(monkeypatch, capsys) -> None:
    monkeypatch.setenv("CHIP8_DEBUG", "trace")

    debug_log("trace", "value=%d", "oops")

    assert capsys.readouterr().out == "[CHIP8][trace] value=%d ('oops',)\n"
