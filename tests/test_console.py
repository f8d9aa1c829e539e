import io
import re

import pytest

from ticketeria import console
from ticketeria.console import Color

GOTO = re.compile(r"\x1b\[(\d+);(\d+)H")


@pytest.fixture
def terminal(monkeypatch):
    monkeypatch.setenv("COLUMNS", "80")
    monkeypatch.setenv("LINES", "30")
    return 80, 30


def _positions(text):
    return [(int(col) - 1, int(row) - 1) for row, col in GOTO.findall(text)]


def test_console_size_uses_terminal(terminal):
    assert console.console_size() == terminal


def test_goto_round_trip(capsys):
    console.goto_xy(7, 4)
    assert _positions(capsys.readouterr().out) == [(7, 4)]


def test_set_color_red_foreground(capsys):
    console.set_color(Color.RED, Color.BLACK)
    assert capsys.readouterr().out == "\x1b[31;40m"


def test_bright_colors_differ_from_dark(capsys):
    console.set_color(Color.BLUE, Color.BLUE)
    dark = capsys.readouterr().out
    console.set_color(Color.LIGHT_BLUE, Color.LIGHT_BLUE)
    bright = capsys.readouterr().out
    assert dark != bright


def test_draw_logo_stays_inside_its_box(capsys):
    console.draw_logo(5, 3)
    out = capsys.readouterr().out
    positions = _positions(out)
    assert out.count(console.BLOCK) == len(positions)
    assert all(5 <= x < 5 + console.LOGO_COLUMNS for x, _ in positions)
    assert all(3 <= y < 3 + console.LOGO_ROWS for _, y in positions)


def test_show_centered_centres_text(terminal, capsys):
    width, height = terminal
    console.show_centered("abcd", 2)
    out = capsys.readouterr().out
    (x, y), = _positions(out)
    assert out.endswith("abcd")
    assert 2 * x + len("abcd") in (width, width - 1)
    assert y == height // 2 + 2


def test_menu_box_frame(terminal, capsys):
    console.draw_menu_box(6, 20, 4)
    out = capsys.readouterr().out
    for corner in (console.TOP_LEFT, console.TOP_RIGHT, console.BOTTOM_LEFT, console.BOTTOM_RIGHT):
        assert out.count(corner) == 1
    assert out.count(console.HORIZONTAL) == 2 * (20 - 2)
    assert out.count(console.VERTICAL) == 2 * (6 - 2)


def test_clear_screen_draws_border(terminal, capsys):
    console.clear_screen()
    out = capsys.readouterr().out
    assert out.startswith("\x1b[2J")
    assert console.TOP_LEFT in out and console.BOTTOM_RIGHT in out


def test_main_menu_lists_options(terminal, capsys):
    console.show_main_menu()
    out = capsys.readouterr().out
    assert "1. Modulo de Eventos" in out
    assert "0. Salir" in out
    assert "Ingrese su opcion: " in out


def test_module_title_and_status(terminal, capsys):
    console.show_module_title("MODULO EVENTOS")
    console.show_status("Listo")
    out = capsys.readouterr().out
    assert "MODULO EVENTOS" in out
    assert "Listo" in out


def test_wait_for_key_consumes_input(terminal, capsys, monkeypatch):
    stdin = io.StringIO("\nrest\n")
    monkeypatch.setattr("sys.stdin", stdin)
    console.wait_for_key()
    assert "Presione cualquier tecla para continuar..." in capsys.readouterr().out
    assert stdin.read() == "rest\n"