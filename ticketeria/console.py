"""Terminal drawing helpers: cursor placement, colours, borders and menus."""

from __future__ import annotations

import shutil
import sys
from enum import IntEnum

LOGO_ROWS = 25
LOGO_COLUMNS = 50

CONSOLE_WIDTH = 150
CONSOLE_HEIGHT = 60


class Color(IntEnum):
    """Sixteen-colour console palette."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    BROWN = 6
    LIGHT_GRAY = 7
    DARK_GRAY = 8
    LIGHT_BLUE = 9
    LIGHT_GREEN = 10
    LIGHT_CYAN = 11
    LIGHT_RED = 12
    LIGHT_MAGENTA = 13
    YELLOW = 14
    WHITE = 15


COLOR_BACKGROUND = Color.LIGHT_GRAY
COLOR_LOGO = Color.LIGHT_BLUE
COLOR_TITLE = Color.BLUE
COLOR_TEXT = Color.BLACK
COLOR_MESSAGE = Color.LIGHT_BLUE

BLOCK = "\u2588"
HORIZONTAL = "\u2550"
VERTICAL = "\u2551"
TOP_LEFT = "\u2554"
TOP_RIGHT = "\u2557"
BOTTOM_LEFT = "\u255a"
BOTTOM_RIGHT = "\u255d"

_LOGO_ART = [
    "",
    "0" * 25 + "11111",
    "0" * 8 + "111110000001001000010000001011",
    "0" * 10 + "100000000101100001000000101",
    "0" * 10 + "10010111011101110101110011",
    "0" * 10 + "100101000111010101010100111",
    "0" * 10 + "100101000101011001011000101",
    "0" * 10 + "1001011101011011010011001011",
]

LOGO = tuple(
    tuple(cell == "1" for cell in row.ljust(LOGO_COLUMNS, "0"))
    for row in _LOGO_ART + [""] * (LOGO_ROWS - len(_LOGO_ART))
)

_SHOW_CURSOR = "\x1b[?25h"
_HIDE_CURSOR = "\x1b[?25l"


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _ansi_index(color: int) -> int:
    return ((color & 1) << 2) | (color & 2) | ((color & 4) >> 2)


def goto_xy(x: int, y: int) -> None:
    """Move the cursor to column ``x`` and row ``y``, both counted from zero."""
    _write(f"\x1b[{y + 1};{x + 1}H")


def set_color(foreground: int, background: int = COLOR_BACKGROUND) -> None:
    fg = (90 if foreground & 8 else 30) + _ansi_index(foreground)
    bg = (100 if background & 8 else 40) + _ansi_index(background)
    _write(f"\x1b[{fg};{bg}m")


def console_size() -> tuple[int, int]:
    """Return the terminal's (width, height), or (50, 25) if unknown."""
    size = shutil.get_terminal_size((50, 25))
    return size.columns, size.lines


def paint_background() -> None:
    width, height = console_size()
    set_color(COLOR_TEXT, COLOR_BACKGROUND)
    for y in range(height):
        goto_xy(0, y)
        _write(" " * width)


def draw_logo(x: int, y: int) -> None:
    for row_index, row in enumerate(LOGO):
        for column_index, filled in enumerate(row):
            if filled:
                goto_xy(x + column_index, y + row_index)
                set_color(COLOR_LOGO, COLOR_BACKGROUND)
                _write(BLOCK)


def _corners(left: int, top: int, right: int, bottom: int) -> None:
    for x, y, char in (
        (left, top, TOP_LEFT),
        (right, top, TOP_RIGHT),
        (left, bottom, BOTTOM_LEFT),
        (right, bottom, BOTTOM_RIGHT),
    ):
        goto_xy(x, y)
        _write(char)


def _frame(x_range: range, y_range: range, width: int, height: int) -> None:
    for x in x_range:
        goto_xy(x, 2)
        _write(HORIZONTAL)
        goto_xy(x, height - 3)
        _write(HORIZONTAL)
    for y in y_range:
        goto_xy(2, y)
        _write(VERTICAL)
        goto_xy(width - 3, y)
        _write(VERTICAL)
    _corners(2, 2, width - 3, height - 3)


def draw_logo_border() -> None:
    """Paint the background, the logo and the outer frame of the start screen."""
    width, height = console_size()
    paint_background()
    draw_logo(50, 10)
    set_color(COLOR_TITLE, COLOR_BACKGROUND)
    _frame(
        range(LOGO_COLUMNS, width - LOGO_COLUMNS),
        range(LOGO_ROWS, height - LOGO_ROWS),
        width,
        height,
    )
    set_color(COLOR_TEXT)


def draw_plain_border() -> None:
    width, height = console_size()
    paint_background()
    set_color(COLOR_TITLE, COLOR_BACKGROUND)
    _frame(range(width), range(3, height - 3), width, height)
    set_color(COLOR_TEXT)


def show_centered(text: str, offset_y: int = 0) -> None:
    width, height = console_size()
    goto_xy(max(0, (width - len(text)) // 2), height // 2 + offset_y)
    _write(text)


def draw_menu_box(height: int, width: int, top: int) -> None:
    console_width, _ = console_size()
    left = (console_width - width) // 2
    right = left + width - 1
    bottom = top + height - 1

    set_color(COLOR_TITLE, COLOR_BACKGROUND)
    _corners(left, top, right, bottom)
    for x in range(left + 1, right):
        goto_xy(x, top)
        _write(HORIZONTAL)
        goto_xy(x, bottom)
        _write(HORIZONTAL)
    for y in range(top + 1, bottom):
        goto_xy(left, y)
        _write(VERTICAL)
        goto_xy(right, y)
        _write(VERTICAL)
    set_color(COLOR_TEXT)


def show_main_menu() -> None:
    width, height = console_size()
    menu_height, menu_width = 10, 40
    draw_menu_box(menu_height, menu_width, (height - menu_height) // 2 - 3)

    set_color(Color.LIGHT_BLUE, COLOR_BACKGROUND)
    show_centered("=== SISTEMA TICKETEC ===", -5)

    set_color(COLOR_TEXT, COLOR_BACKGROUND)
    show_centered("1. Modulo de Eventos", -3)
    show_centered("2. Modulo de Usuarios y Compras", -2)
    show_centered("3. Modulo de Servicios Administrativos", -1)
    show_centered("0. Salir", 0)

    set_color(Color.RED, COLOR_BACKGROUND)
    show_centered("Ingrese su opcion: ", 2)

    _write(_SHOW_CURSOR)
    goto_xy(width // 2 + 10, height // 2 + 2)
    set_color(Color.WHITE, COLOR_BACKGROUND)


def show_status(message: str) -> None:
    width, height = console_size()
    row = height - LOGO_ROWS - 5
    set_color(COLOR_TEXT, COLOR_BACKGROUND)
    goto_xy(0, row)
    _write(" " * width)
    set_color(COLOR_MESSAGE, COLOR_BACKGROUND)
    show_centered(message, height // 2 - row)


def clear_screen() -> None:
    _write("\x1b[2J\x1b[H")
    draw_plain_border()


def show_module_title(title: str) -> None:
    width, _ = console_size()
    goto_xy(max(0, (width - len(title)) // 2), 6)
    set_color(Color.LIGHT_BLUE, COLOR_BACKGROUND)
    _write(title)
    set_color(COLOR_TEXT, COLOR_BACKGROUND)


def _read_key() -> str:
    stream = sys.stdin
    if not stream.isatty():
        return stream.readline()
    try:
        import msvcrt
    except ImportError:
        import termios
        import tty

        descriptor = stream.fileno()
        previous = termios.tcgetattr(descriptor)
        try:
            tty.setraw(descriptor)
            return stream.read(1)
        finally:
            termios.tcsetattr(descriptor, termios.TCSADRAIN, previous)
    return msvcrt.getwch()


def wait_for_key() -> None:
    """Prompt for a key press, wait for it and redraw a clean screen."""
    width, _ = console_size()
    goto_xy(max(0, (width - 40) // 2), 22)
    set_color(Color.MAGENTA, COLOR_BACKGROUND)
    _write("Presione cualquier tecla para continuar...")
    set_color(COLOR_TEXT, COLOR_BACKGROUND)
    _write(_SHOW_CURSOR)
    _read_key()
    _write(_HIDE_CURSOR)
    clear_screen()