"""Keyboard-driven text menus."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, TextIO


class Key(Enum):
    """Keys a menu reacts to."""

    UP = auto()
    DOWN = auto()
    ENTER = auto()
    OTHER = auto()


@dataclass(frozen=True)
class MenuOption:
    """A menu line and the action run with the menu's context when chosen."""

    text: str
    action: Callable[[Any], object] | None = None


_NAVIGATION_EXITS = frozenset({"salir", "siguiente", "anterior"})
_WINDOWS_ARROWS = {"H": Key.UP, "P": Key.DOWN}
_ANSI_ARROWS = {"[A": Key.UP, "[B": Key.DOWN}


def is_exit(text: str) -> bool:
    """Tell whether an option's text means leaving the menu."""
    return text.casefold() in ("salir", "volver")


def read_key() -> Key:
    """Read one key press from the terminal without waiting for a newline."""
    if os.name == "nt":
        import msvcrt

        char = msvcrt.getwch()
        if char in ("\x00", "\xe0"):
            return _WINDOWS_ARROWS.get(msvcrt.getwch(), Key.OTHER)
        return Key.ENTER if char == "\r" else Key.OTHER

    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        char = sys.stdin.read(1)
        if char == "\x1b":
            return _ANSI_ARROWS.get(sys.stdin.read(2), Key.OTHER)
        return Key.ENTER if char in ("\r", "\n") else Key.OTHER
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def clear_screen() -> None:
    """Clear the terminal."""
    if os.name == "nt":
        subprocess.run("cls", shell=True, check=False)
    else:
        sys.stdout.write("\033[2J\033[H")
        sys.stdout.flush()


def format_menu(options: Sequence[MenuOption], selected: int) -> str:
    """Render the options, marking the selected one with an arrow."""
    return "".join(
        f"{'->' if index == selected else '  '} {option.text}\n"
        for index, option in enumerate(options)
    )


def _prepare(
    options: Iterable[MenuOption],
    keys: Iterable[Key] | None,
    out: TextIO | None,
) -> tuple[list[MenuOption], Iterator[Key], TextIO, bool]:
    items = list(options)
    if not items:
        raise ValueError("a menu needs at least one option")
    key_source = iter(read_key, None) if keys is None else iter(keys)
    interactive = out is None
    return items, key_source, sys.stdout if out is None else out, interactive


def _move(position: int, key: Key, count: int) -> int:
    if key is Key.UP:
        return (position - 1) % count
    if key is Key.DOWN:
        return (position + 1) % count
    return position


def run_menu(
    options: Iterable[MenuOption],
    context: Any = None,
    keys: Iterable[Key] | None = None,
    out: TextIO | None = None,
) -> str | None:
    """Run a menu until an exit option without an action is chosen.

    Returns the text of that option, or None when the keys run out.
    """
    items, key_source, stream, interactive = _prepare(options, keys, out)
    position = 0
    while True:
        if interactive:
            clear_screen()
        stream.write("==== MENU ====\n\n" + format_menu(items, position))
        key = next(key_source, None)
        if key is None:
            return None
        if key is Key.ENTER:
            option = items[position]
            if option.action is not None:
                option.action(context)
            elif is_exit(option.text):
                return option.text
        else:
            position = _move(position, key, len(items))


def run_menu_with_header(
    options: Iterable[MenuOption],
    context: Any = None,
    header: Callable[[Any], str | None] | None = None,
    keys: Iterable[Key] | None = None,
    out: TextIO | None = None,
) -> str | None:
    """Run a menu under a header built from the context.

    Choosing "Salir", "Siguiente" or "Anterior" runs its action and leaves
    the menu; any other option just runs its action. Returns the text of the
    option that ended the menu, or None when the keys run out.
    """
    items, key_source, stream, interactive = _prepare(options, keys, out)
    position = 0
    while True:
        if interactive:
            clear_screen()
        if header is not None:
            text = header(context)
            if text:
                stream.write(text)
        stream.write("==== OPCIONES ====\n\n" + format_menu(items, position))
        key = next(key_source, None)
        if key is None:
            return None
        if key is Key.ENTER:
            option = items[position]
            if option.action is not None:
                option.action(context)
            if option.text.casefold() in _NAVIGATION_EXITS:
                return option.text
        else:
            position = _move(position, key, len(items))