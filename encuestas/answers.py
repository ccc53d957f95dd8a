"""Browsing the answers of a question one at a time."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from .menu import Key, MenuOption, read_key, run_menu_with_header
from .models import Answer

_PAUSE_TEXT = "Presione una tecla para continuar . . .\n"


def _pause(message: str, keys: Iterator[Key] | None, out: TextIO | None) -> None:
    """Show a message and wait for one key press."""
    stream = sys.stdout if out is None else out
    stream.write(message)
    stream.write(_PAUSE_TEXT)
    if keys is None:
        read_key()
    else:
        next(keys, None)


def answer_at(answers: Sequence[Answer], index: int) -> Answer | None:
    """Return the answer at an index, going back to the first one when out of range."""
    if not answers:
        return None
    if 0 <= index < len(answers):
        return answers[index]
    return answers[0]


class AnswerNavigator:
    """Keeps track of the answer shown while browsing a question's answers.

    The answers form a ring: stepping past the last leads to the first.
    """

    def __init__(self, answers: Iterable[Answer]) -> None:
        self.answers = list(answers)
        if not self.answers:
            raise ValueError("there are no answers to browse")
        self.position = 0
        self.closed = False

    def current(self) -> Answer:
        """The answer being shown."""
        return self.answers[self.position]

    def next(self) -> None:
        """Move to the following answer, wrapping round to the first."""
        self.position = (self.position + 1) % len(self.answers)

    def previous(self) -> None:
        """Move to the preceding answer, wrapping round to the last."""
        self.position = (self.position - 1) % len(self.answers)

    def header(self) -> str:
        """Describe the answer being shown and how many there are."""
        answer = self.current()
        return (
            "\n==== PREGUNTA ==== "
            f"\nPregunta ID: {answer.question_id}"
            f"\nTexto: {answer.text}"
            f"\nRespuestas Totales: {len(self.answers)}"
            "\n----------------------------\n"
            f"\nRespuesta Actual: {answer.text}\n"
        )

    def details(self) -> str:
        """Describe every field of the answer being shown."""
        answer = self.current()
        return (
            "\n==== Detalles de la Respuesta ===="
            f"\nID: {answer.answer_id}"
            f"\nTexto: {answer.text}"
            f"\nPonderación: {answer.weight:.2f}"
            "\n----------------------------------\n"
        )

    def options(self) -> list[MenuOption]:
        """The menu options that fit the current position."""
        last = self.position == len(self.answers) - 1
        first = self.position == 0
        if last:
            moves = [MenuOption("Anterior", AnswerNavigator.previous)]
        elif first:
            moves = [MenuOption("Siguiente", AnswerNavigator.next)]
        else:
            moves = [
                MenuOption("Siguiente", AnswerNavigator.next),
                MenuOption("Anterior", AnswerNavigator.previous),
            ]
        return [*moves, MenuOption("Salir", AnswerNavigator.close)]

    def close(self) -> None:
        """Mark the browsing as finished."""
        self.closed = True


def browse_answers(
    answers: Sequence[Answer],
    keys: Iterable[Key] | None = None,
    out: TextIO | None = None,
) -> Answer | None:
    """Let the user step through a question's answers.

    Returns the answer showing when browsing ended, or None if there were none.
    """
    key_source = None if keys is None else iter(keys)
    if not answers:
        _pause("\nEsta pregunta no tiene respuestas.", key_source, out)
        return None

    navigator = AnswerNavigator(answers)
    while not navigator.closed:
        chosen = run_menu_with_header(
            navigator.options(), navigator, AnswerNavigator.header, key_source, out
        )
        if chosen is None:
            break
    return navigator.current()