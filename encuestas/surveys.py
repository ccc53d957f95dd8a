"""Browsing the surveys held in a stack."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .menu import Key, MenuOption, run_menu_with_header
from .models import Survey, SurveyStack
from .questions import browse_questions


class SurveyBrowser:
    """Walks a survey stack one survey at a time.

    Surveys already seen are kept on a second stack so that the user can go
    back, and restore() puts everything back in its original order.
    """

    def __init__(
        self,
        stack: SurveyStack,
        keys: Iterator[Key] | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.stack = stack
        self.aux = SurveyStack()
        self.current: Survey | None = stack.pop()
        self.closed = False
        self._keys = keys
        self._out = out

    def header(self) -> str:
        """Describe the survey being shown."""
        survey = self.current
        if survey is None:
            return ""
        state = "PROCESADA" if survey.processed else "NO PROCESADA"
        return f"ID: {survey.survey_id}\nNombre: {survey.name}\nEstado: {state}\n\n"

    def next(self) -> None:
        """Move to the next survey in the stack."""
        if self.current is not None:
            self.aux.push(self.current)
        self.current = self.stack.pop()

    def previous(self) -> None:
        """Move back to the survey seen before."""
        if self.current is not None:
            self.stack.push(self.current)
        self.current = self.aux.pop()

    def _enter(self) -> None:
        browse_questions(self.current, self._keys, self._out)

    def options(self) -> list[MenuOption]:
        """The menu options that fit the current position."""
        items = [MenuOption("Ingresar a la Encuesta", SurveyBrowser._enter)]
        ahead = not self.stack.is_empty()
        behind = not self.aux.is_empty()
        if ahead:
            items.append(MenuOption("Siguiente", SurveyBrowser.next))
        if behind:
            items.append(MenuOption("Anterior", SurveyBrowser.previous))
        items.append(MenuOption("Salir", SurveyBrowser.close))
        return items

    def close(self) -> None:
        """Mark the browsing as finished."""
        self.closed = True

    def restore(self) -> None:
        """Put every survey back on the original stack in its original order."""
        if self.current is not None:
            self.aux.push(self.current)
            self.current = None
        while (survey := self.aux.pop()) is not None:
            self.stack.push(survey)


def browse_surveys(
    stack: SurveyStack,
    keys: Iterable[Key] | None = None,
    out: TextIO | None = None,
) -> None:
    """Let the user step through the surveys and into their questions.

    The stack holds the same surveys in the same order afterwards.
    """
    if stack.is_empty():
        (sys.stdout if out is None else out).write("No hay encuestas disponibles.\n")
        return

    key_source = None if keys is None else iter(keys)
    browser = SurveyBrowser(stack, key_source, out)
    try:
        while not browser.closed:
            chosen = run_menu_with_header(
                browser.options(), browser, SurveyBrowser.header, key_source, out
            )
            if chosen is None:
                break
            if stack.is_empty() and browser.aux.is_empty():
                break
    finally:
        browser.restore()