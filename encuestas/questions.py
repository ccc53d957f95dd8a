"""Browsing the questions of a survey one at a time."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from .answers import _pause, browse_answers
from .menu import Key, MenuOption, run_menu_with_header
from .models import Question, Survey


def question_at(questions: Sequence[Question], index: int) -> Question | None:
    """Return the question at an index, the first for negative ones, None past the end."""
    if not questions:
        return None
    if index <= 0:
        return questions[0]
    return questions[index] if index < len(questions) else None


class QuestionNavigator:
    """Keeps track of the question shown while browsing a survey."""

    def __init__(
        self,
        survey: Survey,
        keys: Iterator[Key] | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.survey = survey
        self.questions = survey.questions
        self.position = 0
        self.closed = False
        self._keys = keys
        self._out = out

    def current(self) -> Question | None:
        """The question being shown, or None if the survey has none."""
        return question_at(self.questions, self.position) if self.questions else None

    def _has_next(self) -> bool:
        return self.position + 1 < len(self.questions)

    def next(self) -> None:
        """Move to the following question, if there is one."""
        if self._has_next():
            self.position += 1

    def previous(self) -> None:
        """Move to the preceding question, if there is one."""
        if self.position > 0:
            self.position -= 1

    def header(self) -> str:
        """Describe the survey and the question being shown."""
        question = self.current()
        return (
            "==== ENCUESTA ===="
            f"\nID: {self.survey.survey_id}"
            f"\nNombre: {self.survey.name}"
            f"\nPreguntas Totales: {len(self.questions)}"
            "\n-------------------------\n"
            f"\nPregunta Actual: {question.text if question else '(ninguna)'}\n"
        )

    def _enter(self) -> None:
        question = self.current()
        if question is not None:
            browse_answers(question.answers, self._keys, self._out)

    def options(self) -> list[MenuOption]:
        """The menu options that fit the current position."""
        items = [MenuOption("Ingresar a la Pregunta", QuestionNavigator._enter)]
        has_next = self._has_next()
        if self.position == 0 and has_next:
            items.append(MenuOption("Siguiente", QuestionNavigator.next))
        elif not has_next and self.position > 0:
            items.append(MenuOption("Anterior", QuestionNavigator.previous))
        elif has_next and self.position > 0:
            items.append(MenuOption("Siguiente", QuestionNavigator.next))
            items.append(MenuOption("Anterior", QuestionNavigator.previous))
        items.append(MenuOption("Salir", QuestionNavigator.close))
        return items

    def close(self) -> None:
        """Mark the browsing as finished."""
        self.closed = True


def browse_questions(
    survey: Survey | None,
    keys: Iterable[Key] | None = None,
    out: TextIO | None = None,
) -> Question | None:
    """Let the user step through a survey's questions and into their answers.

    Returns the question showing when browsing ended, or None if there were none.
    """
    key_source = None if keys is None else iter(keys)
    if survey is None or not survey.questions:
        _pause("Esta encuesta no tiene preguntas.\n", key_source, out)
        return None

    navigator = QuestionNavigator(survey, key_source, out)
    while not navigator.closed:
        chosen = run_menu_with_header(
            navigator.options(), navigator, QuestionNavigator.header, key_source, out
        )
        if chosen is None:
            break
    return navigator.current()