"""Survey, question and answer records, and the stack that holds surveys."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Answer:
    """One possible answer to a question, with its weight."""

    answer_id: int
    text: str
    weight: float
    question_id: int = 0
    number: int = 0


@dataclass
class Question:
    """A question and its answers, kept in the order they were added."""

    question_id: int
    text: str
    weight: float = 1.0
    survey_id: int = 0
    answers: list[Answer] = field(default_factory=list)

    def add_answer(self, answer: Answer) -> None:
        """Append an answer after the existing ones."""
        self.answers.append(answer)


@dataclass
class Survey:
    """A survey for a given month and year, with its questions."""

    survey_id: int
    name: str
    month: int
    year: int
    processed: bool = False
    questions: list[Question] = field(default_factory=list)

    def add_question(self, question: Question) -> None:
        """Insert a question before the existing ones."""
        self.questions.insert(0, question)


class SurveyStack:
    """A last-in, first-out stack of surveys."""

    def __init__(self) -> None:
        self._items: list[Survey] = []

    def push(self, survey: Survey) -> None:
        """Put a survey on top of the stack."""
        self._items.append(survey)

    def pop(self) -> Survey | None:
        """Take the top survey off the stack, or return None when it is empty."""
        if not self._items:
            return None
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Survey]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)


def build_sample_survey() -> Survey:
    """Build the satisfaction survey used as sample data."""
    survey = Survey(
        survey_id=1,
        name="Encuesta de Satisfacción",
        month=6,
        year=2025,
    )

    service = Question(101, "¿Cómo calificaría nuestro servicio?")
    for number, (text, weight) in enumerate(
        [("Excelente", 5.0), ("Bueno", 4.0), ("Regular", 3.0)], start=1
    ):
        service.add_answer(Answer(number, text, weight, question_id=101, number=number))

    recommend = Question(102, "¿Nos recomendaría?")
    for number, (text, weight) in enumerate([("Sí", 1.0), ("No", 0.0)], start=1):
        recommend.add_answer(Answer(number, text, weight, question_id=102, number=number))

    survey.add_question(recommend)
    survey.add_question(service)
    return survey


def load_sample_survey(stack: SurveyStack) -> None:
    """Push the sample survey onto the given stack."""
    stack.push(build_sample_survey())