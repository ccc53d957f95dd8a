from encuestas.models import (
    Answer,
    Question,
    Survey,
    SurveyStack,
    build_sample_survey,
    load_sample_survey,
)


def _survey(survey_id):
    return Survey(survey_id, f"S{survey_id}", 1, 2025)


def test_sample_survey_fields():
    survey = build_sample_survey()
    assert survey.survey_id == 1
    assert survey.name == "Encuesta de Satisfacción"
    assert (survey.month, survey.year) == (6, 2025)
    assert survey.processed is False


def test_sample_survey_question_order():
    survey = build_sample_survey()
    assert [q.question_id for q in survey.questions] == [101, 102]
    assert survey.questions[1].text == "¿Nos recomendaría?"


def test_sample_survey_answers():
    first, second = build_sample_survey().questions
    assert [a.text for a in first.answers] == ["Excelente", "Bueno", "Regular"]
    assert [a.weight for a in first.answers] == [5.0, 4.0, 3.0]
    assert [a.text for a in second.answers] == ["Sí", "No"]
    assert all(a.question_id == 102 for a in second.answers)


def test_add_question_prepends():
    survey = _survey(1)
    survey.add_question(Question(1, "a"))
    survey.add_question(Question(2, "b"))
    assert [q.question_id for q in survey.questions] == [2, 1]


def test_add_answer_appends():
    question = Question(1, "q")
    question.add_answer(Answer(1, "x", 1.0))
    question.add_answer(Answer(2, "y", 2.0))
    assert [a.answer_id for a in question.answers] == [1, 2]


def test_stack_is_lifo():
    stack = SurveyStack()
    a, b = _survey(1), _survey(2)
    stack.push(a)
    stack.push(b)
    assert len(stack) == 2
    assert list(stack) == [b, a]
    assert stack.pop() is b
    assert stack.pop() is a
    assert stack.is_empty()


def test_pop_empty_returns_none():
    assert SurveyStack().pop() is None


def test_load_sample_survey():
    stack = SurveyStack()
    load_sample_survey(stack)
    assert len(stack) == 1
    assert stack.pop() == build_sample_survey()