import io

from encuestas.app import main_menu
from encuestas.menu import Key
from encuestas.models import SurveyStack, build_sample_survey


def sample_stack():
    stack = SurveyStack()
    stack.push(build_sample_survey())
    return stack


def test_salir_leaves_main_menu():
    out = io.StringIO()
    assert main_menu(sample_stack(), keys=[Key.DOWN, Key.ENTER], out=out) == "Salir"
    assert "==== MENU ====" in out.getvalue()


def test_view_surveys_then_leave():
    stack = sample_stack()
    out = io.StringIO()
    keys = [Key.ENTER, Key.DOWN, Key.ENTER, Key.DOWN, Key.ENTER]
    assert main_menu(stack, keys=keys, out=out) == "Salir"
    survey = build_sample_survey()
    assert f"Nombre: {survey.name}" in out.getvalue()
    assert len(stack) == 1
    assert next(iter(stack)).survey_id == survey.survey_id


def test_keys_running_out_returns_none():
    assert main_menu(sample_stack(), keys=[Key.DOWN], out=io.StringIO()) is None


def test_empty_stack_reports_nothing_to_show():
    out = io.StringIO()
    result = main_menu(SurveyStack(), keys=[Key.ENTER, Key.DOWN, Key.ENTER], out=out)
    assert result == "Salir"
    assert "No hay encuestas disponibles." in out.getvalue()