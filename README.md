# encuestas

A small console program for browsing surveys. Each survey holds a list of
questions, and each question holds a list of answers with a weighting. You
move through surveys, questions and answers with the arrow keys and pick an
entry with Enter. The screens and menu texts are in Spanish.

## Installing

```
pip install .
```

## Running

```
encuestas
```

The main menu offers **Ver Encuestas** (browse surveys) and **Salir** (quit).
A sample survey, "Encuesta de Satisfacción", is loaded at start-up. It has
two questions: "¿Cómo calificaría nuestro servicio?" (Excelente, Bueno,
Regular) and "¿Nos recomendaría?" (Sí, No).

On every screen:

- Up and Down arrows move the cursor, wrapping round at either end.
- Enter runs the highlighted option.
- **Siguiente** and **Anterior** step to the next or previous item. They only
  appear when there is an item to step to.
- **Salir** goes back one level.

The survey screen shows the survey's id, name and whether it has been
processed, and offers **Ingresar a la Encuesta** to open its questions. The
question screen shows the survey, its number of questions and the current
question, and offers **Ingresar a la Pregunta** to open its answers. The
answer screen shows the question id, the current answer and how many answers
there are.

On Windows the screen is cleared with `cls` and the console is switched to
UTF-8 at start-up; elsewhere ANSI escape codes are used.

## Using it as a library

```python
from encuestas.models import SurveyStack, load_sample_survey

stack = SurveyStack()
load_sample_survey(stack)
for survey in stack:          # from the top of the stack down
    print(survey.name, [q.text for q in survey.questions])
```

`encuestas.models` holds the data: `Answer`, `Question` (with `add_answer`,
which appends), `Survey` (with `add_question`, which inserts at the front)
and `SurveyStack` (`push`, `pop`, which returns `None` when empty,
`is_empty`, `len()` and iteration). `build_sample_survey()` returns the
sample survey on its own.

The menus and browsers take an iterable of `encuestas.menu.Key` values and a
text stream, so they can be driven from scripts or tests without a terminal:

- `encuestas.menu.run_menu` and `encuestas.menu.run_menu_with_header`
- `encuestas.surveys.browse_surveys`, which leaves the stack in its original
  order afterwards
- `encuestas.questions.browse_questions`
- `encuestas.answers.browse_answers`

```python
import io
from encuestas.menu import Key
from encuestas.answers import browse_answers
from encuestas.models import build_sample_survey

question = build_sample_survey().questions[0]
out = io.StringIO()
last = browse_answers(question.answers, [Key.ENTER], out)   # "Siguiente"
print(last.text)   # "Bueno"
```

When the keys run out, the menu returns `None` and browsing stops.
`AnswerNavigator`, `QuestionNavigator` and `SurveyBrowser` hold the position
in each screen and can be used directly; `AnswerNavigator.details()` gives
an answer's id, text and weighting.

### Response records

`encuestas.records.ResponseTree` keeps `ResponseRecord` values in a binary
search tree ordered by `response_id`. `insert` returns `False` and adds
nothing when that response number is already present; iterating yields the
records in ascending order. `prompt_record` (and
`ResponseTree.insert_from_prompt`) asks for each field in turn and raises
`ValueError` if an entry is not a whole number.

### Validation

`encuestas.validation.verify(value, kind)` checks a value against the rule
for its `ValueKind` and returns a message: integers must lie in 0–1000,
floats in 0–10000, strings must not be empty, and `LONG` values must have
exactly 12 digits (`count_digits`). An unknown kind raises `ValueError`.

## What it does not do

- Surveys cannot be created, edited or loaded from a file; only the built-in
  sample survey is available.
- Nothing is saved: response records live only in memory, and there is no
  reading or writing of CSV files.
- The answer screen has no option for showing an answer's details;
  `AnswerNavigator.details()` is only available from code.
- No results or weighted scores are computed.

## Tests

```
pip install .[test]
pytest
```