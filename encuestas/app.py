"""Entry point: the main menu over the sample survey."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Iterable, Sequence
from typing import TextIO

from .menu import Key, MenuOption, run_menu
from .models import SurveyStack, load_sample_survey
from .surveys import browse_surveys


def main_menu(
    stack: SurveyStack,
    keys: Iterable[Key] | None = None,
    out: TextIO | None = None,
) -> str | None:
    """Show the main menu until "Salir" is chosen; return the closing option's text."""
    key_source = None if keys is None else iter(keys)
    options = [
        MenuOption("Ver Encuestas", lambda pile: browse_surveys(pile, key_source, out)),
        MenuOption("Salir"),
    ]
    return run_menu(options, stack, key_source, out)


def main(argv: Sequence[str] | None = None) -> int:
    """Load the sample survey and run the main menu."""
    stack = SurveyStack()
    load_sample_survey(stack)
    if os.name == "nt":
        subprocess.run("chcp 65001 > nul", shell=True, check=False)
    main_menu(stack)
    return 0