"""Survey response records kept in a search tree keyed by response number."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class ResponseRecord:
    """One answered question from one survey interview."""

    survey_id: int
    question_id: int
    answer_id: int
    date: int
    interviewer: int
    response_id: int


class _Node:
    __slots__ = ("record", "left", "right")

    def __init__(self, record: ResponseRecord) -> None:
        self.record = record
        self.left: _Node | None = None
        self.right: _Node | None = None


class ResponseTree:
    """A binary search tree of records ordered by response number.

    Records whose response number is already present are not added.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, record: ResponseRecord) -> bool:
        """Add a record; return False if its response number is taken."""
        node = _Node(record)
        if self._root is None:
            self._root = node
            self._size += 1
            return True
        current = self._root
        key = record.response_id
        while True:
            current_key = current.record.response_id
            if key == current_key:
                return False
            side = "left" if key < current_key else "right"
            child = getattr(current, side)
            if child is None:
                setattr(current, side, node)
                self._size += 1
                return True
            current = child

    def insert_from_prompt(
        self,
        read: Callable[[], str] | None = None,
        write: Callable[[str], object] | None = None,
    ) -> ResponseRecord:
        """Ask for a record's fields, add it to the tree and return it."""
        record = prompt_record(read, write)
        self.insert(record)
        return record

    def __iter__(self) -> Iterator[ResponseRecord]:
        """Yield records in ascending response-number order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.record
            node = node.right

    def __len__(self) -> int:
        return self._size


_PROMPTS = (
    "\nID de la encuesta: ",
    "\nID de la pregunta: ",
    "\nID de la respuesta: ",
    "\nFecha en que se realizó la encuesta (AAAAMMDD): ",
    "\nID del encuestador: ",
    "\nNumero de respuesta: ",
)


def prompt_record(
    read: Callable[[], str] | None = None,
    write: Callable[[str], object] | None = None,
) -> ResponseRecord:
    """Ask for each field of a record in turn.

    Raises ValueError if an entry is not a whole number.
    """
    read = input if read is None else read
    write = sys.stdout.write if write is None else write
    write("Ingrese los siguientes datos:")
    write("\n-----------------------------")
    values = []
    for prompt in _PROMPTS:
        write(prompt)
        values.append(int(read().strip()))
    return ResponseRecord(*values)