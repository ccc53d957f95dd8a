import pytest

from encuestas.records import ResponseRecord, ResponseTree, prompt_record


def _record(response_id):
    return ResponseRecord(1, 101, 1, 20250601, 7, response_id)


def _reader(values):
    items = iter(values)
    return lambda: next(items)


def test_iteration_is_sorted():
    tree = ResponseTree()
    for response_id in [50, 20, 80, 10, 30, 90]:
        assert tree.insert(_record(response_id)) is True
    assert [r.response_id for r in tree] == [10, 20, 30, 50, 80, 90]
    assert len(tree) == 6


def test_duplicate_is_ignored():
    tree = ResponseTree()
    first = _record(5)
    assert tree.insert(first) is True
    assert tree.insert(ResponseRecord(2, 102, 2, 20250602, 8, 5)) is False
    assert list(tree) == [first]
    assert len(tree) == 1


def test_empty_tree():
    tree = ResponseTree()
    assert list(tree) == []
    assert len(tree) == 0


def test_prompt_record_reads_fields_in_order():
    written = []
    record = prompt_record(_reader(["1", "101", "3", "20250601", "7", "42"]), written.append)
    assert record == ResponseRecord(1, 101, 3, 20250601, 7, 42)
    assert written[0] == "Ingrese los siguientes datos:"
    assert "\nNumero de respuesta: " in written


def test_prompt_record_rejects_non_numbers():
    with pytest.raises(ValueError):
        prompt_record(_reader(["uno"]), lambda text: None)


def test_insert_from_prompt_adds_record():
    tree = ResponseTree()
    record = tree.insert_from_prompt(
        _reader(["2", "102", "1", "20250601", "4", "9"]), lambda text: None
    )
    assert list(tree) == [record]
    assert record.response_id == 9