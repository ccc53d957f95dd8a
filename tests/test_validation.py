import pytest

from encuestas.validation import ValueKind, count_digits, verify


def test_count_digits_twelve():
    assert count_digits(123456789012) == 12


@pytest.mark.parametrize("value", [0, -5])
def test_count_digits_non_positive(value):
    assert count_digits(value) == 0


def test_count_digits_grows_with_power_of_ten():
    assert count_digits(10**5) == count_digits(10**4) + 1


def test_verify_int_valid():
    assert verify(500, ValueKind.INT) == "Entero válido: 500"


@pytest.mark.parametrize("value", [0, 1000])
def test_verify_int_bounds(value):
    assert verify(value, ValueKind.INT).startswith("Entero válido")


@pytest.mark.parametrize("value", [-1, 1001])
def test_verify_int_out_of_range(value):
    assert verify(value, ValueKind.INT) == f"Entero inválido: {value}"


def test_verify_float():
    assert verify(2.5, ValueKind.FLOAT) == "Flotante válido: 2.50"
    assert verify(10000.5, ValueKind.FLOAT).startswith("Flotante inválido")


def test_verify_string():
    assert verify("hola", ValueKind.STRING) == "Cadena válida: hola"
    assert verify("", ValueKind.STRING) == "Cadena vacía"


def test_verify_long():
    assert verify(123456789012, ValueKind.LONG) == "LONG LONG VALIDO"
    assert verify(12345, ValueKind.LONG) == "LONG LONG INVALIDO"


def test_verify_accepts_plain_int_kind():
    assert verify(3, 1) == verify(3, ValueKind.INT)


def test_verify_unknown_kind():
    with pytest.raises(ValueError, match="Tipo no reconocido"):
        verify(1, 9)