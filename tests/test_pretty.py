import pytest

from codekata.pretty import format_values


def test_sample():
    assert format_values(100.345, 2006.008, 2331.41592653498) == (
        "0x64",
        "_______+2006.01",
        "2.331415927E+03",
    )


@pytest.mark.parametrize("a", [1.9, 255.0, 123456789.5])
def test_hex_round_trip_positive(a):
    first, _, _ = format_values(a, 0.0, 0.0)
    assert first.startswith("0x")
    assert int(first, 16) == int(a)


def test_hex_negative_is_twos_complement():
    first, _, _ = format_values(-5.7, 0.0, 0.0)
    assert int(first, 16) - 2**64 == -5


@pytest.mark.parametrize("b", [0.5, 12.345, -7.25, 99999.999])
def test_fixed_field(b):
    _, second, _ = format_values(1.0, b, 1.0)
    assert len(second) == 15
    body = second.lstrip("_")
    assert body[0] == ("+" if b >= 0 else "-")
    assert float(body) == pytest.approx(b, abs=0.005)