import pytest

from numrange import NumericRegistry, Steppable, parse
from numrange.numeric import I8, U64, Float, Float32, Integer


def test_resolve_builtin_types():
    assert NumericRegistry.resolve(int) is Integer
    assert NumericRegistry.resolve(float) is Float


def test_resolve_names():
    assert NumericRegistry.resolve("f64") is Float
    assert NumericRegistry.resolve("u64") is U64
    assert NumericRegistry.resolve("i8") is I8


def test_resolve_rejects_other_types():
    with pytest.raises(ValueError, match="Unsupported numeric kind"):
        NumericRegistry.resolve(complex)


def test_get_lists_available_kinds():
    with pytest.raises(ValueError, match=r"Available: \[.*i32.*\]"):
        NumericRegistry.get("decimal")


def test_bounded_limits():
    assert I8.minimum == -128 and I8.maximum == 127
    assert U64.minimum == 0 and U64.maximum == 2**64 - 1
    assert U64.parse("18446744073709551615") == 2**64 - 1
    with pytest.raises(ValueError):
        U64.parse("18446744073709551616")


@pytest.mark.parametrize("text", ["1_000", "1.0", "0x10", " 1", "", "+", "١"])
def test_integer_parse_is_strict(text):
    with pytest.raises(ValueError):
        Integer.parse(text)


def test_integer_accepts_explicit_sign():
    assert Integer.parse("+7") == 7
    assert Integer.parse("-7") == -7


def test_units():
    assert Integer.unit == 1
    assert Float.unit == 1.0
    assert Float32.unit == 1.0


def test_float32_rounds_to_single_precision():
    assert Float32.parse("0.1") != 0.1
    assert Float32.parse("0.5") == 0.5


def test_custom_kind_plugs_into_parser():
    class Even(Integer):
        name = "even"
        unit = 2

    assert parse("-4-4", Even) == [-4, -2, 0, 2, 4]
    assert issubclass(Even, Steppable)


def test_list_kinds():
    kinds = NumericRegistry.list_kinds()
    assert kinds == sorted(kinds)
    for name in ("int", "float", "f32", "f64", "i8", "i16", "i32", "i64",
                 "u8", "u16", "u32", "u64"):
        assert name in kinds
