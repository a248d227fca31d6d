import pytest

from yopt import (
    Options,
    OptionsError,
    MissingRequiredOption,
    IndexOutOfRange,
    UnrecognizedBooleanLiteral,
    TRUE_VALUES,
    FALSE_VALUES,
)

# --- Scenarios -------------------------------------------------------------- #


def test_options_cmdline():
    o = Options('--first-option --second-option=value "first quoted argument"')
    assert o.argCount() == 1
    assert o.arg(0) == "first quoted argument"
    with pytest.raises(IndexOutOfRange):
        o.arg(1)
    assert o.hasOpt("nonexistent") is False
    assert o.hasOpt("first-option")
    assert o.hasOpt("second-option")
    assert o.getBool("first-option") is True
    with pytest.raises(MissingRequiredOption):
        o.getRequiredString("nonexistent")
    assert o.getString("first-option") == ""
    assert o.getString("second-option") == "value"


def test_options_escaping():
    o = Options('--t="x x" "x x x"')
    assert o.arg(0) == "x x x"
    assert o.getRequiredString("t") == "x x"


def test_options_argv():
    o = Options(["binary.exe", "--t=42", "--u", '"param param"', "param param"])
    assert o.argCount() == 2
    assert o.args() == ["param param", "param param"]
    assert o.hasOpt("t")
    assert o.hasOpt("u")
    assert o.getInt("t") == 42


def test_options_argv_tuple():
    o = Options(("prog", "--k=a b"))
    assert o.getString("k") == "a b"


def test_options_empty():
    for o in (Options([]), Options(["prog"]), Options("")):
        assert o.argCount() == 0
        assert o.args() == []
        assert o.opts() == {}


def test_options_max_length_per_element():
    o = Options(["prog", "abcdef", "ghijkl"], maxLength=3)
    assert o.args() == ["abc", "ghi"]


# --- Strings ---------------------------------------------------------------- #


def test_get_string_default():
    o = Options("--flag --k=v")
    assert o.getString("missing") is None
    assert o.getString("missing", "d") == "d"
    assert o.getString("flag", "d") == ""
    assert o.getString("k", "d") == "v"


def test_get_string_last_wins():
    assert Options("--k=1 --k=2").getString("k") == "2"


def test_get_required_string():
    o = Options("--k=v --flag")
    assert o.getRequiredString("k") == "v"
    assert o.getRequiredString("flag") == ""
    with pytest.raises(LookupError):
        o.getRequiredString("missing")


# --- Booleans --------------------------------------------------------------- #


def test_get_bool_default():
    o = Options("--bool0 --bool1=TRUE --bool2=Y --bool3=1")
    assert o.getBool("bool_nonexistent_default", False) is False
    assert o.getBool("bool_nonexistent_default", True) is True
    assert o.getBool("bool_nonexistent_default") is False


def test_get_bool_true():
    o = Options("--bool0 --bool1=TRUE --bool2=Y --bool3=1")
    assert o.getBool("bool0", False) is True
    assert o.getBool("bool1", False) is True
    assert o.getBool("bool2", False) is True
    assert o.getBool("bool3", False) is True


def test_get_bool_false():
    o = Options("--bool1=F --bool2=no --bool3=0")
    assert o.getBool("bool1", True) is False
    assert o.getBool("bool2", True) is False
    assert o.getBool("bool3", True) is False


def test_get_bool_literals():
    for literal in TRUE_VALUES:
        assert Options(f"--b={literal}").getBool("b", False) is True

    for literal in FALSE_VALUES:
        assert Options(f"--b={literal}").getBool("b", True) is False


def test_get_bool_unrecognized():
    for literal in ("maybe", "True", "False", "on", "2", "yEs"):
        with pytest.raises(UnrecognizedBooleanLiteral):
            Options(f"--b={literal}").getBool("b")


def test_get_bool_unrecognized_is_value_error():
    with pytest.raises(ValueError):
        Options("--b=maybe").getBool("b", True)


def test_get_bool_empty_quoted_is_flag():
    assert Options('--b=""').getBool("b") is True


# --- Integers --------------------------------------------------------------- #


def test_get_int():
    o = Options("--a=42 --b=-7 --c=+3 --d=0")
    assert o.getInt("a") == 42
    assert o.getInt("b") == -7
    assert o.getInt("c") is None
    assert o.getInt("d") == 0


def test_get_int_rejects_partial():
    o = Options(["prog", "--a=4x", "--b=x", "--c", "--d= 4", "--e=4_000", "--f=--4", "--g=4.0"])
    for key in "abcdefg":
        assert o.hasOpt(key)
        assert o.getInt(key) is None


def test_get_int_rejects_non_ascii_digits():
    assert Options("--a=٤٢").getInt("a") is None


def test_get_int_default():
    o = Options("--bad=x --good=1")
    assert o.getInt("missing", 5) == 5
    assert o.getInt("bad", 5) == 5
    assert o.getInt("good", 5) == 1
    assert o.getInt("missing") is None


def test_get_int_range():
    assert Options("--n=2147483647").getInt("n") == 2147483647
    assert Options("--n=-2147483648").getInt("n") == -2147483648
    assert Options("--n=2147483648").getInt("n") is None
    assert Options("--n=-2147483649").getInt("n") is None
    assert Options("--n=12345678901234567890").getInt("n", 7) == 7


def test_get_int_conversion_failure_is_absent():
    assert Options(["prog", "--n=\ud800"]).getInt("n") is None
    assert Options("--n=42", narrow=lambda s: None).getInt("n") is None
    assert Options("--n=42", narrow=lambda s: None).getInt("n", 7) == 7


def test_get_int_custom_narrow():
    o = Options("--n=forty-two", narrow=lambda s: b"42")
    assert o.getInt("n") == 42


# --- Positional arguments --------------------------------------------------- #


def test_arg_out_of_range():
    o = Options("a b")
    assert o.arg(0) == "a"
    assert o.arg(1) == "b"
    with pytest.raises(IndexOutOfRange):
        o.arg(2)
    with pytest.raises(IndexError):
        o.arg(-1)


def test_errors_share_base():
    with pytest.raises(OptionsError):
        Options("").arg(0)
    with pytest.raises(OptionsError):
        Options("").getRequiredString("k")
    with pytest.raises(OptionsError):
        Options("--k=x").getBool("k")


def test_args_returns_copy():
    o = Options("a --k=v")
    o.args().append("b")
    o.opts()["k"] = "w"
    assert o.args() == ["a"]
    assert o.getString("k") == "v"


# --- Narrow text ------------------------------------------------------------ #


def test_options_bytes():
    o = Options(b"--t=42 --f x --y=yes --n=0")
    assert o.hasOpt("t")
    assert o.getString("t") == b"42"
    assert o.getInt("t") == 42
    assert o.getBool("f") is True
    assert o.getBool("y") is True
    assert o.getBool("n", True) is False
    assert o.arg(0) == b"x"


def test_options_bytes_argv():
    o = Options([b"prog", b"--k=a b", b"--b=maybe"])
    assert o.getRequiredString("k") == b"a b"
    with pytest.raises(UnrecognizedBooleanLiteral):
        o.getBool("b")


def test_options_repr():
    assert repr(Options("a --k=v")) == "Options(args=['a'], opts={'k': 'v'})"


def test_options_width_ignores_program_name():
    o = Options([b"prog", "--k=v", "x"])
    assert o.hasOpt("k")
    assert o.getString("k") == "v"
    assert o.arg(0) == "x"

    o = Options(["prog", b"--k=v"])
    assert o.getString("k") == b"v"
