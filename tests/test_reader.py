import pytest

from cpsolve.reader import StopRun, TokenReader, run_cases


def test_words_in_order():
    reader = TokenReader("  alpha\tbeta\n gamma ")
    assert [reader.word(), reader.word(), reader.word()] == ["alpha", "beta", "gamma"]


def test_word_past_end_raises():
    reader = TokenReader("one")
    reader.word()
    with pytest.raises(EOFError):
        reader.word()


def test_integer_parses_negative():
    reader = TokenReader("-17 42")
    assert reader.integer() == -17
    assert reader.integer() == 42


def test_integer_rejects_non_number():
    reader = TokenReader("abc")
    with pytest.raises(ValueError):
        reader.integer()


def test_integers_reads_count():
    reader = TokenReader("1 2 3 4 5")
    assert reader.integers(3) == [1, 2, 3]
    assert reader.integers(2) == [4, 5]


def test_integers_zero_count():
    reader = TokenReader("9")
    assert reader.integers(0) == []
    assert reader.integer() == 9


def test_integers_short_input_raises():
    reader = TokenReader("1 2")
    with pytest.raises(EOFError):
        reader.integers(3)


def test_run_cases_calls_handler_per_case():
    def double(reader):
        return str(reader.integer() * 2)

    assert run_cases("3\n1\n2\n3\n", double) == "2\n4\n6\n"


def test_run_cases_zero_cases():
    assert run_cases("0", lambda reader: reader.word()) == ""


def test_run_cases_stop_with_output():
    def handler(reader):
        value = reader.integer()
        if value < 0:
            raise StopRun("stop")
        return str(value)

    assert run_cases("4 1 -1 5 6", handler) == "1\nstop\n"


def test_run_cases_stop_without_output():
    def handler(reader):
        reader.word()
        raise StopRun()

    assert run_cases("2 x y", handler) == ""


def test_run_cases_missing_count():
    with pytest.raises(EOFError):
        run_cases("", lambda reader: "")