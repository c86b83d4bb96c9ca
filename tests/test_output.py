import io

import pytest

from fdfview.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    buf = io.StringIO()
    put_char("z", buf)
    assert buf.getvalue() == "z"


@pytest.mark.parametrize("bad", ["", "ab"])
def test_put_char_rejects_non_single(bad):
    with pytest.raises(ValueError):
        put_char(bad, io.StringIO())


def test_put_str_writes_text():
    text = "hello cruel cruel world"
    buf = io.StringIO()
    put_str(text, buf)
    assert buf.getvalue() == text


def test_put_str_rejects_none():
    with pytest.raises(TypeError):
        put_str(None, io.StringIO())


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("line", buf)
    assert buf.getvalue() == "line" + "\n"


def test_put_nbr_min_int():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, 42, -5, 2147483647])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert int(buf.getvalue()) == n


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr(1.5, io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("abc")
    put_char("d")
    assert capsys.readouterr().out == "abcd"