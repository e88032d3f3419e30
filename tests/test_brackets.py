import io

import pytest

from taskbox.brackets import BracketError, bracket_status, check_brackets, main


@pytest.mark.parametrize("text,bad", [(")", ")"), ("ab]", "]"), ("(x}", "}")])
def test_closer_without_opener(text, bad):
    with pytest.raises(BracketError) as info:
        check_brackets(text)
    assert info.value.position == text.index(bad) + 1
    assert "Missed" in info.value.message


def test_crossed_brackets():
    text = "([)]"
    with pytest.raises(BracketError) as info:
        check_brackets(text)
    assert info.value.position == text.index(")") + 1
    assert info.value.message == "Missed bracket"


def test_first_error_is_reported():
    text = "ok)]"
    assert bracket_status(text) == text.index(")") + 1


def test_error_message_format():
    err = BracketError(4, "Missed '('")
    assert str(err) == "Error: Missed '(' (err bracket position: 4)"


def test_main_balanced(capsys):
    assert main(["(a)"]) == 0
    assert capsys.readouterr().out == ""


def test_main_wrong_bracket(capsys):
    assert main([")"]) == 1
    assert "Error: Missed '(' (err bracket position: 1)" in capsys.readouterr().out


def test_main_missing_closer(capsys):
    assert main(["(("]) == 0
    assert capsys.readouterr().out == "Error: Missed close bracket\n-1\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("[}\n"))
    assert main([]) == 1
    assert "Error: Missed '{'" in capsys.readouterr().out