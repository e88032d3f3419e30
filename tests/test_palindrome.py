import pytest

from taskbox.palindrome import DEFAULT_NUMBERS, count_palindromes, is_palindrome, main


@pytest.mark.parametrize("k", [1, 7, 11, 101, 1221, 12321])
def test_palindromes(k):
    assert is_palindrome(k) is True


@pytest.mark.parametrize("k", [10, 12, 100, 1231, 123])
def test_not_palindromes(k):
    assert is_palindrome(k) is False


def test_negative_number_is_not_palindrome():
    assert is_palindrome(-121) is False


def test_default_numbers_all_palindromes():
    assert count_palindromes(DEFAULT_NUMBERS) == len(DEFAULT_NUMBERS)


def test_mixed_counts():
    pals = [11, 22, 303]
    others = [10, 12]
    assert count_palindromes(pals + others) == len(pals)


def test_empty():
    assert count_palindromes([]) == 0


def test_main_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "count = 5"


def test_main_with_numbers(capsys):
    assert main(["12", "13", "44"]) == 0
    assert capsys.readouterr().out.strip() == "count = 1"