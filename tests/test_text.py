import pytest

from judgeproblems.text import (
    alliteration_count,
    classify_sentence,
    distinct_alpha,
    distinct_letters,
    led_count,
    missing_pomekons,
    problem_1168,
    problem_1253,
    problem_1263,
    problem_1551,
    problem_2174,
    problem_2760,
    rotations,
    shift_decode,
)


def test_led_count_single_digit():
    assert led_count("8") == 7


def test_led_count_is_additive():
    assert led_count("115380") == sum(led_count(d) for d in "115380")


def test_led_count_ignores_other_characters():
    assert led_count("1a2\r") == led_count("12")


def test_problem_1168():
    assert problem_1168("2\n1\n88\n") == f"{led_count('1')} leds\n{led_count('88')} leds\n"


def test_shift_decode_wraps():
    assert shift_decode("ABC", 1) == "ZAB"


@pytest.mark.parametrize("shift", [0, 26])
def test_shift_decode_identity_shifts(shift):
    assert shift_decode("HELLOWORLD", shift) == "HELLOWORLD"


def test_problem_1253():
    expected = f"{shift_decode('ABC', 1)}\n{shift_decode('XYZ', 0)}\n"
    assert problem_1253("2\nABC 1\nXYZ 0\n") == expected


def test_alliteration_count_example():
    assert alliteration_count(["Sally", "sells", "sea", "shells"]) == 1


def test_alliteration_long_run_counts_once():
    assert alliteration_count(["sa", "sb", "sc", "sd"]) == alliteration_count(["sa", "sb"])


def test_alliteration_ignores_case():
    assert alliteration_count(["Sa", "sb"]) == alliteration_count(["sa", "sb"])


def test_alliteration_empty_word_rejected():
    with pytest.raises(ValueError):
        alliteration_count(["a", ""])


def test_problem_1263_one_line_each():
    text = "Sally sells sea shells\ndog cat\n"
    expected = (
        f"{alliteration_count(['Sally', 'sells', 'sea', 'shells'])}\n"
        f"{alliteration_count(['dog', 'cat'])}\n"
    )
    assert problem_1263(text) == expected


def test_problem_1263_trailing_space_joins_lines():
    assert len(problem_1263("sa sb \nsc\n").splitlines()) == 1


def test_distinct_letters_pangram():
    assert distinct_letters("the quick brown fox jumps over the lazy dog") == 26


def test_distinct_letters_ignores_upper_case():
    assert distinct_letters("ABC xyz") == distinct_letters("xyz")


def test_distinct_alpha_counts_cases_apart():
    assert distinct_alpha("Aa!") == 2


def test_classify_sentence():
    assert classify_sentence(26) == "frase completa"
    assert classify_sentence(13) == "frase quase completa"
    assert classify_sentence(12) == "frase mal elaborada"


def test_problem_1551():
    text = "3\nthe quick brown fox jumps over the lazy dog\nabcdefghijklm\nhello\n"
    assert problem_1551(text) == (
        "frase completa\nfrase quase completa\nfrase mal elaborada\n"
    )


def test_missing_pomekons_none_caught():
    assert missing_pomekons([]) == 151


def test_missing_pomekons_ignores_repeats():
    assert missing_pomekons(["a", "a"]) == missing_pomekons(["a"])


def test_problem_2174():
    expected = f"Falta(m) {missing_pomekons(['x', 'y'])} pomekon(s).\n"
    assert problem_2174("3\nx\ny\nx\n") == expected


def test_rotations():
    result = rotations("Abc", "Def", "Ghi")
    assert result[:3] == ("AbcDefGhi", "DefGhiAbc", "GhiAbcDef")


def test_rotations_prefixes():
    assert rotations("abcdefghijkl", "x", "y")[3] == "abcdefghij" + "x" + "y"


def test_problem_2760():
    assert problem_2760("a\nb\nc\n") == "".join(f"{r}\n" for r in rotations("a", "b", "c"))


def test_problem_2760_needs_three_lines():
    with pytest.raises(ValueError):
        problem_2760("a\nb\n")