from __future__ import annotations

import re
from collections import Counter

import pytest

from passforge.generate import (
    CLASS_WEIGHTS,
    CharacterClass,
    MemorableRequest,
    PinRequest,
    RandomRequest,
    SeededSource,
    Separator,
    WordCorpus,
    generate,
    get_corpus,
    memorable_password,
    pin_password,
    random_password,
)
from passforge.generate.passwords import check_weights, enabled_classes
from passforge.utils.constants import LETTER_CHARS, NUMBER_CHARS, SYMBOL_CHARS
from passforge.utils.errors import CorpusExhausted, InvalidWeightConfiguration

# ---------------------------------------------------------------------------
# Memorable


def test_memorable_exact_output(small_corpus: WordCorpus, scripted) -> None:
    src = scripted(ints=[2, 2, 4, 7, 0])
    password = memorable_password(
        3, Separator.NUMBERS, capitalize=True, scramble=True, source=src, corpus=small_corpus
    )
    assert password == "Eilrahc7Ahpla0Ohce"
    # words first, then per-word shuffles, then separators
    assert [kind for kind, _ in src.calls] == ["range"] * 3 + ["shuffle"] * 3 + ["range"] * 2


def _draws_for(corpus: WordCorpus, words: list[str]) -> list[int]:
    """Selector draws that make the partial Fisher-Yates pick ``words`` in order."""

    displaced: dict[int, int] = {}
    draws = []
    for i, word in enumerate(words):
        target = corpus.index(word)
        j = next(k for k in range(i, len(corpus)) if displaced.get(k, k) == target)
        draws.append(j)
        displaced[j] = displaced.get(i, i)
    return draws


def test_memorable_seed_42_fixture_replayed(scripted) -> None:
    corpus = get_corpus()
    expected = "chokehold nativity dolly ominous throat"
    src = scripted(ints=_draws_for(corpus, expected.split()))
    assert memorable_password(5, Separator.SPACE, source=src, corpus=corpus) == expected
    assert src.calls == [("range", (i, len(corpus))) for i in range(5)]


def test_memorable_plain(small_corpus: WordCorpus, scripted) -> None:
    src = scripted(ints=[4, 4, 4])
    password = memorable_password(3, Separator.SPACE, source=src, corpus=small_corpus)
    assert password == "echo alpha bravo"


def test_memorable_accepts_custom_policy(small_corpus: WordCorpus, scripted) -> None:
    from passforge.generate import FixedSeparator

    src = scripted(ints=[0, 1])
    assert memorable_password(2, FixedSeparator("::"), source=src, corpus=small_corpus) == (
        "alpha::bravo"
    )


def test_memorable_determinism() -> None:
    a = memorable_password(5, Separator.SPACE, source=SeededSource(42))
    b = memorable_password(5, Separator.SPACE, source=SeededSource(42))
    assert a == b
    assert len(a.split(" ")) == 5


def test_memorable_number_separators() -> None:
    for k in range(3, 16):
        password = memorable_password(k, Separator.NUMBERS, source=SeededSource(k))
        digits = re.findall(r"[0-9]", password)
        assert len(digits) == k - 1
        words = re.split(r"[0-9]", password)
        assert len(words) == k
        assert all(len(w) >= 4 for w in words)


def test_memorable_capitalize_flag() -> None:
    password = memorable_password(6, Separator.SPACE, capitalize=True, source=SeededSource(3))
    for word in password.split(" "):
        assert word[0].isupper()
        assert word[1:] == word[1:].lower()


def test_memorable_corpus_exhausted(small_corpus: WordCorpus) -> None:
    with pytest.raises(CorpusExhausted):
        memorable_password(6, source=SeededSource(1), corpus=small_corpus)


# ---------------------------------------------------------------------------
# Random


def test_random_exact_output(scripted) -> None:
    src = scripted(ints=[0, 3, 1, 51], choices=[0, 1, 2, 0])
    assert random_password(4, numbers=True, symbols=True, source=src) == "a3@Z"
    weighted = [args for kind, args in src.calls if kind == "weighted"]
    assert weighted == [(7, 2, 1)] * 4


def test_random_seed_42_fixture_replayed(scripted) -> None:
    expected = "BCHvbvMSgaWAuhBlaBcH"
    src = scripted(ints=[LETTER_CHARS.index(c) for c in expected], choices=[0] * 20)
    assert random_password(20, source=src) == expected
    assert [args for kind, args in src.calls if kind == "range"] == [(0, 52)] * 20


def test_random_symbols_only_maps_second_class_to_symbols(scripted) -> None:
    src = scripted(ints=[9], choices=[1])
    assert random_password(1, numbers=False, symbols=True, source=src) == ")"
    assert src.calls[0] == ("weighted", (8, 2))


def test_weight_table() -> None:
    assert CLASS_WEIGHTS == {
        (False, False): (10,),
        (True, False): (8, 2),
        (False, True): (8, 2),
        (True, True): (7, 2, 1),
    }
    for (numbers, symbols), weights in CLASS_WEIGHTS.items():
        check_weights(weights, enabled_classes(numbers, symbols))


def test_enabled_classes_order() -> None:
    assert enabled_classes(True, True) == [
        CharacterClass.LETTERS,
        CharacterClass.DIGITS,
        CharacterClass.SYMBOLS,
    ]
    assert enabled_classes(False, True) == [CharacterClass.LETTERS, CharacterClass.SYMBOLS]
    assert len(CharacterClass.LETTERS.alphabet) == 52


@pytest.mark.parametrize(
    "weights",
    [(), (1, 2), (-1, 2, 1), (0, 0, 0)],
)
def test_invalid_weights(weights: tuple[int, ...]) -> None:
    with pytest.raises(InvalidWeightConfiguration):
        check_weights(weights, enabled_classes(True, True))


@pytest.mark.parametrize("numbers", [False, True])
@pytest.mark.parametrize("symbols", [False, True])
def test_random_length_is_exact(numbers: bool, symbols: bool) -> None:
    src = SeededSource(99)
    for length in range(8, 101):
        assert len(random_password(length, numbers, symbols, source=src)) == length


def test_random_letters_only() -> None:
    password = random_password(500, source=SeededSource(4))
    assert set(password) <= set(LETTER_CHARS)


def test_random_class_distribution() -> None:
    password = random_password(20_000, numbers=True, symbols=True, source=SeededSource(17))
    counts = Counter(
        "letters" if c in LETTER_CHARS else "digits" if c in NUMBER_CHARS else "symbols"
        for c in password
    )
    assert 0.67 < counts["letters"] / 20_000 < 0.73
    assert 0.17 < counts["digits"] / 20_000 < 0.23
    assert 0.07 < counts["symbols"] / 20_000 < 0.13
    assert set(password) <= set(LETTER_CHARS + NUMBER_CHARS + SYMBOL_CHARS)


def test_random_different_seeds_differ() -> None:
    assert random_password(12, True, True, source=SeededSource(0)) != random_password(
        12, True, True, source=SeededSource(1)
    )


def test_random_default_source_is_secure() -> None:
    assert len(random_password(16)) == 16


# ---------------------------------------------------------------------------
# PIN


def test_pin_exact_output(scripted) -> None:
    src = scripted(ints=[1, 5, 2, 5, 8, 6, 9])
    assert pin_password(7, source=src) == "1525869"
    assert src.calls == [("range", (0, 10))] * 7


@pytest.mark.parametrize("length", range(3, 13))
def test_pin_format(length: int) -> None:
    assert re.fullmatch(rf"[0-9]{{{length}}}", pin_password(length, source=SeededSource(length)))


def test_pin_determinism() -> None:
    assert pin_password(7, source=SeededSource(42)) == pin_password(7, source=SeededSource(42))


# ---------------------------------------------------------------------------
# Dispatch


def test_generate_dispatch(small_corpus: WordCorpus) -> None:
    assert generate(PinRequest(6), SeededSource(1)) == pin_password(6, source=SeededSource(1))
    assert generate(RandomRequest(10, True, False), SeededSource(2)) == random_password(
        10, True, False, source=SeededSource(2)
    )
    request = MemorableRequest(3, Separator.HYPHEN, capitalize=True)
    assert generate(request, SeededSource(3), corpus=small_corpus) == memorable_password(
        3, Separator.HYPHEN, True, source=SeededSource(3), corpus=small_corpus
    )


def test_generate_rejects_unknown_request() -> None:
    with pytest.raises(TypeError):
        generate(object())  # type: ignore[arg-type]


def test_requests_are_immutable() -> None:
    request = PinRequest(5)
    with pytest.raises(AttributeError):
        request.numbers = 6  # type: ignore[misc]
