import pytest
from hangman.engine import (
    Game, MAX_INCORRECT, build_shape, filter_candidates, validate_letter, validate_mask,
    IllegalGuess, DuplicateGuess, InvalidMask,
)


def test_new_game_is_fully_masked():
    g = Game("apple")
    assert g.word == "APPLE"
    assert g.masked_word() == "*****"
    assert g.guesses_remaining() == MAX_INCORRECT == 7
    assert not g.is_won() and not g.is_lost()


def test_guess_reveals_every_position():
    g = Game("APPLE")
    assert g.guess("p") is True
    assert g.masked_word() == "*PP**"
    assert g.guess("z") is False
    assert g.guesses_remaining() == 6


@pytest.mark.parametrize("letter", ["P", "p", "Z", "z"])
def test_duplicate_guess_rejected(letter):
    g = Game("APPLE")
    g.guess("P")
    g.guess("Z")
    with pytest.raises(DuplicateGuess) as e:
        g.guess(letter)
    assert "has already been guessed" in str(e.value)


@pytest.mark.parametrize("letter", ["", "ab", "é", None])
def test_illegal_guess_rejected(letter):
    with pytest.raises(IllegalGuess):
        Game("APPLE").guess(letter)


def test_win_and_loss():
    won = Game("APPLE")
    for ch in "APLE":
        won.guess(ch)
    assert won.is_won() and won.is_over()
    assert won.masked_word() == "APPLE"

    lost = Game("APPLE")
    for ch in "BCDFGHI":
        lost.guess(ch)
    assert lost.is_lost() and lost.guesses_remaining() == 0


def test_build_shape_maps_wildcards():
    assert build_shape("*PP**").pattern == ".PP.."


@pytest.mark.parametrize("masked,disallowed,expected", [
    ("*****", set(), ["APPLE", "GRAPE", "BERRY"]),
    ("*R***", set(), ["GRAPE"]),
    ("****E", set(), ["APPLE", "GRAPE"]),
    ("****E", {"L"}, ["GRAPE"]),
    ("*****", {"R"}, ["APPLE"]),
    ("*E***", {"Y"}, []),
    ("******", set(), ["MELONS"]),
])
def test_filter_candidates(masked, disallowed, expected):
    words = ["APPLE", "GRAPE", "BERRY", "MELONS"]
    assert filter_candidates(words, masked, disallowed) == expected


def test_validate_letter_uppercases():
    assert validate_letter("q") == "Q"


@pytest.mark.parametrize("masked", ["", "ab***", "A-B**", "A B", 12345])
def test_validate_mask_rejects_malformed(masked):
    with pytest.raises(InvalidMask):
        validate_mask(masked)
    # InvalidMask is a ValueError for callers that don't know our hierarchy
    with pytest.raises(ValueError):
        build_shape(masked)
