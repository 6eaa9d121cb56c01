import pytest

from wordle_server.exceptions import InvalidFormat, UnknownWord
from wordle_server.models.game import LetterStatus, LetterVerdict, new_letter_status
from wordle_server.services.evaluator import evaluate_guess, normalize_guess, update_letter_status

HIT, PRESENT, MISS = LetterStatus.HIT, LetterStatus.PRESENT, LetterStatus.MISS


def statuses(target, guess):
    return [verdict.status for verdict in evaluate_guess(target, guess)]


def test_exact_match_is_all_hits(dictionary):
    for word in dictionary:
        assert statuses(word, word) == [HIT] * 5


def test_verdicts_are_positional():
    verdicts = evaluate_guess('CRANE', 'SLATE')
    assert [v.letter for v in verdicts] == list('SLATE')
    assert [v.status for v in verdicts] == [MISS, MISS, HIT, MISS, HIT]


def test_repeated_letters_bounded_by_target_multiplicity():
    # SPEED has two E's: ERASE's two E's both find one, its S finds the other
    assert statuses('SPEED', 'ERASE') == [PRESENT, MISS, MISS, PRESENT, PRESENT]


def test_hit_consumes_before_present():
    # The hit on B at index 2 is taken first; the other B and the A/E find leftovers
    assert statuses('ABBEY', 'KEBAB') == [MISS, PRESENT, HIT, PRESENT, PRESENT]


def test_extra_copies_of_a_hit_letter_miss():
    # SLATE has one L and one A, both used up by hits
    assert statuses('SLATE', 'LLAMA') == [MISS, HIT, HIT, MISS, MISS]


def test_double_letters_both_present():
    assert statuses('LLAMA', 'HELLO') == [MISS, MISS, PRESENT, PRESENT, MISS]
    assert statuses('HELLO', 'LLAMA') == [PRESENT, PRESENT, MISS, MISS, MISS]


def test_evaluation_is_deterministic():
    first = evaluate_guess('SPEED', 'ERASE')
    second = evaluate_guess('SPEED', 'ERASE')
    assert first == second
    assert isinstance(first, tuple)


@pytest.mark.parametrize('raw, expected', [
    ('crane', 'CRANE'),
    ('  Slate ', 'SLATE'),
    ('SPEED', 'SPEED'),
])
def test_normalize_guess(raw, expected, dictionary):
    assert normalize_guess(raw, dictionary) == expected


@pytest.mark.parametrize('raw', ['', 'CRAN', 'CRANES', 'CR4NE', 'CR NE', None, 12345])
def test_normalize_guess_rejects_bad_format(raw, dictionary):
    with pytest.raises(InvalidFormat):
        normalize_guess(raw, dictionary)


@pytest.mark.parametrize('raw, message', [
    ('CRAN', 'Your guess must be exactly 5 letters long.'),
    ('CRANES', 'Your guess must be exactly 5 letters long.'),
    ('CR4NE', 'Your guess must contain only letters.'),
    ('CR-NE', 'Your guess must contain only letters.'),
])
def test_format_errors_explain_the_problem(raw, message, dictionary):
    with pytest.raises(InvalidFormat) as excinfo:
        normalize_guess(raw, dictionary)
    assert excinfo.value.message == message
    assert excinfo.value.code == 'INVALID_FORMAT'


def test_normalize_guess_rejects_unknown_word(dictionary):
    with pytest.raises(UnknownWord) as excinfo:
        normalize_guess('zzzzz', dictionary)
    assert excinfo.value.word == 'ZZZZZ'
    assert excinfo.value.code == 'WORD_NOT_FOUND'


def test_letter_status_only_upgrades():
    letters = new_letter_status()
    update_letter_status(letters, evaluate_guess('CRANE', 'SLATE'))
    assert letters['A'] == 'HIT'
    assert letters['S'] == 'MISS'
    assert letters['Z'] == 'UNUSED'

    update_letter_status(letters, [LetterVerdict('A', MISS), LetterVerdict('S', PRESENT)])
    assert letters['A'] == 'HIT'
    assert letters['S'] == 'PRESENT'
