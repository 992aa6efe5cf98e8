"""Tests for colordle.logic.hints.engine: digit feedback filtering."""

import pytest

from colordle.core.models import DatabaseEntry, DigitFeedback, DigitGuessRecord
from colordle.logic.hints.engine import (
    HintSession,
    cycle_feedback,
    filter_candidates,
    satisfies,
    score_guess,
)

C, P, A = DigitFeedback.CORRECT, DigitFeedback.PRESENT, DigitFeedback.ABSENT


def names(entries):
    return [e.name for e in entries]


class TestFilterScenarios:
    def test_all_correct_keeps_exact_color(self, primaries):
        history = [DigitGuessRecord.parse('FF0000', 'cccccc')]
        assert names(filter_candidates(primaries, history)) == ['Red']

    def test_all_absent_rejects_every_shared_digit(self, primaries):
        # Absent means no unclaimed copy of that digit remains, so a guess of
        # F and 0 rules out every color built only from F and 0, Black included.
        history = [DigitGuessRecord.parse('FF0000', 'aaaaaa')]
        assert filter_candidates(primaries, history) == []

    def test_all_absent_keeps_colors_without_those_digits(self):
        database = [DatabaseEntry('Black', '#000000'), DatabaseEntry('Gray', '#808080')]
        history = [DigitGuessRecord.parse('FFFFFF', 'aaaaaa')]
        assert names(filter_candidates(database, history)) == ['Black', 'Gray']

    def test_mixed_feedback_keeps_blue(self, mock_colors):
        history = [DigitGuessRecord.parse('00FFFF', 'ccaacc')]
        assert names(filter_candidates(mock_colors, history)) == ['Blue']

    def test_empty_history_returns_database(self, primaries):
        result = filter_candidates(primaries, [])
        assert result == primaries
        assert result is not primaries

    def test_order_preserved(self, mock_colors):
        history = [DigitGuessRecord.parse('000000', 'ccaaaa')]
        result = filter_candidates(mock_colors, history)
        assert names(result) == [n for n in names(mock_colors) if n in names(result)]

    def test_input_not_modified(self, mock_colors):
        before = list(mock_colors)
        filter_candidates(mock_colors, [DigitGuessRecord.parse('FF0000', 'cccccc')])
        assert mock_colors == before


class TestSatisfies:
    def test_rejects_wrong_length(self):
        record = DigitGuessRecord.parse('FFFFFF', 'aaaaaa')
        assert not satisfies('#FFF', record)
        assert not satisfies('0000000', record)
        assert not satisfies(None, record)

    def test_case_and_hash_insensitive(self):
        record = DigitGuessRecord.parse('ABCDEF', 'cccccc')
        assert satisfies('#abcdef', record)
        assert satisfies('ABCDEF', record)

    def test_present_needs_a_spare_copy(self):
        record = DigitGuessRecord.parse('A00000', 'paaaaa')
        assert satisfies('1A1111', record)
        assert not satisfies('111111', record)

    def test_present_before_absent(self):
        # guess AACCCC against DDDDDA: first A is Present, second A is Absent
        record = DigitGuessRecord('AACCCC', (P, A, A, A, A, A))
        assert satisfies('DDDDDA', record)
        assert not satisfies('DDDDAA', record)

    def test_correct_digits_do_not_count_as_spare(self):
        record = DigitGuessRecord('AAAA00', (C, A, A, A, C, C))
        assert satisfies('A00000', record)
        assert not satisfies('AA0000', record)

    def test_two_present_copies(self):
        record = DigitGuessRecord('BB0000', (P, P, A, A, A, A))
        assert satisfies('11BB11', record)
        assert not satisfies('11B111', record)


class TestScoreGuess:
    def test_exact(self):
        assert score_guess('123456', '123456') == (C,) * 6

    def test_duplicates(self):
        assert score_guess('AABBCC', 'ABCABC') == (C, P, P, P, P, C)

    def test_extra_copies_absent(self):
        assert score_guess('AAAA00', 'A00000') == (C, A, A, A, C, C)

    def test_blue_from_cyan(self):
        assert score_guess('00FFFF', '0000FF') == (C, C, A, A, C, C)

    @pytest.mark.parametrize('guess,target', [
        ('AACCCC', 'DDDDDA'), ('FF0000', '0000FF'), ('123321', '332211'),
        ('ABCDEF', 'FEDCBA'), ('000000', '000001'), ('5E5E5E', 'E5E5E5'),
    ])
    def test_target_satisfies_its_own_feedback(self, guess, target):
        record = DigitGuessRecord(guess, score_guess(guess, target))
        assert satisfies(target, record)


class TestAssociativity:
    def test_one_pass_equals_two_passes(self, mock_colors):
        g1 = DigitGuessRecord.parse('00FFFF', 'ccaacc')
        g2 = DigitGuessRecord.parse('0000FF', 'cccccc')
        at_once = filter_candidates(mock_colors, [g1, g2])
        stepwise = filter_candidates(filter_candidates(mock_colors, [g1]), [g2])
        assert at_once == stepwise

    def test_wider_database(self):
        database = [DatabaseEntry(f'c{i}', f'#{i * 2654435 % 0xFFFFFF:06X}') for i in range(300)]
        g1 = DigitGuessRecord.parse('A1B2C3', 'apaapa')
        g2 = DigitGuessRecord.parse('0F0F0F', 'aaapaa')
        at_once = filter_candidates(database, [g1, g2])
        stepwise = filter_candidates(filter_candidates(database, [g1]), [g2])
        assert at_once == stepwise


class TestCycleFeedback:
    def test_cycle_order(self):
        state = (A,) * 6
        state = cycle_feedback(state, 0)
        assert state[0] is P
        state = cycle_feedback(state, 0)
        assert state[0] is C
        state = cycle_feedback(state, 0)
        assert state[0] is A

    def test_returns_new_tuple(self):
        before = [A, A, A, A, A, A]
        after = cycle_feedback(before, 3)
        assert before == [A] * 6
        assert after[3] is P
        assert isinstance(after, tuple)


class TestHintSession:
    def test_incremental_matches_full_history(self, mock_colors):
        g1 = DigitGuessRecord.parse('00FFFF', 'ccaacc')
        session = HintSession.start(mock_colors)
        after = session.add_guess(g1)
        assert session.history == ()
        assert len(session.remaining) == len(mock_colors)
        assert after.history == (g1,)
        assert list(after.remaining) == filter_candidates(mock_colors, [g1])
