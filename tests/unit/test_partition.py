"""
Unit tests for letter partitioning
"""

import string

import pytest

from wordindex.common.partition import letters_for_reducer, owns_word, reducer_id


class TestReducerId:

    def test_modulo_assignment(self):
        assert reducer_id('a', 2) == 0
        assert reducer_id('b', 2) == 1
        assert reducer_id('c', 2) == 0
        assert reducer_id('z', 3) == 25 % 3

    def test_single_reducer_owns_everything(self):
        assert {reducer_id(letter, 1) for letter in string.ascii_lowercase} == {0}

    def test_rejects_zero_reducers(self):
        with pytest.raises(ValueError):
            reducer_id('a', 0)

    @pytest.mark.parametrize('letter', ['A', '1', '', 'ab', 'é'])
    def test_rejects_non_lowercase_letters(self, letter):
        with pytest.raises(ValueError):
            reducer_id(letter, 3)


class TestLettersForReducer:

    @pytest.mark.parametrize('num_reducers', [1, 2, 3, 5, 7, 13, 26])
    def test_letters_partition_alphabet(self, num_reducers):
        """Test that every letter belongs to exactly one reducer"""
        assigned = []
        for r in range(num_reducers):
            assigned.extend(letters_for_reducer(r, num_reducers))

        assert sorted(assigned) == list(string.ascii_lowercase)

    def test_more_reducers_than_letters(self):
        """Test that surplus reducers get no letters"""
        assert letters_for_reducer(25, 30) == ['z']
        assert letters_for_reducer(26, 30) == []
        assert letters_for_reducer(29, 30) == []

    def test_owns_word_uses_first_letter(self):
        assert owns_word('dog', 1, 2)
        assert not owns_word('cat', 1, 2)
