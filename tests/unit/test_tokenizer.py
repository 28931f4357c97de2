"""
Unit tests for word extraction
"""

import os

import pytest

from wordindex.worker.tokenizer import FileTokens, iter_words, normalize, split_tokens


class TestNormalize:

    @pytest.mark.parametrize('token,expected', [
        ('Cat', 'cat'),
        ('dog.', 'dog'),
        ("don't", 'dont'),
        ('Quick-Quick', 'quickquick'),
        ('42', ''),
        ('...', ''),
        ('café', 'caf'),
    ])
    def test_normalize(self, token, expected):
        assert normalize(token) == expected


class TestSplitTokens:

    def test_drops_empty_tokens(self):
        assert split_tokens("  a \t b\n") == ['a', 'b']

    def test_keeps_non_ascii_separators(self):
        assert split_tokens("a\x1cb c\x85d") == ['a\x1cb', 'c\x85d']


class TestIterWords:

    def test_yields_normalized_words_in_order(self, make_files):
        """Test that words come out lowercased, stripped and in file order"""
        [path] = make_files(["Cat cat\n  dog, 123 BIRD!\n"])

        assert list(iter_words(path)) == ['cat', 'cat', 'dog', 'bird']

    def test_only_ascii_whitespace_separates_tokens(self, temp_dir):
        """Test that unit separators and NBSP stay inside a token and get stripped"""
        path = os.path.join(temp_dir, 'separators.txt')
        with open(path, 'w', encoding='utf-8') as f:
            f.write("cat\x1fdog foo\u00a0bar x\u2003y")

        assert list(iter_words(path)) == ['catdog', 'foobar', 'xy']

    def test_all_ascii_whitespace_separates_tokens(self, temp_dir):
        path = os.path.join(temp_dir, 'ascii.txt')
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write("one\ttwo\vthree\ffour\r\nfive  six\n")

        assert list(iter_words(path)) == ['one', 'two', 'three', 'four', 'five', 'six']

    def test_empty_file(self, make_files):
        [path] = make_files([""])

        assert list(iter_words(path)) == []

    def test_missing_file_raises_on_iteration(self, temp_dir):
        """Test that open errors surface lazily as OSError"""
        words = iter_words(os.path.join(temp_dir, 'missing.txt'))

        with pytest.raises(OSError):
            next(words)

    def test_undecodable_bytes_are_ignored(self, temp_dir):
        path = os.path.join(temp_dir, 'binary.txt')
        with open(path, 'wb') as f:
            f.write(b"good \xff\xfe bytes")

        assert list(iter_words(path)) == ['good', 'bytes']


class TestFileTokens:

    def test_is_restartable(self, make_files):
        """Test that each iteration re-reads the whole file"""
        [path] = make_files(["one two three"])
        tokens = FileTokens(path)

        assert list(tokens) == ['one', 'two', 'three']
        assert list(tokens) == ['one', 'two', 'three']
