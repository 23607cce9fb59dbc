import io
import random

import pytest

from nulldle.config import DEFAULT_WORD_LIST_PATH
from nulldle.exceptions import EmptyDictionaryError, LoadError
from nulldle.services.dictionary import Dictionary


def test_load_normalizes_and_keeps_five_letter_lines():
    source = io.StringIO("  House\nWORLD \ncat\nelephant\n\napple\napple\n")
    dictionary = Dictionary.load(source)
    assert list(dictionary) == ['house', 'world', 'apple', 'apple']
    assert dictionary.is_valid('house')
    assert not dictionary.is_valid('cat')


def test_load_from_path(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text("crane\nslate\n", encoding='utf-8')
    assert len(Dictionary.load(str(path))) == 2


def test_load_missing_file_raises_load_error(tmp_path):
    with pytest.raises(LoadError):
        Dictionary.load(str(tmp_path / 'missing.txt'))


def test_load_undecodable_file_raises_load_error(tmp_path):
    path = tmp_path / 'words.bin'
    path.write_bytes(b'\xff\xfe\xfa\x00crane')
    with pytest.raises(LoadError):
        Dictionary.load(str(path))


def test_bundled_word_list_loads():
    dictionary = Dictionary.load(DEFAULT_WORD_LIST_PATH)
    assert len(dictionary) > 100
    for word in ('house', 'world', 'would', 'apple'):
        assert word in dictionary


def test_membership_is_case_insensitive(dictionary):
    assert dictionary.is_valid('HoUsE')
    assert dictionary.is_valid(' house ')
    assert 'HOUSE' in dictionary
    assert not dictionary.is_valid('zzzzz')


def test_random_word_comes_from_the_list(dictionary):
    for _ in range(20):
        assert dictionary.is_valid(dictionary.random_word())


def test_random_word_is_deterministic_with_seeded_rng():
    words = ['house', 'world', 'apple', 'crane']
    first = Dictionary.from_words(words, rng=random.Random(3))
    second = Dictionary.from_words(words, rng=random.Random(3))
    assert [first.random_word() for _ in range(5)] == [second.random_word() for _ in range(5)]


def test_random_word_on_empty_dictionary_raises():
    with pytest.raises(EmptyDictionaryError):
        Dictionary().random_word()
