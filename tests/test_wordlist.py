import pytest

from phrasebox import wordlist, pwgen
from phrasebox.errors import WordSourceUnavailable


@pytest.fixture(autouse=True)
def clear_cache():
    wordlist._load_wordlist_cached.cache_clear()  # clear lru_cache
    yield
    wordlist._load_wordlist_cached.cache_clear()


def test_default_wordlist():
    words = wordlist.load_wordlist()
    for word in words:
        assert isinstance(word, str)
        assert len(word) > 0
        assert word == word.strip()
    assert len(set(words)) == len(words), "no duplicate words"
    candidates = pwgen.filter_words(words, pwgen.MIN_WORD_LENGTH, pwgen.MAX_WORD_LENGTH)
    assert len(words) > 2500, "enough words for passphrase generator"
    assert len(candidates) > 1500, "enough words for default settings"


def test_custom_wordlist(tmp_path):
    path = tmp_path / 'words'
    path.write_text("alpha\n  beta \n\ngamma\r\n", encoding='utf-8')
    assert wordlist.load_wordlist(path) == ('alpha', 'beta', 'gamma')
    assert wordlist.load_wordlist(str(path)) == ('alpha', 'beta', 'gamma')


def test_cached(tmp_path):
    path = tmp_path / 'words'
    path.write_text("alpha\n", encoding='utf-8')
    words = wordlist.load_wordlist(path)
    path.write_text("beta\n", encoding='utf-8')
    assert wordlist.load_wordlist(path) is words


def test_empty_wordlist(tmp_path):
    path = tmp_path / 'empty'
    path.write_text("", encoding='utf-8')
    assert wordlist.load_wordlist(path) == ()


def test_missing_wordlist(tmp_path):
    path = tmp_path / 'does-not-exist'
    with pytest.raises(WordSourceUnavailable) as excinfo:
        wordlist.load_wordlist(path)
    assert excinfo.value.path == path.resolve()
    assert 'does-not-exist' in str(excinfo.value)


def test_directory_wordlist(tmp_path):
    with pytest.raises(WordSourceUnavailable):
        wordlist.load_wordlist(tmp_path)


def test_binary_wordlist(tmp_path):
    path = tmp_path / 'binary'
    path.write_bytes(b'\xff\xfe\x00garbage')
    with pytest.raises(WordSourceUnavailable) as excinfo:
        wordlist.load_wordlist(path)
    assert 'UTF-8' in str(excinfo.value)
