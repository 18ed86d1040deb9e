# pwgen
# (random passphrase generator)
#

import enum
import logging
import string
from dataclasses import dataclass
from pathlib import Path
from random import SystemRandom
from typing import NamedTuple, Optional, Sequence, Union

from .errors import InvalidConfiguration, NoEligibleWords

log = logging.getLogger(__name__)
random = SystemRandom()

NUM_PASSPHRASES = 1
NUM_WORDS = 3
MIN_WORD_LENGTH = 5
MAX_WORD_LENGTH = 8
NUM_DIGITS = 3
SPECIAL_CHARS = ('!', '$', '*', '&')


class Capitalization(enum.Enum):
    EACH_WORD = 'each'
    FIRST_ONLY = 'first'


class Separator(enum.Enum):
    SPACE = ' '
    NONE = ''


class PassphraseResult(NamedTuple):
    index: int
    text: str


@dataclass(frozen=True)
class PassphraseConfig:

    """Validated parameters for one generation run.

    All checks are done on construction, so an invalid configuration
    never reaches the random source.

    """

    count: int = NUM_PASSPHRASES
    num_words: int = NUM_WORDS
    min_length: int = MIN_WORD_LENGTH
    max_length: int = MAX_WORD_LENGTH
    capitalization: Capitalization = Capitalization.EACH_WORD
    separator: Separator = Separator.SPACE
    num_digits: int = NUM_DIGITS
    special_char: bool = True
    special_chars: Sequence[str] = SPECIAL_CHARS
    wordlist: Optional[Union[str, Path]] = None

    def __post_init__(self):
        _check_int('count', self.count, 1)
        _check_int('num_words', self.num_words, 1)
        _check_int('min_length', self.min_length, 1)
        _check_int('max_length', self.max_length, 1)
        _check_int('num_digits', self.num_digits, 0)
        if self.min_length > self.max_length:
            raise InvalidConfiguration(
                'min_length', (self.min_length, self.max_length),
                f"Minimum word length ({self.min_length}) is greater "
                f"than maximum word length ({self.max_length})")
        if not isinstance(self.capitalization, Capitalization):
            raise InvalidConfiguration('capitalization', self.capitalization)
        if not isinstance(self.separator, Separator):
            raise InvalidConfiguration('separator', self.separator)
        # frozen: bypass __setattr__ to normalize "!$*&" into a tuple
        try:
            special_chars = tuple(self.special_chars)
        except TypeError as e:
            raise InvalidConfiguration('special_chars', self.special_chars) from e
        object.__setattr__(self, 'special_chars', special_chars)
        if any(not isinstance(c, str) or len(c) != 1 for c in special_chars):
            raise InvalidConfiguration(
                'special_chars', special_chars,
                f"Special characters must be single characters: {special_chars!r}")
        if self.special_char and not special_chars:
            raise InvalidConfiguration(
                'special_chars', special_chars,
                "Special character list is empty, but a special character is required")


def _check_int(field, value, minimum):
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise InvalidConfiguration(
            field, value, f"Invalid value for {field}: {value!r} (must be at least {minimum})")


def filter_words(words, min_length: int, max_length: int) -> tuple:
    """Select words usable in a passphrase.

    Keeps only words made of ASCII letters, with length
    between `min_length` and `max_length` (inclusive).
    Order of the words is preserved.

    """
    if min_length > max_length:
        raise InvalidConfiguration(
            'min_length', (min_length, max_length),
            f"Minimum word length ({min_length}) is greater "
            f"than maximum word length ({max_length})")
    return tuple(w for w in words
                 if w.isascii() and w.isalpha() and min_length <= len(w) <= max_length)


def format_word(word: str, capitalization: Capitalization) -> str:
    if capitalization is Capitalization.FIRST_ONLY:
        return word.lower()
    return word[:1].upper() + word[1:].lower()


def build_passphrase(config: PassphraseConfig, candidates: Sequence[str], rng=random) -> str:
    """Build one passphrase from random words, digits and a special char.

    Words are drawn with replacement, the same word may repeat.

    """
    words = [rng.choice(candidates) for _ in range(config.num_words)]
    sep = config.separator.value
    text = sep.join(format_word(w, config.capitalization) for w in words)
    if config.capitalization is Capitalization.FIRST_ONLY:
        text = text[:1].upper() + text[1:]
    text += sep
    text += ''.join(rng.choice(string.digits) for _ in range(config.num_digits))
    if config.special_char:
        text += rng.choice(config.special_chars)
    return text


def generate(config: PassphraseConfig, candidates: Sequence[str], rng=None) -> list:
    """Generate `config.count` passphrases from `candidates`.

    :param config: Validated configuration
    :param candidates: Words as returned by :func:`filter_words`
    :param rng: Random source with `choice` method (default: SystemRandom)
    :returns: List of :class:`PassphraseResult`, indexed from 1.
    :raises NoEligibleWords: When `candidates` is empty.

    """
    if not candidates:
        raise NoEligibleWords(config.min_length, config.max_length, config.wordlist)
    if rng is None:
        rng = random
    return [PassphraseResult(n, build_passphrase(config, candidates, rng))
            for n in range(1, config.count + 1)]


def generate_passphrases(words, config: PassphraseConfig, rng=None) -> list:
    """Filter the raw `words` and generate passphrases from the rest."""
    words = tuple(words)
    candidates = filter_words(words, config.min_length, config.max_length)
    log.debug("%d of %d words have length %d to %d",
              len(candidates), len(words), config.min_length, config.max_length)
    log.debug("Generating with %r", config)
    return generate(config, candidates, rng)
