# load_wordlist
# (word source for passphrase generator)
#

import functools
import logging
from pathlib import Path

from .errors import WordSourceUnavailable

log = logging.getLogger(__name__)

# Bundled word list, installed as package data
DEFAULT_WORDLIST_PATH = Path(__file__).parent / 'words.txt'


def parse_wordlist(lines) -> tuple:
    return tuple(w for w in (line.strip() for line in lines) if w)


def load_wordlist(path=None) -> tuple:
    """Load and return a word list, one word per line.

    :param path: Word list file. Default is the bundled list.
    :raises WordSourceUnavailable: When the file can't be read.

    """
    path = Path(path).expanduser() if path is not None else DEFAULT_WORDLIST_PATH
    return _load_wordlist_cached(path.resolve())


@functools.lru_cache(maxsize=None)
def _load_wordlist_cached(path: Path) -> tuple:
    log.debug("Loading word list %r", str(path))
    try:
        with open(path, 'r', encoding='utf-8') as f:
            lines = f.readlines()
    except OSError as e:
        raise WordSourceUnavailable(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise WordSourceUnavailable(path, f"not a UTF-8 text file ({e.reason})") from e
    words = parse_wordlist(lines)
    log.debug("Loaded %d words", len(words))
    return words
