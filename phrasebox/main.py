import sys
import logging
import argparse
import configparser
from pathlib import Path

from . import pwgen, ui, wordlist
from .errors import PassphraseError, InvalidConfiguration

log = logging.getLogger(__name__)

DATA_DIR = Path('~/.phrasebox')


class Config:

    """Defaults from config file, overridden by command line."""

    # key: (type, built-in default)
    KEYS = {
        'count': (int, pwgen.NUM_PASSPHRASES),
        'words': (int, pwgen.NUM_WORDS),
        'min_length': (int, pwgen.MIN_WORD_LENGTH),
        'max_length': (int, pwgen.MAX_WORD_LENGTH),
        'capitalize_first': (bool, False),
        'no_space': (bool, False),
        'numbers': (int, pwgen.NUM_DIGITS),
        'no_special': (bool, False),
        'special_chars': (str, ''.join(pwgen.SPECIAL_CHARS)),
        'wordlist': (Path, None),
    }

    def __init__(self, config_file=None):
        self._values = {}
        if config_file is not None:
            self.load(config_file)

    def load(self, config_file):
        config_file = Path(config_file).expanduser()
        log.debug("Loading config %r", str(config_file))
        config = configparser.ConfigParser(interpolation=None)
        try:
            config.read(config_file, encoding='utf-8')
        except configparser.Error as e:
            raise InvalidConfiguration('config', str(config_file),
                                       f"Cannot parse config {str(config_file)!r}: {e}") from e
        except UnicodeDecodeError as e:
            raise InvalidConfiguration('config', str(config_file),
                                       f"Cannot parse config {str(config_file)!r}: "
                                       f"not a UTF-8 text file ({e.reason})") from e
        for section in config.sections():
            if section != 'phrasebox':
                log.warning("unknown section %r in config %r", section, str(config_file))
                continue
            section = config[section]
            for key in section:
                if key not in self.KEYS:
                    log.warning("unknown key [%s] %r in config %r",
                                section.name, key, str(config_file))
                    continue
                self._values[key] = self._parse_value(section, key)

    def _parse_value(self, section, key):
        value_type = self.KEYS[key][0]
        try:
            if value_type is int:
                return section.getint(key)
            if value_type is bool:
                return section.getboolean(key)
        except ValueError as e:
            raise InvalidConfiguration(key, section[key],
                                       f"Invalid value for {key!r} in config: "
                                       f"{section[key]!r}") from e
        return value_type(section[key])

    def get(self, key, override=None):
        if override is not None:
            return override
        return self._values.get(key, self.KEYS[key][1])

    def passphrase_config(self, args) -> pwgen.PassphraseConfig:
        """Build validated generator configuration from parsed `args`."""
        def get(key):
            return self.get(key, getattr(args, key))

        capitalization = (pwgen.Capitalization.FIRST_ONLY if get('capitalize_first')
                          else pwgen.Capitalization.EACH_WORD)
        separator = pwgen.Separator.NONE if get('no_space') else pwgen.Separator.SPACE
        return pwgen.PassphraseConfig(
            count=get('count'),
            num_words=get('words'),
            min_length=get('min_length'),
            max_length=get('max_length'),
            capitalization=capitalization,
            separator=separator,
            num_digits=get('numbers'),
            special_char=not get('no_special'),
            special_chars=get('special_chars'),
            wordlist=get('wordlist') or wordlist.DEFAULT_WORDLIST_PATH,
        )


def run_generate(args):
    cfg = Config(args.config_file)
    config = cfg.passphrase_config(args)
    words = wordlist.load_wordlist(config.wordlist)
    results = pwgen.generate_passphrases(words, config)
    if args.plain:
        print(ui.format_plain(results), end='')
    else:
        print(ui.format_table(results), end='')
    if args.copy:
        ui.copy_to_clipboard(results[-1].text)
        log.info("Copied passphrase %d to clipboard", results[-1].index)


def parse_args(argv=None):
    """Process command line args."""
    ap = argparse.ArgumentParser(prog="phrasebox",
                                 description="Generate memorable passphrases "
                                             "from random dictionary words",
                                 formatter_class=argparse.RawTextHelpFormatter)
    ap.add_argument('-c', '--count', type=int,
                    help=f"number of passphrases to generate (default: {pwgen.NUM_PASSPHRASES})")
    ap.add_argument('-w', '--words', type=int,
                    help=f"number of words in each passphrase (default: {pwgen.NUM_WORDS})")
    ap.add_argument('--min', dest='min_length', type=int,
                    help=f"minimal length of a word (default: {pwgen.MIN_WORD_LENGTH})")
    ap.add_argument('--max', dest='max_length', type=int,
                    help=f"maximal length of a word (default: {pwgen.MAX_WORD_LENGTH})")
    # on/off pairs, either may override the config file
    ap.add_argument('-C', '--capitalize-first', action='store_true', default=None,
                    help="capitalize only the first word (default: every word)")
    ap.add_argument('--each-word', dest='capitalize_first', action='store_false', default=None,
                    help="capitalize every word")
    ap.add_argument('-S', '--no-space', action='store_true', default=None,
                    help="do not separate words by spaces")
    ap.add_argument('--space', dest='no_space', action='store_false', default=None,
                    help="separate words by spaces")
    ap.add_argument('-n', '--numbers', type=int,
                    help=f"number of digits to append (default: {pwgen.NUM_DIGITS})")
    ap.add_argument('-X', '--no-special', action='store_true', default=None,
                    help="do not append a special character")
    ap.add_argument('--special', dest='no_special', action='store_false', default=None,
                    help="append a special character")
    ap.add_argument('-s', '--special-chars', metavar='CHARS',
                    help="special characters to choose from "
                         f"(default: {''.join(pwgen.SPECIAL_CHARS)})")
    ap.add_argument('-f', '--wordlist', type=Path,
                    help=f"word list, one word per line "
                         f"(default: {wordlist.DEFAULT_WORDLIST_PATH})")
    ap.add_argument('--config', dest='config_file',
                    default=DATA_DIR / 'phrasebox.conf',
                    help="config file (default: %(default)s)")
    ap.add_argument('-p', '--plain', action='store_true',
                    help="print only the passphrases, one per line")
    ap.add_argument('--copy', action='store_true',
                    help="copy the last passphrase to clipboard")
    ap.add_argument('-v', '--verbose', action='store_true',
                    help="print debug messages")
    return ap.parse_args(args=argv)


def main(argv=None):
    """Main program

    :param argv: Used in tests. Default is sys.argv
    :return: Exit status
    """
    args = parse_args(argv)
    logging.basicConfig(format='%(levelname)s: %(message)s',
                        level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        run_generate(args)
    except PassphraseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
