# format_table, format_plain, copy_to_clipboard
# (presentation of generated passphrases)
#

from blessed import Terminal
import pyperclip

from .errors import ClipboardUnavailable


def format_table(results, term=None) -> str:
    """Format results as a table with index and passphrase columns.

    Header is printed in bold when `term` supports styling.

    """
    if term is None:
        term = Terminal()
    width = max([len('#')] + [len(str(r.index)) for r in results])
    lines = [term.bold('#'.rjust(width) + '  ' + 'Passphrase')]
    for result in results:
        lines.append(str(result.index).rjust(width) + '  ' + result.text)
    return '\n'.join(lines) + '\n'


def format_plain(results) -> str:
    """One passphrase per line, without index."""
    return ''.join(result.text + '\n' for result in results)


def copy_to_clipboard(text):
    """Wraps copy-to-clipboard function to allow overriding."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardUnavailable(str(e)) from e
