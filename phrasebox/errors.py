# PassphraseError and subclasses
# (error kinds reported by the generator)
#


class PassphraseError(RuntimeError):

    """Base class for errors which abort passphrase generation."""


class InvalidConfiguration(PassphraseError):

    def __init__(self, field, value, msg=None):
        self.field = field
        self.value = value
        PassphraseError.__init__(self, msg or f"Invalid value for {field}: {value!r}")


class WordSourceUnavailable(PassphraseError):

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        PassphraseError.__init__(self, f"Cannot read word list {str(path)!r}: {reason}")


class NoEligibleWords(PassphraseError):

    """No word from the word list satisfies the length bounds."""

    def __init__(self, min_length, max_length, wordlist=None):
        self.min_length = min_length
        self.max_length = max_length
        self.wordlist = wordlist
        source = repr(str(wordlist)) if wordlist is not None else "the word list"
        PassphraseError.__init__(
            self, f"No words of length {min_length} to {max_length} in {source}")


class ClipboardUnavailable(PassphraseError):

    def __init__(self, reason):
        self.reason = reason
        PassphraseError.__init__(self, f"Cannot copy to clipboard: {reason}")
