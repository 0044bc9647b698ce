"""
randpw.generator
Cryptographically secure password generator using Python's secrets module.

Passwords are built either from exact per-class counts (``generate``) or from a
total length drawn over every enabled class (``generate_length``). Character
classes are expected to be disjoint; this is not checked.
"""

import logging
import string
from dataclasses import dataclass, field
from secrets import randbelow
from typing import List, Optional

from .errors import (
    ClassUnavailableError,
    EmptyPoolError,
    NegativeCountError,
    NegativeLengthError,
)

logger = logging.getLogger(__name__)

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SYMBOLS = "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"


@dataclass(frozen=True)
class CharacterSet:
    """Character classes a Generator draws from. An empty class is disabled."""

    lowercase: str = ""
    uppercase: str = ""
    digits: str = ""
    symbols: str = ""


DEFAULT_CHARSET = CharacterSet(
    lowercase=LOWERCASE,
    uppercase=UPPERCASE,
    digits=DIGITS,
    symbols=SYMBOLS,
)


def uniform_random_index(n: int) -> int:
    """Return a random int i where 0 <= i < n."""
    if n <= 0:
        raise ValueError("upper bound must be > 0")
    # randbelow rejects out-of-range bits instead of reducing modulo n
    return randbelow(n)


def uniform_random_index_inclusive(max_index: int) -> int:
    """Return a random int i where 0 <= i <= max_index."""
    return uniform_random_index(max_index + 1)


def random_element(s: str) -> str:
    return s[uniform_random_index(len(s))]


def insert_shuffled(chars: List[str], ch: str) -> List[str]:
    """
    Add ``ch`` to ``chars`` at a uniformly random position out of len(chars) + 1.

    The element previously at that position moves to the end (inside-out
    Fisher-Yates), so a list built only through this function is a uniformly
    random permutation of everything added to it.
    """
    j = uniform_random_index_inclusive(len(chars))
    if j == len(chars):
        chars.append(ch)
    else:
        chars.append(chars[j])
        chars[j] = ch
    return chars


@dataclass(frozen=True)
class Generator:
    """
    Password generator over a fixed character set.

    Omitting ``charset`` selects DEFAULT_CHARSET. A supplied set is used as is,
    so leaving a class empty disables it instead of falling back to defaults.
    """

    charset: Optional[CharacterSet] = None
    pool: str = field(init=False, repr=False)

    def __post_init__(self):
        if self.charset is None:
            object.__setattr__(self, "charset", DEFAULT_CHARSET)
        c = self.charset
        object.__setattr__(self, "pool", c.lowercase + c.uppercase + c.digits + c.symbols)

    @property
    def lowercase(self) -> str:
        return self.charset.lowercase

    @property
    def uppercase(self) -> str:
        return self.charset.uppercase

    @property
    def digits(self) -> str:
        return self.charset.digits

    @property
    def symbols(self) -> str:
        return self.charset.symbols

    def generate(self, num_lower: int, num_upper: int, num_digits: int, num_symbols: int) -> str:
        """
        Generate a password with exactly the requested number of characters
        from each class, in uniformly random order.
        """
        requested = (
            ("lowercase", num_lower, self.lowercase),
            ("uppercase", num_upper, self.uppercase),
            ("digits", num_digits, self.digits),
            ("symbols", num_symbols, self.symbols),
        )
        if any(n < 0 for _, n, _ in requested):
            raise NegativeCountError()
        for name, n, chars in requested:
            if n > 0 and not chars:
                raise ClassUnavailableError(name)

        length = num_lower + num_upper + num_digits + num_symbols
        logger.debug(
            "generating %d chars (lower=%d upper=%d digits=%d symbols=%d)",
            length, num_lower, num_upper, num_digits, num_symbols,
        )
        if length == 0:
            return ""

        password_chars: List[str] = []
        for _, n, chars in requested:
            for _ in range(n):
                insert_shuffled(password_chars, random_element(chars))
        return "".join(password_chars)

    def generate_length(self, length: int) -> str:
        """Generate a password of ``length`` characters drawn from the whole pool."""
        if length < 0:
            raise NegativeLengthError()
        if length == 0:
            return ""
        if not self.pool:
            raise EmptyPoolError()

        logger.debug("generating %d chars from a pool of %d", length, len(self.pool))
        return "".join(random_element(self.pool) for _ in range(length))


def new_generator(charset: Optional[CharacterSet] = None) -> Generator:
    return Generator(charset)


# shared by the module-level shortcuts, built once at import
_default_generator = Generator()


def generate(num_lower: int, num_upper: int, num_digits: int, num_symbols: int) -> str:
    """Shortcut for Generator.generate with the default character set."""
    return _default_generator.generate(num_lower, num_upper, num_digits, num_symbols)


def generate_length(length: int) -> str:
    """Shortcut for Generator.generate_length with the default character set."""
    return _default_generator.generate_length(length)
