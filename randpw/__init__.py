"""randpw: cryptographically secure random passwords."""

from .errors import (
    ClassUnavailableError,
    EmptyPoolError,
    NegativeCountError,
    NegativeLengthError,
    ClipboardError,
    PasswordError,
)
from .generator import (
    DEFAULT_CHARSET,
    DIGITS,
    LOWERCASE,
    SYMBOLS,
    UPPERCASE,
    CharacterSet,
    Generator,
    generate,
    generate_length,
    new_generator,
)

__version__ = "0.1.0"
