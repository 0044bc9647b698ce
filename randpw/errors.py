"""
randpw.errors
Exceptions raised when a password cannot be generated or delivered.
"""


class PasswordError(ValueError):
    """Base class for invalid generation requests."""


class NegativeCountError(PasswordError):
    def __init__(self):
        super().__init__("password with negative number of specific character types is impossible")


class ClassUnavailableError(PasswordError):
    def __init__(self, char_class: str):
        self.char_class = char_class
        super().__init__(
            f"non-zero number of {char_class} characters requested but character set is empty"
        )


class NegativeLengthError(PasswordError):
    def __init__(self):
        super().__init__("password with negative length is not possible")


class EmptyPoolError(PasswordError):
    def __init__(self):
        super().__init__("password of length requested but generator character set is empty")


class ClipboardError(RuntimeError):
    """The password could not be placed on the system clipboard."""
