"""Exceptions raised while converting a String Catalog to Android resources."""


class CatalogError(Exception):
    """Base class for every conversion failure."""


class ParseToJsonError(CatalogError):
    """Raised when the input is not valid JSON or does not match the catalog schema."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid XCStrings file: {message}")


class InvalidUtf8Error(CatalogError):
    """Raised when byte input cannot be decoded as UTF-8."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid UTF8: {message}")


class CatalogIOError(CatalogError):
    """Raised when reading the catalog or writing a resource file fails."""

    def __init__(self, message: str) -> None:
        super().__init__(f"IO error: {message}")


class InvalidTranslationKeyError(CatalogError):
    """Raised when a translation key has leading or trailing whitespace."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Invalid translation key: {key!r}")
        self.key = key


class UnexpectedTranslationKindError(CatalogError):
    """Raised when a translation is not the variant the caller asked for."""

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(f"Expected a {expected} translation, got {actual}")
        self.expected = expected
        self.actual = actual
