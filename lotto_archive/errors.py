from typing import Optional


class LottoArchiveError(Exception):
    """Base error for archive import, serialization and verification."""

    def __init__(self, message: str, year: Optional[int] = None,
                 line: Optional[int] = None, token: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.year = year
        self.line = line
        self.token = token

    def with_context(self, year: Optional[int] = None, line: Optional[int] = None) -> "LottoArchiveError":
        """Fill in year/line context without overwriting what is already known."""
        if self.year is None:
            self.year = year
        if self.line is None:
            self.line = line
        return self

    def __str__(self) -> str:
        context = []
        if self.year is not None:
            context.append(f"year {self.year}")
        if self.line is not None:
            context.append(f"line {self.line}")
        if self.token is not None:
            context.append(f"token {self.token!r}")
        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"


# Parsing
class MalformedNumber(LottoArchiveError): pass
class InvalidMonth(LottoArchiveError): pass
class HeaderParseError(LottoArchiveError): pass
class YearMismatch(LottoArchiveError): pass
class MalformedRecord(LottoArchiveError): pass

# Files and configuration
class InputFileError(LottoArchiveError): pass
class OutputFileError(LottoArchiveError): pass
class ConfigError(LottoArchiveError): pass

# Verification
class TruncatedFile(LottoArchiveError): pass


class RecordMismatch(LottoArchiveError):
    """A record read back from disk differs from the one in memory."""

    def __init__(self, index: int, expected, found, path: Optional[str] = None):
        source = f" found from file {path}" if path else ""
        super().__init__(f"inconsistent extraction{source}, extraction number {index}")
        self.index = index
        self.expected = expected
        self.found = found
        self.path = path

    def details(self) -> str:
        """Field-by-field dump of the expected and found records."""
        from .codec import describe

        return "\n".join([
            f"Extraction number {self.index}",
            "Expected:",
            describe(self.expected),
            "Found:",
            describe(self.found),
        ])
