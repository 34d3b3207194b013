"""Typed errors raised by the lamp fuel solver."""


class LampFuelError(Exception):
    """Base class for all package errors."""


class SourceNotFoundError(LampFuelError, KeyError):
    def __init__(self, source_id: int) -> None:
        super().__init__(source_id)
        self.source_id = source_id

    def __str__(self) -> str:
        return f"Cannot find source {self.source_id}"


class EdgeListFormatError(LampFuelError, ValueError):
    def __init__(self, message: str, line_no: int | None = None) -> None:
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no


class ConfigError(LampFuelError, ValueError):
    pass
