#!/usr/bin/env python3
"""
Base64 Encoder/Decoder - Exception Classes

Every error the CLI reports to the user derives from Base64ToolError.
Stream errors raised inside the line prefixer are never wrapped.
"""


class Base64ToolError(Exception):
    """Base class for all tool errors."""

    def __init__(self, message: str, context: str = ""):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.context:
            return f"[{self.context}] {self.message}"
        return self.message


class InputReadError(Base64ToolError):
    """Raised when the input file or standard input cannot be read.

    Examples:
        - file exists but is not readable
        - stdin is closed or broken
    """

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(message, context="input")


class DecodeError(Base64ToolError):
    """Raised when the input is not valid base-64 for the chosen alphabet.

    Examples:
        - characters outside the alphabet
        - missing or misplaced padding
    """

    def __init__(self, message: str, alphabet: str = ""):
        self.alphabet = alphabet
        super().__init__(message, context="decode")


class OutputWriteError(Base64ToolError):
    """Raised when the result cannot be written."""

    def __init__(self, message: str, output_path: str = ""):
        self.output_path = output_path
        super().__init__(message, context="output")


class ConfigurationError(Base64ToolError):
    """Raised for invalid option combinations or values."""

    def __init__(self, message: str, param_name: str = ""):
        self.param_name = param_name
        super().__init__(message, context="config")
