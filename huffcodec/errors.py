"""
errors.py

Errors raised by the huffcodec stages.
"""


from typing import Any, Optional


class HuffmanError(Exception):
    """Base class for errors raised while building or applying a Huffman code."""

    def __init__(self, message: str, stage: Optional[str] = None) -> None:
        self.stage = stage
        if stage is not None:
            message = f"[{stage}] {message}"
        super().__init__(message)


class EmptyInputError(HuffmanError, ValueError):
    """Raised when a stage needs at least one symbol and got none."""

    def __init__(self, stage: Optional[str] = None) -> None:
        super().__init__("Input text is empty", stage)


class MissingCodeError(HuffmanError, LookupError):
    """Raised when a symbol of the text has no entry in the code table."""

    def __init__(self, symbol: Any, stage: Optional[str] = None) -> None:
        self.symbol = symbol
        super().__init__(f"No code for symbol {symbol!r}", stage)
