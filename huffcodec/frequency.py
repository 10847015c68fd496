"""
frequency.py

Symbol frequency analysis of a text.
"""


from collections import Counter
from typing import Iterable, List, Optional

from .logger import Logger, FrequencyAnalysisLog
from .models import Symbol, SymbolFrequency
from .settings import DEFAULT_CHUNK_SIZE
from .validators import validate_type, validate_positive


def count_symbols(text: str, logger: Optional[Logger] = None) -> List[SymbolFrequency]:
    """
    Count how many times each character occurs in the text.

    Args:
        text (str): The text to analyse.
        logger (Optional[Logger]): Logger receiving a FrequencyAnalysisLog.

    Returns:
        List[SymbolFrequency]: One entry per distinct character, in order of first occurrence.
    """
    validate_type(text, "Text", str)
    frequencies = [SymbolFrequency(Symbol(char), count) for char, count in Counter(text).items()]
    if logger is not None:
        logger.log(FrequencyAnalysisLog(len(frequencies), len(text)))
    return frequencies


def merge_frequencies(parts: Iterable[List[SymbolFrequency]]) -> List[SymbolFrequency]:
    """
    Sum the frequencies of independently counted partitions of a text.

    Symbols keep the order in which they are first seen across the parts.
    """
    totals: Counter = Counter()
    for part in parts:
        for symbol_frequency in part:
            totals[symbol_frequency.symbol] += symbol_frequency.frequency
    return [SymbolFrequency(symbol, count) for symbol, count in totals.items()]


def count_symbols_chunked(text: str, chunk_size: int = DEFAULT_CHUNK_SIZE,
                          logger: Optional[Logger] = None) -> List[SymbolFrequency]:
    """
    Count symbols over disjoint slices of the text and merge the partial counts.

    The result is identical to count_symbols(text).
    """
    validate_type(text, "Text", str)
    validate_positive(chunk_size, "Chunk size")
    parts = (count_symbols(text[start:start + chunk_size]) for start in range(0, len(text), chunk_size))
    frequencies = merge_frequencies(parts)
    if logger is not None:
        logger.log(FrequencyAnalysisLog(len(frequencies), len(text)))
    return frequencies


def total_symbols(frequencies: Iterable[SymbolFrequency]) -> int:
    return sum(symbol_frequency.frequency for symbol_frequency in frequencies)
