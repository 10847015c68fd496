"""
metrics.py

Information theoretic measures of a Huffman encoding.

The compression ratio compares against a fixed width per symbol
(ORIGINAL_BITS_PER_SYMBOL). For multi-byte characters this understates the
real original size. Efficiency is reported as computed and never clamped to 1.
"""


from typing import List, Optional

import numpy as np

from .errors import EmptyInputError
from .logger import Log, Logger, LogLevel, MetricsLog
from .models import SymbolFrequency
from .settings import ORIGINAL_BITS_PER_SYMBOL
from .validators import validate_type, validate_positive


class CompressionMetrics:
    """Entropy and compression figures of one encoded text."""

    def __init__(self, entropy: float, compression_ratio: float, average_bits_per_symbol: float,
                 efficiency: float, original_bits: int, encoded_bits: int, symbol_count: int) -> None:
        self.entropy = entropy
        self.compression_ratio = compression_ratio
        self.average_bits_per_symbol = average_bits_per_symbol
        self.efficiency = efficiency
        self.original_bits = original_bits
        self.encoded_bits = encoded_bits
        self.symbol_count = symbol_count

    def __repr__(self) -> str:
        return (f"CompressionMetrics(entropy={self.entropy:.4f}, "
                f"compression_ratio={self.compression_ratio:.4f}, "
                f"average_bits_per_symbol={self.average_bits_per_symbol:.4f}, "
                f"efficiency={self.efficiency:.4f})")


def calculate_entropy(frequencies: List[SymbolFrequency]) -> float:
    """
    Shannon entropy of the symbol distribution, in bits per symbol.

    Raises:
        EmptyInputError: If the frequencies add up to zero.
    """
    counts = np.array([frequency.frequency for frequency in frequencies], dtype=np.float64)
    total = counts.sum()
    if total == 0:
        raise EmptyInputError(stage="metrics")
    probabilities = counts / total
    return float(np.dot(probabilities, np.log2(1 / probabilities)))


def calculate_compression_ratio(symbol_count: int, encoded_bit_length: int,
                                bits_per_symbol: int = ORIGINAL_BITS_PER_SYMBOL) -> float:
    if symbol_count == 0:
        raise EmptyInputError(stage="metrics")
    if encoded_bit_length == 0:
        raise ValueError("Encoded text is empty")
    return (symbol_count * bits_per_symbol) / encoded_bit_length


def calculate_average_bits_per_symbol(symbol_count: int, encoded_bit_length: int) -> float:
    if symbol_count == 0:
        raise EmptyInputError(stage="metrics")
    return encoded_bit_length / symbol_count


def calculate_efficiency(entropy: float, average_bits_per_symbol: float) -> float:
    """Fraction of the entropy bound reached; 1.0 is optimal."""
    if average_bits_per_symbol == 0:
        raise ValueError("Average bits per symbol must be greater than 0")
    return entropy / average_bits_per_symbol


def compute_metrics(text: str, frequencies: List[SymbolFrequency], encoded_text: str,
                    bits_per_symbol: int = ORIGINAL_BITS_PER_SYMBOL,
                    logger: Optional[Logger] = None) -> CompressionMetrics:
    """
    Compute every metric for a text and its encoding.

    Args:
        text (str): The original text.
        frequencies (List[SymbolFrequency]): Symbol counts of the text.
        encoded_text (str): The encoded bit-string.
        bits_per_symbol (int): Width of one symbol in the original text.
        logger (Optional[Logger]): Logger receiving a MetricsLog.

    Returns:
        CompressionMetrics: The computed metrics.

    Raises:
        EmptyInputError: If the text is empty.
    """
    validate_type(text, "Text", str)
    validate_type(encoded_text, "Encoded text", str)
    validate_positive(bits_per_symbol, "Bits per symbol")
    if not text:
        raise EmptyInputError(stage="metrics")

    symbol_count = len(text)
    encoded_bits = len(encoded_text)
    entropy = calculate_entropy(frequencies)
    ratio = calculate_compression_ratio(symbol_count, encoded_bits, bits_per_symbol)
    average = calculate_average_bits_per_symbol(symbol_count, encoded_bits)
    efficiency = calculate_efficiency(entropy, average)

    if logger is not None:
        logger.log(MetricsLog(entropy, ratio, efficiency))
        if efficiency > 1:
            logger.log(Log("Metrics_log", LogLevel.WARNING,
                           f"Efficiency {efficiency:.4f} is above 1"))

    return CompressionMetrics(entropy, ratio, average, efficiency,
                              symbol_count * bits_per_symbol, encoded_bits, symbol_count)
