"""
report.py

Plain text rendering of a Huffman analysis.
"""


from typing import List

from .codecs import HuffmanAnalysis
from .metrics import CompressionMetrics
from .models import CodeTable, SymbolFrequency
from .settings import SYMBOL_LABELS

TABLE_HEADER = ("Character", "Frequency", "Huffman Code")


def symbol_label(char: str) -> str:
    """Printable name of a character, whitespace is spelled out."""
    return SYMBOL_LABELS.get(char, char)


def format_code_table(frequencies: List[SymbolFrequency], codes: CodeTable) -> str:
    rows = [TABLE_HEADER]
    for symbol_frequency in frequencies:
        symbol = symbol_frequency.symbol
        rows.append((symbol_label(symbol.data), str(symbol_frequency.frequency), codes[symbol]))

    widths = [max(len(row[i]) for row in rows) for i in range(len(TABLE_HEADER))]
    border = "+" + "+".join("-" * (width + 2) for width in widths) + "+"

    def render(row):
        return "| " + " | ".join(cell.center(width) for cell, width in zip(row, widths)) + " |"

    lines = [border, render(rows[0]), border]
    lines.extend(render(row) for row in rows[1:])
    lines.append(border)
    return "\n".join(lines)


def format_metrics(metrics: CompressionMetrics) -> str:
    return "\n".join([
        f"Entropy: {metrics.entropy:.4f} bits per character",
        f"Compression Ratio: {metrics.compression_ratio:.4f}",
        f"Compression Efficiency: {metrics.efficiency:.4f}",
    ])


def format_report(analysis: HuffmanAnalysis, show_text: bool = True, show_encoded: bool = True) -> str:
    sections = []
    if show_text:
        sections.append(f"Original Text:\n{analysis.text}\n")
    sections.append("Character Codes:\n" + format_code_table(analysis.frequencies, analysis.codes))
    if show_encoded:
        sections.append(f"\nEncoded Text:\n{analysis.encoded_text}")
    sections.append("\nCompression Results:\n" + format_metrics(analysis.metrics))
    return "\n".join(sections)
