"""
huffcodec: Huffman coding of text with entropy and compression efficiency metrics.
"""

__version__ = "0.1.0"

from .models import (
    Symbol,
    SymbolFrequency,
    LeafNode,
    InternalNode,
    CodeTable,
)

from .errors import (
    HuffmanError,
    EmptyInputError,
    MissingCodeError,
)

from .frequency import (
    count_symbols,
    count_symbols_chunked,
    merge_frequencies,
    total_symbols,
)

from .heap import MinHeap

from .tree import (
    build_tree,
    tree_depth,
    count_leaves,
)

from .coders import (
    generate_codes,
    encode_text,
)

from .metrics import (
    CompressionMetrics,
    calculate_entropy,
    calculate_compression_ratio,
    calculate_average_bits_per_symbol,
    calculate_efficiency,
    compute_metrics,
)

from .codecs import (
    HuffmanAnalysis,
    HuffmanCodec,
    HuffmanCodecFile,
)

from .file_handler import read_text_file

from .logger import (
    Logger,
    Log,
    LogLevel,
    FrequencyAnalysisLog,
    TreeConstructionLog,
    CodeGenerationLog,
    CodingLog,
    MetricsLog,
    StageErrorLog,
    TreeMergeProgressStep,
    CodingProgressStep,
)

from .settings import ORIGINAL_BITS_PER_SYMBOL, SINGLE_SYMBOL_CODE

# Validators
from .validators import *

__all__ = [

    "Symbol",
    "SymbolFrequency",
    "LeafNode",
    "InternalNode",
    "CodeTable",

    "HuffmanError",
    "EmptyInputError",
    "MissingCodeError",

    "count_symbols",
    "count_symbols_chunked",
    "merge_frequencies",
    "total_symbols",

    "MinHeap",

    "build_tree",
    "tree_depth",
    "count_leaves",

    "generate_codes",
    "encode_text",

    "CompressionMetrics",
    "calculate_entropy",
    "calculate_compression_ratio",
    "calculate_average_bits_per_symbol",
    "calculate_efficiency",
    "compute_metrics",

    "HuffmanAnalysis",
    "HuffmanCodec",
    "HuffmanCodecFile",

    "read_text_file",

    "Logger",
    "Log",
    "LogLevel",
    "FrequencyAnalysisLog",
    "TreeConstructionLog",
    "CodeGenerationLog",
    "CodingLog",
    "MetricsLog",
    "StageErrorLog",
    "TreeMergeProgressStep",
    "CodingProgressStep",

    "ORIGINAL_BITS_PER_SYMBOL",
    "SINGLE_SYMBOL_CODE",
]
