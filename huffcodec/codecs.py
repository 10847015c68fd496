from typing import List, Optional

from .coders import encode_text, generate_codes
from .errors import HuffmanError
from .file_handler import read_text_file
from .frequency import count_symbols
from .logger import Logger, StageErrorLog
from .metrics import CompressionMetrics, compute_metrics
from .models import CodeTable, SymbolFrequency, TreeNode
from .settings import ORIGINAL_BITS_PER_SYMBOL, FILE_ENCODING
from .tree import build_tree
from .validators import validate_type, validate_file_exists


class HuffmanAnalysis:
    """Everything produced by one run of the Huffman pipeline over a text."""

    def __init__(
        self,
        text: str,
        frequencies: List[SymbolFrequency],
        root: TreeNode,
        codes: CodeTable,
        encoded_text: str,
        metrics: CompressionMetrics,
    ) -> None:
        self.text = text
        self.frequencies = frequencies
        self.root = root
        self.codes = codes
        self.encoded_text = encoded_text
        self.metrics = metrics


class HuffmanCodec:
    def analyze(
        self,
        text: str,
        bits_per_symbol: int = ORIGINAL_BITS_PER_SYMBOL,
        logger: Optional[Logger] = None,
    ) -> HuffmanAnalysis:
        """
        Build a Huffman code for the text, encode it and measure the result.

        Args:
            text (str): The text to analyse. Must not be empty.
            bits_per_symbol (int): Width of one symbol in the original text.
            logger: Logger instance for logging.

        Returns:
            HuffmanAnalysis: Counts, tree, codes, encoded text and metrics.

        Raises:
            EmptyInputError: If the text is empty.
        """
        validate_type(text, "Text", str)

        stage = "frequency"
        try:
            frequencies = count_symbols(text, logger=logger)
            stage = "tree"
            root = build_tree(frequencies, logger=logger)
            stage = "codes"
            codes = generate_codes(root, logger=logger)
            stage = "encode"
            encoded_text = encode_text(text, codes, logger=logger)
            stage = "metrics"
            metrics = compute_metrics(text, frequencies, encoded_text, bits_per_symbol, logger=logger)
        except (HuffmanError, ValueError) as e:
            if logger is not None:
                logger.log(StageErrorLog(stage, e))
            raise

        return HuffmanAnalysis(text, frequencies, root, codes, encoded_text, metrics)


class HuffmanCodecFile(HuffmanCodec):
    def analyze(
        self,
        input_path: str,
        bits_per_symbol: int = ORIGINAL_BITS_PER_SYMBOL,
        logger: Optional[Logger] = None,
        keep_newlines: bool = False,
        encoding: str = FILE_ENCODING,
    ) -> HuffmanAnalysis:
        """
        Read a text file and analyse its content.

        Args:
            input_path (str): Path to the input file.
            bits_per_symbol (int): Width of one symbol in the original text.
            logger: Logger instance for logging.
            keep_newlines (bool): Keep line terminators instead of joining the lines.
            encoding (str): Text encoding of the file.
        """
        validate_type(input_path, "Input path", str)
        validate_file_exists(input_path)

        text = read_text_file(input_path, keep_newlines=keep_newlines, encoding=encoding)
        return super().analyze(text, bits_per_symbol, logger)
