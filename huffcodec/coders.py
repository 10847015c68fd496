"""
coders.py

Code assignment from a Huffman tree and encoding of text with the resulting table.
"""


from typing import Optional

from .errors import MissingCodeError
from .logger import Logger, CodeGenerationLog, CodingLog, CodingProgressStep
from .models import CodeTable, TreeNode
from .settings import SINGLE_SYMBOL_CODE
from .validators import validate_type


def generate_codes(root: TreeNode, logger: Optional[Logger] = None) -> CodeTable:
    """
    Assign a code to every leaf of the tree.

    Going left appends "0" and going right appends "1". A tree made of a single leaf
    gives that leaf SINGLE_SYMBOL_CODE, as an empty code cannot be decoded.

    Args:
        root (TreeNode): Root of the Huffman tree.
        logger (Optional[Logger]): Logger receiving a CodeGenerationLog.

    Returns:
        CodeTable: One code per leaf, left subtree first.
    """
    codes = CodeTable()
    if root.is_leaf:
        codes.add(root.symbol, SINGLE_SYMBOL_CODE)
    else:
        stack = [(root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_leaf:
                codes.add(node.symbol, prefix)
            else:
                # right pushed first so the left subtree is visited first
                stack.append((node.right, prefix + "1"))
                stack.append((node.left, prefix + "0"))

    if logger is not None:
        logger.log(CodeGenerationLog(len(codes), codes.max_code_length()))
    return codes


def encode_text(text: str, codes: CodeTable, logger: Optional[Logger] = None) -> str:
    """
    Encode a text by concatenating the code of each of its characters.

    Args:
        text (str): The text to encode.
        codes (CodeTable): Codes for every character of the text.
        logger (Optional[Logger]): Logger for coding progress and sizes.

    Returns:
        str: The encoded bits as a string of "0" and "1".

    Raises:
        MissingCodeError: If a character has no code.
    """
    validate_type(text, "Text", str)
    validate_type(codes, "Codes", CodeTable)
    lookup = codes.as_dict()
    encoded = []
    for char in text:
        code = lookup.get(char)
        if code is None:
            raise MissingCodeError(char, stage="encode")
        encoded.append(code)
        if logger is not None:
            logger.log(CodingProgressStep("Encoding symbols", len(text)))

    encoded_text = "".join(encoded)
    if logger is not None:
        logger.log(CodingLog(len(text), len(encoded_text)))
    return encoded_text
