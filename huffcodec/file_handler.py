#file_handler.py

from .settings import FILE_ENCODING
from .validators import validate_type, validate_file_exists


def read_text_file(file_path: str, keep_newlines: bool = False, encoding: str = FILE_ENCODING) -> str:
    """
    Read a text file into a single string.

    By default the lines are joined together. Lines end at "\n" only, and a single
    "\r" right before the end of a line is dropped with it. A lone "\r" is text.
    """
    validate_type(file_path, "File path", str)
    validate_file_exists(file_path)
    with open(file_path, 'r', encoding=encoding, newline='') as file:
        content = file.read()
    if keep_newlines:
        return content
    return ''.join(line[:-1] if line.endswith('\r') else line for line in content.split('\n'))
