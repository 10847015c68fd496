#settings.py

# Width assumed for every symbol of the uncompressed text when computing the
# compression ratio. Only exact for single byte encodings.
ORIGINAL_BITS_PER_SYMBOL = 8

# Code given to the only symbol of a one-symbol alphabet.
SINGLE_SYMBOL_CODE = "0"

DEFAULT_INPUT_PATH = "./input.txt"
FILE_ENCODING = "utf-8"

DEFAULT_CHUNK_SIZE = 1 << 20

SYMBOL_LABELS = {
    " ": "SPACE",
    "\t": "TAB",
    "\n": "NEWLINE",
    "\r": "RETURN",
}
