import unittest
from huffcodec.coders import generate_codes, encode_text
from huffcodec.errors import MissingCodeError
from huffcodec.frequency import count_symbols
from huffcodec.logger import Logger, CodeGenerationLog, CodingLog
from huffcodec.models import Symbol, CodeTable
from huffcodec.tree import build_tree

def codes_for(text):
    return generate_codes(build_tree(count_symbols(text)))

def greedy_decode(bits, codes):
    code_to_char = {code: char for char, code in codes.as_dict().items()}
    decoded = []
    current = ''
    for bit in bits:
        current += bit
        if current in code_to_char:
            decoded.append(code_to_char[current])
            current = ''
    if current:
        raise ValueError("Trailing bits")
    return ''.join(decoded)

SAMPLES = [
    "aabbbcc",
    "abracadabra",
    "ab",
    "mississippi river",
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit.",
    "naïve café déjà vu",
    "\x00\x00\x01",
]

class TestGenerateCodes(unittest.TestCase):
    def test_known_example(self):
        codes = codes_for("aabbbcc")
        self.assertEqual(codes.as_dict(), {'b': '0', 'a': '10', 'c': '11'})

    def test_single_symbol_gets_non_empty_code(self):
        codes = codes_for("aaaa")
        self.assertEqual(codes.as_dict(), {'a': '0'})

    def test_one_entry_per_symbol(self):
        for text in SAMPLES:
            codes = codes_for(text)
            self.assertEqual(set(codes.as_dict()), set(text))

    def test_prefix_free(self):
        for text in SAMPLES:
            codes = list(codes_for(text).as_dict().values())
            for i, first in enumerate(codes):
                for j, second in enumerate(codes):
                    if i != j:
                        self.assertFalse(second.startswith(first), f"{first} prefixes {second}")

    def test_frequent_symbols_get_shorter_codes(self):
        codes = codes_for("aaaaaaaabbbbccd")
        self.assertLessEqual(len(codes.code_for('a')), len(codes.code_for('b')))
        self.assertLessEqual(len(codes.code_for('b')), len(codes.code_for('d')))

    def test_deep_tree(self):
        # fibonacci weights give a maximally unbalanced tree
        weights = [1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144]
        text = ''.join(chr(ord('a') + i) * w for i, w in enumerate(weights))
        codes = codes_for(text)
        self.assertEqual(codes.max_code_length(), len(weights) - 1)
        self.assertTrue(codes.is_prefix_free())

    def test_deterministic(self):
        for text in SAMPLES:
            self.assertEqual(codes_for(text), codes_for(text))

    def test_logging(self):
        logger = Logger()
        generate_codes(build_tree(count_symbols("aabbbcc")), logger=logger)
        log = logger.get_logs(CodeGenerationLog)[0]
        self.assertEqual(log.code_count, 3)
        self.assertEqual(log.max_code_length, 2)

class TestEncodeText(unittest.TestCase):
    def test_known_example(self):
        codes = codes_for("aabbbcc")
        self.assertEqual(encode_text("aabbbcc", codes), "10100001111")

    def test_single_symbol(self):
        codes = codes_for("aaaa")
        self.assertEqual(encode_text("aaaa", codes), "0000")

    def test_round_trip(self):
        for text in SAMPLES:
            codes = codes_for(text)
            self.assertEqual(greedy_decode(encode_text(text, codes), codes), text)

    def test_empty_text(self):
        self.assertEqual(encode_text("", codes_for("ab")), "")

    def test_missing_code(self):
        codes = codes_for("ab")
        with self.assertRaises(MissingCodeError) as ctx:
            encode_text("abc", codes)
        self.assertEqual(ctx.exception.symbol, 'c')
        self.assertEqual(ctx.exception.stage, "encode")
        self.assertIsInstance(ctx.exception, LookupError)

    def test_invalid_codes_type(self):
        with self.assertRaises(ValueError):
            encode_text("ab", {'a': '0', 'b': '1'})

    def test_logging(self):
        logger = Logger()
        logger.display_progress = False
        encode_text("aabbbcc", codes_for("aabbbcc"), logger=logger)
        log = logger.get_logs(CodingLog)[0]
        self.assertEqual(log.symbol_size, 7)
        self.assertEqual(log.encoded_size, 11)

if __name__ == '__main__':
    unittest.main()
