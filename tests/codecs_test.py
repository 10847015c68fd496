import os
import tempfile
import unittest
from huffcodec.codecs import HuffmanAnalysis, HuffmanCodec, HuffmanCodecFile
from huffcodec.errors import EmptyInputError
from huffcodec.logger import (
    Logger,
    StageErrorLog,
    FrequencyAnalysisLog,
    TreeConstructionLog,
    CodeGenerationLog,
    CodingLog,
    MetricsLog,
)

class TestHuffmanCodec(unittest.TestCase):
    def setUp(self):
        self.codec = HuffmanCodec()

    def test_known_example(self):
        analysis = self.codec.analyze("aabbbcc")
        self.assertIsInstance(analysis, HuffmanAnalysis)
        self.assertEqual(len(analysis.frequencies), 3)
        self.assertEqual(analysis.codes.as_dict(), {'b': '0', 'a': '10', 'c': '11'})
        self.assertEqual(analysis.encoded_text, "10100001111")
        self.assertEqual(analysis.root.weight, 7)
        self.assertAlmostEqual(analysis.metrics.entropy, 1.5567, places=4)
        self.assertAlmostEqual(len(analysis.encoded_text) / 7, analysis.metrics.average_bits_per_symbol)

    def test_single_symbol(self):
        analysis = self.codec.analyze("aaaa")
        self.assertEqual(analysis.codes.as_dict(), {'a': '0'})
        self.assertEqual(len(analysis.encoded_text), 4 * len(analysis.codes.code_for('a')))
        self.assertEqual(analysis.metrics.entropy, 0.0)

    def test_deterministic(self):
        text = "peter piper picked a peck of pickled peppers"
        first = self.codec.analyze(text)
        second = self.codec.analyze(text)
        self.assertEqual(first.codes, second.codes)
        self.assertEqual(first.encoded_text, second.encoded_text)

    def test_bits_per_symbol(self):
        analysis = self.codec.analyze("aabbbcc", bits_per_symbol=16)
        self.assertAlmostEqual(analysis.metrics.compression_ratio, 112 / 11)

    def test_empty_input(self):
        logger = Logger()
        logger.display_error = False
        with self.assertRaises(EmptyInputError):
            self.codec.analyze("", logger=logger)
        errors = logger.get_logs(StageErrorLog)
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].stage, "tree")

    def test_invalid_type(self):
        with self.assertRaises(ValueError):
            self.codec.analyze(b"abc")

    def test_stage_logs(self):
        logger = Logger()
        logger.display_progress = False
        self.codec.analyze("hello world", logger=logger)
        for log_type in (FrequencyAnalysisLog, TreeConstructionLog, CodeGenerationLog, CodingLog, MetricsLog):
            self.assertEqual(len(logger.get_logs(log_type)), 1, log_type.__name__)

class TestHuffmanCodecFile(unittest.TestCase):
    def setUp(self):
        with tempfile.NamedTemporaryFile('w', suffix='.txt', delete=False, encoding='utf-8') as temp_file:
            temp_file.write("aab\nbbcc\n")
            self.path = temp_file.name

    def tearDown(self):
        os.remove(self.path)

    def test_analyze_joins_lines(self):
        analysis = HuffmanCodecFile().analyze(self.path)
        self.assertEqual(analysis.text, "aabbbcc")
        self.assertEqual(analysis.encoded_text, "10100001111")

    def test_analyze_keep_newlines(self):
        analysis = HuffmanCodecFile().analyze(self.path, keep_newlines=True)
        self.assertEqual(analysis.text, "aab\nbbcc\n")
        self.assertIn('\n', analysis.codes.as_dict())

    def test_missing_file(self):
        with self.assertRaises(ValueError):
            HuffmanCodecFile().analyze(self.path + ".missing")

if __name__ == '__main__':
    unittest.main()
