import unittest
from huffcodec.codecs import HuffmanCodec
from huffcodec.report import symbol_label, format_code_table, format_metrics, format_report

class TestReport(unittest.TestCase):
    def setUp(self):
        self.analysis = HuffmanCodec().analyze("aabbbcc")

    def test_symbol_label(self):
        self.assertEqual(symbol_label(' '), "SPACE")
        self.assertEqual(symbol_label('\n'), "NEWLINE")
        self.assertEqual(symbol_label('x'), "x")

    def test_code_table(self):
        table = format_code_table(self.analysis.frequencies, self.analysis.codes)
        lines = table.splitlines()
        self.assertEqual(len(lines), 7)
        self.assertIn("Character", lines[1])
        self.assertIn("Huffman Code", lines[1])
        self.assertEqual(lines[0], lines[2])
        self.assertEqual(lines[0], lines[-1])
        self.assertEqual(lines[3].split("|")[1:4], ["     a     ", "     2     ", "      10      "])
        self.assertEqual(len({len(line) for line in lines}), 1)

    def test_code_table_space_label(self):
        analysis = HuffmanCodec().analyze("a b")
        table = format_code_table(analysis.frequencies, analysis.codes)
        self.assertIn("SPACE", table)

    def test_metrics(self):
        text = format_metrics(self.analysis.metrics)
        self.assertIn("Entropy: 1.5567 bits per character", text)
        self.assertIn("Compression Ratio: 5.0909", text)
        self.assertIn("Compression Efficiency: 0.9906", text)

    def test_report(self):
        report = format_report(self.analysis)
        self.assertIn("Original Text:\naabbbcc", report)
        self.assertIn("Encoded Text:\n10100001111", report)
        self.assertIn("Compression Results:", report)
        self.assertNotIn("Encoded Text", format_report(self.analysis, show_encoded=False))

if __name__ == '__main__':
    unittest.main()
