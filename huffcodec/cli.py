"""
Command line entry point: build a Huffman code for a text file and report on it.
"""

import argparse
import sys

from .codecs import HuffmanCodecFile
from .errors import HuffmanError
from .logger import Logger
from .report import format_report
from .settings import DEFAULT_INPUT_PATH, ORIGINAL_BITS_PER_SYMBOL, FILE_ENCODING


def build_parser():
    parser = argparse.ArgumentParser(
        prog='huffcodec',
        description='Huffman coding report for a text file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  huffcodec input.txt
  huffcodec input.txt --keep-newlines --plot codes.png
  huffcodec input.txt --no-encoded --log-file run.log
        """
    )
    parser.add_argument('path', nargs='?', default=DEFAULT_INPUT_PATH, help='Text file to encode')
    parser.add_argument('--bits-per-symbol', type=int, default=ORIGINAL_BITS_PER_SYMBOL,
                        help='Width of one symbol of the original text')
    parser.add_argument('--encoding', default=FILE_ENCODING, help='Text encoding of the file')
    parser.add_argument('--keep-newlines', action='store_true', help='Keep line terminators in the text')
    parser.add_argument('--no-encoded', action='store_true', help='Do not print the encoded bits')
    parser.add_argument('--plot', help='Save a code length plot to this path')
    parser.add_argument('--log-file', help='Write the run log to this path')
    parser.add_argument('-v', '--verbose', action='store_true', help='Print stage logs')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logger = Logger()
    logger.display_info = args.verbose
    logger.display_progress = args.verbose

    analysis = None
    try:
        analysis = HuffmanCodecFile().analyze(
            args.path,
            bits_per_symbol=args.bits_per_symbol,
            logger=logger,
            keep_newlines=args.keep_newlines,
            encoding=args.encoding,
        )
    except (OSError, LookupError, ValueError, HuffmanError) as e:
        # LookupError: unknown --encoding
        print(f"Error: {e}", file=sys.stderr)

    if args.log_file:
        try:
            logger.save(args.log_file)
        except OSError as e:
            print(f"Error: cannot write log file: {e}", file=sys.stderr)
            return 1

    if analysis is None:
        return 1

    print(format_report(analysis, show_encoded=not args.no_encoded))

    if args.plot:
        from .performance_display import PerformanceDisplay
        PerformanceDisplay(analysis).generate_code_length_plot(save_path=args.plot)

    return 0


if __name__ == '__main__':
    sys.exit(main())
