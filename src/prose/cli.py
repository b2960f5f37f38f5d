"""
Command-line interface for rendering prose markdown files.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from prose.markdown_ast_printer import MarkdownASTPrinter
from prose.markdown_converter import MarkdownConverter
from prose.markdown_html_renderer import MarkdownHTMLRenderer
from prose.markdown_parser_error import MarkdownParseError
from prose.markdown_settings import MarkdownSettings, MarkdownSettingsError
from prose.sample_document import SAMPLE_DOCUMENT


def setup_logging(verbose: bool) -> None:
    """Configure logging to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog='prose',
        description='Render prose markdown as HTML',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Render a file and print the HTML
  prose README.md

  # Render from stdin
  printf '# Hello\\n' | prose -

  # Render the built-in sample document
  prose --sample

  # Show the parsed tree instead of HTML
  prose README.md --ast

  # Report parse errors instead of printing the fallback message
  prose README.md --strict
"""
    )
    parser.add_argument(
        'input',
        nargs='?',
        help='Input file (use "-" for stdin)'
    )
    parser.add_argument(
        '-o', '--output',
        help='Output file (default: stdout)'
    )
    parser.add_argument(
        '--sample',
        action='store_true',
        help='Render the built-in sample document instead of reading input'
    )
    parser.add_argument(
        '--ast',
        action='store_true',
        help='Print the parsed tree instead of HTML'
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Print parse errors to stderr and exit 1 instead of printing the fallback message'
    )
    parser.add_argument(
        '--config', '-c',
        help='YAML settings file'
    )
    parser.add_argument(
        '--escape-html',
        action='store_true',
        help='HTML-escape text and attribute values'
    )
    parser.add_argument(
        '--terminate-final-line',
        action='store_true',
        help='Treat a missing newline at the end of the document as present'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    logger = logging.getLogger("ProseCLI")

    if args.sample and args.input:
        print("Error: Cannot use --sample with an input file", file=sys.stderr)
        return 1

    if not args.sample and not args.input:
        parser.print_help(sys.stderr)
        return 1

    try:
        settings = MarkdownSettings.load_from_file(args.config) if args.config else MarkdownSettings()

    except (FileNotFoundError, MarkdownSettingsError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.escape_html:
        settings.escape_html = True

    if args.terminate_final_line:
        settings.terminate_final_line = True

    # Read input
    if args.sample:
        source = SAMPLE_DOCUMENT

    else:
        try:
            if args.input == '-':
                source = sys.stdin.read()

            else:
                source = Path(args.input).read_text(encoding='utf-8')

        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: Cannot read {args.input}: {e}", file=sys.stderr)
            return 1

    logger.debug("Read %d characters", len(source))

    converter = MarkdownConverter(settings)
    if args.strict or args.ast:
        try:
            document = converter.parse(source)

        except MarkdownParseError as e:
            if args.strict:
                print(e, file=sys.stderr)
                return 1

            output = settings.fallback_message

        else:
            if args.ast:
                output = MarkdownASTPrinter().format(document).rstrip("\n")

            else:
                output = MarkdownHTMLRenderer(escape_html=settings.escape_html).render(document)

    else:
        output = converter.render(source)

    # Write output
    if args.output:
        try:
            Path(args.output).write_text(output, encoding='utf-8')

        except OSError as e:
            print(f"Error: Cannot write {args.output}: {e}", file=sys.stderr)
            return 1

    else:
        print(output)

    return 0
