import argparse
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from . import __version__
from .config import settings
from .core import ConversionConfig, ConversionResult, Converter, validate_options
from .exceptions import EngineInitError, ExitCode, InvalidArgumentsError
from .utils.logging_config import configure_logging

EXAMPLES = """\
Examples:
  pdf2img document.pdf
  pdf2img document.pdf -f jpeg -q 90 -d 300
  pdf2img document.pdf -p 1-5 -o ./images
  pdf2img document.pdf --pages "1,3,5-7" --prefix output
"""


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that reports usage errors with exit code 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(int(ExitCode.INVALID_ARGS), f"Error: {message}\n")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="pdf2img",
        usage="pdf2img <input.pdf> [options]",
        description="Converts PDF pages to images (PNG or JPEG).",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", type=Path, help="Path to input PDF file")
    parser.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Output directory (default: same as input file)",
    )
    parser.add_argument(
        "-f", "--format", default=settings.default_format,
        help="Output format: png or jpeg (default: %(default)s)",
    )
    parser.add_argument(
        "-q", "--quality", type=int, default=settings.default_quality,
        help="JPEG quality, 1-100 (default: %(default)s)",
    )
    parser.add_argument(
        "-d", "--dpi", type=int, default=settings.default_dpi,
        help="Render resolution in DPI, 72-600 (default: %(default)s)",
    )
    parser.add_argument(
        "-p", "--pages", default=settings.default_pages,
        help="Pages to convert: all, 1, 1-5, 1,3,5 (default: %(default)s)",
    )
    parser.add_argument(
        "--prefix", default=None,
        help="Output filename prefix (default: input filename)",
    )
    parser.add_argument("--json", action="store_true", help="Output results as JSON")
    parser.add_argument(
        "--log-level", default=settings.log_level,
        help="Diagnostic log level on stderr (default: %(default)s)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s version {__version__}",
        help="Print version and exit",
    )
    return parser


def print_result(result: ConversionResult, as_json: bool) -> None:
    if as_json:
        print(result.to_json())
    elif result.success:
        print(f"Converted {result.page_count} page(s) from {Path(result.input_file).name}")
        for path in result.output_files:
            print(f"  {path}")
    else:
        print(f"Error: {result.error}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, settings.log_format)

    try:
        image_format = validate_options(args.format, args.quality, args.dpi, args.pages)
    except InvalidArgumentsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return int(exc.exit_code)

    config = ConversionConfig(
        input_file=args.input.absolute(),
        output_dir=args.output.absolute() if args.output is not None else None,
        format=image_format,
        quality=args.quality,
        dpi=args.dpi,
        pages=args.pages,
        prefix=args.prefix,
    )

    try:
        converter = Converter.create(acquire_timeout=settings.engine_acquire_timeout)
    except EngineInitError as exc:
        print(f"Error: failed to initialize converter: {exc}", file=sys.stderr)
        return int(exc.exit_code)

    with converter:
        result = converter.convert(config)

    print_result(result, args.json)
    return int(result.exit_code)


if __name__ == "__main__":
    sys.exit(main())
