#!/usr/bin/env python3
"""
Base64 Encoder/Decoder Tool
Based on Python's base64: https://github.com/python/cpython

Usage:
    b64 -e "Hello World"
    b64 SGVsbG8gV29ybGQ=
    b64 -e -u < image.png
    b64 -o image.png image.b64
"""

import argparse
import io
import os
import sys
from pathlib import Path
from typing import List, Optional

try:
    from .codec import clean_input, decode_data, encode_data
    from .exceptions import (
        Base64ToolError,
        ConfigurationError,
        DecodeError,
        InputReadError,
        OutputWriteError,
    )
    from .line_prefixer import prefix_lines
    from .logger import get_logger, setup_logging
    from .models import Alphabet, CodecConfig, Mode
except ImportError:
    from codec import clean_input, decode_data, encode_data
    from exceptions import (
        Base64ToolError,
        ConfigurationError,
        DecodeError,
        InputReadError,
        OutputWriteError,
    )
    from line_prefixer import prefix_lines
    from logger import get_logger, setup_logging
    from models import Alphabet, CodecConfig, Mode


__version__ = "1.0.0"

EXAMPLE_PATH = Path(__file__).with_name("example.sh")
EXAMPLE_INDENT = "  "

logger = get_logger("cli")


def build_epilog(example: str) -> str:
    """Render the indented "Example usage" block shown after the options."""
    indented = prefix_lines(io.StringIO(example), EXAMPLE_INDENT).read()
    if indented and not indented.endswith("\n"):
        indented += "\n"
    return "Example usage:\n\n" + indented


def create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="b64",
        description="b64 encodes and decodes base-64 strings.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=build_epilog(EXAMPLE_PATH.read_text(encoding="utf-8")),
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="File to read, or the text itself; reads stdin when omitted",
    )
    parser.add_argument(
        "-d", "--decode",
        action="store_true",
        help="Decode the input (default behavior)",
    )
    parser.add_argument(
        "-e", "--encode",
        action="store_true",
        help="Encode the input",
    )
    parser.add_argument(
        "-u", "--url",
        action="store_true",
        help="Use URL encoding (base64url) instead of standard",
    )
    parser.add_argument(
        "-o", "--output",
        metavar="FILE",
        help="Write the result to FILE instead of stdout",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug details to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def create_config_from_args(args: argparse.Namespace) -> CodecConfig:
    """Build the run configuration from parsed arguments.

    Raises:
        ConfigurationError: if --output names a directory
    """
    if args.output and os.path.isdir(args.output):
        raise ConfigurationError(
            f"output path '{args.output}' is a directory", param_name="output"
        )

    return CodecConfig(
        mode=Mode.ENCODE if args.encode else Mode.DECODE,
        alphabet=Alphabet.URL_SAFE if args.url else Alphabet.STANDARD,
        output=args.output,
        log_level="DEBUG" if args.verbose else "WARNING",
    )


def read_input(value: Optional[str]) -> bytes:
    """Resolve the raw input bytes.

    An argument naming an existing non-directory path is read as a file;
    any other argument is the input itself. Without an argument, all of
    stdin is read.
    """
    if value is not None:
        if os.path.exists(value) and not os.path.isdir(value):
            logger.debug("Reading input from file %s", value)
            try:
                with open(value, "rb") as f:
                    return f.read()
            except OSError as e:
                raise InputReadError(
                    f"error reading file '{value}': {e}", path=value
                ) from e
        logger.debug("Using argument as input")
        return os.fsencode(value)

    logger.debug("Reading input from stdin")
    try:
        return sys.stdin.buffer.read()
    except OSError as e:
        raise InputReadError(f"error reading from stdin: {e}") from e


def convert(data: bytes, config: CodecConfig) -> bytes:
    if config.mode is Mode.ENCODE:
        return encode_data(data, config.alphabet).encode("ascii")
    return decode_data(clean_input(data), config.alphabet)


def write_output(result: bytes, config: CodecConfig) -> None:
    """Write the result to the output file as-is, or to stdout plus a newline."""
    if config.output:
        try:
            Path(config.output).write_bytes(result)
        except OSError as e:
            raise OutputWriteError(str(e), output_path=config.output) from e
        logger.info("Wrote %d bytes to %s", len(result), config.output)
        return

    try:
        sys.stdout.flush()
        sys.stdout.buffer.write(result + b"\n")
        sys.stdout.buffer.flush()
    except OSError as e:
        raise OutputWriteError(str(e)) from e


def main(args: Optional[List[str]] = None) -> int:
    """Run the tool.

    Args:
        args: command-line arguments, sys.argv[1:] when None

    Returns:
        exit code (0 on success or when help was shown, 1 on error)
    """
    parser = create_argument_parser()
    parsed_args = parser.parse_args(args)

    try:
        config = create_config_from_args(parsed_args)
        setup_logging(config.log_level)
        if parsed_args.encode and parsed_args.decode:
            logger.warning("Both -d and -e given; encoding")

        raw_input = read_input(parsed_args.input)
        if not raw_input:
            parser.print_help(sys.stderr)
            return 0

        logger.debug(
            "%s %d bytes with the %s alphabet",
            config.mode.value, len(raw_input), config.alphabet.name,
        )
        result = convert(raw_input, config)
        write_output(result, config)
        return 0

    except DecodeError as e:
        print(f"Error decoding input: {e.message}", file=sys.stderr)
        return 1

    except OutputWriteError as e:
        print(f"Error writing output: {e.message}", file=sys.stderr)
        return 1

    except (InputReadError, ConfigurationError) as e:
        print(e.message, file=sys.stderr)
        return 1

    except Base64ToolError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
