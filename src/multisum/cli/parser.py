"""CLI argument parser for multisum.

Handles parsing of command-line arguments and provides a clean
interface for defining CLI options.
"""

import argparse
from argparse import Namespace

from multisum import __version__
from multisum.core.algorithms import FAMILY_ALIASES


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        msg = f"invalid integer: '{value}'"
        raise argparse.ArgumentTypeError(msg) from None
    if number < 1:
        msg = f"must be at least 1: '{value}'"
        raise argparse.ArgumentTypeError(msg)
    return number


class CLIParser:
    """Command-line argument parser for multisum."""

    def parse_args(self, argv: list[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:]).

        Returns:
            Namespace: Parsed arguments namespace.

        """
        return self.create_parser().parse_args(argv)

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser.

        Returns:
            argparse.ArgumentParser: The configured parser.

        """
        parser = argparse.ArgumentParser(
            prog="multisum",
            description="Compute and check SHA, SHA3, BLAKE2b and MD5 checksums",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # SHA-256 of two files (GNU format)
  %(prog)s -t sha -l 256 file1.iso file2.iso

  # BLAKE2b-512 in BSD format
  %(prog)s -t b2 -l 512 --bsd file.iso

  # Verify a checksum file
  %(prog)s -t sha -l 256 -c SHA256SUMS

  # Hash standard input
  echo -n abc | %(prog)s -t md5 -
            """,
        )
        self._add_algorithm_options(parser)
        self._add_mode_options(parser)
        self._add_output_options(parser)
        parser.add_argument(
            "files",
            metavar="FILE",
            nargs="*",
            help="the files to process; with no FILE, or when FILE is -, "
            "read standard input",
        )
        return parser

    def _add_algorithm_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-t",
            "--type",
            dest="checksum_type",
            required=True,
            help=f"the type of checksum ({', '.join(FAMILY_ALIASES)})",
        )
        parser.add_argument(
            "-l",
            "--length",
            dest="bit_length",
            help="the bit length of the checksum "
            "(sha: 160/256/512, sha3 and blake2b: 256/512)",
        )

    def _add_mode_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-c",
            "--check",
            action="store_true",
            help="read checksums from the FILEs and check them",
        )
        parser.add_argument(
            "--bsd",
            action="store_true",
            help="create a BSD-style checksum",
        )
        parser.add_argument(
            "--binary",
            action="store_true",
            help="read in binary mode",
        )
        parser.add_argument(
            "-s",
            "--stdin",
            action="store_true",
            help="read data from stdin",
        )
        parser.add_argument(
            "-j",
            "--jobs",
            type=_positive_int,
            default=None,
            help="number of files to hash concurrently "
            "(default: max_workers from settings.conf)",
        )

    def _add_output_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--quiet",
            action="store_true",
            help="don't print OK for each successfully verified file",
        )
        parser.add_argument(
            "--status",
            action="store_true",
            help="don't output anything, status code shows success",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="print a JSON report instead of checksum lines",
        )
        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="show debug logging on stderr",
        )
        # action="version" exits before the required -t is checked
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
            help="show multisum version and exit",
        )
