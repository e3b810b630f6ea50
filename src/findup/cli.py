#!/usr/bin/env python3
"""
findup CLI — Command line interface for duplicate file detection.
Prints every group of identical files, one path per line, groups separated by a blank line.
Nothing is ever modified on disk.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from findup import __version__
from findup.core.models import FindupParams, DuplicateGroup, ScanStats
from findup.commands import FindDuplicatesCommand
from findup.utils.convert_utils import ConvertUtils
from findup.aliases import (
    ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT,
    SIZE_HELP_TEXT, EPILOG_TEXT
)


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: '{value}'")
    return number


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False
        self._progress_shown: bool = False
        self.summary: dict = {}

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="findup",
            description="findup — find groups of identical files",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "paths",
            nargs="+",
            metavar="PATH",
            help="Files or directories to scan"
        )

        # Filtering options
        parser.add_argument(
            "--mindepth",
            type=_non_negative_int,
            default=0,
            metavar="N",
            help="Ignore files less than N levels below the given paths. Default: 0"
        )
        parser.add_argument(
            "--maxdepth",
            type=_non_negative_int,
            default=None,
            metavar="N",
            help="Descend at most N levels below the given paths. Default: unlimited"
        )
        parser.add_argument(
            "--size", "-s",
            default="+0",
            type=str,
            metavar="SPEC",
            help=SIZE_HELP_TEXT
        )

        # Digest options
        parser.add_argument(
            "--algorithm",
            choices=ALGORITHM_CHOICES,
            default="sha1",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )
        parser.add_argument(
            "--jobs", "-j",
            type=int,
            default=1,
            metavar="N",
            help="Number of threads used to digest files. Default: 1"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress warnings and the 'No matches found' message"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show progress and detailed statistics on stderr"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        argv = sys.argv[1:] if args is None else list(args)
        return parser.parse_args(CLIApplication._attach_size_values(argv))

    @staticmethod
    def _attach_size_values(argv: List[str]) -> List[str]:
        """
        Rewrites "--size -1k" as "--size=-1k".
        argparse would otherwise read "-1k" as an unknown option.
        """
        result = []
        i = 0
        while i < len(argv):
            arg = argv[i]
            if arg in ("--size", "-s") and i + 1 < len(argv):
                result.append(f"--size={argv[i + 1]}")
                i += 2
                continue
            if arg == "--":
                result.extend(argv[i:])
                break
            result.append(arg)
            i += 1
        return result

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before any scanning happens."""
        for path in args.paths:
            if not os.path.exists(path):
                self.error_exit(f"Path not found: {path}")

        if args.maxdepth is not None and args.maxdepth < args.mindepth:
            self.error_exit("--maxdepth cannot be less than --mindepth")

        if args.jobs < 1:
            self.error_exit("--jobs must be at least 1")

        if not ConvertUtils.is_valid_size_spec(args.size):
            self.error_exit(f"Invalid size format: '{args.size}'")

    def create_params(self, args: argparse.Namespace) -> FindupParams:
        """Create FindupParams from CLI arguments."""
        try:
            return FindupParams.from_human_readable(
                roots=args.paths,
                size_spec=args.size,
                min_depth=args.mindepth,
                max_depth=args.maxdepth,
                algorithm=ALGORITHM_ALIASES[args.algorithm],
                jobs=args.jobs,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        self._progress_shown = True
        if total and total > 0:
            sys.stderr.write(f"\r{stage} file {current}/{total}")
        else:
            sys.stderr.write(f"\r{stage} file number {current}")
        sys.stderr.flush()

    def run_search(self, params: FindupParams) -> List[DuplicateGroup]:
        """Execute the duplicate search."""
        command = FindDuplicatesCommand()
        try:
            groups, stats = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None,
                ignored_callback=self.ignored_file,
            )
        except ValueError as e:
            self.error_exit(str(e))

        if self._progress_shown:
            # Progress lines end with \r only
            sys.stderr.write("\n")
            sys.stderr.flush()

        self.summary = command.reporter.summary()
        if self.verbose:
            self.print_stats(stats)

        return groups

    def ignored_file(self, path: str) -> None:
        self.warning(f"findup was given (and is ignoring) the special file {path}")

    @staticmethod
    def print_stats(stats: ScanStats) -> None:
        print(stats.print_summary(), file=sys.stderr)

    def output_results(self, groups: List[DuplicateGroup]) -> None:
        """Print duplicate groups: one path per line, a blank line after each group."""
        if not groups:
            if not self.quiet:
                print("No matches found", file=sys.stderr)
            return

        for group in groups:
            for path in group.paths:
                print(path)
            print()

        if self.verbose:
            print(
                f"Found {self.summary['groups']} duplicate groups ({self.summary['files']} files, "
                f"{ConvertUtils.bytes_to_human(self.summary['wasted_bytes'])} reclaimable)",
                file=sys.stderr
            )

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"Warning: {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        # Scanner warnings (unreadable directories) show unless --quiet
        if self.verbose:
            logging.getLogger("findup").setLevel(logging.INFO)
        elif self.quiet:
            logging.getLogger("findup").setLevel(logging.ERROR)
        else:
            logging.getLogger("findup").setLevel(logging.WARNING)

        self.validate_args(args)
        params = self.create_params(args)

        if params.jobs > (os.cpu_count() or 1) * 4:
            self.warning(f"{params.jobs} jobs is far more than this machine has CPUs")

        groups = self.run_search(params)
        self.output_results(groups)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"Completed in {elapsed:.2f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
