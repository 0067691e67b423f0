"""CLI runner for multisum.

Resolves the algorithm, picks generate or check mode, prints results and
turns the aggregate status into an exit code.
"""

import sys
from argparse import Namespace

from multisum.config import ConfigManager
from multisum.constants import (
    EXIT_CONFIG_ERROR,
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_SUCCESS,
    STDIN_SENTINEL,
)
from multisum.core.algorithms import AlgorithmSpec, resolve
from multisum.core.codec import LineCodec
from multisum.core.generate import GenerateEngine, describe_os_error
from multisum.core.records import (
    Dialect,
    FileError,
    Mode,
    OutcomeKind,
    VerificationOutcome,
)
from multisum.core.report import (
    format_file_error,
    format_outcome,
    generate_report,
    verify_report,
)
from multisum.core.sources import open_text_source
from multisum.core.verify import VerificationSummary, VerifyEngine
from multisum.exceptions import ConfigError
from multisum.logger import (
    get_logger,
    set_console_level,
    update_logger_from_config,
)

from .parser import CLIParser

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, config_manager: ConfigManager | None = None) -> None:
        """Initialize CLI runner and apply settings.conf to logging.

        Args:
            config_manager: Settings loader (defaults to ~/.config/multisum).

        """
        self.config_manager = config_manager or ConfigManager()
        self.global_config = self.config_manager.load_global_config()
        update_logger_from_config(self.global_config)
        self.codec = LineCodec()

    def run(self, argv: list[str] | None = None) -> int:
        """Run the CLI application.

        Args:
            argv: Command-line arguments (defaults to sys.argv[1:]).

        Returns:
            Process exit code.

        """
        args = CLIParser().parse_args(argv)

        if args.verbose:
            set_console_level("DEBUG")

        try:
            spec = resolve(args.checksum_type, args.bit_length)
        except ConfigError as e:
            logger.debug("Rejected algorithm selection: %s", e)
            print(f"multisum: {e}", file=sys.stderr)
            return EXIT_CONFIG_ERROR

        engine = GenerateEngine(
            chunk_size=self.global_config["chunk_size"],
            max_workers=args.jobs or self.global_config["max_workers"],
        )
        files = self._input_paths(args)
        logger.debug(
            "Using %s on %d input(s), check=%s", spec, len(files), args.check
        )

        try:
            if args.check:
                passed = self._check(spec, files, engine, args)
            else:
                passed = self._generate(spec, files, engine, args)
        except KeyboardInterrupt:
            print("\nOperation cancelled by user", file=sys.stderr)
            return EXIT_INTERRUPTED

        return EXIT_SUCCESS if passed else EXIT_FAILURE

    def _input_paths(self, args: Namespace) -> list[str]:
        if args.stdin:
            if args.files:
                logger.warning(
                    "--stdin given, ignoring %d file argument(s)", len(args.files)
                )
            return [STDIN_SENTINEL]
        return args.files or [STDIN_SENTINEL]

    def _generate(
        self,
        spec: AlgorithmSpec,
        files: list[str],
        engine: GenerateEngine,
        args: Namespace,
    ) -> bool:
        mode = Mode.BINARY if args.binary else Mode.TEXT
        dialect = Dialect.BSD if args.bsd else Dialect.GNU
        results = engine.generate(spec, files, mode, dialect)

        if args.json:
            collected = list(results)
            print(generate_report(spec, collected, self.codec))
            return not any(isinstance(result, FileError) for result in collected)

        passed = True
        for result in results:
            if isinstance(result, FileError):
                print(format_file_error(result), file=sys.stderr)
                passed = False
            else:
                print(self.codec.encode(result), flush=True)
        return passed

    def _check(
        self,
        spec: AlgorithmSpec,
        checksum_files: list[str],
        engine: GenerateEngine,
        args: Namespace,
    ) -> bool:
        verifier = VerifyEngine(engine, self.codec)
        summary = VerificationSummary()
        collected: list[tuple[str, VerificationOutcome]] = []
        failed_sources: list[dict[str, str]] = []

        for source in checksum_files:
            file_summary = VerificationSummary()
            try:
                with open_text_source(source) as stream:
                    for outcome in verifier.verify(spec, stream):
                        summary.add(outcome)
                        file_summary.add(outcome)
                        if args.json:
                            collected.append((source, outcome))
                        else:
                            self._print_outcome(outcome, source, args)
            except OSError as e:
                reason = describe_os_error(e)
                failed_sources.append({"source": source, "reason": reason})
                if not args.json and not args.status:
                    print(f"multisum: {source}: {reason}", file=sys.stderr)
                continue

            if file_summary.total == 0:
                reason = "no properly formatted checksum lines found"
                failed_sources.append({"source": source, "reason": reason})
                if not args.status:
                    logger.warning("%s: %s", source, reason)
            elif not args.status:
                for message in file_summary.warnings():
                    logger.warning("%s", message)

        if args.json:
            print(verify_report(spec, collected, summary, failed_sources))

        return summary.passed and not failed_sources

    def _print_outcome(
        self, outcome: VerificationOutcome, source: str, args: Namespace
    ) -> None:
        if args.status:
            return
        if args.quiet and outcome.kind is OutcomeKind.MATCH:
            return
        print(format_outcome(outcome, source), flush=True)
