import argparse
import logging
import sys
import time

from catalog_probe.core import CatalogConfig, ConfigurationError, setup_logger
from catalog_probe.engine import CatalogChecker
from catalog_probe.reporter import Reporter
from catalog_probe.sequencer import CodeSequence, parse_range, parse_start_code

END_BANNER = "--- check complete ---"


class CheckSessionManager:
    """
    Runs one check session: validated range in, report lines out.
    Banners and tallies go to the log; report lines go to the reporter's stream.
    """
    def __init__(self, codes, config, reporter=None, checker=None, logger=None):
        self.codes = codes
        self.config = config
        self.reporter = reporter or Reporter()
        self.checker = checker or CatalogChecker(config)
        self.logger = logger or logging.getLogger("catalog_probe")

    def run(self):
        self.logger.info(
            f"--- checking {self.codes.start} .. {self.codes.last} ({len(self.codes)} codes) ---"
        )
        start_time = time.time()

        for signals, classification in self.checker.run(self.codes):
            self.reporter.report(signals, classification)

        summary = self.reporter.summary()
        self.logger.info(
            f"checked={summary['checked']} "
            f"discontinued_or_redirected={summary['discontinued_or_redirected']} "
            f"out_of_stock_or_hidden={summary['out_of_stock_or_hidden']} "
            f"elapsed={time.time() - start_time:.1f}s"
        )
        self.logger.info(END_BANNER)
        return summary


def build_parser():
    parser = argparse.ArgumentParser(
        description="Check a range of catalog product codes for page/image/search mismatches",
        epilog="example: python main.py ru98000 100",
    )
    parser.add_argument("start_code", help="first product code, e.g. ru98000")
    parser.add_argument("range", help="number of consecutive codes to check")
    parser.add_argument("--log-file", help="also write log lines to this file")
    parser.add_argument("--delay", type=float, default=None, help="pause between codes in seconds")
    parser.add_argument("--verbose", action="store_true", help="log every probe")
    return parser


def main(argv=None, stream=None):
    args = build_parser().parse_args(argv)
    logger = setup_logger(
        "catalog_probe",
        log_file=args.log_file,
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    overrides = {} if args.delay is None else {"delay": args.delay}
    config = CatalogConfig.from_env(**overrides)

    try:
        count = parse_range(args.range)
        start = parse_start_code(args.start_code, config.code_width)
        codes = CodeSequence(start, count)
    except ConfigurationError as e:
        logger.error(f"CONFIGURATION_ERROR: {e}")
        return 1

    manager = CheckSessionManager(codes, config, reporter=Reporter(stream), logger=logger)
    try:
        manager.run()
    except KeyboardInterrupt:
        logger.warning("interrupted, stopping before the next probe")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
