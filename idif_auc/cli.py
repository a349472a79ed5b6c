"""
Command-line interface for the IDIF AUC calculator.

Usage:
    idif-auc --real real.txt --combined combined.txt
    idif-auc --interleaved both.txt --cutoff-a 5 --cutoff-b 10 --output tsv
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from idif_auc.analyzers.windows import WindowAnalyzer
from idif_auc.config import AnalysisConfig, load_config
from idif_auc.errors import AUCError
from idif_auc.loaders.table import CurveTableLoader
from idif_auc.loaders.text import LineFormat, ParsedCurves, parse, parse_text_input
from idif_auc.reports.generator import ReportGenerator

logger = logging.getLogger(__name__)

TABLE_SUFFIXES = ('.csv', '.tsv')
MAX_DECIMAL_PLACES = 10


def _setup_logging(verbose: bool, log_file: Optional[str] = None) -> Optional[logging.Handler]:
    """Configure the root logger; returns the file handler the caller must close."""
    level = logging.DEBUG if verbose else logging.INFO
    fmt = "%(asctime)s [%(levelname)s] %(message)s"
    datefmt = "%H:%M:%S"
    logging.basicConfig(level=level, format=fmt, datefmt=datefmt, stream=sys.stderr)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)
    if not log_file:
        return None
    fh = logging.FileHandler(log_file, mode="w")
    fh.setLevel(level)
    fh.setFormatter(logging.Formatter(fmt, datefmt))
    logging.getLogger().addHandler(fh)
    return fh


def _close_handler(handler: Optional[logging.Handler]) -> None:
    if handler is None:
        return
    logging.getLogger().removeHandler(handler)
    handler.close()


def _read_text(source: str) -> str:
    if source == '-':
        return sys.stdin.read()
    with open(source, 'r', encoding='utf-8-sig') as f:
        return f.read()


def _load_curve(source: str, label: str):
    """Load one curve from a table file or a text file."""
    if Path(source).suffix.lower() in TABLE_SUFFIXES:
        logger.debug("Reading %s curve from table %s", label, source)
        return CurveTableLoader(source).to_curve(label=label)
    logger.debug("Reading %s curve from text %s", label, source)
    return parse(_read_text(source), label=label)


def load_inputs(
    real: Optional[str],
    combined: Optional[str],
    interleaved: Optional[str],
    line_format: str,
) -> ParsedCurves:
    """Read both curves according to the selected line format."""
    if interleaved or LineFormat(line_format) is LineFormat.INTERLEAVED:
        source = interleaved or real
        if not source:
            raise ValueError("Interleaved line format needs an input file")
        return parse_text_input(_read_text(source), line_format=LineFormat.INTERLEAVED)

    if not real or not combined:
        raise ValueError("Both --real and --combined are required")
    real_result = _load_curve(real, "Real")
    combined_result = _load_curve(combined, "Combined")
    return ParsedCurves(
        real=real_result.curve,
        combined=combined_result.curve,
        warnings=real_result.warnings + combined_result.warnings,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='idif-auc',
        description='Compare Real and Combined time-activity curves by windowed AUC'
    )
    parser.add_argument(
        '--real', '-r',
        type=str,
        help='Real curve: text file of (time, activity) lines, .csv/.tsv table, or - for stdin'
    )
    parser.add_argument(
        '--combined', '-c',
        type=str,
        help='Combined curve: text file of (time, activity) lines, .csv/.tsv table, or - for stdin'
    )
    parser.add_argument(
        '--interleaved', '-i',
        type=str,
        help='Single text file with Real time/activity and Combined time/activity per line'
    )
    parser.add_argument(
        '--cutoff-a',
        type=float,
        help='First window cutoff in minutes (default from config: 5)'
    )
    parser.add_argument(
        '--cutoff-b',
        type=float,
        help='Second window cutoff in minutes (default from config: 10)'
    )
    parser.add_argument(
        '--decimals', '-d',
        type=int,
        help='Decimal places for AUC columns in the text report (0-10)'
    )
    parser.add_argument(
        '--config',
        type=str,
        help='Path to YAML config file'
    )
    parser.add_argument(
        '--output', '-o',
        type=str,
        choices=['text', 'json', 'tsv'],
        default='text',
        help='Output format (default: text)'
    )
    parser.add_argument(
        '--save', '-s',
        type=str,
        help='Save output to file'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log pipeline details'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        help='Also write the log to this file'
    )
    return parser


def _apply_overrides(config: AnalysisConfig, args: argparse.Namespace) -> AnalysisConfig:
    if args.cutoff_a is not None:
        config.windows.cutoff_a = args.cutoff_a
    if args.cutoff_b is not None:
        config.windows.cutoff_b = args.cutoff_b
    if args.decimals is not None:
        config.output.decimal_places = args.decimals
    config.output.decimal_places = max(0, min(MAX_DECIMAL_PLACES, config.output.decimal_places))
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.interleaved and not args.real:
        parser.error("Provide --real and --combined, or --interleaved")

    file_handler = _setup_logging(args.verbose, log_file=args.log_file)
    try:
        return _run(args)
    finally:
        _close_handler(file_handler)


def _run(args: argparse.Namespace) -> int:
    try:
        config = _apply_overrides(
            load_config(Path(args.config)) if args.config else AnalysisConfig(),
            args,
        )
        parsed = load_inputs(
            args.real, args.combined, args.interleaved, config.parser.line_format
        )
        report = WindowAnalyzer(
            parsed.real, parsed.combined, config=config, warnings=parsed.warnings
        ).report()
    except (AUCError, ValueError, OSError) as exc:
        logging.error(str(exc))
        return 2

    generator = ReportGenerator(config)
    if args.output == 'json':
        output_str = json.dumps(generator.generate_summary_dict(report), indent=2)
    elif args.output == 'tsv':
        output_str = generator.to_tsv(report.results)
    else:
        output_str = generator.generate_text_report(report)

    if args.save:
        with open(args.save, 'w') as f:
            f.write(output_str + "\n")
        logger.info("Output saved to %s", args.save)
    else:
        print(output_str)

    return 0


if __name__ == '__main__':
    sys.exit(main())
