"""Command-line interface for genomeconcord."""

import argparse
import datetime
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .concordance import analyze_family
from .config import load_config
from .converter import build_summary, write_reports
from .exporter import write_person_export
from .generate_html_report import generate_html_report
from .haplogroup_rules import load_haplogroup_rules
from .models import PEOPLE
from .parser import dataset_metadata, read_genotype_file
from .traits import load_trait_tables
from .validators import validate_export_people, validate_genotype_file, validate_optional_file
from .version import __version__

logger = logging.getLogger("genomeconcord")

LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def create_parser() -> argparse.ArgumentParser:
    """Create and return the argument parser for the genomeconcord CLI."""
    parser = argparse.ArgumentParser(
        description="genomeconcord: Family genotype concordance and lineage analysis."
    )

    # General Options
    general_group = parser.add_argument_group("General Options")
    general_group.add_argument(
        "--version",
        action="version",
        version=f"genomeconcord {__version__}",
        help="Show the current version and exit",
    )
    general_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARN", "ERROR"],
        default="INFO",
        help="Set the logging level",
    )
    general_group.add_argument(
        "--log-file", help="Path to a file to write logs to (in addition to stderr)."
    )
    general_group.add_argument(
        "-c",
        "--config",
        help="Path to configuration file",
        default=None,
    )

    # Core Input/Output
    io_group = parser.add_argument_group("Core Input/Output")
    io_group.add_argument(
        "-i",
        "--input-file",
        help="Merged family genotype file (markerId chromosome position father son1 son2 mother)",
        required=True,
    )
    io_group.add_argument(
        "--output-dir",
        help="Directory to store report files",
        default="output",
    )
    io_group.add_argument(
        "--html-report",
        action="store_true",
        default=None,
        help="Also render an HTML summary report (index.html) into the output directory.",
    )
    io_group.add_argument(
        "--export",
        action="append",
        choices=list(PEOPLE),
        help="Write a 23andMe-formatted file for a family member. May be given multiple times.",
    )

    # Analysis
    analysis_group = parser.add_argument_group("Analysis")
    analysis_group.add_argument(
        "--haplogroup-rules",
        help="JSON haplogroup rule table (defaults to the packaged table)",
        default=None,
    )
    analysis_group.add_argument(
        "--traits-file",
        help="JSON trait tables (defaults to the packaged tables)",
        default=None,
    )
    analysis_group.add_argument(
        "--no-traits",
        action="store_true",
        help="Skip trait and wellness marker interpretation",
    )
    analysis_group.add_argument(
        "--threads",
        type=int,
        default=None,
        help="Number of worker threads for running the analyses concurrently",
    )
    return parser


def parse_args(args_list: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Parameters
    ----------
    args_list : List[str], optional
        Arguments to parse; defaults to sys.argv

    Returns
    -------
    argparse.Namespace
        Parsed arguments
    """
    parser = create_parser()
    return parser.parse_args(args_list)


def _configure_logging(args: argparse.Namespace) -> None:
    logging.getLogger("genomeconcord").setLevel(LOG_LEVEL_MAP[args.log_level])

    # If a log file is specified, add a file handler
    if args.log_file:
        log_file_path = Path(args.log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        fh = logging.FileHandler(args.log_file)
        fh.setLevel(LOG_LEVEL_MAP[args.log_level])
        fh.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        logger.addHandler(fh)
        logger.debug(f"Logging to file enabled: {args.log_file}")


def main(args_list: Optional[List[str]] = None) -> int:
    """Run main entry point for the genomeconcord CLI.

    Steps:
        1. Parse arguments.
        2. Configure logging and load config.
        3. Validate input files.
        4. Parse the genotype file and load rule/trait tables.
        5. Run the family analyses.
        6. Write summary, TSV tables, optional HTML report and exports.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    start_time: datetime.datetime = datetime.datetime.now()

    args = parse_args(args_list)
    _configure_logging(args)
    logger.info(f"Run started at {start_time.isoformat()}")
    logger.debug(f"CLI arguments: {args}")

    # Load configuration
    cfg: Dict[str, Any] = load_config(args.config)
    logger.debug(f"Configuration loaded: {cfg}")

    rules_file: Optional[str] = args.haplogroup_rules or cfg.get("haplogroup_rules_file")
    traits_file: Optional[str] = args.traits_file or cfg.get("trait_tables_file")
    export_people: List[str] = args.export or cfg.get("export_people") or []
    n_workers: int = args.threads or int(cfg.get("analysis_threads", 1))
    html_report: bool = args.html_report if args.html_report is not None else cfg.get("html_report")

    validate_genotype_file(args.input_file, logger)
    validate_optional_file(rules_file, "Haplogroup rule file", logger)
    validate_optional_file(traits_file, "Trait table file", logger)
    validate_export_people(export_people)

    records = read_genotype_file(args.input_file)
    metadata = dataset_metadata(records)
    logger.info(
        f"Loaded {metadata['count']} markers on {len(metadata['chromosomes'])} chromosomes"
    )

    rule_table = load_haplogroup_rules(rules_file)

    trait_tables = {}
    if not args.no_traits:
        all_tables = load_trait_tables(traits_file)
        wanted = cfg.get("trait_tables") or list(all_tables)
        trait_tables = {name: all_tables[name] for name in wanted if name in all_tables}

    analysis = analyze_family(records, rule_table, trait_tables, n_workers=n_workers)

    summary = build_summary(analysis, metadata, cfg)
    write_reports(analysis, metadata, args.output_dir, cfg, summary=summary)

    if html_report:
        report_path = generate_html_report(summary, args.output_dir, cfg)
        logger.info(f"HTML report written to {report_path}")

    for person in export_people:
        write_person_export(records, person, args.output_dir)

    end_time = datetime.datetime.now()
    logger.info(f"Run ended at {end_time.isoformat()}, duration: {end_time - start_time}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
