from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from dialdiff import __version__
from dialdiff.app import find_missing_contacts
from dialdiff.config import (
    ConfigurationError,
    OutputFormat,
    configure_logging,
    get_extraction_config,
    get_filter_config,
    get_ingest_config,
    get_missing_config,
    get_output_config,
)
from dialdiff.domain.model import MissingOrder

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dialdiff",
        description="Find contacts present in a comparison corpus but missing from a master corpus",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("master_dir", type=Path, help="Directory holding the master contact files")
    parser.add_argument(
        "compare_dir",
        type=Path,
        help="Directory holding the contact files to check against the master",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for result files (defaults to DIALDIFF_OUTPUT_DIR or the current dir)",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.VCF.value,
        help="Format of the missing-contacts file (default: %(default)s)",
    )
    parser.add_argument(
        "--order",
        choices=[order.value for order in MissingOrder],
        default=None,
        help="Order of the missing contacts (defaults to config: name)",
    )
    parser.add_argument(
        "--no-unique-names",
        dest="unique_names",
        action="store_false",
        default=None,
        help="Keep duplicate names instead of numbering them",
    )
    parser.add_argument(
        "--permissive-columns",
        dest="permissive",
        action="store_true",
        default=None,
        help="Scan every column of tabular files for phone numbers",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=None,
        help="Number of records consumed per batch (defaults to config)",
    )
    parser.add_argument(
        "--no-reports",
        dest="write_reports",
        action="store_false",
        help="Skip the JSON diagnostic reports",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-batch and per-record details",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(verbose=parsed_args.verbose)

    try:
        extraction = get_extraction_config(permissive=parsed_args.permissive)
        filtering = get_filter_config()
        ingest = get_ingest_config(batch_size=parsed_args.batch_size)
        missing = get_missing_config(
            order=MissingOrder(parsed_args.order) if parsed_args.order else None,
            unique_names=parsed_args.unique_names,
        )
        output = get_output_config(
            output_dir=parsed_args.output_dir,
            output_format=OutputFormat(parsed_args.output_format),
            write_reports=parsed_args.write_reports,
        )
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        find_missing_contacts(
            parsed_args.master_dir,
            parsed_args.compare_dir,
            extraction=extraction,
            filtering=filtering,
            ingest=ingest,
            missing=missing,
            output=output,
        )
    except Exception:
        log.exception("Fatal error while reconciling contacts")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
