"""Command-line interface computing the heavy-atom RMSD of identical compounds."""

import argparse
import logging
import sys
from typing import List, Optional

from rdkit import RDLogger

from ...core.config import ComparisonSettings
from ...core.domain.implementations import MAPPERS
from ...core.domain.models.comparison_result import ComparisonResult
from ...core.exceptions import StructureReadError
from ...core.services.comparison_service import ComparisonService

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    if not verbose:
        RDLogger.DisableLog("rdApp.*")


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="heavyrms",
        description="Computes the heavy-atom RMSD of identical compound structures.",
    )
    parser.add_argument("reference", help="reference structure(s) file")
    parser.add_argument("test", help="test structure(s) file")
    parser.add_argument(
        "-f",
        "--firstonly",
        action="store_true",
        help="use only the first structure in the reference file",
    )
    parser.add_argument(
        "-m", "--minimize", action="store_true", help="compute minimum RMSD"
    )
    parser.add_argument(
        "--mapper",
        choices=sorted(MAPPERS),
        default="backtracking",
        help="isomorphism search strategy",
    )
    parser.add_argument(
        "--skip-malformed",
        action="store_true",
        help="skip unreadable structures instead of stopping",
    )
    parser.add_argument(
        "--progress", action="store_true", help="show a progress bar on stderr"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable informational logging"
    )
    return parser


def format_result(result: ComparisonResult) -> str:
    """Render one result line."""
    return f"RMSD {result.title} {result.rmsd:g}"


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the heavy-atom RMSD CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    settings = ComparisonSettings.from_args(args)
    service = ComparisonService(settings)

    try:
        for result in service.compare_files(args.reference, args.test):
            print(format_result(result), flush=True)
    except StructureReadError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
