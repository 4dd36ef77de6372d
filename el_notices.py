"""
ElNotices
- Read the member roster and the yearly electricity ledger.
- Write one adjustment notice per recipient: emailed where the roster has
  an address, printed otherwise (one per apartment).

Run:
  python el_notices.py [ROSTER.xlsx] [LEDGER.xlsx]

Dependencies:
  pip install openpyxl
"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from config import DEFAULT_LEDGER_FILE, DEFAULT_ROSTER_FILE, load_settings
from errors import NoticeError
from excel_export import export_summary
from pipeline import run

logger = logging.getLogger("el_notices")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Generate electricity adjustment notices from roster and ledger sheets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  el-notices
  el-notices roster.xlsx el-2023.xlsx --summary review.xlsx
        """
    )
    ap.add_argument("roster", nargs="?", default=DEFAULT_ROSTER_FILE, help="Member roster (.xlsx or .csv)")
    ap.add_argument("ledger", nargs="?", default=DEFAULT_LEDGER_FILE, help="Electricity ledger (.xlsx or .csv)")
    ap.add_argument("--config", default=None, help="JSON settings file (layouts, notice wording, outputs)")
    ap.add_argument("--email-out", default=None, help="Output file for email notices")
    ap.add_argument("--print-out", default=None, help="Output file for printed notices")
    ap.add_argument("--summary", default=None, help="Also write an .xlsx overview of all notices")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s: %(message)s'
    )

    try:
        settings = load_settings(args.config)
        if args.email_out:
            settings.email_output = args.email_out
        if args.print_out:
            settings.print_output = args.print_out

        notices = run(args.roster, args.ledger, settings)
        if args.summary:
            export_summary(notices, args.summary)
            logger.info("Summary written to %s", args.summary)
    except FileNotFoundError as e:
        logger.error("File not found: %s", e)
        return 1
    except NoticeError as e:
        logger.error("Data error: %s", e)
        return 1
    except (ValueError, TypeError) as e:
        logger.error("Invalid input or settings: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
