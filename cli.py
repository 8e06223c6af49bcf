#!/usr/bin/env python3
# cli.py
"""CLI entry point for the advocate directory.

Provides argparse subcommands:

    recommend  - Recommend advocates for a district and legal issue
    ask        - Ask the legal assistant a question
    feedback   - Add or list ratings/comments for an advocate
    onboard    - Register a new advocate in the roster
    top-rated  - List the highest-rated advocates
    export     - Export the roster to CSV

Usage examples:
    python cli.py recommend Mumbai "boundary dispute over my land"
    python cli.py ask "Can my landlord evict me without notice?"
    python cli.py feedback add MAH/1234/2010 --user u1 --rating 5 "Great help"
    python cli.py feedback list MAH/1234/2010
    python cli.py onboard --reg-no MAH/9999/2020 --name "A. Rao" ...
    python cli.py -v --advocates data/advocates.json top-rated --limit 3
"""

from __future__ import annotations

import argparse
import asyncio

from errors import AdvocateDirectoryError
from log_setup import setup_logging


# ---------------------------------------------------------------------------
# Subcommand handlers (lazy imports to keep startup fast)
# ---------------------------------------------------------------------------


def cmd_recommend(args: argparse.Namespace) -> None:
    """Recommend advocates for a district and issue description."""
    setup_logging(verbose=args.verbose, command_name="recommend")

    from commands import recommend

    recommend.run(
        args.district,
        args.issue,
        advocates_path=args.advocates,
        as_json=args.json,
    )


def cmd_ask(args: argparse.Namespace) -> None:
    """Ask the legal assistant a free-text question."""
    setup_logging(verbose=args.verbose, command_name="ask")

    from commands import ask

    answer = asyncio.run(ask.run(args.question))
    print(answer)


def cmd_feedback_add(args: argparse.Namespace) -> None:
    """Store a rating and comment for an advocate."""
    setup_logging(verbose=args.verbose, command_name="feedback")

    from commands import reviews

    feedback_id = reviews.add(
        args.reg_no,
        args.user,
        args.rating,
        args.comment,
        advocates_path=args.advocates,
        feedback_dir=args.feedback_dir,
    )
    print(f"Feedback stored: {feedback_id}")


def cmd_feedback_list(args: argparse.Namespace) -> None:
    """Show feedback for an advocate."""
    setup_logging(verbose=args.verbose, command_name="feedback")

    from commands import reviews

    reviews.list_feedback(args.reg_no, feedback_dir=args.feedback_dir)


def cmd_onboard(args: argparse.Namespace) -> None:
    """Register a new advocate in the roster file."""
    setup_logging(verbose=args.verbose, command_name="onboard")

    from commands import onboard

    reg_no = onboard.run(
        {
            "reg_no": args.reg_no,
            "name": args.name,
            "address": args.address,
            "district": args.district,
            "area_of_practice": args.area_of_practice,
            "date_of_appointment": args.date_of_appointment,
            "certificate_valid_upto": args.certificate_valid_upto,
        },
        advocates_path=args.advocates,
    )
    print(f"Registered: {reg_no}")


def cmd_top_rated(args: argparse.Namespace) -> None:
    """List the highest-rated advocates."""
    setup_logging(verbose=args.verbose, command_name="top-rated")

    from commands import top_rated

    top_rated.run(limit=args.limit, advocates_path=args.advocates)


def cmd_export(args: argparse.Namespace) -> None:
    """Export the roster to CSV."""
    setup_logging(verbose=args.verbose, command_name="export")

    from commands import export

    result = export.run(args.advocates, args.output, district=args.district)
    print(f"Output: {result}")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cli.py",
        description="Advocate directory and recommendation CLI",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable verbose (DEBUG) logging",
    )
    parser.add_argument(
        "--advocates",
        default=None,
        help="Path to the advocate roster JSON (defaults to config.ADVOCATES_PATH)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # -- recommend --
    sp_recommend = subparsers.add_parser(
        "recommend",
        help="Recommend advocates for a district and legal issue",
    )
    sp_recommend.add_argument("district", help='District name (e.g. "Mumbai")')
    sp_recommend.add_argument("issue", help="Free-text description of the legal issue")
    sp_recommend.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the result as JSON",
    )
    sp_recommend.set_defaults(func=cmd_recommend)

    # -- ask --
    sp_ask = subparsers.add_parser("ask", help="Ask the legal assistant a question")
    sp_ask.add_argument("question", help="Free-text legal question")
    sp_ask.set_defaults(func=cmd_ask)

    # -- feedback --
    sp_feedback = subparsers.add_parser(
        "feedback",
        help="Add or list feedback for an advocate",
    )
    sp_feedback.add_argument(
        "--feedback-dir",
        default=None,
        help="Feedback store directory (defaults to config.FEEDBACK_DIR)",
    )
    feedback_sub = sp_feedback.add_subparsers(dest="feedback_command", required=True)

    sp_feedback_add = feedback_sub.add_parser("add", help="Rate and review an advocate")
    sp_feedback_add.add_argument("reg_no", help="Advocate registration number")
    sp_feedback_add.add_argument("comment", help="Review text")
    sp_feedback_add.add_argument("--user", required=True, help="Reviewer user id")
    sp_feedback_add.add_argument(
        "--rating",
        type=int,
        required=True,
        choices=range(1, 6),
        help="Rating from 1 to 5",
    )
    sp_feedback_add.set_defaults(func=cmd_feedback_add)

    sp_feedback_list = feedback_sub.add_parser("list", help="Show feedback for an advocate")
    sp_feedback_list.add_argument("reg_no", help="Advocate registration number")
    sp_feedback_list.set_defaults(func=cmd_feedback_list)

    # -- onboard --
    sp_onboard = subparsers.add_parser("onboard", help="Register a new advocate")
    sp_onboard.add_argument("--reg-no", required=True, help="Registration number")
    sp_onboard.add_argument("--name", required=True, help="Full name")
    sp_onboard.add_argument("--address", required=True, help="Office address")
    sp_onboard.add_argument("--district", required=True, help="District of practice")
    sp_onboard.add_argument(
        "--area-of-practice", required=True, help='Practice area (e.g. "Family Law")'
    )
    sp_onboard.add_argument(
        "--date-of-appointment", required=True, help="Appointment date (YYYY-MM-DD)"
    )
    sp_onboard.add_argument(
        "--certificate-valid-upto", required=True, help="Certificate expiry (YYYY-MM-DD)"
    )
    sp_onboard.set_defaults(func=cmd_onboard)

    # -- top-rated --
    sp_top = subparsers.add_parser("top-rated", help="List the highest-rated advocates")
    sp_top.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Number of advocates to show (default: 5)",
    )
    sp_top.set_defaults(func=cmd_top_rated)

    # -- export --
    sp_export = subparsers.add_parser("export", help="Export the roster to CSV")
    sp_export.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output directory for the CSV file (defaults to config.OUTPUT_DIR)",
    )
    sp_export.add_argument(
        "--district",
        default=None,
        help="Only export advocates in this district",
    )
    sp_export.set_defaults(func=cmd_export)

    return parser


def main() -> None:
    """Parse CLI arguments and dispatch to the appropriate subcommand."""
    args = build_parser().parse_args()
    try:
        args.func(args)
    except AdvocateDirectoryError as exc:
        print(f"Error: {exc}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
