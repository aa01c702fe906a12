"""
Command-line interface for decoding .eml files.

Parses .eml files and prints a JSON summary of headers, bodies and binary parts.

Usage:
    # Single file
    python -m eml_mimeparse.cli.dump input.eml

    # Directory batch processing
    python -m eml_mimeparse.cli.dump emails/ --output results.jsonl

    # Without bodies
    python -m eml_mimeparse.cli.dump input.eml --no-bodies
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import structlog

from eml_mimeparse.errors import ParseError
from eml_mimeparse.logging_config import setup_logging
from eml_mimeparse.models.email_document import Address, Email
from eml_mimeparse.parsing.eml_parser import parse_eml_file
from eml_mimeparse.version import PARSER_VERSION

logger = structlog.get_logger(__name__)


# ============================================================================
# CLI FUNCTIONS
# ============================================================================

def _addresses(addresses: List[Address]) -> List[str]:
    return [str(address) for address in addresses]


def summarize_email(email: Email, include_bodies: bool = True) -> dict:
    """
    Convert an Email into a JSON-serializable summary.

    Binary streams are drained to report their decoded size, so the Email
    cannot be read again afterwards.

    Args:
        email: Parsed email
        include_bodies: Include text and HTML bodies

    Returns:
        Summary dict
    """
    summary = {
        "parser_version": PARSER_VERSION,
        "subject": email.subject,
        "from": _addresses(email.from_addresses),
        "sender": str(email.sender) if email.sender else None,
        "reply_to": _addresses(email.reply_to_addresses),
        "to": _addresses(email.to_addresses),
        "cc": _addresses(email.cc_addresses),
        "bcc": _addresses(email.bcc_addresses),
        "date": email.date.isoformat() if email.date else None,
        "message_id": email.message_id,
        "in_reply_to": email.in_reply_to,
        "references": email.references,
        "content_type": email.content_type,
        "attachments": [
            {
                "filename": attachment.filename,
                "content_type": attachment.content_type,
                "size_bytes": len(attachment.data.read()),
            }
            for attachment in email.attachments
        ],
        "embedded_files": [
            {
                "cid": embedded.cid,
                "content_type": embedded.content_type,
                "size_bytes": len(embedded.data.read()),
            }
            for embedded in email.embedded_files
        ],
    }

    if email.content is not None:
        summary["content_size_bytes"] = len(email.content.read())

    if include_bodies:
        summary["text_body"] = email.text_body
        summary["html_body"] = email.html_body

    return summary


def process_single_file(eml_path: Path, include_bodies: bool = True) -> dict:
    """
    Parse a single .eml file.

    Args:
        eml_path: Path to .eml file
        include_bodies: Include text and HTML bodies in the summary

    Returns:
        Summary dict with the source file path

    Raises:
        ParseError: If the message cannot be decoded
    """
    email = parse_eml_file(eml_path)
    result = {"file": str(eml_path)}
    result.update(summarize_email(email, include_bodies=include_bodies))
    logger.info("file_parsed", file=str(eml_path), attachments=len(email.attachments))
    return result


def process_directory(
    dir_path: Path, include_bodies: bool = True
) -> Tuple[List[dict], List[dict]]:
    """
    Parse all .eml files in a directory.

    Args:
        dir_path: Directory path
        include_bodies: Include text and HTML bodies in the summaries

    Returns:
        Tuple of (summaries, errors)
    """
    eml_files = sorted(dir_path.glob("**/*.eml"))

    if not eml_files:
        logger.warning("no_eml_files_found", directory=str(dir_path))
        return [], []

    logger.info("processing_directory", files_count=len(eml_files))

    results = []
    errors = []

    for eml_file in eml_files:
        try:
            results.append(process_single_file(eml_file, include_bodies=include_bodies))
        except (ParseError, OSError) as e:
            logger.error("file_processing_failed", file=str(eml_file), error=str(e))
            errors.append({"file": str(eml_file), "error": str(e)})

    logger.info(
        "directory_processing_completed",
        total=len(eml_files),
        success=len(results),
        errors=len(errors),
    )

    return results, errors


def write_output(results: List[dict], output_path: Optional[Path], format: str = "jsonl"):
    """
    Write results to file.

    Args:
        results: List of summaries
        output_path: Output file path (stdout when None)
        format: Output format ("json" or "jsonl")
    """
    if format == "jsonl":
        text = "".join(json.dumps(result, ensure_ascii=False) + "\n" for result in results)
    else:
        text = json.dumps(results, ensure_ascii=False, indent=2) + "\n"

    if not output_path:
        sys.stdout.write(text)
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    logger.info("output_written", path=str(output_path), count=len(results))


# ============================================================================
# MAIN CLI
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Decode .eml files into a JSON summary of headers, bodies and parts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single file
  %(prog)s input.eml

  # Process directory, save to file
  %(prog)s emails/ --output results.jsonl

  # Pretty JSON without bodies
  %(prog)s input.eml --format json --no-bodies
        """,
    )

    parser.add_argument(
        "input",
        type=str,
        help="Path to .eml file or directory containing .eml files",
    )

    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output file path (default: stdout). Format auto-detected from extension (.json or .jsonl)",
    )

    parser.add_argument(
        "--format",
        "-f",
        type=str,
        choices=["json", "jsonl"],
        default="jsonl",
        help="Output format (default: jsonl)",
    )

    parser.add_argument(
        "--no-bodies",
        action="store_true",
        help="Leave text and HTML bodies out of the output",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every classified part (DEBUG level)",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(level="DEBUG" if args.verbose else None)

    input_path = Path(args.input)
    include_bodies = not args.no_bodies

    if not input_path.exists():
        print(f"Error: Path not found: {input_path}", file=sys.stderr)
        return 1

    errors: List[dict] = []
    try:
        if input_path.is_file():
            results = [process_single_file(input_path, include_bodies=include_bodies)]
        else:
            results, errors = process_directory(input_path, include_bodies=include_bodies)
    except (ParseError, OSError) as e:
        logger.error("file_processing_failed", file=str(input_path), error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output_path = Path(args.output) if args.output else None

    # Auto-detect format from file extension
    format = args.format
    if output_path and format == "jsonl" and output_path.suffix == ".json":
        format = "json"

    write_output(results, output_path, format)

    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
