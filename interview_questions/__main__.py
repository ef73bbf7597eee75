"""
Command-line entry point.

USAGE:
    python -m interview_questions serve [--host HOST] [--port PORT]
    python -m interview_questions generate RESUME [--search TEXT] [--category NAME]
                                                  [--pdf PATH] [--json]

COMMANDS:
    serve       Run the HTTP API with uvicorn
    generate    Extract a resume (PDF, DOCX, TXT), generate questions, print them
                and optionally write the PDF report
"""

import argparse
import asyncio
import json
import logging
import mimetypes
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from .errors import QuestionPipelineError
from .ingestion import Document
from .review import query_engine
from .review.session import OperationStatus, ReviewSession


def _load_document(path: Path) -> Document:
    media_type, _ = mimetypes.guess_type(path.name)
    return Document(content=path.read_bytes(), media_type=media_type, filename=path.name)


async def run_generate(args) -> int:
    session = ReviewSession()

    state = await session.load_document(_load_document(Path(args.resume)))
    if state.status == OperationStatus.FAILED:
        print(f"Error: {state.error}", file=sys.stderr)
        return 1

    state = await session.generate()
    if state.status == OperationStatus.FAILED:
        print(f"Error: {state.error}", file=sys.stderr)
        return 1

    session.set_filter(search_text=args.search, category=args.category)
    visible = session.visible_questions()
    if not visible:
        print("No questions match the current filters.", file=sys.stderr)
        return 1

    counts = query_engine.summarize(visible)
    print(f"{counts['questions']} questions across {counts['categories']} categories", file=sys.stderr)

    if args.json:
        print(json.dumps({"questions": [q.model_dump() for q in visible]}, indent=2))
    else:
        print(session.clipboard_text())

    if args.pdf:
        report = session.export_report()
        target = Path(args.pdf)
        if target.is_dir():
            target = target / report.filename
        target.write_bytes(report.content)
        print(f"\n✓ Report written: {target} ({report.page_count} pages)", file=sys.stderr)

    return 0


def run_serve(args) -> int:
    import uvicorn
    uvicorn.run("interview_questions.api:app", host=args.host, port=args.port)
    return 0


def main(argv=None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="interview-questions",
        description="Generate tailored interview questions from a resume",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline steps")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)

    gen = sub.add_parser("generate", help="Generate questions for a resume file")
    gen.add_argument("resume", help="Path to a PDF, DOCX or TXT resume")
    gen.add_argument("--search", default="", help="Only keep questions containing this text")
    gen.add_argument("--category", default="all", help="Only keep this category (default: all)")
    gen.add_argument("--pdf", help="Write the PDF report to this file or directory")
    gen.add_argument("--json", action="store_true", help="Print JSON instead of numbered text")

    args = parser.parse_args(argv)

    default_level = "INFO" if args.verbose else "WARNING"
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", default_level).upper(),
        format="%(asctime)s  %(levelname)s  %(message)s",
    )

    if args.command == "serve":
        return run_serve(args)

    if not Path(args.resume).is_file():
        print(f"Error: file not found: {args.resume}", file=sys.stderr)
        return 1
    try:
        return asyncio.run(run_generate(args))
    except QuestionPipelineError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
