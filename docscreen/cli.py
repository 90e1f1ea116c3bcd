"""
Command line interface for DocScreen.

This module provides the command line interface for running the
preview and submission analyses from the terminal.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from . import __version__
from .core.analyzer import DocumentAnalyzer, PREVIEW_UNAVAILABLE_MESSAGE
from .core.corpus import DirectoryCorpus, InMemoryCorpus
from .core.similarity import METRICS
from .models.analysis import SubmissionOutcome
from .models.document import DocumentStatus, SourceDocument
from .utils.config import Config
from .utils.exceptions import DocScreenError, ValidationError
from .utils.validators import InputValidator


log = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """
    Set up logging for CLI.

    Args:
        level: Logging level
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='[%(levelname)s] %(message)s',
        stream=sys.stdout
    )


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="docscreen",
        description="DocScreen - analyze and screen academic document submissions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Keywords, abstract and summary for a submission form
  docscreen preview --doc thesis.pdf

  # Similarity screening against a directory of approved documents
  docscreen check --doc thesis.docx --corpus approved/ --out outcome.json

  # Word-level metric and more workers
  docscreen check --doc thesis.pdf --corpus approved/ --metric cosine --workers 8
        """
    )

    parser.add_argument("--config", help="Path to configuration file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress non-error output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    preview = subparsers.add_parser("preview", help="Extract keywords, abstract and summary")
    preview.add_argument("--doc", "-d", required=True, help="Path to document (.pdf or .docx)")

    check = subparsers.add_parser("check", help="Screen a document against a corpus")
    check.add_argument("--doc", "-d", required=True, help="Path to document (.pdf or .docx)")
    check.add_argument("--corpus", "-c", required=True,
                       help="Directory of approved documents to compare against")
    check.add_argument("--id", dest="document_id",
                       help="Document ID of the submission (default: file name)")
    check.add_argument("--metric", choices=sorted(METRICS), help="Similarity metric")
    check.add_argument("--workers", type=int, help="Number of comparison workers")
    check.add_argument("--out", "-o", help="Write the outcome as JSON to this file")

    return parser.parse_args(argv)


def load_source(path: str) -> SourceDocument:
    """Read a document file into a SourceDocument."""
    doc_path = InputValidator.validate_document_file(path)
    return SourceDocument(
        raw_bytes=doc_path.read_bytes(),
        content_type=InputValidator.content_type_for_path(doc_path).value,
        original_name=doc_path.name,
    )


def load_corpus(directory: str, show_progress: bool = True) -> InMemoryCorpus:
    """
    Load every document of a directory as an approved corpus entry.

    Args:
        directory: Corpus directory
        show_progress: Display a progress bar

    Returns:
        In-memory snapshot of the directory
    """
    source_dir = DirectoryCorpus(directory)
    corpus = InMemoryCorpus()
    for path in tqdm(source_dir.paths(), desc="Loading corpus", unit="doc", disable=not show_progress):
        document = source_dir.load(path)
        corpus.add(document.document_id,
                   SourceDocument(document.file_bytes, document.content_type, document.original_name),
                   status=DocumentStatus.APPROVED)
    return corpus


def run_preview(args: argparse.Namespace, config: Config) -> int:
    analyzer = DocumentAnalyzer(config)
    try:
        source = load_source(args.doc)
        result = analyzer.preview(source)
    except DocScreenError as e:
        log.error(f"Preview failed: {e}")
        print(PREVIEW_UNAVAILABLE_MESSAGE)
        return 1

    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0


def run_check(args: argparse.Namespace, config: Config) -> int:
    if args.metric:
        config.set_analysis_config({"similarity_metric": args.metric})
    if args.workers:
        config.set_processing_config({"max_workers": args.workers})

    analyzer = DocumentAnalyzer(config)
    source = load_source(args.doc)
    corpus = load_corpus(args.corpus, show_progress=not args.quiet)
    document_id = args.document_id or source.original_name

    outcome = analyzer.submit(document_id, source, corpus)

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, 'w', encoding='utf-8') as f:
            json.dump(outcome.to_dict(), f, indent=2, ensure_ascii=False)
        log.info(f"Outcome saved to {out_path}")

    if not args.quiet:
        print_outcome(outcome)
    return 0 if outcome.succeeded else 2


def print_outcome(outcome: SubmissionOutcome) -> None:
    """
    Print a submission outcome to the console.

    Args:
        outcome: Outcome of the submission flow
    """
    print("\n" + "=" * 80)
    print("DOCSCREEN SUBMISSION RESULT")
    print("=" * 80)
    print(f"Document: {outcome.document_id}")
    print(f"Status:   {outcome.decided_status.value}")
    print(f"Score:    {outcome.score:.2f}%")
    if outcome.partial:
        print("Note:     scan incomplete, some comparisons timed out")
    if outcome.error:
        print(f"Error:    {outcome.error}")

    if outcome.details:
        print("\nMatches:")
        print("-" * 40)
        for detail in sorted(outcome.details, key=lambda d: d.match_percentage, reverse=True):
            print(f"{detail.matched_document_id}: {detail.match_percentage:.2f}%")
            print(f"   {detail.preview[:80]}")
    print("=" * 80)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.
    """
    args = parse_arguments(argv)

    if args.quiet:
        log_level = "ERROR"
    elif args.verbose:
        log_level = "DEBUG"
    else:
        log_level = "INFO"
    setup_logging(log_level)

    try:
        config = Config(args.config) if args.config else Config()
        if args.command == "preview":
            return run_preview(args, config)
        return run_check(args, config)
    except ValidationError as e:
        log.error(f"Validation error: {e}")
        return 1
    except DocScreenError as e:
        log.error(f"DocScreen error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
