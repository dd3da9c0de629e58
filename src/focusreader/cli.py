"""CLI entry point for FocusReader."""

import argparse
import json
import logging
import sys
from pathlib import Path

from focusreader.errors import ReaderError
from focusreader.extractors import detect_format
from focusreader.models import BionicIntensity, ChunkSize, ReaderSettings, ReadingDocument
from focusreader.pipeline import extract, load_document, segment

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def _load(source: str, settings: ReaderSettings) -> ReadingDocument:
    """Load a document, exiting with an error message on failure."""
    source_path = Path(source)
    if not source_path.is_file():
        logger.error(f"File not found: {source}")
        sys.exit(1)
    try:
        return load_document(source_path, settings)
    except ReaderError as e:
        logger.error(str(e))
        sys.exit(1)


def read(source: str, settings: ReaderSettings) -> None:
    """Open a file in the terminal reader.

    Args:
        source: Path to the document
        settings: Initial reader settings
    """
    source_path = Path(source)
    if not source_path.is_file():
        logger.error(f"File not found: {source}")
        sys.exit(1)

    # Import here to avoid loading textual unless needed
    from focusreader.reader_app import main as reader_main

    reader_main(source_path, settings)


def chunks(source: str, settings: ReaderSettings, as_json: bool = False) -> None:
    """Print a document's chunks.

    Args:
        source: Path to the document
        settings: Reader settings (size, bionic)
        as_json: Print a JSON list instead of numbered text
    """
    document = _load(source, settings)

    if as_json:
        payload = [
            {"id": c.id, "content": c.content, "bionic_content": c.bionic_content}
            for c in document.chunks
        ]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    print(document.title)
    print()
    for i, chunk in enumerate(document.chunks, 1):
        print(f"[{i}] {chunk.bionic_content or chunk.content}")


def extract_text(source: str) -> None:
    """Print a document's normalized text.

    Args:
        source: Path to the document
    """
    source_path = Path(source)
    if not source_path.is_file():
        logger.error(f"File not found: {source}")
        sys.exit(1)

    data = source_path.read_bytes()
    try:
        print(extract(data, detect_format(source_path.name, data=data)))
    except ReaderError as e:
        logger.error(str(e))
        sys.exit(1)


def info(source: str) -> None:
    """Show information about a document.

    Args:
        source: Path to the document
    """
    document = _load(source, ReaderSettings(bionic_enabled=False))

    print(f"Document: {document.title}")
    print(f"  Format: {document.format.label}")
    print(f"  Size: {Path(source).stat().st_size / 1024:.1f} KB")
    print(f"  Characters: {len(document.text):,}")
    print(f"  Paragraphs: {document.paragraph_count:,}")
    print()
    print("Chunks:")
    for size in ChunkSize:
        count = len(segment(document.text, size.config))
        print(f"  {size.value}: {count}")


def _add_settings_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--size",
        choices=[s.value for s in ChunkSize],
        default=ChunkSize.MEDIUM.value,
        help="Chunk size preset (default: medium)",
    )
    parser.add_argument(
        "--intensity",
        choices=[i.value for i in BionicIntensity],
        default=BionicIntensity.MEDIUM.value,
        help="Bionic reading intensity (default: medium)",
    )
    parser.add_argument(
        "--no-bionic",
        action="store_true",
        help="Disable bionic reading emphasis",
    )


def _settings_from_args(args: argparse.Namespace) -> ReaderSettings:
    return ReaderSettings(
        chunk_size=ChunkSize(args.size),
        bionic_intensity=BionicIntensity(args.intensity),
        bionic_enabled=not args.no_bionic,
    )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="focusreader",
        description="FocusReader - bite-sized bionic reading for any document",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log pipeline details",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # read command
    read_parser = subparsers.add_parser(
        "read",
        help="Read a document in the terminal",
    )
    read_parser.add_argument("source", help="Document path")
    _add_settings_arguments(read_parser)

    # chunks command
    chunks_parser = subparsers.add_parser(
        "chunks",
        help="Print the reading chunks of a document",
    )
    chunks_parser.add_argument("source", help="Document path")
    _add_settings_arguments(chunks_parser)
    chunks_parser.add_argument(
        "--json",
        action="store_true",
        help="Print chunks as JSON",
    )

    # extract command
    extract_parser = subparsers.add_parser(
        "extract",
        help="Print the normalized text of a document",
    )
    extract_parser.add_argument("source", help="Document path")

    # info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show information about a document",
    )
    info_parser.add_argument("source", help="Document path")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command == "read":
        read(args.source, _settings_from_args(args))
    elif args.command == "chunks":
        chunks(args.source, _settings_from_args(args), as_json=args.json)
    elif args.command == "extract":
        extract_text(args.source)
    elif args.command == "info":
        info(args.source)


if __name__ == "__main__":
    main()
