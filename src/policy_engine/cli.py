"""
Command-line interface for the Policy Platform.

Provides commands to search the policy document, export it, list its
sections, show the configuration and launch the web interface.
"""

import sys
import json
import argparse
import subprocess
from pathlib import Path
from typing import List, Optional

from .export.exporter import ExportFormat, write_export
from .ingestion.document_loader import DocumentLoader
from .query.query_engine import PolicyQueryEngine
from .ui.render import emphasize
from .utils.config import get_config
from .utils.exceptions import PolicyEngineError
from .utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="policy-platform", description="Policy Platform")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Web interface command
    web_parser = subparsers.add_parser("web", help="Start web interface")
    web_parser.add_argument("--host", default=None, help="Host to bind to")
    web_parser.add_argument("--port", default=None, type=int, help="Port to bind to")

    # Search command
    search_parser = subparsers.add_parser("search", help="Search the policy document")
    search_parser.add_argument("query", help="Search text")
    search_parser.add_argument("--source", help="Document path or URL")
    search_parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    # Export command
    export_parser = subparsers.add_parser("export", help="Export the full document")
    export_parser.add_argument("format", choices=[fmt.value for fmt in ExportFormat], help="Export format")
    export_parser.add_argument("--output", help="Output directory")
    export_parser.add_argument("--source", help="Document path or URL")

    # Sections command
    sections_parser = subparsers.add_parser("sections", help="List document sections")
    sections_parser.add_argument("--source", help="Document path or URL")

    # Config command
    subparsers.add_parser("config", help="Show configuration")

    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point with command-line interface."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging()

    try:
        if args.command == "web":
            start_web_interface(args.host, args.port)
        elif args.command == "search":
            search_document(args.query, args.source, args.json)
        elif args.command == "export":
            export(args.format, args.output, args.source)
        elif args.command == "sections":
            list_sections(args.source)
        elif args.command == "config":
            show_config()
        else:
            parser.print_help()
    except PolicyEngineError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)


def _engine(source: Optional[str]) -> PolicyQueryEngine:
    config = get_config()
    document = DocumentLoader(config.source).load(source)
    return PolicyQueryEngine(document, config.export)


def start_web_interface(host: Optional[str] = None, port: Optional[int] = None):
    """Start the Streamlit web interface."""
    ui = get_config().ui
    host = host or ui.host
    port = port or ui.port

    cmd = [
        "streamlit", "run",
        str(Path(__file__).parent / "ui" / "streamlit_app.py"),
        "--server.address", host,
        "--server.port", str(port)
    ]

    print(f"🚀 Starting web interface at http://{host}:{port}")
    subprocess.run(cmd)


def search_document(query: str, source: Optional[str] = None, as_json: bool = False):
    """Print the sections matching a query."""
    result = _engine(source).search(query)

    if as_json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    if result.is_empty:
        print(f"No matches for “{query}”.")
        return

    for section in result.sections:
        print(f"{section.index}. {section.title}")
        if section.subtitle:
            print(f"   {section.subtitle}")
        for item in section.items or ():
            print(f"   - {emphasize(item.display_text, query)}")

    print(f"\n🔍 {result.section_count} sections, {result.item_count} items")


def export(fmt: str, output: Optional[str] = None, source: Optional[str] = None):
    """Write the full document in the requested format."""
    artifact = _engine(source).export(fmt)
    path = write_export(artifact, output or get_config().export.output_directory)
    print(f"✅ Exported to {path}")


def list_sections(source: Optional[str] = None):
    """Print the table of contents."""
    document = _engine(source).document
    print(document.title)
    for section in document.sections:
        print(f"  {section.index}. {section.title} ({section.anchor})")


def show_config():
    """Show current configuration."""
    config = get_config()
    print("⚙️ Current Configuration:")
    print(f"   Source Path: {config.source.path or '-'}")
    print(f"   Source URL: {config.source.url or '-'}")
    print(f"   Export Directory: {config.export.output_directory}")
    print(f"   Log Level: {config.logging.level}")
    print(f"   Web UI: http://{config.ui.host}:{config.ui.port}")


if __name__ == "__main__":
    main()
