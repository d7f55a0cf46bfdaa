"""
Command-line entry point.

Commands:
    serve                         Start the WebSocket server
    analyze <kw> [<kw>...]        Analyze keywords and print the JSON report
    tools                         Print the analyzeKeywords tool descriptor

Examples:
    python run.py serve --port 3000
    python run.py analyze "best camera tutorial" "hidden gem cameras" --niche tech
    python run.py analyze --file keywords.json --seed 42
"""

import argparse
import json
import random
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from . import AGENT_NAME, __version__
from .config import get_settings
from .errors import KeywordAnalyzerError
from .logging_config import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yt-keyword-analyzer",
        description=f"{AGENT_NAME} v{__version__}",
    )
    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Start the WebSocket RPC server")
    serve.add_argument("--host", help="Bind address (default: HOST or 0.0.0.0)")
    serve.add_argument("--port", type=int, help="Listen port (default: PORT or 3000)")

    analyze = sub.add_parser("analyze", help="Analyze keywords offline")
    analyze.add_argument("keywords", nargs="*", help="Keywords to analyze")
    analyze.add_argument("--file", help="JSON file with a keyword list or a full arguments object")
    analyze.add_argument("--concept", help="Original video concept")
    analyze.add_argument("--audience", dest="target_audience", help="Target audience")
    analyze.add_argument("--niche", help="Content niche")
    analyze.add_argument("--seed", type=int, help="Seed for the simulated trend draw")

    sub.add_parser("tools", help="Print the tool descriptor")
    return parser


def _load_arguments(args: argparse.Namespace) -> dict:
    """Merge --file contents with positional keywords and flags."""
    arguments = {}
    if args.file:
        with open(Path(args.file)) as f:
            loaded = json.load(f)
        arguments = loaded if isinstance(loaded, dict) else {"keywords": loaded}

    loaded_keywords = arguments.get("keywords")
    if loaded_keywords is None:
        arguments["keywords"] = list(args.keywords)
    elif isinstance(loaded_keywords, (list, tuple)):
        arguments["keywords"] = list(loaded_keywords) + list(args.keywords)
    # anything else is left for the analyzer to reject
    for key, value in (
        ("concept", args.concept),
        ("targetAudience", args.target_audience),
        ("niche", args.niche),
    ):
        if value:
            arguments[key] = value
    return arguments


def _serve(args: argparse.Namespace) -> int:
    import uvicorn
    from .api.app import create_app

    settings = get_settings()
    host = args.host or settings.host
    port = args.port or settings.port
    configure_logging(settings.log_level, settings.log_file)

    # uvicorn installs SIGINT/SIGTERM handlers and runs the lifespan shutdown
    uvicorn.run(create_app(settings), host=host, port=port, log_level=settings.log_level.lower())
    return 0


def _analyze(args: argparse.Namespace) -> int:
    from .seo.batch_analyzer import BatchAnalyzer

    settings = get_settings()
    configure_logging(settings.log_level, settings.log_file)

    arguments = _load_arguments(args)
    if args.seed is not None:
        analyzer = BatchAnalyzer(rng_factory=lambda: random.Random(args.seed))
    else:
        analyzer = BatchAnalyzer()

    try:
        report = analyzer.analyze(
            arguments["keywords"],
            concept=arguments.get("concept"),
            target_audience=arguments.get("targetAudience"),
            niche=arguments.get("niche"),
        )
    except KeywordAnalyzerError as e:
        logger.error(f"Analysis failed: {e}")
        return 1

    print(json.dumps(report.to_dict(), indent=2))
    return 0


def _tools(args: argparse.Namespace) -> int:
    from .api.rpc import RequestRouter

    print(json.dumps(RequestRouter.tool_descriptor(), indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    commands = {"serve": _serve, "analyze": _analyze, "tools": _tools}
    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
