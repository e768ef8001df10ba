"""Command-line entry point.

Usage (examples):
    python -m gitviz serve --port 5001
    python -m gitviz render https://github.com/pallets/flask --limit 5 --dark -o flask.svg
"""

import argparse
import logging
import sys

from gitviz.client import GitvizClient
from gitviz.commits.models import DEFAULT_BRANCH, DEFAULT_COMMIT_LIMIT, RequestConfig
from gitviz.errors import GitvizError
from gitviz.logs import configure_logging
from gitviz.settings import GitvizSettings

logger = logging.getLogger("gitviz.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gitviz", description="Render recent commits as an SVG card.")
    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="Run the HTTP service")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=5001)
    serve.add_argument("--debug", action="store_true")

    render = commands.add_parser("render", help="Render one repository to an SVG file")
    render.add_argument("repo", help="GitHub or GitLab repository URL")
    render.add_argument("--limit", type=int, default=DEFAULT_COMMIT_LIMIT, help="Commits to show (1-50)")
    render.add_argument("--branch", default=DEFAULT_BRANCH)
    render.add_argument("--dark", action="store_true", help="Use the dark palette")
    render.add_argument("--output", "-o", help="Output file (default: stdout)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = GitvizSettings.from_env()

    if args.command == "serve":
        from gitviz.web.app import create_app

        create_app(settings=settings).run(host=args.host, port=args.port, debug=args.debug)
        return 0

    configure_logging(settings)
    client = GitvizClient(settings=settings)
    config = RequestConfig(
        repository_url=args.repo,
        commit_limit=args.limit,
        dark_mode=args.dark,
        branch=args.branch,
    )
    try:
        svg = client.visualize(config)
    except GitvizError as exc:
        logger.error("Error: %s", exc.message)
        for message in exc.errors:
            print(f"Error: {message}", file=sys.stderr)
        return 1
    except Exception as exc:
        logger.exception("Error: unexpected failure for %s", config.repository_url)
        print(f"Error: rendering failed - {exc}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(svg)
        print(f"SVG written to {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(svg)
    return 0


if __name__ == "__main__":
    sys.exit(main())
