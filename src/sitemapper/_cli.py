"""Sitemapper CLI — sitemapper generate.

Entry point for the ``sitemapper`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the sitemapper CLI."""
    parser = argparse.ArgumentParser(
        prog="sitemapper",
        description="Write sitemap and sitemap index files from a URL list.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # sitemapper generate
    gen_parser = subparsers.add_parser(
        "generate",
        help="Clean the output directory and write sitemap files",
    )
    gen_parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    gen_parser.add_argument(
        "--input", "-i", dest="source", default=None,
        help="CSV (location,lastmod,changefreq,priority) or .txt entry file",
    )
    gen_parser.add_argument("--base-url", default=None, help="Base URL for every <loc>")
    gen_parser.add_argument("--output", default=None, help="Output directory")
    gen_parser.add_argument(
        "--limit", type=int, default=None, help="Maximum URLs per sitemap file",
    )

    return parser


def _get_version() -> str:
    """Get the package version."""
    from sitemapper import __version__

    return __version__


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from sitemapper._errors import SitemapError
    from sitemapper.app import generate

    if args.command == "generate":
        try:
            generate(
                root=args.root,
                source=args.source,
                base_url=args.base_url,
                output=args.output,
                limit=args.limit,
            )
        except SitemapError as exc:
            print(f"  Error: {exc}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()
