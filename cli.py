from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

import uvicorn
from pydantic import ValidationError

from warden.config import ReportOptions, Settings
from warden.driver import ReportSink, all_succeeded, run_checks
from warden.fs_scan import collect_source_files
from warden.links import build_reference_link
from warden.log import setup_logging


def cmd_check(args: argparse.Namespace) -> int:
	settings = Settings.from_env()
	if args.verbose:
		settings.verbose = True
	if args.workers is not None:
		settings.workers = args.workers
	settings.options = ReportOptions(
		bare=not args.disable_bare,
		unused=not args.disable_unused,
		unlisted=not args.disable_unlisted,
	)
	setup_logging(settings.verbose)

	paths = collect_source_files(args.paths, settings.extensions)
	if args.json:
		outcomes = run_checks(paths, workers=settings.workers)
		print(json.dumps([o.model_dump() for o in outcomes], indent=2))
	else:
		sink = ReportSink(lambda text: print(text, flush=True), settings.options)
		outcomes = run_checks(paths, workers=settings.workers, sink=sink)
	return 0 if all_succeeded(outcomes) else 1


def cmd_link(args: argparse.Namespace) -> int:
	print(build_reference_link(args.symbol))
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog="header-warden",
		description="Find missing standard library headers in C++ files.",
	)
	sub = parser.add_subparsers(dest="cmd", required=True)

	pc = sub.add_parser("check", help="Check include comments of C/C++ files")
	pc.add_argument("paths", nargs="+", help="Files or directories to analyze")
	pc.add_argument("-v", "--verbose", action="store_true", help="Display detailed output")
	pc.add_argument("--disable-bare", action="store_true", help="Suppress messages about bare includes")
	pc.add_argument("--disable-unused", action="store_true", help="Suppress messages about unused functions")
	pc.add_argument("--disable-unlisted", action="store_true", help="Suppress messages about unlisted functions")
	pc.add_argument("--workers", type=int, default=None, help="Number of files checked in parallel")
	pc.add_argument("--json", action="store_true", help="Print results as JSON")
	pc.set_defaults(func=cmd_check)

	pl = sub.add_parser("link", help="Print the cppreference search link for a symbol")
	pl.add_argument("symbol")
	pl.set_defaults(func=cmd_link)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv: Optional[List[str]] = None) -> None:
	parser = build_parser()
	args = parser.parse_args(argv)
	if getattr(args, "workers", None) is not None and args.workers < 1:
		parser.error("--workers must be at least 1")
	try:
		status = args.func(args)
	except ValidationError as e:
		parser.error(f"invalid configuration: {e}")
	sys.exit(status)


if __name__ == "__main__":
	main()
