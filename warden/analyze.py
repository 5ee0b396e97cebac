from __future__ import annotations

import logging
from typing import List, Sequence

from .classify import classify_line
from .loader import read_lines, split_lines
from .model import AnnotatedInclude, BareInclude, FileReport, SourceLine, SymbolUsage
from .reconcile import reconcile


logger = logging.getLogger(__name__)


def analyze_lines(path: str, lines: Sequence[SourceLine]) -> FileReport:
	bare: List[BareInclude] = []
	annotated: List[AnnotatedInclude] = []
	usages: List[SymbolUsage] = []

	for line in lines:
		cls = classify_line(line)
		if cls.kind == "bare":
			bare.append(BareInclude(line=line, directive=cls.directive))
		elif cls.kind == "annotated":
			annotated.append(AnnotatedInclude(line=line, directive=cls.directive, symbols=cls.symbols))
		elif cls.kind == "usage":
			usages.extend(SymbolUsage(line=line, symbol=s) for s in cls.symbols)

	unused, unlisted = reconcile(annotated, usages)
	logger.debug(
		"%s: %d bare, %d unused, %d unlisted", path, len(bare), len(unused), len(unlisted)
	)
	return FileReport(
		path=path,
		bare_includes=bare,
		unused_symbols=unused,
		unlisted_symbols=unlisted,
	)


def analyze_source(name: str, text: str) -> FileReport:
	return analyze_lines(name, split_lines(text))


def analyze_file(path: str) -> FileReport:
	"""Load `path` and check its include comments. Raises InputError."""
	return analyze_lines(path, read_lines(path))
