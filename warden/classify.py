from __future__ import annotations

import logging
import re
import string
from typing import List

from .model import LineClass, SourceLine


logger = logging.getLogger(__name__)

QUALIFIER = "std"

INCLUDE_DIRECTIVE_RE = re.compile(r"^\s*#include\s*<\S+>", re.ASCII)
SYMBOL_RE = re.compile(re.escape(QUALIFIER) + r"::\w+", re.ASCII)

IGNORED = LineClass(kind="ignored")

# Normalization is ASCII-only; str.lower() would fold e.g. U+212A into "k".
ASCII_WHITESPACE = " \t\n\r\f\v"
ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def begins_with_comment(view: str) -> bool:
	# A leading "*" is taken as the middle of a block comment, which also
	# catches statements that start with a dereference or multiplication.
	return view.startswith("//") or view.startswith("/*") or view.startswith("*")


def remove_comment(view: str) -> str:
	index = view.find("//")
	if index == -1:
		return view
	return view[:index]


def classify_line(line: SourceLine) -> LineClass:
	if not line.text:
		return IGNORED

	# Matching happens on a lowered copy; line.text is reported as-is.
	view = line.text.strip(ASCII_WHITESPACE).translate(ASCII_LOWER)
	if begins_with_comment(view):
		logger.debug("Line %d: comment, skipped", line.number)
		return IGNORED

	match = INCLUDE_DIRECTIVE_RE.search(view)
	if match is None:
		view = remove_comment(view)

	symbols: List[str] = SYMBOL_RE.findall(view)

	if match is not None:
		directive = match.group(0)
		if symbols:
			logger.debug("Line %d: include %r lists %s", line.number, directive, symbols)
			return LineClass(kind="annotated", directive=directive, symbols=symbols)
		logger.debug("Line %d: bare include %r", line.number, directive)
		return LineClass(kind="bare", directive=directive)
	if symbols:
		logger.debug("Line %d: uses %s", line.number, symbols)
		return LineClass(kind="usage", symbols=symbols)
	return IGNORED
