from __future__ import annotations

import logging
import os
from typing import List

from .errors import InputError
from .model import SourceLine


logger = logging.getLogger(__name__)


def split_lines(text: str) -> List[SourceLine]:
	# Only "\n" ends a line; a lone "\r" stays part of the text.
	lines = text.split("\n")
	if lines and lines[-1] == "":
		lines.pop()
	return [SourceLine(number=i, text=t.rstrip("\r")) for i, t in enumerate(lines, 1)]


def read_lines(path: str) -> List[SourceLine]:
	if not os.path.exists(path):
		raise InputError(path, "file does not exist")
	if os.path.isdir(path):
		raise InputError(path, "path is a directory, not a file")
	if not os.path.isfile(path):
		raise InputError(path, "path is not a regular file")

	logger.debug("Loading file from disk: %s", path)
	try:
		with open(path, "r", encoding="utf-8", newline="") as fh:
			text = fh.read()
	except UnicodeDecodeError as e:
		raise InputError(path, f"not valid UTF-8 text ({e.reason})") from e
	except OSError as e:
		raise InputError(path, e.strerror or str(e)) from e
	return split_lines(text)
