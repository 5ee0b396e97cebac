from __future__ import annotations

import os
from typing import Iterable, List, Set


SOURCE_EXTENSIONS: List[str] = [
	".c",
	".cc",
	".cpp",
	".cxx",
	".c++",
	".h",
	".hh",
	".hpp",
	".hxx",
	".h++",
	".ipp",
	".tpp",
	".ino",
]

IGNORED_DIRS = {".git", "node_modules", "dist", "build", "__pycache__"}


def is_source_file(filename: str, extensions: Iterable[str] = SOURCE_EXTENSIONS) -> bool:
	_, ext = os.path.splitext(filename)
	return ext.lower() in {e.lower() for e in extensions}


def scan_directory(root: str, extensions: Iterable[str] = SOURCE_EXTENSIONS) -> List[str]:
	exts = list(extensions)
	files: List[str] = []
	for dirpath, dirnames, filenames in os.walk(root):
		dirnames[:] = [d for d in dirnames if d not in IGNORED_DIRS]
		for filename in filenames:
			if is_source_file(filename, exts):
				files.append(os.path.join(dirpath, filename))
	return sorted(files)


def collect_source_files(paths: Iterable[str], extensions: Iterable[str] = SOURCE_EXTENSIONS) -> List[str]:
	"""Expand directories into the source files below them.

	Anything that is not a directory is passed through untouched, including
	paths that do not exist, so the caller gets to report them.
	"""
	exts = list(extensions)
	seen: Set[str] = set()
	result: List[str] = []
	for path in paths:
		candidates = scan_directory(path, exts) if os.path.isdir(path) else [path]
		for c in candidates:
			if c not in seen:
				seen.add(c)
				result.append(c)
	return result
