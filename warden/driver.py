from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Dict, List, Optional, Sequence

from .analyze import analyze_file
from .config import ReportOptions
from .errors import InputError
from .model import FileOutcome
from .report import render_outcome


logger = logging.getLogger(__name__)


class ReportSink:
	"""Writes whole reports one at a time so concurrent files never interleave."""

	def __init__(self, write: Callable[[str], None], options: Optional[ReportOptions] = None):
		self._write = write
		self._options = options or ReportOptions()
		self._lock = threading.Lock()

	def emit(self, outcome: FileOutcome) -> None:
		text = render_outcome(outcome, self._options)
		with self._lock:
			self._write(text)


def check_file(path: str) -> FileOutcome:
	logger.info("Processing file: %s", path)
	try:
		report = analyze_file(path)
	except InputError as e:
		logger.error("%s", e)
		return FileOutcome(path=path, error=str(e))
	return FileOutcome(path=path, report=report)


def run_checks(
	paths: Sequence[str],
	workers: int = 4,
	sink: Optional[ReportSink] = None,
) -> List[FileOutcome]:
	"""Check every path and return one outcome per path, in input order.

	Two or more files go through a thread pool; a failing file only affects
	its own outcome.
	"""
	if len(paths) < 2:
		outcomes = []
		for path in paths:
			outcome = check_file(path)
			if sink is not None:
				sink.emit(outcome)
			outcomes.append(outcome)
		return outcomes

	by_index: Dict[int, FileOutcome] = {}
	with ThreadPoolExecutor(max_workers=workers) as executor:
		futures = {executor.submit(check_file, path): i for i, path in enumerate(paths)}
		for future in as_completed(futures):
			outcome = future.result()
			if sink is not None:
				sink.emit(outcome)
			by_index[futures[future]] = outcome
	return [by_index[i] for i in range(len(paths))]


def all_succeeded(outcomes: Sequence[FileOutcome]) -> bool:
	return all(o.ok for o in outcomes)
