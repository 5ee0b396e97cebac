from __future__ import annotations

from typing import List, Optional

from .config import ReportOptions
from .model import FileOutcome, FileReport


LINE_SEPARATOR = "-" * 80


def _bare_block(report: FileReport) -> List[str]:
	parts: List[str] = ["-- 1) BARE INCLUDES --", ""]
	if not report.bare_includes:
		return parts + ["-> No bare includes found.", ""]
	for b in report.bare_includes:
		parts.append(f"{b.line.number}| {b.line.text}")
		parts.append("-> Bare include directive.")
		parts.append(
			f"-> Add a comment to '{b.directive}' that lists which functions depend on it, "
			f"e.g., '{b.directive} // for std::foo, std::bar'."
		)
		parts.append("")
	return parts


def _unused_block(report: FileReport) -> List[str]:
	parts: List[str] = ["-- 2) UNUSED FUNCTIONS --", ""]
	if not report.unused_symbols:
		return parts + ["-> No unused functions found.", ""]
	for u in report.unused_symbols:
		parts.append(f"{u.line.number}| {u.line.text}")
		parts.append("-> Unused functions listed as comments.")
		parts.append(
			f"-> Remove the following functions from comments of the '{u.directive}' "
			f"include directive: {', '.join(u.symbols)}"
		)
		parts.append("")
	return parts


def _unlisted_block(report: FileReport) -> List[str]:
	parts: List[str] = ["-- 3) UNLISTED FUNCTIONS --", ""]
	if not report.unlisted_symbols:
		return parts + ["-> No unlisted functions found.", ""]
	for u in report.unlisted_symbols:
		parts.append(f"{u.line.number}| {u.line.text}")
		parts.append("-> Unlisted function.")
		parts.append(
			f"-> Add '{u.symbol}' as a comment to the include directives, "
			f"e.g., \"#include <foo> // for {u.symbol}\""
		)
		parts.append(f"-> Reference: {u.link}")
		parts.append("")
	return parts


def render_report(report: FileReport, options: Optional[ReportOptions] = None) -> str:
	opts = options or ReportOptions()
	parts: List[str] = [f"##- {report.path} -##", ""]
	if report.is_clean:
		parts += ["-> No issues found.", ""]
	else:
		if opts.bare:
			parts += _bare_block(report)
		if opts.unused:
			parts += _unused_block(report)
		if opts.unlisted:
			parts += _unlisted_block(report)
	parts.append(LINE_SEPARATOR)
	return "\n".join(parts)


def render_error(outcome: FileOutcome) -> str:
	return "\n".join([f"##- {outcome.path} -##", "", f"-> {outcome.error}", "", LINE_SEPARATOR])


def render_outcome(outcome: FileOutcome, options: Optional[ReportOptions] = None) -> str:
	if outcome.report is None:
		return render_error(outcome)
	return render_report(outcome.report, options)
