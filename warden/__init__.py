"""Include hygiene checker for C and C++ sources.

Modules:
- loader.py: Reading files into numbered lines.
- classify.py: Per-line detection of include directives and std:: symbols.
- reconcile.py: Matching listed symbols against used symbols.
- links.py: cppreference search links for symbols.
- analyze.py: Single-file analysis entry points.
- fs_scan.py: Expanding directories into C/C++ source files.
- driver.py: Checking many files, optionally on a thread pool.
- report.py: Plain-text rendering of results.
- model.py: Data structures for lines and findings.
"""

__all__ = [
	"analyze",
	"classify",
	"config",
	"driver",
	"errors",
	"fs_scan",
	"links",
	"loader",
	"log",
	"model",
	"reconcile",
	"report",
]
