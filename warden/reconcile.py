from __future__ import annotations

from typing import List, Sequence, Set, Tuple

from .links import build_reference_link
from .model import AnnotatedInclude, SymbolUsage, UnlistedSymbol, UnusedSymbols


def find_unused(includes: Sequence[AnnotatedInclude], usages: Sequence[SymbolUsage]) -> List[UnusedSymbols]:
	used: Set[str] = {u.symbol for u in usages}
	unused: List[UnusedSymbols] = []
	for inc in includes:
		missing = [s for s in inc.symbols if s not in used]
		if missing:
			unused.append(UnusedSymbols(line=inc.line, directive=inc.directive, symbols=missing))
	return unused


def find_unlisted(includes: Sequence[AnnotatedInclude], usages: Sequence[SymbolUsage]) -> List[UnlistedSymbol]:
	listed: Set[str] = set()
	for inc in includes:
		listed.update(inc.symbols)
	return [
		UnlistedSymbol(line=u.line, symbol=u.symbol, link=build_reference_link(u.symbol))
		for u in usages
		if u.symbol not in listed
	]


def reconcile(
	includes: Sequence[AnnotatedInclude],
	usages: Sequence[SymbolUsage],
) -> Tuple[List[UnusedSymbols], List[UnlistedSymbol]]:
	"""Match listed symbols against used symbols across the whole file.

	The two directions are computed independently: a symbol may be missing
	from one include's comment and listed in another's. Placement does not
	matter, an include after the usage still counts.
	"""
	return find_unused(includes, usages), find_unlisted(includes, usages)
