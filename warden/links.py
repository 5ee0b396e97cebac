from __future__ import annotations

from typing import Dict


REFERENCE_BASE_URL = "https://duckduckgo.com/?sites=cppreference.com&q="
REFERENCE_SUFFIX = "&ia=web"

# Only the characters likely to show up in a symbol name are encoded.
URL_ENCODING: Dict[str, str] = {
	" ": "%20",
	"!": "%21",
	"#": "%23",
	"$": "%24",
	"&": "%26",
	"'": "%27",
	"(": "%28",
	")": "%29",
	"*": "%2A",
	"+": "%2B",
	",": "%2C",
	"/": "%2F",
	":": "%3A",
	";": "%3B",
	"=": "%3D",
	"?": "%3F",
	"@": "%40",
	"[": "%5B",
	"]": "%5D",
}


def encode_symbol(symbol: str) -> str:
	return "".join(URL_ENCODING.get(ch, ch) for ch in symbol)


def build_reference_link(symbol: str) -> str:
	"""Return a cppreference.com search link for `symbol`, e.g. "std::sort"."""
	return f"{REFERENCE_BASE_URL}{encode_symbol(symbol)}{REFERENCE_SUFFIX}"
