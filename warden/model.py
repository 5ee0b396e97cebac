from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class SourceLine(BaseModel):
	model_config = ConfigDict(frozen=True)

	number: int = Field(ge=1)
	text: str


class LineClass(BaseModel):
	"""Result of classifying a single line.

	`directive` is set for bare and annotated includes, `symbols` for annotated
	includes and usage lines.
	"""

	model_config = ConfigDict(frozen=True)

	kind: Literal["ignored", "bare", "annotated", "usage"]
	directive: Optional[str] = None
	symbols: List[str] = []


class BareInclude(BaseModel):
	model_config = ConfigDict(frozen=True)

	line: SourceLine
	directive: str


class AnnotatedInclude(BaseModel):
	model_config = ConfigDict(frozen=True)

	line: SourceLine
	directive: str
	symbols: List[str]


class SymbolUsage(BaseModel):
	model_config = ConfigDict(frozen=True)

	line: SourceLine
	symbol: str


class UnusedSymbols(BaseModel):
	model_config = ConfigDict(frozen=True)

	line: SourceLine
	directive: str
	symbols: List[str]


class UnlistedSymbol(BaseModel):
	model_config = ConfigDict(frozen=True)

	line: SourceLine
	symbol: str
	link: str


class FileReport(BaseModel):
	model_config = ConfigDict(frozen=True)

	path: str
	bare_includes: List[BareInclude] = []
	unused_symbols: List[UnusedSymbols] = []
	unlisted_symbols: List[UnlistedSymbol] = []

	@property
	def is_clean(self) -> bool:
		return not (self.bare_includes or self.unused_symbols or self.unlisted_symbols)


class FileOutcome(BaseModel):
	model_config = ConfigDict(frozen=True)

	path: str
	report: Optional[FileReport] = None
	error: Optional[str] = None

	@property
	def ok(self) -> bool:
		return self.error is None
