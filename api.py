from __future__ import annotations

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, ValidationError

from warden.analyze import analyze_source
from warden.config import Settings
from warden.driver import run_checks
from warden.fs_scan import collect_source_files
from warden.links import build_reference_link
from warden.model import FileOutcome, FileReport


app = FastAPI(title="Header Warden")


class AnalyzeRequest(BaseModel):
	paths: List[str]
	workers: Optional[int] = Field(default=None, ge=1)


class AnalyzeResponse(BaseModel):
	outcomes: List[FileOutcome]


class SourceRequest(BaseModel):
	name: str = "<source>"
	text: str


class LinkResponse(BaseModel):
	symbol: str
	link: str


@app.post("/analyze", response_model=AnalyzeResponse)
def analyze(req: AnalyzeRequest) -> AnalyzeResponse:
	if not req.paths:
		raise HTTPException(status_code=400, detail="No paths given")

	try:
		settings = Settings.from_env()
	except ValidationError as e:
		raise HTTPException(status_code=400, detail=f"Invalid configuration: {e}")
	paths = collect_source_files(req.paths, settings.extensions)
	outcomes = run_checks(paths, workers=req.workers or settings.workers)
	return AnalyzeResponse(outcomes=outcomes)


@app.post("/analyze/source", response_model=FileReport)
def analyze_inline(req: SourceRequest) -> FileReport:
	return analyze_source(req.name, req.text)


@app.get("/link", response_model=LinkResponse)
def link(symbol: str) -> LinkResponse:
	return LinkResponse(symbol=symbol, link=build_reference_link(symbol))


def create_app() -> FastAPI:
	return app
