from __future__ import annotations

import os
from typing import List, Optional

from pydantic import BaseModel, Field

from .fs_scan import SOURCE_EXTENSIONS


TRUTHY = ("1", "true", "yes", "on")


class ReportOptions(BaseModel):
	"""Which finding categories the renderer prints. Analysis ignores these."""

	bare: bool = True
	unused: bool = True
	unlisted: bool = True


class Settings(BaseModel):
	workers: int = Field(default=4, ge=1)
	verbose: bool = False
	extensions: List[str] = Field(default_factory=lambda: list(SOURCE_EXTENSIONS))
	options: ReportOptions = Field(default_factory=ReportOptions)

	@classmethod
	def from_env(cls, environ: Optional[dict] = None) -> "Settings":
		env = os.environ if environ is None else environ
		values = {}
		if env.get("WARDEN_WORKERS"):
			values["workers"] = env["WARDEN_WORKERS"].strip()
		if env.get("WARDEN_VERBOSE"):
			values["verbose"] = env["WARDEN_VERBOSE"].strip().lower() in TRUTHY
		return cls(**values)
