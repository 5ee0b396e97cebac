from __future__ import annotations

import logging


def setup_logging(verbose: bool = False) -> logging.Logger:
	logging.basicConfig(
		level=logging.DEBUG if verbose else logging.WARNING,
		format="%(asctime)s [%(levelname)s] %(message)s",
		datefmt="%Y-%m-%d %H:%M:%S",
		force=True,
	)
	return logging.getLogger("warden")
