from __future__ import annotations


class WardenError(Exception):
	pass


class InputError(WardenError):
	"""A source file could not be loaded (missing, a directory, unreadable)."""

	def __init__(self, path: str, reason: str):
		self.path = path
		self.reason = reason
		super().__init__(f"Error loading file '{path}': {reason}")
