"""
errors.py - the reporting unit of the validation engine.

Public API
----------
Issue
    A single ``(path, message)`` failure.

ValidationError
    Exception raised for any schema violation; bundles one or more issues.
"""

from __future__ import annotations

from typing import Any, Iterable, NamedTuple

__all__ = [
    "Issue",
    "ValidationError",
]


class Issue(NamedTuple):
    """One validation failure anchored at *path* (``""`` is the root)."""

    path: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "message": self.message}


# --------------------------------------------------------------------------- #
# Exceptions                                                                  #
# --------------------------------------------------------------------------- #

class ValidationError(ValueError):
    """Raised when a value violates the supplied schema."""

    def __init__(self, issues: Iterable[Issue]):
        issues = [Issue(*i) for i in issues]
        if not issues:
            raise ValueError("ValidationError requires at least one issue")
        self.issues: list[Issue] = issues
        super().__init__(
            "Validation failed: " + ", ".join(i.message for i in issues)
        )

    def __reduce__(self):
        return (self.__class__, (self.issues,))

    @classmethod
    def single(cls, path: str, message: str) -> "ValidationError":
        return cls([Issue(path, message)])

    def to_dict(self) -> dict[str, Any]:
        """Return the ``{error, issues}`` payload used for 400 responses."""
        return {
            "error": "Validation failed",
            "issues": [i.to_dict() for i in self.issues],
        }
