"""Error type shared by listing, terminal bootstrap, and the CLI."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DirpickError(Exception):
    code: str
    message: str
    detail: str | None = None

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message


def format_error(error: BaseException) -> str:
    if isinstance(error, DirpickError):
        prefix = f"[{error.code}] " if error.code else ""
        return f"{prefix}{error}"
    return f"{error}"


def wrap_error(error: BaseException, *, code: str, message: str) -> DirpickError:
    if isinstance(error, DirpickError):
        return error
    return DirpickError(code=code, message=message, detail=str(error))
