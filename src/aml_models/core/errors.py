"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class AmlModelsError(Exception):
    """Base exception for aml-models."""

    exit_code: int = 1


class MalformedPayloadError(AmlModelsError):
    """A payload is not valid JSON or does not match the model shape."""

    exit_code = 2

    def __init__(self, model: str, detail: str, errors: list[dict[str, Any]] | None = None) -> None:
        self.model = model
        self.errors = errors or []
        super().__init__(f"Malformed {model} payload: {detail}")

    @classmethod
    def from_validation_error(cls, model: str, exc: ValidationError) -> MalformedPayloadError:
        errors = exc.errors(include_url=False)
        parts = []
        for err in errors:
            loc = ".".join(str(p) for p in err["loc"]) or "<root>"
            parts.append(f"{loc}: {err['msg']}")
        return cls(model, "; ".join(parts), errors)


class UnknownModelError(AmlModelsError):
    """No model with the requested name exists in the catalog."""

    exit_code = 4


class UnknownEnumError(AmlModelsError):
    """No enum with the requested name exists in the catalog."""

    exit_code = 4


class PagingError(AmlModelsError):
    """A paged listing cannot be continued."""

    exit_code = 5


class ConfigurationError(AmlModelsError):
    """Configuration file or value is invalid."""

    exit_code = 6


def error_handler(func: F) -> F:
    """Decorator that catches AmlModelsError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except AmlModelsError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
