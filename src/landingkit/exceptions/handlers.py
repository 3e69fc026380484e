"""
Translate low-level failures into LandingKit errors and report them.

| Failure | Raised as |
|---------|-----------|
| Color string is not `#RRGGBB` | `InvalidColorFormatError` |
| Broken JSON in a site/config file | `ConfigFileInvalidError` |
| Bad value in a site/config file | `ConfigValidationError` |

Batch validation keeps going after a bad file:

```python
collector = collect_errors("validate site files")
for path in paths:
    with collector.try_operation(str(path)):
        SiteConfig.load(path)
if collector.has_errors:
    click.echo(collector.get_summary(), err=True)
```
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Optional

from pydantic import ValidationError

from .base import LandingKitError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)

_JSON_PREFIX = "Invalid JSON:"


def _dotted(loc: tuple) -> str:
    """('theme', 'borderRadius') -> 'theme.borderRadius'"""
    return ".".join(str(part) for part in loc) or "unknown"


def _json_parse_error(errors: list[dict[str, Any]]) -> Optional[str]:
    for err in errors:
        if err.get("type") == "json_invalid":
            message = err.get("msg", "")
            if message.startswith(_JSON_PREFIX):
                message = message[len(_JSON_PREFIX):].strip()
            return message or "invalid JSON"
    return None


def wrap_pydantic_error(error: Exception, file_path: str) -> LandingKitError:
    """
    Convert a pydantic ValidationError raised while loading `file_path`.

    Syntax errors become ConfigFileInvalidError. A single bad value is
    reported by its dotted field path; several are folded into one
    ConfigValidationError listing every field.
    """
    if not isinstance(error, ValidationError):
        return ConfigValidationError("unknown", None, str(error), file_path=file_path)

    errors = error.errors()

    parse_error = _json_parse_error(errors)
    if parse_error is not None:
        return ConfigFileInvalidError(file_path, parse_error)

    if len(errors) == 1:
        (err,) = errors
        return ConfigValidationError(
            field=_dotted(err.get("loc", ())),
            value=err.get("input"),
            error_msg=err.get("msg", "validation failed"),
            file_path=file_path,
        )

    details = "\n".join(
        f"  - {_dotted(err.get('loc', ()))}: {err.get('msg', 'validation failed')}" for err in errors
    )
    return ConfigValidationError(
        field="multiple fields",
        value=None,
        error_msg=f"{len(errors)} validation errors:\n{details}",
        file_path=file_path,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return (message, recovery hint or None) for printing to the user."""
    if isinstance(error, LandingKitError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Records failures of independent steps so a batch can finish.

    Only LandingKitError and OSError are recorded. Anything else is a bug
    and propagates out of `try_operation`.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, Exception]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @contextmanager
    def try_operation(self, step: str) -> Iterator[None]:
        """Run one step; record its failure instead of raising."""
        try:
            yield
        except (LandingKitError, OSError) as e:
            detail = getattr(e, "technical_message", str(e))
            logger.warning(f"{self.operation}: {step} failed: {detail}")
            self.errors.append((step, e))
        else:
            self.success_count += 1

    def get_summary(self) -> str:
        total = self.error_count + self.success_count
        if not self.has_errors:
            return f"All operations completed successfully ({total} total)"

        lines = [f"Failed {self.error_count} of {total} operations:"]
        lines.extend(f"  - {step}: {e}" for step, e in self.errors)
        return "\n".join(lines)
