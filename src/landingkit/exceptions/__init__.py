"""
LandingKit exception hierarchy.

```
LandingKitError
├── ColorError
│   └── InvalidColorFormatError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

Every error carries a `user_message` for the terminal, a `technical_message`
for the log and an optional `recovery_hint`:

```python
from landingkit.colors import hex_to_rgb
from landingkit.exceptions import InvalidColorFormatError

try:
    hex_to_rgb("rgb(2, 132, 199)")
except InvalidColorFormatError as e:
    print(e.user_message)   # Invalid color: 'rgb(2, 132, 199)'
    print(e.recovery_hint)
```

Pydantic failures raised while loading files are converted with
`wrap_pydantic_error`; see `landingkit.exceptions.handlers`.
"""

from .base import LandingKitError
from .color import ColorError, InvalidColorFormatError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    collect_errors,
    format_error_for_display,
    wrap_pydantic_error,
)

__all__ = [
    "LandingKitError",
    "ColorError",
    "InvalidColorFormatError",
    "ConfigurationError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ErrorCollector",
    "collect_errors",
    "format_error_for_display",
    "wrap_pydantic_error",
]
