"""slides_tools - a typed client for the Google Slides API

Exposes the public API (`SlidesClient`, `AuthState`, `choose_presentation`,
the data records) **and** sets up a minimal logging configuration so that
every sub-module can call

```python
import logging
logger = logging.getLogger(__name__)
```

and honour a single environment variable `SLIDES_TOOLS_LOG_LEVEL`.
"""

from __future__ import annotations

import logging
import os

# ------------------------------------------------------------------
# Default logging - honour env var, otherwise WARNING.
# ------------------------------------------------------------------
LOG_LEVEL = os.getenv("SLIDES_TOOLS_LOG_LEVEL", "WARNING").upper()
if not logging.getLogger().handlers:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

# Public API re-exports ------------------------------------------------
from .auth import AuthState, OAuthClient  # noqa: E402  (import after logger)
from .client import BatchUpdate, SlidesClient  # noqa: E402
from .config import DEFAULT_SCOPES, SlidesConfig  # noqa: E402
from .errors import (  # noqa: E402
    AuthError,
    PickerCancelled,
    PickerError,
    PickerTimeout,
    SlidesToolsError,
)
from .models import ApiObject  # noqa: E402
from .picker import choose_presentation  # noqa: E402
from .transport import ApiRequest, build_request, execute, process_response  # noqa: E402
from .update_requests import BatchUpdatePresentationRequest, Request, WriteControl  # noqa: E402

__all__ = [
    "ApiObject",
    "ApiRequest",
    "AuthError",
    "AuthState",
    "BatchUpdate",
    "BatchUpdatePresentationRequest",
    "DEFAULT_SCOPES",
    "OAuthClient",
    "PickerCancelled",
    "PickerError",
    "PickerTimeout",
    "Request",
    "SlidesClient",
    "SlidesConfig",
    "SlidesToolsError",
    "WriteControl",
    "build_request",
    "choose_presentation",
    "execute",
    "process_response",
]
