"""Utils module - Utility functions."""

from routy_core.utils.config import (
    RouterConfig,
    load_config,
    configure_logging,
)
from routy_core.utils.helpers import (
    trim_slashes,
    request_path,
    normalize_base_url,
)

__all__ = [
    "RouterConfig",
    "load_config",
    "configure_logging",
    "trim_slashes",
    "request_path",
    "normalize_base_url",
]
