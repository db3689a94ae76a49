from .usage import (
    ArgumentError,
    ConfigError,
    UsageError,
    format_usage,
    raise_usage,
    usage_line,
)

__all__ = [
    "ArgumentError",
    "ConfigError",
    "UsageError",
    "format_usage",
    "raise_usage",
    "usage_line",
]
