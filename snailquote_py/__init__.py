"""snailquote-py – all public symbols are re-exported from .core."""

from importlib import metadata

from .core import (  # noqa: F401 – re-exports
    Classification,
    ErrorKind,
    ParseError,
    classify,
    escape,
    escape_quoted,
    unescape,
)

try:
    __version__ = metadata.version("snailquote-py")
except metadata.PackageNotFoundError:  # editable install before first build
    __version__ = "0.0.0"
