"""
Summary: Public surface for scheme compilation, name resolution and renaming.
Why: Provide a stable import path for the application service and tests.
"""

from .domain.errors import (
    FileNotValidError,
    InvalidArgumentError,
    MediaRenamerError,
    RenameFailedError,
    UnsupportedFileTypeError,
)
from .domain.results import (
    FilenameResult,
    RenameOutcome,
    RenamePlan,
    ResolvedName,
    SkippedFile,
    SkipReason,
)
from .domain.sanitizer import ILLEGAL_CHARACTERS, Sanitizer, is_valid_substitute
from .domain.scheme import (
    Literal,
    MetadataKey,
    Scheme,
    SchemeToken,
    compile_scheme,
    format_scheme,
    parse_scheme_text,
)
from .usecases import BatchPlanner, FilenameGenerator, RenameExecutor

__all__ = [
    "BatchPlanner",
    "FileNotValidError",
    "FilenameGenerator",
    "FilenameResult",
    "ILLEGAL_CHARACTERS",
    "InvalidArgumentError",
    "Literal",
    "MediaRenamerError",
    "MetadataKey",
    "RenameExecutor",
    "RenameFailedError",
    "RenameOutcome",
    "RenamePlan",
    "ResolvedName",
    "Sanitizer",
    "Scheme",
    "SchemeToken",
    "SkipReason",
    "SkippedFile",
    "UnsupportedFileTypeError",
    "compile_scheme",
    "format_scheme",
    "is_valid_substitute",
    "parse_scheme_text",
]
