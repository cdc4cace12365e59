"""Use cases for planning and applying renames."""

from .batch_planner import BatchPlanner
from .filename_generator import FilenameGenerator, metadata_text
from .ports import FilesystemPort, Metadata, MetadataLookupPort
from .rename_executor import RenameExecutor
from .rename_types import BatchLogContext, RenameEvent

__all__ = [
    "BatchLogContext",
    "BatchPlanner",
    "FilenameGenerator",
    "FilesystemPort",
    "Metadata",
    "MetadataLookupPort",
    "RenameEvent",
    "RenameExecutor",
    "metadata_text",
]
