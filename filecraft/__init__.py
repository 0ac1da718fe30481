"""Generate folders full of fake text files to fill a disk-size budget."""

from filecraft.errors import (
    DirectoryCreateFailed,
    FileCraftError,
    FileWriteFailed,
    MetadataReadFailed,
    WorkingDirectoryUnresolvable,
)
from filecraft.generator import (
    GenerationRequest,
    RunCounters,
    create_file,
    create_files_in_folders,
    generate,
)
from filecraft.planner import FolderPlan, plan

__version__ = "0.1.0"
