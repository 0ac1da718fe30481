class FileCraftError(Exception):
    """Base class for fatal generation errors."""

    message = "File generation failed"

    def __init__(self, path):
        self.path = path
        super().__init__(f"{self.message}: {path}")


class WorkingDirectoryUnresolvable(FileCraftError):
    message = "Folder not found"


class DirectoryCreateFailed(FileCraftError):
    message = "Failed to create folder"


class FileWriteFailed(FileCraftError):
    message = "Failed to create file"


class MetadataReadFailed(FileCraftError):
    message = "Error in file metadata"
