import logging
from typing import NamedTuple

from filecraft.config import MAX_FILE_SIZE, MIN_FILE_SIZE

logger = logging.getLogger(__name__)


class FolderPlan(NamedTuple):
    avg_folder_size: int
    files_per_folder: int


def plan(num_folders, disk_size):
    """Split the disk size over the folders and estimate files per folder.

    The estimate divides the folder size by the mean of the largest and
    smallest file counts that would fill it, floored at every step. When
    that mean floors to zero (folders under 4096 bytes) it is clamped to 1,
    so the file count equals the folder size and the folder's byte budget
    stops the loop instead.
    """
    if num_folders <= 0:
        raise ValueError(f"num_folders must be positive, got {num_folders}")
    if disk_size < 0:
        raise ValueError(f"disk_size must be non-negative, got {disk_size}")

    avg_folder_size = disk_size // num_folders
    max_file_size = avg_folder_size // MAX_FILE_SIZE
    min_file_size = avg_folder_size // MIN_FILE_SIZE
    divisor = (max_file_size + min_file_size) // 2
    if divisor == 0:
        divisor = 1
    files_per_folder = avg_folder_size // divisor

    logger.debug(
        "Planned %d bytes and %d files per folder", avg_folder_size, files_per_folder
    )
    return FolderPlan(avg_folder_size, files_per_folder)
