import logging
import os
import random
from dataclasses import dataclass

from faker import Faker

from filecraft.config import (
    BANNER_WIDTH,
    MAX_FILE_SIZE,
    MIN_FILE_SIZE,
    PARAGRAPH_SENTENCES,
)
from filecraft.errors import (
    DirectoryCreateFailed,
    FileWriteFailed,
    MetadataReadFailed,
    WorkingDirectoryUnresolvable,
)
from filecraft.planner import plan

logger = logging.getLogger(__name__)

fake = Faker()


@dataclass(frozen=True)
class GenerationRequest:
    """What to generate: folder count, total bytes and the root folder."""

    num_folders: int
    disk_size: int
    root_folder: str


@dataclass
class RunCounters:
    """Progress of one generation run."""

    files_count: int = 0
    bytes_written: int = 0
    complete_folder_size: int = 0


def create_folder_name(fake=fake):
    """Generate a company-style folder name using Faker."""
    return fake.company().replace(" ", "_")


def create_file_name(file_index, fake=fake):
    """Generate a file name prefixed with its index in the folder."""
    return f"{file_index}-{fake.file_name()}"


def create_paragraph(fake=fake):
    """Generate a short paragraph of placeholder text using Faker."""
    low, high = PARAGRAPH_SENTENCES
    return fake.paragraph(
        nb_sentences=fake.random_int(low, high), variable_nb_sentences=False
    )


def generate_file_size(rng=random):
    """Pick a random file size between 2KB and 16KB."""
    return rng.randint(MIN_FILE_SIZE, MAX_FILE_SIZE)


def get_data_dir(root_folder):
    try:
        working_dir = os.getcwd()
    except OSError as err:
        raise WorkingDirectoryUnresolvable(root_folder) from err
    return os.path.abspath(os.path.join(working_dir, root_folder))


def print_stats(counters, disk_size):
    print(
        f"\rStats for this run: [ Files created: {counters.files_count} ] | "
        f"[ Disk Size({disk_size}) Bytes Written: {counters.bytes_written} ]",
        end="",
        flush=True,
    )


def create_file(file_path, file_size, counters, disk_size, fake=fake):
    """Write a file of roughly file_size bytes and return its real size.

    One sample paragraph's length is used as the estimate for every
    paragraph, so the result only approximates file_size.
    """
    sample_length = len(create_paragraph(fake).encode("utf-8"))
    paragraph_range = file_size // max(sample_length, 1)
    paragraphs = [create_paragraph(fake) for _ in range(paragraph_range)]
    file_content = "\n".join(paragraphs)

    try:
        with open(file_path, "w", encoding="utf-8", newline="") as f:
            f.write(file_content)
    except OSError as err:
        raise FileWriteFailed(file_path) from err

    try:
        new_file_size = os.path.getsize(file_path)
    except OSError as err:
        raise MetadataReadFailed(file_path) from err

    counters.files_count += 1
    counters.bytes_written += new_file_size
    logger.debug("Wrote %s (%d bytes, target %d)", file_path, new_file_size, file_size)

    print_stats(counters, disk_size)
    return new_file_size


def create_files_in_folders(
    root_folder, num_folders, disk_size, counters=None, fake=fake, rng=random
):
    """Fill root_folder with up to num_folders folders totalling ~disk_size bytes."""
    avg_folder_size, files_per_folder = plan(num_folders, disk_size)
    if counters is None:
        counters = RunCounters()

    data_dir = get_data_dir(root_folder)
    print(
        f"\nData will be generated in the following folder: [ {data_dir} ] \n"
        f"{'=' * BANNER_WIDTH}\n"
    )

    for _ in range(num_folders):
        # The previous folder may overshoot; just don't start another one
        if counters.complete_folder_size > disk_size:
            break

        folder_path = os.path.join(data_dir, create_folder_name(fake))
        try:
            os.makedirs(folder_path, exist_ok=True)
        except OSError as err:
            raise DirectoryCreateFailed(folder_path) from err
        logger.debug("Created folder %s", folder_path)

        current_folder_size = 0
        for file_index in range(files_per_folder):
            if current_folder_size >= avg_folder_size:
                break

            file_path = os.path.join(folder_path, create_file_name(file_index, fake))
            current_folder_size += create_file(
                file_path, generate_file_size(rng), counters, disk_size, fake
            )

        counters.complete_folder_size += current_folder_size

    print()
    return counters


def generate(request, counters=None, fake=fake, rng=random):
    """Run create_files_in_folders for a GenerationRequest."""
    return create_files_in_folders(
        request.root_folder,
        request.num_folders,
        request.disk_size,
        counters,
        fake=fake,
        rng=rng,
    )
