import argparse
import logging
import random
import re
import sys

from faker import Faker

from filecraft import config
from filecraft.errors import FileCraftError
from filecraft.generator import GenerationRequest, RunCounters, generate

logger = logging.getLogger(__name__)

USAGE = (
    "Usage: filecraft <folder_count> <disk_size_bytes> <root_folder_name> \n\n"
    "Example: filecraft 100 204800 data_repo"
)

COUNT_PATTERN = re.compile(r"\+?[0-9]+")


class UsageError(Exception):
    pass


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that reports bad arguments with the usage text instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser():
    parser = ArgumentParser(
        prog="filecraft",
        description="Fill a folder with fake text files up to a disk-size budget.",
    )
    parser.add_argument("folder_count", type=str, help="Number of folders to create.")
    parser.add_argument("disk_size", type=str, help="Total bytes to write.")
    parser.add_argument("root_folder", type=str, help="Folder to generate data in.")
    return parser


def parse_count(value, minimum):
    """Parse an optionally '+'-signed ASCII integer no smaller than minimum, or return None."""
    if not COUNT_PATTERN.fullmatch(value):
        return None
    number = int(value)
    if number < minimum:
        return None
    return number


def setup_logging():
    logging.basicConfig(
        level=config.log_level(),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


def main(argv=None):
    setup_logging()
    if argv is None:
        argv = sys.argv[1:]

    try:
        # Everything is positional; a root folder may start with "-"
        args = build_parser().parse_args(["--", *argv])
    except UsageError as err:
        logger.debug("Bad arguments: %s", err)
        print(USAGE)
        return 0

    num_folders = parse_count(args.folder_count, 1)
    if num_folders is None:
        print("Invalid number of folders")
        return 0

    disk_size = parse_count(args.disk_size, 0)
    if disk_size is None:
        print("Invalid disk size")
        return 0

    seed = config.seed()
    if seed is not None:
        random.seed(seed)
        Faker.seed(seed)

    request = GenerationRequest(num_folders, disk_size, args.root_folder)
    counters = RunCounters()
    try:
        generate(request, counters)
    except FileCraftError as err:
        print()
        logger.debug("Aborted: %s", err.__cause__)
        print(f"Error: {err}")
        return 1

    return 0
