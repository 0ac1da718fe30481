"""Generate a folder tree of fake text files.

Install the package first (pip install -e .), then run from anywhere:

    python scripts/generate_test_files.py <folder_count> <disk_size_bytes> <root_folder_name>
"""
import sys

from filecraft.cli import main

if __name__ == "__main__":
    sys.exit(main())
