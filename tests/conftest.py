import random

import pytest


class StubFake:
    """Stand-in for Faker with fixed-length output."""

    paragraph_length = 100

    def __init__(self):
        self.companies = 0

    def company(self):
        self.companies += 1
        return f"Company {self.companies} Ltd"

    def file_name(self):
        return "notes.txt"

    def paragraph(self, nb_sentences=3, variable_nb_sentences=True):
        return "x" * self.paragraph_length

    def random_int(self, min=0, max=9999):
        return min


@pytest.fixture
def stub_fake():
    return StubFake()


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path