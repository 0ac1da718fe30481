import pytest

from filecraft.planner import FolderPlan, plan


def test_plan_large_budget():
    assert plan(2, 2_000_000) == FolderPlan(1_000_000, 3649)


def test_plan_small_divisor():
    # (10240 // 16384 + 10240 // 2048) // 2 == 2
    assert plan(4, 40960) == FolderPlan(10240, 5120)


def test_plan_zero_divisor_is_clamped():
    assert plan(1, 3000) == FolderPlan(3000, 3000)
    assert plan(4, 16380) == FolderPlan(4095, 4095)


def test_plan_empty_budget():
    assert plan(3, 0) == FolderPlan(0, 0)


def test_plan_floors_folder_size():
    avg_folder_size, _ = plan(3, 100_000)
    assert avg_folder_size == 33_333


def test_plan_is_deterministic():
    assert plan(7, 123_456_789) == plan(7, 123_456_789)


@pytest.mark.parametrize("num_folders", [0, -1])
def test_plan_rejects_non_positive_folders(num_folders):
    with pytest.raises(ValueError):
        plan(num_folders, 1024)


def test_plan_rejects_negative_disk_size():
    with pytest.raises(ValueError):
        plan(1, -1)
