from pathlib import Path

from fitlink.bucket import Bucket, FileEntry


def _entry(name: str, size: int) -> FileEntry:
    return FileEntry(path=Path(name), size=size)


def test_try_admit_until_full() -> None:
    bucket = Bucket(identifier=1, capacity=12)

    assert bucket.try_admit(_entry("a", 6))
    assert bucket.try_admit(_entry("b", 6))
    assert bucket.size == 12
    assert bucket.free == 0
    assert bucket.percent == 100
    assert [e.path.name for e in bucket.members] == ["a", "b"]


def test_rejected_file_leaves_bucket_unchanged() -> None:
    bucket = Bucket(identifier=1, capacity=15)
    assert bucket.try_admit(_entry("a", 10))

    assert not bucket.try_admit(_entry("b", 10))
    assert bucket.size == 10
    assert len(bucket.members) == 1


def test_file_of_exact_capacity_fills_bucket() -> None:
    bucket = Bucket(identifier=1, capacity=100)
    assert bucket.try_admit(_entry("a", 100))
    assert bucket.size == bucket.capacity
    assert not bucket.try_admit(_entry("b", 1))
    assert bucket.try_admit(_entry("empty", 0))


def test_bucket_name_is_zero_padded() -> None:
    assert Bucket(identifier=1, capacity=1).name == "001"
    assert Bucket(identifier=42, capacity=1).name == "042"
    assert Bucket(identifier=1234, capacity=1).name == "1234"
