from unittest import mock

from tcplane.utils import get_thread_count, remove_trailing_zeros


def test_remove_trailing_zeros_strips_end():
    assert remove_trailing_zeros(b"abc\x00\x00") == b"abc"


def test_remove_trailing_zeros_all_zero_gives_empty():
    assert remove_trailing_zeros(bytearray(8)) == b""


def test_remove_trailing_zeros_keeps_inner_zeros():
    assert remove_trailing_zeros(b"a\x00b\x00") == b"a\x00b"


def test_remove_trailing_zeros_without_zeros_is_unchanged():
    assert remove_trailing_zeros(b"hello") == b"hello"


def test_remove_trailing_zeros_empty():
    assert remove_trailing_zeros(b"") == b""


def test_get_thread_count_is_positive():
    assert get_thread_count() >= 1


def test_get_thread_count_falls_back_to_one():
    with mock.patch("os.sched_getaffinity", side_effect=OSError, create=True), mock.patch(
        "os.cpu_count", return_value=None
    ):
        assert get_thread_count() == 1


def test_get_thread_count_uses_cpu_count_when_affinity_missing():
    with mock.patch("os.sched_getaffinity", side_effect=OSError, create=True), mock.patch(
        "os.cpu_count", return_value=6
    ):
        assert get_thread_count() == 6