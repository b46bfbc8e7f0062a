import pytest

from aocsolver import y2022_day06 as day

SIGNAL = "mjqjpqmgbljsphdztnvjfqwrcgsmlb"


def test_all_unique():
    assert day.all_unique("abcd")
    assert not day.all_unique("abca")


def test_marker_at_start():
    assert day.find_marker("abcd", 4) == len("abcd")


@pytest.mark.parametrize("size", [4, 14])
def test_marker_window_is_first_unique(size):
    end = day.find_marker(SIGNAL, size)
    assert day.all_unique(SIGNAL[end - size : end])
    for earlier in range(size, end):
        assert not day.all_unique(SIGNAL[earlier - size : earlier])


def test_marker_after_repeat():
    assert day.find_marker("aabcd", 4) == len("aabcd")


def test_no_marker_raises():
    with pytest.raises(ValueError):
        day.find_marker("aaaaaa", 4)


def test_empty_data_raises():
    with pytest.raises(ValueError):
        day.find_marker("", 4)


def test_main_prints_zero_on_missing(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("abcd", encoding="utf-8")
    day.main([str(path)])
    assert capsys.readouterr().out == "Answer 1: 4\nAnswer 2: 0\n"