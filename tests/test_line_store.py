"""Test the line store: loading, length accounting, resolving, deleting."""

import pytest
from lineview.text import LineStore, ProgrammingFault, split_lines


def test_split_lines_basic():
    assert split_lines("abc\nde\nf") == ["abc", "de", "f"]


def test_split_lines_trailing_newline_adds_no_line():
    assert split_lines("abc\nde\n") == ["abc", "de"]


def test_split_lines_keeps_blank_lines():
    assert split_lines("a\n\nb\n\n") == ["a", "", "b", ""]


def test_split_lines_normalizes_crlf():
    assert split_lines("one\r\ntwo\r\n") == ["one", "two"]


def test_split_lines_lone_carriage_return_is_text():
    assert split_lines("a\rb") == ["a\rb"]


def test_split_lines_keeps_carriage_return_without_line_feed():
    assert split_lines("a\r") == ["a\r"]
    assert split_lines("a\r\nb\r") == ["a", "b\r"]
    assert LineStore.from_text("a\r").length == 2


def test_split_lines_empty():
    assert split_lines("") == []


def test_length_counts_separators_between_lines():
    store = LineStore(["abc", "de", "f"])
    assert store.length == 8
    assert store.newlines == 3
    assert store.line_count == 3
    assert len(store) == 3


def test_empty_store():
    store = LineStore()
    assert store.length == 0
    assert store.newlines == 0
    assert store.resolve(0) == (0, 0, 0)


def test_single_empty_line():
    store = LineStore([""])
    assert store.length == 0
    assert store.newlines == 1


def test_from_file(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes("héllo\r\nworld\n".encode("utf-8"))

    store = LineStore.from_file(path)
    assert store.lines == ["héllo", "world"]
    assert store.length == 11


def test_from_file_missing(tmp_path):
    with pytest.raises(OSError):
        LineStore.from_file(tmp_path / "missing.txt")


def test_from_file_not_utf8(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9\n")
    with pytest.raises(UnicodeDecodeError):
        LineStore.from_file(path)


def test_resolve_scans_to_owning_line():
    store = LineStore(["abc", "de", "f"])
    assert store.resolve(0) == (0, 0, 3)
    assert store.resolve(2) == (0, 0, 3)
    assert store.resolve(4) == (1, 4, 2)
    assert store.resolve(7) == (2, 7, 1)
    assert store.resolve(8) == (2, 7, 1)


def test_resolve_newline_position_belongs_to_current_line():
    store = LineStore(["abc", "de", "f"])
    # Offset 3 is the newline after "abc"
    assert store.resolve(3) == (0, 0, 3)
    assert store.resolve(6) == (1, 4, 2)


def test_resolve_empty_lines():
    store = LineStore(["", "", "x"])
    assert store.resolve(0) == (0, 0, 0)
    assert store.resolve(1) == (1, 1, 0)
    assert store.resolve(2) == (2, 2, 1)


def test_line_start():
    store = LineStore(["abc", "de", "f"])
    assert [store.line_start(i) for i in range(3)] == [0, 4, 7]


def test_delete_first_line():
    store = LineStore(["abc", "de", "f"])
    store.delete_line(0)
    assert store.lines == ["de", "f"]
    assert store.length == 4
    assert store.newlines == 2


def test_delete_last_line():
    store = LineStore(["de", "f"])
    store.delete_line(1)
    assert store.lines == ["de"]
    assert store.length == 2


def test_delete_only_line():
    store = LineStore(["hello"])
    store.delete_line(0)
    assert store.lines == []
    assert store.length == 0
    assert store.newlines == 0


def test_delete_keeps_length_invariant():
    store = LineStore(["one", "", "three", "four"])
    while store.newlines:
        store.delete_line(store.newlines // 2)
        expected = sum(len(line) + 1 for line in store.lines)
        assert store.length == max(0, expected - 1)


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_delete_invalid_index_faults(index):
    store = LineStore(["abc", "de", "f"])
    with pytest.raises(ProgrammingFault):
        store.delete_line(index)
    # Nothing was removed
    assert store.lines == ["abc", "de", "f"]
    assert store.length == 8


def test_delete_from_empty_store_faults():
    with pytest.raises(ProgrammingFault):
        LineStore().delete_line(0)


def test_character_editing_is_unsupported():
    store = LineStore(["abc"])
    with pytest.raises(ProgrammingFault):
        store.insert(0, "x")
    with pytest.raises(ProgrammingFault):
        store.delete(0, 1)
