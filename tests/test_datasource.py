import pytest

from transitkit.datasource import DataSource, StringDataSource


def test_end():
    assert StringDataSource("").end() is True
    assert StringDataSource("Hello").end() is False


def test_peek_does_not_consume():
    empty = StringDataSource("")
    first = StringDataSource("Hello")
    second = StringDataSource("Bye")

    assert empty.peek() is None
    assert first.peek() == "H"
    assert first.peek() == "H"
    assert second.peek() == "B"
    assert second.peek() == "B"


def test_get_consumes():
    empty = StringDataSource("")
    first = StringDataSource("Hello")
    second = StringDataSource("Bye")

    assert empty.get() is None
    assert first.get() == "H"
    assert first.peek() == "e"
    assert first.peek() == "e"
    assert second.get() == "B"
    assert second.peek() == "y"
    assert second.peek() == "y"


def test_read():
    empty = StringDataSource("")
    first = StringDataSource("Hello")
    second = StringDataSource("Bye")

    assert empty.read(3) == ""
    assert first.read(4) == "Hell"
    assert first.peek() == "o"
    assert second.read(4) == "Bye"
    assert second.peek() is None
    assert second.end() is True


def test_read_nonpositive_count_reads_nothing():
    source = StringDataSource("Hello")
    assert source.read(0) == ""
    assert source.peek() == "H"


def test_get_until_exhausted_rebuilds_text():
    text = "Hello World"
    source = StringDataSource(text)
    collected = []
    while not source.end():
        collected.append(source.get())
    assert "".join(collected) == text
    assert source.get() is None


def test_chunked_reads_rebuild_text():
    text = "Hello World"
    source = StringDataSource(text)
    chunks = []
    while chunk := source.read(3):
        chunks.append(chunk)
    assert "".join(chunks) == text
    assert all(len(chunk) <= 3 for chunk in chunks)


def test_abstract_source_cannot_be_instantiated():
    with pytest.raises(TypeError):
        DataSource()