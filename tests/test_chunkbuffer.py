from zinnia.chunkbuffer import ChunkBuffer


def test_new_buffer_is_empty():
    buf = ChunkBuffer(4)
    assert buf.full() is False
    assert buf.pop() is None


def test_partial_fill_is_not_full():
    buf = ChunkBuffer(4)
    buf.extend([1, 2, 3])
    assert not buf.full()
    assert buf.pop() is None


def test_exact_fill_returns_chunk():
    buf = ChunkBuffer(3)
    buf.extend([1, 2])
    buf.extend([3])
    assert buf.full()
    assert buf.pop() == [1, 2, 3]


def test_overflow_goes_into_next_chunk():
    buf = ChunkBuffer(4)
    buf.extend([1, 2, 3])
    buf.extend([4, 5])
    assert buf.pop() == [1, 2, 3, 4]
    buf.extend([6, 7, 8])
    assert buf.pop() == [5, 6, 7, 8]


def test_pop_leaves_empty_chunk_behind():
    buf = ChunkBuffer(2)
    buf.extend([1, 2])
    assert buf.pop() == [1, 2]
    assert buf.full()
    assert buf.pop() == []


def test_large_extend_keeps_tail():
    buf = ChunkBuffer(4)
    values = list(range(10))
    buf.extend(values)
    assert buf.full()
    assert buf.pop() == values[-4:]


def test_chunks_alternate_with_many_pushes():
    buf = ChunkBuffer(5)
    produced = []
    for start in range(0, 50, 2):
        buf.extend([start, start + 1])
        if buf.full():
            chunk = buf.pop()
            if chunk:
                produced.append(chunk)
    assert all(len(chunk) == 5 for chunk in produced)
    flat = [v for chunk in produced for v in chunk]
    assert flat == list(range(len(flat)))


def test_accepts_any_iterable():
    buf = ChunkBuffer(3)
    buf.extend(iter("abc"))
    assert buf.pop() == ["a", "b", "c"]