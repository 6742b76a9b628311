import pytest

from opscinema.hashing import blake3_digest, blake3_hex


def test_empty_input_vector():
    assert blake3_hex(b"") == "af1349b9f5f9a1a6a0404dea36dcc9499bcb25c9adc112b7cc9a93cae41f3262"


def test_abc_vector():
    assert blake3_hex(b"abc") == "6437b3ac38465133ffb63b75273a8db548c558465d79db03fd359c6cd5bd9d85"


def test_hex_matches_digest():
    data = b"opscinema"
    assert blake3_hex(data) == blake3_digest(data).hex()
    assert len(blake3_digest(data)) == 32


@pytest.mark.parametrize("size", [63, 64, 65, 1023, 1024, 1025, 2048, 3072, 5000])
def test_sizes_across_block_and_chunk_boundaries(size):
    data = bytes(i % 251 for i in range(size))
    first = blake3_hex(data)
    assert first == blake3_hex(bytes(data))
    assert len(first) == 64
    assert first != blake3_hex(data + b"\0")


def test_distinct_multi_chunk_inputs_differ():
    hashes = {blake3_hex(b"x" * n) for n in (1024, 2048, 3072, 4096)}
    assert len(hashes) == 4


def test_accepts_bytearray_and_memoryview():
    data = b"payload"
    assert blake3_hex(bytearray(data)) == blake3_hex(data)
    assert blake3_hex(memoryview(data)) == blake3_hex(data)


def test_rejects_str():
    with pytest.raises(TypeError):
        blake3_hex("text")