import numpy as np
import pytest

from chacha20_core import from_le_bytes, to_le_bytes

WORDS = [0xe4e7f110, 0x15593bd1, 0x1fdd0f50, 0xc47120a3,
         0xc7f4d1c7, 0x0368c033, 0x9aaa2204, 0x4e6cd4c3,
         0x466482d2, 0x09aa9f07, 0x05d7c214, 0xa2028bd9,
         0xd19c12b5, 0xb94e16de, 0xe883d0cb, 0x4e3c50a2]


def test_to_le_bytes_layout():
    raw = to_le_bytes(WORDS)
    assert len(raw) == 64
    assert raw[:4] == bytes([0x10, 0xf1, 0xe7, 0xe4])
    assert raw[-4:] == bytes([0xa2, 0x50, 0x3c, 0x4e])


def test_every_word_reassembles_from_its_bytes():
    raw = to_le_bytes(np.array(WORDS, dtype=np.uint32))
    for i, word in enumerate(WORDS):
        assert int.from_bytes(raw[4 * i:4 * i + 4], "little") == word


def test_from_le_bytes_unpacks_key_and_nonce():
    key = from_le_bytes(bytes(range(32)), 8)
    assert key.dtype == np.uint32
    assert key.tolist()[:2] == [0x03020100, 0x07060504]
    nonce = from_le_bytes(bytes.fromhex("000000090000004a00000000"), 3)
    assert nonce.tolist() == [0x09000000, 0x4a000000, 0x00000000]


def test_from_le_bytes_result_is_writeable():
    words = from_le_bytes(bytes(8))
    words[0] = 1
    assert words.tolist() == [1, 0]


def test_from_le_bytes_inverts_to_le_bytes():
    assert from_le_bytes(to_le_bytes(WORDS)).tolist() == WORDS


@pytest.mark.parametrize("data, count", [
    (bytes(3), None),
    (bytes(30), 8),
    (bytes(16), 3),
])
def test_from_le_bytes_rejects_bad_lengths(data, count):
    with pytest.raises(ValueError):
        from_le_bytes(data, count)
