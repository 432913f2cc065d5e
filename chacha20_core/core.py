import numpy as np

from chacha20_core.models import (ChaChaState, PARAMS, bcolors)
from chacha20_core.utils.arithmetic import (quarter_round)
from chacha20_core.utils.serialization import (to_le_bytes, from_le_bytes)

# -----------------------------
# Round Schedule
# -----------------------------
# One row per quarter round, columns are the (a, b, c, d) word indices.
COLUMN_ROUND = np.array([
    [0, 4, 8, 12],
    [1, 5, 9, 13],
    [2, 6, 10, 14],
    [3, 7, 11, 15],
])
DIAGONAL_ROUND = np.array([
    [0, 5, 10, 15],
    [1, 6, 11, 12],
    [2, 7, 8, 13],
    [3, 4, 9, 14],
])
COLUMN_ROUND.flags.writeable = False
DIAGONAL_ROUND.flags.writeable = False

def apply_round(state: ChaChaState, lanes: np.ndarray):
    """
    Run the four quarter rounds of one pass over the state, in place.

    The quarter rounds in a pass touch disjoint words, so they are evaluated
    together: gathering ``lanes.T`` yields four rows holding every a, b, c
    and d word of the pass.
    """
    a, b, c, d = quarter_round(*state.words[lanes.T])
    state.words[lanes.T] = np.stack((a, b, c, d))

def double_round(state: ChaChaState):
    """
    One column round followed by one diagonal round (RFC 7539, section 2.3).

    Columns must run before diagonals; swapping the passes gives a different
    permutation and breaks the test vectors.

    Args:
        state: Working state, permuted in place
    """
    apply_round(state, COLUMN_ROUND)
    apply_round(state, DIAGONAL_ROUND)

# -----------------------------
# Block Function
# -----------------------------
def block(key, nonce, counter: int) -> np.ndarray:
    """
    ChaCha20 block function on 32-bit words.

    Steps:
    1. Build the original state from constants, key, counter and nonce
    2. Build an identical working state
    3. Apply 10 double rounds (20 rounds) to the working state
    4. Feed-forward: add the working state onto the original

    Args:
        key: 8 key words
        nonce: 3 nonce words
        counter: 32-bit block counter

    Returns:
        16 uint32 output words; serialize with to_le_bytes for the byte form

    Raises:
        ValueError: If key, nonce or counter are malformed

    Cryptographic principles:
    - Counter mode keystream: each counter value selects an independent block
    - Feed-forward addition makes the keyed permutation non-invertible
    """
    original = ChaChaState.new(key, nonce, counter)
    working = ChaChaState.new(key, nonce, counter)
    for _ in range(PARAMS.double_rounds):
        double_round(working)
    original.add(working)
    return original.words

def block_bytes(key: bytes, nonce: bytes, counter: int) -> bytes:
    """
    Byte-framed block function: 32-byte key, 12-byte nonce, 64-byte output.

    Packs key and nonce into little-endian words, runs block() and serializes
    the result, matching the byte layout of RFC 7539, section 2.3.2.
    """
    key_words = from_le_bytes(key, PARAMS.key_words)
    nonce_words = from_le_bytes(nonce, PARAMS.nonce_words)
    return to_le_bytes(block(key_words, nonce_words, counter))

# -----------------------------
# Known-Answer Tests
# -----------------------------
RFC7539_KEY = bytes(range(32))
RFC7539_NONCE = bytes.fromhex("000000090000004a00000000")

# RFC 7539, section 2.3.2: serialized block for the key/nonce above, counter 1
RFC7539_BLOCK = bytes.fromhex(
    "10f1e7e4d13b5915500fdd1fa32071c4"
    "c7d1f4c733c068030422aa9ac3d46c4e"
    "d2826446079faa0914c2d705d98b02a2"
    "b5129cd1de164eb9cbd083e8a2503c4e"
)

def _quarter_round_vector() -> bool:
    # RFC 7539, section 2.1.1
    out = quarter_round(0x11111111, 0x01020304, 0x9b8d6f43, 0x01234567)
    return out == (0xea2a92f4, 0xcb1cf8ce, 0x4581472e, 0x5881c4bb)

def _state_quarter_round_vector() -> bool:
    # RFC 7539, section 2.2.1: quarter round on indices 2, 7, 8, 13
    state = ChaChaState([
        0x879531e0, 0xc5ecf37d, 0x516461b1, 0xc9a62f8a,
        0x44c20ef3, 0x3390af7f, 0xd9fc690b, 0x2a5f714c,
        0x53372767, 0xb00a5631, 0x974c541a, 0x359e9963,
        0x5c971061, 0x3d631689, 0x2098d9d6, 0x91dbd320,
    ])
    state.quarter_round(2, 7, 8, 13)
    return state == ChaChaState([
        0x879531e0, 0xc5ecf37d, 0xbdb886dc, 0xc9a62f8a,
        0x44c20ef3, 0x3390af7f, 0xd9fc690b, 0xcfacafd2,
        0xe46bea80, 0xb00a5631, 0x974c541a, 0x359e9963,
        0x5c971061, 0xccc07c79, 0x2098d9d6, 0x91dbd320,
    ])

def _block_word_vector() -> bool:
    out = block(from_le_bytes(RFC7539_KEY), from_le_bytes(RFC7539_NONCE), 1)
    return to_le_bytes(out) == RFC7539_BLOCK

def _block_byte_vector() -> bool:
    return block_bytes(RFC7539_KEY, RFC7539_NONCE, 1) == RFC7539_BLOCK

KNOWN_ANSWER_TESTS = (
    ("quarter round (RFC 7539 2.1.1)", _quarter_round_vector),
    ("state quarter round (RFC 7539 2.2.1)", _state_quarter_round_vector),
    ("block words (RFC 7539 2.3.2)", _block_word_vector),
    ("block bytes (RFC 7539 2.3.2)", _block_byte_vector),
)

def self_test(verbose: bool = False) -> bool:
    """
    Check the implementation against the RFC 7539 test vectors.

    Args:
        verbose: Print one colored PASS/FAIL line per vector

    Returns:
        bool: True if every vector matched
    """
    results = []
    for name, check in KNOWN_ANSWER_TESTS:
        ok = check()
        results.append(ok)
        if verbose:
            status = f"{bcolors.OKGREEN}PASS{bcolors.ENDC}" if ok else f"{bcolors.FAIL}FAIL{bcolors.ENDC}"
            print(f"{bcolors.BOLD}{name:<40}{bcolors.ENDC} {status}")
    if verbose:
        color = bcolors.OKGREEN if all(results) else bcolors.FAIL
        print(f"{color}{sum(results)}/{len(results)} known-answer tests passed{bcolors.ENDC}")
    return all(results)
