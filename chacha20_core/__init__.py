"""
ChaCha20 Core - the RFC 7539 ChaCha20 block function

Key Cryptographic Principles Documented:
ARX Construction:

Addition modulo 2^32, rotation and XOR as the only operations
Quarter round mixing four words with fixed rotations 16, 12, 8, 7
No S-boxes or table lookups

Round Schedule:

Column rounds followed by diagonal rounds over a 4x4 word matrix
10 double rounds (20 rounds) per block
Feed-forward addition of the input state to make the permutation one-way

State Layout:

Constants "expand 32-byte k" in words 0-3
256-bit key in words 4-11
32-bit block counter in word 12
96-bit nonce in words 13-15

Word/Byte Framing:

The block function works on 32-bit words. Callers unpack key and nonce bytes
with from_le_bytes and serialize output with to_le_bytes, or use block_bytes
for the byte-oriented form of RFC 7539. Generating more than one block,
encrypting with the keystream and authentication are left to the caller.
"""
from chacha20_core.models import (
    ChaChaState, ChaChaParams, PARAMS, CONSTANTS, bcolors
)

from chacha20_core.utils.arithmetic import (
    MASK32, rotate_left, quarter_round
)

from chacha20_core.utils.serialization import (
    to_le_bytes, from_le_bytes
)

from chacha20_core.core import (
    COLUMN_ROUND, DIAGONAL_ROUND, double_round, block, block_bytes, self_test
)
