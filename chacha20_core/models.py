import operator
from dataclasses import dataclass
import numpy as np

from chacha20_core.utils.arithmetic import (MASK32, quarter_round)

# -----------------------------
# CLI Colors
# -----------------------------
class bcolors:
    OKGREEN = '\033[92m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'

# "expand 32-byte k" read as four little-endian words
CONSTANTS = (0x61707865, 0x3320646e, 0x79622d32, 0x6b206574)

# -----------------------------
# Core Parameters
# -----------------------------
@dataclass(frozen=True)
class ChaChaParams:
    """
    Fixed sizes of the ChaCha20 block function (RFC 7539, section 2.3).

    The 4x4 state matrix is laid out as:

        cccccccc  cccccccc  cccccccc  cccccccc
        kkkkkkkk  kkkkkkkk  kkkkkkkk  kkkkkkkk
        kkkkkkkk  kkkkkkkk  kkkkkkkk  kkkkkkkk
        bbbbbbbb  nnnnnnnn  nnnnnnnn  nnnnnnnn

    c=constant, k=key, b=block counter, n=nonce. None of these values are
    tunable; 20 rounds is what the published test vectors are computed with.
    """
    state_words: int = 16       # 512-bit state
    key_words: int = 8          # 256-bit key
    nonce_words: int = 3        # 96-bit nonce
    counter_index: int = 12     # position of the block counter
    double_rounds: int = 10     # column + diagonal round each, 20 rounds total
    block_bytes: int = 64       # serialized keystream block
    constants: tuple = CONSTANTS

PARAMS = ChaChaParams()

# -----------------------------
# Validation
# -----------------------------
def check_word(value, name: str) -> int:
    """Return ``value`` as an int, rejecting non-integers and anything outside [0, 2^32)."""
    try:
        word = operator.index(value)
    except TypeError:
        raise ValueError(f"{bcolors.FAIL}{name} must be an integer, got {value!r}{bcolors.ENDC}") from None
    if not 0 <= word <= MASK32:
        raise ValueError(f"{bcolors.FAIL}{name} must be a 32-bit unsigned word, got {value!r}{bcolors.ENDC}")
    return word

def check_words(values, count: int, name: str) -> list[int]:
    words = [check_word(v, f"{name} word") for v in values]
    if len(words) != count:
        raise ValueError(f"{bcolors.FAIL}{name} must be {count} words, got {len(words)}{bcolors.ENDC}")
    return words

# -----------------------------
# ChaCha State
# -----------------------------
@dataclass(eq=False)
class ChaChaState:
    """
    The 16-word ChaCha20 state.

    A block computation owns two of these: the original, kept untouched until
    the feed-forward, and the working copy that the round schedule permutes.
    Words are held in a ``uint32`` array so every addition wraps modulo 2^32.

    Cryptographic principles:
    - Nothing-up-my-sleeve constants fill the first row
    - Key, counter and nonce fill the rest; the counter selects the block
    """
    words: np.ndarray

    def __post_init__(self):
        self.words = np.array(check_words(self.words, PARAMS.state_words, "State"), dtype=np.uint32)

    @classmethod
    def new(cls, key, nonce, counter: int) -> "ChaChaState":
        """
        Build a fully initialized state from key, nonce and block counter.

        Args:
            key: 8 key words (little-endian packing of the 32-byte key)
            nonce: 3 nonce words (little-endian packing of the 12-byte nonce)
            counter: 32-bit block counter

        Returns:
            ChaChaState: constants || key || counter || nonce

        Raises:
            ValueError: If a word count or word value is out of range
        """
        key_words = check_words(key, PARAMS.key_words, "Key")
        nonce_words = check_words(nonce, PARAMS.nonce_words, "Nonce")
        counter_word = check_word(counter, "Counter")
        return cls(list(PARAMS.constants) + key_words + [counter_word] + nonce_words)

    def copy(self) -> "ChaChaState":
        """Return an independent state with the same words."""
        return type(self)(self.words.copy())

    def add(self, other: "ChaChaState"):
        """
        Feed-forward: add ``other`` onto this state word by word, in place.

        Without this step the 20 rounds are a public permutation and the key
        could be read back by running them in reverse.
        """
        if not isinstance(other, ChaChaState):
            raise TypeError(f"{bcolors.FAIL}Can only add a ChaChaState, got {type(other).__name__}{bcolors.ENDC}")
        self.words += other.words

    def quarter_round(self, a: int, b: int, c: int, d: int):
        """Apply the quarter round to the words at indices a, b, c, d."""
        idx = [a, b, c, d]
        self.words[idx] = np.array(quarter_round(*(int(w) for w in self.words[idx])), dtype=np.uint32)

    def __eq__(self, other):
        if not isinstance(other, ChaChaState):
            return NotImplemented
        return bool(np.array_equal(self.words, other.words))

    def __repr__(self):
        rows = [" ".join(f"{int(w):08x}" for w in self.words[i:i + 4]) for i in range(0, PARAMS.state_words, 4)]
        return "ChaChaState(\n  " + "\n  ".join(rows) + "\n)"
