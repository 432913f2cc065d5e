from typing import Optional
import numpy as np

from chacha20_core.models import (bcolors)

# -----------------------------
# Word/Byte Helpers
# -----------------------------
def to_le_bytes(words) -> bytes:
    """
    Serialize 32-bit words to bytes, least significant byte first.

    Word i lands in bytes [4i, 4i+4). A 16-word block state becomes the
    64-byte keystream block of RFC 7539, section 2.3.2.

    Args:
        words: Sequence or array of 32-bit words

    Returns:
        Little-endian byte representation
    """
    return np.asarray(words, dtype=np.uint32).astype('<u4').tobytes()

def from_le_bytes(data: bytes, count: Optional[int] = None) -> np.ndarray:
    """
    Unpack little-endian bytes into 32-bit words.

    Inverse of to_le_bytes. Used at the boundary to turn a 32-byte key into
    8 words and a 12-byte nonce into 3 words before building a state.

    Args:
        data: Input bytes, length a multiple of 4
        count: Expected number of words (optional)

    Returns:
        Array of uint32 words

    Raises:
        ValueError: If the length is not a multiple of 4 or not 4 * count
    """
    if len(data) % 4:
        raise ValueError(f"{bcolors.FAIL}Byte length must be a multiple of 4, got {len(data)}{bcolors.ENDC}")
    if count is not None and len(data) != 4 * count:
        raise ValueError(f"{bcolors.FAIL}Expected {4 * count} bytes, got {len(data)}{bcolors.ENDC}")
    return np.frombuffer(bytes(data), dtype='<u4').astype(np.uint32)
