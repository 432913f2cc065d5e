MASK32 = 0xFFFFFFFF

# -----------------------------
# Word Arithmetic
# -----------------------------
def rotate_left(x, n: int):
    """
    Rotate a 32-bit word left by n bits.

    Accepts a Python int or a ``uint32`` array, in which case every lane is
    rotated. The complementary shift is ``32 - n``, so n must stay within
    1..31; the quarter round only ever uses 16, 12, 8 and 7.

    Args:
        x: 32-bit word(s) to rotate
        n: Rotation amount in bits

    Returns:
        Rotated word(s), same type as x
    """
    assert 1 <= n <= 31, f"rotation amount must be in 1..31, got {n}"
    return ((x << n) & MASK32) | (x >> (32 - n))

def quarter_round(a, b, c, d):
    """
    ChaCha quarter round (RFC 7539, section 2.1).

    Four add-rotate-xor steps on four state words. With ``uint32`` arrays each
    lane is an independent quarter round, which is how the round schedule
    evaluates a whole column or diagonal pass at once.

    Args:
        a, b, c, d: 32-bit words (ints or equally shaped uint32 arrays)

    Returns:
        Tuple of the updated (a, b, c, d)

    Cryptographic principles:
    - ARX design: modular addition is the only nonlinear operation
    - Diffusion: every output word depends on all four inputs
    """
    a = (a + b) & MASK32; d = rotate_left(d ^ a, 16)
    c = (c + d) & MASK32; b = rotate_left(b ^ c, 12)
    a = (a + b) & MASK32; d = rotate_left(d ^ a, 8)
    c = (c + d) & MASK32; b = rotate_left(b ^ c, 7)
    return a, b, c, d
