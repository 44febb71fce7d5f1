"""
Pseudo-Random Token Generation

This module produces printable tokens from a fast, seeded, non-cryptographic
generator. Characters are picked by rejection sampling over 6-bit groups of a
63-bit draw, so no alphabet index is favoured by a modulo reduction.

Tokens produced here are NOT suitable as credentials; use
credkit.secure_random for anything that must be unpredictable.
"""

import operator
import random
import string
import time
from typing import Optional

# Frozen table; existing stored tokens depend on this exact byte sequence.
ALPHABET = (
    string.ascii_lowercase
    + string.ascii_uppercase
    + '~!$%^&*()_+{}:"|<>?`-=[];\'\\,./'
).encode('ascii')

SOURCE_BITS = 63                              # Bits taken per draw
LETTER_IDX_BITS = 6                           # Bits per alphabet index
LETTER_IDX_MASK = (1 << LETTER_IDX_BITS) - 1  # All 1-bits, LETTER_IDX_BITS wide
LETTER_IDX_MAX = SOURCE_BITS // LETTER_IDX_BITS  # Indices fitting in one draw


def random_bytes(source: random.Random, n: int) -> bytes:
    """
    Generate n bytes drawn from ALPHABET.

    Output positions are filled from last to first. Each draw of
    SOURCE_BITS bits yields LETTER_IDX_MAX candidate indices; a candidate
    outside the alphabet is skipped, never reduced.

    Args:
        source: Generator exposing getrandbits(), e.g. random.Random
        n: Number of bytes to generate

    Returns:
        n bytes, each a member of ALPHABET
    """
    if isinstance(n, bool):
        raise TypeError("Token length must be an integer, not bool")
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"Token length must be non-negative, got {n}")

    b = bytearray(n)
    i = n - 1
    cache = source.getrandbits(SOURCE_BITS)
    remain = LETTER_IDX_MAX

    while i >= 0:
        if remain == 0:
            cache, remain = source.getrandbits(SOURCE_BITS), LETTER_IDX_MAX
        idx = cache & LETTER_IDX_MASK
        if idx < len(ALPHABET):
            b[i] = ALPHABET[idx]
            i -= 1
        cache >>= LETTER_IDX_BITS
        remain -= 1

    return bytes(b)


class TokenGenerator:
    """
    Token generator owning its own pseudo-random state.

    Instances are not safe to share between threads; give each thread or
    request its own.
    """

    def __init__(self, seed: Optional[int] = None, source: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            seed: Seed for a new random.Random (default: wall clock in ns)
            source: Pre-built generator to use instead of seeding one
        """
        if source is not None:
            self.source = source
        else:
            if seed is None:
                seed = time.time_ns()
            self.source = random.Random(seed)

    def random_bytes(self, n: int) -> bytes:
        """Generate n token bytes."""
        return random_bytes(self.source, n)

    def random_string(self, n: int) -> str:
        """Generate a token string of length n."""
        return self.random_bytes(n).decode('ascii')


def random_string(n: int) -> str:
    """
    Generate a token string of length n from a generator seeded with the
    current wall-clock time.

    Callers that need reproducible output should use TokenGenerator with an
    explicit seed.
    """
    return TokenGenerator().random_string(n)


if __name__ == "__main__":
    print(f"Alphabet ({len(ALPHABET)} chars): {ALPHABET.decode('ascii')}")
    print(f"Token: {random_string(32)}")

    first = TokenGenerator(seed=42).random_string(10)
    second = TokenGenerator(seed=42).random_string(10)
    print(f"Seeded token: {first}")
    assert first == second
    assert random_string(0) == ''

    print("Token generator checks completed successfully!")
