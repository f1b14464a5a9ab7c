"""
Entropy helpers for the quantum-seeded random source:
pack measured bits into bytes, amplify them with SHA-256 and stretch the
resulting seed into as many 32-bit words as a caller needs.
"""

from __future__ import annotations

import hashlib
from typing import List

WORD_BYTES = 4


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack a list of bits [0,1,1,0,...] into bytes (8 bits per byte).
    If bits length is not a multiple of 8, pad with zeros at the end.
    """
    if not bits:
        return b""

    # Pad to multiple of 8
    pad_len = (8 - (len(bits) % 8)) % 8
    bits_padded = bits + [0] * pad_len

    byte_values = []
    for i in range(0, len(bits_padded), 8):
        byte = 0
        for bit in bits_padded[i : i + 8]:
            byte = (byte << 1) | bit
        byte_values.append(byte)

    return bytes(byte_values)


def xor_streams(streams: List[List[int]]) -> List[int]:
    """
    XOR several equal-length bitstreams into one.
    """
    if not streams:
        return []

    combined = streams[0][:]
    for bits in streams[1:]:
        if len(bits) != len(combined):
            raise ValueError("Bitstreams must all have the same length.")
        combined = [b ^ c for b, c in zip(bits, combined)]
    return combined


def amplify_entropy(data: bytes, rounds: int = 1) -> bytes:
    """
    Apply SHA-256 `rounds` times to mix the input.
    With rounds <= 0 the input is returned unchanged.
    """
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()
    return data


def expand_words(seed: bytes, count: int) -> List[int]:
    """
    Stretch `seed` into `count` unsigned 32-bit words.

    SHA-256 in counter mode: block i is sha256(seed || i), and each 32-byte
    block yields eight big-endian words.
    """
    words: List[int] = []
    counter = 0
    while len(words) < count:
        block = hashlib.sha256(seed + counter.to_bytes(8, "big")).digest()
        for i in range(0, len(block), WORD_BYTES):
            words.append(int.from_bytes(block[i : i + WORD_BYTES], "big"))
        counter += 1
    return words[:count]
