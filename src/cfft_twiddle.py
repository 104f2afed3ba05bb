"""
Twiddle Table Construction

Builds the flat trigonometric table consumed by every pass kernel.

Layout: for each stage (radix ip, sub-length l1, ido = n / (l1 * ip) complex
points) and each of its ip - 1 branches b, the table holds ido interleaved
(cos, sin) pairs

    pair m of branch b = exp(i * 2*pi * m * (b + 1) * l1 / n),  m = 0..ido-1

Pair 0 is the identity rotation (1, 0), except for radices above 5 where it
holds exp(i * 2*pi * (b + 1) / ip), the rotation used by the generic kernel.
The stage blocks are packed back to back, and one trailing pair closes the
table, so the total length is exactly 2n.

Project: Mixed-Radix FFT (FFTPACK-style complex transform)
"""

import math

import numpy as np

from cfft_factor import radices_of


def build_twiddles(n: int, ifac: np.ndarray) -> np.ndarray:
    """
    Fill the twiddle table for length n and its factor list.

    Each branch writes its identity pair, then ido further pairs. The write
    position only advances by ido pairs per branch, so the last pair of a
    branch is overwritten by the identity pair of the next one; for radices
    above 5 it is first copied into the branch's own first slot.

    Args:
        n: Transform length
        ifac: Factor list from factorize(n)

    Returns:
        float64 array of length 2n
    """
    wa = np.zeros(2 * n, dtype=np.float64)
    argh = 2.0 * math.pi / n

    i = 0
    l1 = 1
    for ip in radices_of(ifac):
        ld = 0
        l2 = l1 * ip
        ido = n // l2
        for _ in range(ip - 1):
            i1 = i
            wa[i] = 1.0
            wa[i + 1] = 0.0
            ld += l1
            fi = 0.0
            argld = ld * argh
            for _ in range(ido):
                i += 2
                fi += 1.0
                arg = fi * argld
                wa[i] = math.cos(arg)
                wa[i + 1] = math.sin(arg)
            if ip > 5:
                wa[i1] = wa[i]
                wa[i1 + 1] = wa[i + 1]
        l1 = l2

    return wa
