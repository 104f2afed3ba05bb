"""
Length Factorization for the Mixed-Radix FFT

Decomposes a transform length n into the ordered list of radices that the
stage driver applies one after another.

Factor list layout (15 slots, int64):

    [n, nf, r1, r2, ..., r_nf, 0, ..., 0]

with r1 * r2 * ... * r_nf == n and nf <= 13.

Project: Mixed-Radix FFT (FFTPACK-style complex transform)
"""

import itertools
import logging
from typing import Iterator, List

import numpy as np

logger = logging.getLogger(__name__)

MAX_RADICES = 13
FACTOR_SLOTS = MAX_RADICES + 2

# Small radices have closed-form kernels; 4 first keeps most stages radix-4.
PREFERRED_RADICES = (4, 2, 3, 5)


def candidate_radices() -> Iterator[int]:
    """
    Yield trial divisors: 4, 2, 3, 5, then every odd number from 7 upwards.

    The odd tail is unbounded, so any remainder > 1 is eventually divided
    by itself when it is prime.
    """
    return itertools.chain(PREFERRED_RADICES, itertools.count(7, 2))


def factorize(n: int) -> np.ndarray:
    """
    Compute the factor list of n.

    Candidates are divided out greedily in the order of candidate_radices().
    A radix 2 found after other radices is moved to the front of the
    radices found so far, so that the radix-2 stage runs first.

    Args:
        n: Transform length, n >= 1

    Returns:
        Factor list array of FACTOR_SLOTS int64 values

    Example:
        factorize(24) -> [24, 3, 2, 4, 3, 0, ...]
        factorize(7)  -> [7, 1, 7, 0, ...]
    """
    n = int(n)
    if n < 1:
        raise ValueError(f"Transform length must be positive, got {n}")

    radices: List[int] = []
    remaining = n

    if remaining > 1:
        for ntry in candidate_radices():
            while remaining % ntry == 0:
                if len(radices) == MAX_RADICES:
                    raise ValueError(
                        f"Length {n} needs more than {MAX_RADICES} radices"
                    )
                if ntry == 2 and radices:
                    radices.insert(0, 2)
                else:
                    radices.append(ntry)
                remaining //= ntry
            if remaining == 1:
                break

    ifac = np.zeros(FACTOR_SLOTS, dtype=np.int64)
    ifac[0] = n
    ifac[1] = len(radices)
    ifac[2:2 + len(radices)] = radices

    logger.debug(f"Factorized n={n} into radices {radices}")
    return ifac


def radices_of(ifac: np.ndarray) -> List[int]:
    """Return the radices r1..r_nf of a factor list as Python ints."""
    nf = int(ifac[1])
    return [int(r) for r in ifac[2:2 + nf]]
