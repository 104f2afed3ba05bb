"""
Mixed-Radix Complex FFT: Stage Driver

External interface of the transform core:

    factors, twiddles = initialize(n)
    transform(FORWARD, n, sequence, scratch, factors, twiddles)

`sequence` and `scratch` are flat float64 arrays holding at least 2n
values; complex element m occupies (sequence[2m], sequence[2m + 1]).
The transform runs in place from the caller's point of view and is
unnormalized: a forward transform followed by a backward one multiplies
the input by n.

Algorithm:
    For each radix ip of the factor list, in order:
        ido = 2 * n / (l1 * ip)                (reals per sub-transform)
        read the current buffer as (l1, ip, ido)
        write the other buffer as (ip, l1, ido)
        swap buffers, advance the twiddle offset by (ip - 1) * ido
        l1 = l1 * ip
    If the result ended in the scratch buffer, copy it back.

Project: Mixed-Radix FFT (FFTPACK-style complex transform)
"""

import logging
import math
from typing import Tuple

import numpy as np

from cfft_factor import factorize, radices_of
from cfft_generic import pass_generic
from cfft_radix import RADIX_KERNELS
from cfft_twiddle import build_twiddles
from cfft_views import view1d, view2d, view3d

logger = logging.getLogger(__name__)

FORWARD = -1
BACKWARD = 1


class PingPong:
    """
    Two equally sized buffers and a selector naming the one holding the
    live data. Every stage reads `source` and writes `target`.
    """

    def __init__(self, primary: np.ndarray, scratch: np.ndarray):
        self.buffers = (primary, scratch)
        self.current = 0

    @property
    def source(self) -> np.ndarray:
        return self.buffers[self.current]

    @property
    def target(self) -> np.ndarray:
        return self.buffers[1 - self.current]

    def swap(self):
        self.current = 1 - self.current

    @property
    def in_scratch(self) -> bool:
        return self.current == 1


def initialize(n: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Precompute the factor list and twiddle table for length n.

    The returned tables are read-only and may be shared by any number of
    transforms of length n, including concurrent ones.

    Args:
        n: Transform length, n >= 1

    Returns:
        (factors, twiddles) tuple
    """
    factors = factorize(n)
    twiddles = build_twiddles(n, factors)
    factors.flags.writeable = False
    twiddles.flags.writeable = False

    logger.debug(f"Initialized n={n}: radices {radices_of(factors)}")
    return factors, twiddles


def check_generic_radix(ip: int):
    """
    Reject a radix the generic kernel cannot take.

    The generic kernel walks its twiddles at offsets (l * j) mod ip, which
    must never reach 0; that holds only when ip is prime.
    """
    if ip < 2 or any(ip % d == 0 for d in range(2, math.isqrt(ip) + 1)):
        raise ValueError(f"Generic stage radix must be prime, got {ip}")


def run_stage(
    ip: int,
    l1: int,
    ido: int,
    buffers: PingPong,
    stage_twiddles: np.ndarray,
    sign: float
):
    """
    Apply one radix-ip stage from buffers.source into buffers.target and
    update the selector so that buffers.source holds the result.

    Args:
        ip: Radix of this stage
        l1: Product of the radices of earlier stages
        ido: Reals per sub-transform
        buffers: Ping-pong pair, trimmed to 2n values
        stage_twiddles: This stage's (ip - 1) * ido twiddle values
        sign: -1.0 forward, +1.0 backward
    """
    src = buffers.source
    dst = buffers.target
    cc = view3d(src, l1, ip, ido)
    ch = view3d(dst, ip, l1, ido)

    kernel = RADIX_KERNELS.get(ip)
    if kernel is not None:
        kernel(cc, ch, view2d(stage_twiddles, ip - 1, ido), sign)
        buffers.swap()
        return

    check_generic_radix(ip)
    idl1 = ido * l1
    written_back = pass_generic(
        cc,
        view3d(src, ip, l1, ido),
        view2d(src, ip, idl1),
        ch,
        view2d(dst, ip, idl1),
        stage_twiddles,
        sign
    )
    buffers.swap()
    if written_back:
        buffers.swap()


def transform(
    direction: int,
    n: int,
    sequence: np.ndarray,
    scratch: np.ndarray,
    factors: np.ndarray,
    twiddles: np.ndarray
):
    """
    Forward or backward complex DFT of length n, in place.

    Args:
        direction: FORWARD (-1) or BACKWARD (+1)
        n: Transform length the tables were built for
        sequence: Interleaved input, overwritten with the result
        scratch: Work buffer with at least 2n values
        factors: Factor list from initialize(n)
        twiddles: Twiddle table from initialize(n)
    """
    if direction == FORWARD:
        sign = -1.0
    elif direction == BACKWARD:
        sign = 1.0
    else:
        raise ValueError(f"Unknown transform direction: {direction}")

    radices = radices_of(factors)
    if not radices:
        return

    # Validate every stage before the first one touches the buffers
    for ip in radices:
        if ip not in RADIX_KERNELS:
            check_generic_radix(ip)

    c = view1d(sequence, 2 * n)
    buffers = PingPong(c, view1d(scratch, 2 * n))

    l1 = 1
    iw = 0
    for ip in radices:
        l2 = ip * l1
        ido = 2 * (n // l2)
        stage_twiddles = view1d(twiddles, (ip - 1) * ido, offset=iw)
        run_stage(ip, l1, ido, buffers, stage_twiddles, sign)
        l1 = l2
        iw += (ip - 1) * ido

    if buffers.in_scratch:
        c[:] = buffers.source
