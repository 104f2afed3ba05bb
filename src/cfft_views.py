"""
Strided Views over Flat Transform Buffers

Every kernel in the mixed-radix FFT reads and writes the same flat float64
buffers, but interprets them with a different logical shape per stage.
This module hands out numpy views (never copies) onto a window of such a
buffer.

Extents are given slowest-first, numpy style. The classic FFTPACK
column-major array cc(ido, ip, l1) is therefore view3d(buf, l1, ip, ido),
indexed as cc[k, j, i].

Project: Mixed-Radix FFT (FFTPACK-style complex transform)
"""

import numpy as np


def _window(buf: np.ndarray, offset: int, size: int) -> np.ndarray:
    """
    Return the flat slice buf[offset:offset + size] after checking that it
    is a view of contiguous memory that lies inside the buffer.
    """
    if buf.ndim != 1 or not buf.flags.c_contiguous:
        raise ValueError("Buffer must be a 1-D contiguous array")
    if offset < 0 or size < 0 or offset + size > buf.shape[0]:
        raise ValueError(
            f"Window [{offset}, {offset + size}) overruns buffer of length {buf.shape[0]}"
        )
    return buf[offset:offset + size]


def view1d(buf: np.ndarray, length: int, offset: int = 0) -> np.ndarray:
    """1-D view of `length` values starting at `offset`."""
    return _window(buf, offset, length)


def view2d(buf: np.ndarray, rows: int, cols: int, offset: int = 0) -> np.ndarray:
    """2-D view with shape (rows, cols); cols is the contiguous axis."""
    return _window(buf, offset, rows * cols).reshape(rows, cols)


def view3d(
    buf: np.ndarray,
    planes: int,
    rows: int,
    cols: int,
    offset: int = 0
) -> np.ndarray:
    """
    3-D view with shape (planes, rows, cols); cols is the contiguous axis.

    Args:
        buf: Flat backing buffer
        planes: Extent of the slowest axis
        rows: Extent of the middle axis
        cols: Extent of the fastest axis
        offset: Start of the window inside buf

    Returns:
        View sharing memory with buf
    """
    return _window(buf, offset, planes * rows * cols).reshape(planes, rows, cols)
