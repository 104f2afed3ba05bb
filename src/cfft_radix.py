"""
Radix-2/3/4/5 Pass Kernels

Closed-form butterflies for the small radices of the mixed-radix FFT,
compiled with numba.

Every kernel has the same calling convention:

    passN(cc, ch, tw, sign)

    cc:   source view, shape (l1, N, ido)   -- cc[k, j, i]
    ch:   target view, shape (N, l1, ido)   -- ch[j, k, i]
    tw:   stage twiddles, shape (N - 1, ido)
    sign: -1.0 for the forward transform, +1.0 for the backward one

ido counts reals: index i is the real part and i + 1 the imaginary part
of one complex point. When ido == 2 there is a single complex point per
sub-transform and no rotation is applied.

Rotation of branch b by its twiddle (wr, wi) is

    re' = wr * re - (sign * wi) * im
    im' = wr * im + (sign * wi) * re

i.e. multiplication by exp(sign * i * theta). Multiplying by sign is exact,
so each direction keeps the exact operation order of its dedicated routine.

Project: Mixed-Radix FFT (FFTPACK-style complex transform)
"""

from numba import njit


# Radix-3 constants: cos(2*pi/3), sin(2*pi/3)
TAUR = -0.5
TAUI = 0.866025403784439

# Radix-5 constants: cos(2*pi/5), sin(2*pi/5), cos(4*pi/5), sin(4*pi/5)
TR11 = 0.309016994374947
TI11 = 0.951056516295154
TR12 = -0.809016994374947
TI12 = 0.587785252292473


@njit(cache=True)
def pass2(cc, ch, tw, sign):
    """Radix-2 butterfly: out0 = in0 + in1, out1 = in0 - in1."""
    l1 = cc.shape[0]
    ido = cc.shape[2]

    if ido <= 2:
        for k in range(l1):
            ch[0, k, 0] = cc[k, 0, 0] + cc[k, 1, 0]
            ch[1, k, 0] = cc[k, 0, 0] - cc[k, 1, 0]
            ch[0, k, 1] = cc[k, 0, 1] + cc[k, 1, 1]
            ch[1, k, 1] = cc[k, 0, 1] - cc[k, 1, 1]
        return

    for k in range(l1):
        for i in range(0, ido, 2):
            ch[0, k, i] = cc[k, 0, i] + cc[k, 1, i]
            tr2 = cc[k, 0, i] - cc[k, 1, i]
            ch[0, k, i + 1] = cc[k, 0, i + 1] + cc[k, 1, i + 1]
            ti2 = cc[k, 0, i + 1] - cc[k, 1, i + 1]

            wr = tw[0, i]
            wi = sign * tw[0, i + 1]
            ch[1, k, i + 1] = wr * ti2 + wi * tr2
            ch[1, k, i] = wr * tr2 - wi * ti2


@njit(cache=True)
def pass3(cc, ch, tw, sign):
    """Radix-3 butterfly built on TAUR and sign * TAUI."""
    l1 = cc.shape[0]
    ido = cc.shape[2]
    taui = sign * TAUI

    if ido == 2:
        for k in range(l1):
            tr2 = cc[k, 1, 0] + cc[k, 2, 0]
            cr2 = cc[k, 0, 0] + TAUR * tr2
            ch[0, k, 0] = cc[k, 0, 0] + tr2
            ti2 = cc[k, 1, 1] + cc[k, 2, 1]
            ci2 = cc[k, 0, 1] + TAUR * ti2
            ch[0, k, 1] = cc[k, 0, 1] + ti2
            cr3 = taui * (cc[k, 1, 0] - cc[k, 2, 0])
            ci3 = taui * (cc[k, 1, 1] - cc[k, 2, 1])
            ch[1, k, 0] = cr2 - ci3
            ch[2, k, 0] = cr2 + ci3
            ch[1, k, 1] = ci2 + cr3
            ch[2, k, 1] = ci2 - cr3
        return

    for k in range(l1):
        for i in range(0, ido, 2):
            tr2 = cc[k, 1, i] + cc[k, 2, i]
            cr2 = cc[k, 0, i] + TAUR * tr2
            ch[0, k, i] = cc[k, 0, i] + tr2
            ti2 = cc[k, 1, i + 1] + cc[k, 2, i + 1]
            ci2 = cc[k, 0, i + 1] + TAUR * ti2
            ch[0, k, i + 1] = cc[k, 0, i + 1] + ti2
            cr3 = taui * (cc[k, 1, i] - cc[k, 2, i])
            ci3 = taui * (cc[k, 1, i + 1] - cc[k, 2, i + 1])
            dr2 = cr2 - ci3
            dr3 = cr2 + ci3
            di2 = ci2 + cr3
            di3 = ci2 - cr3

            wr1 = tw[0, i]
            wi1 = sign * tw[0, i + 1]
            wr2 = tw[1, i]
            wi2 = sign * tw[1, i + 1]
            ch[1, k, i + 1] = wr1 * di2 + wi1 * dr2
            ch[1, k, i] = wr1 * dr2 - wi1 * di2
            ch[2, k, i + 1] = wr2 * di3 + wi2 * dr3
            ch[2, k, i] = wr2 * dr3 - wi2 * di3


@njit(cache=True)
def pass4(cc, ch, tw, sign):
    """Radix-4 butterfly: two merged radix-2 stages."""
    l1 = cc.shape[0]
    ido = cc.shape[2]

    if ido == 2:
        for k in range(l1):
            ti1 = cc[k, 0, 1] - cc[k, 2, 1]
            ti2 = cc[k, 0, 1] + cc[k, 2, 1]
            tr4 = sign * (cc[k, 3, 1] - cc[k, 1, 1])
            ti3 = cc[k, 1, 1] + cc[k, 3, 1]
            tr1 = cc[k, 0, 0] - cc[k, 2, 0]
            tr2 = cc[k, 0, 0] + cc[k, 2, 0]
            ti4 = sign * (cc[k, 1, 0] - cc[k, 3, 0])
            tr3 = cc[k, 1, 0] + cc[k, 3, 0]
            ch[0, k, 0] = tr2 + tr3
            ch[2, k, 0] = tr2 - tr3
            ch[0, k, 1] = ti2 + ti3
            ch[2, k, 1] = ti2 - ti3
            ch[1, k, 0] = tr1 + tr4
            ch[3, k, 0] = tr1 - tr4
            ch[1, k, 1] = ti1 + ti4
            ch[3, k, 1] = ti1 - ti4
        return

    for k in range(l1):
        for i in range(0, ido, 2):
            ti1 = cc[k, 0, i + 1] - cc[k, 2, i + 1]
            ti2 = cc[k, 0, i + 1] + cc[k, 2, i + 1]
            ti3 = cc[k, 1, i + 1] + cc[k, 3, i + 1]
            tr4 = sign * (cc[k, 3, i + 1] - cc[k, 1, i + 1])
            tr1 = cc[k, 0, i] - cc[k, 2, i]
            tr2 = cc[k, 0, i] + cc[k, 2, i]
            ti4 = sign * (cc[k, 1, i] - cc[k, 3, i])
            tr3 = cc[k, 1, i] + cc[k, 3, i]
            ch[0, k, i] = tr2 + tr3
            cr3 = tr2 - tr3
            ch[0, k, i + 1] = ti2 + ti3
            ci3 = ti2 - ti3
            cr2 = tr1 + tr4
            cr4 = tr1 - tr4
            ci2 = ti1 + ti4
            ci4 = ti1 - ti4

            wr1 = tw[0, i]
            wi1 = sign * tw[0, i + 1]
            wr2 = tw[1, i]
            wi2 = sign * tw[1, i + 1]
            wr3 = tw[2, i]
            wi3 = sign * tw[2, i + 1]
            ch[1, k, i] = wr1 * cr2 - wi1 * ci2
            ch[1, k, i + 1] = wr1 * ci2 + wi1 * cr2
            ch[2, k, i] = wr2 * cr3 - wi2 * ci3
            ch[2, k, i + 1] = wr2 * ci3 + wi2 * cr3
            ch[3, k, i] = wr3 * cr4 - wi3 * ci4
            ch[3, k, i + 1] = wr3 * ci4 + wi3 * cr4


@njit(cache=True)
def pass5(cc, ch, tw, sign):
    """Radix-5 butterfly built on TR11, TR12 and sign * (TI11, TI12)."""
    l1 = cc.shape[0]
    ido = cc.shape[2]
    ti11 = sign * TI11
    ti12 = sign * TI12

    if ido == 2:
        for k in range(l1):
            ti5 = cc[k, 1, 1] - cc[k, 4, 1]
            ti2 = cc[k, 1, 1] + cc[k, 4, 1]
            ti4 = cc[k, 2, 1] - cc[k, 3, 1]
            ti3 = cc[k, 2, 1] + cc[k, 3, 1]
            tr5 = cc[k, 1, 0] - cc[k, 4, 0]
            tr2 = cc[k, 1, 0] + cc[k, 4, 0]
            tr4 = cc[k, 2, 0] - cc[k, 3, 0]
            tr3 = cc[k, 2, 0] + cc[k, 3, 0]
            ch[0, k, 0] = cc[k, 0, 0] + tr2 + tr3
            ch[0, k, 1] = cc[k, 0, 1] + ti2 + ti3
            cr2 = cc[k, 0, 0] + TR11 * tr2 + TR12 * tr3
            ci2 = cc[k, 0, 1] + TR11 * ti2 + TR12 * ti3
            cr3 = cc[k, 0, 0] + TR12 * tr2 + TR11 * tr3
            ci3 = cc[k, 0, 1] + TR12 * ti2 + TR11 * ti3
            cr5 = ti11 * tr5 + ti12 * tr4
            ci5 = ti11 * ti5 + ti12 * ti4
            cr4 = ti12 * tr5 - ti11 * tr4
            ci4 = ti12 * ti5 - ti11 * ti4
            ch[1, k, 0] = cr2 - ci5
            ch[4, k, 0] = cr2 + ci5
            ch[1, k, 1] = ci2 + cr5
            ch[2, k, 1] = ci3 + cr4
            ch[2, k, 0] = cr3 - ci4
            ch[3, k, 0] = cr3 + ci4
            ch[3, k, 1] = ci3 - cr4
            ch[4, k, 1] = ci2 - cr5
        return

    for k in range(l1):
        for i in range(0, ido, 2):
            ti5 = cc[k, 1, i + 1] - cc[k, 4, i + 1]
            ti2 = cc[k, 1, i + 1] + cc[k, 4, i + 1]
            ti4 = cc[k, 2, i + 1] - cc[k, 3, i + 1]
            ti3 = cc[k, 2, i + 1] + cc[k, 3, i + 1]
            tr5 = cc[k, 1, i] - cc[k, 4, i]
            tr2 = cc[k, 1, i] + cc[k, 4, i]
            tr4 = cc[k, 2, i] - cc[k, 3, i]
            tr3 = cc[k, 2, i] + cc[k, 3, i]
            ch[0, k, i] = cc[k, 0, i] + tr2 + tr3
            ch[0, k, i + 1] = cc[k, 0, i + 1] + ti2 + ti3
            cr2 = cc[k, 0, i] + TR11 * tr2 + TR12 * tr3
            ci2 = cc[k, 0, i + 1] + TR11 * ti2 + TR12 * ti3
            cr3 = cc[k, 0, i] + TR12 * tr2 + TR11 * tr3
            ci3 = cc[k, 0, i + 1] + TR12 * ti2 + TR11 * ti3
            cr5 = ti11 * tr5 + ti12 * tr4
            ci5 = ti11 * ti5 + ti12 * ti4
            cr4 = ti12 * tr5 - ti11 * tr4
            ci4 = ti12 * ti5 - ti11 * ti4
            dr3 = cr3 - ci4
            dr4 = cr3 + ci4
            di3 = ci3 + cr4
            di4 = ci3 - cr4
            dr5 = cr2 + ci5
            dr2 = cr2 - ci5
            di5 = ci2 - cr5
            di2 = ci2 + cr5

            wr1 = tw[0, i]
            wi1 = sign * tw[0, i + 1]
            wr2 = tw[1, i]
            wi2 = sign * tw[1, i + 1]
            wr3 = tw[2, i]
            wi3 = sign * tw[2, i + 1]
            wr4 = tw[3, i]
            wi4 = sign * tw[3, i + 1]
            ch[1, k, i] = wr1 * dr2 - wi1 * di2
            ch[1, k, i + 1] = wr1 * di2 + wi1 * dr2
            ch[2, k, i] = wr2 * dr3 - wi2 * di3
            ch[2, k, i + 1] = wr2 * di3 + wi2 * dr3
            ch[3, k, i] = wr3 * dr4 - wi3 * di4
            ch[3, k, i + 1] = wr3 * di4 + wi3 * dr4
            ch[4, k, i] = wr4 * dr5 - wi4 * di5
            ch[4, k, i + 1] = wr4 * di5 + wi4 * dr5


RADIX_KERNELS = {
    2: pass2,
    3: pass3,
    4: pass4,
    5: pass5,
}
