"""
Generic Odd-Radix Pass Kernel

Handles every radix without a closed-form kernel (in practice the primes
7, 11, 13, ... left over by the factorizer). The ip-point DFT is split into
conjugate branch pairs (j, ip - j): their sums feed the cosine terms and
their differences the sine terms, so only (ip - 1) / 2 weighted sums are
accumulated per output pair.

Views handed in by the stage driver:

    cc  (l1, ip, ido)   source, as read by the first phase
    c1  (ip, l1, ido)   source buffer, reused for the rotated result
    c2  (ip, ido * l1)  source buffer, flat per branch
    ch  (ip, l1, ido)   target
    ch2 (ip, ido * l1)  target, flat per branch
    wa  (ip - 1) * ido  this stage's block of the twiddle table

Project: Mixed-Radix FFT (FFTPACK-style complex transform)
"""

from numba import njit


@njit(cache=True)
def pass_generic(cc, c1, c2, ch, ch2, wa, sign):
    """
    Apply one radix-ip stage.

    Returns:
        True if the result was written back into the source buffer
        (c1/c2), False if it was left in the target buffer (ch/ch2).
        The latter happens when ido == 2 and no rotation is needed.
    """
    l1 = cc.shape[0]
    ip = cc.shape[1]
    ido = cc.shape[2]
    idl1 = ido * l1
    idot = ido // 2
    ipph = (ip + 1) // 2
    idp = ip * ido

    # Phase 1: sums and differences of mirrored branches
    if ido < l1:
        for j in range(1, ipph):
            jc = ip - j
            for i in range(ido):
                for k in range(l1):
                    ch[j, k, i] = cc[k, j, i] + cc[k, jc, i]
                    ch[jc, k, i] = cc[k, j, i] - cc[k, jc, i]
        for i in range(ido):
            for k in range(l1):
                ch[0, k, i] = cc[k, 0, i]
    else:
        for j in range(1, ipph):
            jc = ip - j
            for k in range(l1):
                for i in range(ido):
                    ch[j, k, i] = cc[k, j, i] + cc[k, jc, i]
                    ch[jc, k, i] = cc[k, j, i] - cc[k, jc, i]
        for k in range(l1):
            for i in range(ido):
                ch[0, k, i] = cc[k, 0, i]

    # Phase 2: weighted sums; idlj walks the exp(2*pi*i*l*j/ip) pairs mod ip
    idl = -ido
    inc = 0
    for l in range(1, ipph):
        lc = ip - l
        idl += ido
        war = wa[idl]
        wai = sign * wa[idl + 1]
        for ik in range(idl1):
            c2[l, ik] = ch2[0, ik] + war * ch2[1, ik]
            c2[lc, ik] = wai * ch2[ip - 1, ik]
        idlj = idl
        inc += ido
        for j in range(2, ipph):
            jc = ip - j
            idlj += inc
            if idlj >= idp:
                idlj -= idp
            war = wa[idlj]
            wai = sign * wa[idlj + 1]
            for ik in range(idl1):
                c2[l, ik] = c2[l, ik] + war * ch2[j, ik]
                c2[lc, ik] = c2[lc, ik] + wai * ch2[jc, ik]

    for j in range(1, ipph):
        for ik in range(idl1):
            ch2[0, ik] = ch2[0, ik] + ch2[j, ik]

    for j in range(1, ipph):
        jc = ip - j
        for ik in range(0, idl1, 2):
            ch2[j, ik] = c2[j, ik] - c2[jc, ik + 1]
            ch2[jc, ik] = c2[j, ik] + c2[jc, ik + 1]
            ch2[j, ik + 1] = c2[j, ik + 1] + c2[jc, ik]
            ch2[jc, ik + 1] = c2[j, ik + 1] - c2[jc, ik]

    if ido == 2:
        return False

    # Phase 3: rotate branches 1..ip-1 back into the source buffer
    for ik in range(idl1):
        c2[0, ik] = ch2[0, ik]

    for j in range(1, ip):
        for k in range(l1):
            c1[j, k, 0] = ch[j, k, 0]
            c1[j, k, 1] = ch[j, k, 1]

    if idot > l1:
        for j in range(1, ip):
            idj = (j - 1) * ido
            for k in range(l1):
                for i in range(2, ido, 2):
                    wr = wa[idj + i]
                    wi = sign * wa[idj + i + 1]
                    c1[j, k, i] = wr * ch[j, k, i] - wi * ch[j, k, i + 1]
                    c1[j, k, i + 1] = wr * ch[j, k, i + 1] + wi * ch[j, k, i]
        return True

    for j in range(1, ip):
        idj = (j - 1) * ido
        for i in range(2, ido, 2):
            wr = wa[idj + i]
            wi = sign * wa[idj + i + 1]
            for k in range(l1):
                c1[j, k, i] = wr * ch[j, k, i] - wi * ch[j, k, i + 1]
                c1[j, k, i + 1] = wr * ch[j, k, i + 1] + wi * ch[j, k, i]
    return True
