import gmpy2
from gmpy2 import mpz

# Quick integer helpers for Z/pZ arithmetic, backed by gmpy2
is_integer = lambda x: isinstance(x, (int, type(mpz(0)))) and not isinstance(x, bool)


def true_mod(x, m):
    ''' Modulo with a result in [0, m) for positive m, whatever the sign of x.
        e.g.
            >>> true_mod(-3, 13)  # 10
    '''
    return gmpy2.f_mod(mpz(x), mpz(m))


def reduce_exponent(e, p):
    ''' Reduce exponent {e} modulo p-1 (Fermat's little theorem): for a != 0 (mod p), a^e == a^(e mod (p-1)).
        Negative exponents map onto their positive equivalent in [0, p-1).
    '''
    return true_mod(e, mpz(p) - 1)


def is_prime(n) -> bool:
    if n < 2:
        return False
    return bool(gmpy2.is_prime(mpz(n)))
