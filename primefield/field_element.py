import logging
from typing import Union

import gmpy2
from gmpy2 import mpz

from primefield.errors import RangeViolation, FieldMismatch, FieldDivisionByZero
from primefield.interface import GFElementType
from primefield.utils import is_integer, true_mod, reduce_exponent

logger = logging.getLogger(__name__)

IntegerType = Union[int, type(mpz(0))]


class FieldElement(GFElementType):
    """
        An element of the finite field F_p = Z/pZ of prime order p:
            num in [0, p), all arithmetic reduced modulo p

        Instances are immutable values; every operation returns a new element. Binary operations require both
        operands to live in the same field (same prime), otherwise FieldMismatch is raised.
        References:
        [1] Programming Bitcoin, Chapter 1: Finite Fields
    """
    __slots__ = ('_num', '_prime')

    def __init__(self, num: IntegerType, prime: IntegerType):
        if not is_integer(num) or not is_integer(prime):
            raise TypeError(f'Field element requires integers, got num={num!r}, prime={prime!r}')

        n, p = mpz(num), mpz(prime)
        if n < 0 or n >= p:
            logger.debug('rejecting num=%s for prime=%s', n, p)
            raise RangeViolation(f'Num {n} not in field range 0 to {p - 1}')

        # bypass __setattr__, which forbids any later assignment
        object.__setattr__(self, '_num', n)
        object.__setattr__(self, '_prime', p)

    @property
    def num(self):
        return self._num

    @property
    def prime(self):
        return self._prime

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __reduce__(self):
        # rebuild through __init__, slot state cannot be restored by setattr
        return (FieldElement, (int(self._num), int(self._prime)))

    def __repr__(self):
        return f'FieldElement(num={self._num}, prime={self._prime})'

    def __str__(self):
        return f'[{self._num}, {self._prime}]'

    def __eq__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self._num == other._num and self._prime == other._prime

    def __hash__(self):
        return hash((int(self._num), int(self._prime)))

    def __int__(self):
        return int(self._num)

    def is_zero(self) -> bool:
        return self._num == 0

    def _check_same_field(self, other: 'FieldElement', op: str):
        if self._prime != other._prime:
            logger.debug('%s across fields F_%s and F_%s', op, self._prime, other._prime)
            raise FieldMismatch(f'Cannot {op} two numbers in different Fields')

    def _new(self, num) -> 'FieldElement':
        return FieldElement(num, self._prime)

    # +
    def __add__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_same_field(other, 'add')
        return self._new(true_mod(self._num + other._num, self._prime))

    # -
    def __sub__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_same_field(other, 'subtract')
        # !! true modulo here, the intermediate difference can be negative
        return self._new(true_mod(self._num - other._num, self._prime))

    # *
    def __mul__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_same_field(other, 'multiply')
        return self._new(true_mod(self._num * other._num, self._prime))

    # k * a, for an integer coefficient k (repeated addition)
    def __rmul__(self, coefficient):
        if not is_integer(coefficient):
            return NotImplemented
        return self._new(true_mod(self._num * coefficient, self._prime))

    # /
    def __truediv__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_same_field(other, 'divide')
        if other.is_zero():
            raise FieldDivisionByZero(f'Cannot divide by zero in field F_{self._prime}')
        return self * other ** -1

    # -a
    def __neg__(self):
        return self._new(true_mod(-self._num, self._prime))

    # **
    def __pow__(self, exponent, modulo=None):
        '''
            Modular exponentiation num^exponent mod prime for any integer exponent.
            By Fermat's little theorem a^(p-1) == 1 for a != 0, so the exponent is reduced modulo p-1 first,
            which also maps a negative exponent onto its positive equivalent (a^-1 == a^(p-2)).
        '''
        if modulo is not None or not is_integer(exponent):
            return NotImplemented

        if self.is_zero():
            # the reduction above does not hold for zero: 0^(p-1) is 0, not 1
            if exponent < 0:
                raise FieldDivisionByZero(f'Cannot raise zero to a negative power in field F_{self._prime}')
            return self._new(gmpy2.powmod(self._num, exponent, self._prime))

        e = reduce_exponent(exponent, self._prime)
        return self._new(gmpy2.powmod(self._num, e, self._prime))

    def inverse(self) -> 'FieldElement':
        """Multiplicative inverse a^-1, so that a * a^-1 == 1."""
        if self.is_zero():
            raise FieldDivisionByZero(f'Zero has no inverse in field F_{self._prime}')
        return self ** -1

    # Named forms of the operators, raising TypeError on a non-element operand
    def add(self, other: 'FieldElement') -> 'FieldElement':
        return self._binary_or_raise(self.__add__, other)

    def sub(self, other: 'FieldElement') -> 'FieldElement':
        return self._binary_or_raise(self.__sub__, other)

    def mul(self, other: 'FieldElement') -> 'FieldElement':
        return self._binary_or_raise(self.__mul__, other)

    def div(self, other: 'FieldElement') -> 'FieldElement':
        return self._binary_or_raise(self.__truediv__, other)

    def pow(self, exponent: IntegerType) -> 'FieldElement':
        res = self.__pow__(exponent)
        if res is NotImplemented:
            raise TypeError(f'Exponent must be an integer, got {exponent!r}')
        return res

    @staticmethod
    def _binary_or_raise(method, other):
        res = method(other)
        if res is NotImplemented:
            raise TypeError(f'Expected a FieldElement operand, got {type(other).__name__}')
        return res
