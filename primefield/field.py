import logging

from primefield.errors import FieldMismatch
from primefield.field_element import FieldElement
from primefield.interface import GFType
from primefield.utils import is_integer, is_prime, true_mod

logger = logging.getLogger(__name__)


class PrimeField(GFType):
    '''Z/pZ field wrapper: builds FieldElements of modulus p, reducing integer input into [0, p)'''

    def __init__(self, p, validate=False):
        if not is_integer(p) or p < 2:
            raise ValueError(f'Field modulus must be an integer >= 2, got {p!r}')

        # primality is the caller's promise unless asked to verify it
        if validate and not is_prime(p):
            logger.debug('rejecting composite modulus %s', p)
            raise ValueError(f'{p} is not a prime number.')

        self.modulus = p
        super().__init__(p)  # setup the group order

    def __call__(self, value) -> FieldElement:
        if isinstance(value, FieldElement):
            if value.prime != self.modulus:
                raise FieldMismatch(f'Cannot convert an element of F_{value.prime} into F_{self.modulus}')
            return value

        if not is_integer(value):
            raise TypeError(f'Expected an integer or FieldElement, got {type(value).__name__}')

        return FieldElement(true_mod(value, self.modulus), self.modulus)

    def zero(self) -> FieldElement:
        return FieldElement(0, self.modulus)

    def one(self) -> FieldElement:
        return FieldElement(1, self.modulus)

    def __contains__(self, item):
        return isinstance(item, FieldElement) and item.prime == self.modulus

    def __eq__(self, other):
        if not isinstance(other, PrimeField):
            return NotImplemented
        return self.modulus == other.modulus

    def __hash__(self):
        return hash(int(self.modulus))

    def __repr__(self):
        return f'PrimeField({self.modulus})'
