import logging

from primefield.errors import FieldError, RangeViolation, FieldMismatch, FieldDivisionByZero
from primefield.field_element import FieldElement
from primefield.field import PrimeField

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'FieldElement',
    'PrimeField',
    'FieldError',
    'RangeViolation',
    'FieldMismatch',
    'FieldDivisionByZero',
]
