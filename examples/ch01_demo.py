import sys
import logging

from primefield import FieldElement


def demo():
    a = FieldElement(7, 13)
    b = FieldElement(6, 13)
    print(a == b)
    print(a == a)

    a = FieldElement(7, 13)
    b = FieldElement(12, 13)
    c = FieldElement(6, 13)
    print(a + b == c)

    a = FieldElement(3, 13)
    b = FieldElement(12, 13)
    c = FieldElement(10, 13)
    print(a * b == c)

    a = FieldElement(3, 13)
    b = FieldElement(1, 13)
    print(a ** 3 == b)

    a = FieldElement(7, 13)
    b = FieldElement(8, 13)
    print(a ** -3 == b)


if __name__ == '__main__':
    if '--verbose' in sys.argv:
        logging.basicConfig(level=logging.DEBUG)

    demo()
