#
# Digits, signs and positional numeral systems of bases 2 to 62
#
# (c) The polyradix authors 2026.  All rights reserved.
#

import logging
import string
from enum import IntEnum

import attr

from .errors import (
    InvalidArgument, InvalidSymbol, InvalidOrdinal, UnsupportedBase, DigitBaseMismatch,
    OP_CHAR_TO_DIGIT, OP_ORDINAL_TO_DIGIT, OP_NUMERAL_SYSTEM, OP_COMPARE,
)

__all__ = ('MIN_BASE', 'MAX_BASE', 'SYMBOLS', 'Sign', 'Compare', 'Digit', 'NumeralSystem',
           'numeral_system', 'char_to_digit', 'ordinal_to_digit', 'check_base')

logger = logging.getLogger(__name__)

# The global symbol ordering.  A base N system uses the first N symbols, so base 16 uses
# 0-9A-F.  Existing notations depend on this order; do not change it.
SYMBOLS = string.digits + string.ascii_uppercase + string.ascii_lowercase

MIN_BASE = 2
MAX_BASE = len(SYMBOLS)


class Sign(IntEnum):
    '''The sign of a number.  POSITIVE compares greater than NEGATIVE.'''
    NEGATIVE = 0
    POSITIVE = 1

    @property
    def symbol(self):
        return '-' if self is Sign.NEGATIVE else '+'

    @classmethod
    def from_symbol(cls, symbol):
        '''Return the sign for '+' or '-'.  An empty string or None is positive.'''
        if not symbol or symbol == '+':
            return cls.POSITIVE
        if symbol == '-':
            return cls.NEGATIVE
        raise InvalidSymbol(('sign', symbol), f"'{symbol}' is not a sign symbol")

    def negate(self):
        return Sign.POSITIVE if self is Sign.NEGATIVE else Sign.NEGATIVE

    def __neg__(self):
        return self.negate()

    def __str__(self):
        return self.symbol


# Result of a comparison.  Numbers are totally ordered; UNORDERED only arises against a
# foreign NaN.
class Compare(IntEnum):
    LESS_THAN = -1
    EQUAL = 0
    GREATER_THAN = 1
    UNORDERED = 2

    def inverted(self):
        if self is Compare.UNORDERED:
            return self
        return Compare(-self)


@attr.s(slots=True, frozen=True, repr=False, order=False)
class Digit:
    '''A single symbol of a positional numeral system.

    Two digits are equal if and only if they have the same base and ordinal.  Digits are
    interned by their numeral system, but nothing relies on that.
    '''

    symbol = attr.ib(eq=False)
    base = attr.ib()
    ordinal = attr.ib()

    def is_zero(self):
        return self.ordinal == 0

    def is_max(self):
        '''Return True if this is the largest digit of its base.'''
        return self.ordinal == self.base - 1

    def complement(self):
        '''Return the diminished radix complement, i.e. base - 1 - ordinal.'''
        return ordinal_to_digit(self.base, self.base - 1 - self.ordinal)

    def compare_to(self, other):
        if not isinstance(other, Digit):
            raise InvalidArgument((OP_COMPARE, self, other), 'a digit is required')
        if self.base != other.base:
            raise DigitBaseMismatch((OP_COMPARE, self, other),
                                    f'cannot compare digits of base {self.base} and {other.base}')
        if self.ordinal == other.ordinal:
            return Compare.EQUAL
        return Compare.GREATER_THAN if self.ordinal > other.ordinal else Compare.LESS_THAN

    def __lt__(self, other):
        if not isinstance(other, Digit):
            return NotImplemented
        return self.compare_to(other) == Compare.LESS_THAN

    def __le__(self, other):
        if not isinstance(other, Digit):
            return NotImplemented
        return self.compare_to(other) != Compare.GREATER_THAN

    def __gt__(self, other):
        if not isinstance(other, Digit):
            return NotImplemented
        return self.compare_to(other) == Compare.GREATER_THAN

    def __ge__(self, other):
        if not isinstance(other, Digit):
            return NotImplemented
        return self.compare_to(other) != Compare.LESS_THAN

    def __str__(self):
        return self.symbol

    def __repr__(self):
        return f'Digit({self.symbol!r}, base={self.base}, ordinal={self.ordinal})'


class NumeralSystem:
    '''A positional numeral system.  Only obtain instances through numeral_system(base).

    Maps ordinals to symbols to digits and back.  Instances are immutable and shared by
    every number of the same base.
    '''

    __slots__ = ('base', 'symbols', 'digits', '_by_symbol')

    def __init__(self, base):
        self.base = base
        self.symbols = SYMBOLS[:base]
        self.digits = tuple(Digit(symbol, base, ordinal)
                            for ordinal, symbol in enumerate(self.symbols))
        self._by_symbol = {digit.symbol: digit for digit in self.digits}

    @property
    def zero(self):
        return self.digits[0]

    @property
    def one(self):
        return self.digits[1]

    @property
    def max_digit(self):
        return self.digits[-1]

    def char_to_digit(self, symbol):
        '''Return the digit for symbol.  Raises InvalidSymbol if symbol is not in this base's
        alphabet.'''
        digit = self._by_symbol.get(symbol)
        if digit is None:
            raise InvalidSymbol((OP_CHAR_TO_DIGIT, self.base, symbol),
                                f"'{symbol}' is not a digit of base {self.base}")
        return digit

    def ordinal_to_digit(self, ordinal):
        '''Return the digit with the given ordinal.  Raises InvalidOrdinal unless 0 <= ordinal <
        base.'''
        if not isinstance(ordinal, int) or isinstance(ordinal, bool):
            raise InvalidOrdinal((OP_ORDINAL_TO_DIGIT, self.base, ordinal),
                                 'ordinal must be an integer')
        if not 0 <= ordinal < self.base:
            raise InvalidOrdinal((OP_ORDINAL_TO_DIGIT, self.base, ordinal),
                                 f'ordinal {ordinal} out of range for base {self.base}')
        return self.digits[ordinal]

    def ordinal_of(self, symbol):
        return self.char_to_digit(symbol).ordinal

    def __repr__(self):
        return f'NumeralSystem(base={self.base})'


def check_base(base, op_tuple=None):
    '''Return base if it is a supported base, otherwise raise UnsupportedBase.'''
    if not isinstance(base, int) or isinstance(base, bool):
        raise UnsupportedBase(op_tuple or (OP_NUMERAL_SYSTEM, base), 'base must be an integer')
    if not MIN_BASE <= base <= MAX_BASE:
        raise UnsupportedBase(op_tuple or (OP_NUMERAL_SYSTEM, base),
                              f'base {base} is not in the range {MIN_BASE} to {MAX_BASE}')
    return base


# Process-wide cache, populated on first use of each base and never invalidated.  Two
# threads can race to build the same system; setdefault keeps whichever got there first
# and the other instance is dropped.
_systems = {}


def numeral_system(base):
    '''Return the shared numeral system of the given base.'''
    system = _systems.get(base) if type(base) is int else None
    if system is None:
        check_base(base)
        system = _systems.setdefault(base, NumeralSystem(base))
        logger.debug('created numeral system for base %d', base)
    return system


def char_to_digit(base, symbol):
    '''Return the digit of the given base with the given symbol.'''
    return numeral_system(base).char_to_digit(symbol)


def ordinal_to_digit(base, ordinal):
    '''Return the digit of the given base with the given ordinal.'''
    return numeral_system(base).ordinal_to_digit(ordinal)
