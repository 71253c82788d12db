#
# The Number value and its arithmetic
#
# (c) The polyradix authors 2026.  All rights reserved.
#

from collections import namedtuple
from decimal import Decimal
from fractions import Fraction
from math import gcd, inf, isnan

from .context import get_context
from .digits import Sign, Compare, numeral_system, check_base
from .errors import (
    InvalidArgument, DigitBaseMismatch, UndefinedResult, UndefinedOperation,
    OP_ADD, OP_SUBTRACT, OP_MULTIPLY, OP_NEGATE, OP_ABS, OP_COMPLEMENT, OP_SHIFT_LEFT,
    OP_SHIFT_RIGHT, OP_COMPARE, OP_DIGIT_AT, OP_FROM_VALUE, OP_CONSTRUCT, OP_TRUNCATE,
)
from .notation import parse as parse_notation, parse_scientific
from .sequence import (
    DigitSequence, add_digits, multiply_digits, move_left_synchronously,
    move_right_synchronously,
)

__all__ = ('Number', 'parse', 'compare', 'equals', 'add', 'subtract', 'multiply', 'negate',
           'absolute_value', 'complement', 'shift_left', 'shift_right', 'inc', 'dec',
           'doubling', 'truncate', 'minimum', 'maximum')


class Number(namedtuple('Number', 'base sign sequence')):
    '''An arbitrary-precision number in a positional numeral system of base 2 to 62.

    base is the radix, sign a Sign and sequence the DigitSequence of the magnitude, or
    None for an infinity.  Numbers are immutable and their sequence is always canonical.
    Zero is always positive.

    Construction:

        Number(base, '12.5')             parse standard or scientific notation
        Number(base, Sign.NEGATIVE)      an infinity of that sign
        Number(base, sign, sequence)     from raw parts
        Number(base, 12)                 from an int, float, Decimal or Fraction
        Number(other)                    a copy of another Number
    '''

    def __new__(cls, base, value=None, sequence=None):
        if isinstance(base, Number):
            if value is not None or sequence is not None:
                raise InvalidArgument((OP_CONSTRUCT, base, value, sequence),
                                      'a copy takes no further arguments')
            return base.copy()
        check_base(base, (OP_CONSTRUCT, base, value))
        if value is None:
            raise InvalidArgument((OP_CONSTRUCT, base, value), 'no value was specified')
        if isinstance(value, Sign):
            if sequence is None:
                return cls.infinity(base, value)
            if not isinstance(sequence, DigitSequence):
                raise InvalidArgument((OP_CONSTRUCT, base, value, sequence),
                                      'sequence must be a DigitSequence')
            if sequence.base != base:
                raise DigitBaseMismatch((OP_CONSTRUCT, base, value, sequence),
                                        f'sequence of base {sequence.base} for base {base}')
            return cls._finite(base, value, sequence)
        if sequence is not None:
            raise InvalidArgument((OP_CONSTRUCT, base, value, sequence),
                                  'a sequence requires a sign')
        return cls.from_value(base, value)

    @classmethod
    def _finite(cls, base, sign, sequence):
        '''All finite numbers are made here.  Canonicalizes the sequence and normalizes
        negative zero.'''
        sequence = sequence.trim()
        if sequence.is_zero():
            sign = Sign.POSITIVE
        return cls._make((base, sign, sequence))

    ##
    ## Constructors
    ##

    @classmethod
    def zero(cls, base):
        check_base(base)
        return cls._make((base, Sign.POSITIVE, DigitSequence.zero(base)))

    @classmethod
    def one(cls, base):
        check_base(base)
        return cls._make((base, Sign.POSITIVE, DigitSequence(base, (1, ), 0)))

    @classmethod
    def infinity(cls, base, sign=Sign.POSITIVE):
        check_base(base)
        if not isinstance(sign, Sign):
            raise InvalidArgument((OP_CONSTRUCT, base, sign), 'sign must be a Sign')
        return cls._make((base, sign, None))

    @classmethod
    def from_string(cls, base, string):
        '''Parse standard notation, scientific notation or an infinity literal.'''
        sign, sequence = parse_notation(base, string)
        if sequence is None:
            return cls.infinity(base, sign)
        return cls._finite(base, sign, sequence)

    @classmethod
    def from_scientific_string(cls, base, string):
        '''Parse scientific notation only.  Unlike from_string this is unambiguous in bases
        where the exponent marker is a digit.'''
        sign, sequence = parse_scientific(base, string)
        return cls._finite(base, sign, sequence)

    @classmethod
    def from_int(cls, base, value):
        '''Return the integer as a number of the given base.'''
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidArgument((OP_FROM_VALUE, base, value), 'from_int requires an integer')
        check_base(base)
        sign = Sign.NEGATIVE if value < 0 else Sign.POSITIVE
        ordinals = _integer_ordinals(base, abs(value))
        return cls._finite(base, sign, DigitSequence.from_window(base, ordinals,
                                                                 len(ordinals) - 1))

    @classmethod
    def from_fraction(cls, base, value):
        '''Return the fraction exactly as a number of the given base.

        Raises InvalidArgument if the fraction has no finite expansion in the base, i.e.
        if its reduced denominator has a prime factor that does not divide the base.
        '''
        if not isinstance(value, Fraction):
            raise InvalidArgument((OP_FROM_VALUE, base, value),
                                  'from_fraction requires a Fraction instance')
        check_base(base)
        numerator, denominator = abs(value.numerator), value.denominator

        reduced = denominator
        while True:
            divisor = gcd(reduced, base)
            if divisor == 1:
                break
            reduced //= divisor
        if reduced != 1:
            raise InvalidArgument((OP_FROM_VALUE, base, value),
                                  f'{value} has no finite representation in base {base}')

        integer, remainder = divmod(numerator, denominator)
        ordinals = _integer_ordinals(base, integer)
        highest = len(ordinals) - 1
        while remainder:
            ordinal, remainder = divmod(remainder * base, denominator)
            ordinals.append(ordinal)
        sign = Sign.NEGATIVE if value < 0 else Sign.POSITIVE
        return cls._finite(base, sign, DigitSequence.from_window(base, ordinals, highest))

    @classmethod
    def from_float(cls, base, value):
        '''Return the float as a number of the given base.

        In base 10 the shortest repr of the float is used, so 0.1 gives 0.1.  In other bases
        the exact binary value is converted, which is only possible in even bases unless
        the float is an integer.
        '''
        if not isinstance(value, float):
            raise InvalidArgument((OP_FROM_VALUE, base, value), 'from_float requires a float')
        if isnan(value):
            raise InvalidArgument((OP_FROM_VALUE, base, value), 'cannot convert a NaN')
        if value in (inf, -inf):
            return cls.infinity(base, Sign.NEGATIVE if value < 0 else Sign.POSITIVE)
        if base == 10:
            return cls.from_decimal(base, Decimal(repr(value)))
        return cls.from_fraction(base, Fraction(value))

    @classmethod
    def from_decimal(cls, base, value):
        '''Return the decimal exactly as a number of the given base.'''
        if not isinstance(value, Decimal):
            raise InvalidArgument((OP_FROM_VALUE, base, value),
                                  'from_decimal requires a Decimal instance')
        if value.is_nan():
            raise InvalidArgument((OP_FROM_VALUE, base, value), 'cannot convert a NaN')
        if value.is_infinite():
            return cls.infinity(base, Sign.NEGATIVE if value.is_signed() else Sign.POSITIVE)
        if base == 10:
            return cls.from_string(base, format(value, 'f'))
        return cls.from_fraction(base, Fraction(value))

    @classmethod
    def from_value(cls, base, value):
        '''Return a number of the given base converted from a str, int, float, Decimal or
        Fraction.'''
        converter = cls._converters.get(type(value))
        if not converter:
            raise InvalidArgument((OP_FROM_VALUE, base, value),
                                  f'cannot convert values of type {type(value).__name__}')
        return converter(base, value)

    def copy(self):
        '''Return a copy with an independent digit sequence.'''
        if self.sequence is None:
            return self._make(self)
        return self._make((self.base, self.sign, self.sequence.clone()))

    ##
    ## Predicates
    ##

    def is_zero(self):
        return self.sequence is not None and self.sequence.is_zero()

    def is_infinity(self):
        return self.sequence is None

    def is_finite(self):
        return self.sequence is not None

    def is_positive(self):
        '''Return True if the sign is positive.  Zero is positive.'''
        return self.sign is Sign.POSITIVE

    def is_negative(self):
        return self.sign is Sign.NEGATIVE

    def is_fraction(self):
        '''Return True if the number has a non-empty fractional part.'''
        return self.sequence is not None and self.sequence.is_fraction()

    def is_integer(self):
        return self.sequence is not None and not self.sequence.is_fraction()

    def is_one(self):
        '''Return True if the number is exactly positive one.'''
        return (self.sign is Sign.POSITIVE and self.sequence is not None
                and self.sequence.ordinals == (1, ) and self.sequence.center == 0)

    def is_natural_number(self):
        return self.is_positive() and self.is_integer() and not self.is_zero()

    def is_natural_number_including_zero(self):
        return self.is_positive() and self.is_integer()

    def is_odd(self):
        '''Return True for odd integers.  False for fractions and infinities.'''
        if not self.is_integer():
            return False
        ordinals = self.sequence.ordinals
        if self.base % 2 == 0:
            return bool(ordinals[-1] & 1)
        # Every power of an odd base is odd
        return bool(sum(ordinals) & 1)

    def is_even(self):
        '''Return True for even integers.  False for fractions and infinities.'''
        return self.is_integer() and not self.is_odd()

    def digit_at(self, position):
        '''Return the digit at a 1-based position: 1 is the ones place, 2 the next integer
        place and -1 the first fractional place.  Unstored positions are zero.'''
        op_tuple = (OP_DIGIT_AT, self, position)
        if not isinstance(position, int) or isinstance(position, bool):
            raise InvalidArgument(op_tuple, 'position must be an integer')
        if position == 0:
            raise InvalidArgument(op_tuple, 'there is no digit at position 0')
        if self.sequence is None:
            raise UndefinedOperation(op_tuple, 'an infinity has no digits')
        return self.sequence.digit_at(position - 1 if position > 0 else position)

    ##
    ## Named operations
    ##

    def compare_to(self, other):
        return compare(self, other)

    def is_greater(self, other):
        return compare(self, other) == Compare.GREATER_THAN

    def is_greater_or_equal(self, other):
        return compare(self, other) != Compare.LESS_THAN

    def is_lesser(self, other):
        return compare(self, other) == Compare.LESS_THAN

    def is_lesser_or_equal(self, other):
        return compare(self, other) != Compare.GREATER_THAN

    def equals(self, other):
        return equals(self, other)

    def add(self, other):
        return add(self, other)

    def subtract(self, other):
        return subtract(self, other)

    def multiply(self, other):
        return multiply(self, other)

    def negate(self):
        return negate(self)

    def absolute_value(self):
        return absolute_value(self)

    def complement(self):
        return complement(self)

    def shift_left(self, count=1):
        return shift_left(self, count)

    def shift_right(self, count=1):
        return shift_right(self, count)

    def inc(self):
        return inc(self)

    def dec(self):
        return dec(self)

    def doubling(self):
        return doubling(self)

    def truncate(self):
        return truncate(self)

    def min(self, other):
        return minimum(self, other)

    def max(self, other):
        return maximum(self, other)

    ##
    ## Conversions
    ##

    def as_integer_ratio(self):
        '''Return a pair (n, d) of integers that represent the value as a fraction in lowest
        terms and with a positive denominator.'''
        if self.sequence is None:
            raise OverflowError('cannot convert an infinity to an integer ratio')
        numerator = 0
        for ordinal in self.sequence.ordinals:
            numerator = numerator * self.base + ordinal
        denominator = self.base ** self.sequence.fraction_length
        divisor = gcd(numerator, denominator)
        numerator //= divisor
        denominator //= divisor
        if self.sign is Sign.NEGATIVE:
            numerator = -numerator
        return numerator, denominator

    def to_string(self, text_format=None):
        '''Return the number in standard notation.'''
        text_format = text_format or get_context().text_format
        return text_format.format_standard(self.sign, self.sequence)

    def to_scientific_string(self, text_format=None):
        '''Return the number in scientific notation.'''
        text_format = text_format or get_context().text_format
        return text_format.format_scientific(self.sign, self.sequence)

    def _convert_for_arith(self, value):
        '''Convert value to a number of this base for arithmetic.  Numbers are returned
        unmodified.  Returns None for unsupported types.'''
        if isinstance(value, Number):
            return value
        if type(value) in (int, float, Decimal, Fraction):
            return self.from_value(self.base, value)
        return None

    def _compare_value(self, other):
        '''Compare by value with an int, float, Decimal or Fraction.  Returns None for other
        types.'''
        if isinstance(other, float):
            if isnan(other):
                return Compare.UNORDERED
            if other not in (inf, -inf):
                other = Fraction(other)
        elif isinstance(other, Decimal):
            if other.is_nan():
                return Compare.UNORDERED
            other = float(other) if other.is_infinite() else Fraction(other)
        elif not isinstance(other, (int, Fraction)):
            return None

        if self.sequence is None:
            value = -inf if self.sign is Sign.NEGATIVE else inf
        else:
            value = Fraction(*self.as_integer_ratio())
        if value == other:
            return Compare.EQUAL
        return Compare.GREATER_THAN if value > other else Compare.LESS_THAN

    def _compare_any(self, other):
        if isinstance(other, Number):
            return compare(self, other)
        return self._compare_value(other)

    ##
    ## Python support - make it feel like a Python numeric data type.
    ##

    def __abs__(self):
        return absolute_value(self)

    def __neg__(self):
        return negate(self)

    def __pos__(self):
        return self

    def __eq__(self, other):
        if isinstance(other, Number):
            return equals(self, other)
        compare = self._compare_value(other)
        if compare is None:
            return NotImplemented
        return compare == Compare.EQUAL

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other):
        compare = self._compare_any(other)
        if compare is None:
            return NotImplemented
        return compare == Compare.LESS_THAN

    def __le__(self, other):
        compare = self._compare_any(other)
        if compare is None:
            return NotImplemented
        return compare in (Compare.EQUAL, Compare.LESS_THAN)

    def __ge__(self, other):
        compare = self._compare_any(other)
        if compare is None:
            return NotImplemented
        return compare in (Compare.EQUAL, Compare.GREATER_THAN)

    def __gt__(self, other):
        compare = self._compare_any(other)
        if compare is None:
            return NotImplemented
        return compare == Compare.GREATER_THAN

    def __bool__(self):
        return not self.is_zero()

    def __int__(self):
        '''Truncate towards zero.'''
        if self.sequence is None:
            raise OverflowError('cannot convert an infinity to an integer')
        value = 0
        for digit in self.sequence.integer_digits():
            value = value * self.base + digit.ordinal
        return -value if self.sign is Sign.NEGATIVE else value

    __trunc__ = __int__

    def __float__(self):
        if self.sequence is None:
            return -inf if self.sign is Sign.NEGATIVE else inf
        return float(Fraction(*self.as_integer_ratio()))

    def __add__(self, other):
        other = self._convert_for_arith(other)
        if other is None:
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        other = self._convert_for_arith(other)
        if other is None:
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, other):
        other = self._convert_for_arith(other)
        if other is None:
            return NotImplemented
        return multiply(self, other)

    def __radd__(self, other):
        return self.__add__(other)

    def __rsub__(self, other):
        other = self._convert_for_arith(other)
        if other is None:
            return NotImplemented
        return subtract(other, self)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __lshift__(self, count):
        return shift_left(self, count)

    def __rshift__(self, count):
        return shift_right(self, count)

    def __hash__(self):
        '''Python hash.  Must hash equally to other types with the same value.'''
        if self.sequence is None:
            return -314159 if self.sign is Sign.NEGATIVE else 314159
        return hash(Fraction(*self.as_integer_ratio()))

    def __repr__(self):
        return f"Number({self.base}, '{self.to_string()}')"

    def __str__(self):
        return self.to_string()


Number._converters = {
    str: Number.from_string,
    int: Number.from_int,
    float: Number.from_float,
    Decimal: Number.from_decimal,
    Fraction: Number.from_fraction,
}


def parse(string, base=None):
    '''Parse a string in the given base, or the current context's default base.'''
    if base is None:
        base = get_context().default_base
    return Number.from_string(base, string)


def _integer_ordinals(base, value):
    '''Return the digit ordinals of a non-negative integer, most significant first.'''
    ordinals = []
    while value:
        value, ordinal = divmod(value, base)
        ordinals.append(ordinal)
    ordinals.reverse()
    return ordinals or [0]


def _check_operands(op_tuple, *operands):
    for operand in operands:
        if operand is None:
            raise InvalidArgument(op_tuple, 'no number was specified')
        if not isinstance(operand, Number):
            raise InvalidArgument(op_tuple, f'{type(operand).__name__} is not a Number')
    base = operands[0].base
    for operand in operands[1:]:
        if operand.base != base:
            raise DigitBaseMismatch(op_tuple, f'bases {base} and {operand.base} differ')


#
# Magnitude algorithms.  These work on finite canonical digit sequences of a common base.
#

def _compare_magnitudes(lhs, rhs):
    # Canonical sequences have no leading zero, so more integer digits is a larger
    # magnitude
    if lhs.integer_length != rhs.integer_length:
        if lhs.integer_length > rhs.integer_length:
            return Compare.GREATER_THAN
        return Compare.LESS_THAN
    pairs = move_right_synchronously(lhs.leftmost_node(), rhs.leftmost_node())
    for lhs_digit, rhs_digit in pairs:
        result = lhs_digit.compare_to(rhs_digit)
        if result != Compare.EQUAL:
            return result
    return Compare.EQUAL


def _add_magnitudes(lhs, rhs):
    '''Return the sum of two magnitudes.  The result is not trimmed.'''
    base = lhs.base
    highest = max(lhs.highest, rhs.highest)
    lowest = min(lhs.lowest, rhs.lowest)
    lhs = lhs.widen(highest, lowest)
    rhs = rhs.widen(highest, lowest)

    carry = numeral_system(base).zero
    ordinals = []
    for lhs_digit, rhs_digit in move_left_synchronously(lhs.rightmost_node(),
                                                        rhs.rightmost_node()):
        digit, carry = add_digits(lhs_digit, rhs_digit, carry)
        ordinals.append(digit.ordinal)
    if not carry.is_zero():
        ordinals.append(carry.ordinal)
        highest += 1
    ordinals.reverse()
    return DigitSequence.from_window(base, ordinals, highest)


def _subtract_magnitudes(larger, smaller):
    '''Return larger - smaller for magnitudes with larger >= smaller.

    Over a common window of digits with M the largest number the window can hold, the
    complement of x is M - x.  So complement(complement(larger) + smaller) is larger -
    smaller, and the inner sum never carries out of the window.
    '''
    highest = max(larger.highest, smaller.highest)
    lowest = min(larger.lowest, smaller.lowest)
    total = _add_magnitudes(larger.widen(highest, lowest).complement(), smaller)
    assert total.highest == highest
    return total.complement().trim()


def _multiply_by_digit(sequence, digit):
    '''Return the magnitude times a single digit.  The result is not trimmed.'''
    carry = numeral_system(sequence.base).zero
    ordinals = []
    node = sequence.rightmost_node()
    while node is not None:
        product, carry = multiply_digits(node.digit(), digit, carry)
        ordinals.append(product.ordinal)
        node = node.left_node()
    highest = sequence.highest
    if not carry.is_zero():
        ordinals.append(carry.ordinal)
        highest += 1
    ordinals.reverse()
    return DigitSequence.from_window(sequence.base, ordinals, highest)


def _multiply_magnitudes(lhs, rhs):
    '''Schoolbook multiplication: one partial product per non-zero digit of rhs, shifted to
    the digit's position and accumulated.'''
    product = DigitSequence.zero(lhs.base)
    node = rhs.rightmost_node()
    while node is not None:
        digit = node.digit()
        if not digit.is_zero():
            partial = _multiply_by_digit(lhs, digit).shift(node.position)
            product = _add_magnitudes(product, partial)
        node = node.left_node()
    return product


#
# Comparison
#

def compare(lhs, rhs):
    '''Return the Compare result of lhs against rhs.  Both must be Numbers of the same base.'''
    op_tuple = (OP_COMPARE, lhs, rhs)
    _check_operands(op_tuple, lhs, rhs)
    if lhs is rhs:
        return Compare.EQUAL
    if lhs.is_zero() and rhs.is_zero():
        return Compare.EQUAL
    if lhs.sign != rhs.sign:
        return Compare.GREATER_THAN if lhs.sign is Sign.POSITIVE else Compare.LESS_THAN

    # Same signs from here
    if lhs.is_infinity():
        if rhs.is_infinity():
            return Compare.EQUAL
        return Compare.GREATER_THAN if lhs.sign is Sign.POSITIVE else Compare.LESS_THAN
    if rhs.is_infinity():
        return Compare.LESS_THAN if rhs.sign is Sign.POSITIVE else Compare.GREATER_THAN

    result = _compare_magnitudes(lhs.sequence, rhs.sequence)
    if lhs.sign is Sign.NEGATIVE:
        result = result.inverted()
    return result


def equals(lhs, rhs):
    '''Structural equality: same base, sign and digits.  Numbers of different bases are not
    equal.  Returns False if either is not a Number.'''
    if not isinstance(lhs, Number) or not isinstance(rhs, Number):
        return False
    return (lhs.base == rhs.base and lhs.sign is rhs.sign
            and lhs.sequence == rhs.sequence)


def minimum(lhs, rhs):
    '''Return the lesser of two numbers; lhs if they are equal.'''
    if compare(lhs, rhs) == Compare.GREATER_THAN:
        return rhs
    return lhs


def maximum(lhs, rhs):
    '''Return the greater of two numbers; lhs if they are equal.'''
    if compare(lhs, rhs) == Compare.LESS_THAN:
        return rhs
    return lhs


#
# Arithmetic
#

def add(lhs, rhs):
    '''Return the sum lhs + rhs.'''
    return _add((OP_ADD, lhs, rhs), lhs, rhs)


def subtract(lhs, rhs):
    '''Return the difference lhs - rhs.'''
    op_tuple = (OP_SUBTRACT, lhs, rhs)
    _check_operands(op_tuple, lhs, rhs)
    return _add(op_tuple, lhs, negate(rhs))


def _add(op_tuple, lhs, rhs):
    _check_operands(op_tuple, lhs, rhs)

    # Infinities
    if lhs.is_infinity():
        if rhs.is_infinity() and rhs.sign is not lhs.sign:
            raise UndefinedResult(op_tuple, 'sum of infinities of opposite sign')
        return lhs
    if rhs.is_infinity():
        return rhs

    # Zeroes
    if lhs.is_zero():
        return rhs
    if rhs.is_zero():
        return lhs

    base = lhs.base
    if lhs.sign is rhs.sign:
        return Number._finite(base, lhs.sign, _add_magnitudes(lhs.sequence, rhs.sequence))

    magnitude = _compare_magnitudes(lhs.sequence, rhs.sequence)
    if magnitude == Compare.EQUAL:
        return Number.zero(base)
    if magnitude == Compare.GREATER_THAN:
        larger, smaller = lhs, rhs
    else:
        larger, smaller = rhs, lhs
    return Number._finite(base, larger.sign,
                          _subtract_magnitudes(larger.sequence, smaller.sequence))


def multiply(lhs, rhs):
    '''Return the product lhs * rhs.'''
    op_tuple = (OP_MULTIPLY, lhs, rhs)
    _check_operands(op_tuple, lhs, rhs)

    sign = Sign.POSITIVE if lhs.sign is rhs.sign else Sign.NEGATIVE
    if lhs.is_infinity() or rhs.is_infinity():
        if lhs.is_zero() or rhs.is_zero():
            raise UndefinedResult(op_tuple, 'product of zero and infinity')
        return Number.infinity(lhs.base, sign)
    if lhs.is_zero() or rhs.is_zero():
        return Number.zero(lhs.base)
    return Number._finite(lhs.base, sign, _multiply_magnitudes(lhs.sequence, rhs.sequence))


def negate(value):
    '''Return the number with the opposite sign.  Zero stays positive.'''
    _check_operands((OP_NEGATE, value), value)
    if value.is_zero():
        return value
    return Number._make((value.base, value.sign.negate(), value.sequence))


def absolute_value(value):
    _check_operands((OP_ABS, value), value)
    if value.sign is Sign.POSITIVE:
        return value
    return Number._make((value.base, Sign.POSITIVE, value.sequence))


def complement(value):
    '''Return the diminished radix complement: every digit replaced by base - 1 - digit.
    The result is positive.'''
    op_tuple = (OP_COMPLEMENT, value)
    _check_operands(op_tuple, value)
    if value.is_infinity():
        raise UndefinedResult(op_tuple, 'the complement of an infinity is undefined')
    return Number._finite(value.base, Sign.POSITIVE, value.sequence.complement())


def _shift_count(op_tuple, value, count):
    '''Return the shift count as an int.'''
    if isinstance(count, Number):
        if count.base != value.base:
            raise DigitBaseMismatch(op_tuple, f'bases {value.base} and {count.base} differ')
        if not count.is_integer():
            raise UndefinedOperation(op_tuple, 'shift count must be an integer')
        return int(count)
    if isinstance(count, bool):
        raise InvalidArgument(op_tuple, 'shift count must be an integer')
    if isinstance(count, int):
        return count
    if isinstance(count, (float, Decimal, Fraction)):
        try:
            integral = count == int(count)
        except (OverflowError, ValueError):
            integral = False
        if not integral:
            raise UndefinedOperation(op_tuple, 'shift count must be an integer')
        return int(count)
    raise InvalidArgument(op_tuple, 'shift count must be an integer')


def _shift(op_tuple, value, count):
    _check_operands(op_tuple, value)
    count = _shift_count(op_tuple, value, count)
    if value.is_infinity() or value.is_zero() or count == 0:
        return value
    return Number._finite(value.base, value.sign, value.sequence.shift(count))


def shift_left(value, count=1):
    '''Return value times base^count.  A negative count shifts right.'''
    return _shift((OP_SHIFT_LEFT, value, count), value, count)


def shift_right(value, count=1):
    '''Return value divided by base^count.  A negative count shifts left.'''
    op_tuple = (OP_SHIFT_RIGHT, value, count)
    _check_operands(op_tuple, value)
    return _shift(op_tuple, value, -_shift_count(op_tuple, value, count))


def inc(value):
    '''Return value + 1.'''
    _check_operands((OP_ADD, value), value)
    return add(value, Number.one(value.base))


def dec(value):
    '''Return value - 1.'''
    _check_operands((OP_SUBTRACT, value), value)
    return subtract(value, Number.one(value.base))


def doubling(value):
    '''Return value + value.'''
    return add(value, value)


def truncate(value):
    '''Return the integer part of value, rounding towards zero.  Infinities are returned
    unchanged.'''
    _check_operands((OP_TRUNCATE, value), value)
    if value.is_infinity() or not value.is_fraction():
        return value
    sequence = value.sequence
    ordinals = sequence.window(sequence.highest, 0)
    return Number._finite(value.base, value.sign,
                          DigitSequence.from_window(value.base, ordinals, sequence.highest))
