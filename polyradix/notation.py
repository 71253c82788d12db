#
# Standard and scientific notation
#
# (c) The polyradix authors 2026.  All rights reserved.
#

import re

import attr

from .digits import Sign, numeral_system
from .errors import InvalidArgument, InvalidFormat, OP_FROM_STRING
from .sequence import DigitSequence

__all__ = ('TextFormat', 'DefaultFormat', 'parse', 'parse_standard', 'parse_scientific',
           'parse_infinity', 'standard_regex', 'scientific_regex')


@attr.s(slots=True, kw_only=True)
class TextFormat:
    '''Controls the output of conversion to standard and scientific notation strings.'''

    # The character between the integer and fractional digits.  Parsing accepts both '.'
    # and ','.
    decimal_separator = attr.ib(default='.')
    # The character introducing the exponent in scientific notation.
    exponent_char = attr.ib(default='E')
    # If True, positive numbers are preceded with a '+'.
    force_leading_sign = attr.ib(default=False)
    # If True positive exponents display a '+'.
    force_exp_sign = attr.ib(default=False)
    # The string output for infinity
    inf = attr.ib(default='Infinity')

    def leading_sign(self, sign):
        '''Return the leading sign string.'''
        return '-' if sign is Sign.NEGATIVE else '+' if self.force_leading_sign else ''

    def exponent_str(self, exponent):
        '''Return the formatted exponent, always in decimal.'''
        sign = '-' if exponent < 0 else '+' if self.force_exp_sign else ''
        return f'{sign}{abs(exponent)}'

    def format_standard(self, sign, sequence):
        '''Return the standard notation of a number given as a sign and a digit sequence; a
        sequence of None is infinity.

        The separator is only written when there is a fractional part.
        '''
        if sequence is None:
            return self.leading_sign(sign) + self.inf

        symbols = numeral_system(sequence.base).symbols
        ordinals = sequence.ordinals
        point = sequence.center + 1
        parts = [self.leading_sign(sign)]
        parts.extend(symbols[ordinal] for ordinal in ordinals[:point])
        if point < len(ordinals):
            parts.append(self.decimal_separator)
            parts.extend(symbols[ordinal] for ordinal in ordinals[point:])
        return ''.join(parts)

    def format_scientific(self, sign, sequence):
        '''Return the scientific notation of a number: one non-zero leading digit, the
        remaining significant digits after the separator and the exponent of the leading
        digit.  Zero is output as 0 without an exponent.
        '''
        if sequence is None:
            return self.leading_sign(sign) + self.inf
        if sequence.is_zero():
            return self.leading_sign(sign) + numeral_system(sequence.base).symbols[0]

        symbols = numeral_system(sequence.base).symbols
        ordinals = sequence.ordinals
        # Locate the most significant non-zero digit and drop trailing zeroes
        first = next(index for index, ordinal in enumerate(ordinals) if ordinal)
        last = max(index for index, ordinal in enumerate(ordinals) if ordinal)
        exponent = sequence.center - first
        digits = ''.join(symbols[ordinal] for ordinal in ordinals[first: last + 1])

        parts = [self.leading_sign(sign), digits[0]]
        if len(digits) > 1:
            parts.extend((self.decimal_separator, digits[1:]))
        parts.append(self.exponent_char)
        parts.append(self.exponent_str(exponent))
        return ''.join(parts)


DefaultFormat = TextFormat()


#
# Parsing
#

INFINITY_REGEX = re.compile('([-+]?)(inf(inity)?)', re.IGNORECASE)

# Per-base compiled patterns, built on first use.  Like the numeral system cache, racing
# threads may both compile a pattern; setdefault keeps the first.
_standard_regexes = {}
_scientific_regexes = {}


def _symbol_class(base):
    return '[' + re.escape(numeral_system(base).symbols) + ']'


def standard_regex(base):
    '''Return the compiled standard notation pattern of a base:

        sign[opt] digits (separator digits)[opt]
    '''
    regex = _standard_regexes.get(base)
    if regex is None:
        symbols = _symbol_class(base)
        regex = _standard_regexes.setdefault(base, re.compile(
            # sign[opt] integer-digits
            f'([-+]?)({symbols}+)'
            # separator fraction-digits   [opt]
            f'(?:[.,]({symbols}+))?'
        ))
    return regex


def scientific_regex(base):
    '''Return the compiled scientific notation pattern of a base:

        sign[opt] digit (separator digits[opt])[opt] e exp-sign[opt] dec-exponent
    '''
    regex = _scientific_regexes.get(base)
    if regex is None:
        symbols = _symbol_class(base)
        regex = _scientific_regexes.setdefault(base, re.compile(
            # sign[opt] leading-digit
            f'([-+]?)({symbols})'
            # separator fraction-digits[opt]   [opt]
            f'(?:[.,]({symbols}*))?'
            # e exp-sign[opt] dec-exponent
            '[eE]([-+]?[0-9]+)'
        ))
    return regex


def _check_string(string, base):
    if not isinstance(string, str):
        raise InvalidArgument((OP_FROM_STRING, string, base), 'a string is required')


def _ordinals(base, digits):
    system = numeral_system(base)
    return tuple(system.ordinal_of(symbol) for symbol in digits)


def parse_standard(base, string):
    '''Parse standard notation.  Returns a (sign, sequence) pair; the sequence is trimmed.

    Raises InvalidFormat if the string does not match the pattern of the base.
    '''
    _check_string(string, base)
    match = standard_regex(base).fullmatch(string)
    if match is None:
        raise InvalidFormat((OP_FROM_STRING, string, base),
                            f'invalid standard notation in base {base}: {string!r}')
    sign_str, integer, fraction = match.groups()
    ordinals = _ordinals(base, integer + (fraction or ''))
    sequence = DigitSequence.from_window(base, ordinals, len(integer) - 1).trim()
    return Sign.from_symbol(sign_str), sequence


def parse_scientific(base, string):
    '''Parse scientific notation.  The mantissa is placed with its leading digit in the ones
    place and the center then shifted by the exponent.  Returns a (sign, sequence) pair.

    Raises InvalidFormat if the string does not match the pattern of the base.
    '''
    _check_string(string, base)
    match = scientific_regex(base).fullmatch(string)
    if match is None:
        raise InvalidFormat((OP_FROM_STRING, string, base),
                            f'invalid scientific notation in base {base}: {string!r}')
    sign_str, leading, fraction, exponent = match.groups()
    ordinals = _ordinals(base, leading + (fraction or ''))
    sequence = DigitSequence.from_window(base, ordinals, 0).shift(int(exponent)).trim()
    return Sign.from_symbol(sign_str), sequence


def parse_infinity(string):
    '''Return the sign of an infinity literal, or None if string is not one.'''
    match = INFINITY_REGEX.fullmatch(string)
    if match is None:
        return None
    return Sign.from_symbol(match.group(1))


def parse(base, string):
    '''Parse standard notation, then scientific notation, then an infinity literal.
    Returns a (sign, sequence) pair where a sequence of None is infinity.

    Where a string can be read both ways, because letters of the exponent marker or the
    infinity literal are digits of the base, the standard reading wins.
    '''
    _check_string(string, base)
    if standard_regex(base).fullmatch(string):
        return parse_standard(base, string)
    if scientific_regex(base).fullmatch(string):
        return parse_scientific(base, string)
    sign = parse_infinity(string)
    if sign is None:
        raise InvalidFormat((OP_FROM_STRING, string, base),
                            f'invalid number in base {base}: {string!r}')
    return sign, None
