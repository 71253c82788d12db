#
# Exceptions raised by the number engine
#
# (c) The polyradix authors 2026.  All rights reserved.
#

__all__ = ('NumberError', 'InvalidArgument', 'InvalidSymbol', 'InvalidOrdinal',
           'UnsupportedBase', 'DigitBaseMismatch', 'UndefinedResult', 'UndefinedOperation',
           'InvalidFormat',
           'OP_ADD', 'OP_SUBTRACT', 'OP_MULTIPLY', 'OP_NEGATE', 'OP_ABS', 'OP_COMPLEMENT',
           'OP_SHIFT_LEFT', 'OP_SHIFT_RIGHT', 'OP_COMPARE', 'OP_DIGIT_AT', 'OP_FROM_STRING',
           'OP_FROM_VALUE', 'OP_TO_INT', 'OP_CHAR_TO_DIGIT', 'OP_ORDINAL_TO_DIGIT',
           'OP_NUMERAL_SYSTEM', 'OP_CONSTRUCT', 'OP_TRUNCATE')


# Operation names
OP_ADD = 'add'
OP_SUBTRACT = 'subtract'
OP_MULTIPLY = 'multiply'
OP_NEGATE = 'negate'
OP_ABS = 'absolute_value'
OP_COMPLEMENT = 'complement'
OP_SHIFT_LEFT = 'shift_left'
OP_SHIFT_RIGHT = 'shift_right'
OP_COMPARE = 'compare'
OP_DIGIT_AT = 'digit_at'
OP_FROM_STRING = 'from_string'
OP_FROM_VALUE = 'from_value'
OP_TO_INT = 'to_int'
OP_CHAR_TO_DIGIT = 'char_to_digit'
OP_ORDINAL_TO_DIGIT = 'ordinal_to_digit'
OP_NUMERAL_SYSTEM = 'numeral_system'
OP_CONSTRUCT = 'construct'
OP_TRUNCATE = 'truncate'


class NumberError(ArithmeticError):
    '''All exceptions raised by this package subclass from this.

    NumberError expects two arguments:

         def __init__(self, op_tuple, message):

    op_tuple is a tuple of the operation name and the operands that caused the error.
    message is a human-readable description.

    Every error is fail-fast: the operation is abandoned and no partial result exists.
    Exceptions that are also a builtin error class (for example ValueError) list this
    class first so that op_tuple and message resolve here.
    '''

    def __init__(self, op_tuple, message=''):
        super().__init__(op_tuple, message)

    @property
    def op_tuple(self):
        return self.args[0]

    @property
    def operation(self):
        return self.op_tuple[0]

    @property
    def message(self):
        return self.args[1]

    def __str__(self):
        return self.message or f'{self.__class__.__name__} in {self.operation}'


#
# InvalidArgument - sub-exceptions are InvalidSymbol, InvalidOrdinal, UnsupportedBase
#

class InvalidArgument(NumberError, ValueError):
    '''Raised on a missing operand, a missing digit or malformed constructor input.'''


class InvalidSymbol(InvalidArgument):
    '''Raised when a symbol is not part of a base's alphabet.'''


class InvalidOrdinal(InvalidArgument):
    '''Raised when an ordinal is negative or not less than the base.'''


class UnsupportedBase(InvalidArgument):
    '''Raised for a base outside [MIN_BASE, MAX_BASE].'''


class DigitBaseMismatch(NumberError, ValueError):
    '''Raised when two operands of different bases meet in an operation that needs equal
    bases.  There is no implicit conversion between bases.'''


class UndefinedResult(NumberError):
    '''Raised when the mathematical result is indeterminate, for example adding two
    differently-signed infinities or multiplying zero by infinity.'''


class UndefinedOperation(NumberError):
    '''Raised when an operand is in a state the operation cannot handle, for example a
    fractional shift count.'''


class InvalidFormat(NumberError, ValueError):
    '''Raised when a string does not match the notation being parsed.'''
