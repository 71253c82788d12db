#
# Digit sequences: the magnitude of a number as an owned buffer of digits
#
# (c) The polyradix authors 2026.  All rights reserved.
#

from .digits import numeral_system
from .errors import InvalidArgument, DigitBaseMismatch, OP_ADD, OP_MULTIPLY

__all__ = ('DigitSequence', 'DigitNode', 'link_nodes', 'clone_linked_list',
           'clone_left_tail', 'clone_right_tail', 'move_left_synchronously',
           'move_right_synchronously', 'add_digits', 'multiply_digits')


class DigitSequence:
    '''Internal Representation
       -----------------------

    The magnitude of a finite number is stored as a tuple of ordinals, most significant
    first, together with the index of the center digit.  The center is the ones place.
    Every digit has a position relative to the center:

            value = sum(ordinal * base^position)

    where the digit at index i has position (center - i).  So positions greater than
    zero are the integer digits to the left of the center and negative positions are the
    fractional digits to the right of it.  Positions outside the stored range are zero.

    Sequences are immutable.  Operations return new sequences and never share a mutable
    buffer with their operands.  A canonical sequence has no leading zero to the left of
    the center and no trailing zero to the right of it; zero is the single digit 0.
    '''

    __slots__ = ('base', 'ordinals', 'center')

    def __init__(self, base, ordinals, center):
        ordinals = tuple(ordinals)
        if not ordinals:
            raise InvalidArgument(('sequence', base, ordinals), 'a sequence needs a digit')
        if not 0 <= center < len(ordinals):
            raise InvalidArgument(('sequence', base, ordinals, center),
                                  f'center {center} out of range')
        system = numeral_system(base)
        for ordinal in ordinals:
            system.ordinal_to_digit(ordinal)
        self.base = base
        self.ordinals = ordinals
        self.center = center

    @classmethod
    def _trusted(cls, base, ordinals, center):
        '''Construct without validation; ordinals must already be a valid tuple.'''
        result = object.__new__(cls)
        result.base = base
        result.ordinals = ordinals
        result.center = center
        return result

    @classmethod
    def zero(cls, base):
        numeral_system(base)
        return cls._trusted(base, (0, ), 0)

    @classmethod
    def from_digits(cls, digits, center=None):
        '''Build from Digit objects, most significant first.  The center defaults to the last
        digit, i.e. an integer.'''
        digits = list(digits)
        if not digits:
            raise InvalidArgument(('sequence', digits), 'a sequence needs a digit')
        base = digits[0].base
        if any(digit.base != base for digit in digits):
            raise DigitBaseMismatch(('sequence', digits), 'digits of different bases')
        if center is None:
            center = len(digits) - 1
        return cls(base, (digit.ordinal for digit in digits), center)

    @classmethod
    def from_window(cls, base, ordinals, highest):
        '''Build from ordinals covering positions highest down to highest - len + 1.  The
        window must contain position zero.'''
        return cls._trusted(base, tuple(ordinals), highest)

    ##
    ## Shape
    ##

    @property
    def highest(self):
        '''Position of the most significant stored digit.'''
        return self.center

    @property
    def lowest(self):
        '''Position of the least significant stored digit.'''
        return self.center - len(self.ordinals) + 1

    @property
    def integer_length(self):
        return self.center + 1

    @property
    def fraction_length(self):
        return len(self.ordinals) - self.center - 1

    def __len__(self):
        return len(self.ordinals)

    def is_zero(self):
        return not any(self.ordinals)

    def is_fraction(self):
        return self.fraction_length > 0

    def is_canonical(self):
        ordinals = self.ordinals
        if self.center > 0 and ordinals[0] == 0:
            return False
        if self.fraction_length and ordinals[-1] == 0:
            return False
        return True

    ##
    ## Digit access
    ##

    def ordinal_at(self, position):
        '''Return the ordinal at a position relative to the center; zero if not stored.'''
        index = self.center - position
        if 0 <= index < len(self.ordinals):
            return self.ordinals[index]
        return 0

    def digit_at(self, position):
        return numeral_system(self.base).digits[self.ordinal_at(position)]

    def digits(self):
        '''Return the stored digits, most significant first.'''
        system_digits = numeral_system(self.base).digits
        return [system_digits[ordinal] for ordinal in self.ordinals]

    def integer_digits(self):
        return self.digits()[:self.center + 1]

    def fraction_digits(self):
        return self.digits()[self.center + 1:]

    def window(self, highest, lowest):
        '''Return the ordinals for positions highest down to lowest, zero padded.'''
        return [self.ordinal_at(position) for position in range(highest, lowest - 1, -1)]

    ##
    ## Nodes
    ##

    def center_node(self):
        return DigitNode(self, self.center)

    def leftmost_node(self):
        return DigitNode(self, 0)

    def rightmost_node(self):
        return DigitNode(self, len(self.ordinals) - 1)

    def node_at(self, position):
        '''Return the node at a position, or None if the position is not stored.'''
        index = self.center - position
        if 0 <= index < len(self.ordinals):
            return DigitNode(self, index)
        return None

    ##
    ## Canonical form
    ##

    def trim_left(self):
        '''Return a copy without leading zeros.  Never trims past the center.'''
        ordinals = self.ordinals
        start = 0
        while start < self.center and ordinals[start] == 0:
            start += 1
        if start == 0:
            return self
        return DigitSequence._trusted(self.base, ordinals[start:], self.center - start)

    def trim_right(self):
        '''Return a copy without trailing zeros.  Never trims past the center.'''
        ordinals = self.ordinals
        stop = len(ordinals)
        while stop - 1 > self.center and ordinals[stop - 1] == 0:
            stop -= 1
        if stop == len(ordinals):
            return self
        return DigitSequence._trusted(self.base, ordinals[:stop], self.center)

    def trim(self):
        return self.trim_left().trim_right()

    def widen(self, highest, lowest):
        '''Return a copy padded with zeros to cover positions highest to lowest.'''
        highest = max(highest, self.highest)
        lowest = min(lowest, self.lowest)
        return DigitSequence._trusted(self.base, tuple(self.window(highest, lowest)), highest)

    ##
    ## Transformations
    ##

    def clone(self):
        return DigitSequence._trusted(self.base, tuple(self.ordinals), self.center)

    def shift(self, count):
        '''Return the sequence multiplied by base^count, i.e. with the center moved count
        places to the right (left if count is negative).  Zero digits are synthesized as
        needed.  The result is not trimmed.'''
        ordinals = self.ordinals
        center = self.center + count
        if center < 0:
            ordinals = (0, ) * -center + ordinals
            center = 0
        elif center >= len(ordinals):
            ordinals = ordinals + (0, ) * (center - len(ordinals) + 1)
        return DigitSequence._trusted(self.base, ordinals, center)

    def complement(self):
        '''Return the diminished radix complement of every stored digit.  The result is not
        trimmed.'''
        top = self.base - 1
        return DigitSequence._trusted(self.base, tuple(top - ordinal for ordinal in self.ordinals),
                                      self.center)

    ##
    ## Python support
    ##

    def __eq__(self, other):
        if not isinstance(other, DigitSequence):
            return NotImplemented
        return (self.base, self.center, self.ordinals) == (other.base, other.center,
                                                           other.ordinals)

    def __hash__(self):
        return hash((self.base, self.center, self.ordinals))

    def __iter__(self):
        return iter(self.digits())

    def __repr__(self):
        symbols = numeral_system(self.base).symbols
        text = ''.join(symbols[ordinal] for ordinal in self.ordinals)
        point = self.center + 1
        if point < len(text):
            text = text[:point] + '.' + text[point:]
        return f'DigitSequence(base={self.base}, {text!r})'


class DigitNode:
    '''A read-only cursor on one digit of a sequence.'''

    __slots__ = ('sequence', 'index')

    def __init__(self, sequence, index):
        if not 0 <= index < len(sequence.ordinals):
            raise InvalidArgument(('node', sequence, index), f'index {index} out of range')
        self.sequence = sequence
        self.index = index

    @property
    def position(self):
        return self.sequence.center - self.index

    def is_center(self):
        return self.index == self.sequence.center

    def digit(self):
        return numeral_system(self.sequence.base).digits[self.sequence.ordinals[self.index]]

    def left_node(self):
        if self.index == 0:
            return None
        return DigitNode(self.sequence, self.index - 1)

    def right_node(self):
        if self.index + 1 == len(self.sequence.ordinals):
            return None
        return DigitNode(self.sequence, self.index + 1)

    def __eq__(self, other):
        if not isinstance(other, DigitNode):
            return NotImplemented
        return self.sequence is other.sequence and self.index == other.index

    def __hash__(self):
        return hash((id(self.sequence), self.index))

    def __repr__(self):
        return f'DigitNode({self.digit()}, position={self.position})'


def _sub_sequence(sequence, start, stop, node_index):
    '''Copy ordinals[start:stop].  The center is kept if it lies inside the copy, otherwise
    the node at node_index becomes the center.  Returns the clone of that node.'''
    center = sequence.center if start <= sequence.center < stop else node_index
    result = DigitSequence._trusted(sequence.base, tuple(sequence.ordinals[start:stop]),
                                    center - start)
    return DigitNode(result, node_index - start)


def clone_linked_list(node):
    '''Return the clone of node in an independent copy of its whole sequence.'''
    return DigitNode(node.sequence.clone(), node.index)


def clone_left_tail(node):
    '''Return the clone of node in an independent copy of node and everything to its left.'''
    return _sub_sequence(node.sequence, 0, node.index + 1, node.index)


def clone_right_tail(node):
    '''Return the clone of node in an independent copy of node and everything to its right.'''
    return _sub_sequence(node.sequence, node.index, len(node.sequence.ordinals), node.index)


def link_nodes(left, right):
    '''Return a new sequence of the chain ending at left followed by the chain starting at
    right.  The center is that of left's sequence if it is kept, otherwise left.

    Both directions are joined in a single step; the operands are not modified.
    '''
    if left.sequence.base != right.sequence.base:
        raise DigitBaseMismatch(('link', left, right), 'cannot link digits of different bases')
    left_tail = clone_left_tail(left)
    right_tail = clone_right_tail(right)
    ordinals = left_tail.sequence.ordinals + right_tail.sequence.ordinals
    return DigitSequence._trusted(left.sequence.base, ordinals, left_tail.sequence.center)


def _move_synchronously(node1, node2, step):
    position1 = node1.position
    position2 = node2.position
    sequence1 = node1.sequence
    sequence2 = node2.sequence
    while True:
        if sequence1.node_at(position1) is None and sequence2.node_at(position2) is None:
            return
        yield sequence1.digit_at(position1), sequence2.digit_at(position2)
        position1 += step
        position2 += step


def move_left_synchronously(node1, node2):
    '''Walk two sequences in lock step from the given nodes towards the more significant
    digits.  Yields digit pairs; a sequence that runs out first contributes zero digits.'''
    return _move_synchronously(node1, node2, 1)


def move_right_synchronously(node1, node2):
    '''Walk two sequences in lock step from the given nodes towards the less significant
    digits.  Yields digit pairs; a sequence that runs out first contributes zero digits.'''
    return _move_synchronously(node1, node2, -1)


def add_digits(lhs, rhs, carry=None):
    '''Return the pair (result, carry) of adding two digits of the same base and an optional
    carry digit.'''
    if lhs is None or rhs is None:
        raise InvalidArgument((OP_ADD, lhs, rhs), 'no digit was specified')
    if lhs.base != rhs.base or (carry is not None and carry.base != lhs.base):
        raise DigitBaseMismatch((OP_ADD, lhs, rhs), 'digits of different bases')
    digits = numeral_system(lhs.base).digits
    total = lhs.ordinal + rhs.ordinal + (carry.ordinal if carry else 0)
    high, low = divmod(total, lhs.base)
    return digits[low], digits[high]


def multiply_digits(lhs, rhs, carry=None):
    '''Return the pair (result, carry) of multiplying two digits of the same base and adding
    an optional carry digit.'''
    if lhs is None or rhs is None:
        raise InvalidArgument((OP_MULTIPLY, lhs, rhs), 'no digit was specified')
    if lhs.base != rhs.base or (carry is not None and carry.base != lhs.base):
        raise DigitBaseMismatch((OP_MULTIPLY, lhs, rhs), 'digits of different bases')
    digits = numeral_system(lhs.base).digits
    total = lhs.ordinal * rhs.ordinal + (carry.ordinal if carry else 0)
    high, low = divmod(total, lhs.base)
    return digits[low], digits[high]
