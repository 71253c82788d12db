#
# Per-thread configuration
#
# (c) The polyradix authors 2026.  All rights reserved.
#

import threading

import attr

from .digits import check_base
from .notation import DefaultFormat, TextFormat

__all__ = ('Context', 'DefaultContext', 'get_context', 'set_context', 'LocalContext',
           'local_context')


class Context:
    '''The configuration for operations that are not given an explicit base or format.
    Carries the default base for parsing and the text format for output.'''

    __slots__ = ('default_base', 'text_format')

    def __init__(self, *, default_base=10, text_format=None):
        '''default_base is the base strings are parsed in when none is given.  text_format
        is the TextFormat used by str() and to_string().
        '''
        text_format = text_format or DefaultFormat
        if not isinstance(text_format, TextFormat):
            raise TypeError('text_format must be a TextFormat instance')
        self.default_base = check_base(default_base)
        self.text_format = text_format

    def copy(self):
        '''Return a copy of the context.'''
        # The text format is mutable so it is copied too
        return Context(default_base=self.default_base,
                       text_format=attr.evolve(self.text_format))

    def __repr__(self):
        return f'<Context default_base={self.default_base} text_format={self.text_format!r}>'


DefaultContext = Context()
tls = threading.local()


def get_context():
    '''Return the current thread's context.  A thread starts with a copy of DefaultContext.'''
    context = getattr(tls, 'context', None)
    if context is None:
        context = tls.context = DefaultContext.copy()
    return context


def set_context(context):
    '''Sets the current thread's context to context (not a copy of it).'''
    if not isinstance(context, Context):
        raise TypeError('context must be a Context instance')
    tls.context = context


class LocalContext:
    '''Within the with-statement, parse in a different default base or print with a different
    text format.

    The thread's context is replaced by a copy of context, or of the current context when
    none is given, and the copy is returned so it can be changed freely.  The previous
    context is restored on exit, also when an exception is raised.
    '''

    def __init__(self, context=None):
        self.context = context
        self.previous = None

    def __enter__(self):
        self.previous = get_context()
        local = (self.context or self.previous).copy()
        set_context(local)
        return local

    def __exit__(self, etype, value, traceback):
        set_context(self.previous)


local_context = LocalContext
