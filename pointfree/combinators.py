# Higher order words: conditionals, loops and sequence iteration.
#
# Words/quotations given when building a combinator are compiled once, right
# then. Quotations taken from the stack at runtime are compiled per call.

from .imports import *
from .errors import IllegalArgError, NoMatchingCaseError
from .value import truthy, isSeq
from .word import Primitive, asWord, compileProgram, primitive, register
from .machine import run
from .stackops import nop, invrot

def cond(then, else_=nop) -> Primitive:
    """Pop TOS and run `then` if it was truthy, else run `else_`.

    The condition itself is not part of this word, it must be computed
    beforehand:

    run([x, 0, gt, cond(["pos"], ["neg"])])

    ( x -- ? )
    """
    _then, _else = asWord(then), asWord(else_)
    def _cond(c):
        c.need(1)
        return (_then if truthy(c.ds.pop()) else _else)(c)
    return Primitive(_cond, 'cond')

def cases(caseMap: Mapping) -> Primitive:
    """Pop TOS and run the case with that key.

    If no case matches and there is a `default` case, TOS is pushed back and
    `default` runs. Without a default case NoMatchingCaseError is raised.

    ( x -- ? )
    """
    compiled = {k: asWord(v) for k, v in caseMap.items()}
    default = compiled.get('default')
    def _cases(c):
        c.need(1)
        stack = c.ds
        k = stack.pop()
        if isinstance(k, Hashable) and k in compiled:
            return compiled[k](c)
        if default is not None:
            stack.push(k)
            return default(c)
        raise NoMatchingCaseError(f"no matching case for: {k!r}")
    return Primitive(_cases, 'cases')

def loop(test, body) -> Primitive:
    """Run `test`, pop its result and stop if falsy, else run `body` and
    repeat. Never terminates if the test never fails.

    run([loop([dup, ispos], [dup, print_, dec])], ctx([3]))
    # 3
    # 2
    # 1

    ( ? -- ? )
    """
    _test, _body = asWord(test), asWord(body)
    def _loop(c):
        while True:
            c = _test(c)
            c.need(1)
            if not truthy(c.ds.pop()): return c
            c = _body(c)
    return Primitive(_loop, 'loop')

def dotimes(body=()) -> Primitive:
    """Pop n and run `body` n times, pushing the counter before each run.

    With the default (empty) body this is a range generator:

    run([3, dotimes()])  # ds: [0, 1, 2]

    ( n -- ? )
    """
    _body = asWord(body)
    def _dotimes(c):
        c.need(1)
        n = c.ds.pop()
        i = 0
        while i < n:
            c.ds.push(i)
            c = _body(c)
            i += 1
        return c
    return Primitive(_dotimes, 'dotimes')

##########################
# Sequence iteration


@primitive('mapl')
def mapl(c):
    """Pop a quotation and a sequence, then push each item and run the
    quotation on it. Results are not collected: the quotation may leave any
    number of values, which makes this usable for map, filter, mapcat and
    reduce alike.

    run([[1, 2, 3, 4], [10, mul], mapl])      # ds: [10, 20, 30, 40]
    runU([0, [1, 2, 3, 4], [add], mapl])      # 10
    runU([list_, [1, 2, 3], [10, mul, pushr], mapl])  # [10, 20, 30]

    ( arr q -- ? )
    """
    c.need(2)
    w = asWord(c.ds.pop())
    for x in c.ds.pop():
        c.ds.push(x)
        c = w(c)
    return c

@primitive('mapll')
def mapll(c):
    """Like mapl, but collects the values the quotation left behind into a
    new list.

    The number of collected values is the net stack growth summed over all
    iterations. A quotation dropping its item (filter) adds nothing, one
    duplicating it adds two:

    runU([[1, 2, 3, 4], [dup, even, cond(drop, dup)], mapll])
    # [1, 1, 3, 3]

    ( arr q -- [...] )
    """
    c.need(2)
    w = asWord(c.ds.pop())
    items = c.ds.pop()
    grown = 0
    for x in items:
        depth = len(c.ds)
        c.ds.push(x)
        c = w(c)
        grown += len(c.ds) - depth
    stack = c.ds
    if grown > 0:
        out = stack[len(stack) - grown:]
        del stack[len(stack) - grown:]
    else:
        out = []
    stack.push(out)
    return c

# mapl with a stack layout for reductions:
# ( arr q init -- reduction )
foldl = register('foldl', compileProgram([invrot, mapl], name='foldl'))

# ( w -- ? ) pops a word and runs it.
@primitive('exec')
def exec_(c):
    c.need(1)
    w = c.ds.pop()
    if isSeq(w): raise IllegalArgError("exec needs a word, use execq for quotations")
    return asWord(w)(c)

# ( q -- ? ) pops a quotation and runs it as a (late bound) program.
@primitive('execq')
def execq(c):
    c.need(1)
    return run(c.ds.pop(), c)
