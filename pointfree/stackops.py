# Data and return stack manipulation words.
#
# Stack effects are noted as ( before -- after ) with the top of stack on the
# right. Every word consuming values checks the depth first (in safe mode).

from .imports import *
from .errors import IllegalArgError, StkUnderflowError
from .value import truthy
from .word import Compiled, Literal, primitive

def _need(c, stack, n):
    if c.safe: stack.need(n)

# nop: no stack nor side effect.
@primitive('nop')
def nop(c): return c

def push(*values) -> Compiled:
    """Push the given values verbatim, even words.

    ( -- ...values )
    """
    return Compiled(tuple(Literal(v) for v in values), name='push')

# ( -- n ) pushes the d-stack depth
@primitive('dsp')
def dsp(c):
    c.ds.push(len(c.ds))
    return c

@primitive('pick')
def pick(c):
    """Use TOS as index to copy a deeper value as new TOS. 0 is the value
    right below the index.

    ( ... x -- ... stack[x] )
    """
    c.need(1)
    stack = c.ds
    x = stack.pop()
    i = len(stack) - 1 - x
    if c.safe:
        if x < 0: raise IllegalArgError(f"negative pick index: {x}")
        if i < 0: raise StkUnderflowError(f"stack underflow: pick {x}")
    stack.push(stack[i])
    return c

# ( x -- )
@primitive('drop')
def drop(c):
    c.need(1)
    c.ds.pop()
    return c

# ( x y -- )
@primitive('drop2')
def drop2(c):
    c.need(2)
    del c.ds[-2:]
    return c

# ( x -- ) if x is truthy, else ( x -- x )
@primitive('dropif')
def dropif(c):
    c.need(1)
    if truthy(c.ds[-1]): c.ds.pop()
    return c

# ( x -- x x )
@primitive('dup')
def dup(c):
    c.need(1)
    c.ds.push(c.ds[-1])
    return c

# ( x y -- x y x y )
@primitive('dup2')
def dup2(c):
    c.need(2)
    stack = c.ds
    stack.push(stack[-2], stack[-1])
    return c

# ( x -- x x ) if x is truthy, else ( x -- x )
@primitive('dupif')
def dupif(c):
    c.need(1)
    x = c.ds[-1]
    if truthy(x): c.ds.push(x)
    return c

def _swap(stackName):
    def _swapStk(c):
        stack = getattr(c, stackName)
        _need(c, stack, 2)
        stack[-1], stack[-2] = stack[-2], stack[-1]
        return c
    return _swapStk

def _swap2(stackName):
    def _swapStk2(c):
        stack = getattr(c, stackName)
        _need(c, stack, 4)
        stack[-4:] = stack[-2:] + stack[-4:-2]
        return c
    return _swapStk2

# ( x y -- y x )
swap = primitive('swap')(_swap('ds'))
# ( a b c d -- c d a b )
swap2 = primitive('swap2')(_swap2('ds'))

# ( x y -- y )
@primitive('nip')
def nip(c):
    c.need(2)
    del c.ds[-2]
    return c

# ( x y -- y x y )
@primitive('tuck')
def tuck(c):
    c.need(2)
    stack = c.ds
    stack.insert(len(stack) - 2, stack[-1])
    return c

# ( x y z -- y z x )
@primitive('rot')
def rot(c):
    c.need(3)
    stack = c.ds
    stack.push(stack.pop(-3))
    return c

# ( x y z -- z x y )
@primitive('invrot')
def invrot(c):
    c.need(3)
    stack = c.ds
    z = stack.pop()
    stack.insert(len(stack) - 2, z)
    return c

# ( x y -- x y x )
@primitive('over')
def over(c):
    c.need(2)
    c.ds.push(c.ds[-2])
    return c

##########################
# R-Stack ops
#
# The r-stack is scratch space to park values, e.g. across a loop.

# ( -- n ) pushes the r-stack depth onto the d-stack
@primitive('rsp')
def rsp(c):
    c.ds.push(len(c.rs))
    return c

@primitive('rdrop')
def rdrop(c):
    c.needR(1)
    c.rs.pop()
    return c

@primitive('rdrop2')
def rdrop2(c):
    c.needR(2)
    del c.rs[-2:]
    return c

# d( x -- ) r( -- x )
@primitive('movdr')
def movdr(c):
    c.need(1)
    c.rs.push(c.ds.pop())
    return c

# r( x -- ) d( -- x )
@primitive('movrd')
def movrd(c):
    c.needR(1)
    c.ds.push(c.rs.pop())
    return c

# d( x -- x ) r( -- x )
@primitive('cpdr')
def cpdr(c):
    c.need(1)
    c.rs.push(c.ds[-1])
    return c

# r( x -- x ) d( -- x )
@primitive('cprd')
def cprd(c):
    c.needR(1)
    c.ds.push(c.rs[-1])
    return c

def _mov2(src, dst):
    def _movStk2(c):
        s, d = getattr(c, src), getattr(c, dst)
        _need(c, s, 2)
        d.push(s[-2], s[-1])
        del s[-2:]
        return c
    return _movStk2

def _cp2(src, dst):
    def _cpStk2(c):
        s, d = getattr(c, src), getattr(c, dst)
        _need(c, s, 2)
        d.push(s[-2], s[-1])
        return c
    return _cpStk2

movdr2 = primitive('movdr2')(_mov2('ds', 'rs'))
movrd2 = primitive('movrd2')(_mov2('rs', 'ds'))
cpdr2 = primitive('cpdr2')(_cp2('ds', 'rs'))
cprd2 = primitive('cprd2')(_cp2('rs', 'ds'))

rswap = primitive('rswap')(_swap('rs'))
rswap2 = primitive('rswap2')(_swap2('rs'))

# Like inc / dec, for the r-stack TOS.
@primitive('rinc')
def rinc(c):
    c.needR(1)
    c.rs[-1] += 1
    return c

@primitive('rdec')
def rdec(c):
    c.needR(1)
    c.rs[-1] -= 1
    return c
