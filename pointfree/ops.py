# Operator generators and the math, binary and logic words built with them.
#
# Binary operators receive their arguments as (TOS, TOS-1), i.e. (b, a) for a
# stack ( a b -- ). Programs read left to right, so [5, 3, sub] is 5 - 3.

from .imports import *
from .errors import IllegalArgError
from .value import Kind, kindOf, truthy, isSeq
from .word import Primitive, register

def op1(f: Callable[[Any], Any], name: str = None) -> Primitive:
    """Replace TOS with f(TOS).

    ( x -- f(x) )
    """
    def _op1(c):
        c.need(1)
        stack = c.ds
        stack[-1] = f(stack[-1])
        return c
    return Primitive(_op1, name)

def op2(f: Callable[[Any, Any], Any], name: str = None) -> Primitive:
    """Replace the top two values with f(b, a).

    ( a b -- f(b, a) )
    """
    def _op2(c):
        c.need(2)
        stack = c.ds
        b = stack.pop()
        stack[-1] = f(b, stack[-1])
        return c
    return Primitive(_op2, name)

def op2v(f: Callable[[Any, Any], Any], name: str = None) -> Primitive:
    """Like op2, for sequences. Either a or b can be a scalar, but not both.

    Two sequences are combined element-wise up to the shorter length, a
    scalar is applied to every element of the other sequence. Always creates
    a new list.

    ( a b -- [...] )
    """
    def _op2v(c):
        c.need(2)
        stack = c.ds
        b = stack.pop()
        a = stack[-1]
        isa, isb = isSeq(a), isSeq(b)
        if isa and isb:
            out = [f(b[i], a[i]) for i in range(min(len(a), len(b)))]
        elif isb:
            out = [f(x, a) for x in b]
        elif isa:
            out = [f(b, x) for x in a]
        else:
            raise IllegalArgError("at least one arg must be a sequence")
        stack[-1] = out
        return c
    return Primitive(_op2v, name)

# Alternate names of the generic operators.
maptos = op1
map2 = op2

##########################
# Math

# ( x y -- x+y )
add = register('add', op2(lambda b, a: a + b, 'add'))
# ( x y -- x-y )
sub = register('sub', op2(lambda b, a: a - b, 'sub'))
# ( x y -- x*y )
mul = register('mul', op2(lambda b, a: a * b, 'mul'))
# ( x y -- x/y )
div = register('div', op2(lambda b, a: a / b, 'div'))

def _mod(b, a):
    # truncated: the result has the sign of the dividend
    if isinstance(a, int) and isinstance(b, int):
        r = abs(a) % abs(b)
        return -r if a < 0 else r
    return math.fmod(a, b)

# ( x y -- x%y )
mod = register('mod', op2(_mod, 'mod'))
min_ = register('min', op2(min, 'min'))
max_ = register('max', op2(max, 'max'))
# ( x -- x+1 )
inc = register('inc', op1(lambda x: x + 1, 'inc'))
# ( x -- x-1 )
dec = register('dec', op1(lambda x: x - 1, 'dec'))
neg = register('neg', op1(operator.neg, 'neg'))
# ( x y -- pow(x,y) )
pow_ = register('pow', op2(lambda b, a: a ** b, 'pow'))
sqrt = register('sqrt', op1(math.sqrt, 'sqrt'))
log = register('log', op1(math.log, 'log'))
sin = register('sin', op1(math.sin, 'sin'))
cos = register('cos', op1(math.cos, 'cos'))
# ( x y -- atan2(y,x) ), same arg order as every other op2
atan2 = register('atan2', op2(math.atan2, 'atan2'))
even = register('even', op1(lambda x: not (int(x) & 1), 'even'))
odd = register('odd', op1(lambda x: bool(int(x) & 1), 'odd'))

##########################
# Binary ops (integers)

bitand = register('bitand', op2(lambda b, a: int(a) & int(b), 'bitand'))
bitor = register('bitor', op2(lambda b, a: int(a) | int(b), 'bitor'))
bitxor = register('bitxor', op2(lambda b, a: int(a) ^ int(b), 'bitxor'))
bitnot = register('bitnot', op1(lambda x: ~int(x), 'bitnot'))
# ( x y -- x<<y )
lsl = register('lsl', op2(lambda b, a: int(a) << int(b), 'lsl'))
# ( x y -- x>>y ), sign preserving
lsr = register('lsr', op2(lambda b, a: int(a) >> int(b), 'lsr'))
# ( x y -- x>>>y ), x as unsigned 32bit
lsru = register('lsru', op2(lambda b, a: (int(a) & U32_MASK) >> (int(b) & 31), 'lsru'))

##########################
# Logic ops

_REF_KINDS = {Kind.SEQ, Kind.MAP, Kind.WORD}

def _eq(b, a):
    ka, kb = kindOf(a), kindOf(b)
    if ka is not kb: return False
    if ka in _REF_KINDS: return a is b
    return a == b

# ( x y -- bool ), identity for sequences, mappings and words
eq = register('eq', op2(_eq, 'eq'))
# ( x y -- bool ), structural equality
equiv = register('equiv', op2(lambda b, a: a == b, 'equiv'))
neq = register('neq', op2(lambda b, a: not _eq(b, a), 'neq'))
and_ = register('and', op2(lambda b, a: truthy(a) and truthy(b), 'and'))
or_ = register('or', op2(lambda b, a: truthy(a) or truthy(b), 'or'))
not_ = register('not', op1(lambda x: not truthy(x), 'not'))
lt = register('lt', op2(lambda b, a: a < b, 'lt'))
gt = register('gt', op2(lambda b, a: a > b, 'gt'))
lteq = register('lteq', op2(lambda b, a: a <= b, 'lteq'))
gteq = register('gteq', op2(lambda b, a: a >= b, 'gteq'))
iszero = register('iszero', op1(lambda x: kindOf(x) is Kind.NUMBER and x == 0, 'iszero'))
ispos = register('ispos', op1(lambda x: x > 0, 'ispos'))
isneg = register('isneg', op1(lambda x: x < 0, 'isneg'))
isnull = register('isnull', op1(lambda x: x is None, 'isnull'))
