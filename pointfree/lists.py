# Array (list) and object (mapping) words.

from .imports import *
from .errors import IllegalStateError, IllegalArgError, StkUnderflowError
from .value import Kind, kindOf
from .word import compileProgram, primitive, register
from .ops import op1, op2, op2v
from .stackops import swap

# ( -- [] )
@primitive('list')
def list_(c):
    """Push a new empty list.

    Same as a `[]` literal inside a word() definition, which is copied on every
    invocation. Only `push([])` pushes the very same list each time.
    """
    c.ds.push([])
    return c

# ( -- {} ), same reasoning as for `list`.
@primitive('obj')
def obj(c):
    c.ds.push({})
    return c

# ( val arr -- arr )
@primitive('pushl')
def pushl(c):
    c.need(2)
    stack = c.ds
    a = stack.pop()
    a.insert(0, stack.pop())
    stack.push(a)
    return c

# ( arr val -- arr )
@primitive('pushr')
def pushr(c):
    c.need(2)
    stack = c.ds
    v = stack.pop()
    stack[-1].append(v)
    return c

# ( arr -- arr arr[-1] ), removes the last item from arr.
@primitive('popr')
def popr(c):
    c.need(1)
    a = c.ds[-1]
    if not a: raise IllegalStateError("can't pop empty array")
    c.ds.push(a.pop())
    return c

# ( arr -- x arr ) like popr, but leaves the array on top.
pull = register('pull', compileProgram([popr, swap], name='pull'))
pull2 = register('pull2', compileProgram([pull, pull], name='pull2'))
pull3 = register('pull3', compileProgram([pull2, pull], name='pull3'))
pull4 = register('pull4', compileProgram([pull2, pull2], name='pull4'))

vadd = register('vadd', op2v(lambda b, a: a + b, 'vadd'))
vsub = register('vsub', op2v(lambda b, a: a - b, 'vsub'))
vmul = register('vmul', op2v(lambda b, a: a * b, 'vmul'))
vdiv = register('vdiv', op2v(lambda b, a: a / b, 'vdiv'))

# ( arr x -- arr[:x] arr[x:] ), arr is truncated in place.
@primitive('split')
def split(c):
    c.need(2)
    stack = c.ds
    x = stack[-1]
    a = stack[-2]
    stack[-1] = a[x:]
    del a[x:]
    return c

# ( arr1 arr2 -- arr )
@primitive('cat')
def cat(c):
    c.need(2)
    stack = c.ds
    b = stack.pop()
    stack[-1] = list(stack[-1]) + list(b)
    return c

@primitive('collect')
def collect(c):
    """Pop n, then move the n values below it into a new list (in push order).

    ( ... n -- ... [...] )
    """
    c.need(1)
    stack = c.ds
    n = stack.pop()
    i = len(stack) - n
    if c.safe and i < 0:
        raise StkUnderflowError(f"stack underflow: collect {n} of {len(stack)}")
    out = stack[i:]
    del stack[i:]
    stack.push(out)
    return c

def tuple_(n):
    """Word collecting a tuple of `n` values, n can be a number or a word
    producing one.

    ( ... -- [...] )
    """
    return compileProgram([n, collect], name=f'tuple({n!r})')

vec2 = register('vec2', tuple_(2))
vec3 = register('vec3', tuple_(3))
vec4 = register('vec4', tuple_(4))

def _str(v): return '' if v is None else str(v)

def join(sep: str = ''):
    """Word joining the TOS sequence into a string."""
    return op1(lambda x: sep.join(map(_str, x)), 'join')

# ( x -- len(x) )
length = register('length', op1(len, 'length'))

def _at(k, x):
    kind = kindOf(x)
    if kind is Kind.MAP: return x.get(k)
    if kind in (Kind.SEQ, Kind.STRING):
        if isinstance(k, int) and -len(x) <= k < len(x): return x[k]
        return None
    raise IllegalArgError(f"can't index {kind.name}")

# ( obj k -- obj[k] ), None for missing keys/indexes
at = register('at', op2(_at, 'at'))

# ( val obj k -- ), a list grows (None padded) when k is past its end
@primitive('storeat')
def storeat(c):
    c.need(3)
    stack = c.ds
    k = stack.pop()
    o = stack.pop()
    v = stack.pop()
    if kindOf(o) is Kind.SEQ and isinstance(k, int) and k >= len(o):
        o.extend([None] * (k - len(o)))
        o.append(v)
    else: o[k] = v
    return c

##########################
# Objects

@primitive('bindkeys')
def bindkeys(c):
    """Pop a target object and a list of keys, then bind as many deeper values
    to the keys (the last key gets the top value). Pushes the object back.

    runU([1, 2, 3, ["a", "b", "c"], {}, bindkeys])
    # {'a': 1, 'b': 2, 'c': 3}

    ( v1 v2 .. [k1 k2 ..] obj -- obj )
    """
    c.need(2)
    stack = c.ds
    o = stack.pop()
    keys = stack.pop()
    c.need(len(keys))
    for k in reversed(keys):
        o[k] = stack.pop()
    stack.push(o)
    return c
