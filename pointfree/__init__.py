# pointfree: a concatenative, stack based execution runtime.
#
# Programs are python lists of literal values and words. They are executed
# against a StackContext: a data stack, a return stack and an environment.
#
#   >>> from pointfree import *
#   >>> runU([5, 3, sub])
#   2
#   >>> runU([[1, 2, 3, 4], [dup, even, cond(drop, dup)], mapll])
#   [1, 1, 3, 3]
#
# Python keywords and builtins get a trailing underscore: and_, or_, not_,
# list_, min_, max_, pow_, print_, exec_, tuple_ (the WORDS catalogue uses
# the plain names).

from .errors import (
    PointfreeError, IllegalStateError, IllegalArgError,
    StkUnderflowError, NoMatchingCaseError, WordTypeError,
)
from .value import Kind, kindOf, truthy
from .stack import Stack
from .context import (
    Session, StackContext, DEFAULT_SESSION,
    createSession, safeMode, overlay, ctx, unwrap,
)
from .word import (
    WORDS, Word, Literal, FreshLiteral, Primitive, Compiled, Unwrapped,
    asWord, isWord, primitive, register, word, wordU,
)
from .machine import run, runU, runE

from .ops import (
    op1, op2, op2v, maptos, map2,
    add, sub, mul, div, mod, min_, max_, inc, dec, neg, pow_,
    sqrt, log, sin, cos, atan2, even, odd,
    bitand, bitor, bitxor, bitnot, lsl, lsr, lsru,
    eq, equiv, neq, and_, or_, not_, lt, gt, lteq, gteq,
    iszero, ispos, isneg, isnull,
)
from .stackops import (
    nop, push, dsp, pick, drop, drop2, dropif, dup, dup2, dupif,
    swap, swap2, nip, tuck, rot, invrot, over,
    rsp, rdrop, rdrop2, movdr, movrd, cpdr, cprd,
    movdr2, movrd2, cpdr2, cprd2, rswap, rswap2, rinc, rdec,
)
from .lists import (
    list_, obj, pushl, pushr, popr, pull, pull2, pull3, pull4,
    vadd, vsub, vmul, vdiv, split, cat, collect, tuple_,
    vec2, vec3, vec4, join, length, at, storeat, bindkeys,
)
from .envops import pushenv, load, store, loadkey, storekey
from .effects import print_, printds, printrs, rand
from .combinators import (
    cond, cases, loop, dotimes, mapl, mapll, foldl, exec_, execq,
)
