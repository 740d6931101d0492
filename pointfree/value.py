# The value model.
#
# Anything can live on a stack or in the environment, but the words only know
# how to deal with a handful of kinds of values. Plain python values are used
# directly (so results can be handed to other code without conversion) and
# classified by kindOf() whenever a word needs to branch on the type.
#
# A SEQ is both a data array and a quotation (an unexecuted program). Only the
# word applied to it decides which one it is.

from .imports import *
from .errors import IllegalArgError

class Kind(enum.Enum):
    NULL   = 0
    BOOL   = 1
    NUMBER = 2
    STRING = 3
    SEQ    = 4
    MAP    = 5
    WORD   = 6


def kindOf(v: Any) -> Kind:
    # bool must be tested before Number: bool is an int subclass.
    if v is None:                      return Kind.NULL
    if isinstance(v, bool):            return Kind.BOOL
    if isinstance(v, numbers.Number):  return Kind.NUMBER
    if isinstance(v, str):             return Kind.STRING
    if isinstance(v, (list, tuple)):   return Kind.SEQ
    if isinstance(v, Mapping):         return Kind.MAP
    if callable(v) and not inspect.isclass(v): return Kind.WORD
    raise IllegalArgError(f"unsupported value: {v!r}")

def isSeq(v: Any) -> bool: return isinstance(v, (list, tuple))

def truthy(v: Any) -> bool:
    """Truthiness as used by every conditional word.

    Unlike python, empty sequences and mappings are truthy: only the absence
    of a value, false, zero, NaN and the empty string are falsy.
    """
    k = kindOf(v)
    if k is Kind.NULL:   return False
    if k is Kind.BOOL:   return v
    if k is Kind.NUMBER: return v != 0 and v == v
    if k is Kind.STRING: return len(v) > 0
    if k in (Kind.SEQ, Kind.MAP, Kind.WORD): return True
    raise IllegalArgError(k)


def testKindOf():
    assert Kind.NULL == kindOf(None)
    assert Kind.BOOL == kindOf(False)
    assert Kind.NUMBER == kindOf(0)
    assert Kind.NUMBER == kindOf(1.5)
    assert Kind.STRING == kindOf("")
    assert Kind.SEQ == kindOf([])
    assert Kind.SEQ == kindOf((1, 2))
    assert Kind.MAP == kindOf({})
    assert Kind.WORD == kindOf(len)
    try: kindOf(object()); assert False
    except IllegalArgError: pass
    try: kindOf(int); assert False
    except IllegalArgError: pass

def testTruthy():
    assert not truthy(None)
    assert not truthy(0)
    assert not truthy(float('nan'))
    assert not truthy("")
    assert not truthy(False)
    assert truthy([])
    assert truthy({})
    assert truthy(-1)
    assert truthy("0")
