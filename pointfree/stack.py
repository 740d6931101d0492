from .imports import *
from .errors import StkUnderflowError

# Compute the index into a list for a top relative stack index
def _si(i): return -i - 1

class Stack(list):
    """
    A pure python stack. It's really just a list where the end is the top.
    This means:
    - pushing appends the value(s), popping removes the last one.
    - printing and comparing shows the stack bottom first, same as the order
      the values were pushed in.
    - peek(0) is the top of stack (TOS), peek(1) the value below it, etc.
    """
    def __repr__(self):
        return f"Stk{list(self)}"

    def push(self, *values):
        if len(values) == 1: super().append(values[0])
        else: super().extend(values)

    def tos(self):
        return self[-1]

    def peek(self, index: int):
        return self[_si(index)]

    def poke(self, index: int, value):
        self[_si(index)] = value

    def need(self, n: int):
        """Raise StkUnderflowError if there are less than n values."""
        if len(self) < n:
            raise StkUnderflowError(f"stack underflow: need {n}, have {len(self)}")

    def assertEq(self, expectedList):
        assert expectedList == list(self), f"{expectedList} != {list(self)}"


def testStack():
    s = Stack(range(10))
    assert 9 == s.pop()
    s.push(9)
    assert 9 == s.tos()
    assert 9 == s.peek(0)
    assert 7 == s.peek(2)
    assert 0 == s.peek(-1)
    s.poke(1, 42)
    s.push(1, 2)
    s.assertEq([0, 1, 2, 3, 4, 5, 6, 7, 42, 9, 1, 2])
    assert [1, 2] == Stack([1, 2])
    assert "Stk[1]" == repr(Stack([1]))

def testStackNeed():
    s = Stack([1, 2])
    s.need(2)
    try: s.need(3); assert False
    except StkUnderflowError: pass
    try: s.need(3); assert False
    except IndexError: pass  # also an IndexError
