# Words with externally visible effects: printing and randomness. Both go
# through the context's session, so output and random numbers can be
# redirected or seeded per session.

from .imports import *
from .word import primitive

# ( x -- )
@primitive('print')
def print_(c):
    c.need(1)
    c.session.write(c.ds.pop())
    return c

# Print the whole d-stack / r-stack without consuming it.
@primitive('printds')
def printds(c):
    c.session.write(list(c.ds))
    return c

@primitive('printrs')
def printrs(c):
    c.session.write(list(c.rs))
    return c

# ( -- x ), uniform in [0, 1)
@primitive('rand')
def rand(c):
    c.ds.push(c.session.rng.random())
    return c
