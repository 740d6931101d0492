# Environment words. The environment is the context's key/value store, which
# may be scoped per word (see word()).

from .imports import *
from .word import Primitive, primitive

# ( -- env ), the live environment (not a copy)
@primitive('pushenv')
def pushenv(c):
    c.ds.push(c.env)
    return c

# ( key -- env[key] ), None for unknown keys
@primitive('load')
def load(c):
    c.need(1)
    stack = c.ds
    stack.push(c.env.get(stack.pop()))
    return c

# ( val key -- )
@primitive('store')
def store(c):
    c.need(2)
    stack = c.ds
    key = stack.pop()
    c.env[key] = stack.pop()
    return c

def loadkey(key) -> Primitive:
    """Like load, but with a fixed key.

    ( -- env[key] )
    """
    def _loadkey(c):
        c.ds.push(c.env.get(key))
        return c
    return Primitive(_loadkey, f'loadkey({key!r})')

def storekey(key) -> Primitive:
    """Like store, but with a fixed key.

    ( val -- )
    """
    def _storekey(c):
        c.need(1)
        c.env[key] = c.ds.pop()
        return c
    return Primitive(_storekey, f'storekey({key!r})')
