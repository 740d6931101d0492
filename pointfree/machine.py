# The runner: executes programs against a StackContext.
#
# Nothing is compiled here: every program element is looked at as it comes.
# Literals are pushed onto the data stack and words are called with the
# (evolving) context. Errors propagate as is, leaving the context partially
# mutated. Callers wanting to retry need a fresh context.

from .imports import *
from .context import StackContext, ctx as newCtx, unwrap
from .word import isWord, asWord, _checkEmbeddable

def run(prog, c: StackContext = None) -> StackContext:
    """Execute a program (or a single word) and return the updated context."""
    if c is None: c = newCtx()
    _checkEmbeddable(prog)
    if isWord(prog):
        return asWord(prog)(c)

    logger = c.session.logger
    trace = logger.isEnabledFor(logging.DEBUG)
    for w in (prog if isinstance(prog, (list, tuple)) else (prog,)):
        if trace: logger.debug("ds=%r <- %r", c.ds, w)
        _checkEmbeddable(w)
        if isWord(w):
            c = w(c)
        else:
            c.ds.push(w)
    return c

def runU(prog, c: StackContext = None, n: int = 1):
    """Like run() but returns unwrap(result, n)."""
    return unwrap(run(prog, c), n)

def runE(prog, c: StackContext = None) -> Dict:
    """Like run() but returns the resulting environment."""
    return run(prog, c).env
