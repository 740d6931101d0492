# Words and the word compiler.
#
# A word is anything that can be executed against a StackContext: it takes
# the context and returns it (usually the same object, mutated). There are
# three variants:
# - Literal:   pushes a value verbatim. FreshLiteral pushes a shallow copy,
#              used for list and dict literals of compiled programs.
# - Primitive: a python function implementing the transition directly.
# - Compiled:  an ordered list of words folded into a single call, with an
#              optional environment scope.
#
# A program (aka quotation) is a list of literals and words. It is plain data
# until compiled with word() or executed with run().

from .imports import *
from .errors import IllegalArgError, WordTypeError
from .value import isSeq
from .context import StackContext, ctx as newCtx, overlay, unwrap

# Catalogue of all built-in words by name.
WORDS: Dict[str, "Word"] = {}

def register(name: str, w: "Word") -> "Word":
    WORDS[name] = w
    return w


class Word(object):
    """Base class of all words."""
    def __call__(self, c: StackContext) -> StackContext:
        raise NotImplementedError


@dataclass(frozen=True, eq=False, repr=False)
class Literal(Word):
    value: Any

    def __call__(self, c):
        c.ds.push(self.value)
        return c

    def __repr__(self): return repr(self.value)


# A container literal of a compiled word: every call gets its own copy.
@dataclass(frozen=True, eq=False, repr=False)
class FreshLiteral(Literal):
    def __call__(self, c):
        c.ds.push(copy.copy(self.value))
        return c


@dataclass(frozen=True, eq=False, repr=False)
class Primitive(Word):
    fn: Callable[[StackContext], StackContext]
    name: str = None

    def __call__(self, c):
        return self.fn(c)

    def __repr__(self): return self.name or repr(self.fn)


@dataclass(frozen=True, eq=False, repr=False)
class Compiled(Word):
    words: Tuple[Word, ...]
    env: Dict = None
    mergeEnv: bool = True
    name: str = None

    def _fold(self, c):
        for w in self.words:
            c = w(c)
        return c

    def __call__(self, c):
        if self.env is None: return self._fold(c)
        env = overlay(c.env, self.env) if self.mergeEnv else dict(self.env)
        # the scoped env is dropped afterwards, the stacks are shared.
        self._fold(c.scoped(env))
        return c

    def __repr__(self):
        if self.name: return self.name
        return 'word[' + ', '.join(map(repr, self.words)) + ']'


@dataclass(frozen=True, eq=False)
class Unwrapped(object):
    """Result of wordU(). Returns a value (not a context) when called, so it
    cannot be part of a program.
    """
    word: Compiled
    n: int = 1

    def __call__(self, c: StackContext = None):
        if c is None: c = newCtx()
        return unwrap(self.word(c), self.n)


def isWord(v) -> bool:
    if isinstance(v, Word): return True
    if isinstance(v, Unwrapped) or inspect.isclass(v): return False
    return callable(v)

def primitive(name: str):
    """Decorator registering a python function `(ctx) -> ctx` as a word."""
    def wrap(fn):
        return register(name, Primitive(fn, name))
    return wrap

def _checkEmbeddable(v):
    if isinstance(v, Unwrapped):
        raise WordTypeError(f"{v!r} returns a value, it can't be used in a program")

def asWord(proc) -> Word:
    """Convert a word, python function or quotation into a Word."""
    _checkEmbeddable(proc)
    if isinstance(proc, Word): return proc
    if isSeq(proc): return compileProgram(proc)
    if isWord(proc):
        return Primitive(proc, getattr(proc, '__name__', None))
    raise IllegalArgError(f"not a word or quotation: {proc!r}")

def compileProgram(prog, env=None, mergeEnv=True, name=None) -> Compiled:
    words = []
    for v in prog:
        _checkEmbeddable(v)
        if isWord(v): words.append(asWord(v))
        elif isinstance(v, (list, dict)): words.append(FreshLiteral(v))
        else: words.append(Literal(v))
    if env is not None: env = dict(env)
    return Compiled(tuple(words), env, mergeEnv, name)


def word(prog, env: Mapping = None, mergeEnv: bool = True) -> Compiled:
    """Compile a program into a single word. Unknown stack effect.

    If `env` is given, each invocation runs with its own environment: a
    shallow merge of the caller's environment with `env` (mergeEnv=True) or a
    shallow copy of `env` alone (mergeEnv=False). That environment only lives
    for the duration of the call: stores into it are not visible to the caller
    (use pushenv + store on the caller's env to return results that way).

    ( ? -- ? )
    """
    return compileProgram(prog, env, mergeEnv)

def wordU(prog, n: int = 1, env: Mapping = None, mergeEnv: bool = True) -> Unwrapped:
    """Like word(), but the result unwraps n values from the data stack.

    Important: the result is NOT a word and can't be used inside a program.
    """
    return Unwrapped(compileProgram(prog, env, mergeEnv), n)
