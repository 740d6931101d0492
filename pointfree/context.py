# The stack context threaded through every word: the data stack, the return
# stack and the environment, plus the session the context executes in.

from .imports import *
from .stack import Stack

SAFE_DEFAULT = True

@dataclass
class Session(object):
    """Settings shared by all contexts created for it.

    safe: check stack depth before every stack consuming word.
    out:  stream used by the printing words (None is sys.stdout).
    rng:  random source for `rand`.
    name: the logger is "pointfree.<name>" if given.
    """
    safe: bool = SAFE_DEFAULT
    out: Any = None
    rng: random.Random = field(default_factory=random.Random)
    name: str = None

    def __post_init__(self):
        loggerName = LOGGER_NAME
        if self.name: loggerName = f'{LOGGER_NAME}.{self.name}'
        self.logger = logging.getLogger(loggerName)

    def write(self, value):
        print(value, file=sys.stdout if self.out is None else self.out)


def createSession(safe=SAFE_DEFAULT, out=None, seed=None, name=None) -> Session:
    """Create a Session. A seed makes `rand` reproducible."""
    return Session(safe=safe, out=out, rng=random.Random(seed), name=name)

# Used by every context created without an explicit session.
DEFAULT_SESSION = Session()

def safeMode(state: bool) -> bool:
    """Enable/disable underflow checks for the default session."""
    DEFAULT_SESSION.safe = state
    DEFAULT_SESSION.logger.info("safe mode %s", "on" if state else "off")
    return state


def overlay(base: Mapping, over: Mapping) -> Dict:
    """Return a new dict with base's entries overridden by over's.

    Only the top level is merged, nested mappings are taken as is from
    whichever side wins.
    """
    out = dict(base)
    out.update(over)
    return out


@dataclass
class StackContext(object):
    ds: Stack  # data stack
    rs: Stack  # return stack
    env: Dict = None
    session: Session = None

    def __post_init__(self):
        if not isinstance(self.ds, Stack): self.ds = Stack(self.ds)
        if not isinstance(self.rs, Stack): self.rs = Stack(self.rs)
        if self.env is None: self.env = {}
        if self.session is None: self.session = DEFAULT_SESSION

    @property
    def safe(self): return self.session.safe

    def need(self, n: int):
        if self.session.safe: self.ds.need(n)

    def needR(self, n: int):
        if self.session.safe: self.rs.need(n)

    def scoped(self, env: Dict) -> "StackContext":
        """Same stacks and session, different environment."""
        return StackContext(self.ds, self.rs, env, self.session)


def ctx(stack=None, env=None, session=None) -> StackContext:
    """Create a StackContext from an initial data stack and/or environment.

    The return stack always starts empty. A Stack is used as is, any other
    sequence is copied.
    """
    return StackContext(
        ds=stack if isinstance(stack, Stack) else Stack(stack or ()),
        rs=Stack(),
        env=env,
        session=session,
    )


def unwrap(c: StackContext, n: int = 1):
    """Unwrap result(s) from the top of the data stack.

    n=1 returns TOS as is (None if the stack is empty). Any other n returns a
    new list of the top n values in push order, clamped to the stack depth.
    """
    stack = c.ds
    if n == 1: return stack[-1] if stack else None
    return list(stack[max(0, len(stack) - n):])


def testOverlay():
    base = {'a': 1, 'b': {'x': 1}}
    over = {'b': {'y': 2}, 'c': 3}
    out = overlay(base, over)
    assert {'a': 1, 'b': {'y': 2}, 'c': 3} == out
    assert {'a': 1, 'b': {'x': 1}} == base
    assert out is not base

def testCtx():
    c = ctx([1, 2], {'a': 1})
    c.ds.assertEq([1, 2])
    c.rs.assertEq([])
    assert {'a': 1} == c.env
    assert c.session is DEFAULT_SESSION

    s = Stack([3])
    assert ctx(s).ds is s

def testUnwrap():
    c = ctx([1, 2, 3])
    assert 3 == unwrap(c)
    assert [2, 3] == unwrap(c, 2)
    assert [1, 2, 3] == unwrap(c, 5)
    assert [] == unwrap(c, 0)
    assert None is unwrap(ctx())
    c.ds.assertEq([1, 2, 3])  # never consumed

def testSession():
    s = createSession(safe=False, seed=1, name='t')
    assert s.logger.name == 'pointfree.t'
    assert createSession(seed=1).rng.random() == s.rng.random()
    c = ctx(session=s)
    c.need(1)  # not checked
    c.needR(1)
