import io
import unittest

from pointfree import *

class TestRun(unittest.TestCase):
    def testLiteralsAndWords(self):
        c = run([1, 2, add])
        c.ds.assertEq([3])
        c.rs.assertEq([])
        assert {} == c.env

    def testSingleWord(self):
        c = run(dup, ctx([1]))
        c.ds.assertEq([1, 1])

    def testSingleValue(self):
        run(42).ds.assertEq([42])

    def testPythonFunctionIsWord(self):
        def triple(c):
            c.ds.push(c.ds.pop() * 3)
            return c
        assert 6 == runU([2, triple])
        assert 12 == runU([4, asWord(triple)])

    def testExplicitContext(self):
        c = ctx([1], {'a': 2})
        assert c is run(['a', load, add], c)
        assert 3 == unwrap(c)

    def testFreshContexts(self):
        run([1])
        c = run([2])
        c.ds.assertEq([2])

    def testRunU(self):
        assert 2 == runU([5, 3, sub])
        assert [1, 2] == runU([1, 2], n=2)
        assert [1, 2] == runU([1, 2], n=3)
        assert None is runU([])

    def testRunE(self):
        assert {'a': 1} == runE([1, 'a', store])
        env = {'b': 1}
        assert env is runE([], ctx(env=env))

    def testErrorLeavesContextMutated(self):
        c = ctx([1])
        try:
            run([2, 3, add, drop, drop, drop], c)
            assert False
        except StkUnderflowError: pass
        c.ds.assertEq([])

    def testPushPopBalance(self):
        c = run([1, 2, 3, drop, drop, drop], ctx([9, 8]))
        c.ds.assertEq([9, 8])

    def testDupDropIdentity(self):
        for x in (0, "a", [1], None):
            assert run([x, dup, drop]).ds == run([x]).ds

    def testSwapInverse(self):
        run([1, 2, swap, swap]).ds.assertEq([1, 2])
        run([1, 2, swap]).ds.assertEq([2, 1])

    def testTrace(self):
        with self.assertLogs('pointfree', level='DEBUG') as cm:
            run([1, dup])
        assert 2 == len(cm.records)

    def testTraceNamedSession(self):
        s = createSession(name='trace')
        with self.assertLogs('pointfree', level='DEBUG') as cm:
            run([1, drop], ctx(session=s))
        assert all(r.name == 'pointfree.trace' for r in cm.records)


class TestSafeMode(unittest.TestCase):
    def tearDown(self):
        safeMode(True)

    def testUnderflow(self):
        try:
            run([drop])
            assert False
        except StkUnderflowError: pass

    def testUnderflowIsIllegalState(self):
        try:
            run([1, swap])
            assert False
        except IllegalStateError: pass

    def testSafeModeOff(self):
        assert False is safeMode(False)
        assert not DEFAULT_SESSION.safe
        try:
            run([drop])
        except StkUnderflowError:
            assert False, "underflow checked in unsafe mode"
        except IndexError: pass  # python's own, unchecked

    def testSafeModeLogged(self):
        with self.assertLogs('pointfree', level='INFO'):
            safeMode(False)

    def testSessionsAreIndependent(self):
        unsafe = ctx(session=createSession(safe=False))
        try:
            run([drop], unsafe)
        except StkUnderflowError:
            assert False, "underflow checked in unsafe session"
        except IndexError: pass

        try:
            run([drop])
            assert False
        except StkUnderflowError: pass


class TestWord(unittest.TestCase):
    def testCompile(self):
        w = word([2, mul])
        assert isinstance(w, Compiled)
        assert 6 == runU([3, w])
        assert 8 == runU([4, w])

    def testNested(self):
        sq = word([dup, mul])
        quad = word([sq, sq])
        assert 16 == runU([2, quad])

    def testRepr(self):
        assert 'word[1, dup]' == repr(word([1, dup]))
        assert 'pull' == repr(pull)
        assert 'dup' == repr(dup)

    def testSharedEnv(self):
        w = word([1, 'x', store])
        assert {'x': 1} == runE([w])

    def testEnvIsolation(self):
        w = word(['x', load, 'z', load, add, 99, 'x', store], {'x': 1})
        c = ctx(env={'x': 5, 'z': 3})
        run([w], c)
        c.ds.assertEq([4])  # read the merged x=1
        assert {'x': 5, 'z': 3} == c.env

    def testEnvNoMerge(self):
        w = word(['z', load, isnull], {'x': 1}, mergeEnv=False)
        assert True is runU([w], ctx(env={'z': 3}))

    def testEnvCopiedPerCall(self):
        w = word(['x', load, inc, dup, 'x', store], {'x': 1}, mergeEnv=False)
        assert 2 == runU([w])
        assert 2 == runU([w])

    def testEnvCapturedAtCompile(self):
        env = {'x': 1}
        w = word([loadkey('x')], env)
        env['x'] = 2
        assert 1 == runU([w])

    def testSaveToCallerEnv(self):
        w = word([42, swap, 'res', storeat], {'x': 1})
        c = run([pushenv, w])
        assert {'res': 42} == c.env
        c.ds.assertEq([])

    def testFreshList(self):
        w = word([list_, 1, pushr])
        a = runU(w)
        b = runU(w)
        assert [1] == a == b
        assert a is not b

    def testLiteralListIsFresh(self):
        w = word([[], 1, pushr])
        a = runU(w)
        b = runU(w)
        assert [1] == a == b
        assert a is not b

    def testLiteralDictIsFresh(self):
        w = word([{}, dup, 1, swap, "a", storeat])
        a, b = runU(w), runU(w)
        assert {"a": 1} == a == b
        assert a is not b

    def testPushIsVerbatim(self):
        l = []
        w = word([push(l), 1, pushr])
        runU(w)
        assert l is runU(w)
        assert [1, 1] == l

    def testFreshObj(self):
        w = word([1, ['a'], obj, bindkeys])
        a, b = runU(w), runU(w)
        assert {'a': 1} == a == b
        assert a is not b

    def testWordU(self):
        sq = wordU([dup, mul])
        assert 9 == sq(ctx([3]))
        assert [2, 3] == wordU([1, 2, 3], n=2)()
        assert 7 == wordU(['x', load], env={'x': 7})()

    def testWordUNotEmbeddable(self):
        f = wordU([1])
        try:
            run([1, f])
            assert False
        except WordTypeError: pass
        try:
            word([f])
            assert False
        except WordTypeError: pass
        try:
            cond(f)
            assert False
        except TypeError: pass

    def testAsWord(self):
        assert dup is asWord(dup)
        assert isinstance(asWord([1, dup]), Compiled)
        assert 'len' == repr(asWord(len))
        try:
            asWord(42)
            assert False
        except IllegalArgError: pass

    def testCatalogue(self):
        assert WORDS['dup'] is dup
        assert WORDS['and'] is and_
        assert WORDS['list'] is list_
        assert WORDS['print'] is print_
        for name in ('mapl', 'mapll', 'foldl', 'exec', 'execq', 'pull4', 'vec3'):
            assert name in WORDS, name
        assert all(isinstance(w, Word) for w in WORDS.values())

    def testPrimitiveDecorator(self):
        @primitive('test_triple')
        def triple(c):
            c.ds.push(c.ds.pop() * 3)
            return c
        assert WORDS.pop('test_triple') is triple
        assert 9 == runU([3, triple])


class TestEffects(unittest.TestCase):
    def testPrint(self):
        out = io.StringIO()
        c = ctx(session=createSession(out=out))
        run([1, 2, print_, printds, 3, movdr, printrs], c)
        assert "2\n[1]\n[3]\n" == out.getvalue()
        c.ds.assertEq([1])

    def testRand(self):
        v = runU([rand], ctx(session=createSession(seed=42)))
        assert 0 <= v < 1
        assert v == runU([rand], ctx(session=createSession(seed=42)))
