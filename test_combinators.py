import io
import unittest

from pointfree import *

class TestCond(unittest.TestCase):
    def testBranches(self):
        c = cond(["yes"], ["no"])
        assert "yes" == runU([1, c])
        assert "no" == runU([0, c])
        assert "no" == runU([None, c])
        assert "yes" == runU([[], c])  # empty list is truthy

    def testNoElse(self):
        run([0, cond(["yes"])]).ds.assertEq([])
        run([5, 0, gt, cond([dup])], ctx([5])).ds.assertEq([5, 5])

    def testWordBranch(self):
        assert 4 == runU([3, 1, cond(inc, dec)])
        assert 2 == runU([3, 0, cond(inc, dec)])

    def testUnderflow(self):
        try:
            run([cond(nop)])
            assert False
        except StkUnderflowError: pass


class TestCases(unittest.TestCase):
    def setUp(self):
        self.w = cases({1: ["one"], 2: ["two"], 'default': [drop, 99]})

    def testMatch(self):
        assert "one" == runU([1, self.w])
        assert "two" == runU([2, self.w])

    def testDefault(self):
        run([5, self.w]).ds.assertEq([99])
        assert 5 == runU([5, cases({'default': []})])  # key pushed back

    def testUnhashableKey(self):
        run([[1], self.w]).ds.assertEq([99])

    def testNoMatch(self):
        try:
            run([3, cases({1: ["one"]})])
            assert False
        except NoMatchingCaseError: pass
        try:
            run([[1], cases({1: ["one"]})])
            assert False
        except IllegalStateError: pass


class TestLoop(unittest.TestCase):
    def testCountDown(self):
        c = run([loop([dup, ispos], [dup, dec])], ctx([3]))
        c.ds.assertEq([3, 2, 1, 0])
        assert 0 == unwrap(c)

    def testDec(self):
        run([loop([dup, ispos], [dec])], ctx([3])).ds.assertEq([0])

    def testNeverRuns(self):
        run([loop([0], [1])]).ds.assertEq([])

    def testPrint(self):
        out = io.StringIO()
        c = ctx([3], session=createSession(out=out))
        run([loop([dup, ispos], [dup, print_, dec])], c)
        assert "3\n2\n1\n" == out.getvalue()


class TestDoTimes(unittest.TestCase):
    def testRange(self):
        run([3, dotimes()]).ds.assertEq([0, 1, 2])
        run([0, dotimes()]).ds.assertEq([])

    def testBody(self):
        run([3, dotimes([10, mul])]).ds.assertEq([0, 10, 20])
        assert 3 == runU([0, 3, dotimes([add])])

    def testCollectRange(self):
        assert [0, 1, 2] == runU([3, cpdr, dotimes(), movrd, collect])


class TestMapl(unittest.TestCase):
    def testMap(self):
        run([[1, 2, 3, 4], [10, mul], mapl]).ds.assertEq([10, 20, 30, 40])

    def testReduce(self):
        assert 10 == runU([0, [1, 2, 3, 4], [add], mapl])

    def testIntoList(self):
        assert [10, 20, 30] == runU([list_, [1, 2, 3], [10, mul, pushr], mapl])

    def testEmpty(self):
        run([[], [dup], mapl]).ds.assertEq([])

    def testWordQuotation(self):
        run([[1, 2], push(inc), mapl]).ds.assertEq([2, 3])


class TestMapll(unittest.TestCase):
    def testMap(self):
        assert [2, 4, 6] == runU([[1, 2, 3], [2, mul], mapll])

    def testFilter(self):
        assert [2, 4] == runU([[1, 2, 3, 4], [dup, even, cond(nop, drop)], mapll])

    def testMapcat(self):
        assert [1, 1, 3, 3] == runU([[1, 2, 3, 4], [dup, even, cond(drop, dup)], mapll])

    def testNetGrowth(self):
        run([0, [1, 2, 3], [add, dup], mapll]).ds.assertEq([1, [3, 6, 6]])

    def testShrinking(self):
        run([100, 200, [1, 2], [drop, drop], mapll]).ds.assertEq([[]])

    def testFreshResult(self):
        a = [1, 2]
        b = runU([a, [], mapll])
        assert [1, 2] == b
        assert a is not b


class TestFoldl(unittest.TestCase):
    def testSum(self):
        assert 10 == runU([[1, 2, 3, 4], [add], 0, foldl])

    def testInitOrder(self):
        assert -10 == runU([[1, 2, 3, 4], [sub], 0, foldl])
        assert [1, 2] == runU([[1, 2], [pushr], list_, foldl])


class TestExec(unittest.TestCase):
    def testExec(self):
        run([3, push(dup), exec_]).ds.assertEq([3, 3])

    def testExecFunction(self):
        def double(c):
            c.ds.push(c.ds.pop() * 2)
            return c
        assert 8 == runU([4, push(double), exec_])

    def testExecRejectsQuotation(self):
        try:
            run([[1, 2], exec_])
            assert False
        except IllegalArgError: pass

    def testExecq(self):
        assert 3 == runU([[1, 2, add], execq])
        assert 4 == runU([2, [dup, add], execq])

    def testExecqLateBinding(self):
        q = [1]
        w = word([push(q), execq])
        q.append(2)
        assert [1, 2] == runU([w], n=2)
