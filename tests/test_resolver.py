"""Tests for dependency resolution across group boundaries."""

import unittest

from paramtreelib import (
    BuildConfig,
    DependencyResolver,
    ParameterSet,
    TreeBuilder,
)
from paramtreelib.api import find_node


def build(source: ParameterSet, config: BuildConfig = None):
    """Run the structural pass and return (root, resolver)."""
    builder = TreeBuilder(source, config)
    root = builder.build()
    return root, DependencyResolver(builder.index, builder.config)


def address_of(root, name: str) -> int:
    return find_node(root, name).address


class TestSameGroup(unittest.TestCase):

    def test_sibling_reference(self):
        source = ParameterSet("root", "Root")
        a = source.add_set("A", "A")
        a.add_parameter("p1", "P1", dependents=["p2"])
        a.add_parameter("p2", "P2")

        root, resolver = build(source)
        resolver.resolve(root)

        p1 = find_node(root, "A.p1")
        self.assertEqual(p1.resolved_dependents, [address_of(root, "A.p2")])

    def test_top_level_sibling(self):
        source = ParameterSet("root", "Root")
        source.add_parameter("gain", "Gain", dependents=["pan"])
        source.add_parameter("pan", "Pan")

        root, resolver = build(source)
        resolver.resolve(root)

        self.assertEqual(root.parameters[0].resolved_dependents, [address_of(root, "pan")])

    def test_forward_reference(self):
        """A dependent enumerated after the declaring parameter still resolves."""
        source = ParameterSet("root", "Root")
        source.add_parameter("first", "First", dependents=["later.x"])
        later = source.add_set("later", "Later")
        later.add_parameter("x", "X")

        root, resolver = build(source)
        resolver.resolve(root)

        self.assertEqual(root.parameters[0].resolved_dependents, [address_of(root, "later.x")])

    def test_self_reference(self):
        source = ParameterSet("root", "Root")
        source.add_parameter("loop", "Loop", dependents=["loop"])

        root, resolver = build(source)
        resolver.resolve(root)

        param = root.parameters[0]
        self.assertEqual(param.resolved_dependents, [param.address])


class TestQualified(unittest.TestCase):

    def setUp(self):
        # root/
        #   master
        #   A/  p1 -> [B.q, "B::q", q, master, missing]
        #   B/  q -> [A.p1]
        #       inner/ deep -> [q]
        source = ParameterSet("root", "Root")
        source.add_parameter("master", "Master", dependents=["A.p1"])
        a = source.add_set("A", "A")
        a.add_parameter("p1", "P1", dependents=["B.q", "B::q", "q", "master", "missing"])
        b = source.add_set("B", "B")
        b.add_parameter("q", "Q", dependents=["A.p1"])
        inner = b.add_set("inner", "Inner")
        inner.add_parameter("deep", "Deep", dependents=["q", "inner.deep"])
        self.source = source

    def test_descendant_reference(self):
        root, resolver = build(self.source)
        resolver.resolve(root)

        master = find_node(root, "master")
        self.assertEqual(master.resolved_dependents, [address_of(root, "A.p1")])

    def test_sibling_group_reference(self):
        root, resolver = build(self.source)
        resolver.resolve(root)

        p1 = find_node(root, "A.p1")
        q = address_of(root, "B.q")
        master = address_of(root, "master")
        # "q" is not in A and not at the top level, so it is dropped
        self.assertEqual(p1.resolved_dependents, [q, q, master])

    def test_mutual_references_allowed(self):
        root, resolver = build(self.source)
        resolver.resolve(root)

        p1 = find_node(root, "A.p1")
        q = find_node(root, "B.q")
        self.assertIn(q.address, p1.resolved_dependents)
        self.assertEqual(q.resolved_dependents, [p1.address])

    def test_parent_reference(self):
        root, resolver = build(self.source)
        resolver.resolve(root)

        deep = find_node(root, "B.inner.deep")
        # "q" resolves in the parent group B, "inner.deep" from B down
        self.assertEqual(deep.resolved_dependents, [address_of(root, "B.q"), deep.address])

    def test_strict_mode_stays_in_group(self):
        root, resolver = build(self.source, BuildConfig.strict())
        resolver.resolve(root)

        self.assertEqual(find_node(root, "A.p1").resolved_dependents, [])
        self.assertEqual(find_node(root, "master").resolved_dependents,
                         [address_of(root, "A.p1")])
        self.assertEqual(find_node(root, "B.inner.deep").resolved_dependents, [])


class TestUnresolved(unittest.TestCase):

    def test_dropped_names_keep_order(self):
        source = ParameterSet("root", "Root")
        source.add_parameter("a", "A", dependents=["ghost1", "b", "ghost2", "c", "ghost3"])
        source.add_parameter("b", "B")
        source.add_parameter("c", "C")

        root, resolver = build(source)
        report = resolver.resolve(root)

        a = root.parameters[0]
        self.assertEqual(len(a.resolved_dependents), len(a.raw_dependents) - 3)
        self.assertEqual(a.resolved_dependents,
                         [address_of(root, "b"), address_of(root, "c")])
        self.assertEqual(report.resolved, 2)
        self.assertEqual(report.unresolved,
                         [("a", "ghost1"), ("a", "ghost2"), ("a", "ghost3")])
        self.assertFalse(report.complete)

    def test_unresolved_does_not_block_others(self):
        source = ParameterSet("root", "Root")
        source.add_parameter("a", "A", dependents=["nowhere"])
        source.add_parameter("b", "B", dependents=["a"])

        root, resolver = build(source)
        resolver.resolve(root)

        self.assertEqual(root.parameters[0].resolved_dependents, [])
        self.assertEqual(root.parameters[1].resolved_dependents, [address_of(root, "a")])

    def test_empty_names_dropped(self):
        source = ParameterSet("root", "Root")
        source.add_parameter("a", "A", dependents=["", "::", "."])

        root, resolver = build(source)
        report = resolver.resolve(root)

        self.assertEqual(root.parameters[0].resolved_dependents, [])
        self.assertEqual(len(report.unresolved), 3)

    def test_resolution_is_repeatable(self):
        source = ParameterSet("root", "Root")
        source.add_parameter("a", "A", dependents=["b"])
        source.add_parameter("b", "B")

        root, resolver = build(source)
        resolver.resolve(root)
        report = resolver.resolve(root)

        self.assertEqual(root.parameters[0].resolved_dependents, [address_of(root, "b")])
        self.assertTrue(report.complete)


class TestLookup(unittest.TestCase):

    def test_group_addresses_resolve(self):
        """Names may point at groups as well as parameters."""
        source = ParameterSet("root", "Root")
        source.add_parameter("bypass", "Bypass", dependents=["fx"])
        source.add_set("fx", "Effects")

        root, resolver = build(source)
        resolver.resolve(root)

        self.assertEqual(root.parameters[0].resolved_dependents, [address_of(root, "fx")])

    def test_lookup_direct(self):
        source = ParameterSet("root", "Root")
        g = source.add_set("g", "G")
        g.add_parameter("x", "X")

        root, resolver = build(source)
        self.assertEqual(resolver.lookup(("g",), "x"), address_of(root, "g.x"))
        self.assertEqual(resolver.lookup((), "g::x"), address_of(root, "g.x"))
        self.assertIsNone(resolver.lookup((), "x"))
