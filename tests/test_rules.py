import itertools
import unittest
from harness import F, S
from lkcheck.errors import SequentError
from lkcheck.proof.lk import (
    LK, Axiom, WeakeningLeft, WeakeningRight, ContractionLeft, ContractionRight,
    ExchangeLeft, ExchangeRight, AndLeft1, AndLeft2, AndRight, OrLeft, OrRight1, OrRight2,
    ImpliesLeft, ImpliesRight, NotLeft, NotRight, ForallLeft, ForallRight, ExistsLeft,
    ExistsRight, Cut, make_node,
)
from lkcheck.proof.rules import is_valid_step


def leaf(antecedent=(), succedent=()) -> Axiom:
    """A premise carrying the given sequent; its own validity is irrelevant here."""
    return Axiom(S(antecedent, succedent))


class TestAxiom(unittest.TestCase):
    def test_identity(self):
        self.assertTrue(is_valid_step(leaf(["p"], ["p"])))
        self.assertTrue(is_valid_step(leaf(["p", "(q x)"], ["p", "(q x)"])))

    def test_reflexivity_of_equality(self):
        self.assertTrue(is_valid_step(leaf([], ["(= (f x) (f x))"])))

    def test_rejections(self):
        for ant, suc in [([], []), (["p"], ["q"]), (["p", "q"], ["q", "p"]), ([], ["(= x y)"]),
                         ([], ["(= x x)", "p"]), (["p"], ["(= x x)"]), ([], ["p"])]:
            with self.subTest(ant=ant, suc=suc):
                self.assertFalse(is_valid_step(leaf(ant, suc)))


class TestStructuralRules(unittest.TestCase):
    def test_weakening_left(self):
        self.assertTrue(is_valid_step(WeakeningLeft(leaf(["p"], ["p"]), S(["q", "p"], ["p"]))))
        self.assertFalse(is_valid_step(WeakeningLeft(leaf(["p"], ["p"]), S(["p", "q"], ["p"]))))

    def test_weakening_right(self):
        self.assertTrue(is_valid_step(WeakeningRight(leaf(["p"], ["p"]), S(["p"], ["p", "q"]))))
        self.assertFalse(is_valid_step(WeakeningRight(leaf(["p"], ["p"]), S(["p"], ["q", "p"]))))

    def test_contraction_left(self):
        self.assertTrue(is_valid_step(ContractionLeft(leaf(["p", "p", "r"], ["q"]), S(["p", "r"], ["q"]))))
        self.assertFalse(is_valid_step(ContractionLeft(leaf(["p", "r", "p"], ["q"]), S(["r", "p"], ["q"]))))

    def test_contraction_right(self):
        self.assertTrue(is_valid_step(ContractionRight(leaf(["q"], ["r", "p", "p"]), S(["q"], ["r", "p"]))))
        self.assertFalse(is_valid_step(ContractionRight(leaf(["q"], ["p", "r", "p"]), S(["q"], ["p", "r"]))))

    def test_mutating_the_conclusion_breaks_the_step(self):
        cases = [
            (WeakeningLeft, ["p"], ["q"], ["r", "p"], ["q"]),
            (WeakeningRight, ["p"], ["q"], ["p"], ["q", "r"]),
            (ContractionLeft, ["p", "p"], ["q"], ["p"], ["q"]),
            (ContractionRight, ["p"], ["q", "q"], ["p"], ["q"]),
        ]
        for rule, pa, ps, ca, cs in cases:
            with self.subTest(rule=rule.__name__):
                premise = leaf(pa, ps)
                self.assertTrue(is_valid_step(rule(premise, S(ca, cs))))
                self.assertFalse(is_valid_step(rule(premise, S(ca + ["s"], cs))))
                self.assertFalse(is_valid_step(rule(premise, S(ca, ["s"] + cs))))

    def test_empty_side_is_a_precondition_error(self):
        with self.assertRaises(SequentError):
            is_valid_step(WeakeningLeft(leaf(["p"], ["p"]), S([], ["p"])))
        with self.assertRaises(SequentError):
            is_valid_step(WeakeningRight(leaf(["p"], ["p"]), S(["p"], [])))
        with self.assertRaises(SequentError):
            is_valid_step(ContractionLeft(leaf(["p"], ["q"]), S(["p"], ["q"])))
        with self.assertRaises(SequentError):
            is_valid_step(ContractionRight(leaf(["p"], ["q"]), S(["p"], ["q"])))


class TestExchange(unittest.TestCase):
    ATOMS = ["a", "b", "c", "d"]

    def _adjacent_swaps(self):
        for i in range(len(self.ATOMS) - 1):
            swapped = list(self.ATOMS)
            swapped[i], swapped[i + 1] = swapped[i + 1], swapped[i]
            yield swapped

    def test_every_adjacent_transposition_is_valid(self):
        for swapped in self._adjacent_swaps():
            with self.subTest(order=swapped):
                self.assertTrue(is_valid_step(ExchangeLeft(leaf(self.ATOMS, ["q"]), S(swapped, ["q"]))))
                self.assertTrue(is_valid_step(ExchangeRight(leaf(["q"], self.ATOMS), S(["q"], swapped))))

    def test_other_permutations_are_invalid(self):
        allowed = [tuple(s) for s in self._adjacent_swaps()]
        for perm in itertools.permutations(self.ATOMS):
            if perm in allowed:
                continue
            with self.subTest(order=perm):
                self.assertFalse(is_valid_step(ExchangeLeft(leaf(self.ATOMS, ["q"]), S(perm, ["q"]))))
                self.assertFalse(is_valid_step(ExchangeRight(leaf(["q"], self.ATOMS), S(["q"], perm))))

    def test_other_side_must_be_unchanged(self):
        self.assertFalse(is_valid_step(ExchangeLeft(leaf(["a", "b"], ["q"]), S(["b", "a"], ["r"]))))
        self.assertFalse(is_valid_step(ExchangeRight(leaf(["q"], ["a", "b"]), S(["r"], ["b", "a"]))))

    def test_length_change_is_invalid(self):
        self.assertFalse(is_valid_step(ExchangeLeft(leaf(["a", "b"], ["q"]), S(["b", "a", "c"], ["q"]))))


class TestPropositionalRules(unittest.TestCase):
    def test_and_left(self):
        c = S(["(^ p q)", "r"], ["s"])
        self.assertTrue(is_valid_step(AndLeft1(leaf(["p", "r"], ["s"]), c)))
        self.assertTrue(is_valid_step(AndLeft2(leaf(["q", "r"], ["s"]), c)))
        self.assertFalse(is_valid_step(AndLeft1(leaf(["q", "r"], ["s"]), c)))
        self.assertFalse(is_valid_step(AndLeft2(leaf(["q"], ["s"]), c)))
        self.assertFalse(is_valid_step(AndLeft1(leaf(["p", "r"], ["s"]), S(["(v p q)", "r"], ["s"]))))

    def test_and_right_shared_context(self):
        c = S(["p"], ["(^ p q)"])
        self.assertTrue(is_valid_step(AndRight((leaf(["p"], ["p"]), leaf(["p"], ["q"])), c)))
        self.assertFalse(is_valid_step(AndRight((leaf(["q"], ["p"]), leaf(["p"], ["q"])), c)))
        self.assertFalse(is_valid_step(AndRight((leaf(["p"], ["p"]), leaf(["p", "q"], ["q"])), c)))
        self.assertFalse(is_valid_step(AndRight((leaf(["p"], ["q"]), leaf(["p"], ["p"])), c)))

    def test_and_right_side_context(self):
        c = S([], ["r", "(^ p q)"])
        self.assertTrue(is_valid_step(AndRight((leaf([], ["r", "p"]), leaf([], ["r", "q"])), c)))
        self.assertFalse(is_valid_step(AndRight((leaf([], ["r", "p"]), leaf([], ["s", "q"])), c)))

    def test_or_left(self):
        c = S(["(v p q)", "s"], ["r"])
        self.assertTrue(is_valid_step(OrLeft((leaf(["p", "s"], ["r"]), leaf(["q", "s"], ["r"])), c)))
        self.assertFalse(is_valid_step(OrLeft((leaf(["q", "s"], ["r"]), leaf(["p", "s"], ["r"])), c)))
        self.assertFalse(is_valid_step(OrLeft((leaf(["p", "s"], ["r"]), leaf(["q"], ["r"])), c)))

    def test_or_right(self):
        self.assertTrue(is_valid_step(OrRight1(leaf(["p"], ["p"]), S(["p"], ["(v p q)"]))))
        self.assertTrue(is_valid_step(OrRight2(leaf(["q"], ["q"]), S(["q"], ["(v p q)"]))))
        self.assertFalse(is_valid_step(OrRight1(leaf(["q"], ["q"]), S(["q"], ["(v p q)"]))))

    def test_implies_left(self):
        self.assertTrue(is_valid_step(ImpliesLeft((leaf(["p"], ["p"]), leaf(["q"], ["q"])), S(["(> p q)", "p"], ["q"]))))
        premises = (leaf(["a"], ["b", "p"]), leaf(["q", "c"], ["d"]))
        self.assertTrue(is_valid_step(ImpliesLeft(premises, S(["(> p q)", "a", "c"], ["b", "d"]))))
        self.assertFalse(is_valid_step(ImpliesLeft(premises, S(["(> p q)", "c", "a"], ["b", "d"]))))
        self.assertFalse(is_valid_step(ImpliesLeft(premises, S(["(> p q)", "a", "c"], ["d", "b"]))))
        self.assertFalse(is_valid_step(ImpliesLeft(premises, S(["(> q p)", "a", "c"], ["b", "d"]))))

    def test_implies_right(self):
        self.assertTrue(is_valid_step(ImpliesRight(leaf(["p"], ["q"]), S([], ["(> p q)"]))))
        self.assertTrue(is_valid_step(ImpliesRight(leaf(["p", "r"], ["s", "q"]), S(["r"], ["s", "(> p q)"]))))
        self.assertFalse(is_valid_step(ImpliesRight(leaf(["p"], ["q"]), S([], ["(> q p)"]))))

    def test_not_left(self):
        self.assertTrue(is_valid_step(NotLeft(leaf([], ["p"]), S(["(~ p)"], []))))
        self.assertTrue(is_valid_step(NotLeft(leaf(["r"], ["s", "p"]), S(["(~ p)", "r"], ["s"]))))
        self.assertFalse(is_valid_step(NotLeft(leaf([], ["p"]), S(["(~ q)"], []))))

    def test_not_right(self):
        self.assertTrue(is_valid_step(NotRight(leaf(["p"], []), S([], ["(~ p)"]))))
        self.assertTrue(is_valid_step(NotRight(leaf(["p", "r"], ["s"]), S(["r"], ["s", "(~ p)"]))))
        self.assertFalse(is_valid_step(NotRight(leaf(["p"], ["s"]), S([], ["(~ p)"]))))


class TestQuantifierRules(unittest.TestCase):
    def test_forall_left_instantiates_with_a_subterm(self):
        c = S(["(V x (p x))"], ["q"])
        self.assertTrue(is_valid_step(ForallLeft(leaf(["(p (f c))"], ["q"]), c)))
        self.assertTrue(is_valid_step(ForallLeft(leaf(["(p z)"], ["q"]), c)))
        self.assertFalse(is_valid_step(ForallLeft(leaf(["(r (f c))"], ["q"]), c)))
        self.assertFalse(is_valid_step(ForallLeft(leaf(["(p (f c))", "r"], ["q"]), c)))

    def test_forall_left_rejects_capturing_instance(self):
        # y would be captured by the inner binder
        c = S(["(V x (E y (r x y)))"], ["q"])
        self.assertFalse(is_valid_step(ForallLeft(leaf(["(E y (r y y))"], ["q"]), c)))
        self.assertTrue(is_valid_step(ForallLeft(leaf(["(E y (r z y))"], ["q"]), c)))

    def test_forall_left_rejects_rebound_variable(self):
        c = S(["(V x (E x (p x)))"], ["q"])
        self.assertFalse(is_valid_step(ForallLeft(leaf(["(E x (p x))"], ["q"]), c)))

    def test_exists_right(self):
        c = S(["q"], ["(E x (p x x))"])
        self.assertTrue(is_valid_step(ExistsRight(leaf(["q"], ["(p (f c) (f c))"]), c)))
        self.assertFalse(is_valid_step(ExistsRight(leaf(["q"], ["(p (f c) c)"]), c)))

    def test_exists_right_rejects_capturing_instance(self):
        c = S([], ["(E x (V y (r x y)))"])
        self.assertFalse(is_valid_step(ExistsRight(leaf([], ["(V y (r y y))"]), c)))

    def test_forall_right_eigenvariable(self):
        self.assertTrue(is_valid_step(ForallRight(leaf(["q"], ["(p y)"]), S(["q"], ["(V x (p x))"]))))
        self.assertTrue(is_valid_step(ForallRight(leaf([], ["(p x)"]), S([], ["(V x (p x))"]))))
        # y is free in the antecedent, or elsewhere in the succedent
        self.assertFalse(is_valid_step(ForallRight(leaf(["(s y)"], ["(p y)"]), S(["(s y)"], ["(V x (p x))"]))))
        self.assertFalse(is_valid_step(ForallRight(leaf([], ["(s y)", "(p y)"]), S([], ["(s y)", "(V x (p x))"]))))

    def test_forall_right_needs_a_variable_witness(self):
        self.assertFalse(is_valid_step(ForallRight(leaf([], ["(p (f c))"]), S([], ["(V x (p x))"]))))

    def test_eigenvariable_freshness_is_checked_against_the_context_only(self):
        # y stays free in the conclusion's principal formula
        self.assertTrue(is_valid_step(ForallRight(leaf([], ["(p y y)"]), S([], ["(V x (p x y))"]))))
        self.assertTrue(is_valid_step(ExistsLeft(leaf(["(p y y)"], []), S(["(E x (p x y))"], []))))

    def test_exists_left_eigenvariable(self):
        self.assertTrue(is_valid_step(ExistsLeft(leaf(["(p y)"], ["q"]), S(["(E x (p x))"], ["q"]))))
        self.assertFalse(is_valid_step(ExistsLeft(leaf(["(p y)"], ["(s y)"]), S(["(E x (p x))"], ["(s y)"]))))
        self.assertFalse(is_valid_step(ExistsLeft(leaf(["(p y)", "(s y)"], ["q"]), S(["(E x (p x))", "(s y)"], ["q"]))))


class TestCut(unittest.TestCase):
    def test_standard_cut(self):
        self.assertTrue(is_valid_step(Cut((leaf([], ["p"]), leaf(["p"], ["q"])), S([], ["q"]))))

    def test_contexts_are_concatenated(self):
        premises = (leaf(["a"], ["b", "p"]), leaf(["p", "c"], ["d"]))
        self.assertTrue(is_valid_step(Cut(premises, S(["a", "c"], ["b", "d"]))))
        self.assertFalse(is_valid_step(Cut(premises, S(["a", "b"], ["c", "d"]))))
        self.assertFalse(is_valid_step(Cut(premises, S(["c", "a"], ["b", "d"]))))

    def test_cut_formula_must_match(self):
        self.assertFalse(is_valid_step(Cut((leaf([], ["p"]), leaf(["r"], ["q"])), S([], ["q"]))))


class TestNodes(unittest.TestCase):
    def test_binary_rules_take_exactly_two_premises(self):
        with self.assertRaises(TypeError):
            Cut((leaf(["p"], ["p"]),), S(["p"], ["p"]))

    def test_make_node_checks_arity(self):
        with self.assertRaises(TypeError):
            make_node("ImpliesRight", (), S([], ["(> p p)"]))
        node = make_node("ImpliesRight", (leaf(["p"], ["p"]),), S([], ["(> p p)"]))
        self.assertIsInstance(node, ImpliesRight)
        self.assertEqual(node.label, "(→R)")

    def test_equal_nodes_of_different_rules_differ(self):
        self.assertNotEqual(WeakeningLeft(leaf(["p"], ["p"]), S(["q", "p"], ["p"])),
                            WeakeningRight(leaf(["p"], ["p"]), S(["q", "p"], ["p"])))

    def test_unknown_node_type(self):
        with self.assertRaises(TypeError):
            is_valid_step(LK())

    def test_rule_name_and_label(self):
        node = leaf(["p"], ["p"])
        self.assertEqual((node.rule, node.label), ("Axiom", "(ax)"))
        self.assertEqual(node.conclusion.ant_first(), F("p"))


if __name__ == "__main__":
    unittest.main()
