"""
Tests for predicate primitives and combinators.

These tests verify that:
1. Character classes decide exactly the documented sets
2. Threshold and range predicates delegate to their ordering
3. Combinators follow AND / OR with the right empty-case identities
4. Predicates are total, pure and safe to share between threads
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from refined.constants import ChA, ChSpace, ChZ, Const, const
from refined.ordering import NaturalOrd, TFloat, TInt, TStr, ordering
from refined.predicates import (
    AllOf,
    AlphaNum,
    AnyOf,
    Char,
    CharSatisfy,
    Digit,
    Exists,
    ForAll,
    GreaterOrEq,
    GreaterThan,
    LessOrEq,
    LessThan,
    Letter,
    Lower,
    MaxCount,
    MinCount,
    NonEmpty,
    Pred,
    Range,
    SeqInfo,
    Upper,
    Whitespace,
    explain,
    is_char,
)


# Every ASCII/Latin-1 character plus a few from further afield
CHARACTERS = [chr(i) for i in range(256)] + ["é", "Ω", "€", "中", "٣", "\u2003"]

NOT_CHARACTERS = ["", "ab", "  ", 5, None, b"a", ["a"]]


class Even(Pred):
    """Even integers (test-only predicate)."""

    @classmethod
    def _evaluate(cls, value):
        return isinstance(value, int) and value % 2 == 0


class Positive(Pred):
    """Positive integers (test-only predicate)."""

    @classmethod
    def _evaluate(cls, value):
        return isinstance(value, int) and value > 0


# =============================================================================
# CHARACTER PREDICATE TESTS
# =============================================================================

class TestCharacterClasses:
    """Character classes decide exactly their ASCII sets."""

    def test_letter(self):
        for c in CHARACTERS:
            expected = ("A" <= c <= "Z") or ("a" <= c <= "z")
            assert Letter.true(c) == expected, repr(c)

    def test_digit(self):
        for c in CHARACTERS:
            assert Digit.true(c) == ("0" <= c <= "9"), repr(c)

    def test_alphanum_is_letter_or_digit(self):
        for c in CHARACTERS:
            assert AlphaNum.true(c) == (Letter.true(c) or Digit.true(c)), repr(c)

    def test_whitespace(self):
        for c in CHARACTERS:
            assert Whitespace.true(c) == (c in {" ", "\t", "\r", "\n"}), repr(c)

    def test_upper_and_lower(self):
        assert Upper.true("Q") and not Upper.true("q")
        assert Lower.true("q") and not Lower.true("Q")

    def test_unicode_letters_are_not_ascii_letters(self):
        assert not Letter.true("é")
        assert not Digit.true("٣")
        assert not Whitespace.true("\u2003")

    @pytest.mark.parametrize("value", NOT_CHARACTERS)
    def test_non_characters_never_satisfy(self, value):
        """Character predicates are total: other inputs are simply False."""
        for pred in (Letter, Digit, Whitespace, AlphaNum, Upper, Lower):
            assert pred.true(value) is False

    def test_char_equality(self):
        assert Char[ChSpace].true(" ")
        assert not Char[ChSpace].true("\t")
        assert not Char[ChSpace].true("  ")

    def test_char_satisfy_bounds_inclusive(self):
        AtoZ = CharSatisfy[ChA, ChZ]
        assert AtoZ.true("A")
        assert AtoZ.true("Z")
        assert not AtoZ.true("@")
        assert not AtoZ.true("[")

    def test_char_satisfy_with_inverted_bounds_is_empty(self):
        Empty = CharSatisfy[ChZ, ChA]
        assert not any(Empty.true(c) for c in CHARACTERS)

    def test_is_char(self):
        assert is_char("a")
        assert not is_char("ab")
        assert not is_char(1)


# =============================================================================
# COMPARISON PREDICATE TESTS
# =============================================================================

class TestComparisonPredicates:
    """Threshold and range predicates."""

    def test_greater_than_five(self):
        GT5 = GreaterThan[TInt, const(5)]
        assert GT5.true(3) is False
        assert GT5.true(5) is False
        assert GT5.true(6) is True

    @pytest.mark.parametrize("pred, accepted", [
        (LessThan, [3, 4]),
        (GreaterOrEq, [5, 6, 7]),
        (LessOrEq, [3, 4, 5]),
        (GreaterThan, [6, 7]),
    ])
    def test_threshold_family(self, pred, accepted):
        specialised = pred[TInt, const(5)]
        for v in range(3, 8):
            assert specialised.true(v) == (v in accepted)

    def test_ordering_is_delegated(self):
        """With a reversed ordering, 'greater' means numerically smaller."""
        Reverse = ordering(lambda x, y: y - x, name="ReverseInt")
        GT5 = GreaterThan[Reverse, const(5)]
        assert GT5.true(3)
        assert not GT5.true(6)

    def test_range_inclusive(self):
        OneToTen = Range[TInt, const(1), const(10)]
        assert [v for v in range(-2, 14) if OneToTen.true(v)] == list(range(1, 11))

    def test_range_with_min_above_max_is_always_false(self):
        Inverted = Range[TInt, const(9), const(1)]
        assert not any(Inverted.true(v) for v in range(-20, 20))

    def test_string_range(self):
        BtoD = Range[TStr, const("b"), const("d")]
        assert BtoD.true("cat")
        assert not BtoD.true("dog")

    @pytest.mark.parametrize("value", ["abc", None, [1], object()])
    def test_incomparable_values_are_false(self, value):
        """Comparison failures do not escape `true`."""
        assert GreaterThan[TInt, const(5)].true(value) is False
        assert Range[TInt, const(1), const(10)].true(value) is False

    def test_nan_fails_float_bounds(self):
        nan = float("nan")
        assert GreaterOrEq[TFloat, const(0.0)].true(nan) is False
        assert GreaterThan[TFloat, const(-1e308)].true(nan) is False
        assert Range[TFloat, const(0.0), const(1.0)].true(nan) is False
        assert Range[TFloat, const(0.0), const(1.0)].true(0.5) is True

    def test_nan_sorts_below_every_float(self):
        nan = float("nan")
        assert LessOrEq[TFloat, const(0.0)].true(nan) is True
        assert LessThan[TFloat, const(float("-inf"))].true(nan) is True

    def test_nan_fails_natural_order_bounds(self):
        nan = float("nan")
        assert GreaterOrEq[NaturalOrd, const(0.0)].true(nan) is False
        assert LessOrEq[NaturalOrd, const(0.0)].true(nan) is False
        assert Range[NaturalOrd, const(0.0), const(1.0)].true(nan) is False


# =============================================================================
# SEQUENCE PREDICATE TESTS
# =============================================================================

class TestSequencePredicates:
    """Count-bounded predicates over SeqInfo."""

    def test_max_count_three(self):
        AtMost3 = MaxCount[const(3)]
        assert AtMost3.true(SeqInfo(3))
        assert not AtMost3.true(SeqInfo(4))

    def test_max_count_zero_means_empty_only(self):
        Empty = MaxCount[const(0)]
        assert Empty.true(SeqInfo(0))
        assert not Empty.true(SeqInfo(1))

    def test_min_count_and_non_empty(self):
        assert MinCount[const(2)].true(SeqInfo(2))
        assert not MinCount[const(2)].true(SeqInfo(1))
        assert NonEmpty.true(SeqInfo.of("x"))
        assert not NonEmpty.true(SeqInfo.of([]))

    def test_seq_info_of_sized(self):
        assert SeqInfo.of([1, 2, 3]).count == 3
        assert SeqInfo.of({}).count == 0

    def test_seq_info_rejects_negative_count(self):
        with pytest.raises(ValueError, match="count must be >= 0"):
            SeqInfo(-1)

    def test_seq_info_rejects_non_int(self):
        with pytest.raises(TypeError, match="count must be an int"):
            SeqInfo(True)
        with pytest.raises(TypeError, match="count must be an int"):
            SeqInfo(2.0)

    def test_raw_sequences_are_not_seq_info(self):
        """The count must be supplied; a raw list is not inspected."""
        assert not MaxCount[const(3)].true([1, 2])


# =============================================================================
# COMBINATOR TESTS
# =============================================================================

class TestCombinators:
    """AND / OR composition."""

    def test_all_of(self):
        EvenAndPositive = AllOf[Even, Positive]
        assert EvenAndPositive.true(4)
        assert not EvenAndPositive.true(-4)
        assert not EvenAndPositive.true(3)

    def test_any_of(self):
        EvenOrPositive = AnyOf[Even, Positive]
        assert EvenOrPositive.true(-4)
        assert EvenOrPositive.true(3)
        assert not EvenOrPositive.true(-3)

    @pytest.mark.parametrize("value", [0, "x", None, SeqInfo(1)])
    def test_empty_all_of_is_true(self, value):
        assert AllOf[()].true(value) is True

    @pytest.mark.parametrize("value", [0, "x", None, SeqInfo(1)])
    def test_empty_any_of_is_false(self, value):
        assert AnyOf[()].true(value) is False

    def test_single_sub_predicate(self):
        assert AllOf[Even].true(2) == Even.true(2)
        assert AnyOf[Even].true(3) == Even.true(3)

    def test_aliases(self):
        assert ForAll is AllOf
        assert Exists is AnyOf

    def test_nested_composition(self):
        Ident = AllOf[AnyOf[Letter, Char[const("_")]]]
        assert Ident.true("_")
        assert Ident.true("k")
        assert not Ident.true("-")


# =============================================================================
# SPECIALISATION TESTS
# =============================================================================

class TestSpecialisation:
    """Template subscription, caching and misuse."""

    def test_specialisation_is_cached(self):
        assert GreaterThan[TInt, const(5)] is GreaterThan[TInt, const(5)]
        assert AnyOf[Letter, Digit] is AnyOf[Letter, Digit]

    def test_distinct_parameters_distinct_markers(self):
        assert GreaterThan[TInt, const(5)] is not GreaterThan[TInt, const(6)]
        assert AnyOf[Letter, Digit] is not AnyOf[Digit, Letter]

    def test_describe(self):
        assert GreaterThan[TInt, const(5)].describe() == "GreaterThan[TInt, Const[5]]"
        assert Char[ChSpace].describe() == "Char[Const[' ']]"
        assert AllOf[()].describe() == "AllOf[]"
        assert Letter.describe() == "Letter"

    def test_specialised_markers_are_subclasses(self):
        assert issubclass(GreaterThan[TInt, const(5)], GreaterThan)
        assert issubclass(Letter, Pred)

    def test_unspecialised_template_cannot_evaluate(self):
        with pytest.raises(TypeError, match="generic predicate"):
            GreaterThan.true(5)
        with pytest.raises(TypeError, match="generic predicate"):
            AllOf.true(5)

    def test_wrong_arity(self):
        with pytest.raises(TypeError, match="takes 2 parameter"):
            GreaterThan[TInt]

    def test_wrong_parameter_kind(self):
        with pytest.raises(TypeError, match="expects a Ord marker"):
            GreaterThan[const(5), TInt]
        with pytest.raises(TypeError, match="expects a Pred marker"):
            AllOf[TInt]
        with pytest.raises(TypeError, match="expects a Const marker"):
            MaxCount[3]

    def test_generic_parameter_rejected(self):
        with pytest.raises(TypeError, match="specialise it first"):
            AllOf[GreaterThan]
        with pytest.raises(TypeError, match="specialise it first"):
            GreaterThan[TInt, Const]

    def test_concrete_predicate_is_not_generic(self):
        with pytest.raises(TypeError, match="not a generic marker"):
            Letter[Digit]

    def test_specialised_marker_is_not_generic(self):
        with pytest.raises(TypeError, match="not a generic marker"):
            GreaterThan[TInt, const(5)][TInt, const(6)]

    def test_predicates_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            Letter()

    def test_base_pred_has_no_decision_procedure(self):
        with pytest.raises(TypeError, match="does not define a decision procedure"):
            Pred.true(1)


# =============================================================================
# PURITY & CONCURRENCY TESTS
# =============================================================================

class TestPurity:
    """Predicates are referentially transparent and thread-safe."""

    def test_repeated_evaluation_is_stable(self):
        for pred, value in [(Letter, "a"), (Digit, "a"), (MaxCount[const(1)], SeqInfo(2))]:
            results = {pred.true(value) for _ in range(50)}
            assert len(results) == 1

    def test_concurrent_evaluation(self):
        def classify(c):
            return (Letter.true(c), Digit.true(c), Whitespace.true(c))

        expected = [classify(c) for c in CHARACTERS]
        with ThreadPoolExecutor(max_workers=8) as pool:
            for _ in range(5):
                assert list(pool.map(classify, CHARACTERS)) == expected

    def test_concurrent_specialisation_yields_one_marker(self):
        low = const("concurrency-low")
        high = const("concurrency-high")

        def build(_):
            return Range[TStr, low, high]

        with ThreadPoolExecutor(max_workers=8) as pool:
            markers = set(pool.map(build, range(64)))
        assert len(markers) == 1


# =============================================================================
# EXPLAIN TESTS
# =============================================================================

class TestExplain:
    """Composition trees for diagnostics."""

    def test_explain_letter(self):
        assert explain(Letter) == "\n".join([
            "Letter",
            "  = AnyOf[Upper, Lower]",
            "      Upper",
            "        = CharSatisfy[Const['A'], Const['Z']]",
            "      Lower",
            "        = CharSatisfy[Const['a'], Const['z']]",
        ])

    def test_explain_alphanum_mentions_all_parts(self):
        text = explain(AlphaNum)
        assert text.splitlines()[0] == "AlphaNum"
        assert "= AnyOf[Letter, Digit]" in text
        assert "CharSatisfy[Const['0'], Const['9']]" in text

    def test_explain_primitive(self):
        assert explain(GreaterThan[TInt, const(5)]) == "GreaterThan[TInt, Const[5]]"

    def test_explain_whitespace_lists_characters(self):
        text = explain(Whitespace)
        for name in ("Char[Const[' ']]", "Char[Const['\\t']]",
                     "Char[Const['\\r']]", "Char[Const['\\n']]"):
            assert name in text
