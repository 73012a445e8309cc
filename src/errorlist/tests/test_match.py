"""Tests for identity matching."""

from __future__ import annotations

from errorlist import Errors, ErrorsException, define_template, matches, new, wrap


def test_absent_operands() -> None:
    assert matches(None, None)
    assert not matches(None, wrap("x"))
    assert not matches(wrap("x"), None)
    assert not matches(Errors(), None)
    assert not matches(None, Errors())


def test_empty_composite_matches_nothing() -> None:
    assert not matches(Errors(), wrap("x"))
    assert not matches(wrap("x"), Errors())
    assert not matches(Errors(), Errors())


def test_plain_leaves_match_by_text() -> None:
    assert matches(wrap("a"), wrap("a"))
    assert not matches(wrap("a"), wrap("b"))
    assert matches(wrap(42), wrap(42))
    assert wrap(42).message == wrap(42).message == "42"


def test_template_leaf_never_matches_plain_text() -> None:
    boom = define_template("boom")
    assert not matches(boom(), wrap("boom"))
    assert not matches(wrap("boom"), boom())


def test_composite_left_operand() -> None:
    errs = new(wrap("a")).add("b")
    assert matches(errs, wrap("b"))
    assert not matches(errs, wrap("c"))
    assert errs.matches(wrap("a"))


def test_composite_right_operand() -> None:
    errs = new(wrap("a")).add("b")
    assert matches(wrap("b"), errs)
    assert wrap("a").matches(errs)


def test_composites_match_on_any_pair() -> None:
    f = define_template("timeout after %ds")
    x = Errors().add("disk full").add(f(5))
    y = Errors().add("bad row").add(f(30))
    z = Errors().add("other")
    assert matches(x, y)
    assert matches(y, x)
    assert not matches(x, z)


def test_factory_operand() -> None:
    f = define_template("%d")
    g = define_template("%d")
    errs = Errors().add("a").add(f(7))
    assert matches(errs, f)
    assert matches(f, errs)
    assert not matches(errs, g)
    assert not matches(f, g(1))
    assert f.matches(f)


def test_arbitrary_values_compare_by_text() -> None:
    assert matches(wrap(ValueError("bad")), ValueError("bad"))
    assert matches("x", "x")
    assert not matches("x", "y")


def test_exception_wrapper_is_unwrapped() -> None:
    errs = Errors().add("a")
    assert matches(ErrorsException(errs), wrap("a"))
    assert matches(wrap("a"), ErrorsException(errs))
