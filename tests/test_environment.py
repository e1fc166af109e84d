import pytest

from sigma.errors import SigmaInvalidIdentifier, SigmaUndefinedVariable
from sigma.types.environment import Environment
from sigma.types.symbol import Symbol


def test_lookup_walks_outward():
    root = Environment()
    root.define(Symbol("a"), 1)
    child = Environment(outer=root)
    grandchild = Environment(outer=child)
    assert grandchild.lookup(Symbol("a")) == 1
    assert grandchild.find(Symbol("a")) is root


def test_inner_binding_shadows_outer():
    root = Environment()
    root.define(Symbol("a"), 1)
    child = Environment(outer=root)
    child.define(Symbol("a"), 2)
    assert child.lookup(Symbol("a")) == 2
    assert root.lookup(Symbol("a")) == 1


def test_define_only_touches_own_frame():
    root = Environment()
    root.define(Symbol("a"), 1)
    child = Environment(outer=root)
    child.define(Symbol("a"), 99)
    assert root.vars[Symbol("a")] == 1
    assert child.vars == {Symbol("a"): 99}


def test_define_overwrites_in_same_frame():
    env = Environment()
    env.define(Symbol("a"), 1)
    env.define(Symbol("a"), 2)
    assert env.lookup(Symbol("a")) == 2


def test_undefined_variable():
    env = Environment(outer=Environment())
    with pytest.raises(SigmaUndefinedVariable) as exc:
        env.lookup(Symbol("missing"))
    assert str(exc.value) == "undefined variable: missing"
    assert env.find(Symbol("missing")) is None


@pytest.mark.parametrize(
    "name", [Symbol("9lives"), Symbol("a b"), Symbol(""), Symbol("x\n"), "plain-string", 5]
)
def test_define_rejects_invalid_identifiers(name):
    env = Environment()
    with pytest.raises(SigmaInvalidIdentifier):
        env.define(name, 1)


def test_from_builtins_copies_table():
    table = {"one": 1, Symbol("two"): 2}
    env = Environment.from_builtins(table)
    env.define(Symbol("three"), 3)
    assert env.lookup(Symbol("one")) == 1
    assert env.lookup(Symbol("two")) == 2
    assert env.outer is None
    assert "three" not in table
    assert len(table) == 2


def test_str_and_repr():
    root = Environment()
    root.define(Symbol("a"), 1)
    child = Environment(outer=root)
    child.define(Symbol("b"), 2)
    assert str(child) == "{b: 2} -> ..."
    assert repr(child) == "<Environment chain: {b: 2} -> {a: 1}>"


def test_from_builtins_skips_invalid_names(caplog):
    with caplog.at_level("WARNING", logger="sigma.types.environment"):
        env = Environment.from_builtins({"bad name": 1, "x\n": 2, 7: 3, "good": 4})
    assert env.vars == {Symbol("good"): 4}
    assert "bad name" in caplog.text
