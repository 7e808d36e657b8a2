import pytest

from astlisp.errors import SymbolNotFound
from astlisp.builtin.env_builtin import BUILTINS
from astlisp.types.environment import Environment
from astlisp.types.values import Boolean, Number


def test_global_table(env):
    assert env.lookup("pi") == Number(3.14159)
    assert env.lookup("#t") == Boolean(True)
    assert env.lookup("#f") == Boolean(False)
    for name in ("+", "-", "<", ">"):
        assert env.lookup(name) == BUILTINS[name]
    assert sorted(env) == sorted(["pi", "#t", "#f", "+", "-", "<", ">"])
    assert len(env) == 7


def test_lookup_is_exact_and_case_sensitive(env):
    with pytest.raises(SymbolNotFound) as exc:
        env.lookup("PI")
    assert exc.value.name == "PI"
    with pytest.raises(SymbolNotFound):
        env.lookup(" pi")
    assert "pi" in env
    assert "Pi" not in env


def test_environment_cannot_be_mutated(env):
    with pytest.raises(AttributeError):
        env.x = 1
    with pytest.raises(TypeError):
        env.vars["pi"] = Number(3.0)
    assert env.lookup("pi") == Number(3.14159)


def test_source_mapping_changes_do_not_leak():
    table = {"x": Number(1.0)}
    env = Environment(table)
    table["x"] = Number(2.0)
    table["y"] = Number(3.0)
    assert env.lookup("x") == Number(1.0)
    assert "y" not in env


def test_no_binding_api(env):
    # the global table is the only frame; names cannot be shadowed
    assert not hasattr(env, "extend")
    assert not hasattr(env, "define")


def test_names_must_be_strings():
    with pytest.raises(TypeError):
        Environment({1: Number(1.0)})


def test_equality_and_repr():
    a = Environment({"x": Number(1.0)})
    b = Environment({"x": Number(1.0)})
    assert a == b
    assert str(a) == "{x: Number(value=1.0)}"
    assert repr(a) == "<Environment {x: Number(value=1.0)}>"
