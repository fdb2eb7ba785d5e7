"""Tests for the single-layer functor capability and depth-1 combinators."""

import logging
from dataclasses import dataclass

import pytest

from functor_extras import (
    Functor,
    NotAFunctorError,
    fconst,
    ffor,
    fmap,
    freplace,
    is_functor,
    register_functor,
    void,
)
from fakes import Left, Nothing, Opaque, Pair, Right, Some


def test_fmap_list_preserves_length_and_order() -> None:
    assert fmap(lambda x: x * 10, [1, 2, 3]) == [10, 20, 30]
    assert fmap(lambda x: x, []) == []


def test_fmap_tuple_returns_tuple() -> None:
    result = fmap(str, (1, 2))
    assert result == ("1", "2")
    assert isinstance(result, tuple)


def test_fmap_dict_keeps_keys() -> None:
    result = fmap(len, {"a": "x", "b": "yyy"})
    assert result == {"a": 1, "b": 3}
    assert list(result) == ["a", "b"]


def test_fmap_iterator_is_lazy() -> None:
    seen: list[int] = []

    def record(x: int) -> int:
        seen.append(x)
        return x + 1

    mapped = fmap(record, iter([1, 2, 3]))
    assert seen == []
    assert list(mapped) == [2, 3, 4]
    assert seen == [1, 2, 3]


def test_fmap_generator() -> None:
    gen = (x for x in range(3))
    assert list(fmap(lambda x: x * x, gen)) == [0, 1, 4]


def test_fmap_uses_map_method() -> None:
    assert fmap(lambda x: x + 1, Some(1)) == Some(2)
    assert fmap(lambda x: x + 1, Nothing()) == Nothing()
    assert fmap(lambda x: x + 1, Right(1)) == Right(2)
    assert fmap(lambda x: x + 1, Left("boom")) == Left("boom")


def test_fmap_uses_registered_instance() -> None:
    assert fmap(lambda x: -x, Pair(1, 2)) == Pair(-1, -2)


def test_fmap_rejects_non_functor() -> None:
    value = Opaque("raw")
    try:
        fmap(lambda x: x, value)
        assert False, "Expected NotAFunctorError"
    except NotAFunctorError as e:
        assert "Opaque" in str(e)
        assert e.value is value


def test_not_a_functor_error_is_type_error() -> None:
    with pytest.raises(TypeError):
        fmap(lambda x: x, None)
    with pytest.raises(NotAFunctorError):
        fmap(str.upper, "text")


def test_not_a_functor_error_repr() -> None:
    err = NotAFunctorError("bad", 42)
    assert "value=42" in repr(err)


def test_transform_errors_propagate() -> None:
    def boom(_: int) -> int:
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        fmap(boom, [1])


def test_is_functor() -> None:
    assert is_functor([])
    assert is_functor({})
    assert is_functor(Some(1))
    assert is_functor(Pair(1, 2))
    assert is_functor(iter(()))
    assert not is_functor(Opaque())
    assert not is_functor(None)
    assert not is_functor(3)


def test_functor_protocol_is_structural() -> None:
    assert isinstance(Some(1), Functor)
    assert isinstance(Nothing(), Functor)
    assert not isinstance(Opaque(), Functor)


def test_register_functor_plain_call_and_subclasses(caplog: pytest.LogCaptureFixture) -> None:
    @dataclass(frozen=True)
    class Tagged:
        tag: str
        value: int

    @dataclass(frozen=True)
    class Labelled(Tagged):
        pass

    def map_tagged(f, tagged):
        return type(tagged)(tagged.tag, f(tagged.value))

    caplog.set_level(logging.DEBUG, logger="functor_extras.kernel.functor")
    returned = register_functor(Tagged, map_tagged)

    assert returned is map_tagged
    assert "Tagged" in caplog.text
    assert fmap(lambda x: x + 1, Tagged("t", 1)) == Tagged("t", 2)
    assert fmap(lambda x: x + 1, Labelled("l", 1)) == Labelled("l", 2)


def test_fconst_replaces_every_value() -> None:
    assert fconst(0, [1, 2, 3]) == [0, 0, 0]
    assert fconst("x", Some(1)) == Some("x")
    assert fconst("x", Nothing()) == Nothing()


def test_freplace_is_flipped_fconst() -> None:
    assert freplace([1, 2], 9) == fconst(9, [1, 2])


def test_ffor_is_flipped_fmap() -> None:
    def describe(x: int) -> str:
        if x % 2:
            return "odd"
        return "even"

    assert ffor([1, 2], describe) == ["odd", "even"]
    assert ffor(Some(4), describe) == fmap(describe, Some(4))


def test_void_discards_values() -> None:
    assert void([1, 2]) == [None, None]
    assert void(Some("a")) == Some(None)
    assert void(Nothing()) == Nothing()
    assert void({"k": 1}) == {"k": None}
