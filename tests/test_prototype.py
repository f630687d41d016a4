import pytest

from patternkit.prototype import (
    Prototype,
    PrototypeClient,
    PrototypeConcrete1,
    PrototypeConcrete2,
)


def test_client_holds_one_of_each(capsys):
    first, second = PrototypeClient().prototypes
    assert type(first) is PrototypeConcrete1
    assert type(second) is PrototypeConcrete2
    assert (first.state, second.state) == (1, 2)
    assert [first.to_string(), second.to_string()] == [
        "I'm a PrototypeConcrete1",
        "I'm a PrototypeConcrete2",
    ]
    capsys.readouterr()


def test_default_states():
    assert PrototypeConcrete1().state == 1
    assert PrototypeConcrete2().state == 2


def test_clone_is_new_equal_object():
    original = PrototypeClient().prototypes[0]
    copy1 = original.clone()
    copy2 = original.clone()
    assert copy1 is not original
    assert copy1 is not copy2
    assert copy1 == original == copy2
    assert type(copy1) is PrototypeConcrete1


def test_clone_keeps_custom_state():
    clone = PrototypeConcrete2(7).clone()
    assert type(clone) is PrototypeConcrete2
    assert clone.state == 7


def test_clone_is_independent():
    original = PrototypeConcrete1(3)
    clone = original.clone()
    clone.state = 5
    assert original.state == 3


def test_to_string(capsys):
    text = PrototypeClient().prototypes[0].clone().to_string()
    assert text == "I'm a PrototypeConcrete1"
    assert capsys.readouterr().out == text + "\n"


def test_different_kinds_are_not_equal():
    assert PrototypeConcrete1(1) != PrototypeConcrete2(1)


def test_interface_is_abstract():
    with pytest.raises(TypeError):
        Prototype()