import pytest

from patternkit.memento import (
    CareTaker,
    Memento,
    MementoConcrete,
    Originator,
    OriginatorConcrete,
)


def test_client_scenario_restores_first_state():
    originator = OriginatorConcrete()
    care_taker = CareTaker(originator)
    originator.set_state(1)
    care_taker.backup()
    originator.set_state(10)
    care_taker.undo()
    assert originator.state == 1


def test_default_state():
    assert OriginatorConcrete().state == 0


def test_memento_captures_state_at_creation():
    originator = OriginatorConcrete(5)
    memento = originator.create_memento()
    originator.set_state(7)
    assert memento.state == 5
    memento.restore()
    assert originator.state == 5


def test_undo_keeps_backup_so_repeated_undo_restores_same_state():
    originator = OriginatorConcrete(3)
    care_taker = CareTaker(originator)
    care_taker.backup()
    originator.set_state(4)
    care_taker.undo()
    originator.set_state(9)
    care_taker.undo()
    assert originator.state == 3
    assert len(care_taker) == 1


def test_undo_uses_latest_backup():
    originator = OriginatorConcrete(1)
    care_taker = CareTaker(originator)
    care_taker.backup()
    originator.set_state(2)
    care_taker.backup()
    originator.set_state(3)
    care_taker.undo()
    assert originator.state == 2


def test_undo_without_backup_raises():
    care_taker = CareTaker(OriginatorConcrete())
    with pytest.raises(IndexError):
        care_taker.undo()


def test_show_state_message(capsys):
    originator = OriginatorConcrete(42)
    capsys.readouterr()
    message = originator.show_state()
    assert message == OriginatorConcrete.SHOW_PREFIX + "42"
    assert capsys.readouterr().out.strip() == message


def test_memento_concrete_direct():
    originator = OriginatorConcrete(0)
    MementoConcrete(originator, 11).restore()
    assert originator.state == 11


def test_interfaces_are_abstract():
    with pytest.raises(TypeError):
        Memento()
    with pytest.raises(TypeError):
        Originator()