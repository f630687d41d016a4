import pytest

from patternkit.decorator import Component, ComponentConcrete, Decorator, DecoratorConcrete


class _ComponentMock(Component):
    def __init__(self):
        self.calls = 0

    def behavior(self):
        self.calls += 1


def test_decorator_calls_wrapped_component():
    component = _ComponentMock()
    decorator = DecoratorConcrete(component)
    result = decorator.behavior()
    assert component.calls >= 1
    assert result == DecoratorConcrete.MESSAGE


def test_component_concrete_behavior(capsys):
    assert ComponentConcrete().behavior() == ComponentConcrete.MESSAGE
    assert capsys.readouterr().out.splitlines() == [ComponentConcrete.MESSAGE]


def test_decorator_runs_component_first(capsys):
    decorator = DecoratorConcrete(ComponentConcrete())
    result = decorator.behavior()
    expected = [ComponentConcrete.MESSAGE, DecoratorConcrete.MESSAGE]
    assert capsys.readouterr().out.splitlines() == expected
    assert result.splitlines() == expected


def test_base_decorator_only_delegates():
    component = ComponentConcrete()
    assert Decorator(component).behavior() == component.behavior()


def test_decorators_nest():
    nested = DecoratorConcrete(DecoratorConcrete(ComponentConcrete()))
    assert nested.behavior().splitlines() == [
        ComponentConcrete.MESSAGE,
        DecoratorConcrete.MESSAGE,
        DecoratorConcrete.MESSAGE,
    ]


def test_component_interface_is_abstract():
    with pytest.raises(TypeError):
        Component()