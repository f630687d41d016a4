"""Small, runnable examples of the classic object-oriented design patterns."""

__version__ = "0.1.0"

__all__ = [
    "adapter",
    "bridge",
    "builder",
    "cli",
    "decorator",
    "facade",
    "factory_method",
    "flyweight",
    "iterator",
    "mediator",
    "memento",
    "observer",
    "prototype",
    "proxy",
    "singleton",
    "state",
    "strategy",
    "template_method",
]