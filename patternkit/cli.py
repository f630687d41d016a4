"""Command line that runs the demonstration of each design pattern."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Callable, Sequence

from patternkit.adapter import Animal, DogCompliant
from patternkit.bridge import Color1, Triangle
from patternkit.builder import BigHouseBuilder, HouseDirector, SmallHouseBuilder
from patternkit.decorator import ComponentConcrete, DecoratorConcrete
from patternkit.facade import Facade
from patternkit.factory_method import ConcreteCreator
from patternkit.flyweight import FlyweightFactory
from patternkit.iterator import Aggregate
from patternkit.mediator import ColleagueA, ColleagueB, ConcreteMediator
from patternkit.memento import CareTaker, OriginatorConcrete
from patternkit.observer import Observer, Subject
from patternkit.prototype import PrototypeClient
from patternkit.proxy import ProxyResource, RealSubjectResource, SubjectResource
from patternkit.singleton import Singleton
from patternkit.state import Context as StateContext
from patternkit.state import StateConcrete1
from patternkit.strategy import Context as StrategyContext
from patternkit.strategy import StrategyConcrete
from patternkit.template_method import ConcreteClass

__all__ = ["main"]


def _adapter() -> None:
    animal: Animal = DogCompliant()
    animal.speak()


def _bridge() -> None:
    Triangle(Color1()).draw()


def _proxy() -> None:
    resource: SubjectResource
    with RealSubjectResource("resource_url") as resource:
        resource.trivial_request()
    with ProxyResource("resource_url") as resource:
        resource.trivial_request()
    with ProxyResource("resource_url") as resource:
        resource.access()


def _builder() -> None:
    for builder in (SmallHouseBuilder(), BigHouseBuilder()):
        HouseDirector(builder).build_house()
        builder.house.show()


def _factory_method() -> None:
    ConcreteCreator().do_the_logic()


def _flyweight() -> None:
    factory = FlyweightFactory()
    letters = [
        factory.create_flyweight(ord("M"), 0),
        factory.create_flyweight(ord("M"), 2),
        factory.create_flyweight(ord("M"), 3),
        factory.create_flyweight(ord("A"), 1),
        factory.create_flyweight(ord("A"), 4),
    ]
    canvas = ["\0"] * 5
    for letter in letters:
        letter.draw(canvas)
    print(f"Result: {''.join(canvas)}")


def _mediator() -> None:
    colleague_a = ColleagueA()
    colleague_b = ColleagueB()
    ConcreteMediator(colleague_a, colleague_b)
    colleague_a.operation_a1()


def _memento() -> None:
    originator = OriginatorConcrete()
    caretaker = CareTaker(originator)
    originator.set_state(1)
    caretaker.backup()
    originator.set_state(10)
    caretaker.undo()
    originator.show_state()


def _prototype() -> None:
    prototypes = PrototypeClient().prototypes
    copy1 = prototypes[0].clone()
    copy2 = prototypes[0].clone()
    copy1.to_string()
    copy2.to_string()


def _singleton() -> None:
    class _DemoSingleton(Singleton):
        pass

    created = threading.Event()

    def ten_function() -> None:
        _DemoSingleton.get_instance(10)
        created.set()

    def zero_function() -> None:
        created.wait()
        _DemoSingleton.get_instance(0)

    threads = [threading.Thread(target=zero_function), threading.Thread(target=ten_function)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    _DemoSingleton.get_instance(100).print_counter()


def _facade() -> None:
    Facade().do_everything()


def _iterator() -> None:
    numbers: Aggregate[int] = Aggregate()
    numbers.add_item(0)
    numbers.add_item(10)
    words: Aggregate[str] = Aggregate()
    words.add_item("CIAO")
    words.add_item("mondo")
    for aggregate in (numbers, words):
        cursor = aggregate.create_iterator()
        while not cursor.is_done():
            print(f"Value: {cursor.current_item()}")
            cursor.next()


def _observer() -> None:
    subject = Subject()
    observer = Observer(subject)
    subject.state = 1
    print(f"Observer didn't change Subject's state: {subject.state}")
    observer.close()


def _state() -> None:
    context = StateContext()
    context.set_state(StateConcrete1(context))
    context.do_something()
    context.do_something()
    context.do_something_else()
    context.do_something_else()
    context.do_something_else()
    context.do_something()
    context.do_something()


def _decorator() -> None:
    DecoratorConcrete(ComponentConcrete()).behavior()


def _strategy() -> None:
    StrategyContext(StrategyConcrete()).apply_strategy()


def _template_method() -> None:
    ConcreteClass().template_method()


DEMOS: dict[str, Callable[[], None]] = {
    "adapter": _adapter,
    "bridge": _bridge,
    "proxy": _proxy,
    "builder": _builder,
    "factory_method": _factory_method,
    "flyweight": _flyweight,
    "mediator": _mediator,
    "memento": _memento,
    "prototype": _prototype,
    "singleton": _singleton,
    "facade": _facade,
    "iterator": _iterator,
    "observer": _observer,
    "state": _state,
    "decorator": _decorator,
    "strategy": _strategy,
    "template_method": _template_method,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="patternkit",
        description="Run design pattern demonstrations.",
    )
    parser.add_argument(
        "patterns",
        nargs="*",
        metavar="PATTERN",
        help="patterns to demonstrate (default: all)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="list the available patterns and exit",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)

    if args.list:
        for name in DEMOS:
            print(name)
        return 0

    unknown = [name for name in args.patterns if name not in DEMOS]
    if unknown:
        parser.error(f"unknown pattern: {', '.join(unknown)}")

    selected = args.patterns or list(DEMOS)
    for name in selected:
        if len(selected) > 1:
            print(f"== {name} ==")
        DEMOS[name]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())