# patternkit

A compact collection of the classic object-oriented design patterns, each
one a small, self-contained module you can read, import and experiment with.
The participants of every pattern print what they are doing, so running an
example shows the flow of calls between the objects. Most methods that print
a message also return it, which makes the behaviour easy to check from code.

## Patterns

| Module                        | Pattern          | Main classes                                                  |
|-------------------------------|------------------|---------------------------------------------------------------|
| `patternkit.adapter`          | Adapter          | `Animal`, `DogNonCompliant`, `DogCompliant`                   |
| `patternkit.bridge`           | Bridge           | `Shape`, `Triangle`, `Color`, `Color1`                        |
| `patternkit.proxy`            | Proxy            | `SubjectResource`, `RealSubjectResource`, `ProxyResource`     |
| `patternkit.builder`          | Builder          | `HouseDirector`, `SmallHouseBuilder`, `BigHouseBuilder`, `ProductHouse` |
| `patternkit.factory_method`   | Factory Method   | `Creator`, `ConcreteCreator`, `Product`, `ConcreteProduct`    |
| `patternkit.flyweight`        | Flyweight        | `FlyweightFactory`, `FlyweightShared`, `FlyweightUnshared`    |
| `patternkit.mediator`         | Mediator         | `ConcreteMediator`, `ColleagueA`, `ColleagueB`                |
| `patternkit.memento`          | Memento          | `OriginatorConcrete`, `CareTaker`, `MementoConcrete`          |
| `patternkit.prototype`        | Prototype        | `PrototypeClient`, `PrototypeConcrete1`, `PrototypeConcrete2` |
| `patternkit.singleton`        | Singleton        | `Singleton`                                                   |
| `patternkit.facade`           | Facade           | `Facade`, `Class1`, `Class2`                                  |
| `patternkit.iterator`         | Iterator         | `Aggregate`, `Iterator`                                       |
| `patternkit.observer`         | Observer         | `Subject`, `Observer`                                         |
| `patternkit.state`            | State            | `Context`, `StateConcrete1`, `StateConcrete2`                 |
| `patternkit.decorator`        | Decorator        | `ComponentConcrete`, `DecoratorConcrete`                      |
| `patternkit.strategy`         | Strategy         | `Context`, `StrategyConcrete`                                 |
| `patternkit.template_method`  | Template Method  | `AbstractClass`, `ConcreteClass`                              |

## Installation

```
pip install patternkit
```

The package has no dependencies outside the standard library and works on
Python 3.10 and later.

## Running the demonstrations

The package installs a `patternkit` command. Without arguments it runs every
demonstration in turn, each under a `== name ==` heading:

```
patternkit
```

List the available demonstrations:

```
patternkit --list
```

Run only some of them by name:

```
patternkit observer memento
```

An unknown name is reported as an error and nothing is run.

## Using the patterns from Python

An iterator over an aggregate:

```python
from patternkit.iterator import Aggregate

numbers = Aggregate()
numbers.add_item(0)
numbers.add_item(10)

iterator = numbers.create_iterator()
while not iterator.is_done():
    print("Value:", iterator.current_item())
    iterator.next()

# An aggregate is also a plain Python sequence.
assert len(numbers) == 2
assert list(numbers) == [0, 10]
```

`Iterator.current_item()` raises `IndexError` once the walk is past the last
item.

Saving and restoring state with a memento:

```python
from patternkit.memento import CareTaker, OriginatorConcrete

originator = OriginatorConcrete(0)
caretaker = CareTaker(originator)

originator.set_state(1)
caretaker.backup()
originator.set_state(10)
caretaker.undo()

originator.show_state()   # I'm the Originator. My state is 1
```

`CareTaker.undo()` restores the most recent backup and keeps it; it raises
`IndexError` when nothing has been backed up.

Observing a subject:

```python
from patternkit.observer import Observer, Subject

subject = Subject()
observer = Observer(subject)
subject.state = 5          # notifies the observer
assert observer.state == 5
observer.close()           # detaches from the subject
```

Opening a resource lazily through a proxy, closed by a `with` block:

```python
from patternkit.proxy import ProxyResource

with ProxyResource("resource_url") as resource:
    resource.trivial_request()   # the real resource is not opened
    resource.access()            # now it is
```

Swapping the algorithm a context applies:

```python
from patternkit.strategy import Context, StrategyConcrete

context = Context(StrategyConcrete(), 42)
context.apply_strategy()   # I'm the StrategyConcrete. I'll do in my way using: 42
```

A few more details:

- `Singleton.get_instance(counter)` creates the instance on the first call
  (one per class) under a lock; every later call adds one to its counter.
  Copying a singleton raises `TypeError`.
- `FlyweightFactory` pools the shared part of each character code; `len()`
  of the factory is the number of pooled characters. Codes outside 0..255 and
  negative positions raise `ValueError`.
- The builders raise `RuntimeError` when a step runs before
  `build_foundations()`; the state and strategy contexts raise
  `RuntimeError` when they have no state or strategy.
- `Facade.do_everything()` returns the three messages it printed, and
  `AbstractClass.template_method()` returns the messages of the steps that
  produced one.

## Running the tests

```
pip install -e ".[test]"
pytest
```