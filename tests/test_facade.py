from patternkit.facade import Class1, Class2, Facade


def test_class1_message():
    assert Class1().do_something() == "I'm Class1. I'm doing something."


def test_class2_message():
    assert Class2().do_something_else() == "I'm Class2. I'm doing something else."


def test_facade_returns_messages_in_order():
    assert Facade().do_everything() == (
        Facade.MESSAGE,
        Class1.MESSAGE,
        Class2.MESSAGE,
    )


def test_facade_output_order(capsys):
    Facade().do_everything()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [Facade.MESSAGE, Class1.MESSAGE, Class2.MESSAGE]