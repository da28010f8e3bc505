import pytest

from exerciser.lessons.messages import (
    ChangeColor,
    Echo,
    Move,
    Point,
    Quit,
    State,
    append_bar,
)


def test_match_message_call(capsys):
    state = State(quit=False, position=Point(0, 0), color=(0, 0, 0))
    state.process(ChangeColor((255, 0, 255)))
    state.process(Echo("hello world"))
    state.process(Move(Point(x=10, y=15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit is True
    assert capsys.readouterr().out == "hello world\n"


def test_default_state():
    state = State()
    assert (state.color, state.position, state.quit) == ((0, 0, 0), Point(0, 0), False)


def test_unknown_message():
    with pytest.raises(TypeError):
        State().process("move")


def test_is_foo_bar():
    assert append_bar("Foo") == "FooBar"


def test_is_bar_bar():
    assert append_bar(append_bar("")) == "BarBar"


def test_is_vec_pop_eq_bar():
    foo = append_bar(["Foo"])
    assert foo.pop() == "Bar"
    assert foo.pop() == "Foo"
    assert foo == []


def test_append_bar_unsupported():
    with pytest.raises(TypeError):
        append_bar(42)