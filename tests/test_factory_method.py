import pytest

from designlab.patterns.factory_method import (
    Button,
    ConcreteCreator1,
    ConcreteCreator2,
    ConcreteProduct1,
    ConcreteProduct2,
    Creator,
    HtmlButton,
    HtmlDialog,
    RadioButton,
    RadioDialog,
    WindowsButton,
    WindowsDialog,
    main,
)


@pytest.mark.parametrize("cls", [Button, Creator])
def test_abstract_bases(cls):
    with pytest.raises(TypeError):
        cls()


@pytest.mark.parametrize(
    "dialog_cls, button_cls",
    [(WindowsDialog, WindowsButton), (HtmlDialog, HtmlButton), (RadioDialog, RadioButton)],
)
def test_dialog_creates_its_button_and_uses_it(capsys, dialog_cls, button_cls):
    button = dialog_cls().create_button()
    assert isinstance(button, button_cls)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [f"I am a {button_cls.label}", button.click(), button.render()]


def test_windows_button_messages(capsys):
    button = WindowsButton()
    assert capsys.readouterr().out == "I am a WindowsButton\n"
    assert button.click() == " I am a windows Button Click"
    assert button.render() == " I am a windows Button Render"


def test_some_operation_result(capsys):
    result = WindowsDialog().some_operation()
    assert result == "Creator: The same creator's code has just worked with"
    assert " I am a windows Button Click" in capsys.readouterr().out


@pytest.mark.parametrize(
    "creator_cls, product_cls",
    [(ConcreteCreator1, ConcreteProduct1), (ConcreteCreator2, ConcreteProduct2)],
)
def test_creators_build_their_product(capsys, creator_cls, product_cls):
    product = creator_cls().factory_method()
    assert isinstance(product, product_cls)
    assert capsys.readouterr().out == f"I am {product_cls.__name__}\n"


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "factory"
    assert lines[1] == "I am a WindowsButton"
    assert lines[-1] == "I am ConcreteProduct1"