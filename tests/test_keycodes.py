import string

from hazel.keycodes import Key, MouseButton


def test_documented_key_values():
    assert Key(65) is Key.A
    assert Key(32) is Key.SPACE
    assert Key(256) is Key.ESCAPE
    assert Key(-1) is Key.UNKNOWN


def test_letters_are_contiguous():
    names = [Key(value).name for value in range(65, 91)]
    assert names == list(string.ascii_uppercase)


def test_digits_are_contiguous():
    names = [Key(value).name for value in range(48, 58)]
    assert names == [f"D{n}" for n in range(10)]


def test_function_keys_are_contiguous():
    names = [Key(value).name for value in range(290, 315)]
    assert names == [f"F{n}" for n in range(1, 26)]


def test_keypad_digits_are_contiguous():
    names = [Key(value).name for value in range(320, 330)]
    assert names == [f"KP_{n}" for n in range(10)]


def test_last_key_is_menu():
    assert Key(348) is Key.MENU
    assert Key(348) is Key.LAST
    assert max(Key) is Key.MENU


def test_lookup_by_value():
    assert Key(32) is Key.SPACE
    assert Key(65) is Key.A


def test_mouse_button_aliases():
    assert MouseButton(0) is MouseButton.LEFT
    assert MouseButton(1) is MouseButton.RIGHT
    assert MouseButton(2) is MouseButton.MIDDLE
    assert MouseButton(7) is MouseButton.LAST


def test_mouse_buttons_are_contiguous_from_zero():
    buttons = [MouseButton(n) for n in range(8)]
    assert buttons == list(MouseButton)
    assert buttons[0] is MouseButton.BUTTON_1