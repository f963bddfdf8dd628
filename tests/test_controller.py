from famicore.controller import Button, Controller


def _latch(controller):
    controller.write_register(1)
    controller.write_register(0)


def test_reads_buttons_in_order():
    controller = Controller()
    controller.set_button_state(Button.A, True)
    controller.set_button_state(Button.START, True)
    controller.set_button_state(Button.RIGHT, True)
    _latch(controller)
    bits = [controller.read_register() & 1 for _ in range(8)]
    expected = [1 if controller.button_states & int(b) else 0 for b in Button]
    assert bits == expected
    assert bits[0] == 1 and bits[1] == 0


def test_reads_after_eight_return_one():
    controller = Controller()
    _latch(controller)
    for _ in range(8):
        assert controller.read_register() & 1 == 0
    assert controller.read_register() == 1
    assert controller.read_register() == 1


def test_strobe_holds_first_button():
    controller = Controller()
    controller.set_button_state(Button.A, True)
    controller.write_register(1)
    for _ in range(5):
        assert controller.read_register() & 1 == 1
    assert controller.cursor == 0


def test_release_button():
    controller = Controller()
    controller.set_button_state(Button.B, True)
    controller.set_button_state(Button.A, True)
    controller.set_button_state(Button.B, False)
    assert controller.button_states == int(Button.A)


def test_write_without_strobe_keeps_cursor():
    controller = Controller()
    _latch(controller)
    controller.read_register()
    controller.read_register()
    controller.write_register(0)
    assert controller.cursor == 2