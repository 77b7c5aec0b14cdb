from perceptra.observable import Observable


class Listener:
    pass


def test_add_new_listener_succeeds():
    subject = Observable()
    listener = Listener()
    assert subject.add_listener(listener) is True
    assert subject.listeners == (listener,)


def test_adding_same_listener_twice_fails():
    subject = Observable()
    listener = Listener()
    subject.add_listener(listener)
    assert subject.add_listener(listener) is False
    assert len(subject.listeners) == 1


def test_remove_registered_listener():
    subject = Observable()
    listener = Listener()
    subject.add_listener(listener)
    assert subject.remove_listener(listener) is True
    assert subject.listeners == ()


def test_remove_unknown_listener_fails():
    subject = Observable()
    subject.add_listener(Listener())
    assert subject.remove_listener(Listener()) is False
    assert len(subject.listeners) == 1


def test_unhashable_listeners_are_supported():
    subject = Observable()
    first, second = [], []
    assert subject.add_listener(first) is True
    assert subject.add_listener(second) is True
    assert subject.remove_listener(first) is True
    assert subject.listeners == (second,)
    assert subject.listeners[0] is second


def test_listeners_snapshot_is_independent():
    subject = Observable()
    snapshot = subject.listeners
    subject.add_listener(Listener())
    assert snapshot == ()
    assert len(subject.listeners) == 1


def test_listeners_can_be_notified_through_snapshot():
    subject = Observable()
    received = []
    assert subject.add_listener(received) is True
    for listener in subject.listeners:
        listener.append("event")
    assert received == ["event"]
    assert subject.listeners == (["event"],)