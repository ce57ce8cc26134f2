import pytest

from arcext.singleton import Singleton, SingletonManager, get_manager


class Counter(Singleton):
    created = 0

    def __init__(self):
        type(self).created += 1
        self.value = 0


class Manual(Singleton, auto_init=False):
    def __init__(self, tag="base"):
        self.tag = tag


class ManualChild(Manual, auto_init=False):
    pass


@pytest.fixture(autouse=True)
def clean_manager():
    get_manager().shutdown()
    yield
    get_manager().shutdown()


def test_instance_is_shared():
    first = Counter.instance()
    second = Counter.instance()
    assert first is second
    assert len(get_manager()) == 1


def test_reset_creates_new_instance():
    first = Counter.instance()
    Counter.reset()
    assert len(get_manager()) == 0
    second = Counter.instance()
    assert second is not first
    assert len(get_manager()) == 1


def test_manual_singleton_requires_install():
    with pytest.raises(RuntimeError):
        Manual.instance()
    assert len(get_manager()) == 0


def test_install_then_instance():
    obj = Manual("custom")
    assert Manual.install(obj) is obj
    assert Manual.instance().tag == "custom"
    assert len(get_manager()) == 1


def test_install_after_init_keeps_first():
    first = Manual("a")
    Manual.install(first)
    assert Manual.install(Manual("b")) is first
    assert len(get_manager()) == 1


def test_install_subclass_object():
    child = ManualChild("child")
    assert Manual.install(child) is child
    assert Manual.instance() is child
    assert len(get_manager()) == 1


def test_install_wrong_type_rejected():
    with pytest.raises(TypeError):
        Manual.install(Counter())
    assert len(get_manager()) == 0


def test_with_instance_only_when_present():
    seen = []
    Manual.with_instance(lambda inst: seen.append(inst))
    assert seen == []
    obj = Manual.install(Manual("x"))
    Manual.with_instance(lambda inst: seen.append(inst))
    assert seen == [obj]
    assert len(get_manager()) == 1


def test_shutdown_releases_all_singletons():
    counter = Counter.instance()
    Manual.install(Manual("y"))
    get_manager().shutdown()
    assert len(get_manager()) == 0
    with pytest.raises(RuntimeError):
        Manual.instance()
    assert Counter.instance() is not counter


def test_manager_store_and_clear():
    manager = SingletonManager()
    a, b, c = object(), object(), object()
    for item in (a, b, c):
        assert manager.store(item) is item
    assert len(manager) == 3
    manager.clear(b)
    assert len(manager) == 2
    manager.clear(b)
    assert len(manager) == 2
    manager.shutdown()
    assert len(manager) == 0