import threading

import pytest

from wordle_server.exceptions import NotFound, RoomNotFound, SessionNotFound
from wordle_server.services.store import EntityStore, RoomStore, SessionStore


class Counter:
    def __init__(self):
        self.value = 0


def test_add_and_lock():
    store = EntityStore()
    counter = store.add('c1', Counter())
    with store.locked('c1') as entity:
        assert entity is counter
    assert 'c1' in store
    assert len(store) == 1
    assert store.ids() == ['c1']


def test_duplicate_id_rejected():
    store = EntityStore()
    store.add('c1', Counter())
    with pytest.raises(KeyError):
        store.add('c1', Counter())


def test_missing_ids_raise_store_specific_errors():
    with pytest.raises(NotFound):
        with EntityStore().locked('x'):
            pass
    with pytest.raises(SessionNotFound):
        with SessionStore().locked('x'):
            pass
    with pytest.raises(RoomNotFound):
        with RoomStore().locked('x'):
            pass


def test_remove_is_idempotent():
    store = EntityStore()
    store.add('c1', Counter())
    assert store.remove('c1') is True
    assert store.remove('c1') is False
    assert 'c1' not in store


def test_remove_while_holding_lock():
    store = EntityStore()
    store.add('c1', Counter())
    with store.locked('c1'):
        assert store.remove('c1') is True
    with pytest.raises(NotFound):
        with store.locked('c1'):
            pass


def test_read_modify_write_is_atomic_per_id():
    store = EntityStore()
    store.add('c1', Counter())
    store.add('c2', Counter())

    def bump(entity_id):
        for _ in range(200):
            with store.locked(entity_id) as counter:
                current = counter.value
                threading.Event().wait(0)
                counter.value = current + 1

    threads = [threading.Thread(target=bump, args=(entity_id,)) for entity_id in ('c1', 'c2') * 4]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    for entity_id in ('c1', 'c2'):
        with store.locked(entity_id) as counter:
            assert counter.value == 800
