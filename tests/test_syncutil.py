import threading

import pytest

from godis.syncutil import AtomicBool, WaitGroup


def test_atomic_bool_defaults_to_false():
    flag = AtomicBool()
    assert not flag
    assert flag.value is False


def test_atomic_bool_set_and_clear():
    flag = AtomicBool()
    flag.value = True
    assert flag
    assert flag.value is True
    flag.value = False
    assert not flag


def test_atomic_bool_initial_value():
    assert AtomicBool(True)


def test_atomic_bool_across_threads():
    flag = AtomicBool()
    thread = threading.Thread(target=lambda: setattr(flag, "value", True))
    thread.start()
    thread.join()
    assert flag


def test_wait_group_waits_for_workers():
    wg = WaitGroup()
    results = []
    lock = threading.Lock()
    workers = 5
    wg.add(workers)

    def work(n):
        with lock:
            results.append(n)
        wg.done()

    for n in range(workers):
        threading.Thread(target=work, args=(n,)).start()
    wg.wait()
    assert wg.wait_with_timeout(0.01) is False
    assert sorted(results) == list(range(workers))


def test_wait_with_timeout_completes():
    wg = WaitGroup()
    assert wg.wait_with_timeout(0.5) is False
    wg.add(1)
    threading.Timer(0.05, wg.done).start()
    assert wg.wait_with_timeout(5) is False


def test_wait_with_timeout_times_out():
    wg = WaitGroup()
    wg.add(1)
    assert wg.wait_with_timeout(0.05) is True
    wg.done()
    assert wg.wait_with_timeout(0.05) is False


def test_negative_counter_raises():
    wg = WaitGroup()
    with pytest.raises(ValueError):
        wg.done()
    wg.add(1)
    with pytest.raises(ValueError):
        wg.add(-2)
    assert wg.wait_with_timeout(0.01) is True