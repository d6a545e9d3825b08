import copy
import gc

from termcat.cancel import cancel_channel


def test_fresh_channel_not_cancelled():
    canceller, observer = cancel_channel()
    assert observer.is_cancelled() is False
    canceller.signal()
    assert observer.is_cancelled() is True


def test_signal_is_consumed_once():
    canceller, observer = cancel_channel()
    canceller.signal()
    assert observer.is_cancelled() is True
    assert observer.is_cancelled() is False


def test_each_signal_counts():
    canceller, observer = cancel_channel()
    canceller.signal()
    canceller.signal()
    assert [observer.is_cancelled() for _ in range(3)] == [True, True, False]


def test_dropping_canceller_cancels():
    canceller, observer = cancel_channel()
    assert observer.is_cancelled() is False
    del canceller
    gc.collect()
    assert observer.is_cancelled() is True


def test_copy_keeps_channel_open():
    canceller, observer = cancel_channel()
    other = copy.copy(canceller)
    del canceller
    gc.collect()
    assert observer.is_cancelled() is False
    other.signal()
    assert observer.is_cancelled() is True