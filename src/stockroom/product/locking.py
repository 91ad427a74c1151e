"""Per-product locks for stock movements.

A buy or sell is a read-modify-write against one product. Holding the
product's lock across the whole command, unit of work commit included,
keeps two movements in this process from both acting on the same stale
quantity.

The registry holds locks weakly. A lock lives only while some caller is
holding or waiting on it, so ids that never match a product (or products
nobody is moving stock on) cost nothing once the call returns.
"""

import threading
import weakref

_registry_lock = threading.Lock()
_locks: "weakref.WeakValueDictionary[str, _ProductLock]" = weakref.WeakValueDictionary()


class _ProductLock:
    """A ``threading.Lock`` that can be weakly referenced."""

    __slots__ = ("_lock", "__weakref__")

    def __init__(self):
        self._lock = threading.Lock()

    def __enter__(self):
        self._lock.acquire()
        return self

    def __exit__(self, *exc_info):
        self._lock.release()


def lock_for(product_id) -> _ProductLock:
    """Return the lock guarding ``product_id``, creating it on first use.

    Callers must keep the returned object referenced for as long as they
    rely on it.
    """
    key = str(product_id)
    with _registry_lock:
        lock = _locks.get(key)
        if lock is None:
            lock = _locks[key] = _ProductLock()
        return lock
