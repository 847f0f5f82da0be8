import threading

from credits_query.cache import MemoryCache


def test_missing_key_reports_not_found():
    cache = MemoryCache()
    assert cache.get("isPaused") == (None, False)


def test_set_then_get():
    cache = MemoryCache()
    cache.set("isPaused", False)
    cache.set("creditsPerEgld", 100)

    assert cache.get("isPaused") == (False, True)
    assert cache.get("creditsPerEgld") == (100, True)
    assert len(cache) == 2


def test_last_write_wins():
    cache = MemoryCache()
    cache.set("creditsPerEgld", 1)
    cache.set("creditsPerEgld", 2)
    assert cache.get("creditsPerEgld") == (2, True)


def test_concurrent_writers():
    cache = MemoryCache()

    def writer(offset):
        for i in range(200):
            cache.set(f"key-{offset}-{i}", i)
            cache.get(f"key-{offset}-{i}")

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(cache) == 8 * 200
    assert cache.get("key-3-199") == (199, True)
