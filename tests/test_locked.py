import threading

import pytest

from salted_bloom import CapacityExceeded, LockedBloomFilter


class TestLockedBloomFilter:
    def test_forwards_accessors(self) -> None:
        bf = LockedBloomFilter(100, 0.01, rng=3)
        assert bf.capacity == 100
        assert bf.error_rate == 0.01
        assert bf.filter_length == bf.inner.filter_length == 960
        assert bf.num_hash_funcs == 7
        assert bf.salts == bf.inner.salts
        assert bf.key_count == len(bf) == 0

    def test_add_and_check(self) -> None:
        bf = LockedBloomFilter(10, 0.05)
        bf.add("k")
        assert bf.check("k")
        assert "k" in bf

    def test_concurrent_adds(self) -> None:
        bf = LockedBloomFilter(400, 0.01, rng=11)

        def worker(t):
            for i in range(50):
                bf.add(f"t{t}-{i}")

        threads = [threading.Thread(target=worker, args=(t,)) for t in range(8)]
        for th in threads:
            th.start()
        for th in threads:
            th.join()

        assert bf.key_count == 400
        assert all(bf.check(f"t{t}-{i}") for t in range(8) for i in range(50))
        with pytest.raises(CapacityExceeded):
            bf.add("one-more")

    def test_capacity_race(self) -> None:
        """Exactly `capacity` adds win when more threads try."""
        bf = LockedBloomFilter(100, 0.05)
        wins, rejected = [], []
        guard = threading.Lock()

        def worker(t):
            for i in range(25):
                try:
                    bf.add(f"{t}:{i}")
                except CapacityExceeded:
                    with guard:
                        rejected.append(1)
                else:
                    with guard:
                        wins.append(1)

        threads = [threading.Thread(target=worker, args=(t,)) for t in range(8)]
        for th in threads:
            th.start()
        for th in threads:
            th.join()

        assert len(wins) == 100
        assert len(rejected) == 100
        assert bf.key_count == 100
