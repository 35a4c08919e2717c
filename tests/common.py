import threading
import unittest

from polylist.common import fresh_address

class TestCommonUtils(unittest.TestCase):

    def test_fresh_address_positive_and_distinct(self):
        seen = [fresh_address() for _ in range(100)]
        assert all(a > 0 for a in seen)
        self.assertEqual(len(set(seen)), len(seen))

    def test_fresh_address_across_threads(self):
        results = []
        lock = threading.Lock()
        def work():
            mine = [fresh_address() for _ in range(200)]
            with lock:
                results.extend(mine)
        threads = [threading.Thread(target=work) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(len(set(results)), 800)

