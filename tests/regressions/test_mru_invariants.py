"""Randomized event sequences against controller invariants.

Seeds are fixed so failures reproduce; each run checks uniqueness of the MRU
list and that every drawn document is tracked and valid.
"""

from __future__ import annotations

import random
import unittest

from mrusidebar.host.memory import MemoryHost
from mrusidebar.mru.controller import MruController

EVENT_COUNT = 400


def _random_session(seed: int) -> tuple[MemoryHost, MruController, random.Random]:
    rng = random.Random(seed)
    host = MemoryHost()
    for handle in range(1, 9):
        host.open(handle, f"/proj/f{handle}.txt")
    host.current = 1
    controller = MruController(host)
    host.attach(controller)
    controller.initialise()
    return host, controller, rng


class MruInvariantTests(unittest.TestCase):
    def _step(self, host: MemoryHost, controller: MruController, rng: random.Random, next_handle: list[int]) -> None:
        action = rng.choice(("open", "focus", "focus", "hide", "close", "unlist", "next", "prev", "quickfix"))
        known = list(host.buffers)
        if action == "open":
            handle = next_handle[0]
            next_handle[0] += 1
            host.open(handle, f"/proj/f{handle}.txt")
            host.focus(handle)
        elif action == "focus" and known:
            host.focus(rng.choice(known))
        elif action == "hide" and known:
            host.hide(rng.choice(known))
        elif action == "close" and known:
            host.close(rng.choice(known))
        elif action == "unlist" and known:
            host.update(rng.choice(known), listed=False, loaded=False)
        elif action == "next":
            controller.on_cycle_forward()
        elif action == "prev":
            controller.on_cycle_backward()
        elif action == "quickfix":
            host.open("qf", "quickfix", window_type="quickfix")
            host.focus("qf")

    def test_uniqueness_and_render_validity_hold(self) -> None:
        for seed in range(10):
            with self.subTest(seed=seed):
                host, controller, rng = _random_session(seed)
                next_handle = [100]
                for _ in range(EVENT_COUNT):
                    self._step(host, controller, rng, next_handle)
                    entries = controller.mru.as_list()
                    self.assertEqual(len(entries), len(set(entries)))
                    rendered = controller.render().handles()
                    self.assertEqual(len(rendered), len(set(rendered)))
                    for handle in rendered:
                        self.assertIn(handle, entries)
                        self.assertTrue(host.is_valid_document(handle))

    def test_reconcile_is_stable_after_any_sequence(self) -> None:
        host, controller, rng = _random_session(1234)
        next_handle = [100]
        for _ in range(EVENT_COUNT):
            self._step(host, controller, rng, next_handle)
        controller.on_close()
        once = controller.mru.as_list()
        controller.on_close()
        self.assertEqual(controller.mru.as_list(), once)
        self.assertTrue(all(host.is_valid_document(handle) for handle in once))


if __name__ == "__main__":
    unittest.main()
