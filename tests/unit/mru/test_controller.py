"""Tests for controller event handling against a scripted memory host.

Mirrors the sidebar lifecycle: initialise, focus, hide, close, and cycling.
"""

from __future__ import annotations

import unittest

from mrusidebar.host.memory import MemoryHost
from mrusidebar.mru.controller import MruController


def _setup(handles: list[int], current: int | None = None, attach: bool = True) -> tuple[MemoryHost, MruController]:
    host = MemoryHost()
    for handle in handles:
        host.open(handle, f"/proj/file{handle}.txt")
    host.current = current
    controller = MruController(host)
    if attach:
        host.attach(controller)
    return host, controller


class ControllerInitialiseTests(unittest.TestCase):
    def test_initialise_promotes_active_and_keeps_host_order(self) -> None:
        _host, controller = _setup([10, 20, 30], current=20)

        controller.initialise()

        self.assertEqual(controller.mru.as_list(), [20, 10, 30])
        self.assertEqual(controller.current, 20)
        current_item = controller.render().current_item()
        self.assertIsNotNone(current_item)
        self.assertEqual(current_item.handle, 20)

    def test_initialise_filters_invalid_documents(self) -> None:
        host, controller = _setup([1, 2, 3], current=1)
        host.update(2, buftype="help")

        controller.initialise()

        self.assertEqual(controller.mru.as_list(), [1, 3])

    def test_initialise_without_active_document_still_renders(self) -> None:
        _host, controller = _setup([1, 2], current=None)

        controller.initialise()

        self.assertEqual(controller.mru.as_list(), [1, 2])
        self.assertIsNone(controller.current)
        self.assertEqual(controller.items.handles(), [1, 2])


class ControllerFocusTests(unittest.TestCase):
    def test_focus_promotes_and_regenerates(self) -> None:
        _host, controller = _setup([1, 2, 3], current=1)
        controller.initialise()

        controller.on_focus(3)

        self.assertEqual(controller.mru.as_list(), [3, 1, 2])
        self.assertEqual(controller.current, 3)
        self.assertEqual(controller.items.current_item().handle, 3)

    def test_focus_on_invalid_window_is_ignored(self) -> None:
        host, controller = _setup([1, 2], current=1)
        controller.initialise()
        host.open(99, "quickfix list", window_type="quickfix")

        controller.on_focus(99)

        self.assertEqual(controller.mru.as_list(), [1, 2])
        self.assertEqual(controller.current, 1)

    def test_focus_does_not_reconcile(self) -> None:
        host, controller = _setup([1, 2, 3], current=1)
        controller.initialise()
        host.update(3, listed=False, loaded=False)

        controller.on_focus(2)

        self.assertEqual(controller.mru.as_list(), [2, 1, 3])
        self.assertEqual(controller.items.handles(), [2, 1])

    def test_hide_leaves_list_untouched(self) -> None:
        host, controller = _setup([1, 2], current=1)
        controller.initialise()
        host.update(2, listed=False, loaded=False)

        controller.on_hide(2)

        self.assertEqual(controller.mru.as_list(), [1, 2])


class ControllerCloseTests(unittest.TestCase):
    def test_close_purges_invalid_documents(self) -> None:
        host, controller = _setup([20, 10, 30], current=20)
        controller.initialise()
        self.assertEqual(controller.mru.as_list(), [20, 10, 30])
        host.update(10, listed=False, loaded=False)

        controller.on_close()

        self.assertEqual(controller.mru.as_list(), [20, 30])
        self.assertNotIn(10, controller.items.handles())

    def test_host_close_event_reaches_controller(self) -> None:
        host, controller = _setup([1, 2, 3], current=1)
        controller.initialise()

        host.close(2)

        self.assertEqual(controller.mru.as_list(), [1, 3])


class ControllerCycleTests(unittest.TestCase):
    def test_cycle_forward_focuses_oldest(self) -> None:
        host, controller = _setup([20, 10], current=20)
        controller.initialise()

        controller.on_cycle_forward()

        self.assertEqual(host.focus_requests, [10])
        self.assertEqual(controller.mru.as_list(), [10, 20])
        self.assertEqual(controller.current, 10)

    def test_cycle_backward_focuses_next_most_recent(self) -> None:
        host, controller = _setup([1, 2, 3, 4], current=1)
        controller.initialise()

        controller.on_cycle_backward()

        self.assertEqual(host.focus_requests, [2])
        self.assertEqual(controller.mru.as_list(), [2, 3, 4, 1])
        self.assertEqual(controller.current, 2)

    def test_forward_then_backward_restores_front_order(self) -> None:
        _host, controller = _setup([1, 2, 3, 4], current=1)
        controller.initialise()

        controller.on_cycle_forward()
        self.assertEqual(controller.mru.as_list(), [4, 1, 2, 3])
        controller.on_cycle_backward()

        self.assertEqual(controller.mru.as_list(), [1, 2, 3, 4])
        self.assertEqual(controller.current, 1)

    def test_cycle_does_not_regenerate_without_focus_event(self) -> None:
        host, controller = _setup([1, 2, 3], current=1, attach=False)
        controller.initialise()
        before = controller.items

        controller.on_cycle_forward()

        self.assertEqual(host.focus_requests, [3])
        self.assertIs(controller.items, before)
        self.assertEqual(controller.render().handles()[1], 3)

    def test_cycle_on_empty_list_is_noop(self) -> None:
        host, controller = _setup([], current=None)
        controller.initialise()

        controller.on_cycle_forward()
        controller.on_cycle_backward()

        self.assertEqual(host.focus_requests, [])
        self.assertTrue(controller.render().empty)


class ControllerIsolationTests(unittest.TestCase):
    def test_two_controllers_keep_independent_state(self) -> None:
        _host_a, first = _setup([1, 2], current=1)
        _host_b, second = _setup([1, 2], current=2)
        first.initialise()
        second.initialise()

        first.on_focus(2)
        first.on_focus(1)

        self.assertEqual(first.mru.as_list(), [1, 2])
        self.assertEqual(second.mru.as_list(), [2, 1])


if __name__ == "__main__":
    unittest.main()
