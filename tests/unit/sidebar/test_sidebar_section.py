"""Tests for sidebar section bindings and line-to-document lookup."""

from __future__ import annotations

import unittest

from mrusidebar.host.memory import MemoryHost
from mrusidebar.mru.controller import MruController
from mrusidebar.sidebar.bindings import KeyBinding, KeyBindingRegistry, normalize_key
from mrusidebar.sidebar.section import SidebarSection
from mrusidebar.ui_theme import PLAIN_THEME


def _section() -> tuple[MemoryHost, SidebarSection]:
    host = MemoryHost()
    for handle, name in ((1, "/w/one.txt"), (2, "/w/two.txt"), (3, "/w/three.txt")):
        host.open(handle, name)
    host.current = 1
    controller = MruController(host)
    host.attach(controller)
    controller.initialise()
    return host, SidebarSection(controller, width=30, theme=PLAIN_THEME)


class KeyBindingRegistryTests(unittest.TestCase):
    def test_named_keys_are_normalized(self) -> None:
        self.assertEqual(normalize_key("enter"), "ENTER")
        self.assertEqual(normalize_key("e"), "e")
        self.assertEqual(normalize_key("E"), "E")

    def test_dispatch_returns_none_for_unbound_key(self) -> None:
        calls: list[str] = []
        registry = KeyBindingRegistry().register_bindings(
            KeyBinding(("x", "Enter"), lambda: calls.append("x") or True),
        )
        self.assertIsNone(registry.dispatch("q"))
        self.assertTrue(registry.dispatch("ENTER"))
        self.assertEqual(calls, ["x"])
        self.assertEqual(registry.bound_keys(), ("x", "ENTER"))


class SidebarSectionTests(unittest.TestCase):
    def test_draw_lists_documents_around_current(self) -> None:
        _host, section = _section()

        frame = section.draw()

        self.assertEqual(frame.lines[0], "Buffers")
        self.assertEqual([location.handle for location in frame.locations[1:]], [2, 1, 3])

    def test_open_at_focuses_document_on_line(self) -> None:
        host, section = _section()
        section.draw()

        self.assertTrue(section.open_at(3))

        self.assertEqual(host.focus_requests, [3])
        self.assertEqual(section.controller.mru.front, 3)

    def test_open_at_title_line_does_nothing(self) -> None:
        host, section = _section()
        section.draw()

        self.assertFalse(section.open_at(0))
        self.assertEqual(host.focus_requests, [])

    def test_cursor_keys_move_within_drawn_lines(self) -> None:
        _host, section = _section()
        section.draw()

        self.assertTrue(section.handle_key("j"))
        self.assertTrue(section.handle_key("down"))
        self.assertEqual(section.cursor, 2)
        self.assertTrue(section.handle_key("j"))
        self.assertFalse(section.handle_key("j"))
        self.assertEqual(section.cursor, 3)
        section.handle_key("k")
        self.assertEqual(section.cursor, 2)

    def test_enter_opens_entry_under_cursor(self) -> None:
        host, section = _section()
        section.draw()
        section.cursor = 1

        self.assertTrue(section.handle_key("Enter"))

        self.assertEqual(host.focus_requests, [2])

    def test_cycle_keys_drive_controller(self) -> None:
        host, section = _section()

        section.handle_key("n")
        self.assertEqual(host.focus_requests, [3])
        section.handle_key("p")

        self.assertEqual(host.focus_requests, [3, 1])
        self.assertEqual(section.controller.mru.as_list(), [1, 2, 3])

    def test_unbound_key_is_not_handled(self) -> None:
        _host, section = _section()
        self.assertIsNone(section.handle_key("w"))


if __name__ == "__main__":
    unittest.main()
