import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from scrollthumb.anim import SmoothedThumb
from scrollthumb.axis import Axis
from scrollthumb.position_mapper import Geometry
from scrollthumb.scrollbar import Scrollbar
from scrollthumb.ui.pointer import PygamePointerSource
from scrollthumb.ui.style import ScrollbarStyle
from scrollthumb.ui.widget import ScrollbarWidget

TRACK = (10, 20, 30)
THUMB = (200, 100, 50)
THUMB_ACTIVE = (0, 255, 0)


def down(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)


class TestScrollbarWidget(unittest.TestCase):
    def setUp(self):
        self.jumps, self.moves = [], []
        self.bar = Scrollbar(Axis.VERTICAL, Geometry(1000, 200, 0, 20),
                             on_position_change=self.jumps.append,
                             on_move=lambda dx, dy: self.moves.append((dx, dy)))
        style = ScrollbarStyle(radius=0, track_color=TRACK + (255,), track_active_color=TRACK + (255,),
                               thumb_color=THUMB + (255,), thumb_active_color=THUMB_ACTIVE + (255,))
        self.widget = ScrollbarWidget(pygame.Rect(100, 50, 10, 200), self.bar, style=style)

    def test_rect_sets_track_origin(self):
        self.assertEqual(self.bar.track_origin, (100, 50))
        self.widget.set_rect(pygame.Rect(0, 10, 10, 200))
        self.assertEqual(self.bar.track_origin, (0, 10))

    def test_thumb_rect(self):
        self.assertEqual(self.widget.thumb_rect(), pygame.Rect(100, 50, 10, 40))
        self.bar.update(Geometry(1000, 200, 800, 20))
        self.assertEqual(self.widget.thumb_rect(), pygame.Rect(100, 210, 10, 40))

    def test_press_on_thumb_starts_relative_drag(self):
        self.assertTrue(self.widget.handle_event(down((105, 60))))
        self.assertTrue(self.bar.is_dragging)
        self.assertEqual(self.jumps, [])

    def test_press_on_track_jumps(self):
        self.assertTrue(self.widget.handle_event(down((105, 150))))
        self.assertEqual(len(self.jumps), 1)
        self.assertAlmostEqual(self.jumps[0], 400)

    def test_ignored_presses(self):
        self.assertFalse(self.widget.handle_event(down((300, 150))))
        self.assertFalse(self.widget.handle_event(down((105, 150), button=3)))
        self.assertFalse(self.bar.is_dragging)

    def test_pygame_source_drives_drag(self):
        src = PygamePointerSource()
        self.bar.attach(src)
        self.widget.handle_event(down((105, 60)))
        self.assertTrue(src.dispatch(pygame.event.Event(pygame.MOUSEMOTION, pos=(105, 70), rel=(0, 10), buttons=(1, 0, 0))))
        self.assertEqual(len(self.moves), 1)
        self.assertAlmostEqual(self.moves[0][1], -50.0)

        src.dispatch(pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(105, 70)))
        self.assertFalse(self.bar.is_dragging)
        self.assertFalse(src.dispatch(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)))

    def test_draw_uses_active_colour_while_dragging(self):
        surface = pygame.Surface((300, 300))
        self.widget.draw(surface)
        self.assertEqual(tuple(surface.get_at((105, 70)))[:3], THUMB)
        self.assertEqual(tuple(surface.get_at((105, 200)))[:3], TRACK)

        self.widget.handle_event(down((105, 60)))
        self.widget.draw(surface)
        self.assertEqual(tuple(surface.get_at((105, 70)))[:3], THUMB_ACTIVE)

    def test_hidden_without_overflow(self):
        self.widget.style = self.widget.style.derive(show_when_no_overflow=False)
        self.bar.update(Geometry(200, 200, 0, 20))
        self.assertFalse(self.widget.visible)
        self.assertFalse(self.widget.handle_event(down((105, 60))))

    def test_smoothing_only_affects_drawing(self):
        self.widget.smoothing = SmoothedThumb()
        self.widget.update(1 / 60)
        self.bar.update(Geometry(1000, 200, 800, 20))
        self.widget.update(1 / 60)
        # hit testing stays on the exact thumb
        self.assertEqual(self.widget.thumb_rect().y, 210)
        self.assertLess(self.widget._shown.thumb_offset, 160)


if __name__ == "__main__":
    unittest.main()
