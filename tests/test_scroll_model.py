import unittest

from scrollthumb.axis import Axis
from scrollthumb.position_mapper import Geometry
from scrollthumb.scroll_model import ScrollModel
from scrollthumb.scrollbar import Scrollbar


class TestScrollModel(unittest.TestCase):
    def test_set_position_saturates(self):
        m = ScrollModel(content_size=1000, viewport_size=200)
        m.set_position(-50)
        self.assertEqual(m.offset, 0.0)
        m.set_position(5000)
        self.assertEqual(m.offset, 800.0)
        m.set_position(321)
        self.assertEqual(m.offset, 321.0)

    def test_apply_move_is_opposite_to_pointer_delta(self):
        m = ScrollModel(content_size=1000, viewport_size=200, offset=400)
        m.apply_move(50)   # pointer went up -> content moves back
        self.assertEqual(m.offset, 350)
        m.apply_move(-1000)
        self.assertEqual(m.offset, 800)

    def test_small_content(self):
        m = ScrollModel(content_size=100, viewport_size=200, offset=30)
        m.clamp()
        self.assertEqual(m.max(), 0.0)
        self.assertEqual(m.offset, 0.0)

    def test_resize_clamps(self):
        m = ScrollModel(content_size=1000, viewport_size=200, offset=800)
        m.resize(1000, 600)
        self.assertEqual(m.offset, 400)

    def test_geometry(self):
        m = ScrollModel(content_size=1000, viewport_size=200, offset=400)
        self.assertEqual(m.geometry(20), Geometry(1000.0, 200.0, 400.0, 20))


class TestHostLoop(unittest.TestCase):
    """A host wiring a scrollbar to its content, frame by frame."""
    def test_drag_thumb_to_end(self):
        model = ScrollModel(content_size=1000, viewport_size=200)
        bar = Scrollbar(Axis.VERTICAL, model.geometry(20),
                        on_position_change=model.set_position,
                        on_move=lambda dx, dy: model.apply_move(dy))

        bar.press_thumb((0, 20))
        for y in range(30, 400, 10):
            bar.gesture.on_pointer_move(y)
            bar.update(model.geometry(20))
        bar.gesture.on_pointer_release()

        self.assertEqual(model.offset, 800)
        self.assertEqual(bar.thumb.thumb_offset, 160)

    def test_track_click_then_clamp(self):
        model = ScrollModel(content_size=1000, viewport_size=200)
        bar = Scrollbar(Axis.VERTICAL, model.geometry(20), on_position_change=model.set_position)
        bar.press_track((0, 195))
        bar.update(model.geometry(20))
        self.assertEqual(model.offset, 800)
        self.assertEqual(bar.thumb.end, 200)


if __name__ == "__main__":
    unittest.main()
