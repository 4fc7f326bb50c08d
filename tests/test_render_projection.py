"""
Tests for RenderProjection.

Verifies:
- Draw order follows z-index with store order for ties
- Guides hidden when guide display is off
- Marquee rectangle only while marqueeing
- Bounds and working area
"""
from models.canvas import BackgroundType, GuideDirection, GuideType, SnapGuide
from models.transform import Rect, Vec2
from services.render_projection import RenderProjection, guide_line


def draw_ids(projection):
    return [p.id for p in projection.draw_list]


class TestDrawOrder:

    def test_ascending_z(self, placed_store):
        placed_store.bring_to_front('a')
        assert draw_ids(RenderProjection.from_state(placed_store.state)) == ['b', 'c', 'a']

    def test_send_to_back_ties_keep_store_order(self, placed_store):
        placed_store.send_to_back('c')
        placed_store.send_to_back('b')
        # b and c share z = 0
        assert draw_ids(RenderProjection.from_state(placed_store.state)) == ['b', 'c', 'a']

    def test_empty_canvas(self, fresh_store):
        projection = RenderProjection.from_state(fresh_store.state)
        assert projection.draw_list == ()
        assert projection.marquee is None
        assert projection.bounds.width == 0


class TestOverlays:

    def test_selection(self, placed_store):
        placed_store.select_sprite('b')
        projection = RenderProjection.from_state(placed_store.state)
        assert projection.is_selected('b')
        assert not projection.is_selected('a')

    def test_guides_follow_display_flag(self, placed_store):
        guide = SnapGuide(GuideDirection.VERTICAL, 100, GuideType.EDGE)
        placed_store.set_active_guides([guide])
        assert RenderProjection.from_state(placed_store.state).guides == (guide,)

        placed_store.set_show_snap_guides(False)
        assert RenderProjection.from_state(placed_store.state).guides == ()
        # Still recorded in the store
        assert placed_store.state.active_guides == (guide,)

    def test_marquee_only_while_selecting(self, placed_store):
        placed_store.set_selecting(Vec2(50, 60))
        placed_store.update_selection_rect(Vec2(10, 10))
        assert RenderProjection.from_state(placed_store.state).marquee == Rect(10, 10, 40, 50)

        placed_store.set_selecting(None)
        assert RenderProjection.from_state(placed_store.state).marquee is None

    def test_background_and_viewport(self, placed_store):
        placed_store.set_background('black')
        placed_store.set_scale(2)
        projection = RenderProjection.from_state(placed_store.state)
        assert projection.background == BackgroundType.BLACK
        assert projection.viewport.scale == 2


class TestBounds:

    def test_bounds(self, placed_store):
        bounds = RenderProjection.from_state(placed_store.state).bounds
        assert (bounds.min_x, bounds.min_y, bounds.max_x, bounds.max_y) == (0, 0, 680, 100)
        assert (bounds.width, bounds.height) == (680, 100)

    def test_working_area_minimum(self, placed_store):
        assert RenderProjection.from_state(placed_store.state).working_area == (2000, 2000)

    def test_working_area_grows_with_content(self, placed_store):
        placed_store.update_sprite_position('c', 3000, 1800)
        # c right edge 3080, bottom 1840, plus the 500 margin
        assert RenderProjection.from_state(placed_store.state).working_area == (3580, 2340)


class TestGuideLine:

    def test_vertical_spans_height(self):
        start, end = guide_line(SnapGuide(GuideDirection.VERTICAL, 120, GuideType.EDGE), (2000, 1500))
        assert (start, end) == (Vec2(120, 0), Vec2(120, 1500))

    def test_horizontal_spans_width(self):
        start, end = guide_line(SnapGuide(GuideDirection.HORIZONTAL, 70, GuideType.CENTER), (2000, 1500))
        assert (start, end) == (Vec2(0, 70), Vec2(2000, 70))
