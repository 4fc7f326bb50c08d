"""
Tests for PlacementStore core operations.

Verifies:
- Staircase placement and id filtering in add_sprites
- Removal prunes the selection
- clear_canvas resets the z counter
- update_positions ignores unknown ids
- Click, marquee and select-all selection
- Z-order (bring to front / send to back)
- Gesture session bookkeeping
- Listener notification and snapshot immutability
- Active instance pattern
"""
import pytest

from conftest import make_sprite
from models.canvas import GuideDirection, GuideType, SnapGuide
from models.placement import PlacementStore, PlacementState
from models.session import Dragging, Idle, Marqueeing, Panning
from models.sprite import PositionUpdate, Sprite
from models.transform import Rect, Vec2


# ══════════════════════════════════════════════════════════════════════════
# Adding Sprites
# ══════════════════════════════════════════════════════════════════════════

class TestAddSprites:

    def test_empty_store(self, fresh_store):
        assert fresh_store.sprite_count == 0
        assert fresh_store.state.z_counter == 0

    def test_staircase_start(self, two_sprite_store):
        a = two_sprite_store.get_sprite('a')
        b = two_sprite_store.get_sprite('b')
        assert (a.x, a.y) == (20, 20)
        assert (b.x, b.y) == (130, 20)

    def test_z_indices_follow_counter(self, two_sprite_store):
        assert two_sprite_store.get_sprite('a').z_index == 1
        assert two_sprite_store.get_sprite('b').z_index == 2
        assert two_sprite_store.state.z_counter == 2

    def test_wraps_past_2000(self, fresh_store):
        sprites = [make_sprite(f"s{i}", 500, 100) for i in range(5)]
        fresh_store.add_sprites(sprites)
        positions = [(p.x, p.y) for p in fresh_store.state.sprites]
        # 20 -> 530 -> 1040 -> 1550 -> 2060 (> 2000, wraps after placing s3)
        assert positions == [(20, 20), (530, 20), (1040, 20), (1550, 20), (20, 220)]

    def test_existing_ids_skipped(self, two_sprite_store):
        added = two_sprite_store.add_sprites([make_sprite('a'), make_sprite('c')])
        assert added == ['c']
        assert two_sprite_store.state.ids == ('a', 'b', 'c')

    def test_duplicates_within_batch(self, fresh_store):
        fresh_store.add_sprites([make_sprite('a'), make_sprite('a', 50, 50)])
        assert fresh_store.sprite_count == 1
        assert fresh_store.get_sprite('a').width == 100

    def test_all_present_is_noop(self, two_sprite_store):
        before = two_sprite_store.state
        assert two_sprite_store.add_sprites([make_sprite('a')]) == []
        assert two_sprite_store.state is before

    def test_later_batch_starts_right_of_canvas(self, two_sprite_store):
        two_sprite_store.add_sprites([make_sprite('c')])
        c = two_sprite_store.get_sprite('c')
        assert (c.x, c.y) == (240, 20)
        assert c.z_index == 3

    def test_accepts_import_records(self, fresh_store, sample_records):
        added = fresh_store.add_sprites(sample_records)
        assert added == ['hero_idle', 'hero_run', 'coin']
        assert fresh_store.get_sprite('coin').path == 'coin.png'

    def test_bad_record_raises(self, fresh_store):
        with pytest.raises(ValueError):
            fresh_store.add_sprites([{'id': 'x', 'width': 0, 'height': 10}])

    def test_ids_unique_after_add_remove_cycles(self, fresh_store):
        for _ in range(3):
            fresh_store.add_sprites([make_sprite('a'), make_sprite('b')])
            fresh_store.remove_sprites(['a'])
            fresh_store.add_sprites([make_sprite('a')])
        ids = fresh_store.state.ids
        assert len(ids) == len(set(ids))


class TestSpriteValidation:

    def test_empty_id(self):
        with pytest.raises(ValueError):
            Sprite('', 'x', 'x.png', 10, 10)

    def test_non_positive_size(self):
        with pytest.raises(ValueError):
            Sprite('x', 'x', 'x.png', 10, -1)

    def test_from_dict_missing_key(self):
        with pytest.raises(ValueError):
            Sprite.from_dict({'id': 'x', 'width': 10})

    def test_from_dict_ignores_extra_keys(self):
        sprite = Sprite.from_dict({'id': 'x', 'name': 'X', 'path': 'x.png',
                                   'width': 10, 'height': 20, 'trimmedWidth': 8})
        assert (sprite.name, sprite.width, sprite.height) == ('X', 10, 20)


# ══════════════════════════════════════════════════════════════════════════
# Removing / Clearing
# ══════════════════════════════════════════════════════════════════════════

class TestRemoveAndClear:

    def test_remove_prunes_selection(self, two_sprite_store):
        two_sprite_store.select_all()
        two_sprite_store.remove_sprites(['a'])
        assert two_sprite_store.state.ids == ('b',)
        assert two_sprite_store.state.selected_ids == {'b'}

    def test_remove_unknown_is_noop(self, two_sprite_store):
        before = two_sprite_store.state
        two_sprite_store.remove_sprites(['zzz'])
        assert two_sprite_store.state is before

    def test_clear_resets_counter(self, two_sprite_store):
        two_sprite_store.select_all()
        two_sprite_store.bring_to_front('a')
        two_sprite_store.clear_canvas()
        state = two_sprite_store.state
        assert state.sprites == ()
        assert state.selected_ids == frozenset()
        assert state.active_guides == ()
        assert state.z_counter == 0

    def test_add_after_clear_restarts_staircase(self, two_sprite_store):
        two_sprite_store.clear_canvas()
        two_sprite_store.add_sprites([make_sprite('c')])
        c = two_sprite_store.get_sprite('c')
        assert (c.x, c.y, c.z_index) == (20, 20, 1)


# ══════════════════════════════════════════════════════════════════════════
# Positions
# ══════════════════════════════════════════════════════════════════════════

class TestUpdatePositions:

    def test_applies_updates(self, two_sprite_store):
        two_sprite_store.update_positions([PositionUpdate('a', 5.5, -3), ('b', 400, 400)])
        assert (two_sprite_store.get_sprite('a').x, two_sprite_store.get_sprite('a').y) == (5.5, -3)
        assert (two_sprite_store.get_sprite('b').x, two_sprite_store.get_sprite('b').y) == (400, 400)

    def test_unknown_ids_ignored(self, two_sprite_store):
        two_sprite_store.update_positions([('ghost', 1, 1), ('a', 0, 0)])
        assert two_sprite_store.state.ids == ('a', 'b')
        assert two_sprite_store.get_sprite('a').x == 0

    def test_single_sprite_form(self, two_sprite_store):
        two_sprite_store.update_sprite_position('b', 77, 88)
        b = two_sprite_store.get_sprite('b')
        assert (b.x, b.y) == (77, 88)

    def test_keeps_store_order(self, two_sprite_store):
        two_sprite_store.update_positions([('b', 0, 0), ('a', 500, 500)])
        assert two_sprite_store.state.ids == ('a', 'b')


# ══════════════════════════════════════════════════════════════════════════
# Selection
# ══════════════════════════════════════════════════════════════════════════

class TestSelection:

    def test_click_selects_only(self, two_sprite_store):
        two_sprite_store.select_sprite('a')
        two_sprite_store.select_sprite('b')
        assert two_sprite_store.state.selected_ids == {'b'}

    def test_click_on_sole_selection_deselects(self, two_sprite_store):
        two_sprite_store.select_sprite('a')
        two_sprite_store.select_sprite('a')
        assert two_sprite_store.state.selected_ids == frozenset()

    def test_click_within_group_selects_only_that(self, two_sprite_store):
        two_sprite_store.select_all()
        two_sprite_store.select_sprite('a')
        assert two_sprite_store.state.selected_ids == {'a'}

    def test_additive_toggles(self, two_sprite_store):
        two_sprite_store.select_sprite('a', additive=True)
        two_sprite_store.select_sprite('b', additive=True)
        assert two_sprite_store.state.selected_ids == {'a', 'b'}
        two_sprite_store.select_sprite('a', additive=True)
        assert two_sprite_store.state.selected_ids == {'b'}

    def test_unknown_id_is_noop(self, two_sprite_store):
        two_sprite_store.select_sprite('a')
        two_sprite_store.select_sprite('ghost')
        assert two_sprite_store.state.selected_ids == {'a'}

    def test_select_all_and_deselect_all(self, two_sprite_store):
        two_sprite_store.select_all()
        assert two_sprite_store.selection_count == 2
        two_sprite_store.deselect_all()
        assert two_sprite_store.selection_count == 0

    def test_select_in_rect_overlap(self, two_sprite_store):
        # a spans x 20..120, b spans 130..230
        two_sprite_store.select_in_rect(Rect(100, 0, 40, 200))
        assert two_sprite_store.state.selected_ids == {'a', 'b'}

    def test_select_in_rect_touching_excluded(self, two_sprite_store):
        # Right edge of the rect touches a's left edge at x = 20
        two_sprite_store.select_in_rect(Rect(0, 0, 20, 200))
        assert two_sprite_store.state.selected_ids == frozenset()

    def test_select_in_rect_replaces(self, two_sprite_store):
        two_sprite_store.select_sprite('a')
        two_sprite_store.select_in_rect(Rect(200, 0, 50, 50))
        assert two_sprite_store.state.selected_ids == {'b'}


# ══════════════════════════════════════════════════════════════════════════
# Z-Order
# ══════════════════════════════════════════════════════════════════════════

class TestZOrder:

    def test_bring_to_front_is_strictly_increasing(self, two_sprite_store):
        seen = max(p.z_index for p in two_sprite_store.state.sprites)
        for sprite_id in ['a', 'a', 'b', 'a']:
            two_sprite_store.bring_to_front(sprite_id)
            z = two_sprite_store.get_sprite(sprite_id).z_index
            assert z > seen
            seen = z

    def test_send_to_back_keeps_counter(self, two_sprite_store):
        two_sprite_store.send_to_back('b')
        two_sprite_store.send_to_back('a')
        assert two_sprite_store.get_sprite('a').z_index == 0
        assert two_sprite_store.get_sprite('b').z_index == 0
        assert two_sprite_store.state.z_counter == 2

    def test_draw_order_ties_use_store_order(self, two_sprite_store):
        two_sprite_store.send_to_back('b')
        two_sprite_store.send_to_back('a')
        assert [p.id for p in two_sprite_store.sprites_by_z()] == ['a', 'b']

    def test_unknown_id_does_not_advance(self, two_sprite_store):
        before = two_sprite_store.state
        two_sprite_store.bring_to_front('ghost')
        two_sprite_store.send_to_back('ghost')
        assert two_sprite_store.state is before


# ══════════════════════════════════════════════════════════════════════════
# Queries
# ══════════════════════════════════════════════════════════════════════════

class TestQueries:

    def test_bounds_empty(self, fresh_store):
        bounds = fresh_store.get_canvas_bounds()
        assert (bounds.min_x, bounds.max_x, bounds.width, bounds.height) == (0, 0, 0, 0)
        assert fresh_store.get_working_area() == (2000, 2000)

    def test_bounds(self, placed_store):
        bounds = placed_store.get_canvas_bounds()
        assert (bounds.min_x, bounds.min_y, bounds.max_x, bounds.max_y) == (0, 0, 680, 100)
        assert (bounds.width, bounds.height) == (680, 100)

    def test_working_area_grows(self, placed_store):
        placed_store.update_sprite_position('c', 2400, 10)
        assert placed_store.get_working_area() == (2980, 2000)

    def test_hit_test_topmost(self, fresh_store):
        fresh_store.add_sprites([make_sprite('under'), make_sprite('over')])
        fresh_store.update_positions([('under', 0, 0), ('over', 50, 50)])
        assert fresh_store.hit_test(Vec2(60, 60)).id == 'over'
        fresh_store.bring_to_front('under')
        assert fresh_store.hit_test(Vec2(60, 60)).id == 'under'
        assert fresh_store.hit_test(Vec2(500, 500)) is None


# ══════════════════════════════════════════════════════════════════════════
# Sessions
# ══════════════════════════════════════════════════════════════════════════

class TestSessions:

    @pytest.fixture
    def drag(self):
        return Dragging(Vec2(0, 0), (('a', Vec2(20, 20)),))

    def test_starts_idle(self, fresh_store):
        assert isinstance(fresh_store.state.session, Idle)

    def test_end_drag_clears_guides(self, two_sprite_store, drag):
        store = two_sprite_store
        assert store.set_dragging(drag)
        store.set_active_guides([SnapGuide(GuideDirection.VERTICAL, 120, GuideType.EDGE)])
        assert store.set_dragging(None)
        assert isinstance(store.state.session, Idle)
        assert store.state.active_guides == ()

    def test_end_wrong_kind_is_noop(self, two_sprite_store):
        store = two_sprite_store
        store.set_panning(Vec2(0, 0), Vec2(0, 0))
        assert not store.set_selecting(None)
        assert not store.set_dragging(None)
        assert isinstance(store.state.session, Panning)
        assert store.end_panning()
        assert isinstance(store.state.session, Idle)

    def test_begin_refused_while_other_active(self, two_sprite_store, drag):
        store = two_sprite_store
        store.set_selecting(Vec2(5, 5))
        assert not store.set_dragging(drag)
        assert not store.set_panning(Vec2(0, 0), Vec2(0, 0))
        assert isinstance(store.state.session, Marqueeing)

    def test_selection_rect_ignored_without_marquee(self, two_sprite_store):
        before = two_sprite_store.state
        two_sprite_store.update_selection_rect(Vec2(50, 50))
        assert two_sprite_store.state is before

    def test_end_session_any_kind(self, two_sprite_store):
        store = two_sprite_store
        store.set_selecting(Vec2(5, 5))
        store.end_session()
        assert isinstance(store.state.session, Idle)

    def test_clear_canvas_drops_drag(self, two_sprite_store, drag):
        two_sprite_store.set_dragging(drag)
        two_sprite_store.clear_canvas()
        assert isinstance(two_sprite_store.state.session, Idle)

    def test_layout_operations_keep_session(self, two_sprite_store):
        store = two_sprite_store
        store.set_selecting(Vec2(5, 5))
        store.select_all()
        store.align_selected('left')
        assert isinstance(store.state.session, Marqueeing)


# ══════════════════════════════════════════════════════════════════════════
# Snapshots and Listeners
# ══════════════════════════════════════════════════════════════════════════

class TestSnapshots:

    def test_listener_receives_new_state(self, fresh_store):
        received = []
        fresh_store.add_listener(received.append)
        fresh_store.add_sprites([make_sprite('a')])
        assert len(received) == 1
        assert isinstance(received[0], PlacementState)
        assert received[0] is fresh_store.state

    def test_noop_does_not_notify(self, two_sprite_store):
        received = []
        two_sprite_store.add_listener(received.append)
        two_sprite_store.deselect_all()
        two_sprite_store.update_positions([('a', 20, 20)])
        assert received == []

    def test_old_snapshot_untouched(self, two_sprite_store):
        before = two_sprite_store.state
        two_sprite_store.update_sprite_position('a', 999, 999)
        assert before.get('a').x == 20

    def test_failing_listener_does_not_abort(self, fresh_store):
        def broken(state):
            raise RuntimeError("listener failure")
        received = []
        fresh_store.add_listener(broken)
        fresh_store.add_listener(received.append)
        fresh_store.add_sprites([make_sprite('a')])
        assert fresh_store.sprite_count == 1
        assert len(received) == 1

    def test_remove_listener(self, fresh_store):
        received = []
        fresh_store.add_listener(received.append)
        fresh_store.remove_listener(received.append)
        fresh_store.add_sprites([make_sprite('a')])
        assert received == []


class TestActiveInstance:

    def test_get_active(self, fresh_store):
        assert PlacementStore.has_active()
        assert PlacementStore.get_active() is fresh_store

    def test_get_active_without_instance(self, monkeypatch):
        monkeypatch.setattr(PlacementStore, '_active_instance', None)
        assert not PlacementStore.has_active()
        with pytest.raises(RuntimeError):
            PlacementStore.get_active()
