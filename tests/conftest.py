"""
Shared fixtures for Sprite Compose Editor tests.

Provides reusable stores, sample sprites and import records.
"""
import sys
import os
import pytest

# Run Qt headless when no display is available
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))


# ── Sample import records ───────────────────────────────────────────────

SAMPLE_RECORDS = [
    {'id': 'hero_idle', 'name': 'hero_idle', 'path': 'hero_idle.png', 'width': 100, 'height': 100},
    {'id': 'hero_run', 'name': 'hero_run', 'path': 'hero_run.png', 'width': 100, 'height': 100},
    {'id': 'coin', 'name': 'coin', 'path': 'coin.png', 'width': 50, 'height': 50},
]


def make_sprite(sprite_id, width=100, height=100):
    """Sprite with a matching name and path"""
    from models.sprite import Sprite
    return Sprite(sprite_id, sprite_id, f"{sprite_id}.png", width, height)


@pytest.fixture
def sample_records():
    """Three import records (two 100x100, one 50x50)"""
    return [dict(record) for record in SAMPLE_RECORDS]


@pytest.fixture
def fresh_store():
    """Fresh empty PlacementStore set as active"""
    from models.placement import PlacementStore
    store = PlacementStore()
    PlacementStore.set_active(store)
    return store


@pytest.fixture
def two_sprite_store(fresh_store):
    """Store with two 100x100 sprites at the staircase start: (20,20) and (130,20)"""
    fresh_store.add_sprites([make_sprite('a'), make_sprite('b')])
    return fresh_store


@pytest.fixture
def placed_store(fresh_store):
    """Store with three sprites moved to known positions

    a: (0, 0) 100x100
    b: (300, 50) 50x50
    c: (600, 20) 80x40
    """
    fresh_store.add_sprites([make_sprite('a'), make_sprite('b', 50, 50), make_sprite('c', 80, 40)])
    fresh_store.update_positions([('a', 0, 0), ('b', 300, 50), ('c', 600, 20)])
    return fresh_store
