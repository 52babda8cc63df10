"""
Pytest fixtures for doorsim tests.

Provides:
1. In-memory scene and builders for door containers
2. A recording engine that stores created/played tweens without moving anything
3. A real TweenEngine bound to the in-memory scene
"""
import os
import sys
import numpy as np
import pytest

# Add repository root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from doorsim import config as cfg
from doorsim.scene import InMemoryScene, Model, Part
from doorsim.tween import TweenEngine


class RecordedTween:
    def __init__(self, part, goal, info):
        self.part = part
        self.goal = np.asarray(goal, float)
        self.info = info
        self.played = False

    def play(self):
        self.played = True
        return self


class RecordingEngine:
    """AnimationEngine fake: remembers every tween it creates."""

    def __init__(self):
        self.created = []

    def create(self, part, goal, info):
        tw = RecordedTween(part, goal, info)
        self.created.append(tw)
        return tw

    @property
    def played(self):
        return [t for t in self.created if t.played]


def build_panel(name, n_parts=3, origin=(0.0, 0.0, 0.0), anchor=True, nested=False):
    """Panel model with n_parts rigid parts; the first one is the anchor."""
    panel = Model(name)
    origin = np.asarray(origin, float)
    parts = [Part(f"{name}_p{i}", origin + [0.1 * i, 0.2 * i, 0.3 * i]) for i in range(n_parts)]
    if nested and n_parts > 1:
        sub = panel.add(Model("Frame"))
        panel.add(parts[0])
        for p in parts[1:]:
            sub.add(p)
    else:
        for p in parts:
            panel.add(p)
    if anchor and parts:
        panel.primary_part = parts[0]
    return panel


def build_door(left=True, right=True, n_parts=3, origin=(0.0, 0.0, 0.0), **kw):
    door = Model(cfg.ASSEMBLY_NAME)
    if left:
        door.add(build_panel(cfg.LEFT_PANEL_NAME, n_parts, origin, **kw))
    if right:
        door.add(build_panel(cfg.RIGHT_PANEL_NAME, n_parts, np.asarray(origin) + [0.0, 0.0, -1.0], **kw))
    return door


def build_container(*doors):
    container = Model(cfg.CONTAINER_NAME)
    for d in doors:
        container.add(d)
    return container


def panel_parts(scene, door, panel_name):
    return scene.descendant_parts(scene.find_child(door, panel_name))


@pytest.fixture
def scene():
    return InMemoryScene()


@pytest.fixture
def recorder():
    return RecordingEngine()


@pytest.fixture
def engine(scene):
    return TweenEngine(scene)
