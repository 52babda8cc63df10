import numpy as np
import pytest

mujoco = pytest.importorskip("mujoco")

from doorsim import config as cfg
from doorsim.config import DoorMotion
from doorsim.doors import PassengerDoor
from doorsim.mujoco_scene import MjScene, load_model, logical_name
from doorsim.scene import SceneGraph
from doorsim.tween import TweenEngine


@pytest.fixture
def mj_scene():
    return MjScene.from_xml(cfg.XML)


def test_logical_name():
    assert logical_name("PassengerDoor#2") == "PassengerDoor"
    assert logical_name("LeftPanel") == "LeftPanel"


def test_satisfies_protocol(mj_scene):
    assert isinstance(mj_scene, SceneGraph)


def test_hierarchy_from_body_names(mj_scene):
    container = mj_scene.root()
    doors = list(PassengerDoor(mj_scene, None).assemblies(container))
    assert [mj_scene.name(d) for d in doors] == [cfg.ASSEMBLY_NAME, cfg.ASSEMBLY_NAME]

    left = mj_scene.find_child(doors[0], cfg.LEFT_PANEL_NAME)
    assert mj_scene.is_model(left)
    parts = mj_scene.descendant_parts(left)
    assert sorted(mj_scene.name(p) for p in parts) == ["Anchor", "Glass", "Handle"]

    anchor = mj_scene.primary_part(left)
    assert mj_scene.name(anchor) == cfg.ANCHOR_NAME
    assert mj_scene.primary_part(mj_scene.find_child(left, "Frame")) is None


def test_unknown_root():
    scene = MjScene.from_xml(cfg.XML)
    with pytest.raises(KeyError):
        scene.root("Windows")


def test_positions_read_and_write_mocap(mj_scene):
    part = mj_scene.part_ids[0]
    pos = mj_scene.get_position(part)
    mj_scene.set_position(part, pos + [0.0, 1.0, 0.0])
    np.testing.assert_allclose(mj_scene.get_position(part), pos + [0.0, 1.0, 0.0])

    T = mj_scene.part_pose(part)
    np.testing.assert_allclose(T.t, pos + [0.0, 1.0, 0.0])

    with pytest.raises(KeyError):
        mj_scene.get_position(0)   # world body


def test_open_moves_mocap_bodies(mj_scene):
    engine = TweenEngine(mj_scene)
    container = mj_scene.root()
    start = {p: mj_scene.get_position(p) for p in mj_scene.part_ids}

    doors = PassengerDoor(mj_scene, engine, motion=DoorMotion(axis=cfg.MJ_SLIDE_AXIS))
    tweens = doors.automatic_open(container, 0.5)
    assert len(tweens) == len(mj_scene.part_ids)

    dt = float(mj_scene.ctx.model.opt.timestep)
    engine.run(dt=dt, on_step=lambda _dt: mujoco.mj_step(mj_scene.ctx.model, mj_scene.ctx.data))

    for p, s in start.items():
        panel = mj_scene._path(p).split(cfg.PATH_SEP)[2]
        sign = 1.0 if panel == cfg.LEFT_PANEL_NAME else -1.0
        np.testing.assert_allclose(mj_scene.get_position(p), s + [0.0, sign * 2.6, 0.0])


def test_two_scenes_on_one_context():
    ctx = load_model(cfg.XML)
    first = MjScene(ctx)
    second = MjScene(ctx)
    assert len(first.part_ids) == len(second.part_ids) == 10
    assert first.part_ids == second.part_ids
    assert len(second.descendant_parts(second.root())) == 10
