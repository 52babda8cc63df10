#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_doors.py — демонстрация дверей в MuJoCo:
1) загрузка scene/doors.xml, граф сцены по mocap-телам
2) открытие всех PassengerDoor (Cubic/InOut, _OPEN_DUR сек)
3) пауза _HOLD_SEC
4) закрытие (случайная длительность каждой створки, Sine/InOut)
5) повтор, пока открыт viewer
"""

from __future__ import annotations
import logging
import time
import mujoco
import mujoco.viewer

from doorsim import config as cfg
from doorsim.config import DoorMotion
from doorsim.doors import PassengerDoor
from doorsim.logutil import setup_logging, log_pose
from doorsim.mujoco_scene import MjScene
from doorsim.tween import TweenEngine

# ---------------- параметры ----------------
_OPEN_DUR  = cfg.OPEN_DUR
_HOLD_SEC  = cfg.HOLD_SEC
_SEED      = None            # int → воспроизводимые длительности закрытия
_REALTIME  = True            # спать timestep между шагами


def _play(scene: MjScene, engine: TweenEngine, vw):
    """Шагать tween'ы вместе с симуляцией, пока все не закончатся или не закроют viewer."""
    dt = float(scene.ctx.model.opt.timestep)

    def _sim_step(_dt):
        mujoco.mj_step(scene.ctx.model, scene.ctx.data)
        vw.sync()
        if _REALTIME:
            time.sleep(_dt)

    return engine.run(dt=dt, on_step=_sim_step, keep_running=vw.is_running)


def _hold(scene: MjScene, vw, sec: float):
    t0 = time.time()
    while time.time() - t0 < sec and vw.is_running():
        mujoco.mj_step(scene.ctx.model, scene.ctx.data)
        vw.sync()
        time.sleep(scene.ctx.model.opt.timestep)


def main():
    setup_logging(logging.INFO)
    log = logging.getLogger("doorsim.run")

    scene = MjScene.from_xml(cfg.XML)
    engine = TweenEngine(scene)
    doors = PassengerDoor(scene, engine, motion=DoorMotion(axis=cfg.MJ_SLIDE_AXIS), seed=_SEED)
    container = scene.root(cfg.CONTAINER_NAME)

    for door in doors.assemblies(container):
        left = scene.find_child(door, cfg.LEFT_PANEL_NAME)
        anchor = scene.primary_part(left) if left is not None else None
        if anchor is not None:
            log_pose(f"{door} left anchor", scene.part_pose(anchor))

    with mujoco.viewer.launch_passive(scene.ctx.model, scene.ctx.data) as vw:
        while vw.is_running():
            doors.automatic_open(container, _OPEN_DUR)
            t = _play(scene, engine, vw)
            log.info("[RUN] opened in %.2fs", t)
            _hold(scene, vw, _HOLD_SEC)
            if not vw.is_running():
                break

            doors.close(container)
            t = _play(scene, engine, vw)
            log.info("[RUN] closed in %.2fs", t)
            _hold(scene, vw, _HOLD_SEC)


if __name__ == "__main__":
    main()
