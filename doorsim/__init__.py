"""
doorsim – анимация раздвижных пассажирских дверей поверх графа сцены.

Смотри отдельные подмодули:
  config        – имена узлов, сдвиги, диапазоны длительностей, профили
  easing        – стили/направления сглаживания, ease()
  transforms    – векторы (np), позы (SE3)
  scene         – протокол SceneGraph, сцена в памяти, ошибки структуры
  tween         – TweenInfo, Tween, TweenEngine (покадровый шаг)
  animator      – move_model: tween на каждую деталь модели
  doors         – PassengerDoor: automatic_open / close
  mujoco_scene  – SceneGraph поверх mocap-тел MuJoCo
  logutil       – настройка логгера, печать поз
"""
from . import config, easing, transforms, scene, tween, animator, doors, logutil
from .doors import PassengerDoor
__all__ = ["config", "easing", "transforms", "scene", "tween", "animator", "doors", "logutil",
           "PassengerDoor"]
