"""Scene file loading and saving."""

from .scene import Scene, draw_scene, load_scene_json, save_scene_json

__all__ = ["Scene", "draw_scene", "load_scene_json", "save_scene_json"]
