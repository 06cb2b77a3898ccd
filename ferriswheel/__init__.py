"""An animated 3D Ferris wheel scene: state, camera, geometry, scene and window."""

__version__ = "0.1.0"
__all__ = ["app", "camera", "geometry", "scene", "state"]