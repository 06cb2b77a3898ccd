"""Interactive window showing the animated Ferris wheel."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

from .camera import Matrix, camera_position, look_at, viewport_projection
from .scene import Light, Material, Part, default_light, metallic_material, scene_parts
from .state import WINDOW_HEIGHT, WINDOW_WIDTH, WheelState

CAPTION = "Roda Gigante"
FRAME_INTERVAL = 0.016


def _floats(values: Sequence[float]) -> Any:
    from pyglet.gl import GLfloat

    return (GLfloat * len(values))(*values)


def _column_major(matrix: Matrix) -> Any:
    return _floats([matrix[r][c] for c in range(4) for r in range(4)])


class _GLRenderer:
    """Draws parts with the fixed-function OpenGL pipeline."""

    def __init__(self) -> None:
        from pyglet.gl import gl_compat

        self._gl = gl_compat
        self._lists: dict[int, tuple[Any, int]] = {}
        self._ready = False

    def _setup(self, light: Light) -> None:
        gl = self._gl
        for flag in (gl.GL_DEPTH_TEST, gl.GL_LIGHTING, gl.GL_LIGHT0, gl.GL_NORMALIZE,
                     gl.GL_COLOR_MATERIAL, gl.GL_BLEND):
            gl.glEnable(flag)
        gl.glColorMaterial(gl.GL_FRONT, gl.GL_AMBIENT_AND_DIFFUSE)
        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glLoadIdentity()
        gl.glLightfv(gl.GL_LIGHT0, gl.GL_AMBIENT, _floats(light.ambient))
        gl.glLightfv(gl.GL_LIGHT0, gl.GL_DIFFUSE, _floats(light.diffuse))
        gl.glLightfv(gl.GL_LIGHT0, gl.GL_SPECULAR, _floats(light.specular))
        gl.glLightfv(gl.GL_LIGHT0, gl.GL_POSITION, _floats(light.position))
        gl.glLightModelfv(gl.GL_LIGHT_MODEL_AMBIENT, _floats(light.global_ambient))
        gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
        gl.glClearColor(0.0, 0.0, 0.0, 1.0)
        self._ready = True

    def _display_list(self, mesh: Any) -> int:
        if id(mesh) not in self._lists:
            gl = self._gl
            index = gl.glGenLists(1)
            gl.glNewList(index, gl.GL_COMPILE)
            for face in mesh.faces:
                gl.glBegin(gl.GL_POLYGON)
                for i in face:
                    gl.glNormal3f(*mesh.normals[i])
                    gl.glVertex3f(*mesh.vertices[i])
                gl.glEnd()
            gl.glEndList()
            self._lists[id(mesh)] = (mesh, index)
        return self._lists[id(mesh)][1]

    def resize(self, viewport: tuple[int, int, int, int], projection: Matrix) -> None:
        gl = self._gl
        gl.glViewport(*viewport)
        gl.glMatrixMode(gl.GL_PROJECTION)
        gl.glLoadMatrixf(_column_major(projection))
        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glLoadIdentity()

    def draw(self, view: Matrix, parts: Sequence[Part], material: Material, light: Light) -> None:
        gl = self._gl
        if not self._ready:
            self._setup(light)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glLoadMatrixf(_column_major(view))
        gl.glMaterialfv(gl.GL_FRONT, gl.GL_AMBIENT, _floats(material.ambient))
        gl.glMaterialfv(gl.GL_FRONT, gl.GL_DIFFUSE, _floats(material.diffuse))
        gl.glMaterialfv(gl.GL_FRONT, gl.GL_SPECULAR, _floats(material.specular))
        gl.glMaterialf(gl.GL_FRONT, gl.GL_SHININESS, material.shininess)
        for part in parts:
            gl.glPushMatrix()
            gl.glMultMatrixf(_column_major(part.matrix))
            gl.glColor4f(*part.color)
            gl.glCallList(self._display_list(part.mesh))
            gl.glPopMatrix()


class WheelWindow:
    """Connects window events to the wheel state and the renderer."""

    def __init__(self, state: WheelState | None = None, window: Any = None, renderer: Any = None) -> None:
        self.state = state if state is not None else WheelState()
        self.material = metallic_material()
        self.light = default_light()
        self.viewport: tuple[int, int, int, int] | None = None
        self.projection: Matrix | None = None
        self.view: Matrix | None = None
        created = window is None
        if created:
            import pyglet

            window = pyglet.window.Window(WINDOW_WIDTH, WINDOW_HEIGHT, caption=CAPTION, resizable=True)
        self.window = window
        self.renderer = renderer if renderer is not None else _GLRenderer()
        self.window.push_handlers(self)
        if created:
            self.on_resize(*self.window.get_size())

    def on_draw(self) -> None:
        """Place the camera and draw the whole scene."""
        eye = camera_position(self.state.distance, self.state.elevation, self.state.azimuth)
        self.view = look_at(eye, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
        self.renderer.draw(self.view, scene_parts(self.state), self.material, self.light)

    def on_resize(self, width: int, height: int) -> bool:
        """Fit the viewport and perspective to the new window size."""
        self.viewport, self.projection = viewport_projection(width, height)
        self.renderer.resize(self.viewport, self.projection)
        return True

    def on_text(self, text: str) -> None:
        """Feed typed characters to the controls."""
        for key in text:
            self.state.press(key)

    def update(self, dt: float) -> None:
        """Advance the animation by one frame."""
        self.state.tick()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the animation until it is closed."""
    argparse.ArgumentParser(prog="ferriswheel", description="Animated Ferris wheel.").parse_args(argv)

    import pyglet

    wheel = WheelWindow()
    pyglet.clock.schedule_interval(wheel.update, FRAME_INTERVAL)
    pyglet.app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())