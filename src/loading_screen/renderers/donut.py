"""Default renderer: a spinning ASCII donut."""

from __future__ import annotations

import math
import time

from rich.console import Console
from rich.control import Control

from loading_screen.runtime.completion import cancellation_requested

# Surface luminance, darkest to brightest.
LUMINANCE_CHARS = ".,-~:;=!*#$@"

DEFAULT_FRAMES = 160
DEFAULT_FRAME_DELAY_SECONDS = 0.03

# Torus geometry: tube radius, ring radius, viewer distance.
_R1 = 1.0
_R2 = 2.0
_K2 = 5.0
_THETA_STEP = 0.07
_PHI_STEP = 0.03
_A_STEP = 0.07
_B_STEP = 0.03


class DonutRenderer:
    """Blocking renderer drawing a rotating torus for a fixed frame count.

    Instances are zero-argument callables, so they satisfy the renderer
    contract of both runners. Between frames the renderer checks whether
    the async runner asked it to stop, and it always restores the cursor.
    """

    def __init__(
        self,
        *,
        frames: int = DEFAULT_FRAMES,
        frame_delay_seconds: float = DEFAULT_FRAME_DELAY_SECONDS,
        width: int = 80,
        height: int = 22,
        console: Console | None = None,
    ) -> None:
        self.frames = frames
        self.frame_delay_seconds = frame_delay_seconds
        self.width = width
        self.height = height
        self._console = console
        self.frames_drawn = 0

    def __repr__(self) -> str:
        return f"DonutRenderer(frames={self.frames})"

    def frame(self, a: float, b: float) -> str:
        """Render one frame for rotation angles ``a`` (x axis) and ``b`` (z axis)."""
        width, height = self.width, self.height
        # Scale so the ring fills about three quarters of the width.
        k1 = width * _K2 * 3 / (8 * (_R1 + _R2))
        output = [" "] * (width * height)
        zbuffer = [0.0] * (width * height)

        cos_a, sin_a = math.cos(a), math.sin(a)
        cos_b, sin_b = math.cos(b), math.sin(b)

        theta = 0.0
        while theta < 2 * math.pi:
            cos_theta, sin_theta = math.cos(theta), math.sin(theta)
            circle_x = _R2 + _R1 * cos_theta
            circle_y = _R1 * sin_theta

            phi = 0.0
            while phi < 2 * math.pi:
                cos_phi, sin_phi = math.cos(phi), math.sin(phi)

                x = circle_x * (cos_b * cos_phi + sin_a * sin_b * sin_phi) - (
                    circle_y * cos_a * sin_b
                )
                y = circle_x * (sin_b * cos_phi - sin_a * cos_b * sin_phi) + (
                    circle_y * cos_a * cos_b
                )
                z = _K2 + cos_a * circle_x * sin_phi + circle_y * sin_a
                ooz = 1 / z

                # Terminal cells are about twice as tall as wide.
                xp = int(width / 2 + k1 * ooz * x)
                yp = int(height / 2 - k1 * ooz * y / 2)

                luminance = (
                    cos_phi * cos_theta * sin_b
                    - cos_a * cos_theta * sin_phi
                    - sin_a * sin_theta
                    + cos_b * (cos_a * sin_theta - cos_theta * sin_a * sin_phi)
                )
                if luminance > 0 and 0 <= xp < width and 0 <= yp < height:
                    idx = xp + width * yp
                    if ooz > zbuffer[idx]:
                        zbuffer[idx] = ooz
                        output[idx] = LUMINANCE_CHARS[
                            min(int(luminance * 8), len(LUMINANCE_CHARS) - 1)
                        ]
                phi += _PHI_STEP
            theta += _THETA_STEP

        return "\n".join(
            "".join(output[row * width : (row + 1) * width]) for row in range(height)
        )

    def __call__(self) -> None:
        console = self._console or Console()
        self.frames_drawn = 0
        a = b = 0.0

        console.show_cursor(False)
        console.control(Control.clear(), Control.home())
        try:
            for _ in range(self.frames):
                if cancellation_requested():
                    break
                console.control(Control.home())
                console.out(self.frame(a, b), highlight=False)
                self.frames_drawn += 1
                a += _A_STEP
                b += _B_STEP
                time.sleep(self.frame_delay_seconds)
        finally:
            console.show_cursor(True)


def donut() -> None:
    """Play the default donut animation to completion."""
    DonutRenderer()()
