"""
pygame window for the radar display

Draws range arcs, angle spokes, the beam, fading blips and a status line from
a RadarFrame. Holds no radar state of its own.
"""

import pygame

from ..model.data_structures import RadarFrame
from ..utils.config import RadarConfig
from ..visualization.transforms import arc_points, polar_to_screen

BLIP_RADIUS = 6
RANGE_RINGS = 3
SPOKE_STEP_DEG = 15


class RadarWindow:
    """
    Radar display window

    Provides frame timing and the quit signal to the main loop.
    """

    def __init__(self, config: RadarConfig, title: str = "Radar (distance-only, virtual sweep)"):
        """
        Create the window

        Args:
            config: Session configuration (window size, colors, range)
            title: Window caption
        """
        self.config = config
        self._closing = False
        self._elapsed = 0.0

        pygame.init()
        pygame.display.set_caption(title)
        self.size = (config.window_width, config.window_height)
        self.screen = pygame.display.set_mode(self.size)
        self.clock = pygame.time.Clock()
        self.overlay = pygame.Surface(self.size, pygame.SRCALPHA)
        self.font = pygame.font.SysFont('Consolas, DejaVu Sans Mono, monospace', 20)

        self.pivot = config.pivot
        self.radius = config.radar_radius

    def should_close(self) -> bool:
        """Process window events; True once the window was closed or ESC pressed"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._closing = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self._closing = True
        return self._closing

    def elapsed(self) -> float:
        """Seconds taken by the previous frame"""
        return self._elapsed

    def now(self) -> float:
        """Seconds since the window was created"""
        return pygame.time.get_ticks() / 1000.0

    def draw(self, frame: RadarFrame):
        """Render one frame and wait for the next frame slot"""
        self.screen.fill(self.config.background)
        self.overlay.fill((0, 0, 0, 0))

        self._draw_grid()
        self._draw_beam(frame.sweep_angle)
        self.screen.blit(self.overlay, (0, 0))

        self._draw_blips(frame)
        self._draw_status(frame)

        pygame.display.flip()
        self._elapsed = self.clock.tick(self.config.fps) / 1000.0

    def close(self):
        pygame.quit()

    def _draw_grid(self):
        for i in range(1, RANGE_RINGS + 1):
            points = arc_points(self.radius * i / RANGE_RINGS, self.pivot)
            pygame.draw.lines(self.overlay, self.config.grid_color, False,
                              [tuple(p) for p in points])

        for angle in range(0, 181, SPOKE_STEP_DEG):
            tip = polar_to_screen(angle, self.radius, self.pivot)
            pygame.draw.line(self.overlay, self.config.grid_dim_color,
                             self.pivot, tuple(tip))

    def _draw_beam(self, angle: float):
        tip = polar_to_screen(angle, self.radius, self.pivot)
        pygame.draw.line(self.overlay, self.config.beam_color,
                         self.pivot, tuple(tip), 2)

    def _draw_blips(self, frame: RadarFrame):
        # SRCALPHA surface per blip for alpha blending
        size = BLIP_RADIUS * 2
        for blip in frame.active_blips:
            surf = pygame.Surface((size, size), pygame.SRCALPHA)
            pygame.draw.circle(surf, (*self.config.blip_color, blip.alpha),
                               (BLIP_RADIUS, BLIP_RADIUS), BLIP_RADIUS)
            x, y = blip.screen_pos
            self.screen.blit(surf, (int(x) - BLIP_RADIUS, int(y) - BLIP_RADIUS))

    def _draw_status(self, frame: RadarFrame):
        color = self.config.grid_color[:3]
        y = self.config.window_height - 40
        texts = [
            (20, f"Port: {frame.connection_label}"),
            (200, f"Virtual Angle: {int(frame.sweep_angle)} deg"),
            (520, f"Distance: {frame.latest_distance_cm} cm"),
        ]
        for x, text in texts:
            self.screen.blit(self.font.render(text, True, color), (x, y))
