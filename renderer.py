# renderer.py

import pygame
import constants

class PygameRenderer:
    """
    Drawing sink that renders particles onto a pygame surface.

    Each call draws one particle: the fill with alpha scaled by opacity, then
    a fully opaque outline in the stroke color.
    """
    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._fill_cache = {}

    def _fill_surface(self, radius: int) -> pygame.Surface:
        # One scratch surface per radius, cleared before every use.
        surface = self._fill_cache.get(radius)
        if surface is None:
            surface = pygame.Surface((radius * 2 + 1, radius * 2 + 1), pygame.SRCALPHA)
            self._fill_cache[radius] = surface
        surface.fill((0, 0, 0, 0))
        return surface

    def __call__(self, center, radius, fill_color, stroke_color, opacity):
        cx, cy = int(round(center[0])), int(round(center[1]))
        r = int(round(radius))

        if opacity > 0:
            fill = pygame.Color(fill_color)
            fill.a = int(round(min(opacity, 1.0) * 255))
            surface = self._fill_surface(r)
            pygame.draw.circle(surface, fill, (r, r), r)
            self.screen.blit(surface, (cx - r, cy - r))

        pygame.draw.circle(self.screen, pygame.Color(stroke_color), (cx, cy), r, constants.STROKE_WIDTH)
