"""Pygame 2D client for a tunnelgrid session.

Draws one rectangle per grid cell, moves the actor with the arrow keys
and reports input to the session at a fixed step rate.  Holding SPACE
mines the cell one row below the actor in the direction it last moved.
World space is y-up; the screen is y-down, so rows are flipped on draw.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pygame

from tunnelgrid.simulation.session import InputReport
from tunnelgrid.terrain.tiles import TileMaterial

if TYPE_CHECKING:
    from tunnelgrid.simulation.session import Session

# Colour palette
_BG = (15, 15, 25)
_ACTOR = (255, 220, 60)
_TEXT = (200, 200, 200)

MATERIAL_COLOURS: dict[TileMaterial, tuple[int, int, int]] = {
    TileMaterial.EMPTY: (0, 0, 0),
    TileMaterial.AIR: (135, 190, 235),
    TileMaterial.MUD: (110, 75, 40),
    TileMaterial.GROUND: (150, 110, 60),
    TileMaterial.STEEL: (140, 145, 155),
    TileMaterial.CAVE: (35, 25, 20),
    TileMaterial.PLAYER_MARKER: (220, 60, 60),
}

# Actor speed in tiles per second
_MOVE_SPEED = 6.0


@dataclass
class Actor:
    """The player-controlled entity, positioned in world units."""

    x: float
    y: float


class PygameRenderer:
    """Renders a Session into a Pygame window and feeds it input.

    Attributes:
        session: The session to visualise and drive.
        cell_size: Pixel size of each grid cell.
        actor: The keyboard-controlled actor.
        screen: The Pygame display surface.
    """

    def __init__(
        self,
        session: Session,
        cell_size: int = 6,
        steps_per_second: float = 30.0,
    ) -> None:
        """Initialise the renderer.

        Args:
            session: The session to render.
            cell_size: Pixel width/height per grid cell.
            steps_per_second: Session steps per real-time second.
        """
        self.session = session
        self.cell_size = cell_size
        self.steps_per_second = steps_per_second
        self._step_accumulator = 0.0
        self._move_x = 0.0
        self._last_mined: tuple[int, int] | None = None

        self.actor = Actor(*session.spawn_position())

        side_px = session.params.side * cell_size
        self._panel_width = 200
        self._win_w = side_px + self._panel_width
        self._win_h = side_px

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("tunnelgrid")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True
        self.paused = False

    def run(self, fps: int = 60) -> None:
        """Main loop: handle events, move actor, step session, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            dt = self.clock.tick(fps) / 1000.0
            self._handle_events()
            if not self.paused:
                self._move_actor(dt)
                self._step_accumulator += self.steps_per_second * dt
                steps = int(self._step_accumulator)
                self._step_accumulator -= steps
                for _ in range(steps):
                    self._step()
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame window and key-down events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_p:
                    self.paused = not self.paused

    def _move_actor(self, dt: float) -> None:
        """Move the actor from held arrow keys, staying inside the grid."""
        keys = pygame.key.get_pressed()
        dx = float(keys[pygame.K_RIGHT]) - float(keys[pygame.K_LEFT])
        dy = float(keys[pygame.K_UP]) - float(keys[pygame.K_DOWN])
        speed = _MOVE_SPEED * self.session.params.tile_size * dt

        limit = self.session.mapper.half_extent
        self.actor.x = min(max(self.actor.x + dx * speed, -limit), limit)
        self.actor.y = min(max(self.actor.y + dy * speed, -limit), limit)
        if dx:
            self._move_x = dx

    def _step(self) -> None:
        """Report this step's input to the session."""
        keys = pygame.key.get_pressed()
        report = InputReport(
            actor_x=self.actor.x,
            actor_y=self.actor.y,
            move_x=self._move_x,
            mining=bool(keys[pygame.K_SPACE]),
        )
        self._move_x = 0.0
        mined = self.session.step(report)
        if mined is not None:
            self._last_mined = mined

    def _to_screen(self, x: float, y: float) -> tuple[int, int]:
        """Convert a world position to window pixels."""
        scale = self.cell_size / self.session.params.tile_size
        limit = self.session.mapper.half_extent
        return int((x + limit) * scale), int((limit - y) * scale)

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_grid()
        self._draw_actor()
        self._draw_info_panel()
        pygame.display.flip()

    def _draw_grid(self) -> None:
        """Draw every cell in its material colour."""
        cs = self.cell_size
        top = self.session.params.side - 1
        for col, row, material in self.session.grid.cells():
            pygame.draw.rect(
                self.screen,
                MATERIAL_COLOURS[material],
                (col * cs, (top - row) * cs, cs, cs),
            )

    def _draw_actor(self) -> None:
        """Draw the actor as a square centred on its position."""
        cs = self.cell_size
        cx, cy = self._to_screen(self.actor.x, self.actor.y)
        pygame.draw.rect(self.screen, _ACTOR, (cx - cs // 2, cy - cs // 2, cs, cs))

    def _draw_info_panel(self) -> None:
        """Draw a stats panel on the right side of the window."""
        panel_x = self.session.params.side * self.cell_size + 10
        y = 10
        col, row = self.session.mapper.to_grid(self.actor.x, self.actor.y)
        facing = "right" if self.session.mining.facing > 0 else "left"

        lines = [
            f"Step: {self.session.tick}",
            f"Seed: {self.session.params.seed}",
            f"{'PAUSED' if self.paused else 'RUNNING'}",
            "",
            f"Cell: ({col}, {row})",
            f"Facing: {facing}",
            f"Last mined: {self._last_mined}",
            "",
            "--- Controls ---",
            "Arrows: move",
            "SPACE: mine",
            "P: pause",
            "ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, _TEXT)
            self.screen.blit(surf, (panel_x, y))
            y += 18
