"""Simulation settings."""

from dataclasses import dataclass

DEFAULT_GENERATIONS = 1000
DEFAULT_FRAME_DELAY = 0.1  # seconds


@dataclass
class SimulationConfig:
    """Settings for the render/sleep/step loop.

    Attributes:
        generations: Number of steps to run
        frame_delay: Pause between frames in seconds
        alive_glyph: Character drawn for alive cells
        dead_glyph: Character drawn for dead cells
        leading_newline: Start every frame with a blank line
    """
    generations: int = DEFAULT_GENERATIONS
    frame_delay: float = DEFAULT_FRAME_DELAY
    alive_glyph: str = '0'
    dead_glyph: str = '.'
    leading_newline: bool = True

    def __post_init__(self):
        if self.generations < 0:
            raise ValueError(f"generations must not be negative, got {self.generations}")
        if self.frame_delay < 0:
            raise ValueError(f"frame_delay must not be negative, got {self.frame_delay}")
        if len(self.alive_glyph) != 1 or len(self.dead_glyph) != 1:
            raise ValueError("Glyphs must be single characters")
        if self.alive_glyph == self.dead_glyph:
            raise ValueError(f"Alive and dead glyphs must differ, both are {self.alive_glyph!r}")
