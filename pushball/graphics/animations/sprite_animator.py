"""
sprite_animator.py
------------------
Plays named frame clips on an AnimatedSprite.

Responsibilities
----------------
- Hold clip definitions ({"frames": [...], "fps": n, "loop": bool}).
- Start a clip by name; asking for the clip already playing is a no-op.
- Advance frames with the fixed-step clock and write the sprite's column.
- Ignore unknown clip names with a warning instead of crashing the loop.
"""

from typing import Dict, Optional

from pushball.core.debug.debug_logger import DebugLogger


DEFAULT_CLIPS = {
    "idle": {"frames": [0], "fps": 1, "loop": True},
    "move": {"frames": [0, 1, 2, 3], "fps": 8, "loop": True},
}


class SpriteAnimator:
    """Frame-clip player for a single sprite."""

    __slots__ = (
        'sprite',   # AnimatedSprite being driven
        'clips',    # {name: {"frames": [...], "fps": float, "loop": bool}}
        'current',  # Name of the running clip
        'timer',    # Time spent on the current frame
        'index',    # Index into the current clip's frame list
        'finished'  # True once a non-looping clip reached its last frame
    )

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, sprite, clips: Optional[Dict[str, dict]] = None):
        """
        Args:
            sprite: AnimatedSprite whose column this animator sets
            clips: Clip definitions (DEFAULT_CLIPS if None)
        """
        self.sprite = sprite
        self.clips = {name: self._normalize(name, clip) for name, clip in (clips or DEFAULT_CLIPS).items()}

        self.current = None
        self.timer = 0.0
        self.index = 0
        self.finished = False

        DebugLogger.init(f"SpriteAnimator with clips {sorted(self.clips)}", category="animation")

    @staticmethod
    def _normalize(name: str, clip: dict) -> dict:
        frames = list(clip.get("frames", [0])) or [0]
        fps = float(clip.get("fps", 8))
        if fps <= 0:
            DebugLogger.warn(f"Clip '{name}' has fps {fps}; using 1", category="animation")
            fps = 1.0
        return {"frames": frames, "fps": fps, "loop": bool(clip.get("loop", True))}

    # ===========================================================
    # Playback Controls
    # ===========================================================

    def play(self, name: str) -> None:
        """
        Start a clip. Re-issuing the running clip keeps its timing.

        Args:
            name: Clip name ("idle", "move", ...)
        """
        if name == self.current:
            return

        if name not in self.clips:
            DebugLogger.warn(f"No clip '{name}' - keeping '{self.current}'", category="animation")
            return

        self.current = name
        self.timer = 0.0
        self.index = 0
        self.finished = False
        self.sprite.column = self.clips[name]["frames"][0]

        DebugLogger.state(f"Clip '{name}' started", category="animation")

    # ===========================================================
    # Update Loop
    # ===========================================================

    def update(self, dt: float) -> None:
        """
        Advance the running clip.

        Args:
            dt: Delta time in seconds
        """
        if self.current is None or self.finished:
            return

        clip = self.clips[self.current]
        frames = clip["frames"]
        frame_time = 1.0 / clip["fps"]

        self.timer += dt
        while self.timer >= frame_time:
            self.timer -= frame_time
            if self.index + 1 < len(frames):
                self.index += 1
            elif clip["loop"]:
                self.index = 0
            else:
                self.finished = True
                break

        self.sprite.column = frames[self.index]
