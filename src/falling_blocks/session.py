from __future__ import annotations

from typing import Optional

from falling_blocks.autoplayer import Autoplayer, Command
from falling_blocks.game import Game, MoveDirection, gravity_interval


COMMAND_TO_DIRECTION = {
    Command.DOWN: MoveDirection.DOWN,
    Command.LEFT: MoveDirection.LEFT,
    Command.RIGHT: MoveDirection.RIGHT,
}


class PlaySession:
    """Drives one game from an external clock.

    The caller passes a monotonically increasing time in seconds to
    `update`; gravity fires whenever the interval for the current
    cleared-row total has elapsed. In autoplay mode every other tick replays
    one planned command.
    """

    def __init__(self, game: Game, autoplay: bool = False, autoplayer: Optional[Autoplayer] = None) -> None:
        self.game = game
        self.autoplay = autoplay
        self.autoplayer = autoplayer or Autoplayer()
        self.last_gravity = 0.0

    @property
    def is_over(self) -> bool:
        return self.game.is_game_over()

    def update(self, now: float) -> bool:
        """Advance the session to `now`. Returns True once the game is over."""
        interval = gravity_interval(self.game.lines_cleared)
        if now - self.last_gravity >= interval:
            if self.game.step(MoveDirection.DOWN) and self.autoplay:
                self.autoplayer.compute_move(self.game)
            self.last_gravity = now
        elif self.autoplay:
            self.apply_command(self.autoplayer.perform_move(self.game))
        return self.is_over

    def apply_command(self, command: Command) -> bool:
        """Replay one autoplayer command; plans the next piece after a spawn."""
        if command == Command.ROTATE_CLOCKWISE:
            return self.game.rotate_clockwise()
        spawned = self.game.step(COMMAND_TO_DIRECTION[command])
        if spawned:
            self.autoplayer.compute_move(self.game)
        return spawned

    def move(self, direction: MoveDirection) -> bool:
        if self.autoplay:
            return False
        return self.game.step(direction)

    def rotate_clockwise(self) -> bool:
        if self.autoplay:
            return False
        return self.game.rotate_clockwise()

    def rotate_counter_clockwise(self) -> bool:
        if self.autoplay:
            return False
        return self.game.rotate_counter_clockwise()
