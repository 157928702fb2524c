from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from falling_blocks.game import Board, Game, MoveDirection

from .commands import Command
from .heuristic import heuristic_score


@dataclass
class CandidateBoard:
    """Board reached by dropping the active piece after `commands`."""

    board: Board
    commands: List[Command] = field(default_factory=list)


class Autoplayer:
    """Plans piece placements by exhaustive rotation/shift search.

    Planned commands are kept on a stack: `compute_move` pushes the
    winning sequence in enumeration order and `perform_move` pops from the
    end, so the last planned command runs first.
    """

    def __init__(self) -> None:
        self.commands: List[Command] = []

    def perform_move(self, game: Optional[Game] = None) -> Command:
        if self.commands:
            return self.commands.pop()
        return Command.DOWN

    def compute_move(self, game: Game) -> None:
        best_score = float("-inf")
        best_commands: List[Command] = []
        for candidate in self.candidate_boards(game):
            score = heuristic_score(candidate.board)
            if score > best_score:
                best_score = score
                best_commands = candidate.commands
        self.commands.extend(best_commands)

    def drop(self, game: Game) -> Board:
        simulated = game.clone()
        while simulated.move_in_direction(MoveDirection.DOWN):
            pass
        return simulated.board

    def _rotations(self, simulated: Game, commands: List[Command], boards: List[CandidateBoard]) -> None:
        # The fourth turn restores the starting orientation and is not recorded.
        for turn in range(4):
            if simulated.rotate_clockwise() and turn < 3:
                commands.append(Command.ROTATE_CLOCKWISE)
                boards.append(CandidateBoard(self.drop(simulated), list(commands)))

    def candidate_boards(self, game: Game) -> List[CandidateBoard]:
        """Every board reachable by rotations plus a straight drop at each shift."""
        simulated = game.clone()
        boards: List[CandidateBoard] = []
        commands: List[Command] = []

        boards.append(CandidateBoard(self.drop(simulated), list(commands)))

        # Sweep left from the spawn column.
        remaining = game.board.columns // 2 + 1
        while remaining > 0:
            self._rotations(simulated, commands, boards)
            commands = [c for c in commands if c == Command.LEFT]
            if simulated.move_in_direction(MoveDirection.LEFT):
                commands.append(Command.LEFT)
                boards.append(CandidateBoard(self.drop(simulated), list(commands)))
            remaining -= 1

        # Sweep right from a fresh copy; the first shift is recorded even if blocked.
        simulated = game.clone()
        commands = [Command.RIGHT]
        simulated.move_in_direction(MoveDirection.RIGHT)
        boards.append(CandidateBoard(self.drop(simulated), list(commands)))

        remaining = game.board.columns // 2 + 1
        while remaining > 1:
            self._rotations(simulated, commands, boards)
            commands = [c for c in commands if c == Command.RIGHT]
            if not simulated.move_in_direction(MoveDirection.RIGHT):
                break
            commands.append(Command.RIGHT)
            boards.append(CandidateBoard(self.drop(simulated), list(commands)))
            remaining -= 1

        return boards
