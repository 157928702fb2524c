from __future__ import annotations

import argparse
from typing import Dict, List, Optional

import numpy as np

from falling_blocks.autoplayer import Command
from falling_blocks.game import Game, GameConfig
from falling_blocks.session import PlaySession


def play_one(config: GameConfig, max_pieces: int = 500) -> Dict[str, object]:
    """Autoplay one game headlessly until game over or `max_pieces` locks."""
    session = PlaySession(Game.from_config(config), autoplay=True)
    # The first DOWN draws and spawns; it also plans the first piece
    session.apply_command(Command.DOWN)
    while not session.is_over and session.game.pieces_locked < max_pieces:
        session.apply_command(session.autoplayer.perform_move(session.game))
    return session.game.get_game_stats()


def evaluate(episodes: int = 5, rows: int = 20, columns: int = 11, seed: int = 0,
             max_pieces: int = 500) -> List[Dict[str, object]]:
    results = []
    for ep in range(episodes):
        stats = play_one(GameConfig(rows=rows, columns=columns, random_seed=seed + ep), max_pieces=max_pieces)
        results.append(stats)
        print(
            f"Game {ep + 1}: lines={stats['lines_cleared']}, score={stats['score']}, "
            f"pieces={stats['pieces_locked']}, game_over={stats['game_over']}"
        )
    lines = np.array([r["lines_cleared"] for r in results], dtype=float)
    scores = np.array([r["score"] for r in results], dtype=float)
    print(f"Mean lines: {lines.mean():.2f} +/- {lines.std():.2f}")
    print(f"Mean score: {scores.mean():.2f} +/- {scores.std():.2f}")
    return results


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description="Evaluate the autoplayer without rendering")
    parser.add_argument("--episodes", type=int, default=5)
    parser.add_argument("--rows", type=int, default=20)
    parser.add_argument("--columns", type=int, default=11)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--max-pieces", type=int, default=500)
    args = parser.parse_args(argv)
    evaluate(args.episodes, args.rows, args.columns, args.seed, args.max_pieces)


if __name__ == "__main__":  # pragma: no cover
    main()
