import unittest

from falling_blocks.autoplayer import Command
from falling_blocks.game import Board, Game, MoveDirection, PieceKind, Pivot, ScriptedPieceSupply
from falling_blocks.session import PlaySession


class TestPlaySession(unittest.TestCase):

    def setUp(self):
        game = Game(Board(), ScriptedPieceSupply([PieceKind.I]))
        game.step(MoveDirection.DOWN)
        self.session = PlaySession(game)

    def test_gravity_waits_for_interval(self):
        self.assertFalse(self.session.update(0.5))
        self.assertEqual(self.session.game.active_position, Pivot(2, 5))
        self.session.update(0.8)
        self.assertEqual(self.session.game.active_position, Pivot(3, 5))
        self.session.update(1.0)
        self.assertEqual(self.session.game.active_position, Pivot(3, 5))

    def test_manual_moves(self):
        self.assertFalse(self.session.move(MoveDirection.LEFT))
        self.assertEqual(self.session.game.active_position, Pivot(2, 4))
        self.assertTrue(self.session.rotate_clockwise())
        self.assertTrue(self.session.rotate_counter_clockwise())

    def test_manual_input_ignored_in_autoplay(self):
        self.session.autoplay = True
        before = self.session.game.board.copy()
        self.session.move(MoveDirection.LEFT)
        self.assertFalse(self.session.rotate_clockwise())
        self.assertEqual(self.session.game.board, before)

    def test_autoplay_replays_commands_between_gravity_steps(self):
        self.session.autoplay = True
        self.session.autoplayer.commands = [Command.LEFT]
        self.session.update(0.1)
        self.assertEqual(self.session.game.active_position, Pivot(2, 4))
        self.session.update(0.2)
        self.assertEqual(self.session.game.active_position, Pivot(3, 4))

    def test_spawn_plans_next_piece(self):
        self.session.autoplay = True
        while not self.session.apply_command(Command.DOWN):
            pass
        self.assertEqual(self.session.game.pieces_locked, 1)


class TestAutoplayedGame(unittest.TestCase):

    def test_headless_game_reaches_a_final_state(self):
        from falling_blocks.rl.eval_autoplayer import play_one
        from falling_blocks.game import GameConfig

        stats = play_one(GameConfig(rows=20, columns=11, random_seed=7), max_pieces=30)
        self.assertTrue(stats["game_over"] or stats["pieces_locked"] >= 30)
        self.assertEqual(stats["score"] % 100, 0)


if __name__ == "__main__":
    unittest.main()
