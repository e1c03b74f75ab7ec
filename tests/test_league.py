import contextlib
import csv
import io
import pickle
import random
import tempfile
import unittest
from pathlib import Path

from c4engine.ai.minimax_agent import MinimaxAgent
from c4engine.ai.random_agent import RandomAgent
from c4engine.scripts.league import GAME_COLUMNS, STANDINGS_COLUMNS, build_roster, pairings, run_league
from c4engine.scripts.league_play import play_headless, play_pairing, seed_agent
from c4engine.scripts.league_scoring import ranked, strength, tally, wilson_lcb
from c4engine.scripts.league_types import GameRecord, SideLog, Standing, Team


def _record(x, o, outcome, x_log=SideLog(), o_log=SideLog(), seed=0):
    return GameRecord(x=x, o=o, seed=seed, outcome=outcome, plies=10, x_log=x_log, o_log=o_log)


class TestTeams(unittest.TestCase):
    def test_roster_covers_every_tier(self):
        roster = build_roster()
        self.assertEqual([t.name for t in roster], ["Random", "Easy", "Medium", "Hard"])
        self.assertEqual([t.depth for t in roster], [0, 1, 3, 5])

    def test_build_agents(self):
        self.assertIsInstance(Team("Random").build(), RandomAgent)
        hard = Team("Hard", "hard").build()
        self.assertIsInstance(hard, MinimaxAgent)
        self.assertEqual(hard.depth, 5)
        self.assertEqual(hard.name, "Hard")

    def test_team_pickles_for_worker_processes(self):
        team = Team("Medium", "medium")
        self.assertEqual(pickle.loads(pickle.dumps(team)), team)

    def test_unknown_difficulty(self):
        with self.assertRaises(ValueError):
            Team("Brutal", "brutal").depth  # type: ignore[arg-type]

    def test_pairings_are_round_robin(self):
        items = pairings(build_roster(), seed=0)
        self.assertEqual(len(items), 6)
        self.assertEqual(len({(a.name, b.name) for a, b, _ in items}), 6)
        self.assertEqual(len({s for _, _, s in items}), 6)


class TestStandings(unittest.TestCase):
    def test_tally_credits_both_sides(self):
        teams = [Team("Easy", "easy"), Team("Hard", "hard")]
        table = tally(teams, [
            _record("Easy", "Hard", "O", x_log=SideLog(moves=5, random_moves=2, nodes=40, time_ms=5),
                    o_log=SideLog(moves=5, nodes=9000, time_ms=400)),
            _record("Hard", "Easy", "X"),
            _record("Easy", "Hard", "D"),
        ])
        easy, hard = table["Easy"], table["Hard"]
        self.assertEqual((easy.wins, easy.draws, easy.losses), (0, 1, 2))
        self.assertEqual((hard.wins, hard.draws, hard.losses), (2, 1, 0))
        self.assertEqual(hard.points, 2.5)
        self.assertEqual(easy.random_moves, 2)
        self.assertEqual(hard.nodes_per_move, 1800.0)
        self.assertEqual((easy.depth, hard.depth), (1, 5))

    def test_empty_standing(self):
        s = Standing()
        self.assertEqual((s.ppg, s.nodes_per_move, s.ms_per_move), (0.0, 0.0, 0.0))
        self.assertEqual(strength(s), 0.0)

    def test_wilson_bound(self):
        self.assertEqual(wilson_lcb(0.5, 0), 0.0)
        lcb = wilson_lcb(1.0, 10)
        self.assertGreater(lcb, 0.0)
        self.assertLess(lcb, 1.0)
        # More games, tighter bound
        self.assertGreater(wilson_lcb(1.0, 100), lcb)
        self.assertAlmostEqual(wilson_lcb(0.5, 100, z=1.96), 0.4038, places=3)

    def test_ranked_breaks_ties_on_search_cost(self):
        table = {
            "Hard": Standing(depth=5, games=4, wins=2, losses=2, moves=10, nodes=5000),
            "Medium": Standing(depth=3, games=4, wins=2, losses=2, moves=10, nodes=500),
            "Random": Standing(games=4, losses=4, moves=10),
        }
        self.assertEqual([name for name, _ in ranked(table)], ["Medium", "Hard", "Random"])


class TestHeadlessGames(unittest.TestCase):
    def test_seed_agent_reseeds_rng(self):
        agent = RandomAgent(rng=random.Random(0))
        seed_agent(agent, 99)
        self.assertEqual(agent.rng.random(), random.Random(99).random())

    def test_game_record(self):
        rec = play_headless(RandomAgent(name="Random"), MinimaxAgent(difficulty="easy", name="Easy"), seed_base=3)
        self.assertEqual((rec.x, rec.o, rec.seed), ("Random", "Easy", 3))
        self.assertIn(rec.outcome, {"X", "O", "D"})
        # Opening plies are not charged to either side
        self.assertEqual(rec.x_log.moves + rec.o_log.moves + 2, rec.plies)
        self.assertEqual(rec.x_log.random_moves, rec.x_log.moves)
        self.assertEqual(rec.x_log.nodes, 0)
        self.assertGreater(rec.o_log.time_ms, 0)

    def test_reproducible(self):
        first = play_headless(RandomAgent(), MinimaxAgent(difficulty="easy"), seed_base=11)
        second = play_headless(RandomAgent(), MinimaxAgent(difficulty="easy"), seed_base=11)
        self.assertEqual(first.outcome, second.outcome)
        self.assertEqual(first.plies, second.plies)

    def test_pairing_alternates_colours(self):
        recs = play_pairing(Team("Random"), Team("Easy", "easy"), base_seed=50, games=3)
        self.assertEqual([(r.x, r.o) for r in recs], [("Random", "Easy"), ("Easy", "Random"), ("Random", "Easy")])
        self.assertEqual([r.seed for r in recs], [50, 51, 52])


class TestLeague(unittest.TestCase):
    def test_round_robin_and_csv(self):
        teams = [Team("Random"), Team("Easy", "easy")]
        with tempfile.TemporaryDirectory() as tmp, contextlib.redirect_stdout(io.StringIO()):
            run = run_league(teams, games_per_pair=2, seed=1, max_workers=1, out_dir=tmp)
            with open(run.standings_csv, newline="") as f:
                standings = list(csv.reader(f))
            with open(run.games_csv, newline="") as f:
                games = list(csv.DictReader(f))
            self.assertEqual(len(list(Path(tmp).glob("league_*.csv"))), 2)

        self.assertEqual(set(run.standings), {"Random", "Easy"})
        self.assertEqual(run.standings["Random"].games, 2)
        self.assertEqual(run.standings["Random"].points + run.standings["Easy"].points, 2.0)
        self.assertEqual(len(run.games), 2)

        self.assertEqual(standings[0], STANDINGS_COLUMNS)
        self.assertEqual(len(standings), 3)
        self.assertEqual(list(games[0]), GAME_COLUMNS)
        self.assertEqual([g["x"] for g in games], ["Random", "Easy"])

    def test_no_csv(self):
        with contextlib.redirect_stdout(io.StringIO()):
            run = run_league([Team("Random"), Team("Easy", "easy")], games_per_pair=1, max_workers=1, out_dir=None)
        self.assertIsNone(run.standings_csv)
        self.assertIsNone(run.games_csv)


if __name__ == "__main__":
    unittest.main()
