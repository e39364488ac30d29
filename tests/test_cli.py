"""
Tests for the generate-data and analyze-openings entry points.
"""

import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest import mock

from openingbook.errors import NetworkError
from openingbook.lookup import EPD_LOOKUP_FILE
from winrates import analyze_games, generate_data
from winrates.write_data import write_lookups

from tests.fixtures import ITALIAN_PGN, OPENING_ROWS, build_lookup, tagged


class TestGenerateData(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def test_writes_lookup_files(self):
        with mock.patch.object(generate_data, 'fetch_openings', return_value=OPENING_ROWS):
            status = generate_data.main(["--data-dir", self.tmp.name])

        self.assertEqual(status, 0)
        self.assertEqual(len(os.listdir(self.tmp.name)), 5)
        with open(os.path.join(self.tmp.name, EPD_LOOKUP_FILE), encoding='utf-8') as f:
            self.assertEqual(len(json.load(f)), 4)

    def test_failure_is_logged_not_raised(self):
        with mock.patch.object(generate_data, 'fetch_openings', side_effect=NetworkError("boom")):
            with self.assertLogs('winrates.generate_data', level='ERROR'):
                status = generate_data.main(["--data-dir", self.tmp.name])

        self.assertEqual(status, 1)
        self.assertEqual(os.listdir(self.tmp.name), [])

    def test_bad_row_writes_nothing(self):
        rows = OPENING_ROWS + ["C20\tBroken\t1. e4 e5 2. Ke3"]
        with mock.patch.object(generate_data, 'fetch_openings', return_value=rows):
            status = generate_data.main(["--data-dir", self.tmp.name])

        self.assertEqual(status, 1)
        self.assertEqual(os.listdir(self.tmp.name), [])


class TestAnalyzeOpenings(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.builder = build_lookup()
        write_lookups(self.builder.outputs(), self.tmp.name)

    def test_prints_summary(self):
        italian = self.builder.index().get(
            "r1bqkbnr/pppp1ppp/2n5/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R b KQkq -"
        )
        games = [tagged(italian, pgn=ITALIAN_PGN, game_id=i) for i in range(16)]
        output_path = os.path.join(self.tmp.name, "summary.json")

        with mock.patch.object(analyze_games, 'fetch_user_games', return_value=games) as fetch:
            out = io.StringIO()
            with redirect_stdout(out):
                analyze_games.main(["alice", "--data-dir", self.tmp.name, "--output", output_path])

        username, index = fetch.call_args.args
        self.assertEqual(username, "alice")
        self.assertEqual(len(index), 4)
        self.assertEqual(fetch.call_args.kwargs['months'], 6)

        summary = json.loads(out.getvalue())
        self.assertEqual(summary, {'white': ['100.00%: Italian Game played 16 games.'], 'black': []})
        with open(output_path, encoding='utf-8') as f:
            self.assertEqual(json.load(f), summary)

    def test_fetch_failure_propagates(self):
        with mock.patch.object(analyze_games, 'fetch_user_games', side_effect=NetworkError("404")):
            with self.assertRaises(NetworkError):
                analyze_games.main(["alice", "--data-dir", self.tmp.name])


if __name__ == '__main__':
    unittest.main()
