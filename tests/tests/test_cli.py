import io
from contextlib import redirect_stdout
from unittest import TestCase

from paynym.__main__ import main

VALID = "PM8TJS2JxQ5ztXUpBBRnpTbcUXbUHy2T1abfrb3KkAAtMEGNbey4oumH7Hc578WgQJhPjBxteQ5GHHToTYHE3A1w6p7tU6KSoFmWBVbFGjKPisZDbP97"


def run(*argv):
    out = io.StringIO()
    with redirect_stdout(out):
        code = main(list(argv))
    return code, out.getvalue().splitlines()


class CliTest(TestCase):
    def test_valid(self):
        self.assertEqual(run(VALID), (0, ["valid"]))

    def test_invalid(self):
        self.assertEqual(run(VALID[:-1]), (1, ["invalid"]))

    def test_many(self):
        self.assertEqual(run(VALID, VALID[:-1], VALID), (1, ["valid", "invalid", "valid"]))

    def test_network(self):
        self.assertEqual(run("--network", "test", VALID), (0, ["valid"]))
        with self.assertRaises(SystemExit):
            with redirect_stdout(io.StringIO()):
                main(["--network", "nonet", VALID])
