import contextlib
import io
import os
import tempfile
import unittest

from timedquiz import __version__
from timedquiz.app import explain
from timedquiz.main import main

from tests.helpers import write_csv


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.csv = write_csv(os.path.join(self._tmp.name, "problems.csv"), "2+2,4\n3+3,6\n")
        self.addCleanup(explain.enable, False)

    def _run(self, argv, answers: str = ""):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stderr(err):
            code = main(argv, stdin=io.StringIO(answers), stdout=out)
        return code, out.getvalue(), err.getvalue()

    def test_timed_run_prints_transcript_and_score(self) -> None:
        code, out, _ = self._run(["--csv_file", self.csv, "--duration", "30"], "4\n6\n")
        self.assertEqual(code, 0)
        self.assertEqual(out, "2+2 = 3+3 = \n\nScore: 2/2\n")

    def test_wrong_answer(self) -> None:
        code, out, _ = self._run(["--csv_file", self.csv], "5\n6\n")
        self.assertEqual(code, 0)
        self.assertTrue(out.endswith("Score: 1/2\n"))

    def test_untimed_run_format(self) -> None:
        code, out, _ = self._run(["--csv_file", self.csv, "--no-timer"], "4\n6\n")
        self.assertEqual(code, 0)
        self.assertEqual(out, "2+2 = 3+3 = Score: 2/2\n")

    def test_zero_duration(self) -> None:
        code, out, _ = self._run(["--csv_file", self.csv, "--duration", "0"], "4\n6\n")
        self.assertEqual(code, 0)
        self.assertEqual(out, "\n\nScore: 0/2\n")

    def test_infinite_duration_runs_without_timer_errors(self) -> None:
        code, out, err = self._run(["--csv_file", self.csv, "--duration", "inf"], "4\n6\n")
        self.assertEqual(code, 0)
        self.assertEqual(out, "2+2 = 3+3 = \n\nScore: 2/2\n")
        self.assertNotIn("OverflowError", err)

    def test_nan_duration_is_a_usage_error(self) -> None:
        with self.assertRaises(SystemExit) as cm:
            self._run(["--csv_file", self.csv, "--duration", "nan"], "4\n")
        self.assertEqual(cm.exception.code, 2)

    def test_missing_source_fails_before_any_prompt(self) -> None:
        code, out, err = self._run(["--csv_file", os.path.join(self._tmp.name, "none.csv")], "4\n")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertTrue(err.startswith("ERROR: "))

    def test_malformed_source_fails_before_any_prompt(self) -> None:
        bad = write_csv(os.path.join(self._tmp.name, "bad.csv"), "2+2,4\n3+3\n")
        code, out, err = self._run(["--csv_file", bad], "4\n")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("line 2", err)

    def test_missing_config_file(self) -> None:
        code, out, err = self._run(["--config", os.path.join(self._tmp.name, "x.yml")])
        self.assertEqual(code, 1)
        self.assertIn("Config file not found", err)

    def test_config_file_supplies_source(self) -> None:
        cfg = os.path.join(self._tmp.name, "quiz.yml")
        with open(cfg, "w", encoding="utf-8") as f:
            f.write(f"quiz:\n  csv_file: {self.csv}\n  timed: false\n")
        code, out, _ = self._run(["--config", cfg], "4\n6\n")
        self.assertEqual(code, 0)
        self.assertEqual(out, "2+2 = 3+3 = Score: 2/2\n")

    def test_explain_traces_on_stderr_only(self) -> None:
        code, out, err = self._run(["--csv_file", self.csv, "--explain"], "4\n6\n")
        self.assertEqual(code, 0)
        self.assertNotIn("[EXPLAIN]", out)
        self.assertIn("[EXPLAIN] questions_loaded", err)
        self.assertIn("[EXPLAIN] quiz_finished", err)

    def test_version(self) -> None:
        code, out, _ = self._run(["--version"])
        self.assertEqual(code, 0)
        self.assertEqual(out, f"timedquiz {__version__}\n")


if __name__ == "__main__":
    unittest.main()
