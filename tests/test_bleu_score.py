import io
import os
import unittest
from contextlib import redirect_stdout

from sentbleu.bleu_score import main, process_args, score_lines
from sentbleu.bleu_statistics import parse_scores
from .utilities import write_temporary_file


class ScoreLinesTest(unittest.TestCase):
    def test_scores_every_line_pair(self):
        refs = ["the cat sat on the mat", "a b c d"]
        cands = ["the cat sat on the mat", "a c b d"]
        scores = score_lines(refs, cands)
        self.assertEqual(len(scores), 2)
        self.assertEqual(scores[0], 1.0)
        self.assertEqual(scores[1], 0.0)

    def test_smoothing_is_forwarded(self):
        scores = score_lines(["a b c d"], ["a c b d"], smooth=True)
        self.assertGreater(scores[0], 0.0)

    def test_verbose_log_can_be_parsed_back(self):
        with self.assertLogs(level='INFO') as cm:
            scores = score_lines(["a b c d", "x y"], ["a b c d", "x z"], verbose=True)
        self.assertEqual(parse_scores(cm.output), [round(s, 6) for s in scores])


class MainTest(unittest.TestCase):
    def setUp(self):
        self.log_path = write_temporary_file("", suffix=".log")
        self.paths = [self.log_path]

    def tearDown(self):
        for path in self.paths:
            os.remove(path)

    def make_file(self, content):
        path = write_temporary_file(content)
        self.paths.append(path)
        return path

    def test_reports_average_bleu(self):
        reference = self.make_file("the cat sat on the mat\nhello world again today\n")
        candidate = self.make_file("the cat sat on the mat\ngoodbye moon\n")
        out = io.StringIO()
        with redirect_stdout(out):
            status = main([reference, candidate, '--log-path', self.log_path])
        self.assertEqual(status, 0)
        self.assertEqual(out.getvalue().strip(), "BLEU = 50.00")

    def test_mismatched_line_counts_exit(self):
        reference = self.make_file("a b c\nd e f\n")
        candidate = self.make_file("a b c\n")
        with self.assertRaises(SystemExit) as cm:
            main([reference, candidate, '--log-path', self.log_path])
        self.assertEqual(cm.exception.code, 1)

    def test_empty_candidate_exits(self):
        reference = self.make_file("")
        candidate = self.make_file("")
        with self.assertRaises(SystemExit) as cm:
            main([reference, candidate, '--log-path', self.log_path])
        self.assertEqual(cm.exception.code, 1)

    def test_weights_option(self):
        reference = self.make_file("a b\n")
        candidate = self.make_file("a b\n")
        parameters = process_args([reference, candidate, '--weights', '0.5', '0.5', '--smooth'])
        parameters.reference.close()
        parameters.candidate.close()
        self.assertEqual(parameters.weights, [0.5, 0.5])
        self.assertTrue(parameters.smooth)

    def test_negative_weight_rejected(self):
        reference = self.make_file("a b\n")
        candidate = self.make_file("a b\n")
        with self.assertRaises(SystemExit), redirect_stdout(io.StringIO()):
            process_args([reference, candidate, '--weights', '-0.5'])


if __name__ == '__main__':
    unittest.main()
