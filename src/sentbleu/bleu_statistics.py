import re
import sys
import argparse

import numpy as np
from scipy import stats

SCORE_PATTERN = re.compile(r'BLEU : ([\d\.]+)')


def parse_scores(lines):
    scores = []
    for line in lines:
        bleu_match = SCORE_PATTERN.search(line)
        if bleu_match:
            scores.append(float(bleu_match.group(1)))
    return scores


def compute_statistics(bleu_scores, confidence_level=0.95):
    """
    Mean, sample standard deviation, median and a Student-t confidence
    interval for the mean. Returns None when there are no scores.
    """
    if not bleu_scores:
        return None
    n = len(bleu_scores)
    mean = float(np.mean(bleu_scores))
    median = float(np.median(bleu_scores))
    if n < 2:
        # a single sample has no spread
        return {
            'mean': mean,
            'std': 0.0,
            'median': median,
            'ci_lower': mean,
            'ci_upper': mean,
            'n_samples': n
        }
    std = float(np.std(bleu_scores, ddof=1))
    t_value = stats.t.ppf((1 + confidence_level) / 2, df=n - 1)
    se = std / np.sqrt(n)
    margin_error = float(t_value * se)
    return {
        'mean': mean,
        'std': std,
        'median': median,
        'ci_lower': mean - margin_error,
        'ci_upper': mean + margin_error,
        'n_samples': n
    }


def format_statistics(statistics, confidence_level=0.95):
    return (f"Mean: {statistics['mean']:.4f}\n"
            f"Std: {statistics['std']:.4f}\n"
            f"Median: {statistics['median']:.4f}\n"
            f"Confidence interval {confidence_level:.0%}: "
            f"[{statistics['ci_lower']:.4f}, {statistics['ci_upper']:.4f}]\n"
            f"Samples: {statistics['n_samples']}")


def process_args(args):
    parser = argparse.ArgumentParser(
        description='Summarize per-sentence BLEU scores found in a log file.')
    parser.add_argument('log_file',
                        type=argparse.FileType('r', encoding='utf-8'),
                        help='Log written by sentence-bleu --verbose')
    parser.add_argument('--confidence-level',
                        dest='confidence_level',
                        type=float,
                        default=0.95,
                        help='Confidence level of the interval (default: 0.95)')
    return parser.parse_args(args)


def main(args=None):
    parameters = process_args(args)
    with parameters.log_file as f:
        scores = parse_scores(f)
    statistics = compute_statistics(scores, parameters.confidence_level)
    if statistics is None:
        print(f"No BLEU scores found in {parameters.log_file.name}")
        sys.exit(1)
    print(format_statistics(statistics, parameters.confidence_level))
    return 0


if __name__ == '__main__':
    main(sys.argv[1:])
