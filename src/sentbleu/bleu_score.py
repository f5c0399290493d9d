import sys
import argparse
import logging

from sentbleu.sentence_bleu import DEFAULT_WEIGHTS, sentence_bleu
from sentbleu.bleu_statistics import compute_statistics

LOG_FORMAT = '%(asctime)-15s %(name)-5s %(levelname)-8s %(message)s'


def non_negative_float(value):
    weight = float(value)
    if weight < 0:
        raise argparse.ArgumentTypeError(f"weight must be non-negative: {value}")
    return weight


def process_args(args):
    parser = argparse.ArgumentParser(
        description='Compute sentence-level BLEU for every line pair of two files.')

    parser.add_argument('reference',
                        type=argparse.FileType('r', encoding='utf-8'),
                        help='Reference file, one tokenized sentence per line')

    parser.add_argument('candidate',
                        type=argparse.FileType('r', encoding='utf-8'),
                        help='Candidate file, one tokenized sentence per line')

    parser.add_argument('--weights',
                        type=non_negative_float,
                        nargs='+',
                        default=list(DEFAULT_WEIGHTS),
                        help='N-gram weights starting from unigrams (default: 0.25 0.25 0.25 0.25)')

    parser.add_argument('--smooth',
                        action='store_true',
                        help='Smooth n-gram orders without any match')

    parser.add_argument('--log-path',
                        dest='log_path',
                        type=str,
                        default='log.txt',
                        help='Log file path (default: log.txt)')

    parser.add_argument('--verbose',
                        action='store_true',
                        help='Log the score of every line')

    return parser.parse_args(args)


def setup_logging(log_path):
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        filename=log_path
    )
    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.getLogger('').addHandler(console)
    return console


def score_lines(ref_lines, cand_lines, weights=DEFAULT_WEIGHTS, smooth=False, verbose=False):
    scores = []
    for i, (ref, cand) in enumerate(zip(ref_lines, cand_lines)):
        if i % 100 == 0:
            logging.info(f"Processing line {i}")
        bleu = sentence_bleu(ref.split(), cand.split(), weights, smooth)
        if verbose:
            logging.info(f"Line {i} BLEU : {bleu:.6f}")
        scores.append(bleu)
    return scores


def main(args=None):
    parameters = process_args(args)
    console = setup_logging(parameters.log_path)
    logging.info('Script started: %s' % __file__)

    try:
        with parameters.reference as f:
            ref_lines = [line.strip() for line in f]
        with parameters.candidate as f:
            cand_lines = [line.strip() for line in f]

        if len(ref_lines) != len(cand_lines):
            logging.error(f"Mismatched number of lines: reference({len(ref_lines)}) vs candidate({len(cand_lines)})")
            sys.exit(1)
        if not cand_lines:
            logging.error("Candidate file is empty")
            sys.exit(1)

        scores = score_lines(ref_lines, cand_lines, parameters.weights,
                             parameters.smooth, parameters.verbose)
        average_bleu = sum(scores) / len(scores)
        print(f"BLEU = {average_bleu * 100:.2f}")

        statistics = compute_statistics(scores)
        if statistics['n_samples'] > 1:
            logging.info(f"Std: {statistics['std']:.4f} | Median: {statistics['median']:.4f} | "
                         f"95% CI: [{statistics['ci_lower']:.4f}, {statistics['ci_upper']:.4f}]")
        logging.info('Execution finished')
    finally:
        logging.getLogger('').removeHandler(console)

    return 0


if __name__ == '__main__':
    main(sys.argv[1:])
