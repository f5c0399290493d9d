import logging
import math
from collections import Counter

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS = (0.25, 0.25, 0.25, 0.25)
SMOOTHING_CONSTANT = 0.1


def ngram_key(words, start, n):
    if n < 1 or start < 0 or start + n > len(words):
        raise IndexError(
            f"{n}-gram at offset {start} is out of range for {len(words)} words")
    return tuple(words[start:start + n])


def ngram_counts(words, n):
    # range() is empty when len(words) < n
    return Counter(ngram_key(words, i, n) for i in range(len(words) - n + 1))


def modified_precision(reference, hypothesis, n):
    """
    Number of hypothesis n-grams that also occur in the reference,
    each n-gram clipped to its reference count.
    """
    hyp_counts = ngram_counts(hypothesis, n)
    if not hyp_counts:
        return 0
    ref_counts = ngram_counts(reference, n)
    return sum(min(count, ref_counts[gram]) for gram, count in hyp_counts.items())


def brevity_penalty(ref_length, hyp_length):
    if hyp_length > ref_length:
        return 1.0
    if hyp_length == 0:
        return 0.0
    return math.exp(1 - ref_length / hyp_length)


def sentence_bleu(reference, hypothesis, weights=DEFAULT_WEIGHTS, smooth=False):
    """
    Sentence-level BLEU of `hypothesis` against a single `reference`.

    Both sequences are already tokenized. `weights` holds one weight per
    n-gram order starting from unigrams. When `smooth` is set, an order
    without any match gets precision 0.1 / denominator instead of zero.
    Returns a float in [0, 1].
    """
    if not weights:
        raise ValueError("weights must not be empty")
    if any(w < 0 for w in weights):
        raise ValueError(f"weights must be non-negative, got {list(weights)}")

    hyp_length = len(hypothesis)
    ref_length = len(reference)
    if hyp_length < len(weights) or ref_length < len(weights):
        length = min(hyp_length, ref_length)
        if length == 0:
            return 0.0
        logger.debug("Reducing weights to %d uniform orders", length)
        return sentence_bleu(reference, hypothesis, [1.0 / length] * length, smooth)

    max_n = len(weights)
    p_numerators = [0] * max_n
    p_denominators = [max(1, hyp_length - i) for i in range(max_n)]
    for i in range(max_n):
        p_numerators[i] = modified_precision(reference, hypothesis, i + 1)
        if p_numerators[i] == 0:
            if i == 0:
                return 0.0
            # no n-gram match means no (n+1)-gram match either
            break

    s = 0.0
    for w, numerator, denominator in zip(weights, p_numerators, p_denominators):
        if numerator == 0:
            if not smooth:
                # log(0) = -inf drives the whole score to zero
                return 0.0
            numerator += SMOOTHING_CONSTANT
        s += w * math.log(numerator / denominator)

    bp = brevity_penalty(ref_length, hyp_length)
    return bp * math.exp(s)
