from sentbleu.sentence_bleu import (
    DEFAULT_WEIGHTS,
    SMOOTHING_CONSTANT,
    brevity_penalty,
    modified_precision,
    ngram_counts,
    ngram_key,
    sentence_bleu,
)

__version__ = "0.1.0"
