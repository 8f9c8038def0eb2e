import re

FALLBACK_PLACEHOLDER = "Document content processed. Full text available in document viewer."

MIN_SENTENCE_LENGTH = 20
MAX_SENTENCES = 3

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


def extractive_summary(content: str) -> str:
    """Deterministic summary made of the first few substantial sentences.

    Sentences of 20 characters or fewer are skipped. Never raises.
    """
    sentences = [
        sentence.strip()
        for sentence in _SENTENCE_SPLIT_RE.split(content or "")
        if len(sentence.strip()) > MIN_SENTENCE_LENGTH
    ]
    if not sentences:
        return FALLBACK_PLACEHOLDER
    return ". ".join(sentences[:MAX_SENTENCES]) + "."
