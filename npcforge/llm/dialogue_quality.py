"""Repetition judgment and cleanup for generated dialogue lines."""

import re

VARIATION_STRATEGIES = [
    "Try a different emotional tone",
    "Reference a different aspect of your personality",
    "Use a different conversational style (formal/casual)",
    "Focus on a different topic",
    "Express a contrasting opinion or mood",
]

SIMILARITY_THRESHOLD = 0.7
MAX_SENTENCES = 3

_NON_WORD = re.compile(r"[^a-z0-9\s]")
_SENTENCE = re.compile(r"[^.!?]+[.!?]+")

# Narration and markup a model sometimes wraps around the spoken line.
_STRIP_PATTERNS = [
    re.compile(r"\([^)]*\bthinks?\b[^)]*\)", re.IGNORECASE),
    re.compile(r"\([^)]*\bfeels?\b[^)]*\)", re.IGNORECASE),
    re.compile(r"\*[^*]*\binternally\b[^*]*\*", re.IGNORECASE),
    re.compile(r"^\s*(He|She|They)\s+(said|says|replies|responds|asks|whispers|shouts)\b", re.IGNORECASE),
    re.compile(r"\*\*[^*]+\*\*"),
    re.compile(r"\*[^*]+\*"),
    re.compile(r"\[[^\]]*?(INST|SYS)[^\]]*?\]", re.IGNORECASE),
    re.compile(r"<\|[^|]*\|>"),
]


def _normalize(text: str) -> str:
    return _NON_WORD.sub("", text.lower()).strip()


class DialogueQualityJudge:
    """Decides whether a candidate line repeats recent ones, and cleans it."""

    def __init__(self, threshold: float = SIMILARITY_THRESHOLD) -> None:
        self.threshold = threshold

    def is_repetitive(self, candidate: str, recent: list[str]) -> bool:
        """Exact match after normalizing, or word overlap above the threshold."""
        normalized = _normalize(candidate)
        words = set(normalized.split())
        for previous in recent:
            other = _normalize(previous)
            if normalized == other:
                return True
            other_words = set(other.split())
            largest = max(len(words), len(other_words))
            if largest and len(words & other_words) / largest > self.threshold:
                return True
        return False

    @staticmethod
    def variation_strategy(interaction_count: int) -> str:
        return VARIATION_STRATEGIES[interaction_count % len(VARIATION_STRATEGIES)]

    @staticmethod
    def regeneration_temperature(attempt: int) -> float:
        """0.7 on the first attempt, rising by 0.1 per retry, capped at 1.0."""
        return min(0.7 + 0.1 * attempt, 1.0)

    @staticmethod
    def sanitize_response(text: str) -> str:
        """Reduce model output to at most three spoken sentences."""
        cleaned = text
        for pattern in _STRIP_PATTERNS:
            cleaned = pattern.sub("", cleaned)
        cleaned = re.sub(r"\bheh\b\.?", "...", cleaned, flags=re.IGNORECASE)
        cleaned = re.sub(r"\.{4,}", "...", cleaned)
        cleaned = cleaned.strip()

        if len(cleaned) >= 2 and cleaned[0] == cleaned[-1] and cleaned[0] in "\"'":
            inner = cleaned[1:-1]
            if cleaned[0] not in inner:
                cleaned = inner

        sentences = _SENTENCE.findall(cleaned)
        if len(sentences) > MAX_SENTENCES:
            cleaned = " ".join(sentences[:MAX_SENTENCES])

        cleaned = re.sub(r"\s+", " ", cleaned).strip()
        if not cleaned:
            return ""
        cleaned = cleaned[0].upper() + cleaned[1:]
        if cleaned[-1] not in ".!?":
            cleaned += "."
        return cleaned
