# Heuristic confidence scores for composed answers

BASE_CONFIDENCE = 0.7
PER_MATCH_CONFIDENCE = 0.1
MAX_MATCH_CONFIDENCE = 0.95

SUMMARY_CONFIDENCE = 0.8
CONTEXT_CONFIDENCE = 0.75
FALLBACK_CONFIDENCE = 0.6


def estimate_confidence(relevant_count: int) -> float:
    """Confidence grows with the number of relevant sentences, capped at 0.95"""
    count = max(relevant_count, 0)
    confidence = min(BASE_CONFIDENCE + PER_MATCH_CONFIDENCE * count, MAX_MATCH_CONFIDENCE)
    # 0.7 + 0.1 * 2 is 0.8999999999999999 in floats
    return round(max(0.0, min(confidence, 1.0)), 4)
