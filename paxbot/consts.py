PAXBOT_VERSION = "0.1.0"

# Reaction symbols
REACT_RESULTS_FORWARD = "➡️"
REACT_RESULTS_BACKWARD = "⬅️"

REACT_FEEDBACK_GOOD = "❤️"
REACT_FEEDBACK_BAD = "💢"

NAVIGATION_SIGNALS = (REACT_RESULTS_BACKWARD, REACT_RESULTS_FORWARD)
FEEDBACK_SIGNALS = (REACT_FEEDBACK_GOOD, REACT_FEEDBACK_BAD)

# Similarity thresholds, scores are in [0, 1]
SEARCH_SCORE_THRESHOLD = 0.6
SEARCH_SUGGEST_THRESHOLD = 0.2  # reserved, not applied when scoring

# Category pages list at most this many members inline
CATEGORY_MEMBER_LIMIT = 10
