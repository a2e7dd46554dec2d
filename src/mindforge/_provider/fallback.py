# Area: Provider
"""
mindforge._provider.fallback — Fixed fallback questions
========================================================

Served whenever generation fails, so the game always has something
to show. Both are valid Questions.
"""

from ..types import FailureKind, Question

# Shown when the question service cannot be reached at all
CONFIGURATION_FALLBACK = Question(
    category="Error",
    question_text=(
        "Unable to connect to the question service. "
        "Please check your API configuration."
    ),
    options=["Retry", "Check API Key", "Contact Support", "Restart Game"],
    correct_answer="Check API Key",
    explanation=(
        "MindForge needs a valid Anthropic API key to generate questions. "
        "Set ANTHROPIC_API_KEY in the environment, in a .env file or in the "
        "config file, or start the game with --demo to play offline."
    ),
    hint="Check the log file for details.",
    difficulty=1,
)

# Shown when the service answered but the question was unusable
GENERATION_FALLBACK = Question(
    category="Fallback",
    question_text="Which number comes next: 2, 4, 8, 16, ...?",
    options=["20", "24", "32", "64"],
    correct_answer="32",
    explanation=(
        "Powers of 2: 2^1, 2^2, 2^3, 2^4, 2^5 = 32. This puzzle was served "
        "because the question service failed; check your configuration and "
        "the log file if this keeps happening."
    ),
    hint="Multiply the previous number by 2.",
    difficulty=1,
)


def fallback_for(failure: FailureKind) -> Question:
    """Return the fallback question for a failure kind."""
    if failure is FailureKind.CONFIGURATION:
        return CONFIGURATION_FALLBACK
    return GENERATION_FALLBACK
