# Area: Provider
"""
mindforge._provider.prompts — Prompt construction
==================================================

Builds the request sent to the model for one question: a category
picked per request, a difficulty label derived from the level, and
mode-specific instructions for visual vs text puzzles.
"""

from typing import List, Tuple

# Puzzle categories offered to the model. The first word doubles as
# the category name when the model leaves it out.
CATEGORIES: List[str] = [
    "Analogy (Tree : Forest :: Book : ?)",
    "Classification / Odd One Out",
    "Series Completion (Numbers or Letters)",
    "Coding-Decoding",
    "Blood Relations",
    "Direction Sense",
    "Logical Venn Diagrams (Text based description)",
    "Mathematical Puzzles (Age, probability, work/time)",
    "Syllogisms / Statement & Conclusion",
    "Visual Reasoning / Figure Series (Geometric patterns, shape sequences)",
]

# (highest level in band, label); levels above the last band are "Genius"
DIFFICULTY_BANDS: List[Tuple[int, str]] = [
    (5, "Easy"),
    (10, "Medium"),
    (20, "Hard"),
    (30, "Expert"),
]
TOP_DIFFICULTY = "Genius"

# Visual puzzles and levels above THINKING_LEVEL get a reasoning budget
THINKING_LEVEL = 15
THINKING_BUDGET_TOKENS = 1024

SYSTEM_INSTRUCTION = (
    "You are a rigid game engine for the logic puzzle game MindForge. "
    "You output a single valid JSON object and nothing else: "
    "no prose, no markdown code fences."
)

RESPONSE_SHAPE = """{
  "category": string,        // category of the puzzle
  "questionText": string,    // the question or riddle
  "options": [string, string, string, string],  // 4 distinct answers
  "correctAnswer": string,   // must equal one of the options exactly
  "explanation": string,     // short explanation of the logic
  "hint": string,            // a nudge that does not give the answer away
  "visualSVG": string        // raw SVG for visual puzzles, "" otherwise
}"""

VISUAL_INSTRUCTIONS = """Visual puzzle mode:
- Put the puzzle drawing in "visualSVG" as raw SVG markup that starts with <svg and ends with </svg>.
- Do not wrap the SVG in markdown.
- Use viewBox="0 0 300 150" for sequences or viewBox="0 0 200 200" for grids.
- Draw with high contrast for a dark background: stroke="white", stroke-width="2", fill="none" or bright colors; any text uses fill="white".
- The drawing must show the pattern (rotating shapes, missing segment, growing count, ...).
- Keep "questionText" short, e.g. "Which shape replaces the question mark?"."""

TEXT_INSTRUCTIONS = """Text puzzle mode:
- Set "visualSVG" to an empty string.
- The puzzle must be fully described in "questionText"."""


def difficulty_label(level: int) -> str:
    """Map a level to its difficulty band label."""
    for upper, label in DIFFICULTY_BANDS:
        if level <= upper:
            return label
    return TOP_DIFFICULTY


def is_visual_category(category: str) -> bool:
    """Visual categories ask the model for an SVG drawing."""
    return "Visual" in category or "Figure" in category


def thinking_budget_for(level: int, category: str) -> int:
    """Reasoning tokens for one request; 0 turns reasoning off."""
    if is_visual_category(category) or level > THINKING_LEVEL:
        return THINKING_BUDGET_TOKENS
    return 0


def category_name(category: str) -> str:
    """Short name of a category, used when the model omits one."""
    return category.split(" ")[0]


def build_question_prompt(level: int, category: str) -> str:
    """Build the user prompt for one question."""
    mode_instructions = VISUAL_INSTRUCTIONS if is_visual_category(category) else TEXT_INSTRUCTIONS
    return f"""Create ONE new reasoning puzzle for level {level} ({difficulty_label(level)} difficulty).

Category: {category}

{mode_instructions}

Rules:
- Offer exactly 4 distinct options; exactly one is correct.
- The logic must be sound and the answer unambiguous.
- Include a hint that helps without revealing the answer.

Reply with a JSON object of this shape:
{RESPONSE_SHAPE}"""
