# Area: Display
"""
mindforge.display — Terminal rendering
=======================================

Turns a LifecycleView into text for the terminal: the HUD (level,
score, streak), the question card with lettered options, answer
feedback, and the advisory banner shown with fallback questions.

All functions return strings; the runner decides where they go.
"""

from typing import List, Optional

from ._engine.enums import QuestionPhase
from ._engine.lifecycle import LifecycleView
from .types import GameState, Question

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"         # Correct answers
RED = "\033[31m"           # Wrong answers, advisories
YELLOW = "\033[33m"        # Hints, high score
ORANGE = "\033[38;5;208m"  # Hot streak
CYAN = "\033[36m"          # Category badge
DIM = "\033[2m"
BOLD = "\033[1m"
RESET = "\033[0m"

OPTION_LETTERS = "ABCD"

# Streak above this is shown as "on fire"
HOT_STREAK = 2

WIDTH = 64


def option_letter(index: int) -> str:
    return OPTION_LETTERS[index]


def option_for_key(question: Question, key: str) -> Optional[str]:
    """Map a key typed by the player (A-D or 1-4) to an option."""
    key = key.strip().upper()
    if len(key) != 1:
        return None
    if key in OPTION_LETTERS:
        index = OPTION_LETTERS.index(key)
    elif key.isdigit() and 1 <= int(key) <= len(question.options):
        index = int(key) - 1
    else:
        return None
    if index >= len(question.options):
        return None
    return question.options[index]


def render_hud(state: GameState) -> str:
    """Level, score and streak on one line; best score when there is one."""
    streak_color = ORANGE if state.streak > HOT_STREAK else ""
    flame = " 🔥" if state.streak > HOT_STREAK else ""
    parts = [
        f"LEVEL {BOLD}{state.current_level}{RESET}",
        f"SCORE {BOLD}{state.score:,}{RESET}",
        f"STREAK {streak_color}{BOLD}{state.streak}{RESET}{flame}",
    ]
    if state.high_score > 0:
        parts.append(f"{YELLOW}BEST {state.high_score:,}{RESET}")
    return "  │  ".join(parts)


def render_question(view: LifecycleView) -> str:
    """The question card, with feedback once the question is answered."""
    question = view.question
    if question is None:
        return f"{DIM}Forging a new puzzle...{RESET}"

    answered = view.phase == QuestionPhase.ANSWERED
    lines: List[str] = [f"{CYAN}[{question.category.upper()}]{RESET}", ""]
    lines.append(f"{BOLD}{question.question_text}{RESET}")

    if question.visual_svg:
        lines.append(
            f"{DIM}(diagram attached: {len(question.visual_svg)} characters of SVG){RESET}"
        )
    lines.append("")

    for index, option in enumerate(question.options):
        lines.append(_render_option(index, option, question, view, answered))

    if view.hint_shown and not answered:
        lines.append("")
        lines.append(f"{YELLOW}Hint: {question.hint}{RESET}")

    if answered:
        lines.append("")
        lines.append(render_feedback(view))

    return "\n".join(lines)


def _render_option(
    index: int,
    option: str,
    question: Question,
    view: LifecycleView,
    answered: bool,
) -> str:
    label = f"  {option_letter(index)}) {option}"
    if not answered:
        return label
    if option == question.correct_answer:
        return f"{GREEN}{label}  ✔{RESET}"
    if option == view.selected_option:
        return f"{RED}{label}  ✘{RESET}"
    return f"{DIM}{label}{RESET}"


def render_feedback(view: LifecycleView) -> str:
    """Outcome line plus the explanation."""
    question = view.question
    if view.answered_correctly:
        headline = f"{GREEN}{BOLD}Correct! +{view.points_awarded} points{RESET}"
    else:
        headline = f"{RED}{BOLD}Not quite. The answer was {question.correct_answer}.{RESET}"
    return f"{headline}\n{question.explanation}"


def render_advisory(view: LifecycleView) -> str:
    """Passive banner shown while a fallback question is on screen."""
    if not view.has_error:
        return ""
    return f"{RED}⚠ {view.advisory}{RESET}"


def render_controls(view: LifecycleView) -> str:
    """Keys available in the current phase."""
    if view.phase == QuestionPhase.READY:
        return f"{DIM}[A-D] answer   [H] hint   [Q] quit{RESET}"
    if view.phase == QuestionPhase.ANSWERED:
        return f"{DIM}[N] next puzzle   [Q] quit{RESET}"
    return ""


def render_screen(view: LifecycleView) -> str:
    """Full screen for one view."""
    parts = ["═" * WIDTH, render_hud(view.game_state), "─" * WIDTH]
    advisory = render_advisory(view)
    if advisory:
        parts.append(advisory)
        parts.append("")
    parts.append(render_question(view))
    parts.append("─" * WIDTH)
    controls = render_controls(view)
    if controls:
        parts.append(controls)
    return "\n".join(parts)


def render_summary(state: GameState) -> str:
    """Farewell line shown when the player quits."""
    return (
        f"Thanks for playing MindForge! Final score {state.score:,} "
        f"at level {state.current_level} (best {state.high_score:,})."
    )
