"""
main.py — Play MindForge with your own puzzle source
=====================================================

Wires a custom LLM client (see custom_client.py) into the question
provider and plays a session in this terminal.

    python main.py puzzles.json

Each entry in puzzles.json is one puzzle in the model's reply format
(category, questionText, options, correctAnswer, explanation, hint).

Type Q to stop.
"""

import sys

from mindforge import GameRunner, HighScoreStore, QuestionLifecycle, QuestionProvider
from mindforge import setup_logging

from custom_client import FilePuzzleClient

# ── Log to a file only; the terminal belongs to the game ──
setup_logging(log_file_path="example.log")

# ── Wire the engine ──
client = FilePuzzleClient(sys.argv[1] if len(sys.argv) > 1 else "puzzles.json")
lifecycle = QuestionLifecycle(
    QuestionProvider(client),
    HighScoreStore("example.db"),
)

GameRunner(lifecycle).run()
