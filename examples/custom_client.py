"""
custom_client.py — A puzzle source without a language model
=============================================================

Any object implementing BaseLLMClient can feed the QuestionProvider.
This one replies with puzzles read from a local JSON file, cycling
through them in order. Replies go through the same parsing and
validation as model output, so a broken entry shows the fallback
question instead of crashing the game.
"""

import itertools
import json
from pathlib import Path
from typing import Optional

from mindforge import BaseLLMClient, ConfigurationError


class FilePuzzleClient(BaseLLMClient):
    """Serve puzzles from a JSON file holding a list of puzzle objects."""

    def __init__(self, path: str):
        self.path = Path(path)
        self._puzzles = None
        if self.path.exists():
            with open(self.path, encoding="utf-8") as f:
                self._puzzles = itertools.cycle(json.load(f))

    def is_available(self) -> bool:
        return self._puzzles is not None

    def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        thinking_budget: int = 0,
    ) -> str:
        if self._puzzles is None:
            raise ConfigurationError(f"Puzzle file not found: {self.path}")
        return json.dumps(next(self._puzzles))
