import json
import os
from typing import Dict, Optional


class GenerationStats:
    """Running tally of whole-board generation attempts per strategy."""

    PATH = "navalbattle_stats.json"

    def __init__(self, path: Optional[str] = None):
        self.path = path or self.PATH
        self.attempts = 0
        self.successes = 0
        self.per_strategy: Dict[str, Dict[str, int]] = {}
        self.load()

    def load(self, path: Optional[str] = None):
        if path is None:
            path = self.path
        if not os.path.exists(path):
            return
        try:
            with open(path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError):
            return
        if not isinstance(data, dict):
            return
        self.attempts = int(data.get("attempts", 0))
        self.successes = int(data.get("successes", 0))
        per = data.get("per_strategy")
        if isinstance(per, dict):
            self.per_strategy = {
                str(k): {"attempts": int(v.get("attempts", 0)), "successes": int(v.get("successes", 0))}
                for k, v in per.items()
                if isinstance(v, dict)
            }

    def save(self, path: Optional[str] = None):
        if path is None:
            path = self.path
        data = {
            "attempts": self.attempts,
            "successes": self.successes,
            "per_strategy": self.per_strategy,
        }
        try:
            with open(path, "w") as f:
                json.dump(data, f)
        except OSError:
            pass

    @property
    def failures(self) -> int:
        return self.attempts - self.successes

    def record(self, strategy: str, attempts: int, success: bool):
        """Record one generate_with_retries call that took ``attempts`` tries."""
        bucket = self.per_strategy.setdefault(strategy, {"attempts": 0, "successes": 0})
        bucket["attempts"] += attempts
        self.attempts += attempts
        if success:
            bucket["successes"] += 1
            self.successes += 1

    def summary_text(self) -> str:
        if self.attempts <= 0:
            return "Attempts: 0, Boards: 0, Success rate: N/A"
        rate = 100.0 * self.successes / self.attempts
        return f"Attempts: {self.attempts}, Boards: {self.successes}, Success rate: {rate:.1f}%"
