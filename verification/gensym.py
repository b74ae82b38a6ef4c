# Author: Bradley R. Kinnard
# fresh placeholder names, one generator per verification run

from dataclasses import dataclass


@dataclass
class FreshNameGenerator:
    """
    monotonically increasing name source.

    passed explicitly to whatever needs fresh names so that two runs never
    share a counter.
    """
    prefix: str = "sym"
    counter: int = 0

    def fresh(self) -> str:
        name = f"{self.prefix}${self.counter}"
        self.counter += 1
        return name
