"""Random test files: a count followed by that many small numbers."""

from __future__ import annotations

import random
from pathlib import Path


def random_test(rng: random.Random | None = None) -> str:
    """One test: ``n`` below 100, then ``n`` numbers below 10000, space-terminated."""
    rng = rng or random.Random()
    n = rng.randrange(100)
    return f"{n}\n" + "".join(f"{rng.randrange(10000)} " for _ in range(n))


def write_tests(
    directory: str | Path, count: int = 50, rng: random.Random | None = None
) -> list[Path]:
    """Write ``count`` tests as ``test<i>.txt``, from the highest index down."""
    rng = rng or random.Random()
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    written = []
    for index in reversed(range(count)):
        path = folder / f"test{index}.txt"
        path.write_text(random_test(rng), encoding="utf-8")
        written.append(path)
    return written