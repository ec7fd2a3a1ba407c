"""
Tiny helper script to print readability labels for a few sample posts.
"""

from __future__ import annotations

from readability_engine import (
    audience_for_score,
    compute_readability_score,
    level_for_score,
)


def main() -> None:
    samples = [
        "The cat sat. The dog ran. Birds fly high.",
        "Notwithstanding extraordinarily complicated institutional considerations, "
        "administrators systematically reconceptualized interdisciplinary curricula.",
        "Short posts are easy to read.\n\nKeep each paragraph to a thought or two.",
    ]

    for sample in samples:
        score = compute_readability_score(sample)
        print("-" * 40)
        print(sample)
        print(f"Score: {score:.1f} ({level_for_score(score)}, {audience_for_score(score)})")


if __name__ == "__main__":
    main()
