"""
Tiny helper script to eyeball how a message degrades as comprehension drops.
"""

from __future__ import annotations

from comprehension_mask import compute_marking_stats, mark_untranslated_words


def main() -> None:
    message = "Greetings, traveler! The road north isn't safe after dark."

    for comprehension in (1.0, 0.75, 0.5, 0.25, 0.0):
        stats = compute_marking_stats(message, comprehension)
        print("-" * 40)
        print(f"Comprehension: {comprehension:.2f}")
        print(mark_untranslated_words(message, comprehension))
        print(f"Unintelligible: {stats.unintelligible_count}/{stats.word_count}")


if __name__ == "__main__":
    main()
