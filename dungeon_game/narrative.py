"""Flavor text and riddles used by encounters."""

from typing import Sequence, Tuple

SCIENCE_OPENERS: Sequence[str] = (
    "Behold! The quantum entanglement paradox of hyper-space atoms!",
    "Ah, yes! The bifurcating nuclei of the plasmonic resonance are upon us!",
    "Aha! My flux capacitor is in perfect harmony with the neutrino wave!",
    "Did you know that photons can polarize to infinity under an antimatter ray?",
    "Ah, I've perfected the infinite vacuum instability of antimatter vortices!",
    "Behold my latest experiment! Transdimensional ionic bonding in action!",
)

# (question, answer) pairs. Answers are compared trimmed and case-insensitively.
RIDDLES: Sequence[Tuple[str, str]] = (
    ("What has to be broken before you can use it?", "egg"),
    ("I'm tall when I'm young, and I'm short when I'm old. What am I?", "candle"),
    ("What has hands but can't clap?", "clock"),
    ("What can you catch but not throw?", "cold"),
    ("What has a head, a tail, is brown, and has no legs?", "penny"),
    ("I'm light as a feather, yet the strongest man can't hold me for long. What am I?", "breath"),
    ("What comes down but never goes up?", "rain"),
    ("What has many keys but can't open a single lock?", "piano"),
    ("What has one eye but can't see?", "needle"),
    (
        "What has roots as nobody sees, is taller than trees, up, up it goes, "
        "and yet it never grows?",
        "mountain",
    ),
)
