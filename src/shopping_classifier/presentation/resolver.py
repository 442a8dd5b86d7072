"""Static presentation metadata for relationship labels.

Color classes are Streamlit markdown color names so a descriptor can be
rendered directly as ``:{color}[text]``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class PresentationDescriptor:
    icon: str
    color: str
    interpretation: str


@dataclass(frozen=True)
class LegendBand:
    name: str
    range_text: str
    color: str


DESCRIPTORS: Mapping[str, PresentationDescriptor] = MappingProxyType(
    {
        "exact": PresentationDescriptor(
            icon="✅",
            color="green",
            interpretation=(
                "The product matches the search query exactly. "
                "This is a perfect match for what the user is looking for."
            ),
        ),
        "substitute": PresentationDescriptor(
            icon="🔄",
            color="orange",
            interpretation=(
                "The product could serve as an alternative to what was searched. "
                "It fulfills similar needs or functions."
            ),
        ),
        "complement": PresentationDescriptor(
            icon="➕",
            color="violet",
            interpretation=(
                "The product complements what was searched for. "
                "It would work well together with the searched item."
            ),
        ),
        "irrelevant": PresentationDescriptor(
            icon="❌",
            color="red",
            interpretation=(
                "The product is not related to the search query. "
                "There is no meaningful connection between them."
            ),
        ),
    }
)

FALLBACK_DESCRIPTOR = PresentationDescriptor(
    icon="❓",
    color="gray",
    interpretation="Unknown relationship type detected.",
)

KNOWN_LABELS: Tuple[str, ...] = tuple(DESCRIPTORS)

# Reference text only; not derived from any particular result.
CONFIDENCE_LEGEND: Tuple[LegendBand, ...] = (
    LegendBand("High", "80-100%", "green"),
    LegendBand("Medium", "60-79%", "orange"),
    LegendBand("Low", "Below 60%", "red"),
)


def resolve(label: str) -> PresentationDescriptor:
    """Return the descriptor for *label* (case-insensitive), never raising."""
    if not isinstance(label, str):
        return FALLBACK_DESCRIPTOR
    return DESCRIPTORS.get(label.lower(), FALLBACK_DESCRIPTOR)


def display_label(label: str) -> str:
    """``"exact"`` → ``"Exact Match"``; only first letters are changed."""
    words = [w[:1].upper() + w[1:] for w in str(label).split()]
    return " ".join(words + ["Match"])


def format_confidence(confidence: float) -> str:
    """Scale to a percentage with one decimal, unclamped: 0.94 → ``"94.0%"``.

    Ties round up, so 0.1225 gives ``"12.3%"``.
    """
    scaled = confidence * 100
    if not math.isfinite(scaled):
        return f"{scaled}%"
    return f"{Decimal(scaled).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)}%"
