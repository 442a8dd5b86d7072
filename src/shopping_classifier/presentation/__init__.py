from .resolver import (  # noqa: F401
    CONFIDENCE_LEGEND,
    DESCRIPTORS,
    FALLBACK_DESCRIPTOR,
    KNOWN_LABELS,
    LegendBand,
    PresentationDescriptor,
    display_label,
    format_confidence,
    resolve,
)

__all__ = [
    "CONFIDENCE_LEGEND",
    "DESCRIPTORS",
    "FALLBACK_DESCRIPTOR",
    "KNOWN_LABELS",
    "LegendBand",
    "PresentationDescriptor",
    "display_label",
    "format_confidence",
    "resolve",
]
