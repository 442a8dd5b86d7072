"""One-click example inputs, one per relationship label."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ExamplePair:
    kind: str
    icon: str
    query: str
    description: str


EXAMPLES: Tuple[ExamplePair, ...] = (
    ExamplePair(
        kind="Exact",
        icon="✅",
        query="iPhone 15 Pro",
        description=(
            "Apple iPhone 15 Pro, 256GB, Natural Titanium. Features a 6.1-inch "
            "Super Retina XDR display, A17 Pro chip, and pro-grade camera system."
        ),
    ),
    ExamplePair(
        kind="Substitute",
        icon="🔄",
        query="sony noise cancelling headphones",
        description=(
            "Bose QuietComfort Ultra Wireless Noise Cancelling Headphones, "
            "Bluetooth, Over-Ear with immersive audio."
        ),
    ),
    ExamplePair(
        kind="Complement",
        icon="➕",
        query="airpods",
        description=(
            "Estuche de Carga Inalámbrica con Botón de Sincronización Compatible "
            "con AirPods 1 y 2 Reemplazo con Emparejamiento Bluetooth (Air Pods no "
            "Incluidas), Cubierta Protectora para Auriculares (Blanco)  Lopnord"
        ),
    ),
    ExamplePair(
        kind="Irrelevant",
        icon="❌",
        query="noise cancelling headphones",
        description=(
            "Nike Air Max running shoes for men, comfortable and stylish for "
            "everyday athletic wear."
        ),
    ),
)


def find_example(kind: str) -> ExamplePair:
    """Look up an example by kind, case-insensitively."""
    wanted = kind.strip().lower()
    for example in EXAMPLES:
        if example.kind.lower() == wanted:
            return example
    raise KeyError(f"Unknown example kind: {kind}")
