# schemavec/config.py

"""
Configuration for the schemavec embedding engine.

Values come either from keyword arguments or from the environment (a .env
file is loaded with python-dotenv). Everything is validated when an
EmbeddingConfig is constructed, so a bad setting fails before any vector
is generated.

Environment variables:

    SCHEMAVEC_EMBEDDING_SIZE      vector length (default 3072)
    SCHEMAVEC_GENERATOR_WEIGHTS   "enhanced=1,primary_key=0.5,..."
    SCHEMAVEC_REMOVE_STOP_WORDS   1 / true / yes to enable
    SCHEMAVEC_WINDOW_DECAY        Enhanced sliding-window decay (default 0.5)
    SCHEMAVEC_WINDOW_RADIUS       Enhanced sliding-window radius (default 1)
"""

import math
import os
from typing import Dict, Mapping, Optional

from dotenv import load_dotenv

from schemavec.errors import ConfigurationError
from schemavec.types import WeightTable

DEFAULT_EMBEDDING_SIZE = 3072

EXTRACTOR_NAMES = ("enhanced", "primary_key", "foreign_key")

# "learned" only contributes when a LearnedEmbeddingAdapter is supplied.
GENERATOR_NAMES = EXTRACTOR_NAMES + ("learned",)

DEFAULT_GENERATOR_WEIGHTS: Dict[str, float] = {
    "enhanced": 1.0,
    "primary_key": 1.0,
    "foreign_key": 1.0,
}

WEIGHT_TABLE_KEYS = tuple(WeightTable.__annotations__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _check_weight(label: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{label} must be a number, got {value!r}.")
    if not math.isfinite(value) or value < 0:
        raise ConfigurationError(f"{label} must be a finite, non-negative number, got {value!r}.")
    return float(value)


def parse_generator_weights(raw: str) -> Dict[str, float]:
    """
    Parse "name=weight,name=weight" into a mapping.

    Raises ConfigurationError on malformed pairs or non-numeric weights.
    """
    weights: Dict[str, float] = {}
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        name, sep, value = pair.partition("=")
        if not sep:
            raise ConfigurationError(f"Generator weight {pair!r} is not of the form name=weight.")
        try:
            weights[name.strip()] = float(value)
        except ValueError:
            raise ConfigurationError(f"Generator weight for {name.strip()!r} is not a number: {value!r}.")
    return weights


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {raw!r}.")


class EmbeddingConfig:
    """
    Validated settings shared by every generator and the combiner.

    Parameters
    ----------
    embedding_size : int
        Length of every generated vector.
    generator_weights : Mapping[str, float], optional
        Combiner weights keyed by generator name. Generators left out get
        weight 0 and are excluded from the combined vector.
    weight_overrides : Mapping[str, Mapping[str, float]], optional
        Per-variant replacements for entries of the default weight tables,
        e.g. ``{"primary_key": {"entity": 4.0}}``.
    remove_stop_words : bool
        Drop a small fixed list of English stop words after tokenizing.
    window_decay : float
        Share of a weight the Enhanced variant spreads to each neighbor
        slot, in (0, 1].
    window_radius : int
        Number of neighbor slots on each side the Enhanced variant spreads to.
    """

    def __init__(
        self,
        embedding_size: int = DEFAULT_EMBEDDING_SIZE,
        generator_weights: Optional[Mapping[str, float]] = None,
        weight_overrides: Optional[Mapping[str, Mapping[str, float]]] = None,
        remove_stop_words: bool = False,
        window_decay: float = 0.5,
        window_radius: int = 1,
    ) -> None:
        if isinstance(embedding_size, bool) or not isinstance(embedding_size, int) or embedding_size <= 0:
            raise ConfigurationError(f"embedding_size must be a positive integer, got {embedding_size!r}.")
        self.embedding_size = embedding_size

        if generator_weights is None:
            generator_weights = DEFAULT_GENERATOR_WEIGHTS
        self.generator_weights: Dict[str, float] = {}
        for name, weight in generator_weights.items():
            if name not in GENERATOR_NAMES:
                raise ConfigurationError(
                    f"Unknown generator {name!r}. Known generators: {', '.join(GENERATOR_NAMES)}."
                )
            self.generator_weights[name] = _check_weight(f"Weight for generator {name!r}", weight)

        self.weight_overrides: Dict[str, Dict[str, float]] = {}
        for variant, overrides in (weight_overrides or {}).items():
            if variant not in EXTRACTOR_NAMES:
                raise ConfigurationError(
                    f"Weight overrides given for unknown variant {variant!r}. "
                    f"Known variants: {', '.join(EXTRACTOR_NAMES)}."
                )
            checked: Dict[str, float] = {}
            for key, value in overrides.items():
                if key not in WEIGHT_TABLE_KEYS:
                    raise ConfigurationError(f"Unknown weight {key!r} in overrides for {variant!r}.")
                checked[key] = _check_weight(f"{variant}.{key}", value)
            self.weight_overrides[variant] = checked

        self.remove_stop_words = bool(remove_stop_words)

        decay = _check_weight("window_decay", window_decay)
        if decay == 0 or decay > 1:
            raise ConfigurationError(f"window_decay must be in (0, 1], got {window_decay!r}.")
        self.window_decay = decay

        if isinstance(window_radius, bool) or not isinstance(window_radius, int) or window_radius < 0:
            raise ConfigurationError(f"window_radius must be a non-negative integer, got {window_radius!r}.")
        self.window_radius = window_radius

    # ------------------------------------------------------------------
    # Weight table resolution
    # ------------------------------------------------------------------
    def weights_for(self, variant: str, defaults: WeightTable) -> WeightTable:
        """Return ``defaults`` with this config's overrides for ``variant`` applied."""
        table = dict(defaults)
        table.update(self.weight_overrides.get(variant, {}))
        return WeightTable(**table)  # type: ignore[typeddict-item]

    # ------------------------------------------------------------------
    # Environment loading
    # ------------------------------------------------------------------
    @classmethod
    def from_env(cls) -> "EmbeddingConfig":
        """Build a config from SCHEMAVEC_* environment variables (.env aware)."""
        load_dotenv()

        raw_size = os.getenv("SCHEMAVEC_EMBEDDING_SIZE")
        try:
            embedding_size = int(raw_size) if raw_size else DEFAULT_EMBEDDING_SIZE
        except ValueError:
            raise ConfigurationError(f"SCHEMAVEC_EMBEDDING_SIZE must be an integer, got {raw_size!r}.")

        raw_weights = os.getenv("SCHEMAVEC_GENERATOR_WEIGHTS")
        generator_weights = parse_generator_weights(raw_weights) if raw_weights else None

        remove_stop_words = _parse_bool(
            "SCHEMAVEC_REMOVE_STOP_WORDS", os.getenv("SCHEMAVEC_REMOVE_STOP_WORDS", "")
        )

        raw_decay = os.getenv("SCHEMAVEC_WINDOW_DECAY")
        raw_radius = os.getenv("SCHEMAVEC_WINDOW_RADIUS")
        try:
            window_decay = float(raw_decay) if raw_decay else 0.5
            window_radius = int(raw_radius) if raw_radius else 1
        except ValueError:
            raise ConfigurationError("SCHEMAVEC_WINDOW_DECAY / SCHEMAVEC_WINDOW_RADIUS must be numeric.")

        return cls(
            embedding_size=embedding_size,
            generator_weights=generator_weights,
            remove_stop_words=remove_stop_words,
            window_decay=window_decay,
            window_radius=window_radius,
        )
