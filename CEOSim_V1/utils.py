import json
from pathlib import Path
from typing import Iterable, Union

import numpy as np
from pydantic import BaseModel, RootModel


def load_and_validate(data_path: Path, model: Union[RootModel, BaseModel]) -> BaseModel:
    """
    Load and validate model data from data_path.
    Returns a validated model instance.
    """
    if not data_path.exists():
        raise FileNotFoundError(f"Parameter data file not found: {data_path}")

    with data_path.open("r", encoding="utf-8") as f:
        raw_data = json.load(f)
        return model.model_validate(raw_data)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def mean(values: Iterable[float]) -> float:
    vals = list(values)
    return float(np.mean(vals)) if vals else 0.0


def make_rng(rng: np.random.Generator | None = None) -> np.random.Generator:
    """Retourne le générateur fourni, ou un générateur neuf non seedé."""
    return rng if rng is not None else np.random.default_rng()
