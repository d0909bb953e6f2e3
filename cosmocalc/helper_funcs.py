"""
Module for quality of life helper functions which are not core to the calculations.
"""

from enum import Enum
import warnings

import numpy as np

from .constants import LARGE_REDSHIFT
from .exceptions import InvalidArgument


class ValidationType(Enum):
    """
    All the types of things we can validate
    """

    REDSHIFT = "redshift"
    AGE = "age"
    LOOKBACK_TIME = "lookback_time"
    DISTANCE = "distance"
    VOLUME = "volume"
    DENSITY = "density_parameter"
    HUBBLE_CONSTANT = "hubble_constant"


def validate(value: np.ndarray[float] | float, valid_type: ValidationType) -> None:
    """
    Validates the given input which can be either an array or a float.

    Only numeric hygiene is checked here. Physically odd but computable values
    (negative redshifts, non-flat densities) are left to the engine.
    """
    value = np.asarray(value)
    if not np.issubdtype(value.dtype, np.number) or np.issubdtype(value.dtype, np.complexfloating):
        raise TypeError(f"{valid_type.value} must be numeric.")
    if np.isnan(value).any():
        raise ValueError(f"{valid_type.value} contains NaNs.")
    if np.isinf(value).any():
        raise ValueError(f"{valid_type.value} contains infinite values.")

    match valid_type:
        case ValidationType.REDSHIFT:
            if np.any(value > LARGE_REDSHIFT):
                warnings.warn("Warning: redshifts are very large!")

        case ValidationType.DENSITY | ValidationType.HUBBLE_CONSTANT:
            if value.ndim != 0:
                raise TypeError(f"{valid_type.value} must be a scalar number.")

        case ValidationType.AGE | ValidationType.LOOKBACK_TIME | ValidationType.DISTANCE | ValidationType.VOLUME:
            if np.any(value < 0):
                raise InvalidArgument(f"{valid_type.value} cannot be negative.")

        case _:
            raise ValueError(
                f"Unknown property type: {valid_type.value}. Likely Enum needs updating."
            )
