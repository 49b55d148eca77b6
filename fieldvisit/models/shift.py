from decimal import Decimal
from typing import Optional, Sequence
from pydantic import BaseModel


class ShiftBoundaries(BaseModel):
    """
    Gage height boundary readings from which the shifts of a measurement are derived. Each value is a gage height;
    the shift is the difference with the mean gage height of the measurement.
    """
    error_max: Optional[Decimal] = None  # boundary for error_max_shift_in_feet
    shift: Optional[Decimal] = None  # boundary for shift_in_feet
    error_min: Optional[Decimal] = None  # boundary for error_min_shift_in_feet

    @classmethod
    def from_sequence(cls, values: Sequence[Optional[Decimal]]) -> "ShiftBoundaries":
        """
        Build boundaries from a positional sequence ordered as (error_max, shift, error_min)

        Parameters
        ----------
        values : sequence of Decimal or None
            up to three boundary readings. Missing positions and None entries remain unset, entries beyond the third
            are ignored.

        Returns
        -------
        ShiftBoundaries
        """
        names = ["error_max", "shift", "error_min"]
        return cls(**dict(zip(names, values)))
