from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, computed_field

from .. import log
from ..errors import InvalidStateError
from ..temporal import print_temporal
from .grade import MeasurementGrade, grade_from_name, percentage
from .shift import ShiftBoundaries

logger = log.get_logger(__name__)


class FieldVisitMeasurement(BaseModel):
    """
    A single discharge and gage height observation recorded during a field visit.

    Discharge, error bounds, grade, identifiers and start date are fixed when the record is created. Gage height
    related fields, flags and shifts are filled in later by the report pipeline; those that are not yet known are None.
    """
    model_config = ConfigDict(validate_assignment=True)

    identifier: str = Field(frozen=True)
    measurement_number: str = Field(frozen=True)
    control_condition: Optional[str] = Field(default=None, frozen=True)
    measurement_start_date: datetime = Field(frozen=True)
    # discharge
    discharge: Decimal = Field(frozen=True)
    discharge_units: Optional[str] = Field(default=None, frozen=True)
    error_max_discharge: Decimal = Field(frozen=True)
    error_min_discharge: Decimal = Field(frozen=True)
    quality_rating: MeasurementGrade = Field(frozen=True)
    # gage height and shift, set after creation
    rating_model_identifier: Optional[str] = None
    mean_gage_height: Optional[Decimal] = None
    mean_gage_height_units: Optional[str] = None
    shift_in_feet: Optional[Decimal] = None
    error_min_shift_in_feet: Optional[Decimal] = None
    error_max_shift_in_feet: Optional[Decimal] = None
    shift_number: int = 0
    historic: bool = False
    publish: bool = False

    @computed_field
    @property
    def measurement_start_date_string(self) -> str:
        return print_temporal(self.measurement_start_date)

    def get_measurement_start_date_string(self) -> str:
        """ISO 8601 formatted date and time when this measurement started."""
        return self.measurement_start_date_string

    def get_output_values(self) -> Tuple[Decimal, Decimal, Decimal]:
        """Single row containing error_max_discharge, discharge and error_min_discharge, in that order."""
        return self.error_max_discharge, self.discharge, self.error_min_discharge

    def calculate_shifts(self, boundary_values, logger=logger):
        """Compute the shifts of this measurement, see ``apply_shifts``."""
        return apply_shifts(self, boundary_values, logger=logger)

    def to_json(self, indent=0):
        """
        Write measurement to fully serializable json format

        Parameters
        ----------
        indent : int
            indentation of json string

        Returns
        -------
        str
        """
        return self.model_dump_json(indent=indent)

    def __str__(self):
        return "FieldVisitMeasurement {}: {} {} ({})".format(
            self.measurement_number,
            self.discharge,
            self.discharge_units,
            self.quality_rating.value
        )


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # go through the text representation to avoid binary rounding artifacts
        return Decimal(str(value))
    return Decimal(value)


def create_from_grade(
    measurement_number: str,
    control_condition: Optional[str],
    discharge: Union[Decimal, int, float, str],
    discharge_units: Optional[str],
    mean_gage_height_units: Optional[str],
    grade: Union[MeasurementGrade, str, None],
    measurement_start_date: datetime,
    identifier: str,
    logger=logger,
) -> FieldVisitMeasurement:
    """
    Create a measurement whose discharge error bounds follow from its quality grade.

    The error bounds are ``discharge +/- discharge * percentage(grade)``, computed in decimal arithmetic.

    Parameters
    ----------
    measurement_number : str
        the actual measurement number
    control_condition : str
        the control condition related to this measurement
    discharge : Decimal
        the measured discharge
    discharge_units : str
        units of the discharge
    mean_gage_height_units : str
        units of the mean gage height
    grade : MeasurementGrade or str
        quality grade of the measurement. Labels are resolved with ``grade_from_name``, so unknown labels become POOR.
    measurement_start_date : datetime
        date and time when the measurement started
    identifier : str
        unique identifier of the field visit measurement
    logger : logging.Logger, optional
        logger used to report unrecognized grade labels

    Returns
    -------
    FieldVisitMeasurement
    """
    grade = grade_from_name(grade, logger=logger)
    discharge = _to_decimal(discharge)
    error = discharge * percentage(grade)
    return FieldVisitMeasurement(
        identifier=identifier,
        measurement_number=measurement_number,
        control_condition=control_condition,
        measurement_start_date=measurement_start_date,
        discharge=discharge,
        discharge_units=discharge_units,
        mean_gage_height_units=mean_gage_height_units,
        error_max_discharge=discharge + error,
        error_min_discharge=discharge - error,
        quality_rating=grade,
    )


def apply_shifts(
    record: FieldVisitMeasurement,
    boundary_values: Union[ShiftBoundaries, Sequence[Optional[Decimal]]],
    logger=logger,
) -> FieldVisitMeasurement:
    """
    Calculate the shifts of a measurement from gage height boundary readings and its mean gage height.

    A positional sequence is read as (error_max, shift, error_min):

    - position 0 sets ``error_max_shift_in_feet``
    - position 1 sets ``shift_in_feet``
    - position 2 sets ``error_min_shift_in_feet``

    Missing positions and None values leave the corresponding shift untouched. A ShiftBoundaries instance can be
    passed instead to name the values explicitly.

    Parameters
    ----------
    record : FieldVisitMeasurement
        measurement to update in place, its mean gage height must be set
    boundary_values : ShiftBoundaries or sequence of Decimal
        boundary gage height readings
    logger : logging.Logger, optional

    Returns
    -------
    FieldVisitMeasurement
        the same, updated, record

    Raises
    ------
    InvalidStateError
        if the mean gage height of the record is not set
    """
    if record.mean_gage_height is None:
        raise InvalidStateError("mean_gage_height", operation="calculating shifts")
    if not isinstance(boundary_values, ShiftBoundaries):
        boundary_values = ShiftBoundaries.from_sequence(boundary_values)
    mean = record.mean_gage_height
    if boundary_values.error_max is not None:
        record.error_max_shift_in_feet = boundary_values.error_max - mean
    if boundary_values.shift is not None:
        record.shift_in_feet = boundary_values.shift - mean
    if boundary_values.error_min is not None:
        record.error_min_shift_in_feet = boundary_values.error_min - mean
    logger.debug(f"Shifts calculated for measurement {record.measurement_number}")
    return record
