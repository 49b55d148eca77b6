from .grade import MeasurementGrade, PERCENTAGE_OF_ERROR, percentage, grade_from_name
from .shift import ShiftBoundaries
from .measurement import FieldVisitMeasurement, create_from_grade, apply_shifts
from .config import Settings
