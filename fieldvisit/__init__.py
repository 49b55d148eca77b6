"""fieldvisit: field visit measurements with grade-based discharge errors and gage height shifts"""
import os
__version__ = "0.1.0"

__home__ = os.getenv("FIELDVISIT_HOME")

if not __home__:
    __home__ = os.path.join(os.path.expanduser("~"), ".fieldvisit")

from .errors import InvalidStateError
from .models import (
    FieldVisitMeasurement,
    MeasurementGrade,
    ShiftBoundaries,
    apply_shifts,
    create_from_grade,
    grade_from_name,
    percentage,
)
