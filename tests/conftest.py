import pytest

from datetime import datetime
from decimal import Decimal
from pytz import UTC

from fieldvisit import models, log


@pytest.fixture
def start_date():
    return datetime(2017, 3, 15, 10, 30, 0)


@pytest.fixture
def start_date_utc():
    return datetime(2017, 3, 15, 10, 30, 0, tzinfo=UTC)


@pytest.fixture
def measurement(start_date):
    return models.create_from_grade(
        measurement_number="157",
        control_condition="Clear",
        discharge=Decimal("100"),
        discharge_units="ft^3/s",
        mean_gage_height_units="ft",
        grade=models.MeasurementGrade.GOOD,
        measurement_start_date=start_date,
        identifier="F7A3B2C4D5E6",
    )


@pytest.fixture
def measurement_with_gage_height(measurement):
    measurement.mean_gage_height = Decimal("10.0")
    return measurement


@pytest.fixture
def logger(tmpdir):
    return log.start_logger(True, False, log_path=str(tmpdir))
