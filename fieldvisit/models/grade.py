"""Measurement quality grades and their discharge error percentages."""
import enum

from decimal import Decimal

from .. import log


class MeasurementGrade(str, enum.Enum):
    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"


# fraction of the discharge used as symmetric error on both sides
PERCENTAGE_OF_ERROR = {
    MeasurementGrade.EXCELLENT: Decimal("0.0200"),
    MeasurementGrade.GOOD: Decimal("0.0500"),
    MeasurementGrade.FAIR: Decimal("0.0800"),
    MeasurementGrade.POOR: Decimal("0.100"),
}


def percentage(grade: MeasurementGrade) -> Decimal:
    """Fraction of the discharge that forms the error envelope of a given grade."""
    return PERCENTAGE_OF_ERROR[MeasurementGrade(grade)]


logger = log.get_logger(__name__)


def grade_from_name(name, logger=logger) -> MeasurementGrade:
    """
    Resolve a textual grade label to a MeasurementGrade. This never fails.

    Matching is exact and case-sensitive on the labels EXCELLENT, GOOD, FAIR and POOR. Any other value, including
    None, an empty string or a differently cased label, resolves to POOR. Note that this fallback widens the discharge
    error envelope to the POOR percentage for every unrecognized label, so a warning is logged whenever it happens.

    Parameters
    ----------
    name : str
        grade label as delivered by the measurement source system
    logger : logging.Logger, optional
        logger used to report unrecognized labels

    Returns
    -------
    MeasurementGrade
    """
    if isinstance(name, MeasurementGrade):
        return name
    try:
        return MeasurementGrade[name]
    except (KeyError, TypeError):
        # default missing or unknown grades to POOR
        logger.warning(f"Measurement grade {name!r} not recognized, falling back to {MeasurementGrade.POOR.value}")
        return MeasurementGrade.POOR
