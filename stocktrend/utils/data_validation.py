# stocktrend/utils/data_validation.py

import pandas as pd
import numpy as np
from typing import List, Dict, Any, Optional
from enum import Enum
from dataclasses import dataclass, field
import logging

from stocktrend.price_series import PriceSeries

logger = logging.getLogger(__name__)


class ValidationSeverity(Enum):
    """Severity levels for validation errors."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationError:
    """
    Structured validation error.

    Attributes:
        rule: Validation rule that failed (e.g., 'negative_close')
        severity: ValidationSeverity enum
        bar_index: Position of the problematic close in the series
        message: Human-readable description
        date: Date key of the problematic close (if available)
        details: Additional context (dict)
    """
    rule: str
    severity: ValidationSeverity
    bar_index: int
    message: str
    date: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self):
        return (
            f"ValidationError(rule='{self.rule}', severity={self.severity.value}, "
            f"bar_index={self.bar_index}, message='{self.message}')"
        )


class PriceSeriesValidator:
    """
    Daily close data quality validator.

    Validates date keys (parseable, chronological, unique) and close values
    (finite, non-negative, non-zero). Calendar gaps from non-trading days are
    accepted as-is and not reported.

    Args:
        strictness: 'warn' (log warnings) or 'error' (raise exception)

    Usage:
        validator = PriceSeriesValidator(strictness='warn')
        errors = validator.validate(series)
        if errors:
            print(f"Found {len(errors)} data quality issues")
    """

    STRICTNESS_LEVELS = ('warn', 'error')

    def __init__(self, strictness: str = 'warn'):
        if strictness not in self.STRICTNESS_LEVELS:
            raise ValueError(
                f"strictness must be one of {self.STRICTNESS_LEVELS}, got '{strictness}'"
            )
        self.strictness = strictness

    def validate(self, series: PriceSeries) -> List[ValidationError]:
        """
        Run all validation checks on a price series.

        Args:
            series: PriceSeries to check

        Returns:
            List of ValidationError objects (empty if all checks pass)

        Raises:
            ValueError: With strictness 'error', if any ERROR-level issue is found.
        """
        df = series.to_frame()
        errors = []

        errors.extend(self._validate_dates(df))
        errors.extend(self._validate_closes(df))

        if errors:
            self._log_errors(errors)
            if self.strictness == 'error' and any(e.severity == ValidationSeverity.ERROR for e in errors):
                critical_count = sum(1 for e in errors if e.severity == ValidationSeverity.ERROR)
                raise ValueError(f"Critical data quality errors: {critical_count} issues found")

        return errors

    def _validate_dates(self, df: pd.DataFrame) -> List[ValidationError]:
        """Validate date keys parse and increase strictly."""
        errors = []
        if df.empty:
            return errors

        parsed = pd.to_datetime(df['date'], errors='coerce', format='mixed')

        invalid = parsed.isna()
        if invalid.any():
            for idx in df[invalid].index:
                errors.append(ValidationError(
                    rule='invalid_date',
                    severity=ValidationSeverity.ERROR,
                    bar_index=int(idx),
                    date=df.loc[idx, 'date'],
                    message=f"Unparseable date at index {idx}: '{df.loc[idx, 'date']}'"
                ))
            # Ordering checks are meaningless with holes in the dates
            return errors

        # Lexical order of the keys differs from calendar order for non-ISO dates
        if not parsed.is_monotonic_increasing:
            errors.append(ValidationError(
                rule='non_monotonic_timestamps',
                severity=ValidationSeverity.ERROR,
                bar_index=0,
                message="Dates are not in chronological order after sorting"
            ))

        duplicates = parsed.duplicated()
        if duplicates.any():
            first = duplicates[duplicates].index[0]
            errors.append(ValidationError(
                rule='duplicate_timestamps',
                severity=ValidationSeverity.ERROR,
                bar_index=int(first),
                date=df.loc[first, 'date'],
                message=f"Duplicate dates: {int(duplicates.sum())} duplicates"
            ))

        return errors

    def _validate_closes(self, df: pd.DataFrame) -> List[ValidationError]:
        """Validate close price ranges."""
        errors = []
        closes = df['close'].astype(float)

        # Check: no NaN or infinite closes
        non_finite = ~np.isfinite(closes)
        if non_finite.any():
            first = closes[non_finite].index[0]
            errors.append(ValidationError(
                rule='non_finite_close',
                severity=ValidationSeverity.ERROR,
                bar_index=int(first),
                date=df.loc[first, 'date'],
                message=f"Non-finite close prices: {int(non_finite.sum())} bars",
                details={'close': closes[first]}
            ))

        # Check: no negative prices
        negative = closes < 0
        if negative.any():
            first = closes[negative].index[0]
            errors.append(ValidationError(
                rule='negative_close',
                severity=ValidationSeverity.ERROR,
                bar_index=int(first),
                date=df.loc[first, 'date'],
                message=f"Negative close prices: {int(negative.sum())} bars"
            ))

        # Check: zero closes (suspicious but not critical)
        zero_close = closes == 0
        if zero_close.any():
            first = closes[zero_close].index[0]
            errors.append(ValidationError(
                rule='zero_close',
                severity=ValidationSeverity.WARNING,
                bar_index=int(first),
                date=df.loc[first, 'date'],
                message=f"Zero close prices: {int(zero_close.sum())} bars (suspicious)"
            ))

        return errors

    def _log_errors(self, errors: List[ValidationError]) -> None:
        """Log validation errors."""
        logger.warning(f"Data validation found {len(errors)} issues:")
        for error in errors:
            if error.severity == ValidationSeverity.ERROR:
                logger.error(f"  {error}")
            else:
                logger.warning(f"  {error}")
