# src/activity_importer/activities.py

import logging
import math
import re
from datetime import date as Date
from datetime import datetime as DateTime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import ActivityValidationError, Status

logger = logging.getLogger(__name__)

_ISIN = re.compile(r"^[A-Z]{2}[A-Z0-9]{9}[0-9]$")
_WKN = re.compile(r"^[A-Z0-9]{6}$")


class ActivityType(str, Enum):
    BUY = "Buy"
    SELL = "Sell"
    DIVIDEND = "Dividend"
    TRANSFER_IN = "TransferIn"
    TRANSFER_OUT = "TransferOut"
    TAX_REFUND = "TaxRefund"
    PAYOUT = "Payout"
    INTEREST = "Interest"
    CASHGAIN = "Cashgain"


# These refer to a security and must carry at least one identifier.
SECURITY_TYPES = frozenset(
    {
        ActivityType.BUY,
        ActivityType.SELL,
        ActivityType.DIVIDEND,
        ActivityType.TRANSFER_IN,
        ActivityType.TRANSFER_OUT,
    }
)


class Activity(BaseModel):
    """One normalized financial event extracted from a statement."""

    broker: str
    type: ActivityType
    date: Date
    datetime: DateTime | None = None
    isin: str | None = None
    wkn: str | None = None
    symbol: str | None = None
    company: str | None = None
    shares: float | None = Field(default=None, gt=0)
    price: float | None = Field(default=None, gt=0)
    amount: float | None = Field(default=None, gt=0)
    fee: float = 0.0
    tax: float = 0.0
    fx_rate: float | None = Field(default=None, gt=0)
    foreign_currency: str | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("isin")
    @classmethod
    def check_isin(cls, v: str | None) -> str | None:
        if v is not None and not _ISIN.match(v):
            raise ValueError(f"invalid ISIN: {v}")
        return v

    @field_validator("wkn")
    @classmethod
    def check_wkn(cls, v: str | None) -> str | None:
        if v is not None and not _WKN.match(v):
            raise ValueError(f"invalid WKN: {v}")
        return v

    @field_validator("fee", "tax")
    @classmethod
    def check_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("must be a finite number")
        return v

    @field_validator("date")
    @classmethod
    def check_not_future(cls, v: Date) -> Date:
        if v > Date.today():
            raise ValueError(f"date {v.isoformat()} lies in the future")
        return v

    @model_validator(mode="after")
    def check_identifier(self) -> "Activity":
        if self.type in SECURITY_TYPES and not (self.isin or self.wkn or self.symbol):
            raise ValueError(
                f"{self.type.value} activity requires one of isin, wkn or symbol"
            )
        return self


def validate_activity(data: dict[str, Any], *, strict: bool = False) -> Activity | None:
    """Build an `Activity` from raw implementation output.

    Returns `None` when validation fails so the slot stays in the activity
    sequence as a hole, which later discards the whole document. With
    `strict=True` the failure is raised as `ActivityValidationError` instead.
    """
    try:
        return Activity(**data)
    except ValidationError as e:
        if strict:
            raise ActivityValidationError(
                f"Activity failed validation: {e.error_count()} error(s)",
                data,
                Status.PARSER_ERROR,
            ) from e
        logger.warning("Discarding invalid activity: %s", e)
        return None
