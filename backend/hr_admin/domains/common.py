"""Pydantic building blocks shared by the record schemas."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Annotated, Any, ClassVar, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

TWO_PLACES = Decimal("0.01")


def quantize_money(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_decimal(value: Any) -> Decimal:
    """Accept numbers or numeric strings; reject anything else."""
    if isinstance(value, bool):
        raise ValueError("must be a number")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError("must be a number") from None
    if not amount.is_finite():
        raise ValueError("must be a finite number")
    return quantize_money(amount)


def _money(value: Any) -> Decimal:
    if _is_blank(value):
        raise ValueError("is required")
    return parse_decimal(value)


def _money_or_zero(value: Any) -> Decimal:
    if _is_blank(value):
        return Decimal("0.00")
    return parse_decimal(value)


def _money_or_none(value: Any) -> Optional[Decimal]:
    if _is_blank(value):
        return None
    return parse_decimal(value)


def _text_or_none(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


Money = Annotated[Decimal, BeforeValidator(_money)]
MoneyOrZero = Annotated[Decimal, BeforeValidator(_money_or_zero)]
OptionalMoney = Annotated[Optional[Decimal], BeforeValidator(_money_or_none)]
OptionalText = Annotated[Optional[str], BeforeValidator(_text_or_none)]


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


class PatchModel(CamelModel):
    """Partial update body: every field optional, required columns not nullable."""

    non_nullable: ClassVar[frozenset[str]] = frozenset()

    @field_validator("*")
    @classmethod
    def reject_null_required(cls, value: Any, info: ValidationInfo) -> Any:
        # Runs only on values the caller sent
        if value is None and info.field_name in cls.non_nullable:
            raise ValueError(f"{to_camel(info.field_name)} cannot be null")
        return value

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
