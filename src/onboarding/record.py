"""
The onboarding record (DTO) carried across every wizard step.

The record is a frozen pydantic model: every change produces a new validated
copy, so a reference held by a pending callback never sees a half-updated
record. Attributes are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from src.onboarding.flow_definition import ClientType, StepName, sequence_for


class UnknownFieldError(KeyError):
    """Raised when an input event names a field the record does not declare."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown onboarding field '{self.name}'"


class RecordFieldError(ValueError):
    """Raised when a value cannot be coerced into the record.

    Attributes:
        field_errors: mapping of wire field name -> human-readable message.
    """

    def __init__(self, message: str, field_errors: Optional[Dict[str, str]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field_errors = field_errors or {}

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "RecordFieldError":
        field_errors: Dict[str, str] = {}
        for err in exc.errors():
            loc = err.get("loc") or ()
            name = str(loc[0]) if loc else "record"
            field_errors.setdefault(name, _describe_error(name, err))
        message = next(iter(field_errors.values()), "Invalid onboarding data")
        return cls(message, field_errors)


class FieldKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    LIST = "list"


class InputKind(str, Enum):
    """Kind tag carried by a UI field-change event."""

    CHECKBOX = "checkbox"
    NUMBER = "number"
    DATE = "date"
    TEXT = "text"


_NUMBER_FIELDS = (
    "vehicle_number_of_passengers",
    "vehicle_cylinder",
    "vehicle_fiscal_horsepower",
    "vehicle_value",
    "premium",
)
_DATE_FIELDS = (
    "birth_date",
    "license_issuance_date",
    "vehicle_start_date_of_circulation",
    "contract_start_date",
    "contract_end_date",
)
_STRING_FIELDS = (
    "acc_id",
    "first_name",
    "last_name",
    "phone_number",
    "email",
    "city",
    "national_id",
    "driver_license",
    "business_name",
    "register_of_commerce",
    "broker_account_id",
    "contact_id",
    "driver_first_name",
    "driver_last_name",
    "category_license",
    "vehicle_id",
    "vehicle_plate",
    "vehicle_body_type",
    "vehicle_brand",
    "vehicle_usage",
    "vehicle_make",
    "vehicle_model",
    "vehicle_fuel_type",
    "policy_id",
    "policy_name",
    "contract_id",
)


class OnboardingRecord(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    # Identity / progress
    client_type: Optional[ClientType] = None
    current_step_name: StepName = StepName.ACCOUNT

    # Account / driver
    acc_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    birth_date: Optional[date] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    city: Optional[str] = None
    national_id: Optional[str] = None
    driver_license: Optional[str] = None
    business_name: Optional[str] = None
    register_of_commerce: Optional[str] = None
    broker_account_id: Optional[str] = None
    contact_id: Optional[str] = None
    driver_first_name: Optional[str] = None
    driver_last_name: Optional[str] = None
    category_license: Optional[str] = None
    license_issuance_date: Optional[date] = None

    # Vehicle
    vehicle_id: Optional[str] = None
    vehicle_plate: Optional[str] = None
    vehicle_is_new: Optional[bool] = False
    vehicle_start_date_of_circulation: Optional[date] = None
    vehicle_body_type: Optional[str] = None
    vehicle_number_of_passengers: Optional[int] = None
    vehicle_brand: Optional[str] = None
    vehicle_cylinder: Optional[int] = None
    vehicle_fiscal_horsepower: Optional[int] = None
    vehicle_usage: Optional[str] = None
    vehicle_make: Optional[str] = None
    vehicle_model: Optional[str] = None
    vehicle_fuel_type: Optional[str] = None
    vehicle_trailer: Optional[bool] = False
    vehicle_value: Optional[float] = None

    # Policy / contract (ids, premium and dates are assigned by the step service)
    policy_id: Optional[str] = None
    policy_name: Optional[str] = None
    contract_id: Optional[str] = None
    premium: Optional[float] = None
    contract_period: Optional[Literal["6", "12", "24"]] = "12"
    contract_start_date: Optional[datetime] = None
    contract_end_date: Optional[datetime] = None

    # Coverages
    selected_coverage_ids: List[str] = Field(default_factory=list)
    coverage_premiums: Optional[Dict[str, float]] = None
    coverage_names: Optional[Dict[str, str]] = None

    @field_validator(*_NUMBER_FIELDS, *_DATE_FIELDS, mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator(*_STRING_FIELDS, mode="before")
    @classmethod
    def _number_to_str(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("client_type", mode="before")
    @classmethod
    def _blank_client_type(cls, value: Any) -> Any:
        return None if value == "" else value

    @field_validator("contract_period", mode="before")
    @classmethod
    def _period_to_str(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("selected_coverage_ids", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @model_validator(mode="after")
    def _step_belongs_to_flow(self) -> "OnboardingRecord":
        if self.current_step_name not in sequence_for(self.client_type):
            flow = (self.client_type or ClientType.PERSON).value
            raise ValueError(f"Step {self.current_step_name.value} is not part of the {flow} flow")
        return self

    # ------------------------------------------------------------------
    # Copy-on-write helpers
    # ------------------------------------------------------------------

    def with_changes(self, **changes: Any) -> "OnboardingRecord":
        """Return a validated copy carrying ``changes`` (wire or python names)."""
        data = self.model_dump(by_alias=True)
        for name, value in changes.items():
            data[resolve_field_name(name)] = value
        return self._revalidate(data)

    def merge(self, fragment: Mapping[str, Any]) -> "OnboardingRecord":
        """Overlay a server fragment; server values win.

        The step pointer is owned by the wizard, so a ``currentStepName`` in
        the fragment is ignored. Undeclared keys are kept on the record.
        """
        data = self.model_dump(by_alias=True)
        for name, value in fragment.items():
            key = _ALIASES.get(name, name)
            if key == "currentStepName":
                continue
            data[key] = value
        return self._revalidate(data)

    def to_wire(self) -> Dict[str, Any]:
        """JSON-compatible dict keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True)

    def _revalidate(self, data: Dict[str, Any]) -> "OnboardingRecord":
        try:
            return type(self).model_validate(data)
        except ValidationError as exc:
            raise RecordFieldError.from_validation_error(exc) from exc


# wire name and python name -> wire name
_ALIASES: Dict[str, str] = {}
for _name, _info in OnboardingRecord.model_fields.items():
    _alias = _info.alias or _name
    _ALIASES[_name] = _alias
    _ALIASES[_alias] = _alias

FIELD_KINDS: Dict[str, FieldKind] = {}
for _name in OnboardingRecord.model_fields:
    if _name in _NUMBER_FIELDS:
        _kind = FieldKind.NUMBER
    elif _name in _DATE_FIELDS:
        _kind = FieldKind.DATE
    elif _name in ("vehicle_is_new", "vehicle_trailer"):
        _kind = FieldKind.BOOLEAN
    elif _name == "selected_coverage_ids":
        _kind = FieldKind.LIST
    else:
        _kind = FieldKind.STRING
    FIELD_KINDS[_ALIASES[_name]] = _kind


def resolve_field_name(name: str) -> str:
    """Map a wire or python field name to its wire name."""
    try:
        return _ALIASES[name]
    except KeyError:
        raise UnknownFieldError(name) from None


def field_label(name: str) -> str:
    """'vehicleValue' -> 'Vehicle Value'."""
    return re.sub(r"(?<!^)(?=[A-Z])", " ", name).strip().title()


_TRUE_STRINGS = ("true", "1", "yes", "y", "on")


def coerce_input(raw_value: Any, input_kind: InputKind | str) -> Any:
    """Coerce a raw UI value according to the input control that produced it."""
    try:
        kind = InputKind(input_kind)
    except ValueError:
        kind = InputKind.TEXT
    if kind is InputKind.CHECKBOX:
        if isinstance(raw_value, bool):
            return raw_value
        return str(raw_value or "").strip().lower() in _TRUE_STRINGS
    if kind in (InputKind.NUMBER, InputKind.DATE):
        return None if raw_value == "" else raw_value
    return raw_value


def _describe_error(name: str, err: Dict[str, Any]) -> str:
    label = field_label(name) if name in _ALIASES else "Onboarding data"
    err_type = str(err.get("type", ""))
    if err_type.startswith(("int_", "float_", "decimal_")):
        return f"{label} must be a number"
    if err_type.startswith(("date_", "datetime_")):
        return f"{label} must be a valid date (YYYY-MM-DD)"
    if err_type.startswith("bool_"):
        return f"{label} must be true/false"
    if err_type in ("literal_error", "enum"):
        return f"{label} has an invalid value"
    msg = str(err.get("msg", "is not valid"))
    return msg.removeprefix("Value error, ") if err_type == "value_error" else f"{label}: {msg}"
