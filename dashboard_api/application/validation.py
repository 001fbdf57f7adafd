"""
===============================================================================
SCHEMA VALIDATOR (Form schemas + generic validator)
===============================================================================

Name:
    Form validation

Business Goal:
    Turn a flat form (field name -> raw string, possibly missing) into either a
    typed record or a mapping field -> list of human-readable messages.

Why (Context):
    - Schemas are declarative pydantic models. Each schema carries a table of
      field -> user-facing message; any constraint failure on that field is
      reported with that message.
    - `validate_form` is total: malformed input is a normal failure outcome,
      it never raises and never touches storage.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    validation (module)

Responsibilities:
    - InvoiceForm: customerId, amount (> 0), status.
    - UserForm: firstname, lastname, profile, email, password.
    - validate_form(schema, form_data) -> FormValidation

Collaborators:
    - pydantic (BaseModel, ValidationError, PydanticCustomError)
    - domain.entities: InvoiceStatus, UserProfile
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar, Generic, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from ..domain.entities import (
    EMAIL_PATTERN,
    MIN_PASSWORD_LENGTH,
    InvoiceStatus,
    UserProfile,
)
from .form_state import FieldErrors

# Errors raised by our own coercion carry their own message.
_SELF_DESCRIBED_ERRORS: frozenset[str] = frozenset({"number_nan"})


class FormSchema(BaseModel):
    """Base for form schemas: fields are read by their form (alias) names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # form field name -> message reported for any failure of that field
    FIELD_MESSAGES: ClassVar[dict[str, str]] = {}

    @classmethod
    def form_fields(cls) -> list[str]:
        return [info.alias or name for name, info in cls.model_fields.items()]


class InvoiceForm(FormSchema):
    FIELD_MESSAGES: ClassVar[dict[str, str]] = {
        "customerId": "Please select a customer.",
        "amount": "Please enter an amount greater than $0.",
        "status": "Please select an invoice status.",
    }

    customer_id: str = Field(alias="customerId", min_length=1)
    amount: Decimal = Field(gt=0)
    status: InvoiceStatus

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> Decimal:
        # Missing or blank input coerces to 0 and then fails the > 0 rule.
        if value is None:
            return Decimal(0)
        if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
            raise PydanticCustomError("number_nan", "Expected number, received nan")

        text = str(value).strip()
        if not text:
            return Decimal(0)
        try:
            number = Decimal(text)
        except InvalidOperation:
            raise PydanticCustomError(
                "number_nan", "Expected number, received nan"
            ) from None
        if not number.is_finite():
            raise PydanticCustomError("number_nan", "Expected number, received nan")
        return number


class UserForm(FormSchema):
    FIELD_MESSAGES: ClassVar[dict[str, str]] = {
        "firstname": "Please enter a first name.",
        "lastname": "Please enter a last name.",
        "profile": "Please select a profile.",
        "email": "Please enter a valid email address.",
        "password": "Please enter a password of at least 6 characters.",
    }

    firstname: str = Field(min_length=1)
    lastname: str = Field(min_length=1)
    profile: UserProfile
    email: str = Field(min_length=1, pattern=EMAIL_PATTERN)
    password: str = Field(min_length=MIN_PASSWORD_LENGTH, repr=False)


S = TypeVar("S", bound=FormSchema)


@dataclass(frozen=True)
class FormValidation(Generic[S]):
    """
    Result of validate_form.

    Contract:
      - ok => data is the typed record, errors is empty
      - not ok => data is None, errors maps form field -> messages
    """

    data: S | None = None
    errors: FieldErrors = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.data is not None


def validate_form(schema: type[S], form_data: Mapping[str, Any]) -> FormValidation[S]:
    """Validate the schema's fields from `form_data`; absent fields are None."""
    raw = {name: form_data.get(name) for name in schema.form_fields()}
    try:
        return FormValidation(data=schema.model_validate(raw))
    except ValidationError as exc:
        return FormValidation(errors=_flatten_errors(schema, exc))


def _flatten_errors(schema: type[FormSchema], exc: ValidationError) -> FieldErrors:
    errors: FieldErrors = {}
    for err in exc.errors():
        loc = err.get("loc") or ("",)
        field_name = str(loc[0])
        if err.get("type") in _SELF_DESCRIBED_ERRORS:
            message = err["msg"]
        else:
            message = schema.FIELD_MESSAGES.get(field_name, err["msg"])

        messages = errors.setdefault(field_name, [])
        if message not in messages:
            messages.append(message)
    return errors
