# storefront/domain/validation.py
import re
from typing import Any, Mapping

from storefront.domain.schemas import OrderForm

REQUIRED_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "address1",
    "city",
    "state",
    "zip",
    "country",
    "card_name",
    "card_number",
    "exp",
    "cvc",
)

EMAIL_RE = re.compile(r"^\S+@\S+\.\S+$")
EXPIRY_RE = re.compile(r"^(0?[1-9]|1[0-2])/\d{2}$")
NON_DIGITS_RE = re.compile(r"\D")


def _digits_only(value: str) -> str:
    return NON_DIGITS_RE.sub("", value or "")


def _as_dict(form: OrderForm | Mapping[str, Any]) -> dict[str, str]:
    if isinstance(form, OrderForm):
        data = form.model_dump()
    else:
        data = dict(form)
    return {key: "" if value is None else str(value) for key, value in data.items()}


def validate_order_form(form: OrderForm | Mapping[str, Any]) -> dict[str, str]:
    """
    Check the checkout form and return a mapping of field name to message.

    An empty mapping means the form can be submitted. Format checks only run
    on non-blank fields and their message replaces "Required".
    """
    data = _as_dict(form)
    errors: dict[str, str] = {}

    for key in REQUIRED_FIELDS:
        if not data.get(key, "").strip():
            errors[key] = "Required"

    email = data.get("email", "")
    if email.strip() and not EMAIL_RE.match(email):
        errors["email"] = "Invalid email"

    card_number = data.get("card_number", "")
    if card_number.strip():
        digits = _digits_only(card_number)
        if not 12 <= len(digits) <= 19:
            errors["card_number"] = "Card number looks wrong"

    exp = data.get("exp", "")
    if exp.strip() and not EXPIRY_RE.match(exp.strip()):
        errors["exp"] = "Use MM/YY"

    cvc = data.get("cvc", "")
    if cvc.strip():
        digits = _digits_only(cvc)
        if not 3 <= len(digits) <= 4:
            errors["cvc"] = "3-4 digits"

    return errors
