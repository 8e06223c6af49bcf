# commands/onboard.py
"""Register a new advocate in the roster file.

Validates the registration form, rejects registration numbers already in
the roster, and rewrites the roster atomically (temp file + os.replace).
"""

from __future__ import annotations

import json
import logging
import os

import config
from directory import load_advocates
from errors import (
    CollaboratorUnavailable,
    DuplicateRegistrationError,
    InputValidationError,
)
from models import AdvocateRecord
from parsers.date_parser import parse_date

log = logging.getLogger(__name__)


def validate_form(form: dict) -> AdvocateRecord:
    """Turn a registration form into an AdvocateRecord or raise InputValidationError."""
    values = {k: (v or "").strip() for k, v in form.items() if isinstance(v, str) or v is None}

    min_lengths = (
        ("name", "name", config.MIN_NAME_LENGTH),
        ("regNo", "reg_no", config.MIN_REG_NO_LENGTH),
        ("address", "address", config.MIN_ADDRESS_LENGTH),
    )
    for label, key, minimum in min_lengths:
        if len(values.get(key, "")) < minimum:
            raise InputValidationError(
                label, f"must be at least {minimum} characters"
            )
    if not values.get("district"):
        raise InputValidationError("district", "please select your district")
    if not values.get("area_of_practice"):
        raise InputValidationError("areaOfPractice", "please select your area of practice")

    try:
        appointed = parse_date(form.get("date_of_appointment"))
    except ValueError as exc:
        raise InputValidationError("dateOfAppointment", str(exc)) from exc
    try:
        valid_upto = parse_date(form.get("certificate_valid_upto"))
    except ValueError as exc:
        raise InputValidationError("certificateValidUpto", str(exc)) from exc
    if valid_upto <= appointed:
        raise InputValidationError(
            "certificateValidUpto", "must be after the date of appointment"
        )

    return AdvocateRecord(
        reg_no=values["reg_no"],
        name=values["name"],
        address=values["address"],
        area_of_practice=values["area_of_practice"],
        date_of_appointment=appointed,
        certificate_valid_upto=valid_upto,
        district=values["district"],
    )


def _write_roster(path: str, advocates: list[AdvocateRecord]) -> None:
    tmp_path = f"{path}.tmp"
    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump([a.to_dict() for a in advocates], f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, path)
    except OSError as exc:
        raise CollaboratorUnavailable("advocate roster", str(exc)) from exc


def run(form: dict, advocates_path: str | None = None) -> str:
    """Validate *form*, append the advocate to the roster and return the reg no.

    Args:
        form: Registration fields using snake_case keys (``reg_no``,
            ``name``, ``address``, ``district``, ``area_of_practice``,
            ``date_of_appointment``, ``certificate_valid_upto``).
        advocates_path: Roster JSON file (defaults to config.ADVOCATES_PATH).

    Raises:
        InputValidationError: If a form field is invalid.
        DuplicateRegistrationError: If the reg no is already registered.
        CollaboratorUnavailable: If the roster cannot be read or written.
    """
    advocate = validate_form(form)
    path = advocates_path or config.ADVOCATES_PATH

    advocates = load_advocates(path) if os.path.exists(path) else []
    if any(a.reg_no == advocate.reg_no for a in advocates):
        raise DuplicateRegistrationError(advocate.reg_no)

    advocates.append(advocate)
    _write_roster(path, advocates)
    log.info("Registered advocate %s (%s) in %s", advocate.reg_no, advocate.name, path)
    return advocate.reg_no
