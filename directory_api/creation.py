import json
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .errors import Conflict, EmptyBody, InvalidReference, PersistenceFailure, ValidationFailed
from .models import Department, Employee
from .schemas import EmployeeIn
from .utils.types import REQUIRED_EMPLOYEE_FIELDS
from .utils.validators import missing_fields

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Employee with the same first name, last name and department already exists."


def parse_body(raw: bytes) -> Dict[str, Any]:
    if raw is None or not raw.strip():
        raise EmptyBody()
    try:
        payload = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValidationFailed("Request body must be a JSON object.") from e
    if not isinstance(payload, dict):
        raise ValidationFailed("Request body must be a JSON object.")
    return payload


def resolve_department(db: Session, name) -> Optional[Department]:
    """Exact-name lookup of a department."""
    return db.scalars(select(Department).where(Department.name == str(name))).first()


def find_duplicate(db: Session, first_name, last_name, department_id: int) -> Optional[Employee]:
    # Non-string names can't match a stored row; the persist step rejects them
    if not (isinstance(first_name, str) and isinstance(last_name, str)):
        return None
    stmt = select(Employee).where(
        Employee.first_name == first_name,
        Employee.last_name == last_name,
        Employee.department_id == department_id,
    )
    return db.scalars(stmt).first()


def _error_messages(exc: ValidationError):
    return [
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    ]


def create_employee(db: Session, raw: bytes) -> Employee:
    """
    Runs the creation steps in order, stopping at the first failure:
    1) body present and a JSON object
    2) every required field present and non-empty
    3) department_id carries a department *name*; resolve it to an id
    4) no employee with the same (first_name, last_name, department_id)
    5) validate the row and insert it
    """
    payload = parse_body(raw)

    missing = missing_fields(payload, REQUIRED_EMPLOYEE_FIELDS)
    if missing:
        raise ValidationFailed.missing_fields(missing)

    department = resolve_department(db, payload["department_id"])
    if department is None:
        raise InvalidReference(payload["department_id"])

    row = {k: payload[k] for k in REQUIRED_EMPLOYEE_FIELDS}
    row["department_id"] = department.id

    if find_duplicate(db, row["first_name"], row["last_name"], department.id) is not None:
        raise Conflict(DUPLICATE_MESSAGE)

    try:
        data = EmployeeIn.model_validate(row)
    except ValidationError as e:
        raise PersistenceFailure(_error_messages(e)) from e

    employee = Employee(**data.model_dump())
    db.add(employee)
    try:
        db.commit()
    except IntegrityError as e:
        # A concurrent request inserted the same tuple after our check
        db.rollback()
        raise Conflict(DUPLICATE_MESSAGE) from e
    db.refresh(employee)

    logger.info("Created employee %d in department %d", employee.id, employee.department_id)
    return employee
