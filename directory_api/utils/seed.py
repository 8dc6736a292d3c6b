import csv
import io
import logging
import os
from typing import Dict, List

import requests
from pydantic import ValidationError
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..config import resolve_path
from ..models import Department, Employee
from ..schemas import DepartmentIn, EmployeeIn
from .types import EXPECTED_HEADERS

logger = logging.getLogger(__name__)

# ----------------------------
# IO Utilities
# ----------------------------
def _open_source(source: str) -> io.StringIO:
    if source.startswith(("http://", "https://")):
        r = requests.get(source, timeout=30)
        r.raise_for_status()
        return io.StringIO(r.text)
    path = resolve_path(source)
    if os.path.isfile(path):
        with open(path, "r", encoding="utf-8") as f:
            return io.StringIO(f.read())
    raise FileNotFoundError(f"Seed source not found: {source}")

def _clean_header(h: str) -> str:
    # Remove BOM, strip spaces, and lowercase
    return h.replace("\ufeff", "").strip().lower()

def _read_rows(content: str, table: str) -> List[Dict[str, str]]:
    reader = csv.DictReader(io.StringIO(content))
    if not reader.fieldnames:
        raise ValueError(f"Seed CSV for {table} is empty or missing headers.")

    headers = {h: _clean_header(h) for h in reader.fieldnames}
    missing = [c for c in EXPECTED_HEADERS[table] if c not in headers.values()]
    if missing:
        raise ValueError(f"Seed CSV headers missing {missing} for {table}. Got: {reader.fieldnames}")

    return [
        {headers[k]: (v or "").strip() for k, v in r.items() if k in headers}
        for r in reader
    ]

# ----------------------------
# Seeding
# ----------------------------
def seed_departments(db: Session, content: str) -> int:
    rows = _read_rows(content, "departments")
    for idx, r in enumerate(rows, start=2):  # start=2 because of header
        try:
            db.add(Department(**DepartmentIn(name=r["name"]).model_dump()))
        except ValidationError as e:
            raise ValueError(f"Error in departments row {idx}: {e}") from e
    db.flush()
    return len(rows)

def seed_employees(db: Session, content: str) -> int:
    rows = _read_rows(content, "employees")
    departments = {d.name: d.id for d in db.scalars(select(Department))}

    for idx, r in enumerate(rows, start=2):
        department_id = departments.get(r["department"])
        if department_id is None:
            raise ValueError(f"Error in employees row {idx}: unknown department {r['department']!r}")
        try:
            data = EmployeeIn(
                first_name=r["first_name"],
                last_name=r["last_name"],
                age=r["age"],
                position=r["position"],
                department_id=department_id,
            )
        except ValidationError as e:
            raise ValueError(f"Error in employees row {idx}: {e}") from e
        db.add(Employee(**data.model_dump()))
    db.flush()
    return len(rows)

def seed_store(db: Session, settings: dict) -> Dict[str, int]:
    """
    Transactional load of the seed CSVs into an empty store.
    A store that already holds departments is left untouched.
    """
    seed = settings["seed"]
    if not seed.get("enabled", False):
        logger.info("Seeding disabled")
        return {"departments": 0, "employees": 0}

    if db.scalar(select(func.count()).select_from(Department)):
        logger.info("Store already populated, skipping seed data")
        return {"departments": 0, "employees": 0}

    try:
        result = {
            "departments": seed_departments(db, _open_source(seed["departments"]).read()),
            "employees": seed_employees(db, _open_source(seed["employees"]).read()),
        }
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("Seeded %(departments)d departments and %(employees)d employees", result)
    return result
