from fastapi import APIRouter, Depends, Request
from sqlalchemy import select
from sqlalchemy.orm import Session
from ..db import get_db
from ..models import Department, Employee

# Introspection only, outside the /api/v1 namespace and its document format
router = APIRouter(prefix="/debug", tags=["debug"])

def _as_dict(obj, columns):
    return {c: getattr(obj, c) for c in columns}

@router.get("/data")
def dump_data(db: Session = Depends(get_db)):
    employee_columns = [c.key for c in Employee.__table__.columns]
    department_columns = [c.key for c in Department.__table__.columns]
    return {
        "employees": [_as_dict(e, employee_columns) for e in db.scalars(select(Employee).order_by(Employee.id))],
        "departments": [_as_dict(d, department_columns) for d in db.scalars(select(Department).order_by(Department.id))],
    }

@router.get("/schema")
def dump_schema(request: Request):
    # Served from the resource table, not from store introspection
    resources = request.app.state.resources
    return {
        "employee_columns": resources["employees"].column_names,
        "department_columns": resources["departments"].column_names,
    }
