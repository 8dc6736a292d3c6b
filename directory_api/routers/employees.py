from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from sqlalchemy.orm import Session
from ..creation import create_employee
from ..db import get_db
from ..resources import Resource, document_response, resource_dependency

router = APIRouter(tags=["employees"])

employees_resource = resource_dependency("employees")

@router.get("/employees")
def list_employees(
    request: Request,
    resource: Resource = Depends(employees_resource),
    db: Session = Depends(get_db),
):
    # page[size], page[number] and sort are read from the raw query string
    doc = resource.list(db, dict(request.query_params), self_link=str(request.url))
    return document_response(doc)

@router.get("/employees/{employee_id}")
def get_employee(
    employee_id: str,
    resource: Resource = Depends(employees_resource),
    db: Session = Depends(get_db),
):
    return document_response(resource.find(db, employee_id))

def _create(db: Session, raw: bytes, resource: Resource) -> dict:
    employee = create_employee(db, raw)
    return {"id": employee.id, **resource.attributes_of(db, employee)}

# Creation from JSON; department_id carries the department *name*
@router.post("/addEmployees", status_code=201)
async def add_employee(
    request: Request,
    resource: Resource = Depends(employees_resource),
    db: Session = Depends(get_db),
):
    raw = await request.body()
    # Store work stays off the event loop
    created = await run_in_threadpool(_create, db, raw, resource)
    return JSONResponse(status_code=201, content=created)
