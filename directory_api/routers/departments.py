from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from ..db import get_db
from ..resources import Resource, document_response, resource_dependency

router = APIRouter(prefix="/departments", tags=["departments"])

departments_resource = resource_dependency("departments")

@router.get("")
def list_departments(
    request: Request,
    resource: Resource = Depends(departments_resource),
    db: Session = Depends(get_db),
):
    doc = resource.list(db, dict(request.query_params), self_link=str(request.url))
    return document_response(doc)

@router.get("/{department_id}")
def get_department(
    department_id: str,
    resource: Resource = Depends(departments_resource),
    db: Session = Depends(get_db),
):
    return document_response(resource.find(db, department_id))
