from typing import Any, Dict, List, Union
from pydantic import BaseModel, Field, StrictStr

# Row accepted by the store for a new employee (after department resolution)
class EmployeeIn(BaseModel):
    first_name: StrictStr = Field(min_length=1, max_length=80)
    last_name: StrictStr = Field(min_length=1, max_length=80)
    age: int = Field(ge=0, le=150)
    position: StrictStr = Field(min_length=1, max_length=120)
    department_id: int

# Seed row for Department
class DepartmentIn(BaseModel):
    name: str = Field(min_length=1, max_length=120)

# Resource document (wire format of /api/v1)
class ResourceObject(BaseModel):
    id: str
    type: str
    attributes: Dict[str, Any]
    relationships: Dict[str, Any] = {}
    links: Dict[str, str] = {}
    meta: Dict[str, Any] = {}

class Document(BaseModel):
    data: Union[ResourceObject, List[ResourceObject]]
    meta: Dict[str, Any] = {}
    links: Dict[str, str] = {}
