"""
Declarative resource definitions for the /api/v1 namespace.

Each resource lists the attributes it exposes (name, semantic type and an
optional compute function) and the relationships it describes. The table is
built once at startup and is also what /debug/schema reports.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from fastapi import Request
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from . import query as q
from .errors import NotFound
from .models import Department, Employee
from .schemas import Document, ResourceObject
from .utils.types import MAX_STORE_INTEGER, AttributeType, ResourceType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attribute:
    name: str
    type: AttributeType
    compute: Optional[Callable[[Session, Any], Any]] = None

    @property
    def sortable(self) -> bool:
        # Only stored columns can be ordered by the store
        return self.compute is None

    def value(self, db: Session, obj) -> Any:
        if self.compute is not None:
            return self.compute(db, obj)
        return getattr(obj, self.name)


@dataclass(frozen=True)
class Relationship:
    name: str
    kind: str  # "has_many" or "belongs_to"
    related_type: ResourceType
    foreign_key: str


@dataclass
class Resource:
    type: ResourceType
    model: Any
    attributes: Tuple[Attribute, ...]
    relationships: Tuple[Relationship, ...] = ()
    default_page_size: int = 20
    max_page_size: int = 1000
    base_url: str = ""
    namespace: str = "/api/v1"
    _sortable: Tuple[str, ...] = field(init=False, default=())

    def __post_init__(self):
        self._sortable = tuple(a.name for a in self.attributes if a.sortable)

    @property
    def column_names(self) -> List[str]:
        return [a.name for a in self.attributes if a.compute is None]

    def url(self, path: str) -> str:
        return f"{self.base_url}{self.namespace}{path}"

    # ----------------------------
    # Serialization
    # ----------------------------
    def attributes_of(self, db: Session, obj) -> Dict[str, Any]:
        """Wire attributes of one row, without the id."""
        return {a.name: a.value(db, obj) for a in self.attributes if a.name != "id"}

    def _relationships_of(self, obj) -> Dict[str, Any]:
        out = {}
        for rel in self.relationships:
            out[rel.name] = {"meta": {"included": False}}
            # has_many gets no link: filter[] is not applied server-side
            if rel.kind == "belongs_to":
                fk = getattr(obj, rel.foreign_key)
                if fk is not None:
                    out[rel.name]["links"] = {"related": self.url(f"/{rel.related_type}/{fk}")}
        return out

    def serialize(self, db: Session, obj) -> ResourceObject:
        return ResourceObject(
            id=str(obj.id),
            type=self.type,
            attributes=self.attributes_of(db, obj),
            relationships=self._relationships_of(obj),
            links={"self": self.url(f"/{self.type}/{obj.id}")},
        )

    # ----------------------------
    # Reads
    # ----------------------------
    def list(self, db: Session, params: Mapping[str, str], self_link: Optional[str] = None) -> Document:
        lq = q.translate(params, self.default_page_size, self.max_page_size, self._sortable)
        rows = db.scalars(q.apply(select(self.model), self.model, lq)).all()
        total = db.scalar(select(func.count()).select_from(self.model))

        logger.debug("%s page %d size %d sort %s -> %d rows",
                     self.type, lq.page.number, lq.page.size, [str(k) for k in lq.sort], len(rows))
        return Document(
            data=[self.serialize(db, r) for r in rows],
            meta={"page": {"size": lq.page.size, "number": lq.page.number}, "total": total},
            links={"self": self_link or self.url(f"/{self.type}")},
        )

    def get(self, db: Session, resource_id) -> Any:
        try:
            pk = int(str(resource_id))
        except ValueError:
            raise NotFound(self.type, resource_id)
        # Ids the store can't represent can't exist
        if not 0 < pk <= MAX_STORE_INTEGER:
            raise NotFound(self.type, resource_id)
        obj = db.get(self.model, pk)
        if obj is None:
            raise NotFound(self.type, resource_id)
        return obj

    def find(self, db: Session, resource_id) -> Document:
        return Document(data=self.serialize(db, self.get(db, resource_id)))


# ----------------------------
# Computed attributes
# ----------------------------
def department_name_for(db: Session, employee: Employee) -> Optional[str]:
    """
    Name of the employee's department, or None when department_id does not
    resolve. Session.get hits the identity map, so each department is loaded
    at most once per request.
    """
    if employee.department_id is None:
        return None
    department = db.get(Department, employee.department_id)
    return department.name if department is not None else None


# ----------------------------
# Registry
# ----------------------------
def build_registry(settings: dict) -> Dict[str, Resource]:
    api = settings["api"]
    pagination = settings["pagination"]
    per_resource = pagination.get("resources") or {}

    def page_size(resource_type: str) -> int:
        return int(per_resource.get(resource_type, pagination["default_page_size"]))

    common = dict(
        max_page_size=int(pagination["max_page_size"]),
        base_url=api["base_url"].rstrip("/"),
        namespace=api["namespace"],
    )

    departments = Resource(
        type="departments",
        model=Department,
        attributes=(
            Attribute("id", "integer"),
            Attribute("name", "string"),
        ),
        relationships=(Relationship("employees", "has_many", "employees", "department_id"),),
        default_page_size=page_size("departments"),
        **common,
    )

    employees = Resource(
        type="employees",
        model=Employee,
        attributes=(
            Attribute("id", "integer"),
            Attribute("first_name", "string"),
            Attribute("last_name", "string"),
            Attribute("age", "integer"),
            Attribute("position", "string"),
            Attribute("department_id", "integer"),
            Attribute("department_name", "string", compute=department_name_for),
        ),
        relationships=(Relationship("department", "belongs_to", "departments", "department_id"),),
        default_page_size=page_size("employees"),
        **common,
    )

    registry = {r.type: r for r in (departments, employees)}
    logger.info("Registered resources: %s", ", ".join(
        f"{r.type} (page size {r.default_page_size})" for r in registry.values()))
    return registry


# ----------------------------
# FastAPI glue
# ----------------------------
JSONAPI_MEDIA_TYPE = "application/vnd.api+json"

def document_response(doc: Document, status_code: int = 200) -> JSONResponse:
    body = doc.model_dump()
    # null attribute values stay; only an empty top-level links block is dropped
    if not body["links"]:
        del body["links"]
    return JSONResponse(
        content=body,
        status_code=status_code,
        media_type=JSONAPI_MEDIA_TYPE,
    )

def resource_dependency(resource_type: ResourceType):
    """Dependency returning the registered resource of the given type."""
    def _get(request: Request) -> Resource:
        return request.app.state.resources[resource_type]
    return _get
