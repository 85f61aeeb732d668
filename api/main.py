# api/main.py
"""
FastAPI backend for multibody-graph - exposes one editable graph session as a REST API.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from multibody_graph import ComponentKind, Graph, new_buffer
from multibody_graph.errors import GraphError, IdNotFound
from multibody_graph.kernel.mass_properties import MassPropertiesError
from multibody_graph.logging_config import setup_logging

logger = logging.getLogger("multibody_graph.api")

app = FastAPI(
    title="Multibody Graph API",
    description="Assemble multibody models and resolve them for a solver",
    version="0.1.0"
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.graph = Graph()


def get_graph() -> Graph:
    return app.state.graph


# =============================================================================
# Request/Response Models
# =============================================================================

class ComponentCreate(BaseModel):
    """A 'save' from a component form."""
    kind: ComponentKind
    buffer: Dict[str, Any] = Field(default_factory=dict, description="Form fields as typed")
    anchor: Tuple[float, float] = Field((0.0, 0.0), description="Drop position on the canvas")


class ComponentUpdate(BaseModel):
    buffer: Dict[str, Any] = Field(default_factory=dict)


class ConnectionCreate(BaseModel):
    from_id: UUID
    to_id: UUID


class ComponentData(BaseModel):
    """Component as seen by the UI."""
    component_id: UUID
    kind: ComponentKind
    name: str
    node_id: UUID
    anchor: Tuple[float, float]
    from_id: Optional[UUID] = None
    to_ids: List[UUID]
    system_id: Optional[int] = None
    fields: Dict[str, str]


class EdgeData(BaseModel):
    edge_id: UUID
    from_id: UUID
    to_id: UUID


class SystemResult(BaseModel):
    """Resolved multibody system."""
    n_bodies: int
    n_joints: int
    bodies: List[Dict[str, Any]]
    joints: List[Dict[str, Any]]
    state_vector: List[float]


def component_data(graph: Graph, component_id: UUID) -> ComponentData:
    component = graph.get(component_id)
    node = graph.node_for(component_id)
    buffer = graph.edit_buffer(component_id)
    return ComponentData(
        component_id=component_id,
        kind=component.kind,
        name=graph.get_name(component_id),
        node_id=node.node_id,
        anchor=node.anchor,
        from_id=component.from_id,
        to_ids=list(component.to_ids),
        system_id=component.system_id,
        fields=buffer.model_dump(exclude={'id', 'name'}),
    )


# =============================================================================
# Error mapping
# =============================================================================

@app.exception_handler(IdNotFound)
async def not_found_handler(request: Request, exc: IdNotFound):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(GraphError)
async def graph_error_handler(request: Request, exc: GraphError):
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


@app.exception_handler(MassPropertiesError)
async def mass_properties_handler(request: Request, exc: MassPropertiesError):
    return JSONResponse(
        status_code=400,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "Multibody Graph API"}


@app.get("/api/components", response_model=List[ComponentData])
async def list_components(graph: Graph = Depends(get_graph)):
    return [component_data(graph, cid) for cid in graph.components]


@app.post("/api/components", response_model=ComponentData, status_code=201)
async def create_component(request: ComponentCreate, graph: Graph = Depends(get_graph)):
    """Create a component from form fields."""
    buffer = new_buffer(request.kind, **request.buffer)
    component_id = graph.add_component(request.kind, buffer, request.anchor)
    return component_data(graph, component_id)


@app.put("/api/components/{component_id}", response_model=ComponentData)
async def update_component(component_id: UUID, request: ComponentUpdate,
                           graph: Graph = Depends(get_graph)):
    """Commit edited form fields onto an existing component."""
    kind = graph.get(component_id).kind
    graph.update_component(component_id, new_buffer(kind, **request.buffer))
    return component_data(graph, component_id)


@app.delete("/api/components/{component_id}", status_code=204)
async def delete_component(component_id: UUID, graph: Graph = Depends(get_graph)):
    graph.delete(component_id)


@app.post("/api/connections", response_model=EdgeData, status_code=201)
async def create_connection(request: ConnectionCreate, graph: Graph = Depends(get_graph)):
    edge_id = graph.connect(request.from_id, request.to_id)
    return EdgeData(edge_id=edge_id, from_id=request.from_id, to_id=request.to_id)


@app.get("/api/system", response_model=SystemResult)
async def get_system(graph: Graph = Depends(get_graph)):
    """Resolve the graph. Structural problems come back as 422."""
    system = graph.resolve()
    data = system.to_dict(graph.names)
    return SystemResult(
        n_bodies=system.n_bodies,
        n_joints=system.n_joints,
        bodies=data['bodies'],
        joints=data['joints'],
        state_vector=system.state_vector().tolist(),
    )


@app.post("/api/reset")
async def reset():
    """Start a fresh, empty graph."""
    app.state.graph = Graph()
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    setup_logging(logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=8000)
