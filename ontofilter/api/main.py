# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""FastAPI application for the ontology filter service."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from ontofilter import __version__
from ontofilter.errors import OntofilterError
from ontofilter.graph import Neo4jLoader
from ontofilter.models import AxiomType, Ontology, PrefixMap
from ontofilter.selection import FilterOptions, FilterPipeline

from .models import (
    AxiomListResponse,
    AxiomRecordResponse,
    CountsResponse,
    EntityResponse,
    FilterRequest,
    FilterResponse,
    StatsResponse,
)

logger = logging.getLogger(__name__)

# Global instances
_neo4j: Optional[Neo4jLoader] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    global _neo4j

    # Initialize on startup
    try:
        _neo4j = Neo4jLoader()
        counts = _neo4j.count_nodes()
        logger.info(f"Neo4j connected: {counts}")
    except Exception as e:
        logger.warning(f"Neo4j not available: {e}")
        _neo4j = None

    yield

    # Cleanup on shutdown
    if _neo4j:
        _neo4j.close()


app = FastAPI(
    title="Ontofilter API",
    description="Select axioms from ontology graphs with chained select clauses",
    version=__version__,
    lifespan=lifespan,
)

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Ontofilter API",
        "version": __version__,
        "description": "Select axioms from ontology graphs with chained select clauses",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/filter", response_model=FilterResponse)
async def filter_ontology(request: FilterRequest):
    """Filter an ontology document.

    Validation failures (unknown axiom types, select words, prefixes, or
    pattern annotations) are reported as 400 with the offending token.
    """
    try:
        prefixes = PrefixMap()
        prefixes.add_declarations(request.prefixes)
        ontology = Ontology.load_toml_string(request.ontology, prefixes=prefixes)

        options = FilterOptions(
            entities=request.entities,
            selects=request.selects,
            axioms=request.axioms,
            trim=request.trim,
            prefixes=request.prefixes,
            output_iri=request.output_iri,
        )
        result = FilterPipeline(options).run(ontology)
    except OntofilterError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return FilterResponse(
        ontology=result.to_toml(),
        input=CountsResponse(**ontology.count()),
        output=CountsResponse(**result.count()),
    )


@app.get("/stats", response_model=StatsResponse)
async def stats():
    """Get counts from the Neo4j export database."""
    if not _neo4j:
        raise HTTPException(status_code=503, detail="Neo4j not initialized")

    counts = _neo4j.count_nodes()
    return StatsResponse(
        entities=counts.get("entities", 0),
        axioms=counts.get("axioms", 0),
    )


@app.get("/entity", response_model=EntityResponse)
async def get_entity(id: str = Query(..., description="Entity IRI or blank node label")):
    """Get an exported entity."""
    if not _neo4j:
        raise HTTPException(status_code=503, detail="Neo4j not initialized")

    entity = _neo4j.get_entity(id)
    if not entity:
        raise HTTPException(status_code=404, detail=f"Entity {id} not found")

    return EntityResponse(**entity)


@app.get("/axioms", response_model=AxiomListResponse)
async def get_axioms(
    type: Optional[str] = Query(None, description="Axiom type, e.g. SubClassOf"),
    entity: Optional[str] = Query(None, description="Only axioms referencing this entity"),
):
    """List exported axioms by type, by referenced entity, or both."""
    if type is None and entity is None:
        raise HTTPException(status_code=400, detail="Give an axiom type or an entity")
    if type is not None and type not in AxiomType._value2member_map_:
        raise HTTPException(status_code=400, detail=f"{type} is not a valid axiom type")
    if not _neo4j:
        raise HTTPException(status_code=503, detail="Neo4j not initialized")

    if entity is not None:
        records = _neo4j.get_referencing_axioms(entity)
        if type is not None:
            records = [r for r in records if r.get("type") == type]
    else:
        records = _neo4j.get_axioms_by_type(type)

    axioms = [AxiomRecordResponse(**r) for r in records]
    return AxiomListResponse(axioms=axioms, count=len(axioms))


def run():
    """Run the API server."""
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
