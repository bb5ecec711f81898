# src/minisem/CompilerServer.py
import os
import logging
from typing import Any, Dict, List, Literal, Optional, Tuple

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from minisem.semantic.analyzer import AnalysisResult, SemanticAnalyzer
from minisem.tree_schema import NodeModel

logging.basicConfig(level=os.environ.get("MINISEM_LOG_LEVEL", "INFO").upper())
log = logging.getLogger(__name__)

app = FastAPI()


class InputTree(BaseModel):
    tree: NodeModel

class OutputMetrics(BaseModel):
    result: str
    metrics: Optional[Dict[str, int]] = None
    errors: List[str] = []

class Errors(BaseModel):
    code: str
    message: str
    severity: Literal["error", "warning"]

class Diagnostics(BaseModel):
    diagnostics: List[Errors]

class Symbols(BaseModel):
    symbols: List[Dict[str, Any]]


def _run(payload: InputTree) -> Tuple[SemanticAnalyzer, AnalysisResult]:
    analyzer = SemanticAnalyzer()
    try:
        result = analyzer.analyze(payload.tree.to_node())
    except ValueError as e:
        # malformed tree, not a semantic error
        raise HTTPException(status_code=422, detail=str(e))
    return analyzer, result


@app.get("/")
def root():
    return {"message": "Hello from minisem semantic analysis service!"}


@app.post("/analyze", response_model=OutputMetrics)
def analyze(payload: InputTree):
    _, result = _run(payload)
    if not result.ok:
        return OutputMetrics(result="== ERRORS ==", errors=result.errors)
    return OutputMetrics(result=result.metrics.format(), metrics=result.metrics.as_dict())


@app.post("/diagnostics", response_model=Diagnostics)
def diagnostics(payload: InputTree):
    _, result = _run(payload)
    diags = []
    if result.error is not None:
        diags.append(Errors(code=result.error.code, message=result.error.message, severity="error"))
    return Diagnostics(diagnostics=diags)


@app.post("/symbols", response_model=Symbols)
def symbols(payload: InputTree):
    analyzer, result = _run(payload)
    if not result.ok:
        raise HTTPException(status_code=400, detail=result.errors[0])
    return Symbols(symbols=analyzer.table.serialize())
