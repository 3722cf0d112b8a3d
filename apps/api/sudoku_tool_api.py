# sudoku_tool_api.py
# FastAPI wrapper for the deduction tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import List, Dict, Optional

from deduction.errors import DeductionError
from deduction.sudoku_tools import (
    sanity_check, compute_candidates_tool, next_moves as _next_moves,
    apply_move as _apply_move, solve_tool, uniqueness_tool,
)

app = FastAPI(title="Sudoku Deduction Tool API")


@app.exception_handler(DeductionError)
async def deduction_error_handler(request: Request, exc: DeductionError):
    return JSONResponse(status_code=422, content={"error": type(exc).__name__, "detail": str(exc)})


class GridModel(BaseModel):
    grid: List[List[int]]

class SanityRequest(BaseModel):
    original: List[List[int]]
    current: List[List[int]]

class NextMovesRequest(BaseModel):
    current: List[List[int]]
    candidates: Optional[Dict[str, List[int]]] = None
    techniques: Optional[List[str]] = None
    max_moves: int = 3
    chain: bool = True

class MoveModel(BaseModel):
    type: str = "placement"
    digit: int
    cell: Optional[str] = None
    eliminate: List[str] = []

class ApplyMoveRequest(BaseModel):
    current: List[List[int]]
    move: MoveModel
    candidates: Optional[Dict[str, List[int]]] = None

class SolveRequest(BaseModel):
    current: List[List[int]]
    techniques: Optional[List[str]] = None
    check_uniqueness: bool = False
    max_steps: Optional[int] = None


@app.post("/sanity_check")
def api_sanity(payload: SanityRequest):
    return sanity_check(payload.original, payload.current)

@app.post("/compute_candidates")
def api_cands(payload: GridModel):
    return compute_candidates_tool(payload.grid)

@app.post("/next_moves")
def api_moves(req: NextMovesRequest):
    return _next_moves(req.current, req.candidates, req.techniques, req.max_moves, req.chain)

@app.post("/apply_move")
def api_apply(req: ApplyMoveRequest):
    return _apply_move(req.current, req.move.model_dump(), req.candidates)

@app.post("/solve")
def api_solve(req: SolveRequest):
    return solve_tool(req.current, req.techniques, req.check_uniqueness, req.max_steps)

@app.post("/unique")
def api_unique(payload: GridModel):
    return uniqueness_tool(payload.grid)
