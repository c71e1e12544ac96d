"""
FastAPI server for driving a local match without the keyboard.

Commands are not applied here: they are validated and placed on the frame
loop's queue, which drains them on its own thread before the next tick.
State reads go through MatchState.snapshot().

Usage:
    Started as a daemon thread from __main__.py with --api or --headless.

    Example requests:
        POST /command {"command": "aim_up"}
        POST /command {"command": "fire"}
        POST /restart
        GET  /state
        GET  /log?since_tick=100
"""
from queue import Queue
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from artillery.constants import MatchCommand, API_HOST, API_PORT

app = FastAPI(
    title="Artillery Duel API",
    description="Aim, fire and inspect a local artillery match via HTTP",
    version="1.0.0",
)

# Global references -- set by run_match_api()
_command_queue: Optional[Queue] = None
_match_state = None
_match_history = None


class MatchCommandRequest(BaseModel):
    """Request body for the command endpoint."""
    command: str

    class Config:
        json_schema_extra = {
            "examples": [
                {"command": "aim_up"},
                {"command": "power_up"},
                {"command": "fire"},
            ]
        }


class MatchCommandResponse(BaseModel):
    """Response from the command and restart endpoints."""
    status: str
    command: str


def _validate_command(raw: str) -> MatchCommand:
    try:
        return MatchCommand(raw.strip().lower())
    except ValueError:
        valid = [c.value for c in MatchCommand]
        raise HTTPException(
            status_code=400,
            detail=f"Invalid command '{raw}'. Valid commands: {valid}",
        )


def _require_queue() -> Queue:
    if _command_queue is None:
        raise HTTPException(status_code=503, detail="No match is running")
    return _command_queue


@app.get("/")
def root():
    """Health check endpoint with match status."""
    return {
        "status": "ok",
        "message": "Artillery Duel API is running",
        "match_active": _command_queue is not None,
        "hint": "Visit /docs for API documentation",
    }


@app.get("/state")
def get_state():
    """Return full match state snapshot."""
    if _match_state is None:
        raise HTTPException(status_code=503, detail="Match not initialized")
    return _match_state.snapshot()


@app.get("/log")
def get_log(since_tick: Optional[int] = None, limit: Optional[int] = 100):
    """Return commands and resolved shots.

    Query parameters:
    - since_tick: Only return entries at or after this tick (optional)
    - limit: Maximum number of entries to return (default: 100, max: 1000)
    """
    if _match_history is None:
        raise HTTPException(status_code=503, detail="History not initialized")

    if limit and limit > 1000:
        limit = 1000

    return _match_history.get_history(since_tick=since_tick, limit=limit)


@app.post("/command", response_model=MatchCommandResponse)
def send_command(request: MatchCommandRequest):
    """Queue an input for the active player."""
    queue = _require_queue()
    cmd = _validate_command(request.command)
    queue.put(cmd)
    return MatchCommandResponse(status="ok", command=cmd.value)


@app.post("/restart", response_model=MatchCommandResponse)
def restart_match():
    """Throw away the current match and start a fresh one."""
    queue = _require_queue()
    queue.put(MatchCommand.RESTART)
    return MatchCommandResponse(status="ok", command=MatchCommand.RESTART.value)


def attach(command_queue: Optional[Queue], match_state, match_history) -> None:
    """Point the endpoints at a running match."""
    global _command_queue, _match_state, _match_history
    _command_queue = command_queue
    _match_state = match_state
    _match_history = match_history


def run_match_api(
    command_queue: Queue,
    match_state,
    match_history,
    host: str = API_HOST,
    port: int = API_PORT,
):
    """Start the API server in the calling thread (blocks).

    Args:
        command_queue: Queue drained by the frame loop.
        match_state: Shared MatchState instance.
        match_history: Shared MatchHistory instance.
        host: Host to bind to.
        port: Port to listen on.
    """
    attach(command_queue, match_state, match_history)

    import uvicorn

    print("\n" + "=" * 70)
    print("Artillery Duel API Server")
    print("=" * 70)
    print(f"\nServer running at http://{host}:{port}")
    print(f"Interactive docs: http://localhost:{port}/docs")
    print("\nEndpoints:")
    print("  GET  /           - Health check")
    print("  GET  /state      - Full match state")
    print("  GET  /log        - Command & shot history")
    print("  POST /command    - Input for the active player")
    print("  POST /restart    - Start a new match")
    print(f"\nCommands: {', '.join(c.value for c in MatchCommand)}")
    print("\nExample:")
    print(f'  curl -X POST http://localhost:{port}/command \\')
    print('       -H "Content-Type: application/json" \\')
    print('       -d \'{"command": "fire"}\'')
    print("=" * 70 + "\n")

    uvicorn.run(app, host=host, port=port, log_level="info")
