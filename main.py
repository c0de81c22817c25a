# main.py
import logging
from typing import List

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from simulator.commands.interpreter import run_commands
from simulator.commands.scenarios import run_scenarios
from simulator.utils.consts import LOG_FORMAT, SERVER_HOST, SERVER_PORT

logger = logging.getLogger(__name__)

app = FastAPI(title="Toy Robot Simulator")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class CommandsInput(BaseModel):
    commands: List[str]
    # False drops ignored/rejected notices, keeping only REPORT lines
    verbose: bool = True

class CommandsOutput(BaseModel):
    output: List[str]
    text: str

class ScenarioOutput(BaseModel):
    name: str
    commands: List[str]
    expected: List[str]
    actual: List[str]
    passed: bool

class ScenariosOutput(BaseModel):
    results: List[ScenarioOutput]
    passed: int
    total: int


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.get("/status")
def health_check():
    return {"status": "ok", "message": "Robot simulator is running"}


@app.post("/commands", response_model=CommandsOutput)
def execute_commands(input_data: CommandsInput):
    """
    Run one batch of command lines on a fresh robot.

    The lines are passed through verbatim; the response holds the collected
    output lines, plus the same lines joined by newlines for display.
    """
    logger.info("Received %d commands", len(input_data.commands))
    try:
        output = run_commands(input_data.commands, verbose=input_data.verbose)
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Command run failed")
        raise HTTPException(status_code=500, detail=str(e))

    return {"output": output, "text": "\n".join(output)}


@app.get("/scenarios", response_model=ScenariosOutput)
def replay_scenarios():
    results = [r._asdict() for r in run_scenarios()]
    return {
        "results": results,
        "passed": sum(1 for r in results if r["passed"]),
        "total": len(results),
    }


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
