"""Development tasks: python scripts.py {tests,lint,typecheck,format,coverage,check}."""

import argparse
import subprocess
from typing import Dict, List

TASKS: Dict[str, List[List[str]]] = {
    "tests": [["pytest", "src", "tests"]],
    "lint": [["flake8", "--max-line-length", "120", "src", "tests"]],
    "typecheck": [["mypy", "src"]],
    "format": [["black", "src", "tests"]],
    "coverage": [["pytest", "--cov=pfp", "--cov-report=xml", "src", "tests"]],
}
TASKS["check"] = TASKS["lint"] + TASKS["typecheck"] + TASKS["tests"]


def run(task: str) -> None:
    for command in TASKS[task]:
        subprocess.run(command, check=True)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("task", choices=sorted(TASKS))
    run(parser.parse_args().task)
