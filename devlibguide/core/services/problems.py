"""
Practice ground — problem lookup and simulated solution validation.

Submitted code is never executed.  Each test case passes with a fixed
probability drawn from an injectable random source, and timing / memory
figures are fabricated in plausible ranges.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from devlibguide.core.models import Problem

logger = logging.getLogger(__name__)

PASS_PROBABILITY = 0.7

EMBED_PATH = "/practice-embed/"


@dataclass
class CaseResult:
    """Outcome of one simulated test case."""

    passed: bool
    message: str
    input: str
    expected_output: str
    hidden: bool = False

    def to_dict(self) -> dict:
        return {
            "passed": self.passed,
            "message": self.message,
            "input": self.input,
            "expected_output": self.expected_output,
            "hidden": self.hidden,
        }


@dataclass
class ValidationReport:
    """All case results plus simulated performance metrics."""

    results: list[CaseResult] = field(default_factory=list)
    execution_time: int = 0      # ms
    memory_used: int = 0         # KB

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def all_passed(self) -> bool:
        return bool(self.results) and self.passed == len(self.results)

    def to_dict(self) -> dict:
        return {
            "results": [r.to_dict() for r in self.results],
            "metrics": {
                "execution_time": self.execution_time,
                "memory_used": self.memory_used,
            },
        }


def list_problems(problems: list[Problem]) -> list[dict]:
    return [p.summary() for p in problems]


def get_problem(problems: list[Problem], problem_id: str) -> Problem | None:
    for problem in problems:
        if problem.id == problem_id:
            return problem
    return None


def validate_solution(
    problem: Problem,
    code: str,
    language: str,
    rng: random.Random | None = None,
) -> ValidationReport:
    """Simulate running ``code`` against every test case of ``problem``.

    Raises:
        ValueError: If ``code`` or ``language`` is empty.
    """
    if not code or not language:
        raise ValueError("Missing code or language parameter")

    rng = rng or random.Random()
    report = ValidationReport()
    for case in problem.test_cases:
        passed = rng.random() < PASS_PROBABILITY
        report.results.append(CaseResult(
            passed=passed,
            message="Test passed!" if passed else f"Expected {case.output} but got different result",
            input=case.input,
            expected_output=case.output,
            hidden=case.hidden,
        ))

    report.execution_time = rng.randint(1, 100)
    report.memory_used = rng.randint(500, 2500)

    logger.info(
        "Simulated %s solution for '%s': %d/%d passed",
        language, problem.id, report.passed, len(report.results),
    )
    return report


def embed_info(problems: list[Problem], base_url: str) -> dict:
    """Instructions for embedding a problem in another page."""
    base_url = base_url.rstrip("/")
    return {
        "base_url": base_url,
        "embed_instructions": "To embed a problem, use the following HTML code:",
        "embed_code": (
            f'<iframe src="{base_url}{EMBED_PATH}PROBLEM_ID" '
            'width="100%" height="600px" frameborder="0"></iframe>'
        ),
        "available_problems": [{"id": p.id, "title": p.title} for p in problems],
    }
