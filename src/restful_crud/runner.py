"""
Sequential scenario runner
Orders steps by priority, awaits each to completion and records per-step results
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from restful_crud.exceptions import MissingFixtureStateError
from restful_crud.fixtures import FixtureContext
from restful_crud.ordering import PriorityOrderer, PriorityRegistry
from restful_crud.scenario import Step

logger = logging.getLogger(__name__)


@dataclass
class StepResult:
    """Outcome of one step"""
    name: str
    priority: int
    duration: float = 0.0
    error: Optional[Exception] = None
    skipped: bool = False

    @property
    def passed(self) -> bool:
        return not self.skipped and self.error is None

    @property
    def outcome(self) -> str:
        if self.skipped:
            return "skipped"
        if self.error is None:
            return "passed"
        if isinstance(self.error, MissingFixtureStateError):
            return "precondition-failed"
        if isinstance(self.error, AssertionError):
            return "failed"
        return "error"


@dataclass
class RunReport:
    """Results from one ordered run"""
    run_id: str
    results: List[StepResult] = field(default_factory=list)
    total_duration: float = 0.0

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    @property
    def failures(self) -> List[StepResult]:
        return [result for result in self.results if result.error is not None]

    @property
    def order(self) -> List[str]:
        return [result.name for result in self.results]


class ScenarioRunner:
    """Runs steps one at a time in priority order with a fresh FixtureContext per run"""

    def __init__(self, steps: Iterable[Step], registry: PriorityRegistry, stop_on_failure: bool = False):
        self.steps = list(steps)
        self.registry = registry
        self.orderer = PriorityOrderer(registry)
        self.stop_on_failure = stop_on_failure

    async def run(self) -> RunReport:
        context = FixtureContext()
        report = RunReport(run_id=context.run_id)
        run_start = time.monotonic()
        aborted = False

        try:
            for step in self.orderer.iter_ordered(self.steps):
                result = StepResult(name=step.__name__, priority=self.registry.read_priority(step))
                report.results.append(result)

                if aborted:
                    result.skipped = True
                    logger.info(f"[run {context.run_id}] {result.name}: skipped after earlier failure")
                    continue

                start_time = time.monotonic()
                try:
                    await step(context)
                except Exception as e:
                    result.error = e
                    logger.warning(f"[run {context.run_id}] {result.name}: {type(e).__name__}: {e}")
                    aborted = self.stop_on_failure
                finally:
                    result.duration = time.monotonic() - start_time

                if result.passed:
                    logger.info(f"[run {context.run_id}] {result.name}: passed ({result.duration:.2f}s)")
        finally:
            report.total_duration = time.monotonic() - run_start
            context.reset()

        return report
