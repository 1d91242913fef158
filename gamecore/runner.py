"""Grading runner that executes the oracle checks and aggregates a report."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from time import perf_counter
from typing import Any, Callable

from .errors import GradingError
from .game import ChutesAndLaddersGame, RockPaperScissorsGame
from .grader import CHUTES_LOGIC_CHECK, RPS_LOGIC_CHECK, RPS_STRING_CHECK, Grader
from .serialize import json_dumps

CHECK_ORDER: tuple[str, ...] = (RPS_LOGIC_CHECK, RPS_STRING_CHECK, CHUTES_LOGIC_CHECK)


@dataclass(frozen=True)
class RunnerConfig:
    """Runtime configuration for a grading run."""

    stop_on_failure: bool = False
    report_path: str | Path | None = None


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one grader check."""

    name: str
    passed: bool
    skipped: bool = False
    message: str | None = None
    error: dict[str, Any] | None = None
    duration_ms: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "passed": self.passed,
            "skipped": self.skipped,
            "message": self.message,
            "error": self.error,
            "duration_ms": round(self.duration_ms, 3),
        }


@dataclass(frozen=True)
class GradeReport:
    """All check results from one grading run, in execution order."""

    checks: list[CheckResult] = field(default_factory=list)
    implementations: dict[str, str] = field(default_factory=dict)

    @property
    def failures(self) -> list[CheckResult]:
        return [check for check in self.checks if not check.passed and not check.skipped]

    @property
    def passed(self) -> bool:
        """True when at least one check ran and none failed."""
        ran = [check for check in self.checks if not check.skipped]
        return bool(ran) and not self.failures

    def result_for(self, name: str) -> CheckResult | None:
        for check in self.checks:
            if check.name == name:
                return check
        return None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable report."""
        return {
            "passed": self.passed,
            "implementations": dict(self.implementations),
            "checks": [check.to_dict() for check in self.checks],
            "failure_count": len(self.failures),
        }


class GradingRunner:
    """Runs the grader checks in fixed order and records each outcome.

    The grader raises on the first violation inside a check; the runner is
    the caller that decides whether to continue with the remaining checks.
    """

    def __init__(self, config: RunnerConfig | None = None):
        self.config = config or RunnerConfig()

    def run(
        self,
        *,
        rps_game: RockPaperScissorsGame | None = None,
        chutes_game: ChutesAndLaddersGame | None = None,
        rps_output: str | None = None,
    ) -> GradeReport:
        """Grade whichever inputs were supplied and return the report."""
        planned: dict[str, Callable[[], None] | None] = {
            RPS_LOGIC_CHECK: (lambda: Grader.verify_rps_logic(rps_game)) if rps_game is not None else None,
            RPS_STRING_CHECK: (lambda: Grader.verify_rps_string(rps_output)) if rps_output is not None else None,
            CHUTES_LOGIC_CHECK: (lambda: Grader.verify_chutes_logic(chutes_game)) if chutes_game is not None else None,
        }

        results: list[CheckResult] = []
        stopped = False
        for name in CHECK_ORDER:
            check = planned[name]
            if check is None:
                results.append(CheckResult(name=name, passed=False, skipped=True, message="No input supplied."))
                continue
            if stopped:
                results.append(CheckResult(name=name, passed=False, skipped=True, message="Stopped after failure."))
                continue

            result = self._run_check(name, check)
            results.append(result)
            if not result.passed and self.config.stop_on_failure:
                stopped = True

        implementations: dict[str, str] = {}
        if rps_game is not None:
            implementations["rps"] = _describe_impl(rps_game)
        if chutes_game is not None:
            implementations["chutes"] = _describe_impl(chutes_game)

        report = GradeReport(checks=results, implementations=implementations)
        if self.config.report_path is not None:
            self._write_report(Path(self.config.report_path), report)
        return report

    def _run_check(self, name: str, check: Callable[[], None]) -> CheckResult:
        start = perf_counter()
        try:
            check()
        except GradingError as exc:
            return CheckResult(
                name=name,
                passed=False,
                message=str(exc),
                error=exc.to_dict(),
                duration_ms=(perf_counter() - start) * 1000.0,
            )
        except Exception as exc:
            # Crash inside the implementation under test.
            return CheckResult(
                name=name,
                passed=False,
                message=f"Implementation raised {type(exc).__name__}: {exc}",
                error={"type": type(exc).__name__, "message": str(exc), "check": name},
                duration_ms=(perf_counter() - start) * 1000.0,
            )
        return CheckResult(name=name, passed=True, duration_ms=(perf_counter() - start) * 1000.0)

    def _write_report(self, path: Path, report: GradeReport) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json_dumps(report.to_dict(), indent=2), encoding="utf-8")


def _describe_impl(game: Any) -> str:
    cls = type(game)
    return f"{cls.__module__}:{cls.__qualname__}"
