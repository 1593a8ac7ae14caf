"""Batch sweep: recompute status for many subjects on a bounded worker pool.

One subject's stay history is the unit of work. Workers share nothing; each builds and drops
its own presence set, so memory stays bounded by the largest single history.
"""
import logging
import os
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from typing import Callable, Mapping, Sequence

from pydantic import BaseModel, Field

from staywindow.config import get_settings
from staywindow.errors import ComplianceError
from staywindow.schemas.engine import EngineConfig
from staywindow.schemas.stay import Stay
from staywindow.schemas.status import DailyStatus, ForecastResult
from staywindow.services.compliance import status_on
from staywindow.services.forecast import forecast_upcoming

log = logging.getLogger(__name__)


class SweepResult(BaseModel):
    statuses: dict[str, DailyStatus] = Field(default_factory=dict)
    errors: dict[str, str] = Field(default_factory=dict)


class ForecastSweepResult(BaseModel):
    forecasts: dict[str, list[ForecastResult]] = Field(default_factory=dict)
    errors: dict[str, str] = Field(default_factory=dict)


def _status_task(subject_id: str, stays: Sequence[Stay], config: EngineConfig):
    try:
        return subject_id, status_on(stays, config), None
    except ComplianceError as e:
        return subject_id, None, str(e)


def _forecast_task(subject_id: str, stays: Sequence[Stay], config: EngineConfig):
    try:
        return subject_id, forecast_upcoming(stays, config), None
    except ComplianceError as e:
        return subject_id, None, str(e)


def _make_executor(max_workers: int | None, use_processes: bool | None) -> Executor:
    settings = get_settings()
    workers = max_workers or settings.batch_max_workers or os.cpu_count() or 1
    processes = settings.batch_use_processes if use_processes is None else use_processes
    pool = ProcessPoolExecutor if processes else ThreadPoolExecutor
    return pool(max_workers=workers)


def _run(
    task: Callable,
    subjects: Mapping[str, Sequence[Stay]],
    config: EngineConfig,
    max_workers: int | None,
    use_processes: bool | None,
) -> tuple[dict, dict[str, str]]:
    results: dict = {}
    errors: dict[str, str] = {}
    if not subjects:
        return results, errors
    with _make_executor(max_workers, use_processes) as executor:
        futures = [executor.submit(task, sid, list(stays), config) for sid, stays in subjects.items()]
        for future in as_completed(futures):
            subject_id, value, error = future.result()
            if error is not None:
                log.warning("Subject %s rejected: %s", subject_id, error)
                errors[subject_id] = error
            else:
                results[subject_id] = value
    return results, errors


def sweep_statuses(
    subjects: Mapping[str, Sequence[Stay]],
    config: EngineConfig,
    max_workers: int | None = None,
    use_processes: bool | None = None,
) -> SweepResult:
    """Status on the config's reference date for every subject."""
    statuses, errors = _run(_status_task, subjects, config, max_workers, use_processes)
    log.info("Status sweep: %d subjects, %d rejected", len(subjects), len(errors))
    return SweepResult(statuses=statuses, errors=errors)


def sweep_forecasts(
    subjects: Mapping[str, Sequence[Stay]],
    config: EngineConfig,
    max_workers: int | None = None,
    use_processes: bool | None = None,
) -> ForecastSweepResult:
    """Upcoming-stay forecasts for every subject."""
    forecasts, errors = _run(_forecast_task, subjects, config, max_workers, use_processes)
    log.info("Forecast sweep: %d subjects, %d rejected", len(subjects), len(errors))
    return ForecastSweepResult(forecasts=forecasts, errors=errors)
