# session/controller.py

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, replace
from typing import Optional

from advisors.common.analysis import AnalysisResult
from projection.generator import Projection, generate
from subjects.domain_subject import Domain, RiskClassification

logger = logging.getLogger(__name__)

IDLE = "IDLE"
PENDING = "PENDING"
SETTLED = "SETTLED"


class AnalysisInProgress(RuntimeError):
    """A second analysis was requested while one is still pending."""


@dataclass(frozen=True)
class AnalysisSnapshot:
    """
    Everything a reader may observe about one analysis cycle.
    Replaced wholesale, never mutated.
    """
    status: str
    domain: Optional[Domain] = None
    profile: object = None
    projection: Optional[Projection] = None
    analysis: Optional[AnalysisResult] = None

    @property
    def is_pending(self) -> bool:
        return self.status == PENDING

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "domain": self.domain.value if self.domain else None,
            "risk": self.projection.risk.value if self.projection is not None else None,
            "data": self.projection.to_list() if self.projection is not None else [],
            "analysis": self.analysis.to_dict() if self.analysis else None,
        }


class AdvisoryMergeController:
    """
    Two-phase analysis: publish the baseline projection at once,
    ask the advisor for a risk classification, then replace the
    baseline with the adjusted projection if (and only if) the
    advisor produced a result.

    - advisory_service: object with analyze(domain, payload) -> AnalysisResult | None
    - start_year: optional fixed label for offset 0 (tests)
    - executor: shared pool to run advisory calls on; a private
      single-worker pool is created (and owned) when omitted
    """

    def __init__(self, advisory_service, start_year: int | None = None, executor=None):
        self.advisory_service = advisory_service
        self.start_year = start_year
        self._lock = threading.Lock()
        self._snapshot = AnalysisSnapshot(status=IDLE)
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="advisory")

    @property
    def snapshot(self) -> AnalysisSnapshot:
        with self._lock:
            return self._snapshot

    @property
    def busy(self) -> bool:
        return self.snapshot.is_pending

    def request_analysis(self, profile) -> Future:
        """
        Start one analysis cycle for `profile`.

        The baseline is published before this returns. The returned
        future resolves to the settled snapshot. Raises
        AnalysisInProgress if a cycle is already pending.
        """
        domain = profile.domain
        baseline = generate(domain, profile, RiskClassification.NONE, start_year=self.start_year)

        with self._lock:
            if self._snapshot.is_pending:
                raise AnalysisInProgress("an analysis is already running")
            self._snapshot = AnalysisSnapshot(
                status=PENDING,
                domain=domain,
                profile=profile,
                projection=baseline,
            )
            pending = self._snapshot

        logger.info("Generating analysis for %s...", domain.value)
        return self._executor.submit(self._run, pending)

    def _run(self, pending: AnalysisSnapshot) -> AnalysisSnapshot:
        try:
            result = self.advisory_service.analyze(pending.domain, pending.profile.to_payload())
        except Exception:
            # the cycle settles whatever the collaborator does
            logger.exception("Advisory service raised for %s", pending.domain.value)
            result = None

        if result is None:
            settled = replace(pending, status=SETTLED)
            logger.info("No advisory result; baseline projection stands")
        else:
            adjusted = generate(
                pending.domain,
                pending.profile,
                result.risk_level,
                start_year=self.start_year,
            )
            settled = replace(pending, status=SETTLED, projection=adjusted, analysis=result)
            logger.info("Projection adjusted for risk level %s", result.risk_level.value)

        with self._lock:
            self._snapshot = settled
        logger.info("Analysis complete.")
        return settled

    def reset(self, domain=None):
        """
        Drop the current result (e.g. on a domain switch).
        Not allowed while a cycle is pending.
        """
        with self._lock:
            if self._snapshot.is_pending:
                raise AnalysisInProgress("cannot reset while an analysis is running")
            self._snapshot = AnalysisSnapshot(status=IDLE)
        if domain is not None:
            logger.info("System ready in %s mode.", Domain(domain).value)

    def close(self):
        """Shut down the worker pool, unless it is shared."""
        if self._owns_executor:
            self._executor.shutdown(wait=False)
