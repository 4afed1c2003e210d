"""Match Orchestrator - Engine Entry Point for new reports

새 리포트가 들어왔을 때 외부 저장소가 넘겨준 전체 리포트 목록에서
후보 풀을 고른 뒤 Ranker에 위임합니다.

후보 조건:
1. 반대 kind (lost <-> found)
2. 같은 community (query에 community가 있는 경우)
3. 다른 작성자 (자기 자신의 리포트와 매칭 금지)
4. 자기 자신 제외
"""

from typing import Iterable, Optional

from src.core.logging import logger

from .config import RankConfig
from .models import RankedMatch, Report
from .ranker import rank


class MatchOrchestrator:
    """lost/found 양방향 매칭 진입점

    Usage:
        orchestrator = MatchOrchestrator(RankConfig.from_settings())
        matches = orchestrator.find_matches(new_report, all_reports)
        for candidate, breakdown in matches:
            ...
    """

    def __init__(self, config: Optional[RankConfig] = None):
        """
        Args:
            config: 랭킹 설정 (기본값: RankConfig())
        """
        self.config = config or RankConfig()

    @staticmethod
    def eligible_candidates(report: Report, pool: Iterable[Report]) -> list[Report]:
        """report와 비교할 수 있는 후보만 남깁니다 (입력 순서 유지)"""
        wanted = report.kind.opposite
        eligible: list[Report] = []
        for candidate in pool:
            if candidate.kind is not wanted or candidate.id == report.id:
                continue
            if report.community is not None and candidate.community != report.community:
                continue
            if report.owner_id is not None and candidate.owner_id == report.owner_id:
                continue
            eligible.append(candidate)
        return eligible

    def find_matches(self, report: Report, pool: Iterable[Report]) -> list[RankedMatch]:
        """새 리포트에 대한 매칭 후보 랭킹

        Args:
            report: 새로 등록된 lost 또는 found 리포트
            pool: 외부 저장소의 리포트 목록 (kind 혼재 가능)

        Returns:
            list[RankedMatch]: 임계값을 넘은 상위 후보
        """
        candidates = self.eligible_candidates(report, pool)
        matches = rank(report, candidates, self.config)
        logger.info(
            f"Found {len(matches)} potential matches for {report.kind.value} report {report.id} "
            f"(eligible candidates: {len(candidates)})"
        )
        return matches
