"""
Comparison Engine
neurazor/scoring/comparison.py

Explains score differences between completed sessions as a function of
scoring-configuration changes.

    diff_weights   union of competency names, missing weight = 0,
                   one VersionChange per differing weight (diff = new − old)
    impact         total_diff = B.final − A.final; per change,
                   weighted_B − weighted_A when the competency exists in
                   both sessions, skipped otherwise

Versions are ordered by a caller-supplied policy. The default is lexical
name order, under which "V10" sorts before "V2".
"""

import re
import structlog
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from neurazor.core.exceptions import ComparisonException
from neurazor.models.enumerations import GameKind
from neurazor.models.results import GameResult
from neurazor.models.versions import (
    CompetencyImpact,
    HistorySummary,
    ImpactReport,
    ScoringVersion,
    VersionChange,
    VersionComparison,
)
from neurazor.repositories.base import ScoringPersistence
from neurazor.scoring.version_registry import VersionRegistry

logger = structlog.get_logger(__name__)

VersionOrdering = Callable[[Iterable[str]], List[str]]


# ---------------------------------------------------------------------------
# Ordering policies
# ---------------------------------------------------------------------------

def lexical_version_order(names: Iterable[str]) -> List[str]:
    """Plain string order: ["V1", "V10", "V2"]."""
    return sorted(names)


def numeric_version_order(names: Iterable[str]) -> List[str]:
    """Order by the embedded number when present: ["V1", "V2", "V10"]."""
    def key(name: str):
        match = re.search(r"(\d+)$", name)
        return (0, name[: match.start()], int(match.group(1))) if match else (1, name, 0)
    return sorted(names, key=key)


# ---------------------------------------------------------------------------
# Pure comparison functions
# ---------------------------------------------------------------------------

def diff_weight_maps(old: Mapping[str, float], new: Mapping[str, float]) -> List[VersionChange]:
    """Weight changes between two competency -> weight maps."""
    names = list(old)
    names += [name for name in new if name not in old]

    changes: List[VersionChange] = []
    for name in names:
        old_weight = old.get(name, 0.0)
        new_weight = new.get(name, 0.0)
        if old_weight != new_weight:
            changes.append(VersionChange(
                competency=name,
                old_weight=old_weight,
                new_weight=new_weight,
                diff=new_weight - old_weight,
            ))
    return changes


def diff_weights(version_a: ScoringVersion, version_b: ScoringVersion) -> List[VersionChange]:
    """Weight changes going from ``version_a`` to ``version_b``."""
    return diff_weight_maps(version_a.weight_map(), version_b.weight_map())


def impact(
    session_a: GameResult,
    session_b: GameResult,
    changes: Sequence[VersionChange],
) -> ImpactReport:
    """
    Attribute the score movement from session A to session B to weight changes.

    Competencies missing from either session are skipped, not zero-filled.
    """
    per_competency: List[CompetencyImpact] = []
    for change in changes:
        comp_a = session_a.competency(change.competency)
        comp_b = session_b.competency(change.competency)
        if comp_a is None or comp_b is None:
            continue
        per_competency.append(CompetencyImpact(
            competency=change.competency,
            impact=comp_b.weighted_score - comp_a.weighted_score,
            change=change.diff,
        ))

    return ImpactReport(
        total_diff=session_b.final_score - session_a.final_score,
        per_competency_impact=per_competency,
    )


def history_summary(results: Sequence[GameResult]) -> Optional[HistorySummary]:
    """Best, latest and average final score of a session history (None when empty)."""
    if not results:
        return None
    ordered = sorted(results, key=lambda r: r.timestamp, reverse=True)
    scores = [r.final_score for r in ordered]
    return HistorySummary(
        best=max(scores),
        latest=scores[0],
        average=sum(scores) / len(scores),
        total=len(scores),
    )


# ---------------------------------------------------------------------------
# Engine over the registry and result history
# ---------------------------------------------------------------------------

class ComparisonEngine:
    """Compare sessions scored under different scoring versions."""

    def __init__(self, registry: VersionRegistry, persistence: ScoringPersistence):
        self.registry = registry
        self.persistence = persistence

    def version_changes(
        self,
        game_kind: GameKind,
        version_names: Iterable[str],
        ordering: VersionOrdering = lexical_version_order,
    ) -> List[VersionChange]:
        """
        Weight changes between each adjacent pair of versions after ordering.

        Duplicate names are collapsed; names unknown to the registry are
        skipped, together with the pairs they belong to.
        """
        game_kind = GameKind(game_kind)
        ordered = ordering(dict.fromkeys(version_names))
        known: Dict[str, ScoringVersion] = {
            v.version_name: v for v in self.registry.list_versions(game_kind)
        }

        changes: List[VersionChange] = []
        for older, newer in zip(ordered, ordered[1:]):
            if older not in known or newer not in known:
                logger.warning(
                    "version_pair_skipped",
                    game_kind=game_kind.value,
                    pair=[older, newer],
                )
                continue
            changes.extend(diff_weights(known[older], known[newer]))
        return changes

    def compare_versions(
        self,
        game_kind: GameKind,
        version_a: str,
        version_b: str,
    ) -> List[VersionChange]:
        """Weight changes between two named versions, in the given direction."""
        return diff_weights(
            self.registry.get_version(game_kind, version_a),
            self.registry.get_version(game_kind, version_b),
        )

    def compare_sessions(
        self,
        game_kind: GameKind,
        user_id: Optional[str],
        session_ids: Sequence[str],
        ordering: VersionOrdering = lexical_version_order,
        newest_first: bool = True,
    ) -> VersionComparison:
        """
        Compare the selected sessions of a user's history.

        Weight changes are computed across the distinct versions of the
        selected sessions. Impact compares the two most recent selected
        sessions: with ``newest_first`` (default) A is the most recent and B
        the one before it, so a score gain under the newer version shows as a
        negative total_diff; otherwise A is the older session.

        Args:
            user_id: Owner of the history, None for every user

        Raises:
            ComparisonException: fewer than 2 selected sessions were found
        """
        game_kind = GameKind(game_kind)
        wanted = {str(s) for s in session_ids}
        history = self.persistence.fetch_result_history(game_kind, user_id)
        selected = sorted(
            (r for r in history if r.session_id in wanted),
            key=lambda r: r.timestamp,
            reverse=True,
        )

        if not selected:
            raise ComparisonException(
                f"No sessions found with the provided IDs. "
                f"Found {len(history)} total sessions for this game."
            )
        if len(selected) < 2:
            raise ComparisonException("Please select at least 2 sessions to compare")

        version_names = [r.version_name for r in selected if r.version_name]
        distinct = list(dict.fromkeys(version_names))
        changes = self.version_changes(game_kind, distinct, ordering) if len(distinct) >= 2 else []

        newer, older = selected[0], selected[1]
        report = impact(newer, older, changes) if newest_first else impact(older, newer, changes)

        logger.info(
            "sessions_compared",
            game_kind=game_kind.value,
            sessions=[r.session_id for r in selected],
            versions=ordering(distinct),
            change_count=len(changes),
            total_diff=report.total_diff,
        )

        return VersionComparison(
            game_kind=game_kind,
            session_ids=[r.session_id for r in selected],
            versions=ordering(distinct),
            changes=changes,
            impact=report,
        )
