"""Tests for the comparison orchestration service."""

import math

import pytest

from heavyrms.core.config import ComparisonSettings
from heavyrms.core.domain.models.molecular_graph import MolecularGraph
from heavyrms.core.services.comparison_service import ComparisonService

from conftest import make_graph, permute_graph, rotation_matrix, transform_graph


def consumed(items, log):
    for item in items:
        log.append(item.title)
        yield item


@pytest.fixture
def poses(tert_butanol):
    moved = transform_graph(tert_butanol, rotation_matrix((0, 1, 0), 1.0), (2, 0, 0))
    return [
        permute_graph(tert_butanol, [0, 1, 2, 3, 4], "pose-1"),
        permute_graph(moved, [0, 3, 2, 1, 4], "pose-2"),
        permute_graph(tert_butanol, [0, 2, 3, 1, 4], "pose-3"),
    ]


class TestComparisonSettings:
    """Tests for ComparisonSettings."""

    def test_defaults(self):
        settings = ComparisonSettings().validate()

        assert not settings.minimize
        assert not settings.first_only
        assert settings.mapper == "backtracking"

    def test_unknown_mapper(self):
        with pytest.raises(ValueError):
            ComparisonSettings(mapper="brute").validate()

    def test_service_validates_settings(self):
        with pytest.raises(ValueError):
            ComparisonService(ComparisonSettings(mapper="brute"))


class TestComparisonService:
    """Tests for ComparisonService.compare_streams."""

    def test_pairwise_by_default(self, tert_butanol, poses, aminoethanol):
        references = [tert_butanol, aminoethanol, tert_butanol]
        service = ComparisonService()

        results = list(service.compare_streams(references, poses))

        assert [r.title for r in results] == ["pose-1", "pose-2", "pose-3"]
        assert results[0].rmsd == 0.0
        assert results[1].rmsd == math.inf
        assert results[2].rmsd == 0.0

    def test_first_only_compares_every_test_to_first_reference(
        self, tert_butanol, poses, aminoethanol
    ):
        read = []
        service = ComparisonService(
            ComparisonSettings(first_only=True, minimize=True)
        )

        results = list(
            service.compare_streams(consumed([tert_butanol, aminoethanol], read), poses)
        )

        assert len(results) == 3
        assert all(r.rmsd == pytest.approx(0.0, abs=1e-9) for r in results)
        assert all(r.minimized for r in results)
        assert read == ["tert-butanol"]

    def test_stops_when_tests_run_out(self, tert_butanol, poses):
        read = []
        service = ComparisonService()

        results = list(
            service.compare_streams(consumed([tert_butanol] * 5, read), poses[:2])
        )

        assert len(results) == 2
        assert len(read) == 3

    def test_empty_test_structure_moves_to_next_reference(
        self, tert_butanol, poses, aminoethanol
    ):
        tests = [poses[0], MolecularGraph([], [], "empty"), poses[2]]
        references = [tert_butanol, tert_butanol, aminoethanol]
        service = ComparisonService()

        results = list(service.compare_streams(references, tests))

        assert [r.title for r in results] == ["pose-1", "pose-3"]
        assert results[0].rmsd == 0.0
        assert results[1].rmsd == math.inf

    def test_empty_test_structure_ends_first_only_run(self, tert_butanol, poses):
        tests = [poses[0], MolecularGraph([], [], "empty"), poses[2]]
        service = ComparisonService(ComparisonSettings(first_only=True))

        results = list(service.compare_streams([tert_butanol, tert_butanol], tests))

        assert [r.title for r in results] == ["pose-1"]

    def test_mapper_choice_does_not_change_results(self, tert_butanol, poses):
        outcomes = []
        for mapper in ("backtracking", "networkx"):
            service = ComparisonService(
                ComparisonSettings(first_only=True, mapper=mapper)
            )
            outcomes.append(
                [
                    (r.rmsd, r.num_mappings)
                    for r in service.compare_streams([tert_butanol], poses)
                ]
            )

        assert outcomes[0] == outcomes[1]

    def test_hydrogens_do_not_affect_matching(self, methanol_with_hydrogens):
        heavy = make_graph(["O", "C"], [(1.4, 0, 0), (0, 0, 0)], [(0, 1)], "heavy")
        service = ComparisonService()

        (result,) = service.compare_streams([methanol_with_hydrogens], [heavy])

        assert result.rmsd == 0.0
        assert result.best_mapping == [(0, 1), (1, 0)]
