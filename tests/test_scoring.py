"""Tests for consistency scoring."""

from types import MappingProxyType

from codeshape.naming import NamingCategory, NamingConvention, NamingStat, profile
from codeshape.patterns import MVC, ArchitecturalPatternResult
from codeshape.scoring import ConsistencyMetrics, naming_consistency, score_consistency


def stats(**names_by_category):
    return MappingProxyType(
        {NamingCategory(category): profile(names) for category, names in names_by_category.items()}
    )


class TestNamingConsistency:
    def test_mean_of_dominant_shares(self):
        naming = stats(
            variables=["fooBar", "bazQux", "isReady"],
            functions=["load_user", "save_user", "drop_user", "getUser", "putUser"],
        )
        assert naming_consistency(naming.values()) == 80

    def test_mixed_and_empty_categories_excluded(self):
        naming = stats(
            variables=["fooBar", "barBaz"],
            functions=["a_b", "cD", "ef", "GH"],
            classes=[],
        )
        assert naming[NamingCategory.FUNCTIONS].dominant == NamingConvention.MIXED
        assert naming_consistency(naming.values()) == 100

    def test_no_usable_category(self):
        assert naming_consistency([NamingStat(), profile(["a_b", "cD", "ef"])]) == 0


class TestScoreConsistency:
    def test_combines_components(self):
        naming = stats(variables=["fooBar", "bazQux", "isReady", "load_user", "x_y"])
        patterns = [ArchitecturalPatternResult(MVC, 90)]

        metrics = score_consistency(naming, patterns)
        assert metrics == ConsistencyMetrics(overall=75, naming=60, architecture=90)

    def test_zero_components_are_ignored_in_overall(self):
        naming = stats(variables=["fooBar", "bazQux"])
        assert score_consistency(naming, []) == ConsistencyMetrics(
            overall=100, naming=100, architecture=0
        )

    def test_architecture_only(self):
        patterns = [ArchitecturalPatternResult(MVC, 72), ArchitecturalPatternResult("MVVM", 61)]
        metrics = score_consistency({}, patterns)
        assert metrics == ConsistencyMetrics(overall=72, naming=0, architecture=72)

    def test_empty(self):
        assert score_consistency({}, []) == ConsistencyMetrics()

    def test_values_are_plain_ints(self):
        naming = stats(variables=["fooBar", "bazQux", "x_y"])
        metrics = score_consistency(naming, [ArchitecturalPatternResult(MVC, 80)])
        assert all(type(v) is int for v in (metrics.overall, metrics.naming, metrics.architecture))
