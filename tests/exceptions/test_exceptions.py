"""Tests for the exception hierarchy."""

from pathlib import Path

from codeshape.exceptions import (
    AnalysisCancelledError,
    AnalysisError,
    CodeshapeError,
    ConfigurationError,
    FatalIOError,
    FileSkipError,
    InvalidConfigError,
    NotFoundError,
    ScorerError,
)


class TestHierarchy:
    def test_all_derive_from_base(self):
        for cls in (
            AnalysisError,
            FatalIOError,
            NotFoundError,
            FileSkipError,
            ScorerError,
            AnalysisCancelledError,
            ConfigurationError,
            InvalidConfigError,
        ):
            assert issubclass(cls, CodeshapeError)

    def test_not_found_is_fatal(self):
        assert issubclass(NotFoundError, FatalIOError)
        assert not issubclass(FileSkipError, FatalIOError)


class TestMessages:
    def test_details_in_str(self):
        error = FileSkipError(Path("src/big.js"), "too large")
        assert error.details == {"filepath": "src/big.js", "reason": "too large"}
        assert str(error) == "Skipping file: src/big.js (filepath=src/big.js, reason=too large)"

    def test_plain_message(self):
        assert str(CodeshapeError("boom")) == "boom"

    def test_cancelled_stage_optional(self):
        assert "stage" not in AnalysisCancelledError("cancelled by caller").details
        assert AnalysisCancelledError("deadline expired", stage="scan").details["stage"] == "scan"

    def test_scorer_error(self):
        error = ScorerError("mvc", "KeyError")
        assert error.scorer == "mvc"
        assert "Pattern scorer failed: mvc" in str(error)
