"""Tests for the use case and the analysis service."""

import pytest

from text_analysis.exceptions import AnalysisError, TextInputError
from text_analysis.services import analysis_service
from text_analysis.usecases.analyze_text import run_text_analysis_usecase


@pytest.fixture(autouse=True)
def _fresh_state():
    analysis_service.reset_state()
    yield
    analysis_service.reset_state()


class TestUsecase:
    """Tests for run_text_analysis_usecase."""

    def test_returns_result_charts_summary(self, analyzer):
        out = run_text_analysis_usecase("cat dog cat bird dog cat", analyzer=analyzer)

        assert set(out) == {"analysis", "result", "charts", "summary"}
        assert out["result"] == out["analysis"].to_dict()

    @pytest.mark.parametrize("text", [None, "", "    ", "\ufeff", "\ufeff\n "])
    def test_blank_input_rejected(self, analyzer, text):
        with pytest.raises(TextInputError):
            run_text_analysis_usecase(text, analyzer=analyzer)

    def test_min_length_counts_stripped_text(self, analyzer):
        with pytest.raises(TextInputError):
            run_text_analysis_usecase("   short   ", analyzer=analyzer, min_length=10)
        assert run_text_analysis_usecase("long enough", analyzer=analyzer, min_length=10)


class TestAnalysisService:
    """Tests for the service's in-memory state."""

    def test_export_before_analysis(self):
        with pytest.raises(AnalysisError):
            analysis_service.get_last_export()

    def test_export_follows_last_analysis(self):
        analysis_service.analyze_text("Everything is wonderful today.")
        assert '"Positive"' in analysis_service.get_last_export()

        analysis_service.analyze_text("Everything is terrible today.")
        assert '"Negative"' in analysis_service.get_last_export()

    def test_trend_is_built_from_history(self):
        first = analysis_service.analyze_text("Everything is wonderful today.")
        second = analysis_service.analyze_text("Just an average day at work.")

        assert len(first["trend"]) == 1
        assert len(second["trend"]) == 2
        assert second["trend"][0] == first["trend"][0]
        assert second["trend"][1]["score"] == pytest.approx(50.0)

    def test_decode_upload_rejects_oversize(self, monkeypatch):
        monkeypatch.setattr(analysis_service, "MAX_UPLOAD_BYTES", 4)
        with pytest.raises(TextInputError):
            analysis_service.decode_upload("big.txt", b"0123456789")

    def test_decode_upload_rejects_non_utf8(self):
        with pytest.raises(TextInputError):
            analysis_service.decode_upload("latin.txt", "caf\xe9".encode("latin-1"))
