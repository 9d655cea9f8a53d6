"""Tests for the FastAPI routes."""

import json

import pytest

from text_analysis.app import routes_analysis
from text_analysis.services import analysis_service


class TestHealthAndPages:
    """Tests for /health and /."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["service"] == "text-analysis"
        assert body["lexicon"] == {"positive": 9, "negative": 9, "neutral": 5}
        assert body["stop_words"] == 14
        assert body["source"].endswith("lexicon.yaml")

    def test_index_page(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "Enter text for analysis" in response.text

    def test_index_page_has_chart_sections(self, client):
        html = client.get("/").text

        assert "Sentiment Distribution" in html
        assert 'id="distribution"' in html
        assert "Linguistic Features" in html
        assert 'id="radar"' in html
        assert 'data-min-length="10"' in html

    def test_script_renders_charts_and_checks_length(self, client):
        response = client.get("/static/main.js")
        script = response.text

        assert response.status_code == 200
        assert "charts.sentiment_distribution" in script
        assert "charts.linguistic_radar" in script
        assert "dataset.minLength" in script
        assert "res.ok" in script
        assert "data.detail" in script


class TestAnalyzeRoute:
    """Tests for POST /analyze."""

    def test_analyze_ok(self, client):
        response = client.post("/analyze", json={"text": "This is great and wonderful, truly amazing!"})
        body = response.json()

        assert response.status_code == 200
        assert body["status"] == "ok"
        assert body["result"]["sentiment"]["classification"] == "Positive"
        assert body["result"]["sentiment"]["wordCount"] == 7
        assert body["charts"]["sentiment_distribution"]["positive"] == pytest.approx(300 / 7)
        assert len(body["trend"]) == 1
        assert body["trend"][0]["score"] == pytest.approx(50 + 50 * 3 / 7)

    def test_chart_views_in_response(self, client):
        body = client.post("/analyze", json={"text": "Okay, this is fine. Bad weather though."}).json()
        charts = body["charts"]

        assert set(charts["sentiment_distribution"]) == {"positive", "negative", "neutral"}
        assert [p["subject"] for p in charts["linguistic_radar"]] == [
            "Word Diversity",
            "Avg Word Length",
            "Punctuation Density",
            "Unique Words",
        ]
        assert all(p["value"] >= 0 for p in charts["linguistic_radar"])

    def test_blank_text_is_input_error(self, client):
        body = client.post("/analyze", json={"text": "   "}).json()

        assert body["status"] == "error"
        assert body["error_type"] == "text_input_error"

    def test_too_short_text_is_input_error(self, client):
        body = client.post("/analyze", json={"text": "so good"}).json()

        assert body["status"] == "error"
        assert body["error_type"] == "text_input_error"
        assert "more text" in body["message"]

    def test_missing_field_is_validation_error(self, client):
        response = client.post("/analyze", json={})
        body = response.json()

        assert response.status_code == 422
        assert body["status"] == "error"
        assert body["error_type"] == "validation_error"
        assert "text" in body["message"]

    def test_wrong_body_type_is_validation_error(self, client):
        response = client.post("/analyze", json={"text": ["not", "a", "string"]})

        assert response.status_code == 422
        assert response.json()["error_type"] == "validation_error"

    def test_trend_grows_and_is_bounded(self, client):
        for i in range(6):
            body = client.post("/analyze", json={"text": f"cat dog bird number {i}"}).json()
        assert len(body["trend"]) == 4

    def test_unexpected_error_is_internal_error(self, client, monkeypatch):
        def boom(text):
            raise KeyError("boom")

        monkeypatch.setattr("text_analysis.app.routes_analysis.analyze_text", boom)
        body = client.post("/analyze", json={"text": "long enough text"}).json()

        assert body["status"] == "error"
        assert body["error_type"] == "internal_error"


class TestFileRoute:
    """Tests for POST /analyze/file."""

    def test_upload_text_file(self, client):
        files = {"file": ("notes.txt", "The worst day. Sad and awful weather.".encode("utf-8"), "text/plain")}
        body = client.post("/analyze/file", files=files).json()

        assert body["status"] == "ok"
        assert body["result"]["sentiment"]["classification"] == "Negative"
        assert body["text"].startswith("The worst day")

    def test_upload_with_bom(self, client):
        files = {"file": ("notes.txt", "\ufeffcat dog cat bird".encode("utf-8"), "text/plain")}
        body = client.post("/analyze/file", files=files).json()

        assert body["status"] == "ok"
        assert body["text"] == "cat dog cat bird"

    def test_binary_upload_is_input_error(self, client):
        files = {"file": ("image.png", b"\x89PNG\r\n\x1a\n\xff\xfe\xfd", "image/png")}
        body = client.post("/analyze/file", files=files).json()

        assert body["status"] == "error"
        assert body["error_type"] == "text_input_error"

    def test_oversize_upload_rejected(self, client, monkeypatch):
        monkeypatch.setattr(routes_analysis, "MAX_UPLOAD_BYTES", 16)
        monkeypatch.setattr(analysis_service, "MAX_UPLOAD_BYTES", 16)
        files = {"file": ("big.txt", b"great day " * 100, "text/plain")}
        body = client.post("/analyze/file", files=files).json()

        assert body["status"] == "error"
        assert body["error_type"] == "text_input_error"
        assert "16-byte limit" in body["message"]

    def test_upload_at_limit_accepted(self, client, monkeypatch):
        monkeypatch.setattr(routes_analysis, "MAX_UPLOAD_BYTES", 16)
        monkeypatch.setattr(analysis_service, "MAX_UPLOAD_BYTES", 16)
        files = {"file": ("small.txt", b"great great days", "text/plain")}
        body = client.post("/analyze/file", files=files).json()

        assert body["status"] == "ok"
        assert body["text"] == "great great days"

    def test_bom_only_upload_is_input_error(self, client):
        files = {"file": ("empty.txt", "\ufeff\ufeff\n".encode("utf-8"), "text/plain")}
        body = client.post("/analyze/file", files=files).json()

        assert body["status"] == "error"
        assert body["error_type"] == "text_input_error"


class TestSimulateRoute:
    """Tests for GET /simulate."""

    def test_simulate_uses_example_text(self, client):
        body = client.get("/simulate").json()

        assert body["status"] == "ok"
        assert body["text"] in analysis_service.SIMULATION_EXAMPLES


class TestExportRoute:
    """Tests for GET /export."""

    def test_nothing_to_export(self, client):
        response = client.get("/export")

        assert response.status_code == 404
        assert response.json()["error_type"] == "analysis_error"

    def test_export_last_result(self, client):
        client.post("/analyze", json={"text": "First text is great fun."})
        client.post("/analyze", json={"text": "Second text is awful and bad."})

        response = client.get("/export")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert 'filename="text_analysis_export.json"' in response.headers["content-disposition"]
        document = json.loads(response.text)
        assert document["sentiment"]["classification"] == "Negative"
        assert set(document) == {"sentiment", "linguisticFeatures", "wordFrequency"}
