"""Tests for the JSON export."""

import json

from text_analysis.core.config import EXPORT_FILENAME
from text_analysis.infra.export_repo import save_export, to_export_json


class TestExport:
    """Tests for to_export_json / save_export."""

    def test_json_document(self, analyzer):
        result = analyzer.analyze("This is great and wonderful, truly amazing!")
        document = json.loads(to_export_json(result))

        assert document == result.to_dict()
        assert document["sentiment"]["classification"] == "Positive"

    def test_stop_word_text_exports_cleanly(self, analyzer):
        document = json.loads(to_export_json(analyzer.analyze("the a an")))
        assert document["wordFrequency"] == []

    def test_save_export(self, analyzer, tmp_path):
        result = analyzer.analyze("cat dog cat")
        path = save_export(result, tmp_path / "out")

        assert path.name == EXPORT_FILENAME == "text_analysis_export.json"
        assert json.loads(path.read_text(encoding="utf-8")) == result.to_dict()


class TestAnalyzeTextFileScript:
    """Tests for scripts/analyze_text_file.py."""

    def test_writes_export(self, tmp_path, capsys):
        from scripts.analyze_text_file import main

        source = tmp_path / "notes.txt"
        source.write_text("What a fantastic, happy day!", encoding="utf-8")

        assert main([str(source), "--out", str(tmp_path / "out")]) == 0

        document = json.loads((tmp_path / "out" / EXPORT_FILENAME).read_text(encoding="utf-8"))
        assert document["sentiment"]["classification"] == "Positive"
        assert "Classification: Positive" in capsys.readouterr().out

    def test_empty_file(self, tmp_path):
        from scripts.analyze_text_file import main

        source = tmp_path / "empty.txt"
        source.write_text("  \n", encoding="utf-8")

        assert main([str(source), "--out", str(tmp_path / "out")]) == 1
        assert not (tmp_path / "out").exists()

    def test_missing_lexicon_file(self, tmp_path):
        from scripts.analyze_text_file import main

        source = tmp_path / "notes.txt"
        source.write_text("What a fantastic, happy day!", encoding="utf-8")

        assert main([str(source), "--lexicon", str(tmp_path / "nope.yaml")]) == 2

    def test_missing_input_file(self, tmp_path):
        from scripts.analyze_text_file import main

        assert main([str(tmp_path / "absent.txt"), "--out", str(tmp_path / "out")]) == 2
        assert not (tmp_path / "out").exists()
