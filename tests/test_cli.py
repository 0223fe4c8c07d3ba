"""Tests for the run_recommend / upload_cv command-line scripts."""
import json
from unittest.mock import patch

import run_recommend
import upload_cv
from jobrec.documents import DocumentStore
from jobrec.errors import NotFoundError
from jobrec.models import JobRecord, RecommendationResult, SkillProfile


class TestRunRecommend:
    def test_usage(self, capsys):
        assert run_recommend.main([]) == 2
        assert "run_recommend.py <user_id>" in capsys.readouterr().out

    def test_success_prints_jobs(self, capsys):
        result = RecommendationResult(
            jobs=[JobRecord("Go Dev", "Acme", "Jakarta", "Go", "https://x/jobs/view/1", external_id="1")],
            analysis=SkillProfile(roles=("Backend",), skills=("Go",)),
        )
        with patch("jobrec.recommendation.get_job_recommendations", return_value=result):
            assert run_recommend.main(["u1"]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["success"] is True
        assert out["totalJobs"] == 1
        assert out["jobs"][0]["title"] == "Go Dev"

    def test_not_found_maps_to_404(self, capsys):
        with patch(
            "jobrec.recommendation.get_job_recommendations",
            side_effect=NotFoundError("CV document not found. Please upload your CV first."),
        ):
            assert run_recommend.main(["u1"]) == 1
        out = json.loads(capsys.readouterr().out)
        assert out == {
            "success": False,
            "message": "CV document not found. Please upload your CV first.",
            "status": 404,
        }

    def test_unexpected_error_is_500(self, capsys):
        with patch("jobrec.recommendation.get_job_recommendations", side_effect=ValueError("bad json")):
            assert run_recommend.main(["u1"]) == 1
        out = json.loads(capsys.readouterr().out)
        assert out["message"] == "Internal Server Error"
        assert out["status"] == 500


class TestUploadCv:
    def _run(self, tmp_path, argv):
        store = DocumentStore(tmp_path / "cv")
        with patch("upload_cv.ensure_dirs"), patch("upload_cv.DocumentStore", return_value=store):
            return upload_cv.main(argv), store

    def test_store_and_delete(self, tmp_path, capsys):
        cv = tmp_path / "cv.txt"
        cv.write_text("Backend engineer. Go, PostgreSQL, Docker.", encoding="utf-8")

        code, store = self._run(tmp_path, ["alice", str(cv)])
        assert code == 0
        assert store.get_cv_user("alice").file_name == "cv.txt"

        code, store = self._run(tmp_path, ["alice", "--delete"])
        assert code == 0
        assert store.get_cv_user("alice") is None
        assert "Deleted CV for alice" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        code, _ = self._run(tmp_path, ["alice", str(tmp_path / "nope.pdf")])
        assert code == 1
        assert "File not found" in capsys.readouterr().out

    def test_unsupported_format(self, tmp_path, capsys):
        cv = tmp_path / "cv.rtf"
        cv.write_text("{\\rtf1 hello}", encoding="utf-8")
        code, _ = self._run(tmp_path, ["alice", str(cv)])
        assert code == 1
        assert "Unsupported CV format" in capsys.readouterr().out

    def test_delete_without_cv(self, tmp_path):
        code, _ = self._run(tmp_path, ["bob", "--delete"])
        assert code == 1
