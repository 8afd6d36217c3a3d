from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from intake.documents.models import DocumentCategory
from intake.main import log_progress, main
from intake.pipeline.models import ProfileUpdate, TaskStatus, TaskView


class TestMain:
    def test_missing_file_returns_error_code(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("EXTRACTION_PROVIDER", "example")
        with patch("intake.main.Log.configure"):
            assert main([str(tmp_path / "missing.pdf")]) == 1

    def test_prints_profile_json(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        profile = ProfileUpdate(name="Asha Rao", tax_id="ABCDE1234F")
        with (
            patch("intake.main.Log.configure") as mock_configure,
            patch("intake.main.run", new_callable=MagicMock) as mock_run,
            patch("intake.main.asyncio.run", return_value=profile),
        ):
            exit_code = main([str(tmp_path / "PAN.pdf")])

        assert exit_code == 0
        mock_configure.assert_called_once()
        assert mock_run.call_args.args[0] == [tmp_path / "PAN.pdf"]
        out = capsys.readouterr().out
        assert '"name": "Asha Rao"' in out
        assert '"tax_id": "ABCDE1234F"' in out
        assert "institute" not in out

    def test_requires_at_least_one_file(self) -> None:
        with pytest.raises(SystemExit):
            main([])


class TestLogProgress:
    def test_logs_summary(self) -> None:
        view = TaskView(
            id="PAN.pdf-1",
            name="PAN.pdf",
            status=TaskStatus.SUCCEEDED,
            category=DocumentCategory.PAN,
            extracted={"Name": "Asha Rao", "PAN": "ABCDE1234F"},
        )
        with patch("intake.main.Log.info") as mock_info:
            log_progress(view)
        message = mock_info.call_args.args[0]
        assert "PAN.pdf" in message
        assert "succeeded" in message
        assert "Name: Asha Rao, PAN: ABCDE1234F" in message

    def test_logs_error(self) -> None:
        view = TaskView(
            id="x.png-1",
            name="x.png",
            status=TaskStatus.FAILED,
            category=DocumentCategory.UNKNOWN,
            error="Document type not recognized for extraction.",
        )
        with patch("intake.main.Log.info") as mock_info:
            log_progress(view)
        assert "not recognized" in mock_info.call_args.args[0]
