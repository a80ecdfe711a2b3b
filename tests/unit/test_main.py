from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from app.build.models import BuildId
from app.config.settings import Settings
from app.main import build_uploader, main
from app.upload.models import UploadOutcome
from app.upload.rule_key_log_uploader import RuleKeyLogFileUploader


class TestBuildUploader:
    def test_wires_settings(self) -> None:
        settings = Settings(
            build_id="b-1",
            rage_url="https://rage.example.com/upload",
            rage_timeout_seconds=9,
            build_report_url="https://builds.example.com/report",
            build_report_timeout_seconds=4,
        )
        with (
            patch("app.main.HttpDefectReporter") as mock_reporter_cls,
            patch("app.main.RuleKeyLogFileUploader") as mock_uploader_cls,
        ):
            build_uploader(settings)

        mock_reporter_cls.assert_called_once_with(
            url="https://rage.example.com/upload", timeout_seconds=9
        )
        args = mock_uploader_cls.call_args.args
        assert args[0] is mock_reporter_cls.return_value
        assert args[2:] == ("https://builds.example.com/report", 4, BuildId("b-1"))

    def test_explicit_build_id_wins(self) -> None:
        with patch("app.main.RuleKeyLogFileUploader") as mock_uploader_cls:
            build_uploader(Settings(build_id="from-settings"), BuildId("explicit"))
        assert mock_uploader_cls.call_args.args[4] == BuildId("explicit")

    def test_generates_build_id_when_unset(self) -> None:
        with patch("app.main.RuleKeyLogFileUploader") as mock_uploader_cls:
            build_uploader(Settings(build_id=""))
        assert mock_uploader_cls.call_args.args[4].value

    def test_returns_uploader(self) -> None:
        assert isinstance(build_uploader(Settings(build_id="b-1")), RuleKeyLogFileUploader)


class TestMain:
    def test_usage_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 2
        assert "usage" in capsys.readouterr().err

    def test_uploads_given_path(self) -> None:
        mock_uploader = MagicMock()
        mock_uploader.upload_rule_key_log_file.return_value = UploadOutcome.UPLOAD_FAILED
        with patch("app.main.build_uploader", return_value=mock_uploader):
            assert main(["/tmp/rule_keys.tsv"]) == 0
        mock_uploader.upload_rule_key_log_file.assert_called_once_with(
            Path("/tmp/rule_keys.tsv")
        )

    def test_closes_uploader(self) -> None:
        mock_uploader = MagicMock()
        mock_uploader.upload_rule_key_log_file.return_value = UploadOutcome.COMPLETED
        with patch("app.main.build_uploader", return_value=mock_uploader):
            main(["/tmp/rule_keys.tsv"])
        mock_uploader.close.assert_called_once_with()

    def test_closes_uploader_when_upload_raises(self) -> None:
        mock_uploader = MagicMock()
        mock_uploader.upload_rule_key_log_file.side_effect = RuntimeError("no id")
        with (
            patch("app.main.build_uploader", return_value=mock_uploader),
            pytest.raises(RuntimeError),
        ):
            main(["/tmp/rule_keys.tsv"])
        mock_uploader.close.assert_called_once_with()
