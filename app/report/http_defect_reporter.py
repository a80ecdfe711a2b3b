"""Defect reporter that uploads a zipped report to the rage endpoint."""

import io
import json
import zipfile
from pathlib import Path

import httpx

from app.logging.logger import Log
from app.report.base import BaseDefectReporter
from app.report.exceptions import DefectReporterNetworkError
from app.report.models import DefectReport, DefectSubmitResult

REPORT_JSON_NAME = "report.json"


class HttpDefectReporter(BaseDefectReporter):
    """Bundles the report and its files into a zip and POSTs it as multipart."""

    def __init__(
        self,
        *,
        url: str,
        timeout_seconds: int,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout_seconds)

    def close(self) -> None:
        """Release the HTTP client, unless it was injected."""
        if self._owns_client:
            self._client.close()

    def submit_report(self, report: DefectReport) -> DefectSubmitResult:
        report_json = json.dumps(report.to_dict(), sort_keys=True)
        try:
            archive = self._build_archive(report, report_json)
        except OSError as exc:
            raise DefectReporterNetworkError(
                f"Failed to read report files: {exc}"
            ) from exc
        Log.debug(f"Submitting defect report ({len(archive)} bytes) to {self._url}")

        try:
            response = self._client.post(
                self._url,
                data={"report_json": report_json},
                files={"report_file": ("report.zip", archive, "application/zip")},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise DefectReporterNetworkError(
                f"Rage endpoint returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise DefectReporterNetworkError(f"Rage endpoint network error: {exc}") from exc

        return self._parse_response(response)

    @staticmethod
    def _build_archive(report: DefectReport, report_json: str) -> bytes:
        buf = io.BytesIO()
        used_names = {REPORT_JSON_NAME}
        with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            archive.writestr(REPORT_JSON_NAME, report_json)
            for path in sorted(report.included_paths):
                archive.writestr(_unique_name(path, used_names), Path(path).read_bytes())
        return buf.getvalue()

    @staticmethod
    def _parse_response(response: httpx.Response) -> DefectSubmitResult:
        try:
            body = response.json()
        except ValueError as exc:
            raise DefectReporterNetworkError(
                f"Rage endpoint returned invalid JSON: {exc}"
            ) from exc
        if not isinstance(body, dict):
            raise DefectReporterNetworkError("Rage endpoint response must be an object")

        report_id = body.get("report_id")
        if report_id is not None and not isinstance(report_id, str):
            raise DefectReporterNetworkError(
                f"Rage endpoint returned a non-string report id: {report_id!r}"
            )
        return DefectSubmitResult(
            report_id=report_id,
            report_submit_location=body.get("report_submit_location"),
            report_submit_message=body.get("message"),
        )


def _unique_name(path: Path, used_names: set[str]) -> str:
    name = path.name
    counter = 1
    while name in used_names:
        name = f"{path.stem}_{counter}{path.suffix}"
        counter += 1
    used_names.add(name)
    return name
