import httpx

from app.build.models import BuildId
from app.logging.logger import Log
from app.upload.exceptions import UploadNetworkError
from app.upload.models import UploadResponse

BUILD_ID_HEADER = "Build-Id"


class RequestUploader:
    """POSTs form bodies to the build report endpoint of one build."""

    def __init__(
        self,
        url: str,
        timeout_seconds: float,
        build_id: BuildId,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._build_id = build_id
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout_seconds)

    def close(self) -> None:
        """Release the HTTP client, unless it was injected."""
        if self._owns_client:
            self._client.close()

    def get_build_id(self) -> str:
        """Return the build id in its JSON form."""
        return self._build_id.to_json()

    def upload_request(self, form: dict[str, str]) -> UploadResponse:
        """Send form URL-encoded to the endpoint.

        Raises:
            UploadNetworkError: on transport failure or a non-2xx status.
        """
        Log.debug(f"Uploading build report request for build {self._build_id}")
        try:
            response = self._client.post(
                self._url,
                data=form,
                headers={BUILD_ID_HEADER: self.get_build_id()},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise UploadNetworkError(
                f"Build report endpoint returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise UploadNetworkError(f"Build report endpoint network error: {exc}") from exc

        return self._parse_response(response)

    @staticmethod
    def _parse_response(response: httpx.Response) -> UploadResponse:
        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            return UploadResponse(status_code=response.status_code)
        return UploadResponse(
            status_code=response.status_code,
            uri=body.get("uri"),
            message=body.get("message"),
        )
