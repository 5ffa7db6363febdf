from intercom_relay.core.config import Settings
from intercom_relay.models.schemas.health import HealthResponse, UpstreamHealth


class HealthService:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def get_health(self) -> HealthResponse:
        upstream = UpstreamHealth(
            base_url=self.settings.intercom_api_url,
            version=self.settings.intercom_version,
            credential_configured=bool(self.settings.intercom_access_token),
        )
        status = "ok" if upstream.credential_configured else "degraded"
        return HealthResponse(
            status=status,
            environment=self.settings.app_env,
            upstream=upstream,
        )
