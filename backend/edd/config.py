from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "edd-service"
    env: str = "local"
    log_level: str = "INFO"
    port: int = 3000

    # Pickup pincode (6 digits) and carrier mode of transport: E (express) or S (surface)
    origin_pin: str = ""
    mot: str = "E"
    delhivery_token: str = ""
    delhivery_tat_url: str = "https://track.delhivery.com/api/dc/expected_tat"

    # Geolocation providers, tried in this order. Providers missing a credential are skipped.
    geo_providers: list[str] = ["ipinfo", "keycdn"]
    ipinfo_token: str = ""
    keycdn_site: str = "https://google.com"

    # Headers checked for the visitor IP, first non-empty wins; the socket peer is the last resort.
    # Depends on the proxy/CDN in front of the service, e.g. ["cf-connecting-ip", "x-forwarded-for"].
    client_ip_headers: list[str] = ["true-client-ip", "cf-connecting-ip", "x-forwarded-for"]

    http_timeout_s: float = 5.0
    cutoff_hour: int = 15
    timezone: str = "Asia/Kolkata"

    debug_endpoint: bool = False
    cors_origins: list[str] = ["*"]

    class Config:
        env_file = ".env"
        frozen = True


settings = Settings()


def get_settings() -> Settings:
    return settings
