from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Amadeus
    amadeus_client_id: str = ""
    amadeus_client_secret: str = ""
    amadeus_token_url: str = "https://test.api.amadeus.com/v1/security/oauth2/token"
    amadeus_flight_offers_url: str = "https://test.api.amadeus.com/v2/shopping/flight-offers"

    # Flight search filters sent upstream
    flight_max_results: int = 20
    flight_non_stop: bool = True

    # HTTP
    http_timeout: float = 30.0

    # Logging
    log_level: str = "INFO"
    log_dir: str = ""

    # CORS
    cors_origins: str = "*"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
