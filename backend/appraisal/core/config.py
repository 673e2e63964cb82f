from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    LOGGER: int = 20

    # Appraiser office, origin of every route
    OFFICE_LAT: float = 4.601955010311332
    OFFICE_LNG: float = -74.07203983933485

    # Travel surcharge in COP per driven kilometer
    PRICE_PER_KM: float = 15000

    # Routing (OSRM)
    OSRM_BASE_URL: str = "https://router.project-osrm.org"
    HTTP_TIMEOUT: float = 10.0

    # Geocoding (Nominatim)
    NOMINATIM_URL: str = "https://nominatim.openstreetmap.org/search"
    GEOCODER_COUNTRY_CODES: str = "co"
    GEOCODER_LIMIT: int = 5
    USER_AGENT: str = "AppraisalQuoter/1.0"

    # Map tiles
    TILE_URL: str = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
    TILE_ATTRIBUTION: str = '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
    MAP_ZOOM: int = 13

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
