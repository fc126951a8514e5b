"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from diet_book.app_logging import DEFAULT_LOG_FORMAT

BUNDLED_CATALOG = Path(__file__).resolve().parent / "data" / "catalog.txt"


class Settings(BaseSettings):
    """Application settings, overridable through DIETBOOK_* variables."""

    data_dir: Path = Path(".")
    food_list_file: str = "FoodList.txt"
    user_info_file: str = "UserInfo.txt"
    catalog_file: Path = BUNDLED_CATALOG
    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT
    # Unset means stderr, which stays apart from the prompt on stdout.
    log_file: Path | None = None

    model_config = SettingsConfigDict(
        env_prefix="DIETBOOK_",
        env_file=".env",
        extra="ignore",
    )

    @property
    def food_list_path(self) -> Path:
        return self.data_dir / self.food_list_file

    @property
    def user_info_path(self) -> Path:
        return self.data_dir / self.user_info_file
