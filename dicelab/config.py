from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DICELAB_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    environment: str = "local"
    debug: bool = True
    log_level: str = "INFO"

    # Simulation defaults — the demo uses these when no flags are given.
    default_trials: int = 100_000
    histogram_width: int = 60
    # Upper bounds on what a single HTTP request may ask for.
    max_trials: int = 1_000_000
    max_dice: int = 1_000
    # Dice rolled per trial times trials.
    max_draws: int = 10_000_000

    # Fixed seed for reproducible demo output. Leave unset for OS entropy.
    seed: int | None = None


settings = Settings()
