"""Season catalog configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from seasonpy.domain.curation import DEFAULT_REFRESH_THRESHOLD

from .env import optional_env_flag, optional_env_var
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_REMOTE_LOCATION = "https://raw.githubusercontent.com/erengy/anime-seasons/master/data/"
DEFAULT_ACTIVE_SERVICE = "myanimelist"
DEFAULT_AVAILABLE_FROM = "Winter 2011"
DEFAULT_AVAILABLE_TO = "Spring 2018"
DOWNLOAD_TIMEOUT_SECONDS = 30.0


def _download_resilience(*, cache_enabled: bool = False) -> ResilienceConfig:
    return ResilienceConfig(
        name="seasons",
        timeout_seconds=DOWNLOAD_TIMEOUT_SECONDS,
        retry=RetryPolicy(total=3),
        ratelimit=RateLimit(max_calls=2, per_seconds=1.0),
        cache=CacheConfig(enabled=cache_enabled),
    )


@dataclass(frozen=True, slots=True)
class SeasonConfig:
    """Values driving season loading, curation and downloads."""

    remote_location: str = DEFAULT_REMOTE_LOCATION
    active_service: str = DEFAULT_ACTIVE_SERVICE
    hide_nsfw: bool = True
    available_from: str = DEFAULT_AVAILABLE_FROM
    available_to: str = DEFAULT_AVAILABLE_TO
    refresh_threshold: int = DEFAULT_REFRESH_THRESHOLD
    download: ResilienceConfig = field(default_factory=_download_resilience)


def get_season_config() -> SeasonConfig:
    # SEASONPY_REMOTE_LOCATION=none disables downloads.
    remote = optional_env_var("SEASONPY_REMOTE_LOCATION", DEFAULT_REMOTE_LOCATION)
    if remote.lower() in {"none", "off"}:
        remote = ""
    return SeasonConfig(
        remote_location=remote,
        active_service=optional_env_var("SEASONPY_SERVICE", DEFAULT_ACTIVE_SERVICE).lower(),
        hide_nsfw=optional_env_flag("SEASONPY_HIDE_NSFW", default=True),
        available_from=optional_env_var("SEASONPY_AVAILABLE_FROM", DEFAULT_AVAILABLE_FROM),
        available_to=optional_env_var("SEASONPY_AVAILABLE_TO", DEFAULT_AVAILABLE_TO),
        download=_download_resilience(
            cache_enabled=optional_env_flag("SEASONPY_HTTP_CACHE", default=False)
        ),
    )
