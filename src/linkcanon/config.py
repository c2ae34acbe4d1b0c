# LinkCanon — Configuration via Pydantic BaseSettings
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
	"""Library settings with sane defaults.

	Environment variables are prefixed with LINKCANON_. CLI flags can override.
	An empty suffix_list_urls keeps tldextract on its bundled snapshot (no network).
	"""

	model_config = SettingsConfigDict(env_prefix="LINKCANON_", env_file=".env", extra="ignore")

	user_agent: str = Field(default="LinkCanon/0.1 (+https://example.com)")
	http_timeout: float = Field(default=5.0)
	http_retries: int = Field(default=0)
	http_backoff: float = Field(default=0.5)
	suffix_list_urls: List[str] = Field(default_factory=list)
	include_psl_private_domains: bool = Field(default=True)
	log_level: str = Field(default="INFO")
	log_dir: Optional[str] = Field(default=None)


settings = Settings()
