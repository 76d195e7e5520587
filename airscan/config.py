# (c) Copyright Datacraft, 2026
"""Client settings configuration."""
from pathlib import Path

import httpx
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from airscan.version import __version__


class ESCLSettings(BaseSettings):
	# Timeouts in seconds
	request_timeout: float = Field(gt=0, default=100.0)
	connect_timeout: float = Field(gt=0, default=100.0)
	read_timeout: float = Field(gt=0, default=100.0)

	verify_tls: bool = True
	# job locations are resolved by the client, devices should not redirect
	follow_redirects: bool = False
	user_agent: str = f"airscan-client/{__version__}"

	log_config: Path | None = None

	model_config = SettingsConfigDict(
		env_prefix='escl_',
		env_file='.env',
		env_file_encoding='utf-8',
		extra='ignore',
	)

	def timeout(self) -> httpx.Timeout:
		return httpx.Timeout(
			self.request_timeout,
			connect=self.connect_timeout,
			read=self.read_timeout,
		)

	def build_http_client(self) -> httpx.AsyncClient:
		return httpx.AsyncClient(
			timeout=self.timeout(),
			verify=self.verify_tls,
			follow_redirects=self.follow_redirects,
			headers={'User-Agent': self.user_agent},
		)


_settings: ESCLSettings | None = None


def get_settings() -> ESCLSettings:
	global _settings
	if _settings is None:
		_settings = ESCLSettings()
	return _settings
