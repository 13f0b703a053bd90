"""Credential storage: resolve and persist the Jina API key.

Resolution order:
- JINA_API_KEY environment variable (ignored when blank)
- plain-text file at <app config dir>/config
"""
from __future__ import annotations
import os, logging
from pathlib import Path
from typing import Mapping, Optional
import click
from jinab.config.settings import APP_NAME, ENV_VAR_NAME, CONFIG_FILE_NAME

log = logging.getLogger(__name__)

class KeyStoreError(Exception): ...
class ConfigLocationUnavailable(KeyStoreError): ...
class PersistError(KeyStoreError): ...
class MissingCredential(KeyStoreError): ...

class KeyStore:
	def __init__(self, path: Path | None = None, environ: Mapping[str, str] | None = None):
		# Explicit path wins; otherwise the platform location is derived on each call
		self._path = Path(path) if path is not None else None
		self._environ = environ

	@property
	def environ(self) -> Mapping[str, str]:
		return os.environ if self._environ is None else self._environ

	def config_path(self) -> Path:
		if self._path is not None:
			return self._path
		app_dir = Path(click.get_app_dir(APP_NAME, force_posix=False))
		if not app_dir.is_absolute():
			raise ConfigLocationUnavailable('Could not determine config directory')
		return app_dir / CONFIG_FILE_NAME

	def resolve(self) -> Optional[str]:
		key = (self.environ.get(ENV_VAR_NAME) or '').strip()
		if key:
			log.debug('Using API key from %s', ENV_VAR_NAME)
			return key
		try:
			path = self.config_path()
			key = path.read_text(encoding='utf-8').strip()
		except (KeyStoreError, OSError, UnicodeDecodeError) as e:
			# Unreadable and missing files are both "no key"
			log.debug('No API key file: %s', e)
			return None
		if not key:
			return None
		log.debug('Using API key from %s', path)
		return key

	def require(self) -> str:
		key = self.resolve()
		if key is None:
			raise MissingCredential(
				f'No API key found. Set {ENV_VAR_NAME} environment variable or run: {APP_NAME} key <api-key>'
			)
		return key

	def persist(self, api_key: str) -> Path:
		"""Write the stripped key to the config file, creating its directory.

		Returns the path written. Raises PersistError on filesystem failure and
		ConfigLocationUnavailable if no config directory can be derived.
		"""
		value = api_key.strip()
		path = self.config_path()
		try:
			path.parent.mkdir(parents=True, exist_ok=True)
		except OSError as e:
			raise PersistError(f'Failed to create config directory: {e}') from e
		try:
			path.write_text(value, encoding='utf-8')
		except OSError as e:
			raise PersistError(f'Failed to write config file: {e}') from e
		log.debug('API key written to %s', path)
		return path
