"""Durable storage of the settings document.

ConfigStore owns exactly one config.json. Reads never fail because of a
corrupt document: anything that does not parse is replaced by the default
settings, which are written back immediately. Writes go through a temporary
file and an atomic rename, so an interrupted write leaves the previous
document in place.

Blocking filesystem calls run in a worker thread. Calls on one store are
serialized by an asyncio.Lock; separate processes writing the same file are
not coordinated.

Typical Usage:
    >>> store = ConfigStore()
    >>> config = await store.read()
    >>> config.activity.polling_active = True
    >>> await store.write(config)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Final, TypeVar

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from gamepresence.config import paths
from gamepresence.config.models import Config
from gamepresence.errors import ConfigIOError, SerializationError
from gamepresence.utils.file import ensure_directory_exists, write_atomic

logger: Final = logging.getLogger(__name__)

T = TypeVar("T")


class ConfigStore:
    """Reads and writes the settings document at a single path."""

    def __init__(self, path: Path | None = None) -> None:
        """Initialize the store.

        Args:
            path: Settings file to manage (default: the platform location,
                resolved on first use)
        """
        self._path = path
        self._lock: asyncio.Lock | None = None
        self._lock_loop: asyncio.AbstractEventLoop | None = None

    @property
    def path(self) -> Path:
        """Location of the settings file.

        Raises:
            DirectoryResolutionError: If no path was given and the platform
                has no config directory
        """
        if self._path is None:
            self._path = paths.config_file()
        return self._path

    async def read(self) -> Config:
        """Load the settings, healing a missing or corrupt file.

        Returns:
            The stored settings, or the defaults if the file was empty,
            malformed or did not match the schema

        Raises:
            DirectoryResolutionError: If the config directory is unknown
            ConfigIOError: If the file cannot be created or read
        """
        async with self._get_lock():
            path = self.path
            raw = await self._in_worker(self._load, path)
            try:
                return Config.from_json(raw.decode("utf-8-sig"))
            except (UnicodeDecodeError, ValidationError) as exc:
                if raw:
                    logger.warning(
                        "Settings in %s are unreadable, restoring defaults: %s", path, exc
                    )
                else:
                    logger.info("No settings found at %s, writing defaults", path)

            config = Config.default()
            await self._save(path, config)
            return config

    async def write(self, config: Config) -> None:
        """Durably replace the stored settings.

        Once this returns, the new document survives a crash.

        Args:
            config: Settings to store

        Raises:
            DirectoryResolutionError: If the config directory is unknown
            SerializationError: If the settings cannot be serialized
            ConfigIOError: If the file cannot be written
        """
        async with self._get_lock():
            await self._save(self.path, config)

    async def reset(self) -> Config:
        """Overwrite the stored settings with the defaults."""
        config = Config.default()
        await self.write(config)
        return config

    # ---- helpers ----
    def _get_lock(self) -> asyncio.Lock:
        # asyncio.Lock binds to the loop it first waits on
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    @staticmethod
    async def _in_worker(func: Callable[..., T], *args: object) -> T:
        """Run blocking I/O in a thread, outliving cancellation of the caller.

        A worker thread cannot be interrupted. If the awaiting task is
        cancelled (e.g. by a deadline), wait for the thread to finish before
        re-raising so the store lock is not released while the file is still
        being touched.
        """
        task = asyncio.ensure_future(asyncio.to_thread(func, *args))
        try:
            return await asyncio.shield(task)
        except asyncio.CancelledError:
            await asyncio.wait([task])
            if not task.cancelled() and task.exception() is not None:
                logger.warning(
                    "Settings I/O failed after the caller gave up: %s", task.exception()
                )
            raise

    async def _save(self, path: Path, config: Config) -> None:
        try:
            payload = config.to_json().encode("utf-8")
        except PydanticSerializationError as exc:
            raise SerializationError(f"Unable to serialize settings: {exc}", exc) from exc
        await self._in_worker(self._store, path, payload)

    @staticmethod
    def _load(path: Path) -> bytes:
        try:
            ensure_directory_exists(path.parent)
            # "a+b" creates the file if needed without truncating it
            with open(path, "a+b") as handle:
                handle.seek(0)
                return handle.read()
        except OSError as exc:
            raise ConfigIOError(f"Unable to read settings from {path}: {exc}", exc) from exc

    @staticmethod
    def _store(path: Path, payload: bytes) -> None:
        try:
            ensure_directory_exists(path.parent)
            write_atomic(path, payload)
        except OSError as exc:
            raise ConfigIOError(f"Unable to write settings to {path}: {exc}", exc) from exc
        logger.debug("Settings saved to %s", path)
