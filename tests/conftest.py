"""Shared pytest fixtures for domain, adapter and CLI tests.

Fixtures use descriptive names that read as plain English; tests pick them
up implicitly via pytest's conftest discovery.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

if TYPE_CHECKING:
    from page_title.adapters.memory.translation import ResolverSpy
    from page_title.composition import AppServices

_COVERAGE_BASENAME = ".coverage.page_title"


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    SQLite needs POSIX locking, which network mounts do not reliably provide,
    and stale journal files from a crashed run lock the next one.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        for suffix in ("", "-journal", "-wal", "-shm"):
            with contextlib.suppress(FileNotFoundError):
                Path(str(cov_path) + suffix).unlink()
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load the project .env file when it exists."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when asserting on command output so log records on
    stderr do not interfere.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory (real adapters)."""
    from page_title.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test.

    Only clears before, since a test may monkeypatch get_config away.
    """
    from page_title.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts, without file I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    """Create SourceInfo dicts for provenance-tracking tests."""

    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


@pytest.fixture
def german_title_data() -> dict[str, Any]:
    """A ``[page_title]`` section with English and German catalogs."""
    return {
        "page_title": {
            "postfix_key": "Super Application",
            "locale": "de",
            "fallback_locale": "en",
            "translations": {
                "en": {"Super Application": "Super App", "Help": "Help"},
                "de": {"Super Application": "Super Anwendung"},
            },
        }
    }


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory.

    Only the ``get_config`` I/O boundary is replaced; every other service is
    the production adapter.
    """
    from page_title.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            load_title_config_from_dict=prod.load_title_config_from_dict,
            build_text_resolver=prod.build_text_resolver,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every profile it receives."""
    from page_title.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_capturing_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            load_title_config_from_dict=prod.load_title_config_from_dict,
            build_text_resolver=prod.build_text_resolver,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _inject


@dataclass
class TitleCliContext:
    """Services factory plus the resolver spy it hands out."""

    factory: Callable[[], Any]
    spy: ResolverSpy


@pytest.fixture
def title_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], TitleCliContext]:
    """Return a function building a services factory around a ResolverSpy.

    The spy is seeded with the given translations; config comes from an
    empty in-memory Config so ``[page_title]`` defaults apply.
    """
    from page_title.adapters.memory import ResolverSpy as ResolverSpyImpl
    from page_title.adapters.memory import reuse_resolver_spy
    from page_title.composition import AppServices, build_production

    def _create(translations: dict[str, str]) -> TitleCliContext:
        spy = ResolverSpyImpl(translations=dict(translations))
        config = Config({}, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            load_title_config_from_dict=prod.load_title_config_from_dict,
            build_text_resolver=reuse_resolver_spy(spy),
            init_logging=prod.init_logging,
        )
        return TitleCliContext(factory=lambda: test_services, spy=spy)

    return _create
