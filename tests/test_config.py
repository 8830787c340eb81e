import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from storefront.config import Settings


def test_settings_requires_database_url(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_loads_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@localhost/db")
    monkeypatch.setenv("STORAGE_ROOT", "/srv/storage")
    monkeypatch.setenv("RANDOM_SEED", "42")
    s = Settings(_env_file=None)
    assert s.database_url == "postgresql+asyncpg://u:p@localhost/db"
    assert s.storage_root == Path("/srv/storage")
    assert s.random_seed == 42


def test_settings_defaults(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@localhost/db")
    s = Settings(_env_file=None)
    assert s.database_echo is False
    assert s.public_disk == "public"
    assert s.log_level == "INFO"
    assert s.random_seed is None
    assert s.seed_targets.customers == 100_000
    assert s.seed_targets.blog_posts == 1_000_000
    assert s.seed_chunks.blog_posts == 5_000


def test_nested_seed_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@localhost/db")
    monkeypatch.setenv("SEED_TARGETS__BLOG_POSTS", "1000")
    monkeypatch.setenv("SEED_CHUNKS__CUSTOMERS", "250")
    s = Settings(_env_file=None)
    assert s.seed_targets.blog_posts == 1000
    assert s.seed_targets.orders == 500_000
    assert s.seed_chunks.customers == 250


def test_non_positive_target_rejected(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@localhost/db")
    monkeypatch.setenv("SEED_TARGETS__BRANDS", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_module_settings_built_at_import():
    from storefront.config import settings

    assert isinstance(settings, Settings)
    assert settings.database_url == os.environ["DATABASE_URL"]


def test_bulk_load_fk_checks_setting(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@localhost/db")
    assert Settings(_env_file=None).bulk_load_disable_fk_checks is True

    monkeypatch.setenv("BULK_LOAD_DISABLE_FK_CHECKS", "false")
    assert Settings(_env_file=None).bulk_load_disable_fk_checks is False
