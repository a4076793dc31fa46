from pathlib import Path

from pawpost.core.config import Settings


def make_settings(tmp_dir, **overrides) -> Settings:
    """Settings for a throwaway SQLite database inside `tmp_dir`."""
    tmp_dir = Path(tmp_dir)
    values = dict(
        database_url=f"sqlite:///{tmp_dir / 'test.db'}",
        static_dir=tmp_dir / "dist",
        bcrypt_rounds=4,
        rate_limit_enabled=False,
    )
    values.update(overrides)
    return Settings(**values)
