import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from fakenames.config.settings import Settings
from fakenames.exceptions import ConfigError, FakeNamesError
from fakenames.logging.logger import Log
from fakenames.runner.models import RunOptions
from fakenames.runner.runner import build_runner

DEFAULT_ROOT = Path(__file__).resolve().parent.parent


def project_root(settings: Settings) -> Path:
    """Project root: PROJECT_ROOT when set, otherwise the directory holding this package."""
    return settings.project_root if settings.project_root is not None else DEFAULT_ROOT


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fake-names",
        description="Replace real jumper names with fake ones in the built UI.",
    )
    parser.add_argument("--dist", type=Path, help="Dist folder to rewrite")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Count replacements without writing files",
    )
    parser.add_argument(
        "--release",
        action="store_true",
        help="Run even when NODE_ENV is not production",
    )
    return parser.parse_args(argv)

def load_settings() -> Settings:
    """Read settings and configure logging from them.

    Raises:
        ConfigError: if a setting from the environment is invalid. Logging is
            configured with defaults first so the failure can still be reported.
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        Log.configure("INFO")
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigError(f"Invalid settings: {problems}") from exc
    Log.configure(settings.log_level)
    return settings


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: read settings -> resolve options -> run -> report."""
    args = _parse_args(argv)

    try:
        settings = load_settings()
        options = RunOptions(
            root=project_root(settings),
            dist_override=args.dist,
            dry_run=args.dry_run,
            release=args.release or settings.is_production,
        )
        build_runner(settings).run(options)
    except (FakeNamesError, OSError) as exc:
        Log.error(f"Failed: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
