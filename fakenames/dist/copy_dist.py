import shutil
import sys
from pathlib import Path

from fakenames.config.settings import Settings
from fakenames.exceptions import FakeNamesError, NotFoundError
from fakenames.logging.logger import Log
from fakenames.main import load_settings, project_root


def _remove(path: Path) -> None:
    # A missing target is fine; anything else that blocks removal is an error.
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink(missing_ok=True)


def copy_ui_dist(root: Path, settings: Settings) -> Path:
    """Replace the desktop app's bundled UI with a fresh copy of the UI build.

    Returns:
        The target directory the UI dist was copied to.

    Raises:
        NotFoundError: if the UI dist has not been built.
        OSError: if the previous copy cannot be removed or the copy fails.
    """
    ui_dist = (root / settings.dist_relative_path).resolve()
    app_ui_dist = root.resolve() / settings.app_dist_relative_path

    if not ui_dist.is_dir():
        raise NotFoundError(f"UI dist not found. Build UI first: {ui_dist}")

    _remove(app_ui_dist)
    app_ui_dist.parent.mkdir(parents=True, exist_ok=True)
    shutil.copytree(ui_dist, app_ui_dist)

    Log.summary(f"Copied UI dist to {app_ui_dist}")
    return app_ui_dist


def main() -> int:
    """Entry point for the copy-ui-dist build step."""
    try:
        settings = load_settings()
        copy_ui_dist(project_root(settings), settings)
    except (FakeNamesError, OSError) as exc:
        Log.error(f"Failed: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
