"""Library defaults and the optional project file (.corestr/config.yaml)."""

import os
import sys
import tempfile
from dataclasses import dataclass, field, asdict
from pathlib import Path

import yaml


def default_wchar_width() -> int:
    """Width in bytes of a wide character on this platform."""
    return 2 if sys.platform == "win32" else 4


@dataclass
class StringsConfig:
    """Tunable defaults shared by the formatter and the string helpers."""
    guess_factor: int = 2
    wchar_width: int = field(default_factory=default_wchar_width)

    def __post_init__(self):
        if isinstance(self.guess_factor, bool) or not isinstance(self.guess_factor, int):
            raise ValueError(f"guess_factor must be an integer, got {self.guess_factor!r}")
        if self.guess_factor < 1:
            raise ValueError(f"guess_factor must be >= 1, got {self.guess_factor}")
        if self.wchar_width not in (2, 4):
            raise ValueError(f"wchar_width must be 2 or 4, got {self.wchar_width!r}")


def config_path(project_dir: str = ".") -> Path:
    return Path(project_dir) / ".corestr" / "config.yaml"


def load_config(project_dir: str = ".") -> StringsConfig:
    """Load settings from .corestr/config.yaml.

    Returns defaults on a missing or corrupted file. Unknown keys are
    ignored; invalid values raise ValueError.
    """
    path = config_path(project_dir)
    if not path.exists():
        return StringsConfig()

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        print(
            f"Warning: corrupted {path}, using defaults: {e}",
            file=sys.stderr,
        )
        return StringsConfig()

    if not isinstance(data, dict):
        print(
            f"Warning: {path} is not a mapping, using defaults",
            file=sys.stderr,
        )
        return StringsConfig()

    known = {k: data[k] for k in ("guess_factor", "wchar_width") if k in data}
    return StringsConfig(**known)


def save_config(config: StringsConfig, project_dir: str = ".") -> Path:
    """Write settings to .corestr/config.yaml atomically."""
    path = config_path(project_dir)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_path = tempfile.mkstemp(
        dir=path.parent,
        suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w") as f:
            yaml.dump(asdict(config), f, default_flow_style=False, sort_keys=False)
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise

    return path
