import os
import yaml
from pathlib import Path
from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.errors import SetupError

CONFIG_ENV_VAR = "PMTR_SETUP_CONFIG"

DEFAULT_CONFIG_PATHS = [
    Path("/etc/pmtr/setup.yaml"),
    Path("/etc/pmtr/setup.conf"),
]


class SetupSettings(BaseModel):
    daemon: str = "pmtr"
    placeholder: str = Field(default="__SYSBINDIR__", min_length=1)
    # Searched in order, first hit wins
    bindir_candidates: List[str] = [
        "/bin",
        "/usr/bin",
        "/sbin",
        "/usr/sbin",
        "/usr/local/bin",
    ]
    template_dir: Optional[str] = None

    @field_validator("template_dir")
    @classmethod
    def template_dir_is_absolute(cls, value: Optional[str]) -> Optional[str]:
        if value and not os.path.isabs(value):
            raise ValueError("template_dir must be an absolute path")
        return value

    def resolve_template_dir(self) -> Path:
        """
        Directory holding the per init system templates.

        Defaults to the initscripts/ directory shipped next to this module,
        independent of the current working directory.
        """
        if self.template_dir:
            return Path(self.template_dir)
        return Path(__file__).resolve().parent / "initscripts"


def load_config_data(env_var: str, default_paths: List[Path]) -> Dict[str, Any]:
    """Load YAML settings from the env var path or the first existing default path"""
    candidates = []
    path = os.getenv(env_var)
    if path and Path(path).exists():
        candidates.append(Path(path))
    candidates.extend(p for p in default_paths if p.exists())

    if not candidates:
        return {}

    source = candidates[0]
    try:
        with open(source, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise SetupError(f"cannot load settings from {source}: {e}")

    if not isinstance(data, dict):
        raise SetupError(f"settings file {source} must contain a mapping")

    # relative to the settings file, never to the working directory
    template_dir = data.get("template_dir")
    if isinstance(template_dir, str) and template_dir and not os.path.isabs(template_dir):
        data["template_dir"] = str(source.resolve().parent / template_dir)
    return data


def load_settings(env_var: str = CONFIG_ENV_VAR,
                  default_paths: Optional[List[Path]] = None) -> SetupSettings:
    if default_paths is None:
        default_paths = DEFAULT_CONFIG_PATHS
    data = load_config_data(env_var, default_paths)
    try:
        return SetupSettings(**data)
    except ValidationError as e:
        raise SetupError(f"invalid settings: {e}")
