# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial
import copy
from pathlib import Path
from typing import Any, Dict, List, Optional
try:
    import tomllib
except ImportError:
    import tomli as tomllib

from .audit import FAIL_ON_CHOICES, RULE_IDS

CONFIG_FILENAME = "html-aria.toml"

# Default configuration structure
DEFAULT_CONFIG = {
    "audit": {
        "ignore": [],  # rule ids to drop from reports
        "fail_on": "fail",
        "include": ["*.html", "*.htm"],
    },
    "output": {
        "json": False,
        "indent": 2,
    },
}


class ConfigError(ValueError):
    def __init__(self, message: str, *, path: Optional[Path] = None, key: Optional[str] = None):
        super().__init__(message)
        self.path = path
        self.key = key


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for section, values in overrides.items():
        if isinstance(values, dict) and isinstance(out.get(section), dict):
            out[section].update(values)
        else:
            out[section] = values
    return out


class Config:
    def __init__(self, data: Dict[str, Any], path: Optional[Path] = None):
        self.data = _merge(DEFAULT_CONFIG, data)
        self.path = path
        self.root = path.parent if path is not None else Path.cwd()
        self._validate()

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load configuration from html-aria.toml or pyproject.toml [tool.html-aria].

        With no explicit path, a missing file is not an error: the defaults apply.
        """
        if path is not None:
            path = Path(path)
            if not path.exists():
                raise FileNotFoundError(f"No config file found at {path}.")
            return cls(cls._read(path), path)

        cwd = Path.cwd()
        candidate = cwd / CONFIG_FILENAME
        if candidate.exists():
            return cls(cls._read(candidate), candidate)
        pyproject = cwd / "pyproject.toml"
        if pyproject.exists():
            table = cls._read(pyproject).get("tool", {}).get("html-aria")
            if table is not None:
                return cls(table, pyproject)
        return cls({}, None)

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse {path}: {e}", path=path) from e
        return data

    def _validate(self) -> None:
        for section in ("audit", "output"):
            if not isinstance(self.data.get(section), dict):
                raise ConfigError(f"[{section}] must be a table", path=self.path, key=section)
        fail_on = self.audit.get("fail_on")
        if fail_on not in FAIL_ON_CHOICES:
            raise ConfigError(
                f"audit.fail_on must be one of {', '.join(FAIL_ON_CHOICES)}; got {fail_on!r}",
                path=self.path,
                key="audit.fail_on",
            )
        ignore = self.audit.get("ignore")
        if not isinstance(ignore, list) or not all(isinstance(r, str) for r in ignore):
            raise ConfigError("audit.ignore must be a list of rule ids", path=self.path, key="audit.ignore")
        unknown = sorted(set(ignore) - set(RULE_IDS))
        if unknown:
            raise ConfigError(f"audit.ignore names unknown rules: {', '.join(unknown)}", path=self.path, key="audit.ignore")
        indent = self.output.get("indent")
        if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
            raise ConfigError("output.indent must be a non-negative integer", path=self.path, key="output.indent")

    @property
    def audit(self) -> Dict[str, Any]:
        return self.data.get("audit", {})

    @property
    def output(self) -> Dict[str, Any]:
        return self.data.get("output", {})

    def resolve_path(self, relative_path: str) -> Path:
        return self.root / relative_path

    # Helpers for common fields
    def get_ignore_rules(self) -> List[str]:
        return list(self.audit.get("ignore", []))

    def get_fail_on(self) -> str:
        return self.audit.get("fail_on", "fail")

    def get_include_patterns(self) -> List[str]:
        include = self.audit.get("include", ["*.html", "*.htm"])
        if isinstance(include, str):
            include = [include]
        return list(include)

    def get_json_output(self) -> bool:
        return bool(self.output.get("json", False))

    def get_indent(self) -> int:
        return int(self.output.get("indent", 2))
