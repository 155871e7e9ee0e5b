from __future__ import annotations
import os
from dataclasses import dataclass, replace
from typing import Any, Iterable, Mapping, Optional, Tuple

from routenav.errors import RouteNavConfigError

# Client settings live under this section (camelCase keys)
SETTINGS_SECTION = 'reactRouterNavigator'

# Defaults
DEFAULT_FILE_EXTENSIONS = ('.tsx', '.ts', '.jsx', '.js')
DEFAULT_EXCLUDE_FOLDERS = ('node_modules', 'dist', 'build', '.git', '.react-router')
DEFAULT_TRIGGER_PATTERNS = ('routes',)
DEFAULT_MAX_SEARCH_RESULTS = 3
DEFAULT_PROJECT_MARKERS = ('package.json', 'tsconfig.json', '.git')

_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off'}


def list_from_env(var: str, defaults: Iterable[str], environ: Optional[Mapping[str, str]] = None) -> Tuple[str, ...]:
    raw = (os.environ if environ is None else environ).get(var)
    if not raw:
        return tuple(defaults)
    return tuple(p.strip() for p in raw.split(os.pathsep) if p.strip())


def _int_from_env(var: str, default: int, environ: Mapping[str, str]) -> int:
    raw = environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RouteNavConfigError(f"{var} must be an integer, got {raw!r}") from None
    if value < 1:
        raise RouteNavConfigError(f"{var} must be a positive integer, got {raw!r}")
    return value


def _bool_from_env(var: str, default: bool, environ: Mapping[str, str]) -> bool:
    raw = environ.get(var)
    if not raw:
        return default
    val = raw.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    raise RouteNavConfigError(f"{var} must be a boolean, got {raw!r}")


def _str_list(key: str, value: Any) -> Tuple[str, ...]:
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise RouteNavConfigError(f"'{key}' must be a list of strings, got {value!r}")
    return tuple(value)


@dataclass(frozen=True)
class RouteNavConfig:
    file_extensions: Tuple[str, ...] = DEFAULT_FILE_EXTENSIONS
    exclude_folders: Tuple[str, ...] = DEFAULT_EXCLUDE_FOLDERS
    trigger_file_patterns: Tuple[str, ...] = DEFAULT_TRIGGER_PATTERNS
    max_search_results: int = DEFAULT_MAX_SEARCH_RESULTS
    enable_code_lens: bool = True
    project_markers: Tuple[str, ...] = DEFAULT_PROJECT_MARKERS

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> RouteNavConfig:
        env = os.environ if environ is None else environ
        return cls(
            file_extensions=list_from_env('ROUTENAV_FILE_EXTENSIONS', DEFAULT_FILE_EXTENSIONS, env),
            exclude_folders=list_from_env('ROUTENAV_EXCLUDE_FOLDERS', DEFAULT_EXCLUDE_FOLDERS, env),
            trigger_file_patterns=list_from_env('ROUTENAV_TRIGGER_PATTERNS', DEFAULT_TRIGGER_PATTERNS, env),
            max_search_results=_int_from_env('ROUTENAV_MAX_SEARCH_RESULTS', DEFAULT_MAX_SEARCH_RESULTS, env),
            enable_code_lens=_bool_from_env('ROUTENAV_ENABLE_CODE_LENS', True, env),
        )

    def with_settings(self, settings: Optional[Mapping[str, Any]]) -> RouteNavConfig:
        """Overlay client settings (camelCase keys, optionally nested under the section)."""
        if not settings:
            return self
        if not isinstance(settings, Mapping):
            raise RouteNavConfigError(f"settings must be an object, got {settings!r}")
        section = settings.get(SETTINGS_SECTION, settings)
        if not isinstance(section, Mapping):
            raise RouteNavConfigError(f"'{SETTINGS_SECTION}' must be an object, got {section!r}")

        changes: dict = {}
        if 'fileExtensions' in section:
            changes['file_extensions'] = _str_list('fileExtensions', section['fileExtensions'])
        if 'excludeFolders' in section:
            changes['exclude_folders'] = _str_list('excludeFolders', section['excludeFolders'])
        if 'triggerFilePatterns' in section:
            changes['trigger_file_patterns'] = _str_list('triggerFilePatterns', section['triggerFilePatterns'])
        if 'maxSearchResults' in section:
            value = section['maxSearchResults']
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise RouteNavConfigError(f"'maxSearchResults' must be a positive integer, got {value!r}")
            changes['max_search_results'] = value
        if 'enableCodeLens' in section:
            value = section['enableCodeLens']
            if not isinstance(value, bool):
                raise RouteNavConfigError(f"'enableCodeLens' must be a boolean, got {value!r}")
            changes['enable_code_lens'] = value
        return replace(self, **changes)


def load_config(settings: Optional[Mapping[str, Any]] = None,
                environ: Optional[Mapping[str, str]] = None) -> RouteNavConfig:
    return RouteNavConfig.from_env(environ).with_settings(settings)
