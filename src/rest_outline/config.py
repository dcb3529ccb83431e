"""TOML config loader and validation."""

import codecs
import tomllib
from dataclasses import dataclass
from pathlib import Path

from rest_outline.constants import KIND_NAMES, KINDS, REST_EXTENSIONS

CONFIG_DIR = ".rest_outline"
_DEFAULT_ENCODING = "utf-8"
_DEFAULT_FORMAT = "tags"
_DEFAULT_MAX_FILE_SIZE = 1_048_576


@dataclass(frozen=True)
class ScanConfig:
    encoding: str = _DEFAULT_ENCODING
    extensions: tuple[str, ...] = REST_EXTENSIONS
    max_file_size: int = _DEFAULT_MAX_FILE_SIZE


def load_config(root: Path) -> dict | None:
    """Load .rest_outline/config.toml. Returns None if the file doesn't exist."""
    config_file = root / CONFIG_DIR / "config.toml"
    if not config_file.exists():
        return None
    with open(config_file, "rb") as f:
        return tomllib.load(f)


def _optional_section(config: dict | None, section: str) -> dict:
    """Return a config table, {} if absent. Raises if present but not a table."""
    if config is None:
        return {}
    value = config.get(section)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(
            f"[{section}] in config.toml must be a table, got {type(value).__name__}"
        )
    return value


def require_scan_config(config: dict | None) -> ScanConfig:
    """Extract [scan] with defaults for missing keys."""
    section = _optional_section(config, "scan")

    encoding = section.get("encoding", _DEFAULT_ENCODING)
    try:
        codecs.lookup(encoding)
    except (LookupError, TypeError) as e:
        raise ValueError(f"Unknown encoding {encoding!r} in [scan] config") from e
    # hex, base64, zlib etc. resolve but can't decode bytes to str
    try:
        b"".decode(encoding)
    except LookupError as e:
        raise ValueError(
            f"[scan] encoding {encoding!r} is not a text encoding"
        ) from e

    extra = section.get("extensions", [])
    if not isinstance(extra, list) or not all(isinstance(x, str) for x in extra):
        raise ValueError("[scan] extensions must be a list of strings, e.g. [\".rst\"]")
    extensions = tuple(dict.fromkeys(REST_EXTENSIONS + tuple(
        x if x.startswith(".") else f".{x}" for x in extra
    )))

    max_file_size = section.get("max_file_size", _DEFAULT_MAX_FILE_SIZE)
    if not isinstance(max_file_size, int) or isinstance(max_file_size, bool) or max_file_size <= 0:
        raise ValueError(
            f"[scan] max_file_size must be a positive integer, got {max_file_size!r}"
        )

    return ScanConfig(encoding=encoding, extensions=extensions, max_file_size=max_file_size)


def require_enabled_kinds(config: dict | None) -> frozenset[str]:
    """Extract [kinds] as the set of enabled kind names. Every kind is on by default."""
    section = _optional_section(config, "kinds")
    unknown = set(section) - KIND_NAMES
    if unknown:
        raise ValueError(
            f"Unknown kind(s) {', '.join(sorted(unknown))} in [kinds] config. "
            f"Valid options: {', '.join(k.name for k in KINDS)}"
        )
    enabled = set()
    for kind in KINDS:
        value = section.get(kind.name, True)
        if not isinstance(value, bool):
            raise ValueError(f"[kinds] {kind.name} must be true or false, got {value!r}")
        if value:
            enabled.add(kind.name)
    return frozenset(enabled)


def require_output_format(config: dict | None) -> str:
    """Extract [output] format, defaulting to tags."""
    from rest_outline.formatters import FORMATTERS

    section = _optional_section(config, "output")
    fmt = section.get("format", _DEFAULT_FORMAT)
    if fmt not in FORMATTERS:
        raise ValueError(
            f"Unknown format {fmt!r} in [output] config. "
            f"Valid options: {', '.join(sorted(FORMATTERS))}"
        )
    return fmt


def create_default_config(root: Path) -> Path:
    """Create a default config.toml in .rest_outline/. Returns the path."""
    config_dir = root / CONFIG_DIR
    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / "config.toml"
    if config_path.exists():
        raise FileExistsError(f"Config already exists: {config_path}")
    config_path.write_text(
        '[scan]\n'
        'encoding = "utf-8"\n'
        '# Extra extensions on top of .rest / *.reST\n'
        '# extensions = [".rst", ".txt"]\n'
        'max_file_size = 1048576\n'
        '\n'
        '# Heading kinds to emit. Disabled kinds still take part in nesting:\n'
        '# their children attach to the nearest enabled ancestor.\n'
        '[kinds]\n'
        'chapter = true\n'
        'section = true\n'
        'subsection = true\n'
        'subsubsection = true\n'
        '\n'
        '[output]\n'
        'format = "tags"  # options: tags, json, tree\n'
    )
    return config_path
