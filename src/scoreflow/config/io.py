# topmark:header:start
#
#   project      : ScoreFlow
#   file         : io.py
#   file_relpath : src/scoreflow/config/io.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""TOML I/O and value getters for ScoreFlow configuration.

ScoreFlow uses `tomlkit` for parsing and rendering:
    - `load_toml_dict()` parses an on-disk TOML file and returns plain dicts.
    - `to_toml()` renders a table (after stripping TOML-incompatible ``None`` values).
    - `load_defaults_dict()` returns the runtime defaults; it performs no I/O.

The *checked* getters validate the expected shape of a value and record a
warning message in the caller's diagnostics list instead of raising, so a
mistyped key in a config file is surfaced without crashing the loader.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from scoreflow.config.keys import Toml
from scoreflow.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from scoreflow.config.logging import ScoreflowLogger

TomlTable = dict[str, Any]

logger: ScoreflowLogger = get_logger(__name__)


# --- Type guards ---


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict[str, Any]``.
    """
    return isinstance(obj, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


# --- Checked getters ---


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: list[str],
) -> int | None:
    """Return an optional int value, warning when present but not `int`.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    if isinstance(value, int) and not isinstance(value, bool):
        return value

    logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.append(f"Expected int in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_float_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: list[str],
) -> float | None:
    """Return an optional float value, warning when present but not numeric.

    Integers are accepted and widened to ``float``; ``bool`` is rejected.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)

    logger.warning("Expected number in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.append(f"Expected number in {loc}, got {type(value).__name__}: {value!r}")
    return None


# --- Loading ---


def load_defaults_dict() -> TomlTable:
    """Return ScoreFlow's **runtime defaults** as a Python dict.

    The returned value is a new dict so callers can mutate it safely. The
    optional ``seed`` is absent by default (TOML has no null).
    """
    return {
        Toml.SECTION_GENERATION: {
            Toml.KEY_COUNT: 30,
            Toml.KEY_MEAN: 70.0,
            Toml.KEY_STDDEV: 30.0,
            Toml.KEY_FAULT_ODDS: 20,
            Toml.KEY_RETRY_DELAY_MS: 5.0,
        },
        Toml.SECTION_SCORES: {
            Toml.KEY_MIN: 0.0,
            Toml.KEY_MAX: 100.0,
        },
        Toml.SECTION_THRESHOLDS: {
            Toml.KEY_PASS: 60.0,
            Toml.KEY_EXCELLENT: 85.0,
        },
    }


def load_toml_dict(path: Path) -> tuple[TomlTable, Exception | None]:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        tuple[TomlTable, Exception | None]: The parsed content and ``None``, or an
            empty dict and the exception raised while reading or parsing.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return (cast("TomlTable", data_any) if isinstance(data_any, dict) else {}), None
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}, e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}, e


# --- Rendering ---


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists."""
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none_for_toml(v) for k, v in m.items() if v is not None}
    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))
