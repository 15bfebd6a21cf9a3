"""Formatting options and the YAML config file they can be loaded from."""

import dataclasses
from enum import Enum
from pathlib import Path
from typing import Optional, Union

import yaml

from printable_shell_command.errors import ConfigError

DEFAULT_MAIN_INDENTATION = ""
DEFAULT_ARG_INDENTATION = "  "


class Quoting(str, Enum):
    # Quote only the tokens that contain a shell-unsafe character.
    AUTO = "auto"
    # Quote every token, even ones that don't need it.
    EXTRA_SAFE = "extra-safe"


class ArgumentLineWrapping(str, Enum):
    BY_ENTRY = "by-entry"
    NESTED_BY_ENTRY = "nested-by-entry"
    BY_ARGUMENT = "by-argument"
    INLINE = "inline"


@dataclasses.dataclass(frozen=True)
class FormattingOptions:
    main_indentation: str = DEFAULT_MAIN_INDENTATION
    arg_indentation: str = DEFAULT_ARG_INDENTATION
    quoting: Quoting = Quoting.AUTO
    # Line wrapping to use between arguments.
    argument_line_wrapping: ArgumentLineWrapping = ArgumentLineWrapping.BY_ENTRY

    def replace(self, **overrides) -> "FormattingOptions":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes)

    def as_rows(self) -> list[tuple[str, str]]:
        rows = []
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if isinstance(value, Enum):
                value = value.value
            else:
                value = repr(value)
            rows.append((field.name, value))
        return rows


_KEY_ALIASES = {"line_wrapping": "argument_line_wrapping"}
_ENUM_FIELDS = {
    "quoting": Quoting,
    "argument_line_wrapping": ArgumentLineWrapping,
}


def options_from_dict(config_dict: dict) -> FormattingOptions:
    known = {f.name for f in dataclasses.fields(FormattingOptions)}
    kwargs = {}

    for key, value in config_dict.items():
        name = _KEY_ALIASES.get(key, key)
        if name not in known:
            raise ConfigError(f"Unknown formatting option: {key}")

        if name in _ENUM_FIELDS:
            enum_cls = _ENUM_FIELDS[name]
            if isinstance(value, enum_cls):
                kwargs[name] = value
                continue
            try:
                value = enum_cls(str(value).replace("_", "-").lower())
            except ValueError:
                choices = ", ".join(e.value for e in enum_cls)
                raise ConfigError(
                    f"Invalid value for {key}: {value!r} (expected one of {choices})"
                ) from None
        elif not isinstance(value, str):
            raise ConfigError(f"{key} must be a string, got {value!r}")

        kwargs[name] = value

    return FormattingOptions(**kwargs)


def load_options(config: Optional[Union[str, Path]]) -> FormattingOptions:
    """Load options from a YAML file; a missing or empty file gives defaults."""
    if config is None:
        return FormattingOptions()

    path = Path(config)
    if not path.exists():
        return FormattingOptions()

    with path.open("r", encoding="utf-8") as f:
        try:
            config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if config_dict is None:
        return FormattingOptions()
    if not isinstance(config_dict, dict):
        raise ConfigError(f"Expected a mapping in {path}")

    return options_from_dict(config_dict)
