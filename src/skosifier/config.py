"""Config module to share settings across all modules in skosifier."""

import logging
import sys
from pathlib import Path
from typing import Annotated, Literal

from pydantic import (
    BaseModel,
    Field,
    StringConstraints,
    ValidationError,
    field_validator,
)
from typing_extensions import Self

from skosifier.checks import SkosifierError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

OutputFormat = Literal["nt", "ttl", "rdf", "jsonld"]


class Settings(BaseModel):
    # Reading the input table
    delimiter: Annotated[str, StringConstraints(min_length=1, max_length=1)] = ";"
    encoding: str = "utf-8"

    # Whole-graph output, one file "skos.<format>" per entry
    formats: list[OutputFormat] = ["nt", "ttl"]

    # One file per concept in a subdirectory of the output directory
    per_concept: bool = False
    per_concept_format: OutputFormat = "ttl"
    per_concept_dir: Annotated[str, Field(min_length=1)] = "ttl"

    # Simple html table views
    html: bool = False
    html_dir: Annotated[str, Field(min_length=1)] = "html"

    @field_validator("formats")
    @classmethod
    def formats_not_empty(cls, value):
        if not value:
            msg = "At least one output format is required."
            raise ValueError(msg)
        # drop duplicates but keep the order
        return list(dict.fromkeys(value))

    def updated(self, **changes) -> Self:
        """Return a validated copy with all non-None changes applied."""
        data = self.model_dump()
        data.update({k: v for k, v in changes.items() if v is not None})
        return self.__class__(**data)


# Updated by load_config.
SETTINGS = Settings()


def load_config(config_file: Path | None = None, settings: Settings | None = None):
    """
    Load settings from a toml file or from a Settings instance.

    The toml file must contain a [skosifier] table. Without arguments the
    default settings are restored. Raises SkosifierError if the toml file
    cannot be parsed or contains invalid settings.
    """
    global SETTINGS  # noqa: PLW0603
    if config_file is not None and not config_file.exists():
        logger.warning('Configuration file "%s" not found.', config_file)
    if settings is not None:
        new_settings = Settings.model_validate(settings.model_dump())
        logger.debug("Refreshing global state of config.")
    elif config_file is not None and config_file.exists():
        try:
            with config_file.open(mode="rb") as fp:
                conf = tomllib.load(fp)
            new_settings = Settings(**conf.get("skosifier", {}))
        except (tomllib.TOMLDecodeError, ValidationError) as exc:
            msg = 'Invalid config file "%s": %s'
            raise SkosifierError(msg % (config_file, exc)) from exc
        logger.debug("Config loaded from: %s", config_file)
    else:
        new_settings = Settings()
        logger.debug("Initializing default config.")
    SETTINGS = new_settings
    return SETTINGS
