"""Application catalog loading and saving.

The catalog is the literal mapping of application name to winget package
id that the install checker works through. A built-in default is used
unless a TOML file overrides it:

    [apps]
    Git = "Git.Git"
    Neovim = "Neovim.Neovim"
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from winstrap.core.errors import CatalogError, CatalogNotFoundError, CatalogParseError
from winstrap.core.paths import get_catalog_path
from winstrap.models.app import AppDescriptor, has_control_characters

logger = logging.getLogger(__name__)

DEFAULT_APPS: dict[str, str] = {
    "Git": "Git.Git",
    "PowerShell": "Microsoft.PowerShell",
    "Windows Terminal": "Microsoft.WindowsTerminal",
    "Neovim": "Neovim.Neovim",
    "Starship": "Starship.Starship",
    "WezTerm": "wez.wezterm",
    "fzf": "junegunn.fzf",
    "ripgrep": "BurntSushi.ripgrep.MSVC",
    "zoxide": "ajeetdsouza.zoxide",
    "eza": "eza-community.eza",
    "7-Zip": "7zip.7zip",
}


class AppCatalog(BaseModel):
    """Ordered mapping of application name to package id.

    Attributes:
        apps: Application name -> winget package id, in check order.
    """

    model_config = ConfigDict(extra="forbid")

    apps: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_APPS),
        description="Application name to winget package id",
    )

    @field_validator("apps")
    @classmethod
    def validate_apps(cls, v: dict[str, str]) -> dict[str, str]:
        """Reject blank entries and names that differ only by case."""
        seen: set[str] = set()
        cleaned: dict[str, str] = {}
        for name, package_id in v.items():
            name = name.strip()
            package_id = package_id.strip()
            if not name:
                msg = "application name cannot be empty"
                raise ValueError(msg)
            if not package_id:
                msg = f"package id for '{name}' cannot be empty"
                raise ValueError(msg)
            if has_control_characters(name) or has_control_characters(package_id):
                msg = f"application {name!r} contains control characters"
                raise ValueError(msg)
            key = name.casefold()
            if key in seen:
                msg = f"duplicate application name '{name}'"
                raise ValueError(msg)
            seen.add(key)
            cleaned[name] = package_id
        return cleaned

    def descriptors(self) -> list[AppDescriptor]:
        """Return the catalog as application descriptors, in order."""
        return [AppDescriptor(name=n, package_id=p) for n, p in self.apps.items()]

    def __len__(self) -> int:
        return len(self.apps)


def default_catalog() -> AppCatalog:
    """Create the built-in catalog."""
    return AppCatalog()


def load_catalog(path: Path) -> AppCatalog:
    """Load and validate a catalog from a TOML file.

    Args:
        path: Path to the catalog file.

    Returns:
        Validated AppCatalog.

    Raises:
        CatalogNotFoundError: If the file doesn't exist.
        CatalogParseError: If the TOML syntax is invalid.
        CatalogError: If the content doesn't match the schema.
    """
    if not path.exists():
        raise CatalogNotFoundError(f"Application catalog not found: {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise CatalogParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise CatalogError(f"Failed to read application catalog: {e}") from e

    if "apps" not in data:
        raise CatalogError(f"Missing [apps] table in {path}")

    try:
        catalog = AppCatalog.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Invalid application catalog content: {e}") from e

    logger.debug("Loaded %d application(s) from %s", len(catalog), path)
    return catalog


def resolve_catalog(path: Path | None = None) -> AppCatalog:
    """Pick the catalog for this run.

    An explicit path must exist. Without one, the user's
    ~/.config/winstrap/apps.toml is used if present, otherwise the
    built-in default.

    Args:
        path: Explicit catalog file, e.g. from --apps.

    Returns:
        The catalog to use.

    Raises:
        CatalogError: If the chosen file cannot be loaded.
    """
    if path is not None:
        return load_catalog(path)

    user_path = get_catalog_path()
    if user_path.exists():
        return load_catalog(user_path)

    logger.debug("No catalog file found, using built-in default")
    return default_catalog()


def save_catalog(catalog: AppCatalog, path: Path) -> Path:
    """Save a catalog to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        catalog: The catalog to save.
        path: Destination file.

    Returns:
        Path where the catalog was saved.

    Raises:
        CatalogError: If the file cannot be written.
    """
    tmp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump({"apps": dict(catalog.apps)}, f)
        os.replace(str(tmp_path), str(path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise CatalogError(f"Failed to write application catalog: {e}") from e

    return path
