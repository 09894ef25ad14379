"""Run configuration.

BootstrapConfig gathers everything a run depends on (catalog, log
location, provisioning targets, prompt policy) so components receive it
explicitly instead of reading globals.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from winstrap.core.catalog import resolve_catalog
from winstrap.core.paths import build_provision_plan, get_log_path
from winstrap.models.app import AppDescriptor
from winstrap.models.provision import ProvisionPlan

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BootstrapConfig:
    """Settings for one bootstrap run.

    Attributes:
        apps: Applications to check, in order.
        log_path: Run log location.
        plan: Directories and links to provision.
        assume_yes: Answer every prompt with yes.
    """

    apps: tuple[AppDescriptor, ...]
    log_path: Path
    plan: ProvisionPlan
    assume_yes: bool = False


def build_config(
    apps_file: Path | None = None,
    log_path: Path | None = None,
    assume_yes: bool = False,
    home: Path | None = None,
) -> BootstrapConfig:
    """Build a BootstrapConfig from command-line style options.

    Args:
        apps_file: Catalog TOML file; None selects the user or built-in catalog.
        log_path: Log file override; None selects the default location.
        assume_yes: Answer every prompt with yes.
        home: Home directory override for provisioning targets.

    Returns:
        BootstrapConfig for the run.

    Raises:
        CatalogError: If the catalog file cannot be loaded.
    """
    catalog = resolve_catalog(apps_file)
    config = BootstrapConfig(
        apps=tuple(catalog.descriptors()),
        log_path=log_path or get_log_path(),
        plan=build_provision_plan(home),
        assume_yes=assume_yes,
    )
    logger.debug(
        "Config: %d app(s), log=%s, home=%s, assume_yes=%s",
        len(config.apps),
        config.log_path,
        config.plan.home,
        config.assume_yes,
    )
    return config
