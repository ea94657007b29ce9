from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from covid_dash.config.model import GlobalConfig
from covid_dash.core.dataset import Dataset
from covid_dash.core.view_registry import ViewRegistry


@dataclass
class AppConfig:
    """
    Shared context for the Dash app: config, the loaded dataset and the
    view registry. Passed into layout + callback registration instead of
    using module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    dataset: Dataset
    registry: Optional[ViewRegistry] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
