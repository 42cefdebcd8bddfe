# densitybox/dataloader/__init__.py

from .dataloader_script import (
    PlotConfig,
    get_config,
    load_sample,
    read_data,
)

__all__ = [
    "PlotConfig",
    "get_config",
    "load_sample",
    "read_data",
]
