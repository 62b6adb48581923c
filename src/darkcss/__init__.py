"""darkcss: regenerate dark-theme override rules from upstream stylesheets."""
from __future__ import annotations

__version__ = "0.1.0"

from darkcss.config import DeviceProfile, GeneratorConfig, Source, load_config  # noqa: E402
from darkcss.pipeline import Generator  # noqa: E402

__all__ = [
    "__version__",
    "DeviceProfile",
    "GeneratorConfig",
    "Generator",
    "Source",
    "load_config",
]
