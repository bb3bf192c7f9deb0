# src/rollingbuffer/__init__.py
"""rollingbuffer: a fixed-capacity, lossy FIFO buffer for live data windows.

The buffer keeps only the most recent N values of any type and drops the
oldest one once it is full. It is meant to feed plots and other consumers
that only care about the latest samples.

Modules:
- `buffer`: The `RollingBuffer` container and its capacity error.
- `config`: Dataclass settings loaded from an optional TOML file.
- `logging_config`: Loguru setup shared by the demo and applications.
- `demo`: A small driver that fills a buffer and prints its views.
"""

import importlib.metadata

from rollingbuffer.buffer import InvalidCapacityError, RollingBuffer

try:
    __version__: str = importlib.metadata.version("rollingbuffer")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout that has not been installed.
    __version__ = "0.0.0-dev"

__all__ = ["InvalidCapacityError", "RollingBuffer", "__version__"]
