# -*- coding: utf-8 -*-
import logging


__version__ = "0.1.0"


class NullHandler(logging.Handler):
    """
    Null handler.

    c.f.
    http://docs.python.org/howto/logging.html#library-config
    """

    def emit(self, record):
        """Emit."""
        pass


hndlr = NullHandler()
logging.getLogger("rdfbridge").addHandler(hndlr)
logging.getLogger("rdflib").addHandler(hndlr)


from .rdf import *  # noqa: E402,F401,F403
from .rdf import __all__ as _rdf_all  # noqa: E402
from .config import ConfigurationError, RdfBridgeConfig, get_config, reload_config  # noqa: E402
from .utils.logging_utils import configure_logging, configure_logging_from_config  # noqa: E402

__all__ = list(_rdf_all) + [
    "ConfigurationError",
    "RdfBridgeConfig",
    "configure_logging",
    "configure_logging_from_config",
    "get_config",
    "reload_config",
]
