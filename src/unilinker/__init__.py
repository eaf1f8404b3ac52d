from unilinker.config import ServerConfig, load_server_config
from unilinker.errors import UniversityNotFoundError
from unilinker.links import DeepLinkResult, build_deep_link, build_web_link, resolve
from unilinker.registry import DEFAULT_UNIVERSITIES, University, UniversityRegistry, build_registry

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_UNIVERSITIES",
    "DeepLinkResult",
    "ServerConfig",
    "University",
    "UniversityNotFoundError",
    "UniversityRegistry",
    "__version__",
    "build_deep_link",
    "build_registry",
    "build_web_link",
    "load_server_config",
    "resolve",
]
