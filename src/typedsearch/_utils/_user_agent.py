from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version

from .constants import USER_AGENT_PRODUCT


@lru_cache(maxsize=1)
def user_agent_value() -> str:
    try:
        package_version = version("typedsearch")
    except PackageNotFoundError:
        package_version = "unknown"
    return f"{USER_AGENT_PRODUCT}/{package_version}"
