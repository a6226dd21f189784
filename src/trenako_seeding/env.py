import os

from dotenv import load_dotenv

load_dotenv()

SOURCE_ENVVAR = "TRENAKO_SEEDING_SOURCE"
MAX_DEPTH_ENVVAR = "TRENAKO_SEEDING_MAX_DEPTH"
DEFAULT_MAX_DEPTH = 4


def get_max_depth() -> int:
    raw = os.environ.get(MAX_DEPTH_ENVVAR)
    if raw is None or not raw.strip():
        return DEFAULT_MAX_DEPTH

    try:
        depth = int(raw)
    except ValueError as e:
        raise ValueError(f"{MAX_DEPTH_ENVVAR} must be an integer, got '{raw}'.") from e

    if depth < 1:
        raise ValueError(f"{MAX_DEPTH_ENVVAR} must be at least 1, got {depth}.")

    return depth
