from .get_endpoint import get_endpoint, normalize_path, path_segment, query_params  # noqa: F401
from .response_utils import parse_json_body, pretty_json  # noqa: F401
