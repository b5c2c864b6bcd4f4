from .data_path import (
    SEPARATOR,
    data_get,
    data_set,
    is_container_marker,
    qualify,
    snake_name,
    to_dotted,
)
