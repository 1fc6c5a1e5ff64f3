# Common utilities
from .config_loader import (
    build_keyword_table,
    get_category_keys,
    get_category_labels,
    load_categories,
    load_config,
    load_settings,
)
from .csv_utils import clean_csv_field, read_csv_rows, split_csv_line
from .log_config import setup_logging
from .text_utils import (
    coerce_price,
    field_text,
    format_price,
    is_web_url,
    parse_leading_float,
    parse_leading_int,
)
