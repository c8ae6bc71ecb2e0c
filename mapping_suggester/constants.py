class Defaults:
    FUZZY_THRESHOLD = 0.5
    FUZZY_SCALE = 0.7
    CONFIG_FILE = "mapping_suggester.toml"


class Confidence:
    EXACT = 1.0
    SNAKE_CASE = 0.9
    CAMEL_CASE = 0.8


class BuilderPriority:
    EMAIL = 80
    PHONE = 80
    URL = 80
    ID = 75
    NAME = 70
    ADDRESS = 70
    DATETIME = 70
    NUMERIC = 60
    GENERIC = 0


class Patterns:
    CAMEL_CASE_WORD = "^[a-z][a-zA-Z0-9]*$"
    CAMEL_CASE_BOUNDARY = "[a-z][A-Z]"
    NON_ALPHANUMERIC_RUN = "[^a-z0-9]+"
    # "column_" before "col_" so "column_total" cleans to "total", not "umn_total"
    NAME_PREFIX = "^(field_?|column_?|col_?)"
    NAME_SUFFIX = "(_?field|_?column|_?col)$"


class OutputFormats:
    TABLE = "table"
    JSON = "json"
