import os
from dotenv import load_dotenv

load_dotenv()

from .telemetry.log import get_logger, bound_logging_vars
from .schema.config import filter_value_from_env, filter_value_from_yaml, load_server_config


CONFIG_FILE_PATH = os.getenv("CONFIG_FILE_PATH", "config.yaml")

if not os.path.exists(CONFIG_FILE_PATH):
    CONFIG_YAML_STRING = ""
else:
    with open(CONFIG_FILE_PATH) as f:
        CONFIG_YAML_STRING = f.read()

ENV_VARS = filter_value_from_env()
YAML_VARS = filter_value_from_yaml(CONFIG_YAML_STRING)
CONFIG = load_server_config(ENV_VARS, YAML_VARS)
LOG = get_logger(CONFIG.logging_format, CONFIG.logging_level)

if not os.path.exists(CONFIG_FILE_PATH):
    LOG.warning(f"Your config yaml is not exist: {CONFIG_FILE_PATH}")

LOG.info(f"CONFIG: [{CONFIG}]")
