import os
import yaml
from pydantic import BaseModel
from typing import Literal, Any, Type


class ServerConfig(BaseModel):
    # Craft Configuration
    craft_base_url: str
    craft_timeout: float = 10.0

    # Server Configuration
    server_host: str = "localhost"
    server_port: int = 8080
    query_path: str = "/craft-hackathon"

    logging_format: Literal["text", "json"] = "text"
    logging_level: str = "INFO"


def filter_value_from_env(CLS: Type[BaseModel] = ServerConfig) -> dict[str, Any]:
    config_keys = CLS.model_fields.keys()
    env_already_keys = {}
    for key in config_keys:
        value = os.getenv(key.upper(), None)
        if value is None:
            continue
        env_already_keys[key] = value
    return env_already_keys


def filter_value_from_yaml(yaml_string, CLS: Type[BaseModel] = ServerConfig) -> dict[str, Any]:
    yaml_config_data: dict | None = yaml.safe_load(yaml_string)
    if yaml_config_data is None:
        return {}

    yaml_already_keys = {}
    config_keys = CLS.model_fields.keys()
    for key in config_keys:
        value = yaml_config_data.get(key, None)
        if value is None:
            continue
        yaml_already_keys[key] = value
    return yaml_already_keys


def load_server_config(env_vars: dict[str, Any], yaml_vars: dict[str, Any]) -> ServerConfig:
    # yaml wins over env for keys set in both
    return ServerConfig(**{**env_vars, **yaml_vars})
