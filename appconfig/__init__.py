from appconfig.config import get_config_registry, get_system_config
from appconfig.logger import init_logger

# Initialize package settings and logger
config = get_system_config()
logger = init_logger(config)
