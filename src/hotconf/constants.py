APP_NAME = "hotconf"
ENV_PREFIX = "HOTCONF_"
