APP_NAME = "dirspec"
ENV_PREFIX = "DIRSPEC_"
