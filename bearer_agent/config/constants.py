"""Collector endpoints and fixed identifiers sent with every report."""

CONFIG_URL = "https://config.bearer.sh/config"
LOGS_URL = "https://agent.bearer.sh/logs"

RUNTIME_TYPE = "python"
AGENT_TYPE = "bearer-python"

# The collector only understands "ALL" for now
AGENT_LOG_LEVEL = "ALL"

REQUEST_END = "REQUEST_END"

JSON_CONTENT_TYPE = "application/json"
