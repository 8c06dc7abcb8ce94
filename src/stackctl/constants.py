"""Shared constants for stackctl."""

# Swarm label set by `docker stack deploy` on every service it creates
LABEL_NAMESPACE = "com.docker.stack.namespace"

# Docker client
DEFAULT_DOCKER_TIMEOUT = 60

# Logging
DEFAULT_LOG_LEVEL = "WARNING"

# `stack ls` table
LIST_HEADERS = ("NAME", "SERVICES")
