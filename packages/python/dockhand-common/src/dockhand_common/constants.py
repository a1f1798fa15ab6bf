"""Shared constants for the dockhand ecosystem."""

# Container runtimes, in detection order
KNOWN_RUNTIMES = ("docker", "podman")

# Runtime host facts
RUNTIME_GROUP = "docker"
DAEMON_PROCESS = "dockerd"
DAEMON_PROCESSES = {"docker": "dockerd", "podman": "podman"}

# Runtime CLI formats
LIST_FORMAT = "{{.Names}},{{.Status}}"
LIST_DELIMITER = ","
LABELS_FORMAT = "{{json .Config.Labels}}"

# Compose labels
COMPOSE_LABEL_PREFIX = "com.docker.compose"

# Interactive sessions
LOG_TAIL_LINES = 2000
TERMINALS = ("kgx", "ptyxis", "gnome-terminal", "x-terminal-emulator")
