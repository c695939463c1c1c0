"""Injectable integrations with the outside world (files, processes, time, IPC)."""
