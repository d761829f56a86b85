"""I/O adapters: HTTP and the platform clipboard helpers."""
